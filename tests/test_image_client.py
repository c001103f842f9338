from unittest.mock import MagicMock, patch

import requests

from leftovers.const import REPLICATE_API_URL
from leftovers.generators.image_client import ReplicateImageClient


def _client(payload=None, error=None, **kwargs):
    client = ReplicateImageClient(api_token="token", **kwargs)
    client.session = MagicMock()
    if error is not None:
        client.session.post.side_effect = error
    else:
        client.session.post.return_value.json.return_value = payload
    return client


def test_returns_first_image_url():
    client = _client({"status": "succeeded",
                      "output": ["https://images.example/1.png", "https://images.example/2.png"]})

    assert client.generate_image("Veggie Fried Rice") == "https://images.example/1.png"
    payload = client.session.post.call_args.kwargs["json"]
    assert "Veggie Fried Rice" in payload["input"]["prompt"]
    assert payload["input"]["width"] == 512


def test_versioned_model_uses_predictions_endpoint():
    client = _client({"status": "succeeded", "output": ["https://images.example/1.png"]},
                     model="stability-ai/sdxl:abc123")

    client.generate_image("Soup")

    url = client.session.post.call_args.args[0]
    payload = client.session.post.call_args.kwargs["json"]
    assert url == f"{REPLICATE_API_URL}/predictions"
    assert payload["version"] == "abc123"


def test_default_model_is_pinned_to_a_version():
    client = _client({"status": "succeeded", "output": ["https://images.example/1.png"]})

    client.generate_image("Soup")

    assert client.session.post.call_args.args[0] == f"{REPLICATE_API_URL}/predictions"
    assert client.session.post.call_args.kwargs["json"]["version"]


def test_official_model_uses_model_endpoint():
    client = _client({"status": "succeeded", "output": "https://images.example/1.png"},
                     model="black-forest-labs/flux-schnell")

    assert client.generate_image("Soup") == "https://images.example/1.png"
    url = client.session.post.call_args.args[0]
    payload = client.session.post.call_args.kwargs["json"]
    assert url == f"{REPLICATE_API_URL}/models/black-forest-labs/flux-schnell/predictions"
    assert "version" not in payload


def test_polls_until_prediction_finishes():
    client = _client({"id": "p1", "status": "processing",
                      "urls": {"get": "https://api.replicate.com/v1/predictions/p1"}},
                     poll_interval=0)
    client.session.get.return_value.json.side_effect = [
        {"id": "p1", "status": "processing",
         "urls": {"get": "https://api.replicate.com/v1/predictions/p1"}},
        {"id": "p1", "status": "succeeded", "output": ["https://images.example/p1.png"]},
    ]

    with patch("leftovers.generators.image_client.time.sleep"):
        assert client.generate_image("Soup") == "https://images.example/p1.png"
    assert client.session.get.call_count == 2


def test_polling_gives_up_after_max_polls():
    running = {"id": "p1", "status": "starting",
               "urls": {"get": "https://api.replicate.com/v1/predictions/p1"}}
    client = _client(running, poll_interval=0, max_polls=3)
    client.session.get.return_value.json.return_value = running

    with patch("leftovers.generators.image_client.time.sleep"):
        assert client.generate_image("Soup") is None
    assert client.session.get.call_count == 3


def test_failed_prediction_returns_none():
    client = _client({"status": "failed", "error": "NSFW content detected"})

    assert client.generate_image("Soup") is None


def test_request_failure_returns_none():
    client = _client(error=requests.ConnectionError("down"))

    assert client.generate_image("Veggie Fried Rice") is None


def test_http_error_returns_none():
    client = _client({"output": None})
    client.session.post.return_value.raise_for_status.side_effect = requests.HTTPError("422")

    assert client.generate_image("Veggie Fried Rice") is None


def test_missing_output_returns_none():
    assert _client({"status": "succeeded"}).generate_image("Soup") is None


def test_missing_token_skips_request():
    client = ReplicateImageClient(api_token="")
    client.session = MagicMock()

    assert client.generate_image("Soup") is None
    client.session.post.assert_not_called()
