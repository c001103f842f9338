"""
Recipe image generation using the Replicate HTTP API.

Images are optional: every failure is logged and reported as None so the
parsed recipe can always be shown without one.
"""
from __future__ import annotations

import logging
import time
from typing import Any

import requests

from ..const import (
    DEFAULT_IMAGE_MODEL,
    DEFAULT_IMAGE_SIZE,
    DEFAULT_MAX_POLLS,
    DEFAULT_POLL_INTERVAL,
    DEFAULT_TIMEOUT,
    REPLICATE_API_URL,
)

_LOGGER = logging.getLogger(__name__)

IMAGE_PROMPT = ("A beautiful, appetizing photo of {subject}, food photography, "
                "high quality, vibrant colors, studio lighting")

_TERMINAL_STATUSES = ("succeeded", "failed", "canceled")


class ReplicateImageClient:
    """Generates an illustrative image URL for a recipe.

    ``model`` is either ``owner/name:version`` (any public model, sent to
    ``/predictions`` with that version) or ``owner/name`` (official models
    only, sent to ``/models/owner/name/predictions``).
    """

    def __init__(self, api_token: str, model: str = DEFAULT_IMAGE_MODEL,
                 timeout: int = DEFAULT_TIMEOUT,
                 poll_interval: float = DEFAULT_POLL_INTERVAL,
                 max_polls: int = DEFAULT_MAX_POLLS) -> None:
        self.api_token = api_token
        self.model = model
        self.timeout = timeout
        self.poll_interval = poll_interval
        self.max_polls = max_polls
        self.session = requests.Session()
        self.session.headers.update({
            "Authorization": f"Bearer {api_token}",
            "Content-Type": "application/json",
            # Hold the request open until the prediction finishes, when possible
            "Prefer": "wait",
        })

    def _prediction_request(self, model_input: dict[str, Any]) -> tuple[str, dict[str, Any]]:
        """URL and payload that start a prediction for the configured model."""
        name, _, version = self.model.partition(":")
        if version:
            return f"{REPLICATE_API_URL}/predictions", {"version": version, "input": model_input}
        return f"{REPLICATE_API_URL}/models/{name}/predictions", {"input": model_input}

    def _wait_for(self, prediction: dict[str, Any]) -> dict[str, Any]:
        """Poll a prediction that was still running when the request returned."""
        polls = 0
        while prediction.get("status") not in _TERMINAL_STATUSES and polls < self.max_polls:
            get_url = (prediction.get("urls") or {}).get("get")
            if not get_url:
                break
            time.sleep(self.poll_interval)
            polls += 1
            response = self.session.get(get_url, timeout=self.timeout)
            response.raise_for_status()
            prediction = response.json()
            _LOGGER.debug("Prediction %s is %s", prediction.get("id"), prediction.get("status"))
        return prediction

    def generate_image(self, subject: str) -> str | None:
        """Generate an image for a recipe title.

        Args:
            subject: Short description, usually the recipe title

        Returns:
            The URL of the first generated image, or None on any failure
        """
        if not self.api_token or not subject or not subject.strip():
            _LOGGER.debug("Skipping image generation (token or subject missing)")
            return None

        url, payload = self._prediction_request({
            "prompt": IMAGE_PROMPT.format(subject=subject.strip()),
            "width": DEFAULT_IMAGE_SIZE,
            "height": DEFAULT_IMAGE_SIZE,
        })

        try:
            response = self.session.post(url, json=payload, timeout=self.timeout)
            response.raise_for_status()
            prediction = self._wait_for(response.json())
        except (requests.RequestException, ValueError) as e:
            _LOGGER.error("Replicate image generation error: %s", str(e))
            return None

        if prediction.get("status") == "failed":
            _LOGGER.error("Replicate prediction failed: %s", prediction.get("error"))
            return None

        output = prediction.get("output")
        if isinstance(output, list) and output:
            _LOGGER.info("Generated image for '%s'", subject)
            return output[0]
        if isinstance(output, str) and output:
            return output

        _LOGGER.warning("Replicate returned no image output for '%s'", subject)
        return None
