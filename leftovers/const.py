"""Constants for the leftovers recipe parser."""

# Environment variables (unified)
ENV_GEMINI_API_KEY = "GEMINI_API_KEY"
ENV_REPLICATE_API_TOKEN = "REPLICATE_API_TOKEN"

# Default values
DEFAULT_MODEL = "gemini-2.0-flash"
DEFAULT_TIMEOUT = 30
# Community models are addressed by "owner/name:version"
DEFAULT_IMAGE_MODEL = (
    "stability-ai/sdxl:"
    "39ed52f2a78e934b3ba6e2a89f5b1c712de7dfea535525255b1aa35c5565e08b"
)
DEFAULT_IMAGE_SIZE = 512
DEFAULT_POLL_INTERVAL = 2
DEFAULT_MAX_POLLS = 30

# Available models
AVAILABLE_MODELS = [
    "gemini-2.0-flash",
    "gemini-2.5-flash",
    "gemini-2.5-pro",
]

REPLICATE_API_URL = "https://api.replicate.com/v1"

# Placeholders used by renderers
UNTITLED_RECIPE = "Untitled Recipe"
EMPTY_INGREDIENTS_MESSAGE = "No ingredients listed."
UNKNOWN_VALUE = "—"
SERVING_SIZE_NOT_SPECIFIED = "Serving size not specified"

# Header fragment left behind by "Total Time Required:" style prompts
TOTAL_TIME_ARTIFACT = "required:"

NUTRITION_WARNING = (
    "Nutrition information is incomplete: Calories or Protein is missing."
)
RATE_LIMIT_MESSAGE = (
    "Currently I can't process your request. Please try again in a bit."
)

# Display labels that are always present in the nutrition display
CORE_NUTRITION_LABELS = ["Calories", "Protein", "Carbs", "Fat"]

# Common culinary fractions used when rendering scaled quantities
COMMON_FRACTIONS = [
    (1 / 4, "1/4"),
    (1 / 3, "1/3"),
    (1 / 2, "1/2"),
    (2 / 3, "2/3"),
    (3 / 4, "3/4"),
]
FRACTION_TOLERANCE = 0.05

# Approximate calories per unit for common staples.
# Order matters: the first entry contained in an ingredient wins.
CALORIE_TABLE = {
    "olive oil": 120,  # per tablespoon
    "vegetable oil": 120,  # per tablespoon
    "butter": 100,  # per tablespoon
    "goat cheese": 75,  # per 30 g
    "cheddar": 115,  # per 30 g slice
    "onion": 45,  # per medium onion
    "garlic": 4,  # per clove
    "capsicum": 30,  # per medium pepper
    "bell pepper": 30,  # per medium pepper
    "tomato": 22,  # per medium tomato
    "potato": 110,  # per medium potato
    "carrot": 25,  # per medium carrot
    "egg": 70,  # per large egg
    "chicken breast": 165,  # per 100 g breast
    "rice": 205,  # per cup, cooked
    "pasta": 220,  # per cup, cooked
    "bread": 80,  # per slice
    "milk": 120,  # per cup
    "sugar": 48,  # per tablespoon
    "honey": 64,  # per tablespoon
    "flour": 455,  # per cup
}
GOAT_CHEESE_GRAMS_PER_UNIT = 30
