"""Default configuration, constants, and limits for PosterLevels."""

# --- Level catalog ---
LEVEL_CATALOG = (5, 10, 15, 20, 25)
DEFAULT_LEVEL_INDEX = 1  # 10 levels
MIN_LEVEL_COUNT = 2  # x = i / (N - 1) is undefined below this

# --- Distribution parameter (exponent = 2 ** value) ---
DISTRIBUTION_MIN = -3.0
DISTRIBUTION_MAX = 3.0
DISTRIBUTION_DECIMALS = 1  # slider step 0.1
DEFAULT_DISTRIBUTION = 0.0

# --- Luminance (BT.601), scaled to integers so index math is exact ---
LUMA_WEIGHT_R = 299
LUMA_WEIGHT_G = 587
LUMA_WEIGHT_B = 114
LUMA_SCALE = 1000
MAX_CHANNEL_VALUE = 255

# --- Security limits ---
MAX_IMAGE_DIMENSION = 16384  # 16K pixels per side
MAX_IMAGE_PIXELS = 100_000_000  # 100 megapixels

# --- Allowed file extensions ---
IMAGE_EXTENSIONS = frozenset({
    ".png", ".jpg", ".jpeg", ".tiff", ".tif", ".bmp", ".gif", ".webp",
})

# --- Preview strip ---
DEFAULT_PREVIEW_WIDTH = 500
DEFAULT_PREVIEW_HEIGHT = 40
