"""
Shared constants for the signature builder.

Contains the default configuration values used to build a BuildConfig.
"""

# Default user agent string for icon downloads
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/120.0.0.0 Safari/537.36"
)

# Default request timeout in seconds
DEFAULT_TIMEOUT = 30

# Input signature and output locations, relative to the working directory
DEFAULT_INPUT_FILE = "src/signature.html"
DEFAULT_OUTPUT_DIR = "output"
DEFAULT_OUTPUT_FILENAME = "signature.html"
DEFAULT_ASSETS_DIR = "assets/icons"

# Rasterized icons are square
DEFAULT_ICON_SIZE = 24

# Where the icons are currently hosted
DEFAULT_ICON_HOST = "fonts.gstatic.com"
DEFAULT_ICON_FAMILY = "materialiconsoutlined"

# Where the rasterized icons get published
DEFAULT_RAW_HOST = "raw.githubusercontent.com"
DEFAULT_GITHUB_USER = "Dylan-Howard"
DEFAULT_GITHUB_REPO = "email_signature"
DEFAULT_GITHUB_BRANCH = "main"
DEFAULT_REMOTE_ASSETS_PATH = "assets/icons"
