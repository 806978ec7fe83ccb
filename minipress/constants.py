"""Application constants - centralized configuration values."""

# =============================================================================
# Posts
# =============================================================================
EXCERPT_WORD_COUNT = 55
SLUG_MAX_LENGTH = 255

# =============================================================================
# API Timeouts (in seconds)
# =============================================================================
HTTPX_TIMEOUT = 10.0

# =============================================================================
# Session & Security
# =============================================================================
SESSION_TIMEOUT_DAYS = 1
SESSION_COOKIE_NAME = "auth"
IDENTITY_SESSION_KEY = "identity"
OAUTH_STATE_SESSION_KEY = "oauth_state"
OAUTH_VERIFIER_SESSION_KEY = "oauth_code_verifier"
OAUTH_STATE_BYTES = 32
PKCE_VERIFIER_LENGTH = 64

# =============================================================================
# Database pool
# =============================================================================
DB_POOL_SIZE = 10
DB_MAX_OVERFLOW = 20
DB_POOL_TIMEOUT = 30
DB_POOL_RECYCLE = 1800

# =============================================================================
# Static files
# =============================================================================
FAVICON_FILENAME_PATTERN = (
    r"android-chrome-\d+x\d+\.png"
    r"|apple-touch-icon\.png"
    r"|browserconfig\.xml"
    r"|favicon\.ico"
    r"|favicon-\d+x\d+\.png"
    r"|mstile-\d+x\d+\.png"
    r"|safari-pinned-tab\.svg"
    r"|site\.webmanifest"
)
