import os

TRUE_TOKENS = {"1", "true", "yes", "on"}
FALSE_TOKENS = {"0", "false", "no", "off"}


def _env_flag(name: str, default: str) -> bool:
    raw = os.getenv(name, default).strip().lower()
    if raw in TRUE_TOKENS:
        return True
    if raw in FALSE_TOKENS:
        return False
    raise ValueError(f"{name} must be one of {sorted(TRUE_TOKENS | FALSE_TOKENS)}, got {raw!r}.")


class Config:
    """
    Environment-driven settings:
    - no hard-coded secrets, everything comes from environment variables
    - DEBUG follows FLASK_DEBUG (0/1)
    - build options: static export, unoptimized images, strict templates
    """

    SECRET_KEY = os.getenv("SECRET_KEY", "dev-not-safe")
    DEBUG = os.getenv("FLASK_DEBUG", "0") == "1"

    BUILD_OUTPUT = os.getenv("BUILD_OUTPUT", "export")
    IMAGES_UNOPTIMIZED = _env_flag("IMAGES_UNOPTIMIZED", "1")
    STRICT_MODE = _env_flag("STRICT_MODE", "1")
    EXPORT_DIR = os.getenv("EXPORT_DIR", "out")

    PRODUCT_URL = os.getenv("PRODUCT_URL", "/product")
    IDENTITY_PUBLISHABLE_KEY = os.getenv("IDENTITY_PUBLISHABLE_KEY", "")
    IDENTITY_SCRIPT_URL = os.getenv("IDENTITY_SCRIPT_URL", "")


class TestingConfig(Config):
    TESTING = True
    SECRET_KEY = "test-secret"
    BUILD_OUTPUT = "export"
    IMAGES_UNOPTIMIZED = True
    STRICT_MODE = True
    IDENTITY_PUBLISHABLE_KEY = "pk_test_landing"
    IDENTITY_SCRIPT_URL = "https://identity.example.test/widget.js"
