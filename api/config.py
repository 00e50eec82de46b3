"""
Application configuration settings
"""
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # App metadata
    app_name: str = "handle_signup"
    app_version: str = "1.0.0"
    debug: bool = False

    # Passed straight to logging.basicConfig, e.g. LOG_LEVEL=DEBUG
    log_level: str = "INFO"

    # Environment
    api_env: str = "development"

    class Config:
        # Load from .env file for local development
        # In production, environment variables are set directly
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"  # Ignore extra fields in .env


# Initialize settings - will load from environment variables
try:
    settings = Settings()
except Exception as e:
    import sys
    print(f"❌ ERROR loading settings: {e}", file=sys.stderr, flush=True)
    import traceback
    traceback.print_exc(file=sys.stderr)
    # Re-raise to fail fast
    raise
