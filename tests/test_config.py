from api.config import Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("APP_NAME", raising=False)
    settings = Settings(_env_file=None)
    assert settings.app_name == "handle_signup"
    assert settings.debug is False
    assert settings.log_level == "INFO"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("log_level", "DEBUG")
    monkeypatch.setenv("API_ENV", "production")
    monkeypatch.setenv("SUPABASE_URL", "https://example.supabase.co")
    settings = Settings(_env_file=None)
    assert settings.log_level == "DEBUG"
    assert settings.api_env == "production"
    # Unknown variables are ignored
    assert not hasattr(settings, "supabase_url")
