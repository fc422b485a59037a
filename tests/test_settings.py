import pytest
from pydantic import ValidationError

from leadcapture.config.settings import Settings


def test_from_env(monkeypatch):
    monkeypatch.setenv("SUPABASE_URL", "https://proj.supabase.co")
    monkeypatch.setenv("SUPABASE_SERVICE_ROLE_KEY", "secret")
    monkeypatch.setenv("LEADS_TABLE", "landing_leads")
    monkeypatch.setenv("LOG_LEVEL", "warning")

    settings = Settings.from_env()

    assert settings.store_configured
    assert settings.leads_table == "landing_leads"
    assert settings.log_level == "WARNING"


def test_defaults_without_credentials(monkeypatch):
    monkeypatch.setenv("SUPABASE_URL", "")
    monkeypatch.setenv("SUPABASE_SERVICE_ROLE_KEY", "")
    monkeypatch.delenv("LEADS_TABLE", raising=False)

    settings = Settings.from_env()

    assert not settings.store_configured
    assert settings.leads_table == "leads"
    assert settings.honeypot_field == "company"


def test_settings_are_frozen():
    settings = Settings()
    with pytest.raises(ValidationError):
        settings.leads_table = "other"
