"""
Application settings and configuration
"""
import os
from typing import Dict, Optional, Tuple
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict

# Only origin allowed to receive postMessage results from the response page
TARGET_ORIGIN = "https://annafrota.github.io"

APP_NAME = "Lead Capture"
VERSION = "1.0.0"

DEFAULT_FIELD_ALIASES: Dict[str, Tuple[str, ...]] = {
    "name": ("name", "nome", "full_name", "download_name", "buy_name"),
    "email": ("email", "e-mail", "download_email", "buy_email"),
    "phone": ("phone", "telefone", "whatsapp"),
    "quantity": ("quantity", "qty", "quantidade"),
    "contribution": ("contrib", "contribution"),
    "consent": ("consent", "privacy", "lgpd", "download_consent", "buy_consent"),
    "type": ("type", "form_type"),
}


class Settings(BaseModel):
    """Read-only configuration shared by every request."""

    model_config = ConfigDict(frozen=True)

    # Supabase
    supabase_url: Optional[str] = None
    supabase_service_role_key: Optional[str] = None
    leads_table: str = "leads"

    # Logging
    log_level: str = "INFO"
    debug: bool = False

    # Form handling
    honeypot_field: str = "company"
    consent_tokens: Tuple[str, ...] = ("on", "true", "1", "yes")
    field_aliases: Dict[str, Tuple[str, ...]] = DEFAULT_FIELD_ALIASES
    download_markers: Tuple[str, ...] = ("download", "download_name", "download_email", "download_consent")
    client_ip_headers: Tuple[str, ...] = ("x-nf-client-connection-ip", "x-forwarded-for", "x-real-ip")

    # Form type labels
    form_type_purchase: str = "purchase"
    form_type_download: str = "download"
    form_type_unknown: str = "unknown"

    @property
    def store_configured(self) -> bool:
        """True when both Supabase credentials are present"""
        return bool(self.supabase_url and self.supabase_service_role_key)

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from the process environment (and .env, if any)"""
        load_dotenv()
        return cls(
            supabase_url=os.getenv("SUPABASE_URL") or None,
            supabase_service_role_key=os.getenv("SUPABASE_SERVICE_ROLE_KEY") or None,
            leads_table=os.getenv("LEADS_TABLE") or "leads",
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            debug=os.getenv("DEBUG", "False") == "True",
        )
