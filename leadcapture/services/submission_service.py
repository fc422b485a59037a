"""
Submission Service
Turns a decoded form body into a validated Submission.

Each logical field is read through an ordered alias list (several landing
page variants post the same data under different field names); the first
non-empty value wins.
"""
import re
from typing import Dict, Mapping

from leadcapture.config.settings import Settings
from leadcapture.errors import ClientRequestError
from leadcapture.models.submission import Submission
from leadcapture.utils.forms import first_value

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def is_valid_email(email: str) -> bool:
    return bool(EMAIL_RE.match(email or ""))


def resolve_field(fields: Mapping[str, str], settings: Settings, logical_name: str) -> str:
    aliases = settings.field_aliases.get(logical_name, (logical_name,))
    return first_value(fields, aliases)


def is_honeypot(fields: Mapping[str, str], settings: Settings) -> bool:
    return bool((fields.get(settings.honeypot_field) or "").strip())


def has_consent(value: str, settings: Settings) -> bool:
    return (value or "").strip().lower() in settings.consent_tokens


def infer_form_type(fields: Mapping[str, str], settings: Settings) -> str:
    """Explicit type field, else purchase (quantity given), else download marker, else unknown"""
    explicit = resolve_field(fields, settings, "type")
    if explicit:
        return explicit
    if resolve_field(fields, settings, "quantity"):
        return settings.form_type_purchase
    if first_value(fields, settings.download_markers):
        return settings.form_type_download
    return settings.form_type_unknown


def build_submission(fields: Dict[str, str], settings: Settings) -> Submission:
    """Validate the decoded body; raises ClientRequestError on the first failed check"""
    name = resolve_field(fields, settings, "name")
    email = resolve_field(fields, settings, "email")

    if not name or not email:
        raise ClientRequestError("name and email are required")
    if not is_valid_email(email):
        raise ClientRequestError("invalid email")
    if not has_consent(resolve_field(fields, settings, "consent"), settings):
        raise ClientRequestError("consent required")

    return Submission(
        name=name,
        email=email,
        phone=resolve_field(fields, settings, "phone") or None,
        quantity=resolve_field(fields, settings, "quantity") or None,
        contribution=resolve_field(fields, settings, "contribution") or None,
        consent=True,
        form_type=infer_form_type(fields, settings),
        fields=dict(fields),
    )
