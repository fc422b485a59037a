import pytest

from leadcapture.config.settings import Settings
from leadcapture.errors import ClientRequestError
from leadcapture.services.submission_service import (
    build_submission,
    has_consent,
    infer_form_type,
    is_honeypot,
    is_valid_email,
    resolve_field,
)

SETTINGS = Settings()


def test_primary_key_wins_over_alias():
    fields = {"name": "Primary", "nome": "Alias"}
    assert resolve_field(fields, SETTINGS, "name") == "Primary"


def test_blank_primary_falls_through_to_alias():
    fields = {"email": "  ", "download_email": " dl@example.com "}
    assert resolve_field(fields, SETTINGS, "email") == "dl@example.com"


def test_unknown_logical_field_uses_its_own_name():
    assert resolve_field({"city": " Recife "}, SETTINGS, "city") == "Recife"


def test_download_variant_is_accepted():
    submission = build_submission(
        {"download_name": "Ana", "download_email": "ana@example.com", "download_consent": "true"},
        SETTINGS,
    )
    assert submission.name == "Ana"
    assert submission.email == "ana@example.com"
    assert submission.form_type == "download"


def test_contribution_alias_and_empty_optionals():
    submission = build_submission(
        {"name": "Jo", "email": "jo@example.com", "privacy": "yes", "contrib": " 50 ", "phone": ""},
        SETTINGS,
    )
    assert submission.contribution == "50"
    assert submission.phone is None
    assert submission.quantity is None
    assert submission.form_type == "unknown"


def test_explicit_type_overrides_inference():
    fields = {"type": "newsletter", "quantity": "2"}
    assert infer_form_type(fields, SETTINGS) == "newsletter"


def test_quantity_infers_purchase():
    assert infer_form_type({"qty": "1"}, SETTINGS) == "purchase"


def test_form_type_labels_are_configurable():
    settings = Settings(form_type_purchase="buy", form_type_unknown="other")
    assert infer_form_type({"quantity": "1"}, settings) == "buy"
    assert infer_form_type({}, settings) == "other"


@pytest.mark.parametrize("value,expected", [
    ("on", True), (" YES ", True), ("True", True), ("1", True),
    ("no", False), ("", False), ("maybe", False), ("0", False),
])
def test_has_consent(value, expected):
    assert has_consent(value, SETTINGS) is expected


@pytest.mark.parametrize("email,expected", [
    ("jane@example.com", True),
    ("j@e.co", True),
    ("no-at-sign", False),
    ("a@b", False),
    ("a @b.com", False),
    ("", False),
])
def test_is_valid_email(email, expected):
    assert is_valid_email(email) is expected


def test_honeypot_detection():
    assert is_honeypot({"company": "ACME"}, SETTINGS)
    assert not is_honeypot({"company": "   "}, SETTINGS)
    assert not is_honeypot({}, SETTINGS)


@pytest.mark.parametrize("fields,message", [
    ({"email": "a@b.com", "consent": "on"}, "name and email are required"),
    ({"name": "A", "email": "a@b", "consent": "on"}, "invalid email"),
    ({"name": "A", "email": "a@b.com", "consent": "nope"}, "consent required"),
])
def test_build_submission_rejections(fields, message):
    with pytest.raises(ClientRequestError) as exc_info:
        build_submission(fields, SETTINGS)
    assert exc_info.value.message == message
    assert exc_info.value.status_code == 400


def test_record_carries_raw_fields():
    fields = {"name": "Zé", "email": "ze@example.com", "consent": "on", "extra": "x"}
    record = build_submission(fields, SETTINGS).to_record(user_agent="ua", ip="10.0.0.1")
    row = record.to_row()

    assert row["raw_data"] == '{"name": "Zé", "email": "ze@example.com", "consent": "on", "extra": "x"}'
    assert row["user_agent"] == "ua"
    assert row["ip"] == "10.0.0.1"
    assert row["consent"] is True


def test_consent_is_trimmed_before_comparison():
    submission = build_submission({"name": "Jo", "email": "jo@example.com", "consent": " on "}, SETTINGS)
    assert submission.consent is True
