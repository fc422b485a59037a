"""
Form body helpers
"""
from typing import Dict, Mapping, Optional
from urllib.parse import parse_qsl

FORM_URLENCODED = "application/x-www-form-urlencoded"
MULTIPART_FORM = "multipart/form-data"


def media_type(content_type: Optional[str]) -> str:
    """Lower-cased media type without parameters ("text/plain; charset=x" -> "text/plain")"""
    if not content_type:
        return ""
    return content_type.split(";", 1)[0].strip().lower()


def get_header(headers: Mapping[str, str], name: str, default: str = "") -> str:
    """Case-insensitive header lookup that works for plain dicts too"""
    value = headers.get(name)
    if value is None:
        wanted = name.lower()
        for key, candidate in headers.items():
            if key.lower() == wanted:
                value = candidate
                break
    return value if value is not None else default


def parse_form(body: Optional[bytes]) -> Dict[str, str]:
    """Decode an application/x-www-form-urlencoded body.

    Blank values are kept, ``+`` becomes a space and repeated keys keep the
    last value. An empty body gives an empty dict.
    """
    if not body:
        return {}
    text = body.decode("utf-8", errors="replace") if isinstance(body, bytes) else body
    return dict(parse_qsl(text, keep_blank_values=True))


def first_value(fields: Mapping[str, str], keys) -> str:
    """Trimmed value of the first key whose value is non-empty after trimming"""
    for key in keys:
        value = (fields.get(key) or "").strip()
        if value:
            return value
    return ""
