"""
HTML responses that report the outcome to the parent page via postMessage
"""
import json
from typing import Dict

from fastapi.responses import HTMLResponse

from leadcapture.config.settings import TARGET_ORIGIN

SIGNAL_SUBMITTED = "form_submitted"
SIGNAL_ERROR = "form_error"

_HTML_ESCAPES = str.maketrans({
    "<": "&lt;",
    ">": "&gt;",
    "&": "&amp;",
    '"': "&quot;",
    "'": "&#39;",
    "`": "&#96;",
})


def escape_html(text) -> str:
    return str(text).translate(_HTML_ESCAPES)


def cors_headers() -> Dict[str, str]:
    return {
        "Access-Control-Allow-Origin": TARGET_ORIGIN,
        "Access-Control-Allow-Headers": "Content-Type",
        "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    }


def render_page(message: str, signal: str) -> str:
    """Minimal page: the escaped message plus a script notifying window.top"""
    return "".join([
        '<!doctype html><meta charset="utf-8">',
        f"<p>{escape_html(message)}</p>",
        "<script>",
        "  (function(){ try { window.top.postMessage("
        f"{json.dumps(signal)}, {json.dumps(TARGET_ORIGIN)}); }} "
        "catch(e) { console.error('PostMessage error:', e); } })();",
        "</script>",
    ])


def html_ok(message: str = "OK") -> HTMLResponse:
    return HTMLResponse(render_page(message, SIGNAL_SUBMITTED), status_code=200, headers=cors_headers())


def html_error(message: str = "Error", status_code: int = 400) -> HTMLResponse:
    return HTMLResponse(render_page(message, SIGNAL_ERROR), status_code=status_code, headers=cors_headers())


def preflight() -> HTMLResponse:
    return HTMLResponse("", status_code=200, headers=cors_headers())
