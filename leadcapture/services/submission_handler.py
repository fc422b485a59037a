"""
Submission Handler
One call per HTTP request: gate the method and content type, decode the
form, drop honeypot hits, validate, insert one lead and render the HTML page
that tells the parent window how it went. Every failure ends as an HTML
error page; nothing escapes to the framework.
"""
import json
import logging
from typing import Mapping, Optional

from fastapi.responses import HTMLResponse

from leadcapture.config.database import LeadStore
from leadcapture.config.settings import Settings
from leadcapture.errors import (
    ClientRequestError,
    MethodNotAllowedError,
    ServerConfigError,
    StoreWriteError,
    SubmissionError,
)
from leadcapture.services.submission_service import build_submission, is_honeypot
from leadcapture.utils.forms import (
    FORM_URLENCODED,
    MULTIPART_FORM,
    get_header,
    media_type,
    parse_form,
)
from leadcapture.utils.responses import html_error, html_ok, preflight

logger = logging.getLogger(__name__)


class SubmissionHandler:
    """Lead form handler bound to one configuration and one store"""

    def __init__(self, settings: Settings, store: Optional[LeadStore]):
        self.settings = settings
        self.store = store

    async def handle(self, method: str, headers: Mapping[str, str], body: Optional[bytes]) -> HTMLResponse:
        method = (method or "").upper()
        if method == "OPTIONS":
            return preflight()

        try:
            return await self._process(method, headers, body)
        except StoreWriteError as exc:
            logger.error("❌ Supabase insert error: %s", exc.detail)
            return html_error(exc.message, exc.status_code)
        except ServerConfigError as exc:
            logger.error("❌ Supabase environment variables are not configured")
            return html_error(exc.message, exc.status_code)
        except SubmissionError as exc:
            logger.warning("⚠️ Submission rejected (%d): %s", exc.status_code, exc.message)
            return html_error(exc.message, exc.status_code)
        except Exception:
            logger.exception("❌ Unexpected error while handling submission")
            return html_error(SubmissionError.default_message, 500)

    async def _process(self, method: str, headers: Mapping[str, str], body: Optional[bytes]) -> HTMLResponse:
        if method != "POST":
            raise MethodNotAllowedError()

        content_type = get_header(headers, "content-type")
        kind = media_type(content_type)
        logger.debug("Headers received: %s", json.dumps(dict(headers), indent=2))
        logger.debug("Content-Type received: %s", content_type)
        if kind == MULTIPART_FORM:
            raise ClientRequestError("multipart submissions are not supported")
        if kind != FORM_URLENCODED:
            raise ClientRequestError(f"invalid content-type: {content_type}")

        fields = parse_form(body)
        logger.debug("Parsed fields: %s", fields)

        if is_honeypot(fields, self.settings):
            logger.info("🍯 Honeypot field filled, discarding submission")
            return html_ok()

        submission = build_submission(fields, self.settings)

        if not self.settings.store_configured or self.store is None:
            raise ServerConfigError()

        record = submission.to_record(
            user_agent=get_header(headers, "user-agent"),
            ip=self._client_ip(headers),
        )
        row = record.to_row()
        logger.debug("Inserting into '%s': %s", self.settings.leads_table, row)
        await self.store.insert(self.settings.leads_table, row)

        logger.info("✅ Lead saved (form_type=%s)", submission.form_type)
        return html_ok()

    def _client_ip(self, headers: Mapping[str, str]) -> str:
        for name in self.settings.client_ip_headers:
            value = get_header(headers, name).strip()
            if value:
                return value
        return ""
