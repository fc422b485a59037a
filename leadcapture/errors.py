"""
Submission errors

Every failure inside the submission handler is one of these; the handler
turns them into an HTML error page with the matching status code.
"""
from typing import Optional


class SubmissionError(Exception):
    """Base class for handler failures"""

    status_code = 500
    default_message = "unexpected error, try again"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ClientRequestError(SubmissionError):
    """Bad content type, missing or invalid field, missing consent"""

    status_code = 400
    default_message = "invalid request"


class MethodNotAllowedError(ClientRequestError):
    status_code = 405
    default_message = "method not allowed"


class ServerConfigError(SubmissionError):
    """Store credentials are missing"""

    default_message = "server configuration incomplete"


class StoreWriteError(SubmissionError):
    """The store rejected the insert. ``detail`` is for server logs only."""

    default_message = "save failed, try again"

    def __init__(self, detail: str = "", message: Optional[str] = None):
        self.detail = detail
        super().__init__(message)
