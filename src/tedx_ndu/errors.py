"""
Error taxonomy for the site API.

Services raise these; the handlers installed by ``create_app`` turn them into
the JSON envelope ``{message, timestamp, path}``.

Usage:
    from tedx_ndu.errors import NotFoundError

    if not deleted:
        raise NotFoundError("Qeydiyyat tapılmadı")
"""


class SiteError(Exception):
    """Base exception for all errors surfaced to API clients"""

    status_code = 500
    default_message = "Internal Server Error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(SiteError):
    """Missing or malformed input"""

    status_code = 400
    default_message = "Invalid request"


class ConflictError(SiteError):
    """Duplicate email or username"""

    status_code = 400
    default_message = "Resource already exists"


class UnauthorizedError(SiteError):
    """No session or bad credentials"""

    status_code = 401
    default_message = "Unauthorized"


class NotFoundError(SiteError):
    """Delete or update target does not exist"""

    status_code = 404
    default_message = "Not found"


class InternalError(SiteError):
    """Unexpected database or runtime failure"""

    status_code = 500
