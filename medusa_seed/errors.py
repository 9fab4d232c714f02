"""Exception types raised while seeding.

Admin API failures are surfaced as :class:`AdminApiError`, carrying the same
stable ``code`` strings for each HTTP status that the backend's own error
envelope uses.  The runner wraps whatever a step raises in
:class:`SeedStepError` so callers know which step halted the run.
"""

import httpx
from pydantic import ValidationError

from medusa_seed.schemas.common import AdminErrorBody

# Map HTTP status codes to stable error code strings.
_STATUS_TO_CODE: dict[int, str] = {
    400: "BAD_REQUEST",
    401: "UNAUTHORIZED",
    403: "FORBIDDEN",
    404: "NOT_FOUND",
    405: "METHOD_NOT_ALLOWED",
    409: "CONFLICT",
    422: "UNPROCESSABLE_ENTITY",
    429: "RATE_LIMITED",
    500: "INTERNAL_ERROR",
    503: "SERVICE_UNAVAILABLE",
}


def code_for_status(status_code: int) -> str:
    """Return the error code string for *status_code*, falling back to ``HTTP_{code}``."""
    return _STATUS_TO_CODE.get(status_code, f"HTTP_{status_code}")


class SeedError(Exception):
    """Base class for every error raised by the seeder."""


class SeedConfigError(SeedError):
    """No usable admin credentials were configured."""


class AdminApiError(SeedError):
    """The admin API answered with a non-2xx status."""

    def __init__(
        self,
        status_code: int,
        message: str,
        *,
        error_type: str | None = None,
        method: str = "",
        path: str = "",
        request_id: str = "",
    ) -> None:
        self.status_code = status_code
        self.code = code_for_status(status_code)
        self.message = message
        self.error_type = error_type
        self.method = method
        self.path = path
        self.request_id = request_id
        super().__init__(f"{method} {path} failed with {status_code} {self.code}: {message}")

    @classmethod
    def from_response(cls, response: httpx.Response) -> "AdminApiError":
        """Build an error from a failed response.

        The backend answers errors as ``{"type": ..., "message": ...}``; bodies
        that are not JSON fall back to the raw text.
        """
        try:
            body = AdminErrorBody.model_validate_json(response.content)
        except ValidationError:
            message = response.text or response.reason_phrase
            error_type = None
        else:
            message = body.message
            error_type = body.type

        request = response.request
        return cls(
            response.status_code,
            message,
            error_type=error_type,
            method=request.method,
            path=request.url.path,
            request_id=request.headers.get("X-Request-Id", ""),
        )


class MissingRecordError(SeedError):
    """A record a later step depends on is absent."""


class CollectionNotFoundError(SeedError, KeyError):
    """A product references a collection title that was not created."""

    def __init__(self, title: str) -> None:
        self.title = title
        super().__init__(f"No collection titled {title!r}")

    def __str__(self) -> str:
        return self.args[0]


class SeedStepError(SeedError):
    """A seed step failed; remaining steps were not run."""

    def __init__(self, step: str, cause: BaseException) -> None:
        self.step = step
        self.cause = cause
        super().__init__(f"Seed step {step!r} failed: {cause}")
