"""Outbound request ID hook for the admin client.

Assigns a UUID4 to every outbound admin request and sends it as the
``X-Request-Id`` header so backend logs can be matched with ours.  The ID of
the most recent request is also stored in a ``ContextVar``, which the access
log hook reads when the response arrives.

Ordering note
-------------
Register this hook *first* in the client's ``request`` hooks so the header is
present before any other hook reads it.
"""

import uuid
from contextvars import ContextVar

import httpx

# Holds the ID of the last request sent from this context.
# Defaults to "" so consumers never receive ``None``.
REQUEST_ID_CTX: ContextVar[str] = ContextVar("request_id", default="")

REQUEST_ID_HEADER = "X-Request-Id"


async def attach_request_id(request: httpx.Request) -> None:
    """Attach a fresh UUID4 ``X-Request-Id`` header to *request*."""
    request_id = str(uuid.uuid4())
    request.headers[REQUEST_ID_HEADER] = request_id
    REQUEST_ID_CTX.set(request_id)
