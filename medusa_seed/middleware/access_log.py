"""Structured JSON access logging for admin API calls.

Emits one ``INFO``-level log record per response containing:

    ``method``, ``path``, ``status``, ``duration_ms``, ``request_id``, ``step``

``request_id`` comes from :data:`~medusa_seed.middleware.request_id.REQUEST_ID_CTX`,
set by :func:`~medusa_seed.middleware.request_id.attach_request_id` for the
request being answered; ``step`` is the seed step running when the call was
made (see :data:`SEED_STEP_CTX`).
"""

import json
import logging
import time
from contextvars import ContextVar

import httpx

from medusa_seed.middleware.request_id import REQUEST_ID_CTX

logger = logging.getLogger(__name__)

# Name of the seed step currently executing; "" outside a seed run.
SEED_STEP_CTX: ContextVar[str] = ContextVar("seed_step", default="")

_STARTED_AT = "medusa_seed.started_at"


async def mark_request_start(request: httpx.Request) -> None:
    """Record the send time of *request* so the response hook can time it."""
    request.extensions[_STARTED_AT] = time.perf_counter()


async def log_response(response: httpx.Response) -> None:
    """Emit a structured JSON access-log record for *response*."""
    request = response.request
    started = request.extensions.get(_STARTED_AT)
    duration_ms = round((time.perf_counter() - started) * 1000, 2) if started else None
    logger.info(
        json.dumps(
            {
                "method": request.method,
                "path": request.url.path,
                "status": response.status_code,
                "duration_ms": duration_ms,
                "request_id": REQUEST_ID_CTX.get(),
                "step": SEED_STEP_CTX.get(),
            }
        )
    )
