from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import httpx

from medusa_seed.config import Settings, settings as default_settings
from medusa_seed.middleware.access_log import log_response, mark_request_start
from medusa_seed.middleware.request_id import attach_request_id
from medusa_seed.services.auth import authenticate


def build_admin_client(
    settings: Settings,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Return an unauthenticated admin client with request-id and access-log hooks.

    *transport* replaces the network transport, e.g. ``httpx.ASGITransport``
    to drive an in-process backend.
    """
    return httpx.AsyncClient(
        base_url=settings.medusa_backend_url,
        timeout=settings.request_timeout_seconds,
        headers={"Accept": "application/json"},
        event_hooks={
            # attach_request_id must run first so later hooks see the header.
            "request": [attach_request_id, mark_request_start],
            "response": [log_response],
        },
        transport=transport,
    )


@asynccontextmanager
async def open_admin_client(
    settings: Settings = default_settings,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> AsyncGenerator[httpx.AsyncClient]:
    """Yield an authenticated admin client; close its connections on exit."""
    async with build_admin_client(settings, transport=transport) as client:
        await authenticate(client, settings)
        yield client
