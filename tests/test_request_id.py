"""Tests for medusa_seed/middleware/request_id.py.

Each behaviour is exercised through an admin client built by
:func:`~medusa_seed.client.build_admin_client` over an ``httpx.MockTransport``
so the header is checked exactly as it leaves the client.
"""

import uuid

import httpx
import pytest

from medusa_seed.client import build_admin_client
from medusa_seed.middleware.request_id import REQUEST_ID_CTX, REQUEST_ID_HEADER

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _echo_transport(seen: list[httpx.Request]) -> httpx.MockTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"stores": []})

    return httpx.MockTransport(handler)


# ---------------------------------------------------------------------------
# Header presence and format
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_request_carries_uuid4_request_id(seed_settings) -> None:
    seen: list[httpx.Request] = []
    async with build_admin_client(seed_settings, transport=_echo_transport(seen)) as client:
        await client.get("/admin/stores")

    request_id = seen[0].headers[REQUEST_ID_HEADER]
    assert uuid.UUID(request_id).version == 4


@pytest.mark.asyncio
async def test_each_request_gets_a_distinct_id(seed_settings) -> None:
    seen: list[httpx.Request] = []
    async with build_admin_client(seed_settings, transport=_echo_transport(seen)) as client:
        for _ in range(5):
            await client.get("/admin/stores")

    ids = {r.headers[REQUEST_ID_HEADER] for r in seen}
    assert len(ids) == 5


@pytest.mark.asyncio
async def test_context_var_holds_last_request_id(seed_settings) -> None:
    seen: list[httpx.Request] = []
    async with build_admin_client(seed_settings, transport=_echo_transport(seen)) as client:
        await client.get("/admin/stores")
        await client.get("/admin/stores")

    assert REQUEST_ID_CTX.get() == seen[-1].headers[REQUEST_ID_HEADER]
