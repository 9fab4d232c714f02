"""Shared pytest fixtures for the medusa-seed test suite.

The module-level environment setup runs at collection time, before any
``medusa_seed.*`` module is imported, so the module-level ``settings`` never
picks up a developer's ``.env`` credentials or backend URL.

Fixture scopes
--------------
* ``backend``       — function: fresh in-memory :class:`FakeBackend`.
* ``transport``     — function: ``httpx.ASGITransport`` over the fake admin app.
* ``seed_settings`` — function: settings pointing at the fake with valid credentials.
* ``admin_client``  — function: authenticated admin client bound to the fake.
* ``seed_ctx``      — function: empty :class:`SeedContext` around ``admin_client``.
"""

import os
from collections.abc import AsyncGenerator

import httpx
import pytest

from tests.fake_admin import ADMIN_EMAIL, ADMIN_PASSWORD, FakeBackend, create_fake_admin

# ---------------------------------------------------------------------------
# Environment bootstrap: must run before any ``medusa_seed`` import
# ---------------------------------------------------------------------------

os.environ["MEDUSA_BACKEND_URL"] = "http://test"
os.environ["MEDUSA_ADMIN_EMAIL"] = ADMIN_EMAIL
os.environ["MEDUSA_ADMIN_PASSWORD"] = ADMIN_PASSWORD
os.environ.pop("MEDUSA_ADMIN_API_KEY", None)
os.environ.pop("SEED_SKIP_EXISTING", None)


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def transport(backend: FakeBackend) -> httpx.ASGITransport:
    return httpx.ASGITransport(app=create_fake_admin(backend))


@pytest.fixture
def seed_settings():
    from medusa_seed.config import Settings

    return Settings(
        _env_file=None,
        medusa_backend_url="http://test",
        medusa_admin_email=ADMIN_EMAIL,
        medusa_admin_password=ADMIN_PASSWORD,
        medusa_admin_api_key=None,
    )


@pytest.fixture
async def admin_client(
    transport: httpx.ASGITransport, seed_settings
) -> AsyncGenerator[httpx.AsyncClient]:
    """Authenticated admin client driving the fake backend in-process."""
    from medusa_seed.client import open_admin_client

    async with open_admin_client(seed_settings, transport=transport) as client:
        yield client


@pytest.fixture
def seed_ctx(admin_client: httpx.AsyncClient):
    from medusa_seed.steps import SeedContext

    return SeedContext(client=admin_client)
