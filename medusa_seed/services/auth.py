"""Admin authentication: secret API key or email/password token exchange."""

import httpx

from medusa_seed.config import Settings
from medusa_seed.errors import SeedConfigError
from medusa_seed.services.base import request_json


async def fetch_admin_token(client: httpx.AsyncClient, email: str, password: str) -> str:
    """Exchange admin *email* and *password* for a bearer token."""
    body = await request_json(
        client,
        "POST",
        "/auth/user/emailpass",
        json={"email": email, "password": password},
    )
    return body["token"]


async def authenticate(client: httpx.AsyncClient, settings: Settings) -> None:
    """Configure *client* to send admin credentials on every request.

    A secret API key is sent as HTTP Basic auth with an empty password and
    wins over email/password.  Otherwise the email/password pair is exchanged
    once for a bearer token.  Raises :class:`SeedConfigError` if neither is set.
    """
    if settings.medusa_admin_api_key:
        client.auth = httpx.BasicAuth(settings.medusa_admin_api_key, "")
        return

    if not (settings.medusa_admin_email and settings.medusa_admin_password):
        raise SeedConfigError(
            "Set MEDUSA_ADMIN_API_KEY or both MEDUSA_ADMIN_EMAIL and MEDUSA_ADMIN_PASSWORD"
        )

    token = await fetch_admin_token(
        client, settings.medusa_admin_email, settings.medusa_admin_password
    )
    client.headers["Authorization"] = f"Bearer {token}"
