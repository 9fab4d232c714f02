"""Shared request helper for the admin API service modules."""

from typing import Any

import httpx

from medusa_seed.errors import AdminApiError


async def request_json(
    client: httpx.AsyncClient,
    method: str,
    path: str,
    *,
    params: dict[str, Any] | None = None,
    json: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Send one admin API request and return the decoded JSON body.

    Raises :class:`~medusa_seed.errors.AdminApiError` for any non-2xx answer.
    ``None`` values are dropped from *params* so optional filters can be
    passed straight through.
    """
    if params is not None:
        params = {key: value for key, value in params.items() if value is not None}
    response = await client.request(method, path, params=params, json=json)
    if response.is_error:
        raise AdminApiError.from_response(response)
    return response.json()
