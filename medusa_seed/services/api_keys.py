"""API key operations."""

import httpx

from medusa_seed.schemas.api_key import ApiKey, ApiKeyCreate
from medusa_seed.services.base import request_json


async def list_api_keys(
    client: httpx.AsyncClient, *, title: str | None = None, type: str | None = None
) -> list[ApiKey]:
    body = await request_json(
        client,
        "GET",
        "/admin/api-keys",
        params={"title": title, "type": type, "fields": "*sales_channels"},
    )
    return [ApiKey.model_validate(item) for item in body["api_keys"]]


async def create_api_key(client: httpx.AsyncClient, payload: ApiKeyCreate) -> ApiKey:
    body = await request_json(client, "POST", "/admin/api-keys", json=payload.to_json())
    return ApiKey.model_validate(body["api_key"])
