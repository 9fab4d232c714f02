"""Store and sales channel operations."""

import httpx

from medusa_seed.schemas.store import SalesChannel, SalesChannelCreate, Store, StoreUpdate
from medusa_seed.services.base import request_json


async def list_stores(client: httpx.AsyncClient) -> list[Store]:
    body = await request_json(client, "GET", "/admin/stores")
    return [Store.model_validate(item) for item in body["stores"]]


async def update_store(client: httpx.AsyncClient, store_id: str, update: StoreUpdate) -> Store:
    """Apply *update* to the store and return the updated record."""
    body = await request_json(client, "POST", f"/admin/stores/{store_id}", json=update.to_json())
    return Store.model_validate(body["store"])


async def list_sales_channels(
    client: httpx.AsyncClient, *, name: str | None = None
) -> list[SalesChannel]:
    """Return sales channels, optionally filtered by exact *name*."""
    body = await request_json(client, "GET", "/admin/sales-channels", params={"name": name})
    return [SalesChannel.model_validate(item) for item in body["sales_channels"]]


async def create_sales_channel(
    client: httpx.AsyncClient, payload: SalesChannelCreate
) -> SalesChannel:
    body = await request_json(client, "POST", "/admin/sales-channels", json=payload.to_json())
    return SalesChannel.model_validate(body["sales_channel"])
