"""Cross-module link operations.

The backend keeps stock locations, sales channels, fulfillment providers and
API keys in separate modules; these endpoints create the links between them.
Each accepts a :class:`~medusa_seed.schemas.common.LinkUpdate` with ids to
``add`` and ``remove``.
"""

import httpx

from medusa_seed.schemas.api_key import ApiKey
from medusa_seed.schemas.common import LinkUpdate
from medusa_seed.schemas.stock_location import StockLocation
from medusa_seed.services.base import request_json
from medusa_seed.services.stock_locations import STOCK_LOCATION_FIELDS


async def link_sales_channels_to_stock_location(
    client: httpx.AsyncClient, stock_location_id: str, sales_channel_ids: list[str]
) -> StockLocation:
    body = await request_json(
        client,
        "POST",
        f"/admin/stock-locations/{stock_location_id}/sales-channels",
        params={"fields": STOCK_LOCATION_FIELDS},
        json=LinkUpdate(add=sales_channel_ids).to_json(),
    )
    return StockLocation.model_validate(body["stock_location"])


async def link_fulfillment_providers_to_stock_location(
    client: httpx.AsyncClient, stock_location_id: str, provider_ids: list[str]
) -> StockLocation:
    body = await request_json(
        client,
        "POST",
        f"/admin/stock-locations/{stock_location_id}/fulfillment-providers",
        params={"fields": STOCK_LOCATION_FIELDS},
        json=LinkUpdate(add=provider_ids).to_json(),
    )
    return StockLocation.model_validate(body["stock_location"])


async def link_sales_channels_to_api_key(
    client: httpx.AsyncClient, api_key_id: str, sales_channel_ids: list[str]
) -> ApiKey:
    body = await request_json(
        client,
        "POST",
        f"/admin/api-keys/{api_key_id}/sales-channels",
        params={"fields": "*sales_channels"},
        json=LinkUpdate(add=sales_channel_ids).to_json(),
    )
    return ApiKey.model_validate(body["api_key"])
