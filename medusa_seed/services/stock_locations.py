"""Stock location operations."""

import httpx

from medusa_seed.schemas.stock_location import StockLocation, StockLocationCreate
from medusa_seed.services.base import request_json

# Relations the seeder reads back on every stock location response.
STOCK_LOCATION_FIELDS = ",".join(
    [
        "*sales_channels",
        "*fulfillment_providers",
        "*fulfillment_sets",
        "*fulfillment_sets.service_zones",
        "*fulfillment_sets.service_zones.geo_zones",
    ]
)


async def list_stock_locations(
    client: httpx.AsyncClient, *, name: str | None = None
) -> list[StockLocation]:
    body = await request_json(
        client,
        "GET",
        "/admin/stock-locations",
        params={"name": name, "fields": STOCK_LOCATION_FIELDS},
    )
    return [StockLocation.model_validate(item) for item in body["stock_locations"]]


async def create_stock_location(
    client: httpx.AsyncClient, payload: StockLocationCreate
) -> StockLocation:
    body = await request_json(
        client,
        "POST",
        "/admin/stock-locations",
        params={"fields": STOCK_LOCATION_FIELDS},
        json=payload.to_json(),
    )
    return StockLocation.model_validate(body["stock_location"])
