"""Region and tax region operations."""

import httpx

from medusa_seed.schemas.region import Region, RegionCreate, TaxRegion, TaxRegionCreate
from medusa_seed.services.base import request_json


async def list_regions(client: httpx.AsyncClient, *, name: str | None = None) -> list[Region]:
    body = await request_json(client, "GET", "/admin/regions", params={"name": name})
    return [Region.model_validate(item) for item in body["regions"]]


async def create_region(client: httpx.AsyncClient, payload: RegionCreate) -> Region:
    body = await request_json(client, "POST", "/admin/regions", json=payload.to_json())
    return Region.model_validate(body["region"])


async def list_tax_regions(
    client: httpx.AsyncClient, *, country_code: str | None = None
) -> list[TaxRegion]:
    body = await request_json(
        client, "GET", "/admin/tax-regions", params={"country_code": country_code}
    )
    return [TaxRegion.model_validate(item) for item in body["tax_regions"]]


async def create_tax_region(client: httpx.AsyncClient, payload: TaxRegionCreate) -> TaxRegion:
    body = await request_json(client, "POST", "/admin/tax-regions", json=payload.to_json())
    return TaxRegion.model_validate(body["tax_region"])
