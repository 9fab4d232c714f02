"""Shipping option operations."""

import httpx

from medusa_seed.schemas.shipping_option import ShippingOption, ShippingOptionCreate
from medusa_seed.services.base import request_json


async def list_shipping_options(
    client: httpx.AsyncClient, *, service_zone_id: str | None = None
) -> list[ShippingOption]:
    body = await request_json(
        client, "GET", "/admin/shipping-options", params={"service_zone_id": service_zone_id}
    )
    return [ShippingOption.model_validate(item) for item in body["shipping_options"]]


async def create_shipping_option(
    client: httpx.AsyncClient, payload: ShippingOptionCreate
) -> ShippingOption:
    body = await request_json(client, "POST", "/admin/shipping-options", json=payload.to_json())
    return ShippingOption.model_validate(body["shipping_option"])
