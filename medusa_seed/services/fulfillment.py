"""Shipping profile, fulfillment set and service zone operations."""

import httpx

from medusa_seed.errors import MissingRecordError
from medusa_seed.schemas.fulfillment import (
    FulfillmentSet,
    FulfillmentSetCreate,
    ServiceZoneCreate,
    ShippingProfile,
    ShippingProfileCreate,
)
from medusa_seed.schemas.stock_location import StockLocation
from medusa_seed.services.base import request_json
from medusa_seed.services.stock_locations import STOCK_LOCATION_FIELDS


async def list_shipping_profiles(
    client: httpx.AsyncClient, *, name: str | None = None
) -> list[ShippingProfile]:
    body = await request_json(client, "GET", "/admin/shipping-profiles", params={"name": name})
    return [ShippingProfile.model_validate(item) for item in body["shipping_profiles"]]


async def create_shipping_profile(
    client: httpx.AsyncClient, payload: ShippingProfileCreate
) -> ShippingProfile:
    body = await request_json(client, "POST", "/admin/shipping-profiles", json=payload.to_json())
    return ShippingProfile.model_validate(body["shipping_profile"])


async def create_service_zone(
    client: httpx.AsyncClient, fulfillment_set_id: str, payload: ServiceZoneCreate
) -> FulfillmentSet:
    """Add a service zone to a fulfillment set; return the updated set."""
    body = await request_json(
        client,
        "POST",
        f"/admin/fulfillment-sets/{fulfillment_set_id}/service-zones",
        json=payload.to_json(),
    )
    return FulfillmentSet.model_validate(body["fulfillment_set"])


async def create_fulfillment_set(
    client: httpx.AsyncClient, stock_location_id: str, payload: FulfillmentSetCreate
) -> FulfillmentSet:
    """Create a fulfillment set owned by a stock location, then its service zones.

    Creating the set through the stock location links the two in the same
    call.  Raises :class:`MissingRecordError` if the new set is absent from
    the returned stock location.
    """
    body = await request_json(
        client,
        "POST",
        f"/admin/stock-locations/{stock_location_id}/fulfillment-sets",
        params={"fields": STOCK_LOCATION_FIELDS},
        json=payload.set_body(),
    )
    location = StockLocation.model_validate(body["stock_location"])
    fulfillment_set = location.fulfillment_set(payload.name)
    if fulfillment_set is None:
        raise MissingRecordError(
            f"Fulfillment set {payload.name!r} not returned for stock location {stock_location_id}"
        )

    for zone in payload.service_zones:
        fulfillment_set = await create_service_zone(client, fulfillment_set.id, zone)
    return fulfillment_set
