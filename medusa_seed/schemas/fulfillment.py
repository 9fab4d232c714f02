"""Pydantic schemas for shipping profiles, fulfillment sets and service zones."""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict

from medusa_seed.schemas.common import AdminPayload, AdminRecord


class FulfillmentSetType(StrEnum):
    shipping = "shipping"
    pickup = "pickup"


class ShippingProfileCreate(AdminPayload):
    name: str
    type: str = "default"


class ShippingProfile(AdminRecord):
    name: str
    type: str

    def __repr__(self) -> str:
        return f"<ShippingProfile id={self.id!r} name={self.name!r}>"


class GeoZone(BaseModel):
    """A country-level geographic zone inside a service zone."""

    model_config = ConfigDict(extra="allow")

    country_code: str
    type: str = "country"


class ServiceZoneCreate(AdminPayload):
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Switzerland Bags",
                "geo_zones": [{"country_code": "ch", "type": "country"}],
            }
        }
    )

    name: str
    geo_zones: list[GeoZone] = []


class ServiceZone(AdminRecord):
    name: str
    geo_zones: list[GeoZone] = []


class FulfillmentSetCreate(AdminPayload):
    """A fulfillment set and the service zones to create inside it.

    The admin API creates the set and its zones in separate calls; only
    ``name`` and ``type`` are sent when creating the set itself.
    """

    name: str
    type: FulfillmentSetType
    service_zones: list[ServiceZoneCreate] = []

    def set_body(self) -> dict[str, str]:
        return {"name": self.name, "type": self.type.value}


class FulfillmentSet(AdminRecord):
    name: str
    type: str
    service_zones: list[ServiceZone] = []

    def service_zone(self, name: str | None = None) -> ServiceZone:
        """Return the service zone called *name*, or the first one."""
        for zone in self.service_zones:
            if name is None or zone.name == name:
                return zone
        raise LookupError(f"Fulfillment set {self.name!r} has no service zone {name!r}")

    def __repr__(self) -> str:
        return f"<FulfillmentSet id={self.id!r} name={self.name!r}>"
