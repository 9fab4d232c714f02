"""Pydantic schemas for StockLocation resources."""

from pydantic import BaseModel, ConfigDict

from medusa_seed.schemas.common import AdminPayload, AdminRecord, LinkedRecord
from medusa_seed.schemas.fulfillment import FulfillmentSet


class StockLocationAddress(BaseModel):
    model_config = ConfigDict(extra="allow")

    address_1: str = ""
    city: str | None = None
    country_code: str


class StockLocationCreate(AdminPayload):
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Bags",
                "address": {"city": "Grandvaux", "country_code": "ch", "address_1": ""},
            }
        }
    )

    name: str
    address: StockLocationAddress


class StockLocation(AdminRecord):
    name: str
    address: StockLocationAddress | None = None
    sales_channels: list[LinkedRecord] = []
    fulfillment_providers: list[LinkedRecord] = []
    fulfillment_sets: list[FulfillmentSet] = []

    def fulfillment_set(self, name: str) -> FulfillmentSet | None:
        """Return the last fulfillment set called *name*.

        Sets are returned in creation order, so the last match is the newest.
        """
        matches = [fs for fs in self.fulfillment_sets if fs.name == name]
        return matches[-1] if matches else None

    def __repr__(self) -> str:
        return f"<StockLocation id={self.id!r} name={self.name!r}>"
