"""Pydantic schemas for ShippingOption resources."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, model_validator

from medusa_seed.schemas.common import AdminPayload, AdminRecord, Amount


class ShippingOptionType(BaseModel):
    label: str
    description: str
    code: str


class ShippingOptionPrice(BaseModel):
    """A shipping price scoped to either a currency or a region, never both."""

    model_config = ConfigDict(extra="forbid")

    amount: Amount
    currency_code: str | None = None
    region_id: str | None = None

    @model_validator(mode="after")
    def check_scope(self) -> "ShippingOptionPrice":
        if (self.currency_code is None) == (self.region_id is None):
            raise ValueError("exactly one of currency_code or region_id must be set")
        return self


class ShippingOptionCreate(AdminPayload):
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Standard Shipping",
                "price_type": "flat",
                "provider_id": "manual_manual",
                "service_zone_id": "serzo_01HZX4Q2N8S5V7Y9A1B3C5D7E9",
                "shipping_profile_id": "sp_01HZX4Q2N8S5V7Y9A1B3C5D7E9",
                "type": {
                    "label": "Standard",
                    "description": "Standard shipping for Switzerland",
                    "code": "standard_ch",
                },
                "prices": [
                    {"currency_code": "chf", "amount": 9.7},
                    {"region_id": "reg_01HZX4Q2N8S5V7Y9A1B3C5D7E9", "amount": 9.7},
                ],
            }
        }
    )

    name: str
    price_type: Literal["flat", "calculated"] = "flat"
    provider_id: str
    service_zone_id: str
    shipping_profile_id: str
    type: ShippingOptionType
    prices: list[ShippingOptionPrice] = []


class ShippingOption(AdminRecord):
    name: str
    service_zone_id: str | None = None
    shipping_profile_id: str | None = None

    def __repr__(self) -> str:
        return f"<ShippingOption id={self.id!r} name={self.name!r}>"
