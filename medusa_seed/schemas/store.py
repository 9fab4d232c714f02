"""Pydantic schemas for Store and SalesChannel resources."""

from pydantic import BaseModel, ConfigDict

from medusa_seed.schemas.common import AdminPayload, AdminRecord


class SupportedCurrency(BaseModel):
    currency_code: str
    is_default: bool = False


class StoreUpdate(AdminPayload):
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "supported_currencies": [{"currency_code": "chf", "is_default": True}],
                "default_sales_channel_id": "sc_01HZX4Q2N8S5V7Y9A1B3C5D7E9",
            }
        }
    )

    supported_currencies: list[SupportedCurrency] | None = None
    default_sales_channel_id: str | None = None


class Store(AdminRecord):
    name: str | None = None
    supported_currencies: list[SupportedCurrency] = []
    default_sales_channel_id: str | None = None

    def __repr__(self) -> str:
        return f"<Store id={self.id!r} name={self.name!r}>"


class SalesChannelCreate(AdminPayload):
    name: str
    description: str | None = None


class SalesChannel(AdminRecord):
    name: str

    def __repr__(self) -> str:
        return f"<SalesChannel id={self.id!r} name={self.name!r}>"
