"""Pydantic schemas for Region and TaxRegion resources."""

from pydantic import BaseModel, ConfigDict, field_validator

from medusa_seed.schemas.common import AdminPayload, AdminRecord


class RegionCreate(AdminPayload):
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Switzerland",
                "currency_code": "chf",
                "countries": ["ch"],
                "payment_providers": ["pp_system_default"],
            }
        }
    )

    name: str
    currency_code: str
    countries: list[str] = []
    payment_providers: list[str] = []

    @field_validator("currency_code", mode="before")
    @classmethod
    def lower_currency(cls, v: str) -> str:
        """Currency codes are stored lower-case by the backend."""
        return str(v).lower()


class RegionCountry(BaseModel):
    model_config = ConfigDict(extra="allow")

    iso_2: str


class Region(AdminRecord):
    name: str
    currency_code: str
    countries: list[RegionCountry] = []

    def __repr__(self) -> str:
        return f"<Region id={self.id!r} name={self.name!r}>"


class TaxRegionCreate(AdminPayload):
    country_code: str
    province_code: str | None = None


class TaxRegion(AdminRecord):
    country_code: str
    province_code: str | None = None

    def __repr__(self) -> str:
        return f"<TaxRegion id={self.id!r} country_code={self.country_code!r}>"
