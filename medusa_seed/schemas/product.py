"""Pydantic schemas for Product and ProductCollection resources."""

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from medusa_seed.schemas.common import AdminPayload, AdminRecord, Amount

_EXAMPLE_COLLECTION_ID = "pcol_01HZX4Q2N8S5V7Y9A1B3C5D7E9"
_EXAMPLE_SALES_CHANNEL_ID = "sc_01HZX4Q2N8S5V7Y9A1B3C5D7E9"


class ProductStatus(StrEnum):
    draft = "draft"
    proposed = "proposed"
    published = "published"
    rejected = "rejected"


class CollectionCreate(AdminPayload):
    title: str
    handle: str | None = None


class Collection(AdminRecord):
    title: str
    handle: str | None = None

    def __repr__(self) -> str:
        return f"<Collection id={self.id!r} title={self.title!r}>"


class ProductImage(BaseModel):
    url: str


class ProductOptionCreate(BaseModel):
    title: str
    values: list[str] = Field(..., min_length=1)


class VariantPrice(BaseModel):
    amount: Amount
    currency_code: str


class ProductVariantCreate(BaseModel):
    title: str
    # option title -> selected value
    options: dict[str, str] = {}
    prices: list[VariantPrice] = []


class SalesChannelRef(BaseModel):
    id: str


class ProductCreate(AdminPayload):
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Amiante",
                "handle": "bag-asbestos",
                "collection_id": _EXAMPLE_COLLECTION_ID,
                "description": (
                    "Utiliser ce sac spécifiquement pour les déchets contenant de l'amiante. "
                    "Certificat amiante fourni!"
                ),
                "status": "published",
                "images": [{"url": "http://localhost:9000/static/bag_asbestos.jpg"}],
                "options": [{"title": "size", "values": ["1m3", "2m3"]}],
                "variants": [
                    {
                        "title": "Medium 1m3",
                        "options": {"size": "1m3"},
                        "prices": [{"amount": 21.9, "currency_code": "chf"}],
                    },
                ],
                "sales_channels": [{"id": _EXAMPLE_SALES_CHANNEL_ID}],
            }
        }
    )

    title: str
    handle: str
    collection_id: str | None = None
    description: str | None = None
    status: ProductStatus = ProductStatus.draft
    images: list[ProductImage] = []
    options: list[ProductOptionCreate] = []
    variants: list[ProductVariantCreate] = []
    sales_channels: list[SalesChannelRef] = []

    @model_validator(mode="after")
    def check_variant_options(self) -> "ProductCreate":
        """Every variant may only select declared option titles and values."""
        declared = {option.title: set(option.values) for option in self.options}
        for variant in self.variants:
            for title, value in variant.options.items():
                if title not in declared:
                    raise ValueError(
                        f"variant {variant.title!r} selects undeclared option {title!r}"
                    )
                if value not in declared[title]:
                    raise ValueError(
                        f"variant {variant.title!r} selects {value!r}, "
                        f"not a declared value of option {title!r}"
                    )
        return self


class ProductVariant(AdminRecord):
    title: str
    prices: list[dict[str, Any]] = []
    options: list[dict[str, Any]] = []


class Product(AdminRecord):
    title: str
    handle: str
    status: str | None = None
    collection_id: str | None = None
    variants: list[ProductVariant] = []

    def __repr__(self) -> str:
        return f"<Product id={self.id!r} handle={self.handle!r}>"
