"""Seed data for the Swiss Big Sack shop: one CHF market, bags and bag pickups."""

from collections.abc import Mapping
from decimal import Decimal
from typing import Any

from medusa_seed.schemas.api_key import ApiKeyCreate, ApiKeyType
from medusa_seed.schemas.fulfillment import (
    FulfillmentSetCreate,
    FulfillmentSetType,
    GeoZone,
    ServiceZoneCreate,
    ShippingProfileCreate,
)
from medusa_seed.schemas.product import (
    CollectionCreate,
    ProductCreate,
    ProductImage,
    ProductOptionCreate,
    ProductStatus,
    ProductVariantCreate,
    SalesChannelRef,
    VariantPrice,
)
from medusa_seed.schemas.region import RegionCreate, TaxRegionCreate
from medusa_seed.schemas.shipping_option import (
    ShippingOptionCreate,
    ShippingOptionPrice,
    ShippingOptionType,
)
from medusa_seed.schemas.stock_location import StockLocationAddress, StockLocationCreate
from medusa_seed.schemas.store import SupportedCurrency

# ---------------------------------------------------------------------------
# Market
# ---------------------------------------------------------------------------

COUNTRIES: list[str] = ["ch"]
CURRENCY_CODE = "chf"
DEFAULT_SALES_CHANNEL_NAME = "Default Sales Channel"
SUPPORTED_CURRENCIES: list[SupportedCurrency] = [
    SupportedCurrency(currency_code=CURRENCY_CODE, is_default=True),
]

REGION = RegionCreate(
    name="Switzerland",
    currency_code=CURRENCY_CODE,
    countries=COUNTRIES,
    payment_providers=["pp_system_default"],
)

# ---------------------------------------------------------------------------
# Shipping: profile, stock location, fulfillment sets
# ---------------------------------------------------------------------------

FULFILLMENT_PROVIDER_ID = "manual_manual"

SHIPPING_PROFILE = ShippingProfileCreate(name="Default", type="default")

STOCK_LOCATION = StockLocationCreate(
    name="Bags",
    address=StockLocationAddress(city="Grandvaux", country_code="ch", address_1=""),
)

BAGS_FULFILLMENT_SET = "Bags"
PICKUP_FULFILLMENT_SET = "Pickup"


def _country_zone(name: str) -> ServiceZoneCreate:
    return ServiceZoneCreate(
        name=name,
        geo_zones=[GeoZone(country_code=code, type="country") for code in COUNTRIES],
    )


FULFILLMENT_SETS: list[FulfillmentSetCreate] = [
    FulfillmentSetCreate(
        name=BAGS_FULFILLMENT_SET,
        type=FulfillmentSetType.shipping,
        service_zones=[_country_zone("Switzerland Bags")],
    ),
    FulfillmentSetCreate(
        name=PICKUP_FULFILLMENT_SET,
        type=FulfillmentSetType.pickup,
        service_zones=[_country_zone("Switzerland Pickups")],
    ),
]

STANDARD_SHIPPING_NAME = "Standard Shipping"
STANDARD_SHIPPING_AMOUNT = Decimal("9.7")
STANDARD_SHIPPING_TYPE = ShippingOptionType(
    label="Standard",
    description="Standard shipping for Switzerland",
    code="standard_ch",
)


def standard_shipping_option(
    *, service_zone_id: str, shipping_profile_id: str, region_id: str
) -> ShippingOptionCreate:
    """Flat-rate option priced once per currency and again for the region."""
    return ShippingOptionCreate(
        name=STANDARD_SHIPPING_NAME,
        price_type="flat",
        provider_id=FULFILLMENT_PROVIDER_ID,
        service_zone_id=service_zone_id,
        shipping_profile_id=shipping_profile_id,
        type=STANDARD_SHIPPING_TYPE,
        prices=[
            ShippingOptionPrice(currency_code=CURRENCY_CODE, amount=STANDARD_SHIPPING_AMOUNT),
            ShippingOptionPrice(region_id=region_id, amount=STANDARD_SHIPPING_AMOUNT),
        ],
    )


# ---------------------------------------------------------------------------
# Storefront access
# ---------------------------------------------------------------------------

PUBLISHABLE_API_KEY = ApiKeyCreate(title="Webshop", type=ApiKeyType.publishable)

# ---------------------------------------------------------------------------
# Collections and products
# ---------------------------------------------------------------------------

BAGS_COLLECTION = "Bags"
PICKUPS_COLLECTION = "Pickups"

COLLECTIONS: list[CollectionCreate] = [
    CollectionCreate(title=BAGS_COLLECTION, handle="bags"),
    CollectionCreate(title=PICKUPS_COLLECTION, handle="pickups"),
]

BIG_SACK_DESCRIPTION = (
    "Utilisez ce Big Sack pour les déchets lourds tels que le béton, les briques et la terre."
)
ASBESTOS_DESCRIPTION = (
    "Utiliser ce sac spécifiquement pour les déchets contenant de l'amiante. "
    "Certificat amiante fourni!"
)

WASTE_TYPE = "waste-type"
ALL_WASTE_TYPES = ["asbestos", "construction", "incinerable", "recyclable", "to-sort"]


def _waste_variants(prices: Mapping[str, str]) -> list[dict[str, Any]]:
    """One variant per waste type, titled after it."""
    return [
        {"title": waste, "options": {WASTE_TYPE: waste}, "price": Decimal(amount)}
        for waste, amount in prices.items()
    ]


# Option values are listed per option title; each variant carries one CHF price.
PRODUCTS: list[dict[str, Any]] = [
    # ── Bags ── 4 products
    {
        "title": "Sac 1m3",
        "handle": "bag-1m3",
        "collection": BAGS_COLLECTION,
        "description": BIG_SACK_DESCRIPTION,
        "image": "bag_1m3.jpg",
        "options": {"default": ["default"]},
        "variants": [
            {
                "title": "Default variant",
                "options": {"default": "default"},
                "price": Decimal("41.9"),
            },
        ],
    },
    {
        "title": "Sac 2m3",
        "handle": "bag-2m3",
        "collection": BAGS_COLLECTION,
        "description": BIG_SACK_DESCRIPTION,
        "image": "bag_2m3.jpg",
        "options": {"default": ["default"]},
        "variants": [
            {
                "title": "Default variant",
                "options": {"default": "default"},
                "price": Decimal("41.9"),
            },
        ],
    },
    {
        "title": "Sac 3m3",
        "handle": "bag-3m3",
        "collection": BAGS_COLLECTION,
        "description": BIG_SACK_DESCRIPTION,
        "image": "bag_3m3.jpg",
        "options": {"default": ["default"]},
        "variants": [
            {
                "title": "Default variant",
                "options": {"default": "default"},
                "price": Decimal("41.9"),
            },
        ],
    },
    {
        "title": "Amiante",
        "handle": "bag-asbestos",
        "collection": BAGS_COLLECTION,
        "description": ASBESTOS_DESCRIPTION,
        "image": "bag_asbestos.jpg",
        "options": {"size": ["1m3", "2m3"]},
        "variants": [
            {"title": "Medium 1m3", "options": {"size": "1m3"}, "price": Decimal("21.9")},
            {"title": "Large 2m3", "options": {"size": "2m3"}, "price": Decimal("31.9")},
        ],
    },
    # ── Pickups ── 3 products
    {
        "title": "Sac 1m3",
        "handle": "pickup-1m3",
        "collection": PICKUPS_COLLECTION,
        "description": BIG_SACK_DESCRIPTION,
        "image": "bag_1m3.jpg",
        "options": {WASTE_TYPE: ALL_WASTE_TYPES},
        "variants": _waste_variants(
            {
                "asbestos": "270",
                "construction": "165",
                "incinerable": "170",
                "recyclable": "110",
                "to-sort": "230",
            }
        ),
    },
    {
        "title": "LARGE 2m3",
        "handle": "pickup-2m3",
        "collection": PICKUPS_COLLECTION,
        "description": BIG_SACK_DESCRIPTION,
        "image": "bag_2m3.jpg",
        "options": {WASTE_TYPE: ALL_WASTE_TYPES},
        "variants": _waste_variants(
            {
                "asbestos": "370",
                "construction": "210",
                "incinerable": "200",
                "recyclable": "135",
                "to-sort": "260",
            }
        ),
    },
    {
        "title": "XL 3m3",
        "handle": "pickup-3m3",
        "collection": PICKUPS_COLLECTION,
        "description": BIG_SACK_DESCRIPTION,
        "image": "bag_3m3.jpg",
        "options": {WASTE_TYPE: ["incinerable", "recyclable", "to-sort"]},
        "variants": _waste_variants(
            {
                "incinerable": "250",
                "recyclable": "170",
                "to-sort": "325",
            }
        ),
    },
]


def build_product_payload(
    product_data: Mapping[str, Any],
    *,
    collection_id: str,
    sales_channel_id: str,
    static_base_url: str,
) -> ProductCreate:
    """Turn one ``PRODUCTS`` entry into a published product payload."""
    return ProductCreate(
        title=product_data["title"],
        handle=product_data["handle"],
        collection_id=collection_id,
        description=product_data["description"],
        status=ProductStatus.published,
        images=[ProductImage(url=f"{static_base_url.rstrip('/')}/{product_data['image']}")],
        options=[
            ProductOptionCreate(title=title, values=values)
            for title, values in product_data["options"].items()
        ],
        variants=[
            ProductVariantCreate(
                title=variant["title"],
                options=variant["options"],
                prices=[VariantPrice(amount=variant["price"], currency_code=CURRENCY_CODE)],
            )
            for variant in product_data["variants"]
        ],
        sales_channels=[SalesChannelRef(id=sales_channel_id)],
    )


def tax_regions() -> list[TaxRegionCreate]:
    return [TaxRegionCreate(country_code=code) for code in COUNTRIES]
