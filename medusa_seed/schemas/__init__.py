from .api_key import ApiKey, ApiKeyCreate, ApiKeyType
from .common import AdminErrorBody, AdminPayload, AdminRecord, Amount, LinkedRecord, LinkUpdate
from .fulfillment import (
    FulfillmentSet,
    FulfillmentSetCreate,
    FulfillmentSetType,
    GeoZone,
    ServiceZone,
    ServiceZoneCreate,
    ShippingProfile,
    ShippingProfileCreate,
)
from .product import (
    Collection,
    CollectionCreate,
    Product,
    ProductCreate,
    ProductImage,
    ProductOptionCreate,
    ProductStatus,
    ProductVariant,
    ProductVariantCreate,
    SalesChannelRef,
    VariantPrice,
)
from .region import Region, RegionCreate, TaxRegion, TaxRegionCreate
from .shipping_option import (
    ShippingOption,
    ShippingOptionCreate,
    ShippingOptionPrice,
    ShippingOptionType,
)
from .stock_location import StockLocation, StockLocationAddress, StockLocationCreate
from .store import SalesChannel, SalesChannelCreate, Store, StoreUpdate, SupportedCurrency

__all__ = [
    # common
    "AdminErrorBody",
    "AdminPayload",
    "AdminRecord",
    "Amount",
    "LinkedRecord",
    "LinkUpdate",
    # store
    "SalesChannel",
    "SalesChannelCreate",
    "Store",
    "StoreUpdate",
    "SupportedCurrency",
    # region
    "Region",
    "RegionCreate",
    "TaxRegion",
    "TaxRegionCreate",
    # fulfillment
    "FulfillmentSet",
    "FulfillmentSetCreate",
    "FulfillmentSetType",
    "GeoZone",
    "ServiceZone",
    "ServiceZoneCreate",
    "ShippingProfile",
    "ShippingProfileCreate",
    # stock location
    "StockLocation",
    "StockLocationAddress",
    "StockLocationCreate",
    # shipping option
    "ShippingOption",
    "ShippingOptionCreate",
    "ShippingOptionPrice",
    "ShippingOptionType",
    # api key
    "ApiKey",
    "ApiKeyCreate",
    "ApiKeyType",
    # product
    "Collection",
    "CollectionCreate",
    "Product",
    "ProductCreate",
    "ProductImage",
    "ProductOptionCreate",
    "ProductStatus",
    "ProductVariant",
    "ProductVariantCreate",
    "SalesChannelRef",
    "VariantPrice",
]
