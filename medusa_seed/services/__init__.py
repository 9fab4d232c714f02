from medusa_seed.services.api_keys import create_api_key, list_api_keys
from medusa_seed.services.auth import authenticate, fetch_admin_token
from medusa_seed.services.fulfillment import (
    create_fulfillment_set,
    create_service_zone,
    create_shipping_profile,
    list_shipping_profiles,
)
from medusa_seed.services.links import (
    link_fulfillment_providers_to_stock_location,
    link_sales_channels_to_api_key,
    link_sales_channels_to_stock_location,
)
from medusa_seed.services.products import (
    create_collection,
    create_product,
    list_collections,
    list_products,
)
from medusa_seed.services.regions import (
    create_region,
    create_tax_region,
    list_regions,
    list_tax_regions,
)
from medusa_seed.services.shipping_options import create_shipping_option, list_shipping_options
from medusa_seed.services.stock_locations import (
    create_stock_location,
    list_stock_locations,
)
from medusa_seed.services.stores import (
    create_sales_channel,
    list_sales_channels,
    list_stores,
    update_store,
)

__all__ = [
    # api keys
    "create_api_key",
    "list_api_keys",
    # auth
    "authenticate",
    "fetch_admin_token",
    # fulfillment
    "create_fulfillment_set",
    "create_service_zone",
    "create_shipping_profile",
    "list_shipping_profiles",
    # links
    "link_fulfillment_providers_to_stock_location",
    "link_sales_channels_to_api_key",
    "link_sales_channels_to_stock_location",
    # products
    "create_collection",
    "create_product",
    "list_collections",
    "list_products",
    # regions
    "create_region",
    "create_tax_region",
    "list_regions",
    "list_tax_regions",
    # shipping options
    "create_shipping_option",
    "list_shipping_options",
    # stock locations
    "create_stock_location",
    "list_stock_locations",
    # stores
    "create_sales_channel",
    "list_sales_channels",
    "list_stores",
    "update_store",
]
