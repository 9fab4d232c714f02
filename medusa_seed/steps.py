"""The seed steps, in execution order.

Each step is an async function taking the shared :class:`SeedContext`, reading
the ids earlier steps stored on it and storing its own records for later
steps.  ``SEED_STEPS`` fixes the order; :mod:`medusa_seed.runner` executes it.

Only the default sales channel is looked up before being created.  Every other
record is created unconditionally unless ``SeedOptions.skip_existing`` is set,
in which case each step first looks for its record and reuses it.
"""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Any, TypeVar

import httpx

from medusa_seed import catalog
from medusa_seed.config import Settings
from medusa_seed.errors import CollectionNotFoundError, MissingRecordError
from medusa_seed.schemas import (
    ApiKey,
    FulfillmentSet,
    Product,
    Region,
    SalesChannel,
    SalesChannelCreate,
    ShippingOption,
    ShippingProfile,
    StockLocation,
    Store,
    StoreUpdate,
    TaxRegion,
)
from medusa_seed.services import (
    create_api_key,
    create_collection,
    create_fulfillment_set,
    create_product,
    create_region,
    create_service_zone,
    create_sales_channel,
    create_shipping_option,
    create_shipping_profile,
    create_stock_location,
    create_tax_region,
    link_fulfillment_providers_to_stock_location,
    link_sales_channels_to_api_key,
    link_sales_channels_to_stock_location,
    list_api_keys,
    list_collections,
    list_products,
    list_regions,
    list_sales_channels,
    list_shipping_options,
    list_shipping_profiles,
    list_stock_locations,
    list_stores,
    list_tax_regions,
    update_store,
)

logger = logging.getLogger(__name__)


@dataclass
class SeedOptions:
    skip_existing: bool = False
    static_base_url: str = "http://localhost:9000/static"

    @classmethod
    def from_settings(cls, settings: Settings) -> "SeedOptions":
        return cls(
            skip_existing=settings.seed_skip_existing,
            static_base_url=settings.static_base_url,
        )


@dataclass
class SeedContext:
    """Admin client, options, and every record produced so far."""

    client: httpx.AsyncClient
    options: SeedOptions = field(default_factory=SeedOptions)

    store: Store | None = None
    sales_channel: SalesChannel | None = None
    region: Region | None = None
    tax_regions: list[TaxRegion] = field(default_factory=list)
    shipping_profile: ShippingProfile | None = None
    stock_location: StockLocation | None = None
    fulfillment_sets: dict[str, FulfillmentSet] = field(default_factory=dict)
    shipping_option: ShippingOption | None = None
    api_key: ApiKey | None = None
    # collection title -> collection id
    collection_ids: dict[str, str] = field(default_factory=dict)
    products: list[Product] = field(default_factory=list)

    def collection_id(self, title: str) -> str:
        """Return the id of the collection titled *title*.

        Raises :class:`CollectionNotFoundError` if no such collection was seeded.
        """
        try:
            return self.collection_ids[title]
        except KeyError:
            raise CollectionNotFoundError(title) from None


T = TypeVar("T")


def require(value: T | None, what: str) -> T:
    """Return *value*, or raise :class:`MissingRecordError` if an earlier step did not set it."""
    if value is None:
        raise MissingRecordError(f"{what} has not been seeded yet")
    return value


# ---------------------------------------------------------------------------
# Store
# ---------------------------------------------------------------------------


async def seed_store(ctx: SeedContext) -> Store:
    """Ensure the default sales channel exists and make the store CHF-only."""
    logger.info("Seeding store data...")
    stores = await list_stores(ctx.client)
    if not stores:
        raise MissingRecordError("The backend has no store to configure")
    if len(stores) > 1:
        logger.warning("Found %d stores, configuring the first: %s", len(stores), stores[0].id)
    store = stores[0]

    channels = await list_sales_channels(ctx.client, name=catalog.DEFAULT_SALES_CHANNEL_NAME)
    if channels:
        sales_channel = channels[0]
        logger.info("Sales channel already exists: %s", sales_channel.name)
    else:
        sales_channel = await create_sales_channel(
            ctx.client, SalesChannelCreate(name=catalog.DEFAULT_SALES_CHANNEL_NAME)
        )
    ctx.sales_channel = sales_channel

    ctx.store = await update_store(
        ctx.client,
        store.id,
        StoreUpdate(
            supported_currencies=catalog.SUPPORTED_CURRENCIES,
            default_sales_channel_id=sales_channel.id,
        ),
    )
    return ctx.store


# ---------------------------------------------------------------------------
# Region and tax regions
# ---------------------------------------------------------------------------


async def seed_region(ctx: SeedContext) -> Region:
    logger.info("Seeding region data...")
    region: Region | None = None
    if ctx.options.skip_existing:
        existing = await list_regions(ctx.client, name=catalog.REGION.name)
        if existing:
            region = existing[0]
            logger.info("Region already exists: %s", region.name)
    if region is None:
        region = await create_region(ctx.client, catalog.REGION)
    ctx.region = region
    logger.info("Finished seeding regions.")
    return region


async def seed_tax_regions(ctx: SeedContext) -> list[TaxRegion]:
    logger.info("Seeding tax regions...")
    created: list[TaxRegion] = []
    for payload in catalog.tax_regions():
        if ctx.options.skip_existing:
            existing = [
                tax_region
                for tax_region in await list_tax_regions(
                    ctx.client, country_code=payload.country_code
                )
                # Province-level children share the country code.
                if tax_region.province_code == payload.province_code
            ]
            if existing:
                logger.info("Tax region already exists: %s", payload.country_code)
                created.append(existing[0])
                continue
        created.append(await create_tax_region(ctx.client, payload))
    ctx.tax_regions = created
    logger.info("Finished seeding tax regions.")
    return created


# ---------------------------------------------------------------------------
# Shipping
# ---------------------------------------------------------------------------


async def seed_shipping_profile(ctx: SeedContext) -> ShippingProfile:
    profile: ShippingProfile | None = None
    if ctx.options.skip_existing:
        existing = await list_shipping_profiles(ctx.client, name=catalog.SHIPPING_PROFILE.name)
        if existing:
            profile = existing[0]
            logger.info("Shipping profile already exists: %s", profile.name)
    if profile is None:
        profile = await create_shipping_profile(ctx.client, catalog.SHIPPING_PROFILE)
    ctx.shipping_profile = profile
    return profile


async def seed_stock_location(ctx: SeedContext) -> StockLocation:
    """Create the stock location and link it to the manual provider and the sales channel."""
    sales_channel = require(ctx.sales_channel, "Default sales channel")

    location: StockLocation | None = None
    if ctx.options.skip_existing:
        existing = await list_stock_locations(ctx.client, name=catalog.STOCK_LOCATION.name)
        if existing:
            location = existing[0]
            logger.info("Stock location already exists: %s", location.name)
    if location is None:
        location = await create_stock_location(ctx.client, catalog.STOCK_LOCATION)

    if catalog.FULFILLMENT_PROVIDER_ID not in {p.id for p in location.fulfillment_providers}:
        location = await link_fulfillment_providers_to_stock_location(
            ctx.client, location.id, [catalog.FULFILLMENT_PROVIDER_ID]
        )
    if sales_channel.id not in {sc.id for sc in location.sales_channels}:
        location = await link_sales_channels_to_stock_location(
            ctx.client, location.id, [sales_channel.id]
        )

    ctx.stock_location = location
    return location


async def seed_fulfillment_sets(ctx: SeedContext) -> dict[str, FulfillmentSet]:
    location = require(ctx.stock_location, "Stock location")
    for payload in catalog.FULFILLMENT_SETS:
        fulfillment_set = None
        if ctx.options.skip_existing:
            fulfillment_set = location.fulfillment_set(payload.name)
        if fulfillment_set is not None:
            logger.info("Fulfillment set already exists: %s", payload.name)
            # A set left behind by an interrupted run may lack its zones.
            existing_zones = {zone.name for zone in fulfillment_set.service_zones}
            for zone in payload.service_zones:
                if zone.name not in existing_zones:
                    logger.info("Adding missing service zone: %s", zone.name)
                    fulfillment_set = await create_service_zone(
                        ctx.client, fulfillment_set.id, zone
                    )
        else:
            fulfillment_set = await create_fulfillment_set(ctx.client, location.id, payload)
        ctx.fulfillment_sets[payload.name] = fulfillment_set
    return ctx.fulfillment_sets


async def seed_shipping_option(ctx: SeedContext) -> ShippingOption:
    """Create the flat-rate standard option on the bags service zone."""
    bags = require(ctx.fulfillment_sets.get(catalog.BAGS_FULFILLMENT_SET), "Bags fulfillment set")
    profile = require(ctx.shipping_profile, "Shipping profile")
    region = require(ctx.region, "Region")
    service_zone = bags.service_zone()

    logger.info("Creating Bag Standard Shipping Option...")
    option: ShippingOption | None = None
    if ctx.options.skip_existing:
        existing = await list_shipping_options(ctx.client, service_zone_id=service_zone.id)
        option = next((o for o in existing if o.name == catalog.STANDARD_SHIPPING_NAME), None)
        if option is not None:
            logger.info("Shipping option already exists: %s", option.name)
    if option is None:
        option = await create_shipping_option(
            ctx.client,
            catalog.standard_shipping_option(
                service_zone_id=service_zone.id,
                shipping_profile_id=profile.id,
                region_id=region.id,
            ),
        )
    ctx.shipping_option = option
    return option


# ---------------------------------------------------------------------------
# Publishable API key
# ---------------------------------------------------------------------------


async def seed_api_key(ctx: SeedContext) -> ApiKey:
    sales_channel = require(ctx.sales_channel, "Default sales channel")
    payload = catalog.PUBLISHABLE_API_KEY

    logger.info("Seeding publishable API key data...")
    api_key: ApiKey | None = None
    if ctx.options.skip_existing:
        existing = await list_api_keys(ctx.client, title=payload.title, type=payload.type.value)
        if existing:
            api_key = existing[0]
            logger.info("API key already exists: %s", api_key.title)
    if api_key is None:
        api_key = await create_api_key(ctx.client, payload)

    if sales_channel.id not in {sc.id for sc in api_key.sales_channels}:
        api_key = await link_sales_channels_to_api_key(ctx.client, api_key.id, [sales_channel.id])
    ctx.api_key = api_key
    logger.info("Finished seeding publishable API key data.")
    return api_key


# ---------------------------------------------------------------------------
# Collections and products
# ---------------------------------------------------------------------------


async def seed_collections(ctx: SeedContext) -> dict[str, str]:
    """Create the collections and record their ids by title."""
    logger.info("Seeding product data...")
    for payload in catalog.COLLECTIONS:
        collection = None
        if ctx.options.skip_existing:
            existing = await list_collections(ctx.client, handle=payload.handle)
            if existing:
                collection = existing[0]
                logger.info("Collection already exists: %s", collection.title)
        if collection is None:
            collection = await create_collection(ctx.client, payload)
        ctx.collection_ids[collection.title] = collection.id
    return ctx.collection_ids


async def seed_products(ctx: SeedContext) -> list[Product]:
    sales_channel = require(ctx.sales_channel, "Default sales channel")

    # Resolve every collection before creating anything.
    payloads = [
        catalog.build_product_payload(
            product_data,
            collection_id=ctx.collection_id(product_data["collection"]),
            sales_channel_id=sales_channel.id,
            static_base_url=ctx.options.static_base_url,
        )
        for product_data in catalog.PRODUCTS
    ]

    for payload in payloads:
        if ctx.options.skip_existing:
            existing = await list_products(ctx.client, handle=payload.handle)
            if existing:
                logger.info("Product already exists: %s", payload.handle)
                ctx.products.append(existing[0])
                continue
        product = await create_product(ctx.client, payload)
        logger.debug("Created product %s (%d variants)", product.handle, len(product.variants))
        ctx.products.append(product)

    logger.info("Finished seeding product data.")
    return ctx.products


# ---------------------------------------------------------------------------
# Step order
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Step:
    name: str
    run: Callable[[SeedContext], Awaitable[Any]]


SEED_STEPS: tuple[Step, ...] = (
    Step("store", seed_store),
    Step("regions", seed_region),
    Step("tax_regions", seed_tax_regions),
    Step("shipping_profile", seed_shipping_profile),
    Step("stock_location", seed_stock_location),
    Step("fulfillment_sets", seed_fulfillment_sets),
    Step("shipping_option", seed_shipping_option),
    Step("api_key", seed_api_key),
    Step("collections", seed_collections),
    Step("products", seed_products),
)
