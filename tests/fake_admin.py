"""In-memory stand-in for the commerce backend's admin API.

Implements just the endpoints the seeder calls, with the same response
envelopes (``{"region": {...}}`` / ``{"regions": [...], "count": n}``) and
error body (``{"type": ..., "message": ...}``).  Collection and product handles
are unique, as on the real backend, so re-running a seed without
``skip_existing`` fails at the collections step.

Tests drive it in-process through ``httpx.ASGITransport`` and inspect the
:class:`FakeBackend` state directly.
"""

import base64
import uuid
from typing import Any

from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.responses import JSONResponse

ADMIN_EMAIL = "admin@medusa-test.com"
ADMIN_PASSWORD = "supersecret"
ADMIN_API_KEY = "sk_test_0123456789abcdef"

# Query parameters that select fields or pages rather than filter records.
_NON_FILTER_PARAMS = {"fields", "limit", "offset", "order"}


def new_id(prefix: str) -> str:
    return f"{prefix}_{uuid.uuid4().hex[:26].upper()}"


class FakeAdminError(Exception):
    def __init__(self, status_code: int, error_type: str, message: str) -> None:
        self.status_code = status_code
        self.error_type = error_type
        self.message = message
        super().__init__(message)


def _require(payload: dict[str, Any], *keys: str) -> None:
    missing = [key for key in keys if payload.get(key) in (None, "")]
    if missing:
        raise FakeAdminError(400, "invalid_data", f"Missing required fields: {', '.join(missing)}")


def _filter(records: list[dict[str, Any]], params: dict[str, str]) -> list[dict[str, Any]]:
    filters = {k: v for k, v in params.items() if k not in _NON_FILTER_PARAMS}
    return [r for r in records if all(str(r.get(k)) == v for k, v in filters.items())]


def _find(records: list[dict[str, Any]], record_id: str, kind: str) -> dict[str, Any]:
    for record in records:
        if record["id"] == record_id:
            return record
    raise FakeAdminError(404, "not_found", f"{kind} with id: {record_id} was not found")


class FakeBackend:
    """All records held by the fake, plus link tables and failure injection."""

    def __init__(self) -> None:
        self.stores: list[dict[str, Any]] = [
            {
                "id": new_id("store"),
                "name": "Medusa Store",
                "supported_currencies": [],
                "default_sales_channel_id": None,
            }
        ]
        self.sales_channels: list[dict[str, Any]] = []
        self.regions: list[dict[str, Any]] = []
        self.tax_regions: list[dict[str, Any]] = []
        self.shipping_profiles: list[dict[str, Any]] = []
        self.stock_locations: list[dict[str, Any]] = []
        self.fulfillment_sets: list[dict[str, Any]] = []
        self.shipping_options: list[dict[str, Any]] = []
        self.api_keys: list[dict[str, Any]] = []
        self.collections: list[dict[str, Any]] = []
        self.products: list[dict[str, Any]] = []

        self.fulfillment_providers = {"manual_manual"}
        # stock location id -> linked sales channel / provider ids
        self.location_sales_channels: dict[str, list[str]] = {}
        self.location_providers: dict[str, list[str]] = {}
        # api key id -> linked sales channel ids
        self.api_key_sales_channels: dict[str, list[str]] = {}

        self.tokens: set[str] = set()
        # (method, path) -> (status, message), consumed by the next matching request
        self.failures: dict[tuple[str, str], tuple[int, str]] = {}
        # (method, path, X-Request-Id) of every request received
        self.requests: list[tuple[str, str, str]] = []

    def fail_next(
        self, method: str, path: str, status_code: int = 500, message: str = "boom"
    ) -> None:
        self.failures[(method.upper(), path)] = (status_code, message)

    # -- rendering ---------------------------------------------------------

    def render_region(self, region: dict[str, Any]) -> dict[str, Any]:
        return {**region, "countries": [{"iso_2": code} for code in region["countries"]]}

    def render_fulfillment_set(self, fulfillment_set: dict[str, Any]) -> dict[str, Any]:
        return {k: v for k, v in fulfillment_set.items() if k != "stock_location_id"}

    def render_stock_location(self, location: dict[str, Any]) -> dict[str, Any]:
        return {
            **location,
            "sales_channels": [
                {"id": sc_id} for sc_id in self.location_sales_channels.get(location["id"], [])
            ],
            "fulfillment_providers": [
                {"id": p_id} for p_id in self.location_providers.get(location["id"], [])
            ],
            "fulfillment_sets": [
                self.render_fulfillment_set(fs)
                for fs in self.fulfillment_sets
                if fs["stock_location_id"] == location["id"]
            ],
        }

    def render_api_key(self, api_key: dict[str, Any]) -> dict[str, Any]:
        return {
            **api_key,
            "sales_channels": [
                {"id": sc_id} for sc_id in self.api_key_sales_channels.get(api_key["id"], [])
            ],
        }

    # -- convenience for assertions ---------------------------------------

    def variant_count(self) -> int:
        return sum(len(product["variants"]) for product in self.products)

    def product_by_handle(self, handle: str) -> dict[str, Any]:
        return next(p for p in self.products if p["handle"] == handle)


def create_fake_admin(backend: FakeBackend | None = None) -> FastAPI:
    backend = backend or FakeBackend()
    app = FastAPI()
    app.state.backend = backend

    @app.exception_handler(FakeAdminError)
    async def fake_admin_error_handler(request: Request, exc: FakeAdminError) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={"type": exc.error_type, "message": exc.message},
        )

    @app.middleware("http")
    async def record_and_inject_failures(request: Request, call_next: Any) -> Any:
        backend.requests.append(
            (request.method, request.url.path, request.headers.get("X-Request-Id", ""))
        )
        failure = backend.failures.pop((request.method, request.url.path), None)
        if failure is not None:
            status_code, message = failure
            return JSONResponse(
                status_code=status_code, content={"type": "unexpected_state", "message": message}
            )
        return await call_next(request)

    async def require_admin(request: Request) -> None:
        header = request.headers.get("Authorization", "")
        scheme, _, credentials = header.partition(" ")
        if scheme == "Bearer" and credentials in backend.tokens:
            return
        if scheme == "Basic":
            user, _, _ = base64.b64decode(credentials).decode().partition(":")
            if user == ADMIN_API_KEY:
                return
        raise FakeAdminError(401, "unauthorized", "Unauthorized")

    @app.post("/auth/user/emailpass")
    async def login(payload: dict[str, Any]) -> dict[str, Any]:
        if payload.get("email") != ADMIN_EMAIL or payload.get("password") != ADMIN_PASSWORD:
            raise FakeAdminError(401, "unauthorized", "Invalid email or password")
        token = uuid.uuid4().hex
        backend.tokens.add(token)
        return {"token": token}

    admin = APIRouter(prefix="/admin", dependencies=[Depends(require_admin)])

    # -- stores and sales channels -----------------------------------------

    @admin.get("/stores")
    async def list_stores(request: Request) -> dict[str, Any]:
        stores = _filter(backend.stores, dict(request.query_params))
        return {"stores": stores, "count": len(stores)}

    @admin.post("/stores/{store_id}")
    async def update_store(store_id: str, payload: dict[str, Any]) -> dict[str, Any]:
        store = _find(backend.stores, store_id, "Store")
        if "default_sales_channel_id" in payload:
            _find(backend.sales_channels, payload["default_sales_channel_id"], "Sales channel")
        store.update(payload)
        return {"store": store}

    @admin.get("/sales-channels")
    async def list_sales_channels(request: Request) -> dict[str, Any]:
        channels = _filter(backend.sales_channels, dict(request.query_params))
        return {"sales_channels": channels, "count": len(channels)}

    @admin.post("/sales-channels")
    async def create_sales_channel(payload: dict[str, Any]) -> dict[str, Any]:
        _require(payload, "name")
        channel = {"id": new_id("sc"), "description": None, **payload}
        backend.sales_channels.append(channel)
        return {"sales_channel": channel}

    # -- regions -----------------------------------------------------------

    @admin.get("/regions")
    async def list_regions(request: Request) -> dict[str, Any]:
        regions = _filter(backend.regions, dict(request.query_params))
        return {"regions": [backend.render_region(r) for r in regions], "count": len(regions)}

    @admin.post("/regions")
    async def create_region(payload: dict[str, Any]) -> dict[str, Any]:
        _require(payload, "name", "currency_code")
        region = {"id": new_id("reg"), "countries": [], "payment_providers": [], **payload}
        backend.regions.append(region)
        return {"region": backend.render_region(region)}

    @admin.get("/tax-regions")
    async def list_tax_regions(request: Request) -> dict[str, Any]:
        tax_regions = _filter(backend.tax_regions, dict(request.query_params))
        return {"tax_regions": tax_regions, "count": len(tax_regions)}

    @admin.post("/tax-regions")
    async def create_tax_region(payload: dict[str, Any]) -> dict[str, Any]:
        _require(payload, "country_code")
        tax_region = {"id": new_id("txreg"), "province_code": None, **payload}
        backend.tax_regions.append(tax_region)
        return {"tax_region": tax_region}

    # -- shipping profiles, stock locations, fulfillment -------------------

    @admin.get("/shipping-profiles")
    async def list_shipping_profiles(request: Request) -> dict[str, Any]:
        profiles = _filter(backend.shipping_profiles, dict(request.query_params))
        return {"shipping_profiles": profiles, "count": len(profiles)}

    @admin.post("/shipping-profiles")
    async def create_shipping_profile(payload: dict[str, Any]) -> dict[str, Any]:
        _require(payload, "name", "type")
        profile = {"id": new_id("sp"), **payload}
        backend.shipping_profiles.append(profile)
        return {"shipping_profile": profile}

    @admin.get("/stock-locations")
    async def list_stock_locations(request: Request) -> dict[str, Any]:
        locations = _filter(backend.stock_locations, dict(request.query_params))
        return {
            "stock_locations": [backend.render_stock_location(loc) for loc in locations],
            "count": len(locations),
        }

    @admin.post("/stock-locations")
    async def create_stock_location(payload: dict[str, Any]) -> dict[str, Any]:
        _require(payload, "name")
        location = {"id": new_id("sloc"), "address": None, **payload}
        backend.stock_locations.append(location)
        return {"stock_location": backend.render_stock_location(location)}

    @admin.post("/stock-locations/{location_id}/sales-channels")
    async def link_location_sales_channels(
        location_id: str, payload: dict[str, Any]
    ) -> dict[str, Any]:
        location = _find(backend.stock_locations, location_id, "Stock location")
        linked = backend.location_sales_channels.setdefault(location_id, [])
        for sc_id in payload.get("add", []):
            _find(backend.sales_channels, sc_id, "Sales channel")
            if sc_id not in linked:
                linked.append(sc_id)
        return {"stock_location": backend.render_stock_location(location)}

    @admin.post("/stock-locations/{location_id}/fulfillment-providers")
    async def link_location_providers(location_id: str, payload: dict[str, Any]) -> dict[str, Any]:
        location = _find(backend.stock_locations, location_id, "Stock location")
        linked = backend.location_providers.setdefault(location_id, [])
        for provider_id in payload.get("add", []):
            if provider_id not in backend.fulfillment_providers:
                raise FakeAdminError(
                    404, "not_found", f"Fulfillment provider {provider_id} was not found"
                )
            if provider_id not in linked:
                linked.append(provider_id)
        return {"stock_location": backend.render_stock_location(location)}

    @admin.post("/stock-locations/{location_id}/fulfillment-sets")
    async def create_location_fulfillment_set(
        location_id: str, payload: dict[str, Any]
    ) -> dict[str, Any]:
        location = _find(backend.stock_locations, location_id, "Stock location")
        _require(payload, "name", "type")
        if set(payload) - {"name", "type"}:
            raise FakeAdminError(400, "invalid_data", "Unrecognized fields on fulfillment set")
        backend.fulfillment_sets.append(
            {
                "id": new_id("fuset"),
                "name": payload["name"],
                "type": payload["type"],
                "service_zones": [],
                "stock_location_id": location_id,
            }
        )
        return {"stock_location": backend.render_stock_location(location)}

    @admin.post("/fulfillment-sets/{set_id}/service-zones")
    async def create_service_zone(set_id: str, payload: dict[str, Any]) -> dict[str, Any]:
        fulfillment_set = _find(backend.fulfillment_sets, set_id, "Fulfillment set")
        _require(payload, "name")
        zone = {
            "id": new_id("serzo"),
            "name": payload["name"],
            "geo_zones": [{"id": new_id("fgz"), **geo} for geo in payload.get("geo_zones", [])],
        }
        fulfillment_set["service_zones"].append(zone)
        return {"fulfillment_set": backend.render_fulfillment_set(fulfillment_set)}

    @admin.get("/shipping-options")
    async def list_shipping_options(request: Request) -> dict[str, Any]:
        options = _filter(backend.shipping_options, dict(request.query_params))
        return {"shipping_options": options, "count": len(options)}

    @admin.post("/shipping-options")
    async def create_shipping_option(payload: dict[str, Any]) -> dict[str, Any]:
        _require(
            payload, "name", "price_type", "provider_id", "service_zone_id", "shipping_profile_id"
        )
        zone_ids = {z["id"] for fs in backend.fulfillment_sets for z in fs["service_zones"]}
        if payload["service_zone_id"] not in zone_ids:
            raise FakeAdminError(404, "not_found", "Service zone was not found")
        _find(backend.shipping_profiles, payload["shipping_profile_id"], "Shipping profile")
        for price in payload.get("prices", []):
            if ("currency_code" in price) == ("region_id" in price):
                raise FakeAdminError(
                    400, "invalid_data", "Price must have either currency_code or region_id"
                )
            if "region_id" in price:
                _find(backend.regions, price["region_id"], "Region")
        option = {"id": new_id("so"), **payload}
        backend.shipping_options.append(option)
        return {"shipping_option": option}

    # -- api keys ----------------------------------------------------------

    @admin.get("/api-keys")
    async def list_api_keys(request: Request) -> dict[str, Any]:
        keys = _filter(backend.api_keys, dict(request.query_params))
        return {"api_keys": [backend.render_api_key(k) for k in keys], "count": len(keys)}

    @admin.post("/api-keys")
    async def create_api_key(payload: dict[str, Any]) -> dict[str, Any]:
        _require(payload, "title", "type")
        prefix = "pk" if payload["type"] == "publishable" else "sk"
        api_key = {"id": new_id("apk"), "token": f"{prefix}_{uuid.uuid4().hex}", **payload}
        backend.api_keys.append(api_key)
        return {"api_key": backend.render_api_key(api_key)}

    @admin.post("/api-keys/{api_key_id}/sales-channels")
    async def link_api_key_sales_channels(
        api_key_id: str, payload: dict[str, Any]
    ) -> dict[str, Any]:
        api_key = _find(backend.api_keys, api_key_id, "Api key")
        if api_key["type"] != "publishable":
            raise FakeAdminError(
                400, "invalid_data", "Sales channels can only be linked to publishable keys"
            )
        linked = backend.api_key_sales_channels.setdefault(api_key_id, [])
        for sc_id in payload.get("add", []):
            _find(backend.sales_channels, sc_id, "Sales channel")
            if sc_id not in linked:
                linked.append(sc_id)
        return {"api_key": backend.render_api_key(api_key)}

    # -- collections and products ------------------------------------------

    @admin.get("/collections")
    async def list_collections(request: Request) -> dict[str, Any]:
        collections = _filter(backend.collections, dict(request.query_params))
        return {"collections": collections, "count": len(collections)}

    @admin.post("/collections")
    async def create_collection(payload: dict[str, Any]) -> dict[str, Any]:
        _require(payload, "title")
        handle = payload.get("handle") or payload["title"].lower()
        if any(c["handle"] == handle for c in backend.collections):
            raise FakeAdminError(
                409,
                "duplicate_error",
                f"Product collection with handle: {handle}, already exists.",
            )
        collection = {"id": new_id("pcol"), **payload, "handle": handle}
        backend.collections.append(collection)
        return {"collection": collection}

    @admin.get("/products")
    async def list_products(request: Request) -> dict[str, Any]:
        products = _filter(backend.products, dict(request.query_params))
        return {"products": products, "count": len(products)}

    @admin.post("/products")
    async def create_product(payload: dict[str, Any]) -> dict[str, Any]:
        _require(payload, "title", "handle")
        if any(p["handle"] == payload["handle"] for p in backend.products):
            raise FakeAdminError(
                409,
                "duplicate_error",
                f"Product with handle: {payload['handle']}, already exists.",
            )
        if payload.get("collection_id"):
            _find(backend.collections, payload["collection_id"], "Product collection")
        for channel in payload.get("sales_channels", []):
            _find(backend.sales_channels, channel["id"], "Sales channel")

        declared = {o["title"]: o["values"] for o in payload.get("options", [])}
        variants = []
        for variant in payload.get("variants", []):
            for title, value in variant.get("options", {}).items():
                if value not in declared.get(title, []):
                    raise FakeAdminError(
                        400,
                        "invalid_data",
                        f"Option value {value} does not exist for option {title}",
                    )
            variants.append(
                {
                    "id": new_id("variant"),
                    "title": variant["title"],
                    "options": [
                        {"option": {"title": t}, "value": v}
                        for t, v in variant.get("options", {}).items()
                    ],
                    "prices": [{"id": new_id("price"), **p} for p in variant.get("prices", [])],
                }
            )
        product = {"id": new_id("prod"), **payload, "variants": variants}
        backend.products.append(product)
        return {"product": product}

    app.include_router(admin)
    return app
