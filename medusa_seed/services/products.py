"""Product collection and product operations."""

import httpx

from medusa_seed.schemas.product import Collection, CollectionCreate, Product, ProductCreate
from medusa_seed.services.base import request_json


async def list_collections(
    client: httpx.AsyncClient, *, handle: str | None = None
) -> list[Collection]:
    body = await request_json(client, "GET", "/admin/collections", params={"handle": handle})
    return [Collection.model_validate(item) for item in body["collections"]]


async def create_collection(client: httpx.AsyncClient, payload: CollectionCreate) -> Collection:
    body = await request_json(client, "POST", "/admin/collections", json=payload.to_json())
    return Collection.model_validate(body["collection"])


async def list_products(client: httpx.AsyncClient, *, handle: str | None = None) -> list[Product]:
    body = await request_json(
        client,
        "GET",
        "/admin/products",
        params={"handle": handle, "fields": "*variants,*variants.prices"},
    )
    return [Product.model_validate(item) for item in body["products"]]


async def create_product(client: httpx.AsyncClient, payload: ProductCreate) -> Product:
    """Create one product with its options, variants and prices."""
    body = await request_json(
        client,
        "POST",
        "/admin/products",
        params={"fields": "*variants,*variants.prices"},
        json=payload.to_json(),
    )
    return Product.model_validate(body["product"])
