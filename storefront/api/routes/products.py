"""Product Routes — CRUD over /products, guarded by a bearer token.

Invariants:
    - Every route requires a valid access token (require_access_token)
    - Path ids parsed with core.identifiers.parse_id → 400 before any lookup
    - Entity rules run in core.product; routes only map outcomes to status codes
    - Create re-reads the product by id so the response carries stored timestamps

Design Decisions:
    - page/limit/sort taken as raw strings: core.listing owns the parsing rules,
      so "abc" degrades to no pagination instead of a 400
    - Update builds a fresh Product with the existing id and runs validate() on it
"""

import logging

from fastapi import APIRouter, Depends, Query, Response, status

from storefront.api.dependencies import get_product_repository, require_access_token
from storefront.core.domain_types import ProductId
from storefront.core.identifiers import parse_id
from storefront.core.listing import normalize_listing
from storefront.core.product import Product, new_product
from storefront.core.repository_protocols import ProductRepository
from storefront.schemas.product import ProductInput, ProductResponse

logger = logging.getLogger(__name__)
router = APIRouter(
    prefix="/products", tags=["products"],
    dependencies=[Depends(require_access_token)],
)


@router.post(
    "", response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_product(
    body: ProductInput,
    products: ProductRepository = Depends(get_product_repository),
):
    """Create a product."""
    product = new_product(body.name, body.price)
    await products.create(product)
    return await products.find_by_id(product.id)


@router.get("", response_model=list[ProductResponse])
async def list_products(
    page: str | None = Query(None),
    limit: str | None = Query(None),
    sort: str | None = Query(None),
    products: ProductRepository = Depends(get_product_repository),
):
    """List products ordered by creation time, optionally paginated."""
    return await products.find_all(normalize_listing(page, limit, sort))


@router.get("/{product_id}", response_model=ProductResponse)
async def get_product(
    product_id: str,
    products: ProductRepository = Depends(get_product_repository),
):
    """Get a product by id."""
    return await products.find_by_id(ProductId(parse_id(product_id)))


@router.put("/{product_id}", response_model=ProductResponse)
async def update_product(
    product_id: str,
    body: ProductInput,
    products: ProductRepository = Depends(get_product_repository),
):
    """Replace a product's name and price; the id is preserved."""
    existing = await products.find_by_id(ProductId(parse_id(product_id)))
    product = Product(
        id=existing.id, name=body.name, price=body.price,
        created_at=existing.created_at,
    )
    product.validate()
    await products.update(product)
    return product


@router.delete("/{product_id}", status_code=status.HTTP_200_OK)
async def delete_product(
    product_id: str,
    products: ProductRepository = Depends(get_product_repository),
):
    """Delete a product by id."""
    await products.delete(ProductId(parse_id(product_id)))
    return Response(status_code=status.HTTP_200_OK)
