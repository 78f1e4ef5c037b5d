"""SQL Product Repository — SQLAlchemy implementation of ProductRepository.

Invariants:
    - Each method is one transaction: commit on success, rollback + DatabaseError on failure
    - update()/delete() resolve the row first and raise ResourceNotFoundError before writing
    - find_all() orders by created_at (id breaks ties) in the listing's direction
    - ORM rows never escape: every result is converted to core.product.Product

Design Decisions:
    - Lookup for update/delete uses SELECT ... FOR UPDATE in the same transaction as the
      write, so a concurrent delete cannot slip between lookup and act (row lock on
      PostgreSQL; SQLite ignores the clause and serializes writers anyway)
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.domain_types import ProductId, SortDirection
from storefront.core.errors import ResourceNotFoundError
from storefront.core.listing import ListingSpec
from storefront.core.product import Product
from storefront.infrastructure.database import translate_db_errors
from storefront.models.product import Product as ProductModel

logger = logging.getLogger(__name__)


def _to_entity(row: ProductModel) -> Product:
    return Product(
        id=ProductId(row.id), name=row.name, price=row.price,
        created_at=row.created_at, updated_at=row.updated_at,
    )


class SqlProductRepository:
    """Products stored in the `products` table."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def create(self, product: Product) -> None:
        async with translate_db_errors(self._db, "insert"):
            row = ProductModel(id=product.id, name=product.name, price=product.price)
            self._db.add(row)
            await self._db.commit()
            product.created_at = row.created_at
            product.updated_at = row.updated_at
        logger.info("Product created", extra={"product_id": str(product.id)})

    async def find_all(self, listing: ListingSpec) -> list[Product]:
        if listing.sort_direction is SortDirection.DESC:
            order = (ProductModel.created_at.desc(), ProductModel.id.desc())
        else:
            order = (ProductModel.created_at.asc(), ProductModel.id.asc())
        query = select(ProductModel).order_by(*order)
        if listing.use_pagination:
            query = query.offset(listing.offset).limit(listing.limit)
        async with translate_db_errors(self._db, "query"):
            result = await self._db.execute(query)
            return [_to_entity(row) for row in result.scalars().all()]

    async def find_by_id(self, product_id: ProductId) -> Product:
        async with translate_db_errors(self._db, "query"):
            row = await self._get_row(product_id)
            return _to_entity(row)

    async def update(self, product: Product) -> None:
        async with translate_db_errors(self._db, "update"):
            row = await self._get_row(product.id, for_update=True)
            row.name = product.name
            row.price = product.price
            await self._db.commit()
            product.created_at = row.created_at
            product.updated_at = row.updated_at
        logger.info("Product updated", extra={"product_id": str(product.id)})

    async def delete(self, product_id: ProductId) -> None:
        async with translate_db_errors(self._db, "delete"):
            row = await self._get_row(product_id, for_update=True)
            await self._db.delete(row)
            await self._db.commit()
        logger.info("Product deleted", extra={"product_id": str(product_id)})

    async def _get_row(
        self, product_id: ProductId, for_update: bool = False,
    ) -> ProductModel:
        query = select(ProductModel).where(ProductModel.id == product_id)
        if for_update:
            query = query.with_for_update()
        result = await self._db.execute(query)
        row = result.scalar_one_or_none()
        if row is None:
            await self._db.rollback()
            raise ResourceNotFoundError("Product", str(product_id))
        return row
