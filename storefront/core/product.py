"""Product Entity — a sellable item with a name and a strictly positive price.

Invariants:
    - A Product built by new_product() always has a non-empty name and price > 0
    - Rule order is fixed: name, then price == 0, then non-finite or negative price
    - id is assigned once at construction and never reassigned
    - created_at/updated_at are owned by the persistence layer (None until stored)

Design Decisions:
    - Mutable dataclass: the update handler legitimately changes name/price in place,
      so validate() stays re-invocable on an existing instance
"""

import math
from dataclasses import dataclass, field
from datetime import datetime

from storefront.core.domain_types import ProductId
from storefront.core.errors import ValidationError, ValidationReason
from storefront.core.identifiers import new_id


@dataclass
class Product:
    """Catalog item. Construct through new_product()."""
    id: ProductId
    name: str
    price: float
    created_at: datetime | None = field(default=None, compare=False)
    updated_at: datetime | None = field(default=None, compare=False)

    def validate(self) -> None:
        """Raise ValidationError if name or price break the invariant."""
        if not self.name:
            raise ValidationError(ValidationReason.NAME_REQUIRED)
        if self.price == 0:
            raise ValidationError(ValidationReason.PRICE_REQUIRED)
        if not math.isfinite(self.price) or self.price < 0:
            raise ValidationError(ValidationReason.INVALID_PRICE)


def new_product(name: str, price: float) -> Product:
    """Build a validated Product with a fresh id."""
    product = Product(id=ProductId(new_id()), name=name, price=price)
    product.validate()
    return product
