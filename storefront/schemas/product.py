"""Product Schemas — Pydantic models for product API boundaries.

Invariants:
    - Request bodies only decode types; entity rules (name required, price > 0) are
      enforced by core.product so the error reasons stay uniform
    - Missing fields decode to empty/zero so the entity reports which rule failed

Design Decisions:
    - from_attributes on the response: built straight from core.product.Product
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict


class ProductInput(BaseModel):
    """Create/update body."""
    name: str = ""
    price: float = 0


class ProductResponse(BaseModel):
    """Product as returned to clients."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    price: float
    created_at: datetime | None = None
    updated_at: datetime | None = None
