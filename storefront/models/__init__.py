"""ORM Models — SQLAlchemy declarative models for all persisted entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - ORM classes never leave infrastructure/: repositories convert them to core entities

Design Decisions:
    - One file per table for locality
    - All models imported here so Base.metadata is complete for create_all and Alembic
"""

from storefront.models.product import Product  # noqa: F401
from storefront.models.user import User  # noqa: F401
