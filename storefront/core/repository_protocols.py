"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection
    - Misses raise ResourceNotFoundError; store failures raise DatabaseError

Design Decisions:
    - Protocol over ABC: structural subtyping, so the SQLAlchemy repositories and
      the in-memory test doubles share no base class
    - Async in Protocol: boundary methods are async because implementations do IO,
      but core pure functions never await them — the shell orchestrates
"""

from typing import Protocol

from storefront.core.domain_types import ProductId
from storefront.core.listing import ListingSpec
from storefront.core.product import Product
from storefront.core.user import User


class ProductRepository(Protocol):
    """Contract for product persistence — implemented by shell."""
    async def create(self, product: Product) -> None: ...
    async def find_all(self, listing: ListingSpec) -> list[Product]: ...
    async def find_by_id(self, product_id: ProductId) -> Product: ...
    async def update(self, product: Product) -> None:
        """Must look the id up first and raise ResourceNotFoundError before writing."""
        ...
    async def delete(self, product_id: ProductId) -> None:
        """Must resolve the id first and raise ResourceNotFoundError before removing."""
        ...


class UserRepository(Protocol):
    """Contract for user persistence — implemented by shell."""
    async def create(self, user: User) -> None: ...
    async def find_by_email(self, email: str) -> User: ...


class TokenIssuer(Protocol):
    """Contract for signing and verifying bearer-token claims."""
    def issue(self, claims: dict) -> str: ...
    def verify(self, token: str) -> dict: ...
