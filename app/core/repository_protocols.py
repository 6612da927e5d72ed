"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - Storage accessed only through the BookRepository protocol
    - Implementations provided by shell via constructor injection

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
    - Async in Protocol: implementations do IO
"""

from typing import Protocol

from app.core.domain_types import BookId


class BookLike(Protocol):
    """Structural contract for Book objects handled by the service.

    Avoids coupling the service to the ORM model while giving mypy
    real type information (unlike Any).
    """
    id: int | None
    name: str
    description: str | None
    rating: int


class BookRepository(Protocol):
    """Contract for book record persistence — implemented by shell."""
    async def find_all(self) -> list[BookLike]: ...
    async def find_by_id(self, book_id: BookId) -> BookLike | None: ...
    async def save(self, book: BookLike) -> BookLike: ...
    async def delete_by_id(self, book_id: BookId) -> None: ...
