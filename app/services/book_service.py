"""Book Service — list, get, create, update and delete book records.

Invariants:
    - Storage reached only through the injected BookRepository
    - Every mutating operation makes exactly one persistence call
    - Field validation runs before persistence (core/book_fields.py)
    - Failures leave as typed BookRecordError kinds; api/error_handlers.py maps them

Design Decisions:
    - Absent lookups mapped explicitly to BookRecordNotFoundError (no unchecked unwrap)
    - Any storage failure on delete reported as not found, naming the id
    - Update overwrites name, description and rating on the stored record; id untouched
"""

import logging

from app.core.book_fields import validate_book_fields
from app.core.domain_types import BookId
from app.core.errors import (
    BadArgumentError, BookRecordNotFoundError, BookValidationError,
)
from app.core.repository_protocols import BookLike, BookRepository
from app.models.book import build_book

logger = logging.getLogger(__name__)


def _raise_on_invalid_fields(
    name: object, description: object, rating: object,
) -> None:
    error = validate_book_fields(name, description, rating)
    if error:
        raise BookValidationError(error["message"], error["field"])


class BookService:
    """Thin translation from book operations to repository calls."""

    def __init__(self, repository: BookRepository):
        self.repository = repository

    async def list_books(self) -> list[BookLike]:
        """All book records in storage order."""
        return await self.repository.find_all()

    async def get_book(self, book_id: BookId) -> BookLike:
        book = await self.repository.find_by_id(book_id)
        if book is None:
            raise BookRecordNotFoundError(
                f"Not found book record with id = {book_id}", book_id,
            )
        return book

    async def create_book(
        self, name: str, description: str | None = None, rating: int = 0,
    ) -> BookLike:
        """Validate and persist a new book. The store assigns the id."""
        _raise_on_invalid_fields(name, description, rating)
        saved = await self.repository.save(build_book(name, description, rating))
        logger.info(f"Book {saved.id} created", extra={"book_id": saved.id})
        return saved

    async def update_book(
        self,
        book_id: BookId | None,
        name: str,
        description: str | None = None,
        rating: int = 0,
    ) -> BookLike:
        """Overwrite name, description and rating of an existing book."""
        if book_id is None:
            raise BadArgumentError("Book id must not be null for update", "id")
        _raise_on_invalid_fields(name, description, rating)

        current = await self.repository.find_by_id(book_id)
        if current is None:
            raise BookRecordNotFoundError(
                f"Not found book record with id = {book_id}", book_id,
            )
        current.name = name
        current.description = description
        current.rating = rating
        saved = await self.repository.save(current)
        logger.info(f"Book {book_id} updated", extra={"book_id": book_id})
        return saved

    async def update_book_at(
        self,
        path_id: BookId,
        body_id: BookId | None,
        name: str,
        description: str | None = None,
        rating: int = 0,
    ) -> BookLike:
        """Update addressed by path. A body id, when given, must match it."""
        if body_id is not None and body_id != path_id:
            raise BadArgumentError(
                f"Book id {body_id} does not match path id {path_id}", "id",
            )
        return await self.update_book(path_id, name, description, rating)

    async def delete_book(self, book_id: BookId) -> None:
        """Delete a book. Any storage failure is reported as not found."""
        try:
            await self.repository.delete_by_id(book_id)
        except Exception as e:
            logger.warning(
                f"Delete of book {book_id} failed: {e!r}", extra={"book_id": book_id},
            )
            raise BookRecordNotFoundError(
                f"Not found book with id = {book_id}", book_id,
            ) from e
        logger.info(f"Book {book_id} deleted", extra={"book_id": book_id})
