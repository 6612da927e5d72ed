"""Book Repository — SQLAlchemy implementation of the BookRepository protocol.

Invariants:
    - Every mutating call commits exactly once (no cross-call transactions)
    - find_all returns records in storage order (ascending id)
    - delete_by_id raises DatabaseError for any failure, including an unknown id
    - All SQLAlchemy exceptions rolled back and re-raised as DatabaseError
    - Driver conversion failures (OverflowError for ids beyond INTEGER) on delete
      re-raised as DatabaseError

Design Decisions:
    - save() covers insert and update: add() is a no-op for a book already in
      the session, so one method persists both transient and loaded records
    - Repository receives its AsyncSession by constructor (no ambient lookup)
"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import BookId
from app.core.errors import DatabaseError, ErrorContext
from app.models.book import Book

logger = logging.getLogger(__name__)


class SqlAlchemyBookRepository:
    """Book record persistence over an async SQLAlchemy session."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_all(self) -> list[Book]:
        result = await self.db.execute(select(Book).order_by(Book.id))
        return list(result.scalars().all())

    async def find_by_id(self, book_id: BookId) -> Book | None:
        return await self.db.get(Book, book_id)

    async def save(self, book: Book) -> Book:
        """Insert or update a book and return it with its assigned id."""
        try:
            self.db.add(book)
            await self.db.commit()
            await self.db.refresh(book)
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"Failed to save book: {e}", extra={"book_id": book.id})
            raise DatabaseError(
                "Could not persist book record", "save",
                ErrorContext(book_id=book.id),
            ) from e
        return book

    async def delete_by_id(self, book_id: BookId) -> None:
        """Delete a book by id. Raises DatabaseError when nothing was deleted."""
        try:
            book = await self.db.get(Book, book_id)
            if book is None:
                raise DatabaseError(
                    f"No book record with id {book_id}", "delete",
                    ErrorContext(book_id=book_id),
                )
            await self.db.delete(book)
            await self.db.commit()
        except (SQLAlchemyError, OverflowError) as e:
            await self.db.rollback()
            logger.error(f"Failed to delete book: {e}", extra={"book_id": book_id})
            raise DatabaseError(
                "Could not delete book record", "delete",
                ErrorContext(book_id=book_id),
            ) from e
