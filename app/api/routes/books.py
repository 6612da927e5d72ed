"""Book Routes — HTTP surface for book record CRUD under /book.

Invariants:
    - Routes never contain business logic (delegate to BookService)
    - Request bodies validated by Pydantic before reaching the route handler
    - Failures raised as BookRecordError kinds; api/error_handlers.py maps them

Design Decisions:
    - BookService built per request by get_book_service (constructor injection
      of the repository, which receives the request's DB session)
    - POST returns 200 and DELETE returns 200 with an empty body: existing
      clients depend on these codes
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Path, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import BOOK_ID_MAX, BOOK_ID_MIN, BookId
from app.infrastructure.book_repository import SqlAlchemyBookRepository
from app.infrastructure.database import get_db
from app.schemas.book import BookCreate, BookResponse, BookUpdate
from app.services.book_service import BookService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/book", tags=["books"])

# Out-of-range ids fail as parameter errors (400) before reaching the store
BookIdPath = Annotated[int, Path(ge=BOOK_ID_MIN, le=BOOK_ID_MAX)]


def get_book_service(db: AsyncSession = Depends(get_db)) -> BookService:
    """FastAPI dependency — BookService over the request's DB session."""
    return BookService(SqlAlchemyBookRepository(db))


@router.get("", response_model=list[BookResponse])
async def list_books(service: BookService = Depends(get_book_service)):
    """List all book records."""
    return await service.list_books()


@router.get("/{book_id}", response_model=BookResponse)
async def get_book(
    book_id: BookIdPath, service: BookService = Depends(get_book_service),
):
    """Get a book record by id."""
    return await service.get_book(BookId(book_id))


@router.post("", response_model=BookResponse, status_code=status.HTTP_200_OK)
async def create_book(
    body: BookCreate, service: BookService = Depends(get_book_service),
):
    """Create a book record."""
    return await service.create_book(body.name, body.description, body.rating)


@router.put("", response_model=BookResponse)
async def update_book(
    body: BookUpdate, service: BookService = Depends(get_book_service),
):
    """Update the book record identified by the body id."""
    book_id = BookId(body.id) if body.id is not None else None
    return await service.update_book(
        book_id, body.name, body.description, body.rating,
    )


@router.put("/{book_id}", response_model=BookResponse)
async def update_book_at(
    book_id: BookIdPath,
    body: BookUpdate,
    service: BookService = Depends(get_book_service),
):
    """Update the book record identified by the path id."""
    body_id = BookId(body.id) if body.id is not None else None
    return await service.update_book_at(
        BookId(book_id), body_id, body.name, body.description, body.rating,
    )


@router.delete("/{book_id}", status_code=status.HTTP_200_OK)
async def delete_book(
    book_id: BookIdPath, service: BookService = Depends(get_book_service),
):
    """Delete a book record by id."""
    await service.delete_book(BookId(book_id))
    return Response(status_code=status.HTTP_200_OK)
