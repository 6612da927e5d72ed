"""Book ORM — persists the book record entity.

Invariants:
    - id is an autoincrement integer primary key, assigned by the store on insert
    - name is non-nullable; emptiness is rejected before persistence (core/book_fields.py)
    - rating is a plain integer with no bounds

Design Decisions:
    - Table name book_record kept stable for existing databases
    - build_book() is the single constructor used by the service: id is never
      taken from the caller
"""

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class Book(Base):
    """Book record — the sole domain entity."""
    __tablename__ = "book_record"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    rating: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    def __repr__(self) -> str:
        return f"Book(id={self.id!r}, name={self.name!r}, rating={self.rating!r})"


def build_book(
    name: str, description: str | None = None, rating: int = 0,
) -> Book:
    """Build a transient Book. The store assigns id on save."""
    return Book(name=name, description=description, rating=rating)
