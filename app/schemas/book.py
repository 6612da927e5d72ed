"""Book Schemas — Pydantic models with field-level validation for API boundaries.

Invariants:
    - BookCreate.name: 1-255 chars, stripped, non-empty; id never accepted
    - BookUpdate.id: optional at parse time, required by the update operation,
      bounded to the INTEGER column range
    - BookResponse mirrors the ORM model (from_attributes)

Design Decisions:
    - Unknown keys ignored (Pydantic default): a client-sent id on create is dropped
    - field_validator for side-effect-free transforms (strip)
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.core.domain_types import BOOK_ID_MAX, BOOK_ID_MIN


class BookFields(BaseModel):
    """Mutable book fields shared by create and update payloads."""
    name: str = Field(min_length=1, max_length=255)
    description: str | None = None
    rating: int = 0

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty or whitespace")
        return v


class BookCreate(BookFields):
    """Book creation payload — the store assigns the id."""


class BookUpdate(BookFields):
    """Full book payload for update — id selects the record to overwrite."""
    id: int | None = Field(default=None, ge=BOOK_ID_MIN, le=BOOK_ID_MAX)


class BookResponse(BaseModel):
    """Book response — public-facing book record."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: str | None = None
    rating: int
