"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - BookId wraps the server-generated integer key — never assigned by clients
    - Valid ids lie in BOOK_ID_MIN..BOOK_ID_MAX (the column range)

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
"""

from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

BookId = NewType("BookId", int)

# book_record.id is a 32-bit INTEGER column
BOOK_ID_MIN = 1
BOOK_ID_MAX = 2_147_483_647
