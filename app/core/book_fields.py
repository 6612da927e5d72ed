"""Book Field Enforcement — validates book record fields before persistence.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - Return error dict on violation, None on success
    - validate_book_fields chains all checks — first error wins

Design Decisions:
    - Pure functions over model methods: testable without a database
    - Return dicts (not exceptions): the service decides which error kind to raise,
      keeping the error path explicit at the call site
"""

NAME_MAX_LENGTH = 255


def check_name(name: object) -> dict | None:
    """Name is required and must contain non-whitespace text."""
    if name is None:
        return {
            "status": "error",
            "error_code": "NAME_REQUIRED",
            "field": "name",
            "message": "Book name must not be null",
        }
    if not isinstance(name, str) or not name.strip():
        return {
            "status": "error",
            "error_code": "NAME_EMPTY",
            "field": "name",
            "message": "Book name must not be empty",
        }
    if len(name) > NAME_MAX_LENGTH:
        return {
            "status": "error",
            "error_code": "NAME_TOO_LONG",
            "field": "name",
            "message": f"Book name must be at most {NAME_MAX_LENGTH} characters",
        }
    return None


def check_description(description: object) -> dict | None:
    """Description is optional but must be text when given."""
    if description is not None and not isinstance(description, str):
        return {
            "status": "error",
            "error_code": "DESCRIPTION_INVALID",
            "field": "description",
            "message": "Book description must be a string",
        }
    return None


def check_rating(rating: object) -> dict | None:
    """Rating is a plain integer. No bounds."""
    # bool is an int subclass
    if isinstance(rating, bool) or not isinstance(rating, int):
        return {
            "status": "error",
            "error_code": "RATING_INVALID",
            "field": "rating",
            "message": "Book rating must be an integer",
        }
    return None


def validate_book_fields(
    name: object, description: object, rating: object,
) -> dict | None:
    """Chain all field checks. Returns first error or None."""
    return (
        check_name(name)
        or check_description(description)
        or check_rating(rating)
    )
