"""
Decode error taxonomy.

Every failed decode maps to exactly one of three typed errors. The mapping
works on pydantic's error types, so models only declare their constraints
and never raise these errors themselves.
"""

from pydantic import ValidationError

# pydantic error types that mean "value present but outside its domain"
RANGE_ERROR_TYPES = frozenset(
    {
        "greater_than",
        "greater_than_equal",
        "less_than",
        "less_than_equal",
        "string_too_short",
        "string_too_long",
        "too_short",
        "too_long",
        "finite_number",
    }
)


class RecordDecodeError(Exception):
    """Base class for failures while decoding a record."""

    def __init__(self, record_type: str, field: str, message: str) -> None:
        self.record_type = record_type
        self.field = field
        self.message = message
        location = f"{record_type}.{field}" if field else record_type
        super().__init__(f"{location}: {message}")


class MissingFieldError(RecordDecodeError):
    """A required field is absent."""


class TypeMismatchError(RecordDecodeError):
    """A field value cannot be read as its declared type."""


class RangeViolationError(RecordDecodeError):
    """A field value is outside its permitted domain."""


def field_path(loc: tuple[int | str, ...]) -> str:
    """Render a pydantic error location as a dotted path, e.g. ``[2].locationData.x``."""
    path = ""
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path += f".{part}" if path else part
    return path


def from_validation_error(exc: ValidationError, record_type: str) -> RecordDecodeError:
    """Map a pydantic validation failure to a single typed decode error.

    The first reported error wins. pydantic reports errors in field
    declaration order, so the result is deterministic for a given input.
    """
    first = exc.errors(include_url=False)[0]
    kind = first["type"]
    path = field_path(tuple(first["loc"]))
    message = first["msg"]

    if kind == "missing":
        return MissingFieldError(record_type, path, message)
    if kind in RANGE_ERROR_TYPES:
        return RangeViolationError(record_type, path, message)
    return TypeMismatchError(record_type, path, message)
