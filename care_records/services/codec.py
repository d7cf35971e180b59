"""
JSON codec for interchange records.

One generic codec serves every record kind. The models declare the rules
(required fields, defaults, constraints) and the codec applies them in both
directions:

- Absent optional fields are omitted on encode, never emitted as null
- Field names are the camelCase interchange names, in declaration order
- Decode reads camelCase names only; snake_case keys count as unknown
- Decode failures come back as a typed Result, one error per call
"""

from collections.abc import Sequence
from functools import lru_cache
from typing import Annotated, TypeVar

import structlog
from pydantic import Field, SerializeAsAny, TypeAdapter, ValidationError

from care_records.config import AppConfig, CodecConfig
from care_records.domain.clock import SYSTEM_CLOCK, Clock
from care_records.domain.errors import RecordDecodeError, from_validation_error
from care_records.domain.models import Record
from care_records.services.result import Result

logger = structlog.get_logger(__name__)

RecordT = TypeVar("RecordT", bound=Record)

_mixed_batch_adapter: TypeAdapter[list[Record]] = TypeAdapter(list[SerializeAsAny[Record]])


@lru_cache(maxsize=64)
def _batch_adapter(record_type: type[Record], max_batch_size: int) -> TypeAdapter:
    items = list[record_type]  # type: ignore[valid-type]
    return TypeAdapter(Annotated[items, Field(max_length=max_batch_size)])


class RecordCodec:
    """
    Encodes records to JSON text and decodes JSON text back to records.

    The clock supplies timestamps for decoded records that omit one. It is
    read once per record, in that record's own unit.
    """

    def __init__(self, config: CodecConfig | None = None, clock: Clock | None = None) -> None:
        self.config = config or CodecConfig()
        self.clock = clock or SYSTEM_CLOCK
        self.logger = logger.bind(component="record_codec")

    @classmethod
    def from_config(cls, config: AppConfig, clock: Clock | None = None) -> "RecordCodec":
        return cls(config=config.codec, clock=clock)

    def encode(self, record: Record) -> str:
        """Serialize a single record to JSON text."""
        if not isinstance(record, Record):
            raise TypeError(f"Cannot encode {type(record).__name__}: not a record")

        text = record.model_dump_json(by_alias=True, exclude_none=True, indent=self.config.indent)
        self.logger.debug("record_encoded", record_type=type(record).__name__, size=len(text))
        return text

    def decode(
        self, text: str | bytes, record_type: type[RecordT]
    ) -> Result[RecordT, RecordDecodeError]:
        """
        Parse JSON text into ``record_type``.

        Returns:
            Result containing the record, or exactly one of MissingFieldError,
            TypeMismatchError or RangeViolationError.
        """
        try:
            record = record_type.model_validate_json(
                text, context={"clock": self.clock}, by_alias=True, by_name=False
            )
        except ValidationError as exc:
            return self._failed(exc, record_type)

        self.logger.debug("record_decoded", record_type=record_type.__name__)
        return Result.ok(record)

    def encode_batch(self, records: Sequence[Record]) -> str:
        """Serialize records, of any mix of kinds, to a JSON array."""
        for record in records:
            if not isinstance(record, Record):
                raise TypeError(f"Cannot encode {type(record).__name__}: not a record")

        text = _mixed_batch_adapter.dump_json(
            list(records), by_alias=True, exclude_none=True, indent=self.config.indent
        ).decode()
        self.logger.debug("record_batch_encoded", count=len(records), size=len(text))
        return text

    def decode_batch(
        self, text: str | bytes, record_type: type[RecordT]
    ) -> Result[list[RecordT], RecordDecodeError]:
        """
        Parse a JSON array of ``record_type`` objects.

        Error fields are prefixed with the failing element's index, e.g.
        ``[2].batteryLevel``. Arrays longer than ``max_batch_size`` are a
        RangeViolationError.
        """
        adapter = _batch_adapter(record_type, self.config.max_batch_size)
        try:
            records = adapter.validate_json(
                text, context={"clock": self.clock}, by_alias=True, by_name=False
            )
        except ValidationError as exc:
            return self._failed(exc, record_type)

        self.logger.debug(
            "record_batch_decoded", record_type=record_type.__name__, count=len(records)
        )
        return Result.ok(records)

    def _failed(self, exc: ValidationError, record_type: type[Record]) -> Result:
        error = from_validation_error(exc, record_type.__name__)
        self.logger.warning(
            "record_decode_failed",
            record_type=record_type.__name__,
            error_type=type(error).__name__,
            field=error.field,
            error=error.message,
        )
        return Result.err(error)


_default_codec = RecordCodec()


def encode(record: Record) -> str:
    """Encode with the default codec (compact output, system clock)."""
    return _default_codec.encode(record)


def decode(text: str | bytes, record_type: type[RecordT]) -> Result[RecordT, RecordDecodeError]:
    """Decode with the default codec (compact output, system clock)."""
    return _default_codec.decode(text, record_type)
