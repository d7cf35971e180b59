"""
Record models for UWB location tracking and patient events.

These models are the interchange contract between tag gateways, the care
backend and its clients. They use Pydantic for validation and carry no
behavior beyond their field constraints and default policy.
"""

from types import MappingProxyType
from typing import Annotated, Any, ClassVar, Self

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    Field,
    PlainSerializer,
    ValidationInfo,
    model_validator,
)
from pydantic.alias_generators import to_camel

from care_records.domain.clock import SYSTEM_CLOCK, Clock, TimestampUnit

# Strict numerics: a JSON string or bool never silently becomes a number
Coordinate = Annotated[float, Field(strict=True, allow_inf_nan=False)]
Identifier = Annotated[str, Field(min_length=1)]

# Read-only once validated, plain dict on the wire
FrozenStrMap = Annotated[
    dict[str, str],
    AfterValidator(MappingProxyType),
    PlainSerializer(dict, return_type=dict[str, str]),
]


class Record(BaseModel):
    """Base for all immutable interchange records."""

    model_config = ConfigDict(
        frozen=True,  # Value semantics: updates go through evolve()
        alias_generator=to_camel,
        populate_by_name=True,
    )

    # Unit of the record's defaulted timestamp, None when it has no timestamp
    timestamp_unit: ClassVar[TimestampUnit | None] = None

    @model_validator(mode="before")
    @classmethod
    def _default_timestamp_from_clock(cls, data: Any, info: ValidationInfo) -> Any:
        """Stamp a missing timestamp from the clock passed in validation context."""
        if cls.timestamp_unit is None or not isinstance(data, dict):
            return data
        clock: Clock | None = (info.context or {}).get("clock")
        if clock is None or "timestamp" in data:
            return data
        return {**data, "timestamp": cls.timestamp_unit.read(clock)}

    @classmethod
    def stamped(cls, clock: Clock, **fields: Any) -> Self:
        """Construct a record whose defaulted timestamp is read from ``clock``."""
        return cls.model_validate(fields, context={"clock": clock})

    def evolve(self, **changes: Any) -> Self:
        """Return a re-validated copy with ``changes`` applied.

        The timestamp is carried over as-is unless it is part of ``changes``.
        """
        return self.model_validate({**self.model_dump(exclude_none=True), **changes})


class Point(Record):
    """A coordinate pair. Hashable, identity is the pair itself."""

    x: Coordinate
    y: Coordinate


class LocationReading(Record):
    """
    Position fix reported for a UWB tag.

    additional_info is a read-only mapping, so a reading that carries it
    compares by value but is not hashable.
    """

    timestamp_unit: ClassVar[TimestampUnit | None] = TimestampUnit.SECONDS

    device_id: Identifier
    x: Coordinate
    y: Coordinate
    z: Coordinate = 0.0
    accuracy: Annotated[Coordinate, Field(ge=0.0)] = Field(
        default=0.0, description="Estimated error radius in meters"
    )
    timestamp: int = Field(
        default_factory=SYSTEM_CLOCK.epoch_seconds,
        strict=True,
        description="Seconds since epoch",
    )
    area: str | None = Field(default=None, description="Area.id, not checked for existence")
    battery_level: Annotated[int, Field(strict=True, ge=0, le=100)] | None = None
    additional_info: FrozenStrMap | None = None


class Area(Record):
    """
    Named region on a floor, bounded by a polygon.

    Geometry consumers expect at least three boundary points in winding
    order. That minimum is not checked here.
    """

    id: Identifier
    name: Identifier
    description: str | None = None
    boundary_points: tuple[Point, ...]
    level: int = Field(default=0, strict=True, description="Floor index")


class PatientEvent(Record):
    """Something that happened to a patient, optionally with where it happened."""

    timestamp_unit: ClassVar[TimestampUnit | None] = TimestampUnit.MILLISECONDS

    patient_id: Identifier
    event_type: str = Field(alias="type", description="Open category, e.g. fall or call")
    description: str
    timestamp: int = Field(
        default_factory=SYSTEM_CLOCK.epoch_millis,
        strict=True,
        description="Milliseconds since epoch",
    )
    location_data: LocationReading | None = None

