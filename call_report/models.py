"""Data models for the call center KPI report."""

import math
from dataclasses import asdict, dataclass, field
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    NonNegativeInt,
    PositiveFloat,
    field_validator,
)

from .constants import ALL_WEEKS, RecordField


@dataclass(frozen=True)
class WeeklyCallRecord:
    """One week's raw call observations.

    Attributes:
        week_label: Unique identifier of the week, e.g. a date range.
        inbound: Total calls received.
        answered: Calls answered by an agent.
        abandoned: Calls where the caller hung up before being answered.
        missed: Calls neither answered nor abandoned (routing/system failure).
        avg_handle_time: Mean agent talk time in minutes for answered calls.
        staff_needed: Previously recorded staffing level (informational only).
    """

    week_label: str
    inbound: int
    answered: int
    abandoned: int
    missed: int
    avg_handle_time: float
    staff_needed: int = 0

    @classmethod
    def from_dict(cls, *, data: dict[str, Any]) -> "WeeklyCallRecord":
        """Create a WeeklyCallRecord from a dictionary keyed by field name.

        Args:
            data: Dictionary with one entry per record field.

        Returns:
            WeeklyCallRecord: A new record populated from the dictionary.
        """
        return cls(
            week_label=data[RecordField.WEEK_LABEL],
            inbound=data[RecordField.INBOUND],
            answered=data[RecordField.ANSWERED],
            abandoned=data[RecordField.ABANDONED],
            missed=data[RecordField.MISSED],
            avg_handle_time=data[RecordField.AVG_HANDLE_TIME],
            staff_needed=data.get(RecordField.STAFF_NEEDED, 0),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert the record to a dictionary for serialization."""
        return asdict(self)


@dataclass(frozen=True)
class CallTotals:
    """Component-wise sums over a selection of weeks.

    ``avg_handle_time`` is the plain sum of the weekly handle times; it only
    becomes an average once divided by the number of weeks.
    """

    inbound: int = 0
    answered: int = 0
    abandoned: int = 0
    missed: int = 0
    avg_handle_time: float = 0.0
    staff_needed: int = 0

    def add(self, record: WeeklyCallRecord) -> "CallTotals":
        """Return new totals with ``record`` folded in."""
        return CallTotals(
            inbound=self.inbound + record.inbound,
            answered=self.answered + record.answered,
            abandoned=self.abandoned + record.abandoned,
            missed=self.missed + record.missed,
            avg_handle_time=self.avg_handle_time + record.avg_handle_time,
            staff_needed=self.staff_needed + record.staff_needed,
        )


@dataclass(frozen=True)
class AggregatedMetrics:
    """Derived analytics for a selection of weeks.

    Attributes:
        selection: The selection the metrics were computed for.
        weeks: Week labels that contributed, in store order.
        totals: Summed weekly fields.
        average_handle_time: Summed handle time over week count, 2 decimals.
        calls_per_weekday: Inbound calls per operating weekday.
        total_minutes_needed: Talk minutes needed for the answered calls.
        required_agents: Recommended minimum number of full-time agents.
    """

    selection: str = ALL_WEEKS
    weeks: tuple[str, ...] = ()
    totals: CallTotals = field(default_factory=CallTotals)
    average_handle_time: float = 0.0
    calls_per_weekday: float = 0.0
    total_minutes_needed: float = 0.0
    required_agents: int = 0

    @property
    def week_count(self) -> int:
        return len(self.weeks)

    def to_dict(self) -> dict[str, Any]:
        """Convert metrics to a dictionary for serialization."""
        data = asdict(self)
        data["weeks"] = list(self.weeks)
        return data


class WeeklyRowSchema(BaseModel):
    """Validation schema for one imported spreadsheet row.

    Rows arrive keyed by record field name (after column aliasing); blank
    cells must already have been dropped so that missing values surface as
    missing fields rather than being coerced to zero.
    """

    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True)

    week_label: str = Field(min_length=1, description="Unique week identifier")
    inbound: NonNegativeInt = Field(description="Total calls received")
    answered: NonNegativeInt = Field(description="Calls answered by an agent")
    abandoned: NonNegativeInt = Field(description="Calls abandoned by the caller")
    missed: NonNegativeInt = Field(description="Calls lost to routing/system failure")
    avg_handle_time: PositiveFloat = Field(description="Mean talk time in minutes")
    staff_needed: NonNegativeInt = Field(
        default=0, description="Recorded staffing level, informational only"
    )

    @field_validator("week_label", mode="before")
    @classmethod
    def _label_as_text(cls, value: Any) -> Any:
        # Spreadsheet cells may hold numbers or dates in the label column
        if value is None or isinstance(value, str):
            return value
        return str(value)

    @field_validator(
        "inbound", "answered", "abandoned", "missed", "avg_handle_time", "staff_needed",
        mode="before",
    )
    @classmethod
    def _reject_booleans(cls, value: Any) -> Any:
        # Lax mode would read True/False as 1/0
        if isinstance(value, bool):
            raise ValueError("must be a number, not a boolean")
        return value

    @field_validator("avg_handle_time")
    @classmethod
    def _finite_handle_time(cls, value: float) -> float:
        if math.isinf(value):
            raise ValueError("must be a finite number")
        return value

    def to_record(self) -> WeeklyCallRecord:
        return WeeklyCallRecord.from_dict(data=self.model_dump())
