"""
Core Data Model for Expense Tracker

An Expense is the only entity in the system. It is stored verbatim in the
JSON store, so the field names here ARE the on-disk format:

    {"id": 1, "amount": 1000, "description": "lunch", "date": "2024-01-02T11:01:58.135Z"}

DESIGN DECISION: The timestamp is kept as the exact ISO-8601 string that was
written. Parsing happens on demand, which keeps a write/read round trip
field-for-field identical regardless of how the timestamp was formatted.
"""

from datetime import datetime, timezone

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    PositiveInt,
    field_validator,
)


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO-8601 timestamp, accepting a trailing 'Z' for UTC."""
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    return datetime.fromisoformat(text)


def format_timestamp(moment: datetime) -> str:
    """
    Format a moment as UTC ISO-8601 with millisecond precision.

    Naive datetimes are taken to be UTC already.
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class Expense(BaseModel):
    """
    A single recorded monetary outlay.

    Expenses are created once and never modified; the store only ever
    appends or removes whole records.
    """
    model_config = ConfigDict(str_strip_whitespace=True, frozen=True)

    id: PositiveInt = Field(
        ...,
        description="Unique, monotonically assigned identifier"
    )
    amount: int = Field(
        ...,
        description="Amount in whole dollars"
    )
    description: str = Field(
        ...,
        min_length=1,
        description="What the money was spent on"
    )
    date: str = Field(
        ...,
        description="ISO-8601 creation timestamp"
    )

    @field_validator('date')
    @classmethod
    def validate_date(cls, v: str) -> str:
        """Reject timestamps that are not ISO-8601."""
        try:
            parse_timestamp(v)
        except ValueError:
            raise ValueError(f"Not an ISO-8601 timestamp: {v!r}")
        return v

    @property
    def created_at(self) -> datetime:
        return parse_timestamp(self.date)

    @property
    def date_label(self) -> str:
        """Calendar date part of the timestamp (YYYY-MM-DD)."""
        return self.date[:10]

    @property
    def month(self) -> int:
        """Calendar month (1-12) of the timestamp as written."""
        return self.created_at.month
