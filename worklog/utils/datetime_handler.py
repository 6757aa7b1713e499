"""
DateTime Handler module for consistent date and time handling throughout the application.
"""
from datetime import datetime, timezone
from typing import Any, Optional, Union

from dateutil import parser as dateutil_parser


class DateTimeHandler:
    """
    Centralized service for handling dates and times consistently throughout the application.
    All instants are timezone-aware UTC datetimes.
    """

    # Bucket key formats
    DATE_FORMAT = "%Y-%m-%d"
    YEAR_MONTH_FORMAT = "%Y-%m"

    # Conversion methods exposed by store-specific timestamp wrappers
    # (bson.Timestamp.as_datetime, Firestore-style toDate, pandas to_pydatetime)
    TIMESTAMP_CONVERTERS = ("as_datetime", "to_datetime", "to_pydatetime", "toDate")

    @classmethod
    def get_current_datetime(cls) -> datetime:
        """
        Get the current UTC datetime.

        Returns:
            Current timezone-aware UTC datetime
        """
        return datetime.now(timezone.utc)

    @classmethod
    def to_utc(cls, value: datetime) -> datetime:
        """
        Express a datetime in UTC. Naive values are read as UTC.

        Args:
            value: Datetime to convert

        Returns:
            Timezone-aware UTC datetime
        """
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)

    @classmethod
    def parse_datetime(cls, value: Union[str, datetime]) -> datetime:
        """
        Parse an ISO-8601 or human-readable date/time string to a UTC instant.
        Values without an offset are read as UTC.

        Args:
            value: String such as "2025-01-01T09:00:00Z" or "Jan 1 2025 9:00 AM"

        Returns:
            Timezone-aware UTC datetime

        Raises:
            ValueError: If the string cannot be parsed
        """
        if isinstance(value, datetime):
            return cls.to_utc(value)

        text = value.strip()
        if not text:
            raise ValueError("Empty date/time string")

        try:
            parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
        except ValueError:
            try:
                parsed = dateutil_parser.parse(text)
            except (ValueError, OverflowError) as e:
                raise ValueError(f"Invalid date/time: {value}") from e

        return cls.to_utc(parsed)

    @classmethod
    def coerce_to_instant(cls, value: Any) -> Any:
        """
        Convert a stored time value to a plain UTC datetime.

        Datetimes pass through, wrapped timestamps are converted through their
        conversion method, and anything else is returned unchanged.

        Args:
            value: Value read from the document store

        Returns:
            UTC datetime, or the original value when it is not a time value
        """
        if isinstance(value, datetime):
            return cls.to_utc(value)

        if value is None:
            return None

        for method_name in cls.TIMESTAMP_CONVERTERS:
            converter = getattr(value, method_name, None)
            if callable(converter):
                converted = converter()
                if isinstance(converted, datetime):
                    return cls.to_utc(converted)
                return converted

        return value

    @classmethod
    def format_iso_date(cls, value: datetime) -> str:
        """
        Day bucket key of an instant, in UTC.

        Returns:
            String in YYYY-MM-DD format
        """
        return cls.to_utc(value).strftime(cls.DATE_FORMAT)

    @classmethod
    def format_year_month(cls, value: datetime) -> str:
        """
        Month bucket key of an instant, in UTC.

        Returns:
            String in YYYY-MM format
        """
        return cls.to_utc(value).strftime(cls.YEAR_MONTH_FORMAT)

    @classmethod
    def format_iso(cls, value: Optional[datetime]) -> Optional[str]:
        """Format an instant as an ISO-8601 UTC string."""
        if value is None:
            return None
        return cls.to_utc(value).isoformat().replace("+00:00", "Z")
