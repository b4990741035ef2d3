"""
Order report errors.

Only genuinely absent structure is a normal case; malformed data that is
present always raises one of these.
"""
from typing import Any, Optional


class OrderReportError(Exception):
    """Base class for all order report errors."""


class InvalidInputError(OrderReportError, TypeError):
    """Raw input does not have the structure a record needs."""


class MissingFieldError(OrderReportError, KeyError):
    """A required key is missing from a raw map."""

    def __init__(self, field: str, record: str = "record"):
        self.field = field
        self.record = record
        super().__init__(f"{record} requires '{field}'")

    def __str__(self) -> str:
        # KeyError would repr() the message
        return self.args[0]


class MalformedDateError(OrderReportError, ValueError):
    """A date field is present but is not ISO-8601."""

    def __init__(self, field: str, value: Any, reason: Optional[str] = None):
        self.field = field
        self.value = value
        message = f"{field} is not an ISO-8601 date: {value!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class MissingDateError(OrderReportError, LookupError):
    """Neither OrderPostedDate nor OrderDate is present."""

    def __init__(self, fields):
        self.fields = tuple(fields)
        super().__init__(f"Order has none of the date fields: {', '.join(self.fields)}")
