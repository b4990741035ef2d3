"""Domain layer - order report records and their errors."""

from .entities import OrderReport, OrderReportItem
from .exceptions import (
    InvalidInputError,
    MalformedDateError,
    MissingDateError,
    MissingFieldError,
    OrderReportError,
)
from .value_objects import Address, Money

__all__ = [
    "Address",
    "InvalidInputError",
    "MalformedDateError",
    "MissingDateError",
    "MissingFieldError",
    "Money",
    "OrderReport",
    "OrderReportError",
    "OrderReportItem",
]
