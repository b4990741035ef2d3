"""Typed records for marketplace order reports."""

from .domain import (
    Address,
    InvalidInputError,
    MalformedDateError,
    MissingDateError,
    MissingFieldError,
    Money,
    OrderReport,
    OrderReportError,
    OrderReportItem,
)
from .infrastructure.marketplace.amazon import OrderReportParser

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
    "OrderReportParser",
]
