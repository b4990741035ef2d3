"""Domain entities."""

from .order_report import OrderReport
from .order_report_item import OrderReportItem

__all__ = ["OrderReport", "OrderReportItem"]
