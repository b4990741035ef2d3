"""Amazon MWS order report adapter."""

from .report_parser import OrderReportParser

__all__ = ["OrderReportParser"]
