# Settings package
from mws_reports.settings.report_settings import ReportSettings, get_report_settings

__all__ = ["ReportSettings", "get_report_settings"]
