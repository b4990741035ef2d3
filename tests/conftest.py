"""Shared fixtures for order report tests."""
import json
from pathlib import Path

import pytest

from mws_reports.settings import ReportSettings


@pytest.fixture
def fixtures_dir():
    """Return path to test data directory."""
    return Path(__file__).parent / "data"


@pytest.fixture
def report_document(fixtures_dir):
    """Load a decoded order report document."""
    filepath = fixtures_dir / "order_report.json"
    with open(filepath, encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def order_struct(report_document):
    """First decoded order entry of the sample report."""
    return report_document["AmazonEnvelope"]["Message"][0]["OrderReport"]


@pytest.fixture
def settings():
    """Settings independent of the environment."""
    return ReportSettings(log_level="DEBUG", default_currency="EUR")
