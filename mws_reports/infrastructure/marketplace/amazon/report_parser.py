"""Amazon MWS order report to domain record parser."""

from typing import Any, Iterable, List, Mapping, Optional

from mws_reports.domain.entities import OrderReport
from mws_reports.domain.entities.order_report_item import as_list
from mws_reports.domain.exceptions import InvalidInputError
from mws_reports.infrastructure.logging import get_logger
from mws_reports.settings import ReportSettings, get_report_settings

logger = get_logger(__name__)


class OrderReportParser:
    """Parser for decoded ``_GET_ORDERS_DATA_`` report documents.

    A decoded document looks like::

        {"AmazonEnvelope": {
            "Header": {...},
            "MessageType": "OrderReport",
            "Message": [{"MessageID": "1", "OrderReport": {...}}, ...],
        }}

    The envelope wrapper is optional and a single ``Message`` may be a map
    instead of a list.
    """

    def __init__(self, settings: Optional[ReportSettings] = None):
        self.settings = settings or get_report_settings()
        get_logger(__name__, self.settings.log_level)

    def parse(self, document: Mapping[str, Any]) -> List[OrderReport]:
        """Convert one decoded report document into order reports.

        Args:
            document: Decoded report, with or without the envelope

        Returns:
            Order reports in document order

        Raises:
            InvalidInputError: If the document or an order entry is not a mapping
        """
        if not isinstance(document, Mapping):
            raise InvalidInputError(
                f"Report document must be a mapping, got {type(document).__name__}"
            )

        body = document.get("AmazonEnvelope", document)
        if not isinstance(body, Mapping):
            raise InvalidInputError(
                f"AmazonEnvelope must be a mapping, got {type(body).__name__}"
            )

        orders = []
        for position, message in enumerate(as_list(body.get("Message")), start=1):
            if not isinstance(message, Mapping):
                raise InvalidInputError(
                    f"Message {position} must be a mapping, got {type(message).__name__}"
                )
            struct = message.get("OrderReport")
            if struct is None:
                logger.warning(
                    "Skipping message %s without OrderReport",
                    message.get("MessageID", position),
                )
                continue
            orders.append(
                OrderReport.create(struct, default_currency=self.settings.default_currency)
            )

        logger.info("Parsed %d order(s) from order report", len(orders))
        return orders

    def parse_many(self, documents: Iterable[Mapping[str, Any]]) -> List[OrderReport]:
        """Parse several report documents, keeping their order."""
        orders: List[OrderReport] = []
        for document in documents:
            orders.extend(self.parse(document))
        return orders
