"""
Order report aggregate.

Wraps one decoded ``OrderReport`` entry of a ``GetReport`` response. The
raw map is kept read-only; nested records (addresses, items) are built on
first access and cached for the life of the instance.

CRITICAL: This file must contain ZERO imports from:
- pydantic
- the settings package
"""
import logging
import threading
from datetime import datetime, timezone
from types import MappingProxyType
from typing import Any, Callable, Dict, Iterator, Mapping, Optional, Tuple

from ..exceptions import InvalidInputError, MalformedDateError, MissingDateError
from ..value_objects import Address
from .order_report_item import OrderReportItem, as_list

logger = logging.getLogger(__name__)

# OrderPostedDate: the buyer was charged and order processing completed.
# OrderDate: the order was placed.
DATE_FIELDS = ("OrderPostedDate", "OrderDate")

_UNSET = object()


def parse_iso8601(field: str, value: Any) -> datetime:
    """Parse an ISO-8601 report date into a timezone-aware datetime.

    Args:
        field: Name of the raw field, for error messages
        value: Raw value, e.g. ``"2014-10-04T20:12:53+00:00"`` or ``"...Z"``

    Returns:
        Timezone-aware datetime (naive values are taken as UTC)

    Raises:
        MalformedDateError: If value is not an ISO-8601 string
    """
    if not isinstance(value, str):
        raise MalformedDateError(field, value, f"expected string, got {type(value).__name__}")

    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError as e:
        raise MalformedDateError(field, value) from e

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


class OrderReport:
    """One order of an order report.

    ``order_number`` is our own order id and is set by the caller; it is
    never read from the report. ``amazon_order_number()`` is the
    marketplace id.

    Example:
        >>> order = OrderReport.create(struct)
        >>> order.order_number = "100042"
        >>> items = list(order.items())
    """

    def __init__(self, raw: Mapping[str, Any], default_currency: str = "EUR"):
        if not isinstance(raw, Mapping):
            raise InvalidInputError(
                f"Order report data must be a mapping, got {type(raw).__name__}"
            )
        self._raw = MappingProxyType(dict(raw))
        self._default_currency = default_currency
        self._lock = threading.Lock()
        self._shipping_address: Any = _UNSET
        self._billing_address: Any = _UNSET
        self._items: Any = _UNSET

        self.order_number: Optional[str] = None

    @classmethod
    def create(cls, raw: Mapping[str, Any], default_currency: str = "EUR") -> "OrderReport":
        """Build an order report from a decoded order map.

        Raises:
            InvalidInputError: If ``raw`` is not a mapping
        """
        return cls(raw, default_currency=default_currency)

    @property
    def raw(self) -> Mapping[str, Any]:
        """Read-only view of the decoded order."""
        return self._raw

    # ------------------------------------------------------------------
    # Lazy slots
    # ------------------------------------------------------------------

    def _lazy(self, slot: str, builder: Callable[[], Any]) -> Any:
        value = getattr(self, slot)
        if value is not _UNSET:
            return value
        with self._lock:
            value = getattr(self, slot)
            if value is _UNSET:
                # a failing builder leaves the slot unset
                value = builder()
                setattr(self, slot, value)
        return value

    def _section(self, key: str) -> Optional[Mapping[str, Any]]:
        """Return ``raw[key]``, or None when it is absent."""
        value = self._raw.get(key)
        if value is None or value == "":
            return None
        if not isinstance(value, Mapping):
            raise InvalidInputError(
                f"{key} must be a mapping, got {type(value).__name__}"
            )
        return value

    def _build_address(self, key: str) -> Optional[Address]:
        data = self._section(key)
        if data is None:
            return None
        address = data.get("Address")
        if address is None or address == "":
            return None
        logger.debug("Building %s address for order %s", key, self.amazon_order_number())
        return Address.from_raw(address)

    def _build_items(self) -> Tuple[OrderReportItem, ...]:
        entries = as_list(self._raw.get("Item"))
        logger.debug(
            "Building %d item(s) for order %s", len(entries), self.amazon_order_number()
        )
        return tuple(
            OrderReportItem(entry, default_currency=self._default_currency)
            for entry in entries
        )

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    def amazon_order_number(self) -> Any:
        """Marketplace order id, verbatim."""
        return self._raw.get("AmazonOrderID")

    def email(self) -> Optional[str]:
        """Buyer email; an empty string in the report is returned as is."""
        billing = self._section("BillingData")
        if billing is not None and "BuyerEmailAddress" in billing:
            return billing["BuyerEmailAddress"]
        return None

    def order_date(self) -> datetime:
        """Date the order processing completed, else the date it was placed.

        Raises:
            MalformedDateError: If the chosen field is not ISO-8601
            MissingDateError: If neither date field is present
        """
        for field in DATE_FIELDS:
            value = self._raw.get(field)
            if value is None or value == "":
                continue
            return parse_iso8601(field, value)
        raise MissingDateError(DATE_FIELDS)

    def shipping_address(self) -> Optional[Address]:
        """Address under FulfillmentData.

        The fulfillment method is not checked: any address found there is
        returned, whatever the channel.
        """
        return self._lazy("_shipping_address", lambda: self._build_address("FulfillmentData"))

    def billing_address(self) -> Optional[Address]:
        return self._lazy("_billing_address", lambda: self._build_address("BillingData"))

    def items(self) -> Iterator[OrderReportItem]:
        """Iterate over the line items in report order."""
        return iter(self._lazy("_items", self._build_items))

    def as_dict(self) -> Dict[str, Any]:
        """Serialize the order for downstream consumers."""
        try:
            order_date = self.order_date().isoformat()
        except MissingDateError:
            order_date = None
        shipping = self.shipping_address()
        billing = self.billing_address()
        return {
            "order_number": self.order_number,
            "amazon_order_number": self.amazon_order_number(),
            "email": self.email(),
            "order_date": order_date,
            "shipping_address": shipping.as_dict() if shipping else None,
            "billing_address": billing.as_dict() if billing else None,
            "items": [item.as_dict() for item in self.items()],
        }

    def __repr__(self) -> str:
        return (
            f"OrderReport(amazon_order_number={self.amazon_order_number()!r}, "
            f"order_number={self.order_number!r})"
        )
