"""
Line item of an order report.

A raw item looks like::

    {
        "AmazonOrderItemCode": "12345678901234",
        "SKU": "SKU-1",
        "Title": "Some product",
        "Quantity": "2",
        "ItemPrice": {"Component": [
            {"Type": "Principal", "Amount": {"currency": "EUR", "_": "20.00"}},
            {"Type": "Shipping", "Amount": {"currency": "EUR", "_": "4.90"}},
        ]},
    }

Amounts may also be plain scalars; they then take the default currency.
"""
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, List, Mapping, Optional

from ..exceptions import InvalidInputError, MissingFieldError
from ..value_objects import Money

REQUIRED_FIELDS = ("AmazonOrderItemCode", "SKU")

# keys XML-to-map decoders use for element text and the currency attribute
_TEXT_KEYS = ("_", "#text", "value")
_CURRENCY_KEYS = ("currency", "@currency")


def as_list(value: Any) -> List[Any]:
    """Return a repeated element as a list.

    Decoders collapse a one-element list into the element itself.
    """
    if value is None or value == "":
        return []
    if isinstance(value, Mapping):
        return [value]
    if isinstance(value, (list, tuple)):
        return list(value)
    raise InvalidInputError(
        f"Expected a list of mappings, got {type(value).__name__}"
    )


def parse_amount(value: Any, default_currency: str) -> Money:
    """Convert a decoded ``Amount`` element into Money.

    Raises:
        InvalidInputError: If the amount is not a decimal number
    """
    currency = default_currency
    text = value
    if isinstance(value, Mapping):
        text = next((value[key] for key in _TEXT_KEYS if key in value), None)
        currency = next(
            (value[key] for key in _CURRENCY_KEYS if value.get(key)), default_currency
        )
    try:
        amount = Decimal(str(text).strip())
    except (InvalidOperation, ValueError) as e:
        raise InvalidInputError(f"Invalid amount: {value!r}") from e
    if not amount.is_finite():
        raise InvalidInputError(f"Invalid amount: {value!r}")
    try:
        return Money(amount=amount, currency=currency)
    except ValueError as e:
        raise InvalidInputError(str(e)) from e


def section(raw: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    """Return the nested map under ``key``, empty when absent."""
    value = raw.get(key)
    if value is None or value == "":
        return {}
    if not isinstance(value, Mapping):
        raise InvalidInputError(
            f"{key} must be a mapping, got {type(value).__name__}"
        )
    return value


def sum_components(components: Any, default_currency: str) -> Dict[str, Money]:
    """Sum ``{Type, Amount}`` entries per type, keeping first-seen order."""
    totals: Dict[str, Money] = {}
    for component in as_list(components):
        if not isinstance(component, Mapping):
            raise InvalidInputError(
                f"Price component must be a mapping, got {type(component).__name__}"
            )
        kind = component.get("Type")
        if not kind:
            continue
        money = parse_amount(component.get("Amount"), default_currency)
        if kind not in totals:
            totals[kind] = money
            continue
        try:
            totals[kind] = totals[kind] + money
        except ValueError as e:
            raise InvalidInputError(f"{kind}: {e}") from e
    return totals


class OrderReportItem:
    """One line of an order report.

    Behaves like the order line items of the order feeds: sku, quantity,
    unit price and subtotal.
    """

    def __init__(self, raw: Mapping[str, Any], default_currency: str = "EUR"):
        if not isinstance(raw, Mapping):
            raise InvalidInputError(
                f"Item data must be a mapping, got {type(raw).__name__}"
            )
        for key in REQUIRED_FIELDS:
            if raw.get(key) in (None, ""):
                raise MissingFieldError(key, record="OrderReportItem")

        self._raw = raw
        self._default_currency = default_currency
        self._quantity = self._parse_quantity(raw.get("Quantity"))
        self._components = sum_components(
            section(raw, "ItemPrice").get("Component"), default_currency
        )
        self._fees = sum_components(
            section(raw, "ItemFees").get("Fee"), default_currency
        )

    @staticmethod
    def _parse_quantity(value: Any) -> int:
        if value is None or value == "":
            return 1
        if isinstance(value, bool):
            raise InvalidInputError(f"Invalid quantity: {value!r}")
        try:
            return int(str(value).strip())
        except ValueError as e:
            raise InvalidInputError(f"Invalid quantity: {value!r}") from e

    @property
    def raw(self) -> Mapping[str, Any]:
        return self._raw

    def amazon_order_item(self) -> str:
        return self._raw["AmazonOrderItemCode"]

    def sku(self) -> str:
        return self._raw["SKU"]

    def product_name(self) -> Optional[str]:
        return self._raw.get("Title")

    def product_tax_code(self) -> Optional[str]:
        return self._raw.get("ProductTaxCode")

    def quantity(self) -> int:
        return self._quantity

    def currency(self) -> str:
        """Currency of the principal, else of any component."""
        if "Principal" in self._components:
            return self._components["Principal"].currency
        for money in self._components.values():
            return money.currency
        return self._default_currency

    def price_components(self) -> Dict[str, Money]:
        return dict(self._components)

    def fees(self) -> Dict[str, Money]:
        return dict(self._fees)

    def promotions(self) -> List[Mapping[str, Any]]:
        return as_list(self._raw.get("Promotion"))

    def _component(self, kind: str) -> Money:
        return self._components.get(kind) or Money.zero(self.currency())

    def subtotal(self) -> Money:
        """Principal amount for the whole line."""
        return self._component("Principal")

    def price(self) -> Money:
        """Unit price, the subtotal split over the quantity."""
        return self.subtotal().divide(self._quantity)

    def shipping(self) -> Money:
        return self._component("Shipping")

    def tax(self) -> Money:
        return self._component("Tax")

    def as_dict(self) -> Dict[str, Any]:
        return {
            "amazon_order_item": self.amazon_order_item(),
            "sku": self.sku(),
            "product_name": self.product_name(),
            "quantity": self._quantity,
            "price": str(self.price().amount),
            "subtotal": str(self.subtotal().amount),
            "shipping": str(self.shipping().amount),
            "currency": self.currency(),
        }

    def __repr__(self) -> str:
        return f"OrderReportItem(sku={self.sku()!r}, quantity={self._quantity})"
