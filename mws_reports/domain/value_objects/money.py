"""Money value object for report amounts."""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

CENT = Decimal("0.01")


@dataclass(frozen=True)
class Money:
    """
    Immutable amount with its currency.

    Report amounts arrive as strings; they are kept as Decimal so that
    summing components never drifts.
    """
    amount: Decimal
    currency: str

    def __post_init__(self):
        if not isinstance(self.amount, Decimal):
            object.__setattr__(self, 'amount', Decimal(str(self.amount)))

        if not isinstance(self.currency, str) or len(self.currency) != 3:
            raise ValueError(
                f"Currency must be 3-letter ISO code, got: {self.currency}"
            )

    @classmethod
    def zero(cls, currency: str) -> "Money":
        return cls(amount=Decimal("0"), currency=currency)

    def __str__(self) -> str:
        return f"{self.amount} {self.currency}"

    def __add__(self, other: 'Money') -> 'Money':
        """Add two Money objects (must have same currency)."""
        if self.currency != other.currency:
            raise ValueError(
                f"Cannot add different currencies: {self.currency} vs {other.currency}"
            )
        return Money(amount=self.amount + other.amount, currency=self.currency)

    def __mul__(self, quantity: int) -> 'Money':
        return Money(amount=self.amount * quantity, currency=self.currency)

    __rmul__ = __mul__

    def divide(self, quantity: int) -> 'Money':
        """Split the amount over ``quantity`` units, rounded to cents."""
        if quantity == 0:
            return Money.zero(self.currency)
        unit = (self.amount / quantity).quantize(CENT, rounding=ROUND_HALF_UP)
        return Money(amount=unit, currency=self.currency)

    def is_zero(self) -> bool:
        return self.amount == 0
