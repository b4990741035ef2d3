"""Domain value objects."""

from .address import Address
from .money import Money

__all__ = ["Address", "Money"]
