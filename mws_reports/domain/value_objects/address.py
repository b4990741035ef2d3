"""Postal address carried by an order report."""

from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Mapping, Optional

from ..exceptions import InvalidInputError

# report key -> attribute
_RAW_KEYS = {
    "Name": "name",
    "AddressFieldOne": "address_field_one",
    "AddressFieldTwo": "address_field_two",
    "AddressFieldThree": "address_field_three",
    "City": "city",
    "County": "county",
    "District": "district",
    "StateOrRegion": "state_or_region",
    "PostalCode": "postal_code",
    "CountryCode": "country_code",
    "Phone": "phone",
}


@dataclass
class Address:
    """
    Shipping or billing address.

    Mutable on purpose: an order report hands out the same instance on
    every call, so corrections made by a caller stick.
    """
    name: Optional[str] = None
    address_field_one: Optional[str] = None
    address_field_two: Optional[str] = None
    address_field_three: Optional[str] = None
    city: Optional[str] = None
    county: Optional[str] = None
    district: Optional[str] = None
    state_or_region: Optional[str] = None
    postal_code: Optional[str] = None
    country_code: Optional[str] = None
    phone: Optional[str] = None

    @classmethod
    def from_raw(cls, raw: Mapping[str, Any]) -> "Address":
        """Build an address from a raw report map.

        Args:
            raw: Decoded ``Address`` element. Unknown keys are ignored.

        Returns:
            Address instance

        Raises:
            InvalidInputError: If ``raw`` is not a mapping
        """
        if not isinstance(raw, Mapping):
            raise InvalidInputError(
                f"Address data must be a mapping, got {type(raw).__name__}"
            )
        return cls(**{attr: raw[key] for key, attr in _RAW_KEYS.items() if key in raw})

    @property
    def address1(self) -> Optional[str]:
        return self.address_field_one

    @property
    def address2(self) -> str:
        parts = [self.address_field_two, self.address_field_three]
        return " ".join(str(part) for part in parts if part)

    @property
    def address_lines(self) -> List[str]:
        lines = [self.address_field_one, self.address_field_two, self.address_field_three]
        return [str(line) for line in lines if line]

    @property
    def state(self) -> Optional[str]:
        return self.state_or_region

    @property
    def zip(self) -> Optional[str]:
        return self.postal_code

    @property
    def country(self) -> Optional[str]:
        return self.country_code

    def as_dict(self) -> Dict[str, Optional[str]]:
        return asdict(self)
