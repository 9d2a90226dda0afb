"""Value objects shared across the customer domain."""

from decimal import Decimal
from enum import Enum
from typing import Union

Money = Union[Decimal, int, str, float]


class CustomerTier(str, Enum):
    """Customer classification that selects the discount strategy."""

    REGULAR = "regular"
    WHOLESALE = "wholesale"
    VIP = "vip"

    @property
    def tag(self) -> str:
        """Short upper-case tag used in display summaries."""
        return self.name


def to_money(value: Money) -> Decimal:
    """
    Convert a monetary input to Decimal without binary float artifacts.

    Floats go through ``str`` so that ``33.33`` stays ``Decimal("33.33")``.
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise TypeError("Boolean is not a monetary amount")
    if isinstance(value, (int, str)):
        return Decimal(value)
    if isinstance(value, float):
        return Decimal(str(value))
    raise TypeError(f"Unsupported monetary type: {type(value).__name__}")


def is_blank(value: str | None) -> bool:
    """True for None, empty or whitespace-only strings."""
    return value is None or not value.strip()
