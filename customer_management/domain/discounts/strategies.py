"""
Discount Strategies for the customer tiers.

Each strategy maps the running purchase total of a customer to a discount
percentage and a monetary discount. Strategies never look at customer state;
the only mutable piece is the wholesale minimum order amount.
"""

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import List, Optional

from customer_management.domain.value_objects import CustomerTier, Money, to_money

from .settings import DiscountSettings, Tier, discount_settings

HUNDRED = Decimal("100")


def percentage_for_amount(
    total_amount: Decimal,
    tiers: List[Tier],
    below_first_tier: Decimal,
) -> Decimal:
    """
    Look up the percent of the highest tier whose lower bound is reached.

    Args:
        total_amount: Amount to classify
        tiers: (lower_bound, percent) pairs in ascending order
        below_first_tier: Percent returned when no lower bound is reached

    Returns:
        Discount percent for the amount
    """
    percent = below_first_tier
    for lower_bound, tier_percent in tiers:
        if total_amount < lower_bound:
            break
        percent = tier_percent
    return percent


class DiscountStrategy(ABC):
    """Interchangeable discount algorithm bound to one customer tier."""

    tier: CustomerTier
    strategy_name: str

    @abstractmethod
    def get_discount_percentage(self, total_amount: Money) -> Decimal:
        """Discount percent (0-100) for a purchase total."""
        ...

    def calculate_discount(self, total_amount: Money) -> Decimal:
        """Monetary discount: total_amount * percent / 100."""
        amount = to_money(total_amount)
        return amount * self.get_discount_percentage(amount) / HUNDRED

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class StandardDiscountStrategy(DiscountStrategy):
    """Small volume discount for regular customers (0-5%)."""

    tier = CustomerTier.REGULAR
    strategy_name = "Standard discount"

    def __init__(self, settings: DiscountSettings = discount_settings):
        self._tiers = settings.standard_tiers

    def get_discount_percentage(self, total_amount: Money) -> Decimal:
        return percentage_for_amount(to_money(total_amount), self._tiers, Decimal("0"))


class WholesaleDiscountStrategy(DiscountStrategy):
    """
    Wholesale discount (10-20%) gated by a minimum order amount.

    Below ``minimum_order_amount`` no discount applies regardless of tier.
    The minimum is the single source of truth for the owning wholesale
    customer, which reads and writes it through this strategy.
    """

    tier = CustomerTier.WHOLESALE
    strategy_name = "Wholesale discount"

    def __init__(
        self,
        minimum_order_amount: Optional[Money] = None,
        settings: DiscountSettings = discount_settings,
    ):
        if minimum_order_amount is None:
            minimum_order_amount = settings.wholesale_minimum_order
        self.minimum_order_amount = to_money(minimum_order_amount)
        self._tiers = settings.wholesale_tiers

    @property
    def minimum_order_amount(self) -> Decimal:
        return self._minimum_order_amount

    @minimum_order_amount.setter
    def minimum_order_amount(self, amount: Money) -> None:
        self._minimum_order_amount = to_money(amount)

    def get_discount_percentage(self, total_amount: Money) -> Decimal:
        amount = to_money(total_amount)
        if amount < self.minimum_order_amount:
            return Decimal("0")
        return percentage_for_amount(amount, self._tiers, Decimal("0"))

    def validate_minimum_order(self, order_amount: Money) -> bool:
        """True if the order amount reaches the minimum."""
        return to_money(order_amount) >= self.minimum_order_amount

    def __repr__(self) -> str:
        return f"WholesaleDiscountStrategy(minimum_order_amount={self.minimum_order_amount})"


class VIPDiscountStrategy(DiscountStrategy):
    """
    VIP discount (base 20-35%, tiers up to 30%).

    Below the first VIP tier the configured base percent applies. The base
    is clamped into the settings' range at construction.
    """

    tier = CustomerTier.VIP
    strategy_name = "VIP discount"

    def __init__(
        self,
        base_percentage: Optional[Money] = None,
        settings: DiscountSettings = discount_settings,
    ):
        if base_percentage is None:
            base_percentage = settings.vip_base_percentage
        base = to_money(base_percentage)
        # Clamp into [min, max]
        base = max(settings.vip_min_base_percentage, base)
        base = min(settings.vip_max_base_percentage, base)
        self._base_percentage = base
        self._tiers = settings.vip_tiers

    @property
    def base_percentage(self) -> Decimal:
        return self._base_percentage

    def get_discount_percentage(self, total_amount: Money) -> Decimal:
        return percentage_for_amount(
            to_money(total_amount), self._tiers, self.base_percentage
        )

    def get_bonus_discount_percentage(self, total_amount: Money) -> Decimal:
        """Percent granted on top of the base percent."""
        return self.get_discount_percentage(total_amount) - self.base_percentage

    def __repr__(self) -> str:
        return f"VIPDiscountStrategy(base_percentage={self.base_percentage})"
