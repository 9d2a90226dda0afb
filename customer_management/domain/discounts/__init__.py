"""
Discount strategies for the customer tiers.
"""

from .settings import DiscountSettings, discount_settings, get_discount_settings
from .strategies import (
    DiscountStrategy,
    StandardDiscountStrategy,
    VIPDiscountStrategy,
    WholesaleDiscountStrategy,
    percentage_for_amount,
)

__all__ = [
    # Settings
    "DiscountSettings",
    "discount_settings",
    "get_discount_settings",
    # Strategies
    "DiscountStrategy",
    "StandardDiscountStrategy",
    "WholesaleDiscountStrategy",
    "VIPDiscountStrategy",
    "percentage_for_amount",
]
