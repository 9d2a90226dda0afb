"""
Customer construction and basket pricing.
"""

from .factory import (
    create_customer,
    create_discount_strategy,
    create_sample_customer,
    create_vip_customer,
    create_wholesale_customer,
    resolve_tier,
    validate_customer_data,
)
from .pricing import PurchaseQuote, quote_purchases

__all__ = [
    # Factory
    "create_customer",
    "create_discount_strategy",
    "create_sample_customer",
    "create_vip_customer",
    "create_wholesale_customer",
    "resolve_tier",
    "validate_customer_data",
    # Pricing
    "PurchaseQuote",
    "quote_purchases",
]
