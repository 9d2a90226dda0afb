"""
Basket pricing.

Prices a basket of new purchases before they are added to a customer: the
discount percent is taken from the customer's strategy for the basket's
gross total and assigned to every line.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import List, Optional, Sequence

from customer_management.domain.discounts import DiscountStrategy
from customer_management.domain.entities import Purchase


@dataclass(frozen=True)
class PurchaseQuote:
    """
    Priced basket with itemized lines.

    Includes:
    - The priced purchases (with discount_percent assigned)
    - Gross total, discount percent and amount, and net total
    """

    items: List[Purchase]
    total_before_discount: Decimal
    discount_percent: Decimal
    discount_amount: Decimal
    final_amount: Decimal

    @property
    def total_items(self) -> int:
        """Number of lines in this quote."""
        return len(self.items)


def quote_purchases(
    purchases: Sequence[Purchase],
    strategy: Optional[DiscountStrategy],
) -> PurchaseQuote:
    """
    Assign the basket discount percent to each purchase and total it up.

    Args:
        purchases: Purchases to price (mutated: discount_percent is set)
        strategy: Discount strategy of the buying customer, if any

    Returns:
        PurchaseQuote for the basket
    """
    items = list(purchases)
    zero = Decimal("0")

    if not items:
        return PurchaseQuote(
            items=[],
            total_before_discount=zero,
            discount_percent=zero,
            discount_amount=zero,
            final_amount=zero,
        )

    total_before = sum((p.total_price for p in items), zero)
    percent = strategy.get_discount_percentage(total_before) if strategy else zero

    for purchase in items:
        purchase.discount_percent = percent

    return PurchaseQuote(
        items=items,
        total_before_discount=total_before,
        discount_percent=percent,
        discount_amount=sum((p.discount_amount for p in items), zero),
        final_amount=sum((p.final_amount for p in items), zero),
    )
