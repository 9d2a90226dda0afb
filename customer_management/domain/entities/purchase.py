"""Purchase entity: a single line item bought by a customer."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from uuid import uuid4

from customer_management.domain.value_objects import Money, is_blank, to_money


@dataclass
class Purchase:
    """
    A purchased line item.

    The discount percent is assigned from outside (by basket pricing)
    rather than computed by the purchase itself.

    Attributes:
        product_name: Name of the product
        quantity: Number of units (valid when >= 1)
        price: Unit price (valid when > 0)
        discount_percent: Discount percent applied to this line
        id: Unique purchase identifier
        purchase_date: When the purchase was recorded
    """

    product_name: str
    quantity: int
    price: Decimal
    discount_percent: Decimal = Decimal("0")
    id: str = field(default_factory=lambda: str(uuid4()))
    purchase_date: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __setattr__(self, name: str, value) -> None:
        # Money fields are always stored as Decimal
        if name in ("price", "discount_percent"):
            value = to_money(value)
        super().__setattr__(name, value)

    @property
    def total_price(self) -> Decimal:
        """Gross line total: quantity * price."""
        return self.quantity * self.price

    @property
    def discount_amount(self) -> Decimal:
        return self.total_price * self.discount_percent / Decimal("100")

    @property
    def final_amount(self) -> Decimal:
        """Net line total after the discount."""
        return self.total_price - self.discount_amount

    def is_valid(self) -> bool:
        """Check that the purchase can be added to a customer."""
        return (
            not is_blank(self.product_name)
            and self.quantity > 0
            and self.price > 0
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "purchase_id": self.id,
            "product_name": self.product_name,
            "quantity": self.quantity,
            "price": str(self.price),
            "discount_percent": str(self.discount_percent),
            "total_price": str(self.total_price),
            "final_amount": str(self.final_amount),
            "purchase_date": self.purchase_date.isoformat(),
        }

    def __str__(self) -> str:
        return f"{self.product_name} x {self.quantity} = {self.total_price:.2f}"
