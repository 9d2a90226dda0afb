"""Data transfer objects for customer operations."""

from dataclasses import dataclass
from decimal import Decimal
from typing import List, Optional

from customer_management.domain.value_objects import CustomerTier, Money, is_blank


@dataclass(frozen=True)
class RegisterCustomerRequest:
    """Input data for registering a new customer."""

    tier: str
    full_name: str
    email: str
    phone: str
    address: str = ""
    minimum_order_amount: Optional[Money] = None
    personal_manager: Optional[str] = None

    def validate(self) -> List[str]:
        errors = []

        if self.tier not in {t.value for t in CustomerTier}:
            errors.append(f"tier must be one of: {', '.join(t.value for t in CustomerTier)}")

        if is_blank(self.full_name):
            errors.append("full_name is required")

        if is_blank(self.email) or "@" not in self.email:
            errors.append("email must be a valid address")

        if is_blank(self.phone):
            errors.append("phone is required")

        if self.minimum_order_amount is not None and self.tier != CustomerTier.WHOLESALE.value:
            errors.append("minimum_order_amount only applies to wholesale customers")

        if self.personal_manager is not None and self.tier != CustomerTier.VIP.value:
            errors.append("personal_manager only applies to VIP customers")

        return errors


@dataclass(frozen=True)
class PurchaseItem:
    """A line item requested for purchase."""

    product_name: str
    quantity: int
    price: Money


@dataclass(frozen=True)
class CustomerSummary:
    """Brief summary of a customer for listings."""

    customer_id: str
    tier: str
    full_name: str
    email: str
    phone: str
    contract_status: str
    purchase_count: int
    total_amount: Decimal
    discount: Decimal
    total_with_discount: Decimal

    @classmethod
    def from_entity(cls, customer) -> "CustomerSummary":
        if customer.contract is None:
            contract_status = "none"
        else:
            contract_status = customer.contract.status.lower()

        discount = customer.apply_discount()
        total = customer.total_amount

        return cls(
            customer_id=customer.id,
            tier=customer.tier.value,
            full_name=customer.full_name,
            email=customer.email,
            phone=customer.phone,
            contract_status=contract_status,
            purchase_count=len(customer.purchases),
            total_amount=total,
            discount=discount,
            total_with_discount=total - discount,
        )
