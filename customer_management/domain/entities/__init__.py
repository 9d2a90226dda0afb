"""Domain Entities - Core business objects."""

from .contract import Contract
from .customer import Customer, TierTerms, VipTerms, WholesaleTerms
from .customer_data import CustomerData
from .payment import PaymentResult
from .purchase import Purchase

__all__ = [
    "Contract",
    "Customer",
    "CustomerData",
    "PaymentResult",
    "Purchase",
    "TierTerms",
    "VipTerms",
    "WholesaleTerms",
]
