"""Domain Exceptions - Business rule violations and domain errors."""

from .base import DomainException
from .contract import (
    ContractNotSignedException,
    ContractStateException,
    InvalidContractNumberException,
    NoActiveContractException,
)
from .customer import (
    CustomerAlreadyExistsException,
    CustomerNotFoundException,
    InvalidAmountException,
    InvalidCustomerDataException,
    InvalidPurchaseException,
    TierOperationException,
    UnknownCustomerTierException,
)

__all__ = [
    "DomainException",
    "ContractNotSignedException",
    "ContractStateException",
    "InvalidContractNumberException",
    "NoActiveContractException",
    "CustomerAlreadyExistsException",
    "CustomerNotFoundException",
    "InvalidAmountException",
    "InvalidCustomerDataException",
    "InvalidPurchaseException",
    "TierOperationException",
    "UnknownCustomerTierException",
]
