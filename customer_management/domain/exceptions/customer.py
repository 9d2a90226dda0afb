"""Customer-related domain exceptions."""

from .base import DomainException


class InvalidCustomerDataException(DomainException):
    """Raised when customer data is missing or malformed."""

    def __init__(self, message: str):
        super().__init__(
            message=message,
            code="INVALID_CUSTOMER_DATA",
        )


class UnknownCustomerTierException(DomainException):
    """Raised when a customer tier value is not recognised."""

    def __init__(self, tier: object):
        super().__init__(
            message=f"Unknown customer tier: {tier!r}",
            code="UNKNOWN_CUSTOMER_TIER",
        )
        self.tier = tier


class TierOperationException(DomainException):
    """Raised when an operation is invoked on a customer of the wrong tier."""

    def __init__(self, operation: str, tier: str):
        super().__init__(
            message=f"Operation '{operation}' is not available for {tier} customers",
            code="TIER_OPERATION_NOT_SUPPORTED",
        )
        self.operation = operation
        self.tier = tier


class InvalidPurchaseException(DomainException):
    """Raised when a purchase is missing or contains invalid data."""

    def __init__(self, message: str = "Purchase contains invalid data"):
        super().__init__(
            message=message,
            code="INVALID_PURCHASE",
        )


class InvalidAmountException(DomainException):
    """Raised when a monetary or points amount is out of range."""

    def __init__(self, message: str):
        super().__init__(
            message=message,
            code="INVALID_AMOUNT",
        )


class CustomerNotFoundException(DomainException):
    """Raised when a customer cannot be found."""

    def __init__(self, customer_id: str):
        super().__init__(
            message=f"Customer not found: {customer_id}",
            code="CUSTOMER_NOT_FOUND",
        )
        self.customer_id = customer_id


class CustomerAlreadyExistsException(DomainException):
    """Raised when adding a customer whose identifier is already stored."""

    def __init__(self, customer_id: str):
        super().__init__(
            message=f"Customer with ID {customer_id} already exists",
            code="CUSTOMER_ALREADY_EXISTS",
        )
        self.customer_id = customer_id
