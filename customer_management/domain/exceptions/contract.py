"""Contract-related domain exceptions."""

from .base import DomainException


class InvalidContractNumberException(DomainException):
    """Raised when a contract number is blank."""

    def __init__(self):
        super().__init__(
            message="Contract number must not be empty",
            code="INVALID_CONTRACT_NUMBER",
        )


class ContractNotSignedException(DomainException):
    """Raised when a contract operation requires a contract that was never signed."""

    def __init__(self):
        super().__init__(
            message="No contract has been signed",
            code="CONTRACT_NOT_SIGNED",
        )


class ContractStateException(DomainException):
    """Raised when a contract transition is not allowed from its current state."""

    def __init__(self, message: str):
        super().__init__(
            message=message,
            code="INVALID_CONTRACT_STATE",
        )


class NoActiveContractException(DomainException):
    """Raised when an operation requires an active contract."""

    def __init__(self, message: str = "Operation requires an active contract"):
        super().__init__(
            message=message,
            code="NO_ACTIVE_CONTRACT",
        )
