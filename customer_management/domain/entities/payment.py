"""Payment result value object."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal


@dataclass(frozen=True)
class PaymentResult:
    """
    Immutable outcome of a single payment attempt.

    A rejected payment is an expected business outcome, so it is reported
    through this value rather than raised.
    """

    success: bool
    message: str
    paid_amount: Decimal = Decimal("0")
    remaining_amount: Decimal = Decimal("0")
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def succeeded(cls, paid_amount: Decimal, remaining_amount: Decimal) -> "PaymentResult":
        return cls(
            success=True,
            message="Payment processed successfully",
            paid_amount=paid_amount,
            remaining_amount=remaining_amount,
        )

    @classmethod
    def failed(cls, message: str) -> "PaymentResult":
        return cls(success=False, message=message)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "success": self.success,
            "message": self.message,
            "paid_amount": str(self.paid_amount),
            "remaining_amount": str(self.remaining_amount),
            "timestamp": self.timestamp.isoformat(),
        }

    def __str__(self) -> str:
        if self.success:
            return (
                f"Payment of {self.paid_amount:.2f} processed. "
                f"Remaining: {self.remaining_amount:.2f}"
            )
        return f"Payment failed: {self.message}"
