"""Contract entity gating purchases and payments."""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from customer_management.domain.exceptions import ContractStateException


@dataclass
class Contract:
    """
    A contract between the store and a customer.

    Lifecycle: signed (active) -> terminated -> renewed (active).
    """

    contract_number: str
    sign_date: datetime
    is_active: bool = True
    termination_date: Optional[datetime] = None

    def terminate(self) -> None:
        """Terminate the contract, stamping the termination time."""
        if not self.is_active:
            raise ContractStateException("Contract is already terminated")
        self.is_active = False
        self.termination_date = datetime.now(timezone.utc)

    def renew(self, new_sign_date: datetime) -> None:
        """Reactivate a terminated contract under a new sign date."""
        if self.is_active:
            raise ContractStateException("Contract is already active")
        self.is_active = True
        self.sign_date = new_sign_date
        self.termination_date = None

    @property
    def status(self) -> str:
        return "Active" if self.is_active else "Terminated"

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "contract_number": self.contract_number,
            "sign_date": self.sign_date.isoformat(),
            "is_active": self.is_active,
            "termination_date": (
                self.termination_date.isoformat() if self.termination_date else None
            ),
        }

    def __str__(self) -> str:
        return (
            f"Contract No. {self.contract_number} of "
            f"{self.sign_date:%d.%m.%Y} - {self.status}"
        )
