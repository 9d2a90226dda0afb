"""Personal data snapshot of a customer."""

from dataclasses import dataclass
from typing import List

from customer_management.domain.value_objects import is_blank


@dataclass(frozen=True)
class CustomerData:
    """Editable personal fields of a customer, passed as one unit."""

    full_name: str = ""
    email: str = ""
    phone: str = ""
    address: str = ""

    def validate(self) -> List[str]:
        errors = []

        if is_blank(self.full_name):
            errors.append("full_name is required")

        if is_blank(self.email):
            errors.append("email is required")

        if is_blank(self.phone):
            errors.append("phone is required")

        return errors

    def is_valid(self) -> bool:
        return not self.validate()

    def __str__(self) -> str:
        return f"{self.full_name} | {self.email} | {self.phone}"
