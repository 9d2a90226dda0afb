"""Base domain exception."""


class DomainException(Exception):
    """
    Base exception for all domain-level errors.

    Domain exceptions represent precondition violations: the caller is
    expected to have checked them, so they are not part of routine flow.
    Expected business outcomes (a rejected payment, insufficient bonus
    points) are returned as values instead.
    """

    def __init__(self, message: str, code: str = "DOMAIN_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)
