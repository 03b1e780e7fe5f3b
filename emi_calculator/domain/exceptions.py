"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class UnknownFieldError(DomainException, ValueError):
    """Form event refers to a field the calculator does not have"""

    pass
