"""Custom exceptions for the negative test calculator."""


class NegativeTestError(Exception):
    """Base exception for negative test calculator errors."""


class InvalidInputError(NegativeTestError, ValueError):
    """Raised when an input is outside its range, non-numeric or non-finite."""


class DomainError(NegativeTestError, ArithmeticError):
    """Raised when the posterior is undefined (0/0) for the given inputs."""
