"""Exceptions raised by the factorial calculator."""


class FactorialError(ValueError):
    """Base error for invalid factorial input.

    Subclasses ValueError so callers that only know the calculator
    contract can keep catching ValueError.
    """


class NegativeFactorialInputError(FactorialError):
    """Raised when the factorial of a negative number is requested."""

    def __init__(self, n: int):
        self.n = n
        super().__init__(f"Factorial is not defined for negative numbers (got {n})")


class RecursionDepthExceededError(FactorialError):
    """Raised when n is too large for the recursive strategy."""

    def __init__(self, n: int, limit: int):
        self.n = n
        self.limit = limit
        super().__init__(f"n={n} exceeds the recursion limit of {limit}")
