"""
Factorial Calculator Package

Computes the factorial of a non-negative integer with a recursive and an
iterative strategy. Exposes the interface, the singleton implementation,
the pydantic models and the error types.
"""

from .exceptions import FactorialError, NegativeFactorialInputError, RecursionDepthExceededError
from .factorial_calculator import FactorialCalculator
from .interfaces import IFactorialCalculator
from .models import FactorialReport, FactorialRequest

__all__ = [
    "IFactorialCalculator",
    "FactorialCalculator",
    "FactorialReport",
    "FactorialRequest",
    "FactorialError",
    "NegativeFactorialInputError",
    "RecursionDepthExceededError",
]
