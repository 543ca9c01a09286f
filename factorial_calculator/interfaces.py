"""
Factorial Calculator Interface

This module defines the abstract interface for computing factorials.
Implementations provide two independent strategies that must agree
on every valid input.
"""

from abc import ABC, abstractmethod

from .models import FactorialReport


class IFactorialCalculator(ABC):
    """
    Abstract interface for factorial computation.

    This interface defines the contract for classes that compute the factorial
    of a non-negative integer both recursively and iteratively.
    """

    @abstractmethod
    def recursive_factorial(self, n: int) -> int:
        """
        Compute n! by expressing f(n) in terms of f(n - 1).

        Args:
            n (int): A non-negative integer (>= 0).

        Returns:
            int: The factorial of n (n!).

        Raises:
            ValueError: If n is negative or too deep to recurse.
            TypeError: If n is not an integer.
        """
        ...

    @abstractmethod
    def iterative_factorial(self, n: int) -> int:
        """
        Compute n! with a single accumulator.

        Args:
            n (int): A non-negative integer (>= 0).

        Returns:
            int: The factorial of n (n!).

        Raises:
            ValueError: If n is negative.
            TypeError: If n is not an integer.
        """
        ...

    def report(self, n: int) -> FactorialReport:
        """Compute both strategies for n and collect the results."""
        recursive = self.recursive_factorial(n)
        iterative = self.iterative_factorial(n)
        return FactorialReport(
            n=n,
            recursive=recursive,
            iterative=iterative,
            consistent=recursive == iterative,
        )
