"""
Factorial Calculator Implementation

This module contains the concrete implementation of the FactorialCalculator class,
which computes the factorial of a non-negative integer recursively and iteratively.
"""

import logging
import threading
from typing import Optional

from . import constants
from .exceptions import NegativeFactorialInputError, RecursionDepthExceededError
from .interfaces import IFactorialCalculator
from .models import FactorialReport

logger = logging.getLogger(__name__)


def _validate(n: int) -> None:
    # bool is a subclass of int but True! is not a meaningful request
    if not isinstance(n, int) or isinstance(n, bool):
        raise TypeError(f"Expected an integer, got {type(n).__name__}")
    if n < 0:
        raise NegativeFactorialInputError(n)


class FactorialCalculator(IFactorialCalculator):
    """
    Concrete implementation of IFactorialCalculator.

    Follows the Singleton pattern so a single calculator is shared across the
    driver and the HTTP API, both of which obtain it through the DI container.
    Both strategies are pure, so the shared instance is safe to call from
    several threads.
    """

    _instance: Optional['FactorialCalculator'] = None
    _lock = threading.Lock()

    def __new__(cls) -> 'FactorialCalculator':
        """Create the instance on first use, thread-safe."""
        if cls._instance is None:
            with cls._lock:
                # Double-check locking
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
                    cls._instance._max_recursion_input = constants.MAX_FACTORIAL_INPUT
        return cls._instance

    @property
    def max_recursion_input(self) -> int:
        """Largest n accepted by the recursive strategy."""
        return self._max_recursion_input

    def recursive_factorial(self, n: int) -> int:
        """
        Compute the factorial of a non-negative integer recursively.

        Args:
            n (int): A non-negative integer, at most max_recursion_input.

        Returns:
            int: The factorial of n (n!).

        Raises:
            NegativeFactorialInputError: If n is negative.
            RecursionDepthExceededError: If n is above max_recursion_input.
            TypeError: If n is not an integer.

        Examples:
            >>> calculator = FactorialCalculator()
            >>> calculator.recursive_factorial(0)
            1
            >>> calculator.recursive_factorial(5)
            120
        """
        _validate(n)
        if n > self._max_recursion_input:
            raise RecursionDepthExceededError(n, self._max_recursion_input)
        return self._recurse(n)

    def _recurse(self, n: int) -> int:
        if n == 0 or n == 1:
            return 1
        return n * self._recurse(n - 1)

    def iterative_factorial(self, n: int) -> int:
        """
        Compute the factorial of a non-negative integer iteratively.

        Uses constant stack depth, so there is no upper bound on n.

        Args:
            n (int): A non-negative integer.

        Returns:
            int: The factorial of n (n!).

        Raises:
            NegativeFactorialInputError: If n is negative.
            TypeError: If n is not an integer.

        Examples:
            >>> calculator = FactorialCalculator()
            >>> calculator.iterative_factorial(5)
            120
        """
        _validate(n)
        result = 1
        for i in range(2, n + 1):
            result *= i
        return result

    def report(self, n: int) -> FactorialReport:
        report = super().report(n)
        if not report.consistent:
            logger.error(
                f"Strategies disagree for n={n}: recursive={report.recursive}, "
                f"iterative={report.iterative}"
            )
        else:
            logger.debug(f"Computed {n}! with both strategies")
        return report
