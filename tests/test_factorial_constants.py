import importlib
import os
import sys
import unittest
from unittest.mock import patch

from factorial_calculator import constants
from factorial_calculator.exceptions import RecursionDepthExceededError
from factorial_calculator.factorial_calculator import FactorialCalculator


class TestFactorialConstants(unittest.TestCase):
    """Tests for the environment-driven configuration."""

    def setUp(self):
        FactorialCalculator._instance = None

    def tearDown(self):
        # Restore values read from the unpatched environment
        importlib.reload(constants)
        FactorialCalculator._instance = None

    def _reload_with(self, **env):
        with patch.dict(os.environ, env):
            importlib.reload(constants)

    def test_defaults(self):
        with patch.dict(os.environ):
            for name in ("FACTORIAL_MAX_INPUT", "FACTORIAL_HOST", "FACTORIAL_PORT"):
                os.environ.pop(name, None)
            importlib.reload(constants)
        self.assertEqual(constants.MAX_FACTORIAL_INPUT, 500)
        self.assertEqual(constants.HOST, "0.0.0.0")
        self.assertEqual(constants.PORT, 8000)
        self.assertEqual(constants.SAMPLE_NUMBER, 5)

    def test_max_input_override(self):
        self._reload_with(FACTORIAL_MAX_INPUT="42")
        self.assertEqual(constants.MAX_FACTORIAL_INPUT, 42)
        self.assertEqual(FactorialCalculator().max_recursion_input, 42)
        with self.assertRaises(RecursionDepthExceededError):
            FactorialCalculator().recursive_factorial(43)

    def test_max_input_capped_below_recursion_limit(self):
        """A huge limit is capped so deep input is rejected instead of overflowing the stack."""
        self._reload_with(FACTORIAL_MAX_INPUT="100000")
        ceiling = sys.getrecursionlimit() - constants.RECURSION_SAFETY_MARGIN
        self.assertEqual(constants.MAX_FACTORIAL_INPUT, ceiling)

        calculator = FactorialCalculator()
        self.assertEqual(calculator.max_recursion_input, ceiling)
        for n in (ceiling + 1, 1500, 100000):
            with self.subTest(n=n):
                with self.assertRaises(RecursionDepthExceededError) as ctx:
                    calculator.recursive_factorial(n)
                self.assertIsInstance(ctx.exception, ValueError)
        self.assertEqual(
            calculator.recursive_factorial(ceiling),
            calculator.iterative_factorial(ceiling),
        )

    def test_negative_max_input_rejected(self):
        with self.assertRaises(ValueError):
            self._reload_with(FACTORIAL_MAX_INPUT="-1")

    def test_host_and_port_override(self):
        self._reload_with(FACTORIAL_HOST="127.0.0.1", FACTORIAL_PORT="9100")
        self.assertEqual(constants.HOST, "127.0.0.1")
        self.assertEqual(constants.PORT, 9100)


if __name__ == '__main__':
    unittest.main()
