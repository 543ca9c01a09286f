import unittest

from pydantic import ValidationError

from factorial_calculator.constants import MAX_FACTORIAL_INPUT
from factorial_calculator.models import FactorialReport, FactorialRequest


class TestFactorialRequest(unittest.TestCase):
    """Tests for the FactorialRequest model."""

    def test_valid_bounds(self):
        self.assertEqual(FactorialRequest(n=0).n, 0)
        self.assertEqual(FactorialRequest(n=MAX_FACTORIAL_INPUT).n, MAX_FACTORIAL_INPUT)

    def test_negative_rejected(self):
        with self.assertRaises(ValidationError):
            FactorialRequest(n=-1)

    def test_above_limit_rejected(self):
        with self.assertRaises(ValidationError):
            FactorialRequest(n=MAX_FACTORIAL_INPUT + 1)

    def test_missing_n_rejected(self):
        with self.assertRaises(ValidationError):
            FactorialRequest()


class TestFactorialReport(unittest.TestCase):
    """Tests for the FactorialReport model."""

    def test_to_lines(self):
        report = FactorialReport(n=5, recursive=120, iterative=120, consistent=True)
        self.assertEqual(
            report.to_lines(),
            [
                "Recursive factorial of 5 is: 120",
                "Iterative factorial of 5 is: 120",
            ],
        )


if __name__ == '__main__':
    unittest.main()
