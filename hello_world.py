#!/usr/bin/env python3
"""
Hello World program for the factorial calculator.

Computes the factorial of a fixed sample number with both the recursive
and the iterative strategy and prints one line per strategy.
"""

from factorial_calculator.constants import SAMPLE_NUMBER
from factorial_calculator.container import Container
from logging_config import setup_logging


def main() -> None:
    """
    Main function that prints both factorials of SAMPLE_NUMBER.
    """
    logger = setup_logging("hello_world")
    logger.info("Good evening!")

    calculator = Container().calculator()
    try:
        report = calculator.report(SAMPLE_NUMBER)
    except Exception as e:
        logger.error(f"An error occurred: {e}")
        raise

    for line in report.to_lines():
        print(line)


if __name__ == "__main__":
    main()
