"""Configuration for the factorial calculator service."""

import logging
import os
import sys

logger = logging.getLogger(__name__)

SERVICE_NAME = "factorial_calculator"
SERVICE_VERSION = "1.0.0"

# Input used by the hello_world driver
SAMPLE_NUMBER = 5

# Frames left free for callers of the recursive strategy (test runner, ASGI threadpool)
RECURSION_SAFETY_MARGIN = 200


def _max_factorial_input() -> int:
    """Reads FACTORIAL_MAX_INPUT and caps it below the interpreter recursion limit.

    Raises:
        ValueError: If the configured value is not a non-negative integer.
    """
    configured = int(os.getenv("FACTORIAL_MAX_INPUT", "500"))
    if configured < 0:
        raise ValueError(f"FACTORIAL_MAX_INPUT must be non-negative, got {configured}")
    ceiling = max(sys.getrecursionlimit() - RECURSION_SAFETY_MARGIN, 1)
    if configured > ceiling:
        logger.warning(
            f"FACTORIAL_MAX_INPUT={configured} exceeds the recursion ceiling, using {ceiling}"
        )
        return ceiling
    return configured


# Upper bound for n, keeps the recursive strategy far from the interpreter stack limit
MAX_FACTORIAL_INPUT = _max_factorial_input()

HOST = os.getenv("FACTORIAL_HOST", "0.0.0.0")
PORT = int(os.getenv("FACTORIAL_PORT", "8000"))
