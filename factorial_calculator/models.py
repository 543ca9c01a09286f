from typing import List

from pydantic import BaseModel, Field

from .constants import MAX_FACTORIAL_INPUT


class FactorialRequest(BaseModel):
    """Request model for computing a factorial.

    Attributes:
        n (int): Number whose factorial is requested, 0 <= n <= MAX_FACTORIAL_INPUT.
    """
    n: int = Field(
        ...,
        ge=0,
        le=MAX_FACTORIAL_INPUT,
        description="Non-negative integer whose factorial is computed",
    )


class FactorialReport(BaseModel):
    """Results of both factorial strategies for one input.

    Attributes:
        n (int): The input.
        recursive (int): Result of the recursive strategy.
        iterative (int): Result of the iterative strategy.
        consistent (bool): Whether both strategies agree.
    """
    n: int = Field(..., ge=0, description="Input value")
    recursive: int = Field(..., description="Recursive factorial of n")
    iterative: int = Field(..., description="Iterative factorial of n")
    consistent: bool = Field(..., description="True when both strategies agree")

    def to_lines(self) -> List[str]:
        """Render the report as the two human-readable output lines."""
        return [
            f"Recursive factorial of {self.n} is: {self.recursive}",
            f"Iterative factorial of {self.n} is: {self.iterative}",
        ]
