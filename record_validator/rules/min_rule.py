"""
min: inclusive lower bound.

Strings are measured by code points (len(str)), integers by value.
"""

from typing import List

from ..errors import RuleViolationError
from .base import RuleEvaluator


class MinRule(RuleEvaluator):
    """Fails when the measured value is strictly less than the bound."""

    name = "min"

    def description(self) -> str:
        return f"Value (or string length) must be at least {self.bound}"

    def check_string(self, field: str, value: str) -> List[RuleViolationError]:
        return self._check_measure(field, len(value))

    def check_integer(self, field: str, value: int) -> List[RuleViolationError]:
        return self._check_measure(field, value)

    def _check_measure(self, field: str, measure: int) -> List[RuleViolationError]:
        if measure < self.bound:
            return [self.violation(f"field {field} is less than {self.bound}", field)]
        return []
