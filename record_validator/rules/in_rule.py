"""
in: membership in a comma-separated list of literals.

The argument is split on "," with no trimming, and the value must equal
one entry exactly. Integers are compared through their base-10 text.
An empty list admits nothing.
"""

from typing import List

from ..errors import RuleViolationError
from .base import RuleEvaluator


class InRule(RuleEvaluator):
    """Fails when the value is not one of the listed literals."""

    name = "in"

    def description(self) -> str:
        return f"Value must be one of: {self.argument}"

    def admissible(self) -> List[str]:
        if not self.argument:
            return []
        return self.argument.split(",")

    def check_string(self, field: str, value: str) -> List[RuleViolationError]:
        if value in self.admissible():
            return []
        return [self.violation(f"value of field {field} is not in {self.argument}", field)]

    def check_integer(self, field: str, value: int) -> List[RuleViolationError]:
        return self.check_string(field, str(int(value)))
