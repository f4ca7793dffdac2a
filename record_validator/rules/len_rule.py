"""
len: exact length (strings) or exact value (integers).

Expands to a min check and a max check against the same bound, so a
failing field yields exactly one of "less than" or "greater than".
"""

from typing import List, Optional

from ..errors import RuleViolationError
from .base import RuleEvaluator
from .max_rule import MaxRule
from .min_rule import MinRule


class LenRule(RuleEvaluator):
    """Applies MinRule and MaxRule with a shared bound."""

    name = "len"

    def __init__(self, argument: str, bound: Optional[int] = None):
        super().__init__(argument, bound)
        self.checks = [MinRule(argument, bound), MaxRule(argument, bound)]

    def description(self) -> str:
        return f"Value (or string length) must be exactly {self.bound}"

    def check_string(self, field: str, value: str) -> List[RuleViolationError]:
        violations = []
        for check in self.checks:
            violations.extend(check.check_string(field, value))
        return violations

    def check_integer(self, field: str, value: int) -> List[RuleViolationError]:
        violations = []
        for check in self.checks:
            violations.extend(check.check_integer(field, value))
        return violations
