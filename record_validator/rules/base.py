"""
Abstract base class for rule evaluators.

Every rule kind (min, max, len, in) subclasses RuleEvaluator. The field
validator instantiates one evaluator per parsed rule and calls check()
with the field's descriptor and runtime value.

Evaluators are type-aware: check() dispatches on the field's kind to
check_string() or check_integer(). Fields of any other kind are skipped.
Evaluators never raise; a failed check is returned as RuleViolationError.
"""

from abc import ABC, abstractmethod
from typing import Any, List, Optional

from ..errors import RuleViolationError
from ..field_descriptor import FieldDescriptor, FieldKind


class RuleEvaluator(ABC):
    """
    Abstract base class for all rule evaluators.

    The argument is the raw text after the colon; bound is its integer
    value for numeric rules and None otherwise.
    """

    name = ""

    def __init__(self, argument: str, bound: Optional[int] = None):
        self.argument = argument
        self.bound = bound

    @abstractmethod
    def description(self) -> str:
        """Return plain English description of what this rule checks."""

    @abstractmethod
    def check_string(self, field: str, value: str) -> List[RuleViolationError]:
        """Check a string field's value."""

    @abstractmethod
    def check_integer(self, field: str, value: int) -> List[RuleViolationError]:
        """Check an integer field's value."""

    def check(self, descriptor: FieldDescriptor, value: Any) -> List[RuleViolationError]:
        """
        Evaluate this rule against one field.

        Args:
            descriptor: Descriptor of the field being validated
            value: Runtime value of the field

        Returns:
            List of violations (empty when the rule passes or does not apply)
        """
        kind = descriptor.kind_of(value)
        if kind is FieldKind.STRING:
            return self.check_string(descriptor.name, value)
        if kind is FieldKind.INTEGER:
            return self.check_integer(descriptor.name, value)
        return []

    def violation(self, message: str, field: str) -> RuleViolationError:
        return RuleViolationError(message, field=field, rule=self.name)
