import logging
import threading
from typing import Any, List

from .errors import InvalidSyntaxError, UnexportedFieldError, ValidationError
from .field_descriptor import FieldDescriptor
from .rule_parser import parse_rules
from .rules import create_evaluator

logger = logging.getLogger(__name__)


class ErrorSink:
    """Error collection shared by the field tasks of one validate() call."""

    def __init__(self):
        self._lock = threading.Lock()
        self._errors: List[ValidationError] = []

    def add(self, error: ValidationError) -> None:
        with self._lock:
            self._errors.append(error)

    def extend(self, errors: List[ValidationError]) -> None:
        for error in errors:
            self.add(error)

    def errors(self) -> List[ValidationError]:
        """Return a snapshot of the collected errors."""
        with self._lock:
            return list(self._errors)


class FieldValidator:
    """Validates one field of a record against its annotation"""

    def __init__(self, descriptor: FieldDescriptor, value: Any, sink: ErrorSink):
        """
        Initialize field validator.

        Args:
            descriptor: Descriptor of the field to validate
            value: Runtime value of the field
            sink: Shared error collection for the current validate() call
        """
        self.descriptor = descriptor
        self.value = value
        self.sink = sink

    def run(self) -> None:
        """
        Validate the field, recording every failure in the sink.

        Steps, each stopping the field on failure:
        1. Skip fields without an annotation
        2. Reject annotated private fields
        3. Parse the whole annotation
        4. Evaluate each rule in declaration order
        """
        descriptor = self.descriptor
        if descriptor.annotation is None:
            return

        if not descriptor.exported:
            self.sink.add(UnexportedFieldError(field=descriptor.name))
            return

        try:
            rules = parse_rules(descriptor.annotation)
        except InvalidSyntaxError as e:
            logger.debug(f"Invalid annotation on field {descriptor.name}: '{e.clause}'")
            self.sink.add(e.with_field(descriptor.name))
            return

        for rule in rules:
            evaluator = create_evaluator(rule)
            violations = evaluator.check(descriptor, self.value)
            if violations:
                logger.debug(
                    f"Field {descriptor.name} failed '{rule.kind}:{rule.argument}' "
                    f"({evaluator.description()})"
                )
            self.sink.extend(violations)
