"""
Exception taxonomy for record-validator.

Two kinds of failure exist:

- Fail-fast: NotADataclassError aborts validate() before any field is read.
- Accumulated: ValidationError subclasses are collected per field and
  raised together as one ValidationErrors composite.
"""

from typing import Iterator, List, Optional


class RecordValidatorError(Exception):
    """Base class for every error raised by record-validator."""


class NotADataclassError(RecordValidatorError, TypeError):
    """Raised when validate() receives something that is not a dataclass instance."""

    def __init__(self, message: str = "wrong argument given, should be a dataclass instance"):
        super().__init__(message)


class ConfigError(RecordValidatorError, ValueError):
    """Raised when the validator configuration cannot be loaded or is invalid."""


class ValidationError(RecordValidatorError):
    """
    A single per-field failure.

    Attributes:
        field: Name of the field the failure belongs to (None if unknown)
        message: Human-readable description
    """

    default_message = "validation failed"

    def __init__(self, message: Optional[str] = None, field: Optional[str] = None):
        self.message = message or self.default_message
        self.field = field
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message

    # Rebuild from constructor arguments so pickle and copy keep every attribute
    def __reduce__(self):
        return (type(self), (self.message, self.field))


class UnexportedFieldError(ValidationError):
    """An annotated field is private (leading underscore) and may not be validated."""

    default_message = "validation for unexported field is not allowed"


class InvalidSyntaxError(ValidationError):
    """An annotation clause is malformed."""

    default_message = "invalid validator syntax"

    def __init__(self, clause: str = "", field: Optional[str] = None):
        super().__init__(field=field)
        self.clause = clause

    def with_field(self, field: str) -> "InvalidSyntaxError":
        """Return a copy of this error bound to a field name."""
        return InvalidSyntaxError(self.clause, field=field)

    def __reduce__(self):
        return (type(self), (self.clause, self.field))


class RuleViolationError(ValidationError):
    """A min/max/len/in check failed."""

    def __init__(self, message: str, field: str, rule: str):
        super().__init__(message, field=field)
        self.rule = rule

    def __reduce__(self):
        return (type(self), (self.message, self.field, self.rule))


class ValidationErrors(RecordValidatorError):
    """
    Composite of every ValidationError found in one validate() call.

    The order of errors follows the completion order of the per-field
    tasks and differs between runs. Compare with messages() sorted, or as
    sets, when a stable view is needed.
    """

    def __init__(self, errors: Optional[List[ValidationError]] = None):
        self.errors = list(errors or [])
        super().__init__(str(self))

    def __reduce__(self):
        return (type(self), (self.errors,))

    def __str__(self) -> str:
        return ", ".join(error.message for error in self.errors)

    def __len__(self) -> int:
        return len(self.errors)

    def __iter__(self) -> Iterator[ValidationError]:
        return iter(self.errors)

    def __bool__(self) -> bool:
        return bool(self.errors)

    def messages(self) -> List[str]:
        """Return the message of every contained error, in collection order."""
        return [error.message for error in self.errors]
