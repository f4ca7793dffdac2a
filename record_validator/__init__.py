"""
record-validator: declarative field validation for dataclasses

This library checks dataclass instances against constraint annotations
stored in field metadata:
- min / max / len bounds on integers and string lengths
- in: membership in a list of literals
- Concurrent per-field checking with every failure reported
- YAML configuration validated against a JSON schema

Example:
    from dataclasses import dataclass, field
    from record_validator import validate

    @dataclass
    class User:
        name: str = field(metadata={"validate": "min:2, max:5"})
        age: int = field(metadata={"validate": "min:18"})

    validate(User(name="Ada", age=36))
"""

from .api import Validator, validate
from .config_loader import ValidatorConfig, load_config
from .errors import (
    ConfigError,
    InvalidSyntaxError,
    NotADataclassError,
    RecordValidatorError,
    RuleViolationError,
    UnexportedFieldError,
    ValidationError,
    ValidationErrors,
)

__version__ = "0.1.0"
__all__ = [
    "Validator",
    "validate",
    "ValidatorConfig",
    "load_config",
    "RecordValidatorError",
    "NotADataclassError",
    "ConfigError",
    "ValidationError",
    "UnexportedFieldError",
    "InvalidSyntaxError",
    "RuleViolationError",
    "ValidationErrors",
]
