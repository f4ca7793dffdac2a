"""
Public API for record-validator

This is the "front door" - the entry point for all validation operations.
"""

import logging
from concurrent.futures import ThreadPoolExecutor, wait
from typing import Any, Optional

from .config_loader import ConfigLoader, ValidatorConfig
from .errors import NotADataclassError, ValidationErrors
from .field_descriptor import describe_fields, is_record
from .field_validator import ErrorSink, FieldValidator

logger = logging.getLogger(__name__)


class Validator:
    """
    Validates dataclass instances against the annotations on their fields.

    Every annotated field is checked concurrently and every failure is
    reported, not just the first.

    Example:
        from dataclasses import dataclass, field
        from record_validator import Validator, ValidationErrors

        @dataclass
        class User:
            name: str = field(metadata={"validate": "min:2, max:5"})

        validator = Validator()
        try:
            validator.validate(User(name="x"))
        except ValidationErrors as errors:
            for message in sorted(errors.messages()):
                print(message)
    """

    def __init__(self, config: Optional[ValidatorConfig] = None, config_path: Optional[str] = None):
        """
        Initialize validator.

        Args:
            config: Explicit configuration. When given, config_path is ignored.
            config_path: Optional YAML file overriding the bundled defaults

        Raises:
            ConfigError: If the configuration cannot be loaded or is invalid
        """
        if config is None:
            config = ConfigLoader(config_path).get_config()
        self.config = config

    def validate(self, value: Any) -> None:
        """
        Validate a record.

        Args:
            value: Dataclass instance to validate

        Returns:
            None when every annotated field passes

        Raises:
            NotADataclassError: If value is not a dataclass instance. No
                field is inspected.
            ValidationErrors: If any field failed. The order of the
                contained errors is not reproducible between runs.
        """
        errors = self.collect(value)
        if errors:
            raise errors

    def collect(self, value: Any) -> ValidationErrors:
        """
        Validate a record and return the error collection instead of raising.

        Args:
            value: Dataclass instance to validate

        Returns:
            ValidationErrors, empty (falsy) when every field passes

        Raises:
            NotADataclassError: If value is not a dataclass instance
        """
        if not is_record(value):
            raise NotADataclassError()

        fields = describe_fields(value, self.config.tag_key)
        if not fields:
            return ValidationErrors()

        sink = ErrorSink()

        max_workers = self.config.max_workers or len(fields)
        logger.debug(
            f"Validating {type(value).__name__}: {len(fields)} fields, {max_workers} workers"
        )

        # One task per field; all must finish before the sink is read
        with ThreadPoolExecutor(
            max_workers=max_workers,
            thread_name_prefix=self.config.thread_name_prefix,
        ) as pool:
            futures = [
                pool.submit(FieldValidator(descriptor, field_value, sink).run)
                for descriptor, field_value in fields
            ]
            wait(futures)

        # Surface unexpected failures inside a task
        for future in futures:
            future.result()

        return ValidationErrors(sink.errors())


_default_validator: Optional[Validator] = None


def get_default_validator() -> Validator:
    """Return the shared Validator built from the bundled configuration."""
    global _default_validator
    if _default_validator is None:
        _default_validator = Validator()
    return _default_validator


def validate(value: Any) -> None:
    """
    Validate a record with the default configuration.

    See Validator.validate() for the full contract.

    Raises:
        NotADataclassError: If value is not a dataclass instance
        ValidationErrors: If any field failed
    """
    get_default_validator().validate(value)
