"""
Field descriptors - read-only view of a dataclass's static shape.

Shields the field validator from how dataclasses expose their fields:
each field becomes a FieldDescriptor carrying its name, declared kind,
visibility and annotation text.

KIND MAPPING (from the resolved type hint, NewType unwrapped):
- int and its subclasses, except bool → INTEGER
- str and its subclasses → STRING
- anything else (float, Optional[int], containers, records) → OTHER

A field declared with init=False and never assigned has no value; it is
described with the MISSING sentinel, which every rule skips.
"""

import dataclasses
import enum
import logging
import typing
from typing import Any, Dict, List, Optional, Tuple

logger = logging.getLogger(__name__)


class FieldKind(enum.Enum):
    INTEGER = "integer"
    STRING = "string"
    OTHER = "other"


_KINDS_BY_NAME = {"int": FieldKind.INTEGER, "str": FieldKind.STRING}


@dataclasses.dataclass(frozen=True)
class FieldDescriptor:
    """Metadata for one field of a record, derived at validation time."""

    name: str
    kind: FieldKind
    exported: bool
    annotation: Optional[str] = None

    def kind_of(self, value: Any) -> FieldKind:
        """
        Return the kind to evaluate value as.

        A value that does not match the declared kind is treated as OTHER,
        so rules on it are no-ops. Subclasses of int and str match their
        base kind; bool is never an INTEGER.
        """
        if self.kind is FieldKind.INTEGER:
            if isinstance(value, int) and not isinstance(value, bool):
                return FieldKind.INTEGER
        elif self.kind is FieldKind.STRING:
            if isinstance(value, str):
                return FieldKind.STRING
        return FieldKind.OTHER


def is_record(value: Any) -> bool:
    """Return True if value is a dataclass instance (not a dataclass class)."""
    return dataclasses.is_dataclass(value) and not isinstance(value, type)


def kind_for_type(declared: Any) -> FieldKind:
    """Map a declared field type (or its string form) to a FieldKind."""
    if isinstance(declared, str):
        return _KINDS_BY_NAME.get(declared.strip(), FieldKind.OTHER)
    # NewType("UserId", int) may itself wrap another NewType
    while hasattr(declared, "__supertype__"):
        declared = declared.__supertype__
    if not isinstance(declared, type) or issubclass(declared, bool):
        return FieldKind.OTHER
    if issubclass(declared, int):
        return FieldKind.INTEGER
    if issubclass(declared, str):
        return FieldKind.STRING
    return FieldKind.OTHER


def _resolve_hints(record_type: type) -> Dict[str, Any]:
    try:
        return typing.get_type_hints(record_type)
    except Exception as e:
        # Forward references that cannot be resolved; fall back to Field.type
        logger.debug(f"Could not resolve type hints for {record_type.__name__}: {e}")
        return {}


def describe_fields(record: Any, tag_key: str = "validate") -> List[Tuple[FieldDescriptor, Any]]:
    """
    Describe every field of a dataclass instance, in declaration order.

    Args:
        record: Dataclass instance
        tag_key: Metadata key holding the annotation text

    Returns:
        List of (FieldDescriptor, value) pairs
    """
    hints = _resolve_hints(type(record))
    described = []
    for f in dataclasses.fields(record):
        annotation = f.metadata.get(tag_key) if f.metadata else None
        descriptor = FieldDescriptor(
            name=f.name,
            kind=kind_for_type(hints.get(f.name, f.type)),
            exported=not f.name.startswith("_"),
            annotation=annotation,
        )
        described.append((descriptor, getattr(record, f.name, dataclasses.MISSING)))
    return described
