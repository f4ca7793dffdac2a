"""
Rule Parser - Annotation Text to Ordered Rules

Turns the annotation stored on one dataclass field into the list of rules
to apply to it.

## Annotation Syntax

    <clause>(", " <clause>)*
    clause := ruleName ":" argument

Example: "min:2, max:5, in:ab,cd,ef"

- Clauses are separated by a comma followed by a single space. A bare comma
  belongs to the argument, which is how "in" lists its admissible values.
- Each clause is split on its first colon.
- min, max and len take a base-10 integer argument.
- in takes its argument verbatim.
- Any other rule name is ignored.
"""

import re
import logging
from typing import List, NamedTuple, Optional

from .errors import InvalidSyntaxError

logger = logging.getLogger(__name__)

CLAUSE_SEPARATOR = ", "
NUMERIC_RULES = ("min", "max", "len")
KNOWN_RULES = NUMERIC_RULES + ("in",)

# Optional sign followed by decimal digits, nothing else
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


class ParsedRule(NamedTuple):
    """One rule from an annotation, in declaration order."""

    kind: str
    argument: str
    bound: Optional[int] = None


def parse_integer(text: str) -> int:
    """
    Parse a base-10 integer argument.

    Args:
        text: Raw argument text

    Returns:
        Parsed integer

    Raises:
        InvalidSyntaxError: If text is not an optionally signed run of digits
    """
    if not _INTEGER_PATTERN.fullmatch(text):
        raise InvalidSyntaxError(text)
    return int(text)


def parse_rules(annotation: str) -> List[ParsedRule]:
    """
    Parse an annotation into its rules.

    Parsing stops at the first malformed clause.

    Args:
        annotation: Raw annotation text (e.g. "min:2, max:5")

    Returns:
        List of ParsedRule in declaration order, unknown rule names dropped

    Raises:
        InvalidSyntaxError: If a clause has no ":" or a numeric rule has a
            non-integer argument
    """
    rules = []
    for clause in annotation.split(CLAUSE_SEPARATOR):
        clause = clause.strip()
        name, separator, argument = clause.partition(":")
        if not separator:
            raise InvalidSyntaxError(clause)

        if name in NUMERIC_RULES:
            try:
                bound = parse_integer(argument)
            except InvalidSyntaxError:
                raise InvalidSyntaxError(clause) from None
            rules.append(ParsedRule(name, argument, bound))
        elif name == "in":
            rules.append(ParsedRule(name, argument))
        else:
            # TODO: decide whether unknown rule names should become InvalidSyntaxError
            logger.debug(f"Ignoring unknown rule '{name}' in clause '{clause}'")

    return rules
