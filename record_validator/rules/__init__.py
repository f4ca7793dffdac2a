"""
Rule evaluators, one per supported rule kind.

The registry is fixed: the rule parser only emits these kinds, and
create_evaluator() is the single place a kind becomes an evaluator.
"""

from .base import RuleEvaluator
from .in_rule import InRule
from .len_rule import LenRule
from .max_rule import MaxRule
from .min_rule import MinRule
from ..rule_parser import ParsedRule

__all__ = [
    'RuleEvaluator', 'MinRule', 'MaxRule', 'LenRule', 'InRule',
    'EVALUATORS', 'create_evaluator',
]

EVALUATORS = {
    MinRule.name: MinRule,
    MaxRule.name: MaxRule,
    LenRule.name: LenRule,
    InRule.name: InRule,
}


def create_evaluator(rule: ParsedRule) -> RuleEvaluator:
    """
    Instantiate the evaluator for a parsed rule.

    Raises:
        KeyError: If rule.kind has no evaluator (the parser never emits one)
    """
    return EVALUATORS[rule.kind](rule.argument, rule.bound)
