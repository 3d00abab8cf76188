from paysimple.validation.policy import ValidationPolicy
from paysimple.validation.rule_sets import RULE_SETS, build_rule_sets
from paysimple.validation.rules import FieldRule, RuleSet
from paysimple.validation.validator import ValidationService, Validator

__all__ = [
    "FieldRule",
    "RULE_SETS",
    "RuleSet",
    "ValidationPolicy",
    "ValidationService",
    "Validator",
    "build_rule_sets",
]
