"""
Client-side payload validation.

Before a create/update call leaves the process, the payload is checked
against the rule sets of its type and every base type. All rules run; the
caller gets every violation at once rather than the first one found.
"""

import logging
from typing import Any, Optional

from paysimple.errors import ValidationError, ValidationFailed
from paysimple.validation.policy import ValidationPolicy
from paysimple.validation.rule_sets import RULE_SETS
from paysimple.validation.rules import RuleSet

logger = logging.getLogger("paysimple.validation")


class Validator:
    """Evaluates rule sets; never raises for a well-formed payload."""

    def __init__(
        self,
        policy: ValidationPolicy = ValidationPolicy.PERMISSIVE,
        rule_sets: Optional[dict[type, RuleSet]] = None,
    ):
        self.policy = policy
        self._rule_sets = rule_sets if rule_sets is not None else RULE_SETS[policy]

    def rules_for(self, payload_type: type) -> list[RuleSet]:
        # Most generic first, so base-class violations are listed before subtype ones
        return [
            self._rule_sets[cls]
            for cls in reversed(payload_type.__mro__)
            if cls in self._rule_sets
        ]

    def validate(self, payload: Any) -> list[ValidationError]:
        errors: list[ValidationError] = []
        for rule_set in self.rules_for(type(payload)):
            for rule in rule_set:
                if not rule.passes(payload):
                    errors.append(ValidationError(rule.field, rule.message))
        return errors


class ValidationService:
    """Raises on invalid payloads; used by services ahead of mutating calls."""

    def __init__(self, validator: Optional[Validator] = None, policy: ValidationPolicy = ValidationPolicy.PERMISSIVE):
        self._validator = validator or Validator(policy)

    @property
    def policy(self) -> ValidationPolicy:
        return self._validator.policy

    def validate(self, payload: Any) -> None:
        """
        Raises:
            ValidationFailed: With every violation found in ``payload``.
        """
        errors = self._validator.validate(payload)
        if errors:
            logger.info(
                "Validation failed for %s: %d error(s) on %s",
                type(payload).__name__,
                len(errors),
                ", ".join(sorted({e.field for e in errors})),
            )
            raise ValidationFailed(errors)
