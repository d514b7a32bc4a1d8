# -*- coding: utf-8 -*-
"""
number

Validation rules for numeric text input.

``parse_value`` is lenient: it extracts the leading numeric prefix the way a
browser ``parseFloat`` does, so bound and divisibility rules can work with
partially valid input. ``validate_is_number`` is strict and rejects any
trailing garbage. Rules receiving ``nan`` pass, the type check already
reports such input.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
import math
import re
from typing import Any, Dict

from ..conf import FieldSettings, current_settings
from ..messages import MessageCatalog
from ..schema.descriptors import ConstraintSet, RuleOutcome, ValidationResult

logger = logging.getLogger(__name__)

NOT_A_NUMBER = "stringNotANumber"
DIVISIBLE_BY = "stringDivisibleBy"
VALUE_TOO_LARGE = "stringValueTooLarge"
VALUE_TOO_SMALL = "stringValueTooSmall"
VALUE_TOO_LARGE_EXCLUSIVE = "stringValueTooLargeExclusive"
VALUE_TOO_SMALL_EXCLUSIVE = "stringValueTooSmallExclusive"

MESSAGES: Dict[str, str] = {
    VALUE_TOO_SMALL: "The minimum value for this field is {0}",
    VALUE_TOO_LARGE: "The maximum value for this field is {0}",
    VALUE_TOO_SMALL_EXCLUSIVE: "Value of this field must be greater than {0}",
    VALUE_TOO_LARGE_EXCLUSIVE: "Value of this field must be less than {0}",
    DIVISIBLE_BY: "The value must be divisible by {0}",
    NOT_A_NUMBER: "This value is not a number.",
}

_PREFIX_RE = re.compile(
    r"[+-]?(?:Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)"
)
_STRICT_RE = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?)|(?:[0-9]*\.[0-9]+))(?:[eE][+-]?[0-9]+)?"
)


def is_empty(raw: Any) -> bool:
    """Return ``True`` for missing or blank input."""
    if raw is None:
        return True
    return str(raw).strip() == ""


def parse_value(raw: Any) -> float:
    """Parse the leading numeric prefix of ``raw``; ``nan`` when there is none."""
    if isinstance(raw, bool):
        return math.nan
    if isinstance(raw, float):
        return raw
    if isinstance(raw, int):
        try:
            return float(raw)
        except OverflowError:
            return math.inf if raw > 0 else -math.inf
    if raw is None:
        return math.nan
    match = _PREFIX_RE.match(str(raw).lstrip())
    if match is None:
        return math.nan
    text = match.group(0)
    if text.endswith("Infinity"):
        return -math.inf if text.startswith("-") else math.inf
    return float(text)


def validate_is_number(raw: Any) -> bool:
    """Check that ``raw`` is blank or canonically a number."""
    if is_empty(raw):
        return True
    if math.isnan(parse_value(raw)):
        return False
    return _STRICT_RE.fullmatch(str(raw).strip()) is not None


def _is_unset(bound: float | None, zero_is_unset: bool) -> bool:
    return bound is None or (zero_is_unset and bound == 0)


def validate_divisible_by(
    value: float,
    divisible_by: float | None,
    tolerance: float = 0.0,
) -> bool:
    """Check ``value`` against a ``divisibleBy`` constraint.

    A missing or zero divisor disables the rule. With ``tolerance`` left at
    zero the remainder must be exactly zero.
    """
    if not divisible_by or math.isnan(value):
        return True
    remainder = value % divisible_by
    if math.isnan(remainder):
        return False
    if tolerance <= 0:
        return remainder == 0
    return abs(remainder) <= tolerance or abs(abs(divisible_by) - abs(remainder)) <= tolerance


def validate_maximum(
    value: float,
    maximum: float | None,
    exclusive_maximum: bool | None = None,
    *,
    zero_is_unset: bool = False,
) -> bool:
    """Check ``value`` against ``maximum``; equality fails only when exclusive."""
    if _is_unset(maximum, zero_is_unset) or math.isnan(value):
        return True
    if value > maximum:
        return False
    if value == maximum and exclusive_maximum:
        return False
    return True


def validate_minimum(
    value: float,
    minimum: float | None,
    exclusive_minimum: bool | None = None,
    *,
    zero_is_unset: bool = False,
) -> bool:
    """Check ``value`` against ``minimum``; equality fails only when exclusive."""
    if _is_unset(minimum, zero_is_unset) or math.isnan(value):
        return True
    if value < minimum:
        return False
    if value == minimum and exclusive_minimum:
        return False
    return True


class NumberValidator:
    """Evaluate every numeric rule for one constraint set."""

    def __init__(
        self,
        constraints: ConstraintSet,
        messages: MessageCatalog | None = None,
        settings: FieldSettings | None = None,
    ) -> None:
        self.constraints = constraints
        self.messages = messages if messages is not None else MessageCatalog(MESSAGES)
        self.settings = settings

    def _settings(self) -> FieldSettings:
        return self.settings if self.settings is not None else current_settings()

    def validate(self, raw: Any, base_status: bool = True) -> ValidationResult:
        """Run all rules on ``raw`` without short-circuiting."""
        settings = self._settings()
        c = self.constraints
        value = parse_value(raw)
        rules: Dict[str, RuleOutcome] = {}

        status = validate_is_number(raw)
        rules[NOT_A_NUMBER] = RuleOutcome(
            status=status,
            message="" if status else self.messages.format(NOT_A_NUMBER),
        )

        status = validate_divisible_by(value, c.divisible_by, settings.divisible_by_tolerance)
        rules[DIVISIBLE_BY] = RuleOutcome(
            status=status,
            message="" if status else self.messages.format(DIVISIBLE_BY, c.divisible_by),
        )

        status = validate_maximum(
            value, c.maximum, c.exclusive_maximum,
            zero_is_unset=settings.zero_bound_is_unset,
        )
        message = ""
        if not status:
            key = VALUE_TOO_LARGE_EXCLUSIVE if c.exclusive_maximum else VALUE_TOO_LARGE
            message = self.messages.format(key, c.maximum)
        rules[VALUE_TOO_LARGE] = RuleOutcome(status=status, message=message)

        status = validate_minimum(
            value, c.minimum, c.exclusive_minimum,
            zero_is_unset=settings.zero_bound_is_unset,
        )
        message = ""
        if not status:
            key = VALUE_TOO_SMALL_EXCLUSIVE if c.exclusive_minimum else VALUE_TOO_SMALL
            message = self.messages.format(key, c.minimum)
        rules[VALUE_TOO_SMALL] = RuleOutcome(status=status, message=message)

        result = ValidationResult(rules=rules, base_status=base_status)
        if not result.valid:
            logger.debug("Number %r failed rules: %s", raw, ", ".join(result.failures()))
        return result


# The End
