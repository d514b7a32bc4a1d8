# -*- coding: utf-8 -*-
"""
text

Base validation rules shared by every text-backed field.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
import re
from typing import Any, Dict, Mapping

from ..exceptions import InvalidConstraintError
from ..messages import MessageCatalog
from ..schema.descriptors import RuleOutcome, TextConstraints, ValidationResult
from .number import is_empty

logger = logging.getLogger(__name__)

NOT_OPTIONAL = "notOptional"
STRING_TOO_SHORT = "stringTooShort"
STRING_TOO_LONG = "stringTooLong"
INVALID_PATTERN = "invalidPattern"

MESSAGES: Dict[str, str] = {
    NOT_OPTIONAL: "This field is not optional.",
    STRING_TOO_SHORT: "This field should contain at least {0} numbers or characters",
    STRING_TOO_LONG: "This field should contain at most {0} numbers or characters",
    INVALID_PATTERN: "This field should have pattern {0}",
}


class TextValidator:
    """Check required, length and pattern rules on raw text."""

    def __init__(
        self,
        schema: Mapping[str, Any] | None = None,
        *,
        required: bool = False,
        messages: MessageCatalog | None = None,
    ) -> None:
        schema = schema or {}
        self.required = bool(required or schema.get("required") is True)
        constraints = TextConstraints.from_schema(schema)
        self.min_length = constraints.min_length
        self.max_length = constraints.max_length
        self.pattern = constraints.pattern
        try:
            self._compiled = re.compile(self.pattern) if self.pattern else None
        except re.error as exc:
            raise InvalidConstraintError(f"Invalid pattern {self.pattern!r}: {exc}") from exc
        self.messages = messages if messages is not None else MessageCatalog(MESSAGES)

    def validate(self, raw: Any) -> ValidationResult:
        text = "" if raw is None else str(raw)
        empty = is_empty(text)
        rules: Dict[str, RuleOutcome] = {}

        status = not (self.required and empty)
        rules[NOT_OPTIONAL] = RuleOutcome(
            status=status,
            message="" if status else self.messages.format(NOT_OPTIONAL),
        )

        # optional blank input is not checked further
        status = empty or self.min_length is None or len(text) >= self.min_length
        rules[STRING_TOO_SHORT] = RuleOutcome(
            status=status,
            message="" if status else self.messages.format(STRING_TOO_SHORT, self.min_length),
        )

        status = empty or self.max_length is None or len(text) <= self.max_length
        rules[STRING_TOO_LONG] = RuleOutcome(
            status=status,
            message="" if status else self.messages.format(STRING_TOO_LONG, self.max_length),
        )

        status = empty or self._compiled is None or self._compiled.search(text) is not None
        rules[INVALID_PATTERN] = RuleOutcome(
            status=status,
            message="" if status else self.messages.format(INVALID_PATTERN, self.pattern),
        )

        result = ValidationResult(rules=rules)
        if not result.valid:
            logger.debug("Text %r failed rules: %s", text, ", ".join(result.failures()))
        return result


# The End
