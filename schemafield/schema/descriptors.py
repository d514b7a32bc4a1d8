# -*- coding: utf-8 -*-
"""
descriptors

Field schema descriptors.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations
from typing import Any, Mapping, Optional
from pydantic import BaseModel, ConfigDict, Field as PField, ValidationError

from ..exceptions import InvalidConstraintError


class ConstraintSet(BaseModel):
    """Numeric constraints attached to a single field instance."""
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    minimum: Optional[float] = None
    maximum: Optional[float] = None
    exclusive_minimum: Optional[bool] = PField(default=None, alias="exclusiveMinimum")
    exclusive_maximum: Optional[bool] = PField(default=None, alias="exclusiveMaximum")
    divisible_by: Optional[float] = PField(default=None, alias="divisibleBy")

    @classmethod
    def from_schema(cls, schema: Mapping[str, Any] | None) -> "ConstraintSet":
        """Build constraints from a JSON-Schema-like mapping."""
        try:
            return cls.model_validate(dict(schema or {}))
        except ValidationError as exc:
            raise InvalidConstraintError(str(exc)) from exc

    def to_schema(self) -> dict[str, Any]:
        """Return the constraints that are set, under their schema names."""
        return self.model_dump(by_alias=True, exclude_none=True)


class TextConstraints(BaseModel):
    """Length and pattern constraints of a text-backed field."""
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    min_length: Optional[int] = PField(default=None, alias="minLength", ge=0)
    max_length: Optional[int] = PField(default=None, alias="maxLength", ge=0)
    pattern: Optional[str] = None

    @classmethod
    def from_schema(cls, schema: Mapping[str, Any] | None) -> "TextConstraints":
        try:
            return cls.model_validate(dict(schema or {}))
        except ValidationError as exc:
            raise InvalidConstraintError(str(exc)) from exc


class RuleOutcome(BaseModel):
    """Pass/fail status of one named rule and its message."""
    model_config = ConfigDict(frozen=True)

    status: bool
    message: str = ""


class ValidationResult(BaseModel):
    """Outcome of one validation pass.

    ``valid`` is the conjunction of ``base_status`` and every rule status.
    """
    model_config = ConfigDict(frozen=True)

    rules: dict[str, RuleOutcome] = PField(default_factory=dict)
    base_status: bool = True

    @property
    def valid(self) -> bool:
        return self.base_status and all(rule.status for rule in self.rules.values())

    def __getitem__(self, key: str) -> RuleOutcome:
        return self.rules[key]

    def __contains__(self, key: object) -> bool:
        return key in self.rules

    def failures(self) -> dict[str, RuleOutcome]:
        return {key: rule for key, rule in self.rules.items() if not rule.status}

    def messages(self) -> list[str]:
        """Messages of failing rules in evaluation order."""
        return [rule.message for rule in self.rules.values() if not rule.status and rule.message]

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        """Combine two results; later rules win on key collisions."""
        return ValidationResult(
            rules={**self.rules, **other.rules},
            base_status=self.base_status and other.base_status,
        )

# The End
