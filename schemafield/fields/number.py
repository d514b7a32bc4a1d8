# -*- coding: utf-8 -*-
"""
number

Field for float numbers.

The raw text is validated twice: by the text base rules (required, length,
pattern) and by the numeric rule set. Both results are merged and the field
is valid only when both are.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from typing import Any, Dict

from ..messages import format_token
from ..schema.descriptors import ConstraintSet, ValidationResult
from ..validators import number as number_rules
from ..validators import text as text_rules
from ..validators.number import NumberValidator, parse_value
from ..validators.text import TextValidator
from .base import BaseField, deep_merge
from .context import FieldContext


class NumberField(BaseField):
    """Render numeric values using the JSON Schema number type."""

    type_name = "number"
    schema_type = "number"
    title = "Number Field"
    description = "Field for float numbers."
    messages = number_rules.MESSAGES

    def __init__(self, ctx: FieldContext) -> None:
        super().__init__(ctx)
        self.constraints = ConstraintSet.from_schema(ctx.schema)
        catalog = self.catalog
        self.base_validator = TextValidator(
            ctx.schema,
            required=bool(ctx.options.get("required")),
            messages=catalog,
        )
        self.number_validator = NumberValidator(
            self.constraints, messages=catalog, settings=ctx.settings,
        )

    @classmethod
    def default_messages(cls) -> Dict[str, str]:
        return {**text_rules.MESSAGES, **super().default_messages()}

    def get_value(self) -> float:
        return parse_value(self.get_raw_value())

    def run_validation(self, raw: Any) -> ValidationResult:
        base = self.base_validator.validate(raw)
        return base.merge(self.number_validator.validate(raw, base_status=base.valid))

    def get_schema(self) -> Dict[str, Any]:
        step = self.settings.number_step
        if self.constraints.divisible_by:
            step = format_token(self.constraints.divisible_by)
        schema: Dict[str, Any] = {
            "type": "number",
            "title": self.get_label(),
            "format": "number",
            "options": {
                "inputAttributes": {
                    "step": step,
                }
            },
        }
        schema.update(self.constraints.to_schema())
        return self.merge_readonly(schema)

    def get_schema_of_schema(self) -> Dict[str, Any]:
        return deep_merge(super().get_schema_of_schema(), {
            "properties": {
                "minimum": {
                    "title": "Minimum",
                    "description": "Minimum value of the property",
                    "type": "number",
                },
                "maximum": {
                    "title": "Maximum",
                    "description": "Maximum value of the property",
                    "type": "number",
                },
                "exclusiveMinimum": {
                    "title": "Exclusive Minimum",
                    "description": "Field value can not equal the number defined by the minimum attribute",
                    "type": "boolean",
                    "default": False,
                },
                "exclusiveMaximum": {
                    "title": "Exclusive Maximum",
                    "description": "Field value can not equal the number defined by the maximum attribute",
                    "type": "boolean",
                    "default": False,
                },
            },
        })

    def get_options_for_schema(self) -> Dict[str, Any]:
        return deep_merge(super().get_options_for_schema(), {
            "fields": {
                "minimum": {
                    "title": "Minimum",
                    "description": "Minimum value of the property",
                    "type": "number",
                },
                "maximum": {
                    "title": "Maximum",
                    "description": "Maximum value of the property",
                    "type": "number",
                },
                "exclusiveMinimum": {
                    "rightLabel": "Exclusive minimum ?",
                    "helper": "Field value must be greater than but not equal to this number if checked",
                    "type": "checkbox",
                },
                "exclusiveMaximum": {
                    "rightLabel": "Exclusive Maximum ?",
                    "helper": "Field value must be less than but not equal to this number if checked",
                    "type": "checkbox",
                },
            },
        })

# The End
