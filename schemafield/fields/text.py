# -*- coding: utf-8 -*-
"""
text

Single-line text field.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations
from typing import Any, Dict

from ..schema.descriptors import ValidationResult
from ..validators import text as text_rules
from ..validators.text import TextValidator
from .base import BaseField, deep_merge
from .context import FieldContext


class TextField(BaseField):
    type_name = "text"
    schema_type = "string"
    title = "Single-Line Text"
    description = "Text field for single-line text."
    messages = text_rules.MESSAGES

    def __init__(self, ctx: FieldContext) -> None:
        super().__init__(ctx)
        self.base_validator = TextValidator(
            ctx.schema,
            required=bool(ctx.options.get("required")),
            messages=self.catalog,
        )

    def run_validation(self, raw: Any) -> ValidationResult:
        return self.base_validator.validate(raw)

    def get_schema(self) -> Dict[str, Any]:
        """Build a JSON Schema representation for the field."""
        schema: Dict[str, Any] = {
            "type": self.get_type(),
            "format": self.ctx.options.get("format") or "text",
            "title": self.get_label(),
        }
        for key in ("minLength", "maxLength", "pattern"):
            if self.ctx.schema.get(key) is not None:
                schema[key] = self.ctx.schema[key]
        return self.merge_readonly(schema)

    def get_schema_of_schema(self) -> Dict[str, Any]:
        return deep_merge(super().get_schema_of_schema(), {
            "properties": {
                "minLength": {"title": "Minimal Length", "description": "Minimal length of the property value", "type": "number"},
                "maxLength": {"title": "Maximum Length", "description": "Maximum length of the property value", "type": "number"},
                "pattern": {"title": "Pattern", "description": "Regular expression for the property value", "type": "string"},
            },
        })

    def get_options_for_schema(self) -> Dict[str, Any]:
        return deep_merge(super().get_options_for_schema(), {
            "fields": {
                "minLength": {"type": "integer"},
                "maxLength": {"type": "integer"},
                "pattern": {"type": "text"},
            },
        })

# The End
