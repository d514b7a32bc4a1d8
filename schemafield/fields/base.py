# -*- coding: utf-8 -*-
"""
base

Base field class.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations
from typing import Any, Dict, Mapping
from abc import ABC, abstractmethod
import copy
import logging

from ..conf import FieldSettings, current_settings
from ..messages import MessageCatalog
from ..schema.descriptors import ValidationResult
from .context import FieldContext, RenderContainer

logger = logging.getLogger(__name__)


def deep_merge(base: Mapping[str, Any], extra: Mapping[str, Any]) -> Dict[str, Any]:
    """Return ``base`` updated recursively with ``extra``; inputs are not mutated."""
    merged: Dict[str, Any] = copy.deepcopy(dict(base))
    for key, value in extra.items():
        if isinstance(value, Mapping) and isinstance(merged.get(key), Mapping):
            merged[key] = deep_merge(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


class BaseField(ABC):
    """
    Base Field Class

    A field holds the raw text typed by the user, validates it on demand
    and describes itself to form-builder UIs through schema-of-schema and
    options-of-schema fragments.
    """
    type_name: str = "base"
    schema_type: str | None = None
    title: str = "Field"
    description: str = ""
    messages: Mapping[str, str] = {}

    def __init__(self, ctx: FieldContext) -> None:
        self.ctx = ctx
        self._raw: Any = None
        self._rendered = False
        self.validation = ValidationResult()

    @property
    def settings(self) -> FieldSettings:
        return self.ctx.settings if self.ctx.settings is not None else current_settings()

    @property
    def catalog(self) -> MessageCatalog:
        if self.ctx.messages is not None:
            return self.ctx.messages
        return MessageCatalog(self.default_messages())

    @classmethod
    def default_messages(cls) -> Dict[str, str]:
        """Messages of this class and every base class, nearest class winning."""
        merged: Dict[str, str] = {}
        for klass in reversed(cls.__mro__):
            merged.update(getattr(klass, "messages", None) or {})
        return merged

    # === Value access ===
    def set_value(self, raw: Any) -> None:
        self._raw = raw

    def get_raw_value(self) -> Any:
        return self._raw

    def get_value(self) -> Any:
        return self._raw

    # === Validation ===
    @abstractmethod
    def run_validation(self, raw: Any) -> ValidationResult:
        """Evaluate the field's rules against ``raw``."""
        raise NotImplementedError

    def handle_validate(self) -> bool:
        """Validate the current raw value and keep the result on ``validation``."""
        self.validation = self.run_validation(self._raw)
        if not self.validation.valid:
            logger.debug(
                "Field %r (%s) is invalid: %s",
                self.ctx.name, self.type_name, self.validation.messages(),
            )
        return self.validation.valid

    def get_messages(self) -> list[str]:
        return self.validation.messages()

    # === Presentation ===
    def marker_classes(self) -> list[str]:
        prefix = self.settings.css_prefix
        return [f"{prefix}-controlfield", f"{prefix}-controlfield-{self.type_name}"]

    def post_render(self, container: RenderContainer | None) -> None:
        """Tag the rendered container; runs once per field."""
        if self._rendered or container is None:
            return
        for name in self.marker_classes():
            container.add_class(name)
        self._rendered = True

    def get_label(self) -> str:
        label = self.ctx.schema.get("title") or self.ctx.options.get("label")
        if label:
            return str(label)
        name = self.ctx.name.replace("_", "\u00A0")
        return name[:1].upper() + name[1:]

    # === Schema Generation ===
    @abstractmethod
    def get_schema(self) -> Dict[str, Any]:
        """JSON Schema fragment for this field."""
        raise NotImplementedError

    def merge_readonly(self, schema: Dict[str, Any]) -> Dict[str, Any]:
        """Insert the ``readonly`` flag into the schema if needed."""
        if self.ctx.readonly or self.ctx.schema.get("readonly"):
            schema["readonly"] = True
        return schema

    def get_schema_of_schema(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "description": self.description,
            "type": "object",
            "properties": {
                "title": {"title": "Title", "description": "Short description of the property", "type": "string"},
                "description": {"title": "Description", "description": "Detailed description of the property", "type": "string"},
                "readonly": {"title": "Readonly", "description": "Property will be readonly if true", "type": "boolean", "default": False},
                "required": {"title": "Required", "description": "Property value must be set if true", "type": "boolean", "default": False},
                "default": {"title": "Default", "description": "Default value of the property"},
            },
        }

    def get_options_for_schema(self) -> Dict[str, Any]:
        return {
            "fields": {
                "title": {"helper": "Field short description", "type": "text"},
                "description": {"helper": "Field detailed description", "type": "textarea"},
                "readonly": {"rightLabel": "This field is read-only", "type": "checkbox"},
                "required": {"rightLabel": "This field is required", "type": "checkbox"},
            },
        }

    def get_title(self) -> str:
        return self.title

    def get_description(self) -> str:
        return self.description

    def get_type(self) -> str | None:
        return self.schema_type

    def get_field_type(self) -> str:
        return self.type_name

# The End
