# -*- coding: utf-8 -*-
"""
registry

Field registry.

A registry is built once at startup, populated with field classes, schema
type mappings and message templates, then frozen. Consumers receive the
registry explicitly instead of reaching for module-level state.

Version: 0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations
from typing import Any, Dict, Mapping, Type
import logging

from ..conf import FieldSettings
from ..exceptions import FieldTypeNotRegistered, RegistryFrozenError
from ..messages import MessageCatalog
from .base import BaseField
from .context import FieldContext

logger = logging.getLogger(__name__)


class FieldRegistry:
    def __init__(self) -> None:
        self._by_key: Dict[str, Type[BaseField]] = {}
        self._schema_map: Dict[str, str] = {}
        self.messages = MessageCatalog()
        self._frozen = False

    def _ensure_open(self) -> None:
        if self._frozen:
            raise RegistryFrozenError("Field registry is frozen")

    def register(self, key: str):
        """Decorator to register a field class by key."""
        def _decorator(cls: Type[BaseField]) -> Type[BaseField]:
            return self.install(cls, key)
        return _decorator

    def register_field_class(self, key: str, cls: Type[BaseField]) -> None:
        self._ensure_open()
        self._by_key[key] = cls
        logger.debug("Registered field class %s as %r", cls.__name__, key)

    def register_default_schema_field_mapping(self, schema_type: str, field_type: str) -> None:
        self._ensure_open()
        self._schema_map[schema_type] = field_type

    def register_messages(self, messages: Mapping[str, str]) -> None:
        self._ensure_open()
        self.messages.register(messages)

    def install(self, cls: Type[BaseField], key: str | None = None) -> Type[BaseField]:
        """Register ``cls`` with its schema type and messages.

        ``key`` defaults to the class' ``type_name``; the class itself is not changed.
        """
        key = key or cls.type_name
        self.register_field_class(key, cls)
        if cls.schema_type:
            self.register_default_schema_field_mapping(cls.schema_type, key)
        self.register_messages(cls.default_messages())
        return cls

    def freeze(self) -> None:
        """Make the registry read-only."""
        self._frozen = True
        self.messages.freeze()
        logger.debug("Field registry frozen with types: %s", ", ".join(sorted(self._by_key)))

    @property
    def frozen(self) -> bool:
        return self._frozen

    def get(self, key: str) -> Type[BaseField] | None:
        return self._by_key.get(key)

    def get_field_class(self, key: str) -> Type[BaseField]:
        cls = self.get(key)
        if cls is None:
            raise FieldTypeNotRegistered(key)
        return cls

    def resolve_for_schema(
        self,
        schema: Mapping[str, Any],
        options: Mapping[str, Any] | None = None,
    ) -> str:
        """Map a schema fragment to a field type key."""
        options = options or {}
        if options.get("type"):
            return str(options["type"])
        schema_type = schema.get("type")
        if isinstance(schema_type, str) and schema_type in self._schema_map:
            return self._schema_map[schema_type]
        return "text"

    def create_field(
        self,
        schema: Mapping[str, Any],
        options: Mapping[str, Any] | None = None,
        *,
        name: str = "",
        readonly: bool = False,
        settings: FieldSettings | None = None,
    ) -> BaseField:
        """Instantiate the field class matching ``schema`` and ``options``."""
        options = dict(options or {})
        cls = self.get_field_class(self.resolve_for_schema(schema, options))
        ctx = FieldContext(
            schema=dict(schema),
            options=options,
            name=name,
            messages=self.messages,
            settings=settings,
            readonly=readonly,
        )
        return cls(ctx)

# The End
