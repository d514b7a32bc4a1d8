# -*- coding: utf-8 -*-
"""
test_registry

Verify field registration, schema resolution and freezing.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from typing import Any, Dict

import pytest

from schemafield.exceptions import FieldTypeNotRegistered, RegistryFrozenError
from schemafield.fields import (
    FieldRegistry,
    NumberField,
    TextField,
    build_registry,
    default_registry,
)
from schemafield.schema.descriptors import ValidationResult


class DummyField(TextField):
    """Text field variant used to exercise custom registration."""

    schema_type = "dummy"
    messages = {"dummyMessage": "Dummy {0}"}

    def get_schema(self) -> Dict[str, Any]:
        return {"type": "dummy"}

    def run_validation(self, raw: Any) -> ValidationResult:
        return ValidationResult()


class TestFieldRegistry:
    def test_built_in_fields(self, registry: FieldRegistry) -> None:
        assert registry.get("number") is NumberField
        assert registry.get("text") is TextField
        assert registry.frozen is True

    def test_resolve_for_schema(self, registry: FieldRegistry) -> None:
        assert registry.resolve_for_schema({"type": "number"}) == "number"
        assert registry.resolve_for_schema({"type": "string"}) == "text"
        assert registry.resolve_for_schema({"type": "integer"}) == "text"
        assert registry.resolve_for_schema({}) == "text"
        assert registry.resolve_for_schema({"type": "string"}, {"type": "number"}) == "number"

    def test_messages_registered(self, registry: FieldRegistry) -> None:
        for key in (
            "stringNotANumber",
            "stringDivisibleBy",
            "stringValueTooLarge",
            "stringValueTooSmall",
            "stringValueTooLargeExclusive",
            "stringValueTooSmallExclusive",
            "notOptional",
        ):
            assert key in registry.messages
        assert registry.messages.format("stringDivisibleBy", 5.0) == "The value must be divisible by 5"

    def test_unknown_type(self, registry: FieldRegistry) -> None:
        with pytest.raises(FieldTypeNotRegistered):
            registry.get_field_class("slider")
        with pytest.raises(FieldTypeNotRegistered):
            registry.create_field({"type": "number"}, {"type": "slider"})

    def test_frozen_registry_rejects_changes(self, registry: FieldRegistry) -> None:
        with pytest.raises(RegistryFrozenError):
            registry.register_field_class("dummy", DummyField)
        with pytest.raises(RegistryFrozenError):
            registry.register_default_schema_field_mapping("integer", "number")
        with pytest.raises(RegistryFrozenError):
            registry.register_messages({"x": "y"})

    def test_custom_registration(self) -> None:
        registry = FieldRegistry()
        registry.install(NumberField)
        registry.register("dummy")(DummyField)
        registry.register_default_schema_field_mapping("dummy", "dummy")
        registry.register_messages(DummyField.messages)
        registry.freeze()

        field = registry.create_field({"type": "dummy"}, name="x")

        assert isinstance(field, DummyField)
        assert field.ctx.messages is registry.messages
        assert registry.messages.format("dummyMessage", "x") == "Dummy x"

    def test_decorator_registers_messages_and_mapping(self) -> None:
        registry = FieldRegistry()
        registry.register("number")(NumberField)
        registry.freeze()

        field = registry.create_field({"type": "number", "maximum": 1})
        field.set_value("5")

        assert isinstance(field, NumberField)
        assert field.handle_validate() is False
        assert field.get_messages() == ["The maximum value for this field is 1"]

    def test_alias_registration_keeps_class_untouched(self) -> None:
        registry = FieldRegistry()
        registry.register("decimal")(NumberField)

        assert registry.get("decimal") is NumberField
        assert registry.resolve_for_schema({"type": "number"}) == "decimal"
        assert NumberField.type_name == "number"

    def test_create_field_shares_catalog(self, registry: FieldRegistry) -> None:
        field = registry.create_field({"type": "number"}, name="amount")

        assert field.ctx.name == "amount"
        assert field.catalog is registry.messages

    def test_build_registry_returns_new_instances(self) -> None:
        assert build_registry() is not build_registry()

    def test_default_registry_is_shared(self) -> None:
        assert default_registry() is default_registry()
        assert default_registry().frozen


# The End
