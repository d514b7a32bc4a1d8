# -*- coding: utf-8 -*-
"""conftest

Shared testing utilities for schemafield test-suite fixtures.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from typing import Any, Iterator, Mapping

import pytest

from schemafield.conf import FieldSettings, configure, reset_settings
from schemafield.fields import FieldRegistry, build_registry


class SettingsState:
    """Manage the global settings singleton during tests."""

    def install_defaults(self) -> FieldSettings:
        """Configure default settings so the environment cannot leak in."""

        settings = FieldSettings()
        configure(settings)
        return settings

    def reset(self) -> None:
        """Drop configured settings."""

        reset_settings()


settings_state = SettingsState()


@pytest.fixture(autouse=True)
def default_settings() -> Iterator[FieldSettings]:
    """Run every test against default settings."""

    yield settings_state.install_defaults()
    settings_state.reset()


@pytest.fixture
def registry() -> FieldRegistry:
    """Return a fresh frozen registry with the built-in fields."""

    return build_registry()


@pytest.fixture
def make_field(registry: FieldRegistry):
    """Factory creating a field from a schema and optional raw value."""

    def _make(
        schema: Mapping[str, Any],
        raw: Any = None,
        options: Mapping[str, Any] | None = None,
        **kwargs: Any,
    ):
        field = registry.create_field(schema, options, **kwargs)
        field.set_value(raw)
        return field

    return _make


__all__ = ["settings_state"]


# The End
