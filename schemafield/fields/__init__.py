# -*- coding: utf-8 -*-
"""
__init__

Form fields and the registry that maps schemas to them.

Version: 0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from threading import Lock

from .base import BaseField
from .context import FieldContext, RenderContainer
from .number import NumberField
from .registry import FieldRegistry
from .text import TextField

__all__ = [
    "BaseField",
    "FieldContext",
    "FieldRegistry",
    "NumberField",
    "RenderContainer",
    "TextField",
    "build_registry",
    "default_registry",
]


def build_registry() -> FieldRegistry:
    """Create a frozen registry holding the built-in fields."""
    registry = FieldRegistry()
    registry.install(TextField)
    registry.install(NumberField)
    registry.freeze()
    return registry


_default: FieldRegistry | None = None
_default_lock = Lock()


def default_registry() -> FieldRegistry:
    """Return a shared registry, built on first use."""
    global _default
    with _default_lock:
        if _default is None:
            _default = build_registry()
        return _default

# The End
