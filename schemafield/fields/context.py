# -*- coding: utf-8 -*-
"""
context

Field context helper.

Version: 0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from ..conf import FieldSettings
from ..messages import MessageCatalog


@dataclass(frozen=True)
class FieldContext:
    """Everything a field needs to know about itself and its environment."""
    schema: Mapping[str, Any]                   # JSON-Schema-like fragment
    options: Mapping[str, Any] = field(default_factory=dict)  # editor options
    name: str = ""                              # field name in the form
    messages: Optional[MessageCatalog] = None   # catalog shared by the registry
    settings: Optional[FieldSettings] = None    # None -> current_settings()
    readonly: bool = False                      # field read-only?


@dataclass
class RenderContainer:
    """Host-side container wrapping a rendered field."""
    classes: list[str] = field(default_factory=list)

    def add_class(self, name: str) -> None:
        if name not in self.classes:
            self.classes.append(name)

    def has_class(self, name: str) -> bool:
        return name in self.classes

# The End
