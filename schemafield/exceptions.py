# -*- coding: utf-8 -*-
"""
exceptions

Configuration-time errors raised by schemafield.

Validation itself never raises: failed rules are reported through
``ValidationResult``. These exceptions cover misuse of registries and
malformed field schemas.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations


class SchemaFieldError(Exception):
    """Base class for schemafield-specific exceptions."""


class FieldTypeNotRegistered(SchemaFieldError):
    """Raised when a field type is not registered."""

    def __init__(self, type_name: str) -> None:
        super().__init__(f"Field type {type_name!r} is not registered")
        self.type_name = type_name


class MessageNotFound(SchemaFieldError):
    """Raised when a message key is missing from the catalog."""

    def __init__(self, key: str) -> None:
        super().__init__(f"Message {key!r} is not registered")
        self.key = key


class RegistryFrozenError(SchemaFieldError):
    """Raised on registration attempts after a registry was frozen."""


class InvalidConstraintError(SchemaFieldError):
    """Raised when a field schema carries malformed constraint values."""

    def __init__(self, detail: str | None = None) -> None:
        super().__init__(detail or "")
        self.detail = detail


# The End
