# -*- coding: utf-8 -*-
"""
conf

Runtime configuration utilities for the schemafield package.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
import math
import os
from dataclasses import dataclass
from threading import RLock
from typing import Callable, Mapping

logger = logging.getLogger(__name__)


@dataclass
class FieldSettings:
    """Container for field behaviour derived from environment variables."""

    zero_bound_is_unset: bool = False
    divisible_by_tolerance: float = 0.0
    number_step: str = "any"
    css_prefix: str = "schemafield"

    def __post_init__(self) -> None:
        """Normalize values that may arrive in loose form."""
        tolerance = float(self.divisible_by_tolerance or 0.0)
        if math.isnan(tolerance) or tolerance < 0:
            tolerance = 0.0
        self.divisible_by_tolerance = tolerance
        self.number_step = str(self.number_step).strip() or "any"
        self.css_prefix = self.css_prefix.strip().strip("-") or "schemafield"

    @classmethod
    def from_env(
        cls,
        env: Mapping[str, str] | None = None,
        *,
        prefix: str = "SCHEMAFIELD_",
    ) -> "FieldSettings":
        """Build a settings instance from environment variables."""
        source = os.environ if env is None else env
        data = {key[len(prefix) :]: value for key, value in source.items() if key.startswith(prefix)}
        return cls(
            zero_bound_is_unset=cls._to_bool(data.get("ZERO_BOUND_IS_UNSET")),
            divisible_by_tolerance=cls._to_float(
                data.get("DIVISIBLE_BY_TOLERANCE"), default=0.0
            ),
            number_step=data.get("NUMBER_STEP") or "any",
            css_prefix=data.get("CSS_PREFIX") or "schemafield",
        )

    @staticmethod
    def _to_float(value: str | None, *, default: float) -> float:
        """Return a float from ``value`` or ``default`` when conversion fails."""
        if value is None:
            return default
        try:
            return float(value)
        except (TypeError, ValueError):
            logger.warning("Ignoring unparsable float setting %r", value)
            return default

    @staticmethod
    def _to_bool(value: str | None, *, default: bool = False) -> bool:
        """Return a boolean parsed from ``value`` with a ``default`` fallback."""

        if value is None:
            return default
        normalized = value.strip().lower()
        if normalized in {"1", "true", "yes", "on"}:
            return True
        if normalized in {"0", "false", "no", "off"}:
            return False
        logger.warning("Ignoring unparsable boolean setting %r", value)
        return default


class SettingsManager:
    """Central storage for the active ``FieldSettings`` instance."""

    def __init__(self, initial: FieldSettings | None = None) -> None:
        """Prepare storage with an optional preconfigured ``initial`` settings."""

        self._lock = RLock()
        self._settings = initial
        self._callbacks: list[Callable[[FieldSettings], None]] = []

    def configure(self, settings: FieldSettings) -> None:
        """Install a new settings instance and notify observers."""
        with self._lock:
            self._settings = settings
            for callback in list(self._callbacks):
                callback(settings)

    def current(self) -> FieldSettings:
        """Return the active settings, lazily initializing from the environment."""
        with self._lock:
            if self._settings is None:
                self._settings = FieldSettings.from_env()
            return self._settings

    def reset(self) -> None:
        """Forget the active settings so the next access reloads the environment."""
        with self._lock:
            self._settings = None

    def register(self, callback: Callable[[FieldSettings], None]) -> None:
        """Register a callback invoked whenever settings change."""
        with self._lock:
            self._callbacks.append(callback)

    def unregister(self, callback: Callable[[FieldSettings], None]) -> None:
        """Remove a previously registered settings change callback if present."""
        with self._lock:
            if callback in self._callbacks:
                self._callbacks.remove(callback)


_settings_manager = SettingsManager()


def configure(settings: FieldSettings) -> None:
    """Public entry point to install application specific settings."""
    _settings_manager.configure(settings)


def current_settings() -> FieldSettings:
    """Return the active settings instance used by schemafield components."""
    return _settings_manager.current()


def reset_settings() -> None:
    """Drop configured settings; the environment is consulted on next access."""
    _settings_manager.reset()


def register_settings_observer(callback: Callable[[FieldSettings], None]) -> None:
    """Subscribe to configuration changes."""
    _settings_manager.register(callback)


def unregister_settings_observer(callback: Callable[[FieldSettings], None]) -> None:
    """Unsubscribe from configuration changes previously registered."""
    _settings_manager.unregister(callback)


__all__ = [
    "FieldSettings",
    "SettingsManager",
    "configure",
    "current_settings",
    "reset_settings",
    "register_settings_observer",
    "unregister_settings_observer",
]


# The End
