# -*- coding: utf-8 -*-
"""
messages

Message catalog and positional token substitution.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
import math
import re
from typing import Any, Dict, Iterator, Mapping, Sequence

from .exceptions import MessageNotFound, RegistryFrozenError

logger = logging.getLogger(__name__)

_TOKEN_RE = re.compile(r"\{(\d+)\}")


def format_token(value: Any) -> str:
    """Render a substitution value; integral floats lose the ``.0`` suffix."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isfinite(value) and value.is_integer() and abs(value) < 1e21:
            return str(int(value))
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if math.isnan(value):
            return "NaN"
    if value is None:
        return ""
    return str(value)


def substitute_tokens(template: str, tokens: Sequence[Any]) -> str:
    """Replace ``{0}``, ``{1}``... in ``template`` with ``tokens``.

    Placeholders without a matching token are left untouched.
    """

    def _replace(match: re.Match[str]) -> str:
        index = int(match.group(1))
        if index < len(tokens):
            return format_token(tokens[index])
        return match.group(0)

    return _TOKEN_RE.sub(_replace, template)


class MessageCatalog:
    """Mapping of message keys to templates."""

    def __init__(self, messages: Mapping[str, str] | None = None) -> None:
        self._messages: Dict[str, str] = {}
        self._frozen = False
        if messages:
            self.register(messages)

    def register(self, messages: Mapping[str, str]) -> None:
        """Add or override templates."""
        if self._frozen:
            raise RegistryFrozenError("Message catalog is frozen")
        self._messages.update(messages)
        logger.debug("Registered messages: %s", ", ".join(messages))

    def freeze(self) -> None:
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def get(self, key: str) -> str:
        try:
            return self._messages[key]
        except KeyError:
            raise MessageNotFound(key) from None

    def format(self, key: str, *tokens: Any) -> str:
        """Return the template for ``key`` with ``tokens`` substituted."""
        return substitute_tokens(self.get(key), tokens)

    def __contains__(self, key: object) -> bool:
        return key in self._messages

    def __iter__(self) -> Iterator[str]:
        return iter(self._messages)

    def __len__(self) -> int:
        return len(self._messages)


# The End
