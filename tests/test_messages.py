# -*- coding: utf-8 -*-
"""
test_messages

Message catalog lookups and token substitution.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import math

import pytest

from schemafield.exceptions import MessageNotFound, RegistryFrozenError
from schemafield.messages import MessageCatalog, format_token, substitute_tokens


class TestSubstitution:
    def test_positional_tokens(self) -> None:
        assert substitute_tokens("{0} and {1}", [1.0, "x"]) == "1 and x"
        assert substitute_tokens("{1}-{0}", ["a", "b"]) == "b-a"

    def test_missing_token_kept(self) -> None:
        assert substitute_tokens("value {0} of {1}", [3]) == "value 3 of {1}"

    def test_format_token(self) -> None:
        assert format_token(100.0) == "100"
        assert format_token(0.1) == "0.1"
        assert format_token(-2.5) == "-2.5"
        assert format_token(math.inf) == "Infinity"
        assert format_token(1e21) == "1e+21"
        assert format_token(1e20) == "100000000000000000000"
        assert format_token(True) == "true"
        assert format_token(None) == ""


class TestMessageCatalog:
    def test_lookup_and_format(self) -> None:
        catalog = MessageCatalog({"tooBig": "Max is {0}"})

        assert catalog.get("tooBig") == "Max is {0}"
        assert catalog.format("tooBig", 7.0) == "Max is 7"
        assert "tooBig" in catalog
        assert len(catalog) == 1

    def test_override(self) -> None:
        catalog = MessageCatalog({"k": "old"})
        catalog.register({"k": "new"})

        assert catalog.get("k") == "new"

    def test_missing_key(self) -> None:
        with pytest.raises(MessageNotFound):
            MessageCatalog().get("nope")

    def test_frozen(self) -> None:
        catalog = MessageCatalog({"k": "v"})
        catalog.freeze()

        with pytest.raises(RegistryFrozenError):
            catalog.register({"k": "w"})
        assert catalog.frozen is True


# The End
