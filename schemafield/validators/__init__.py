# -*- coding: utf-8 -*-
"""
__init__

Rule sets evaluated by fields.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from .number import (
    NumberValidator,
    parse_value,
    validate_divisible_by,
    validate_is_number,
    validate_maximum,
    validate_minimum,
)
from .text import TextValidator

__all__ = [
    "NumberValidator",
    "TextValidator",
    "parse_value",
    "validate_divisible_by",
    "validate_is_number",
    "validate_maximum",
    "validate_minimum",
]

# The End
