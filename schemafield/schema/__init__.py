# -*- coding: utf-8 -*-
"""
__init__

Schema descriptors.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .descriptors import ConstraintSet, RuleOutcome, TextConstraints, ValidationResult

__all__ = ["ConstraintSet", "RuleOutcome", "TextConstraints", "ValidationResult"]

# The End
