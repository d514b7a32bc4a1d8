"""
__init__

Schema-driven form fields entry point.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .conf import FieldSettings, configure, current_settings
from .fields import (
    FieldRegistry,
    NumberField,
    TextField,
    build_registry,
    default_registry,
)
from .schema.descriptors import ConstraintSet, ValidationResult
from .meta import __version__

# The End
