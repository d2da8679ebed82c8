"""Name classification exports."""

from .identifier_classifier import IdentifierClassifier
from .reserved_names import (
    BUILTIN_SCALAR_NAMES,
    DEFAULT_RESERVED_NAMES,
    INTROSPECTION_TYPE_NAMES,
    ROOT_OPERATION_TYPE_NAMES,
)

__all__ = [
    "IdentifierClassifier",
    "BUILTIN_SCALAR_NAMES",
    "DEFAULT_RESERVED_NAMES",
    "INTROSPECTION_TYPE_NAMES",
    "ROOT_OPERATION_TYPE_NAMES",
]
