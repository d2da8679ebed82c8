"""Prefix transformation exports."""

from .prefix_transform_use_case import TransformationError, execute_prefix_transformation
from .transform_contracts import TransformOutcome, TransformRequest

__all__ = [
    "TransformRequest",
    "TransformOutcome",
    "TransformationError",
    "execute_prefix_transformation",
]
