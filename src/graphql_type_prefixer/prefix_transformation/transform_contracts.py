"""Prefix transformation entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass


@dataclass(frozen=True)
class TransformRequest:
    """Input contract for one prefixing run."""

    prefix: str | None
    config_path: str | None = None


@dataclass(frozen=True)
class TransformOutcome:
    """Output contract for one completed prefixing run."""

    schema_text: str
    renamed_types: Mapping[str, str]
    definition_count: int
