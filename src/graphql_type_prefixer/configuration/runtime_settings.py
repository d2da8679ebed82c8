"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from graphql_type_prefixer.name_classification import IdentifierClassifier


@dataclass(frozen=True)
class PrefixSettings:
    """Resolved settings for one prefixing run."""

    prefix: str
    reserved_names: frozenset[str]
    config_path: Path | None = None

    def classifier(self) -> IdentifierClassifier:
        return IdentifierClassifier(reserved_names=self.reserved_names)
