"""Prefix eligibility rule for type names."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .reserved_names import DEFAULT_RESERVED_NAMES


@dataclass(frozen=True)
class IdentifierClassifier:
    """Decides which type names may receive a prefix."""

    reserved_names: frozenset[str] = DEFAULT_RESERVED_NAMES

    def is_eligible(self, name: str) -> bool:
        return name not in self.reserved_names

    def with_additional_reserved_names(self, names: Iterable[str]) -> IdentifierClassifier:
        """Return a classifier that also keeps ``names`` unchanged."""
        return IdentifierClassifier(reserved_names=self.reserved_names | frozenset(names))
