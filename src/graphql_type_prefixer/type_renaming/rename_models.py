"""Type renaming entities."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field

from graphql import DocumentNode

from graphql_type_prefixer.name_classification import IdentifierClassifier

logger = logging.getLogger(__name__)


@dataclass
class RenameMap:
    """Per-run accumulator mapping original type names to prefixed names.

    Entries are created on first sight of an eligible name and reused for every
    later occurrence, so each original name maps to exactly one new name.
    """

    prefix: str
    classifier: IdentifierClassifier = field(default_factory=IdentifierClassifier)
    assigned: dict[str, str] = field(default_factory=dict)

    def resolve(self, name: str) -> str:
        """Return the name to emit for one occurrence of ``name``."""
        if not self.classifier.is_eligible(name):
            return name
        renamed = self.assigned.get(name)
        if renamed is None:
            renamed = f"{self.prefix}{name}"
            self.assigned[name] = renamed
            logger.debug("Renaming type %s -> %s", name, renamed)
        return renamed


@dataclass(frozen=True)
class RenameResult:
    """Rewritten document plus the renames applied to it."""

    document: DocumentNode
    renamed_types: Mapping[str, str]
