"""Type renaming exports."""

from .consistent_renamer import TypeRenamingError, rename_schema_document
from .rename_models import RenameMap, RenameResult

__all__ = [
    "RenameMap",
    "RenameResult",
    "TypeRenamingError",
    "rename_schema_document",
]
