"""Schema management exports."""

from .schema_source import read_schema_source
from .sdl_document import (
    SchemaError,
    SchemaInputError,
    SchemaParseError,
    SchemaPrintError,
    parse_schema_text,
    print_schema_document,
)

__all__ = [
    "SchemaError",
    "SchemaInputError",
    "SchemaParseError",
    "SchemaPrintError",
    "parse_schema_text",
    "print_schema_document",
    "read_schema_source",
]
