"""SDL parsing and printing service."""

from __future__ import annotations

from graphql import DocumentNode, GraphQLSyntaxError, parse, print_ast


class SchemaError(Exception):
    """Base error for schema input, parsing and printing failures."""


class SchemaInputError(SchemaError):
    """Raised when no schema text was provided."""


class SchemaParseError(SchemaError):
    """Raised when schema text is not valid GraphQL SDL."""

    def __init__(self, message: str, line: int | None = None, column: int | None = None):
        super().__init__(message)
        self.line = line
        self.column = column


class SchemaPrintError(SchemaError):
    """Raised when a document cannot be printed back to SDL."""


def parse_schema_text(text: str) -> DocumentNode:
    """Parse SDL text into a document without source locations."""
    try:
        return parse(text, no_location=True)
    except GraphQLSyntaxError as exc:
        location = exc.locations[0] if exc.locations else None
        if location is None:
            raise SchemaParseError(f"Invalid GraphQL schema: {exc.message}") from exc
        raise SchemaParseError(
            f"Invalid GraphQL schema at line {location.line}, column {location.column}: "
            f"{exc.message}",
            line=location.line,
            column=location.column,
        ) from exc


def print_schema_document(document: DocumentNode) -> str:
    """Render a document with the graphql-core printer's default formatting."""
    try:
        return print_ast(document)
    except (AttributeError, TypeError, ValueError) as exc:
        raise SchemaPrintError(f"Failed to print GraphQL schema: {exc}") from exc
