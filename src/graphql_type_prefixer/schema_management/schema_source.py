"""Schema source reading."""

from __future__ import annotations

from typing import TextIO

from .sdl_document import SchemaInputError

NO_SCHEMA_MESSAGE = "No schema provided. Pipe a GraphQL schema to this command."


def read_schema_source(stream: TextIO) -> str:
    """Read the whole schema in one blocking call.

    An interactive terminal counts as no input so the command never waits on
    a keyboard.
    """
    if stream.isatty():
        raise SchemaInputError(NO_SCHEMA_MESSAGE)
    try:
        text = stream.read()
    except UnicodeDecodeError as exc:
        raise SchemaInputError(f"Schema input is not valid UTF-8: {exc}") from exc
    except OSError as exc:
        raise SchemaInputError(f"Failed to read schema input: {exc}") from exc
    if not text.strip():
        raise SchemaInputError(NO_SCHEMA_MESSAGE)
    return text
