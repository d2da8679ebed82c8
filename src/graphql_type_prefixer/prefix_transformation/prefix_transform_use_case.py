"""Prefix transformation use-case service."""

from __future__ import annotations

import logging
from typing import TextIO

from graphql_type_prefixer.configuration import ConfigurationError, load_configuration
from graphql_type_prefixer.schema_management import (
    SchemaError,
    parse_schema_text,
    print_schema_document,
    read_schema_source,
)
from graphql_type_prefixer.type_renaming import TypeRenamingError, rename_schema_document

from .transform_contracts import TransformOutcome, TransformRequest

logger = logging.getLogger(__name__)


class TransformationError(Exception):
    """Raised when a prefixing run cannot be completed."""


def execute_prefix_transformation(request: TransformRequest, source: TextIO) -> TransformOutcome:
    """Resolve settings, then read, parse, rename and print one schema.

    Settings are validated before ``source`` is read. Nothing is returned on
    failure, so callers never see a partially renamed schema.
    """
    try:
        settings = load_configuration(request.prefix, request.config_path)
        schema_text = read_schema_source(source)
        document = parse_schema_text(schema_text)
        result = rename_schema_document(document, settings.prefix, settings.classifier())
        printed = print_schema_document(result.document)
    except (ConfigurationError, SchemaError, TypeRenamingError) as exc:
        raise TransformationError(str(exc)) from exc

    definition_count = len(result.document.definitions)
    logger.info(
        "Renamed %d distinct types across %d definitions with prefix %r (settings: %s)",
        len(result.renamed_types),
        definition_count,
        settings.prefix,
        settings.config_path or "command line",
    )
    return TransformOutcome(
        schema_text=printed,
        renamed_types=result.renamed_types,
        definition_count=definition_count,
    )
