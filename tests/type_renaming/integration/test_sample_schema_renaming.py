"""Renaming properties checked against the sample schema."""

from __future__ import annotations

import re
from pathlib import Path

import pytest
from graphql import build_ast_schema, parse, print_ast
from graphql_type_prefixer.name_classification import DEFAULT_RESERVED_NAMES
from graphql_type_prefixer.type_renaming import rename_schema_document

_SAMPLE_PATH = Path(__file__).resolve().parents[3] / "samples" / "sample-schema.graphql"
_USER_TYPES = (
    "Order",
    "Customer",
    "OrderItem",
    "Product",
    "OrderStatus",
    "Node",
    "SearchResult",
    "OrderInput",
    "OrderItemInput",
    "DateTime",
)


def _sample_text() -> str:
    return _SAMPLE_PATH.read_text(encoding="utf-8")


def _words(text: str) -> list[str]:
    return re.findall(r"[_A-Za-z][_0-9A-Za-z]*", text)


@pytest.fixture(name="renamed_text")
def fixture_renamed_text() -> str:
    result = rename_schema_document(parse(_sample_text()), "Shopify")
    return print_ast(result.document)


def test_every_user_type_is_renamed_at_every_occurrence(renamed_text: str) -> None:
    original_words = _words(_sample_text())
    renamed_words = _words(renamed_text)

    for type_name in _USER_TYPES:
        assert type_name not in renamed_words
        assert renamed_words.count(f"Shopify{type_name}") == original_words.count(type_name)


def test_reserved_names_keep_their_occurrence_counts(renamed_text: str) -> None:
    original_words = _words(_sample_text())
    renamed_words = _words(renamed_text)

    for reserved in DEFAULT_RESERVED_NAMES:
        assert renamed_words.count(reserved) == original_words.count(reserved)
        assert f"Shopify{reserved}" not in renamed_words


def test_wrappers_survive_around_renamed_types(renamed_text: str) -> None:
    assert "items: [ShopifyOrderItem!]!" in renamed_text
    assert "orders: [ShopifyOrder!]!" in renamed_text
    assert "items: [ShopifyOrderItemInput!]!" in renamed_text
    assert (
        "union ShopifySearchResult = ShopifyOrder | ShopifyProduct | ShopifyCustomer"
        in renamed_text
    )


def test_output_reparses_with_the_same_shape(renamed_text: str) -> None:
    original = parse(_sample_text())
    reparsed = parse(renamed_text)

    assert len(reparsed.definitions) == len(original.definitions)
    for before, after in zip(original.definitions, reparsed.definitions, strict=True):
        assert after.kind == before.kind
        assert len(getattr(after, "fields", None) or ()) == len(
            getattr(before, "fields", None) or ()
        )
        assert len(getattr(after, "values", None) or ()) == len(
            getattr(before, "values", None) or ()
        )
        assert len(getattr(after, "types", None) or ()) == len(
            getattr(before, "types", None) or ()
        )


def test_output_still_builds_a_schema(renamed_text: str) -> None:
    schema = build_ast_schema(parse(renamed_text))

    assert schema.query_type is not None
    assert schema.query_type.name == "Query"
    assert schema.get_type("ShopifyOrder") is not None
    assert schema.get_type("Order") is None
