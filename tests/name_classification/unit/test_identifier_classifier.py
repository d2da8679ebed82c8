"""Identifier classifier tests."""

from __future__ import annotations

import pytest
from graphql_type_prefixer.name_classification import (
    BUILTIN_SCALAR_NAMES,
    DEFAULT_RESERVED_NAMES,
    INTROSPECTION_TYPE_NAMES,
    ROOT_OPERATION_TYPE_NAMES,
    IdentifierClassifier,
)


@pytest.mark.parametrize("name", sorted(DEFAULT_RESERVED_NAMES))
def test_reserved_names_are_not_eligible(name: str) -> None:
    assert IdentifierClassifier().is_eligible(name) is False


@pytest.mark.parametrize("name", ["Order", "query", "Strings", "__Custom", "", "ID!"])
def test_other_names_are_eligible(name: str) -> None:
    assert IdentifierClassifier().is_eligible(name) is True


def test_default_set_is_union_of_named_groups() -> None:
    assert ROOT_OPERATION_TYPE_NAMES == {"Query", "Mutation", "Subscription"}
    assert BUILTIN_SCALAR_NAMES == {"String", "Int", "Float", "Boolean", "ID"}
    assert len(INTROSPECTION_TYPE_NAMES) == 8
    assert DEFAULT_RESERVED_NAMES == (
        ROOT_OPERATION_TYPE_NAMES | BUILTIN_SCALAR_NAMES | INTROSPECTION_TYPE_NAMES
    )


def test_substituted_reserved_set_replaces_defaults() -> None:
    classifier = IdentifierClassifier(reserved_names=frozenset({"Order"}))

    assert classifier.is_eligible("Order") is False
    assert classifier.is_eligible("Query") is True


def test_additional_reserved_names_return_new_classifier() -> None:
    base = IdentifierClassifier()
    extended = base.with_additional_reserved_names(["Node"])

    assert extended.is_eligible("Node") is False
    assert extended.is_eligible("ID") is False
    assert base.is_eligible("Node") is True
