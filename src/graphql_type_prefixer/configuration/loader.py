"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from graphql_type_prefixer.name_classification import IdentifierClassifier

from .runtime_settings import PrefixSettings

PREFIX_REQUIRED_MESSAGE = "Prefix is required. Use --prefix <PREFIX>."

_KNOWN_KEYS = frozenset({"prefix", "reserved_names", "extra_reserved_names"})


class ConfigurationError(Exception):
    """Raised when prefix settings are missing or invalid."""


def load_configuration(
    prefix: str | None = None, config_path: Path | str | None = None
) -> PrefixSettings:
    """Resolve prefix settings from the command line and an optional settings file.

    A prefix given on the command line wins over the one in the file. The
    prefix is used verbatim; only emptiness is rejected.
    """
    path = Path(config_path) if config_path is not None else None
    parsed = _load_settings_file(path) if path is not None else {}

    reserved_names = _parse_reserved_names(parsed)
    resolved_prefix = prefix if prefix is not None else parsed.get("prefix")
    if resolved_prefix is None:
        raise ConfigurationError(PREFIX_REQUIRED_MESSAGE)
    if not isinstance(resolved_prefix, str):
        raise ConfigurationError("prefix must be a string.")
    if not resolved_prefix:
        raise ConfigurationError(PREFIX_REQUIRED_MESSAGE)

    return PrefixSettings(
        prefix=resolved_prefix,
        reserved_names=reserved_names,
        config_path=path,
    )


def _load_settings_file(path: Path) -> Mapping[str, Any]:
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationError(f"Failed to read configuration file {path}: {exc}") from exc
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    unknown = sorted(str(key) for key in parsed if key not in _KNOWN_KEYS)
    if unknown:
        raise ConfigurationError(f"Unknown configuration keys: {', '.join(unknown)}")
    return parsed


def _parse_reserved_names(section: Mapping[str, Any]) -> frozenset[str]:
    base = section.get("reserved_names")
    classifier = (
        IdentifierClassifier()
        if base is None
        else IdentifierClassifier(_require_name_sequence(base, "reserved_names"))
    )
    extra = section.get("extra_reserved_names")
    if extra is not None:
        classifier = classifier.with_additional_reserved_names(
            _require_name_sequence(extra, "extra_reserved_names")
        )
    return classifier.reserved_names


def _require_name_sequence(value: Any, field_name: str) -> frozenset[str]:
    if isinstance(value, str) or not isinstance(value, Sequence):
        raise ConfigurationError(f"{field_name} must be a list of strings.")
    names: set[str] = set()
    for item in value:
        if not isinstance(item, str):
            raise ConfigurationError(f"{field_name} entries must be strings.")
        stripped = item.strip()
        if not stripped:
            raise ConfigurationError(f"{field_name} entries must not be empty.")
        names.add(stripped)
    return frozenset(names)
