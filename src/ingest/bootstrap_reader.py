"""Bootstrap document readers.

This module loads ``{persons, filters}`` documents from local JSON or YAML
files. Item-level checks are left to the stores; this layer only verifies
the document shape.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping, cast

import yaml

from core.constants import (
    BOOTSTRAP_FILTERS_KEY,
    BOOTSTRAP_PERSONS_KEY,
    JSON_EXTENSIONS,
    SUPPORTED_BOOTSTRAP_EXTENSIONS,
    YAML_EXTENSIONS,
)
from core.errors import PeopleListIngestError
from core.types import BootstrapData


def read_bootstrap(source_path: str | Path) -> BootstrapData:
    """Load bootstrap data from a JSON or YAML file.

    Args:
        source_path: Path to a ``.json``, ``.yaml`` or ``.yml`` file.

    Returns:
        Persons and filters found in the document; missing keys are empty.

    Raises:
        PeopleListIngestError: If the file is missing, unparsable, or has
            the wrong shape.
    """
    file_path = Path(source_path).expanduser().resolve()
    payload = _load_payload(file_path)
    return bootstrap_from_payload(payload, str(file_path))


def bootstrap_from_payload(payload: object, context: str = "bootstrap payload") -> BootstrapData:
    """Validate a decoded document and build bootstrap data.

    Args:
        payload: Decoded JSON/YAML value.
        context: Source description used in error messages.

    Returns:
        Typed bootstrap data.

    Raises:
        PeopleListIngestError: If the payload shape is invalid.
    """
    if not isinstance(payload, Mapping):
        raise PeopleListIngestError(
            f"Invalid {context}: expected a mapping with "
            f"'{BOOTSTRAP_PERSONS_KEY}' and/or '{BOOTSTRAP_FILTERS_KEY}' lists."
        )
    persons = _expect_item_list(payload.get(BOOTSTRAP_PERSONS_KEY), BOOTSTRAP_PERSONS_KEY, context)
    filters = _expect_item_list(payload.get(BOOTSTRAP_FILTERS_KEY), BOOTSTRAP_FILTERS_KEY, context)
    return BootstrapData(persons=persons, filters=filters)


def _load_payload(file_path: Path) -> object:
    """Read and decode one bootstrap file."""
    suffix = file_path.suffix.lower()
    if suffix not in SUPPORTED_BOOTSTRAP_EXTENSIONS:
        raise PeopleListIngestError(
            f"Unsupported bootstrap file {file_path}. "
            f"Supported extensions: {SUPPORTED_BOOTSTRAP_EXTENSIONS}."
        )
    if not file_path.exists():
        raise PeopleListIngestError(
            f"Bootstrap file does not exist at {file_path}. Provide an existing file path."
        )
    try:
        text = file_path.read_text(encoding="utf-8")
    except OSError as error:
        raise PeopleListIngestError(
            f"Failed to read bootstrap file at {file_path}: {error}. "
            "Check file permissions and retry."
        ) from error
    if suffix in JSON_EXTENSIONS:
        return _decode_json(file_path, text)
    if suffix in YAML_EXTENSIONS:
        return _decode_yaml(file_path, text)
    raise PeopleListIngestError(f"Unsupported bootstrap file {file_path}.")


def _decode_json(file_path: Path, text: str) -> object:
    try:
        return cast(object, json.loads(text))
    except json.JSONDecodeError as error:
        raise PeopleListIngestError(
            f"Failed to parse JSON bootstrap at {file_path}:{error.lineno}: {error.msg}. "
            "Fix JSON syntax and retry."
        ) from error


def _decode_yaml(file_path: Path, text: str) -> object:
    try:
        payload = cast(object, yaml.safe_load(text))
    except yaml.YAMLError as error:
        raise PeopleListIngestError(
            f"Failed to parse YAML bootstrap at {file_path}: {error}. Fix YAML syntax and retry."
        ) from error
    if payload is None:
        raise PeopleListIngestError(
            f"Bootstrap file at {file_path} is empty. "
            f"Define '{BOOTSTRAP_PERSONS_KEY}' and/or '{BOOTSTRAP_FILTERS_KEY}'."
        )
    return payload


def _expect_item_list(value: object, key: str, context: str) -> tuple[Mapping[str, Any], ...]:
    if value is None:
        return ()
    if not isinstance(value, list):
        raise PeopleListIngestError(
            f"Invalid {context}: '{key}' must be a list, got {type(value).__name__}."
        )
    # Non-mapping items pass through; the stores report them as malformed.
    return tuple(cast(Mapping[str, Any], item) for item in value)
