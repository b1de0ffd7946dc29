"""Load and validate blocklist word lists stored as JSON."""
from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, FrozenSet, List

from jsonschema import Draft7Validator
from sqids.constants import DEFAULT_BLOCKLIST

from ..utils.constants import BLOCKLIST_SCHEMA_PATH
from ..utils.errors import BlocklistFileNotFound, BlocklistValidationError
from ..utils.logging import get_logger

LOG = get_logger()


def load_json_file(json_path: Path) -> Any:
    if not json_path.exists():
        raise BlocklistFileNotFound(f"blocklist not found: {json_path}")
    with json_path.open("r", encoding="utf-8") as f:
        data = json.load(f)
    LOG.info("loaded blocklist: %s", json_path)
    return data


def load_schema_file(schema_path: Path = BLOCKLIST_SCHEMA_PATH) -> Any:
    if not schema_path.exists():
        raise BlocklistFileNotFound(f"schema not found: {schema_path}")
    with schema_path.open("r", encoding="utf-8") as f:
        return json.load(f)


def _format_json_path(path_iterable) -> str:
    parts: List[str] = ["root"]
    for p in path_iterable:
        if isinstance(p, int):
            parts[-1] = parts[-1] + f"[{p}]"
        else:
            parts.append(str(p))
    return ".".join(parts)


def validate_json_schema(data: Any, schema_json: Any) -> None:
    validator = Draft7Validator(schema_json)
    errors = sorted(validator.iter_errors(data), key=lambda e: (list(e.path), list(e.schema_path)))
    if not errors:
        return
    LOG.error("[BLK] blocklist validation: FAILED (count=%d)", len(errors))
    for i, err in enumerate(errors, start=1):
        LOG.error(
            "[BLK] #%d path=%s | msg=%s | validator=%s",
            i,
            _format_json_path(err.path),
            err.message,
            err.validator,
        )
    raise BlocklistValidationError(f"blocklist validation failed with {len(errors)} error(s)")


def load_blocklist(path: Path, schema_path: Path = BLOCKLIST_SCHEMA_PATH) -> FrozenSet[str]:
    """Read a JSON array of words from ``path`` after validating it."""

    words = load_json_file(Path(path))
    validate_json_schema(words, load_schema_file(schema_path))
    return frozenset(words)


@lru_cache(maxsize=None)
def default_blocklist() -> FrozenSet[str]:
    """The word list shipped with the published sqids distribution.

    Using the same list keeps default IDs identical to every other
    implementation of the algorithm.
    """

    words = frozenset(DEFAULT_BLOCKLIST)
    LOG.debug("default blocklist: %d words", len(words))
    return words


__all__ = [
    "load_json_file",
    "load_schema_file",
    "validate_json_schema",
    "load_blocklist",
    "default_blocklist",
]
