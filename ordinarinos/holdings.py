"""Readers for caller-supplied lists of held satoshis.

Looking up which sats a wallet holds is left to external tooling (an ord
wallet, an indexer export, ...). These helpers only turn such an export into
a list of validated satoshi numbers for :func:`ordinarinos.rarity.reconcile`.

Accepted shapes:

* JSON or YAML: a list of numbers/strings, or a mapping with a ``satoshis``
  list.
* Plain text: numbers separated by commas, whitespace, or newlines; ``#``
  starts a comment.
"""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import Any

import yaml

from .rarity.classifier import InvalidInputError, validate_satoshi

logger = logging.getLogger(__name__)

FORMATS = ("json", "yaml", "text")
_SUFFIX_FORMATS = {".json": "json", ".yaml": "yaml", ".yml": "yaml", ".txt": "text"}
_SEPARATORS = re.compile(r"[\s,]+")


class HoldingsError(ValueError):
    """Raised when a held-satoshi list cannot be read."""


def _detect_format(text: str) -> str:
    stripped = text.lstrip()
    if stripped.startswith(("[", "{")):
        return "json"
    if stripped.startswith("-") or re.search(r"^\s*satoshis\s*:", text, re.MULTILINE):
        return "yaml"
    return "text"


def _unwrap(data: Any, source: str) -> list[Any]:
    if data is None:
        return []
    if isinstance(data, dict):
        if "satoshis" not in data:
            raise HoldingsError(f"{source} mapping must contain a 'satoshis' list")
        data = data["satoshis"] or []
    if not isinstance(data, list):
        raise HoldingsError(f"{source} must contain a list of satoshis")
    return data


def _parse_text(text: str) -> list[str]:
    tokens: list[str] = []
    for line in text.splitlines():
        content = line.split("#", 1)[0]
        tokens.extend(token for token in _SEPARATORS.split(content) if token)
    return tokens


def parse_held_satoshis(text: str, *, fmt: str | None = None) -> list[int]:
    """Parse ``text`` into validated satoshi numbers, preserving order.

    Raises:
        HoldingsError: If the content is not a recognizable list.
        InvalidInputError: If an item is not a valid satoshi number.
    """

    resolved = fmt or _detect_format(text)
    if resolved not in FORMATS:
        raise HoldingsError(f"Unsupported holdings format: {resolved}")

    if resolved == "json":
        try:
            raw_items = _unwrap(json.loads(text), "JSON holdings")
        except json.JSONDecodeError as exc:
            raise HoldingsError(f"Invalid JSON holdings: {exc}") from exc
    elif resolved == "yaml":
        try:
            raw_items = _unwrap(yaml.safe_load(text), "YAML holdings")
        except yaml.YAMLError as exc:  # pragma: no cover - delegated to PyYAML
            raise HoldingsError(f"Invalid YAML holdings: {exc}") from exc
    else:
        raw_items = _parse_text(text)

    satoshis: list[int] = []
    for index, item in enumerate(raw_items):
        try:
            satoshis.append(validate_satoshi(item))
        except InvalidInputError as exc:
            raise InvalidInputError(f"Held satoshi #{index}: {exc}") from exc
    logger.debug("Parsed %d held satoshis (%s)", len(satoshis), resolved)
    return satoshis


def load_held_satoshis(path: str | Path) -> list[int]:
    """Read and parse a held-satoshi file; the suffix picks the format."""

    path = Path(path).expanduser()
    if not path.exists():
        raise HoldingsError(f"Holdings file not found: {path}")
    fmt = _SUFFIX_FORMATS.get(path.suffix.lower())
    return parse_held_satoshis(path.read_text(), fmt=fmt)
