"""Search, rarity-tier grouping, and availability filtering for catalog entries."""

from __future__ import annotations

import logging
import re
from enum import Enum
from typing import Iterable, Sequence

from .catalog import CatalogEntry
from .classifier import InvalidInputError, validate_satoshi
from .taxonomy import Category

logger = logging.getLogger(__name__)

MIN_RARITY = 1
MAX_RARITY = 10


class RarityTier(Enum):
    """Named buckets of the 1-10 rarity scale used for UI grouping."""

    LEGENDARY = ("Legendary", 10, 10)
    EPIC = ("Epic", 9, 9)
    VERY_RARE = ("Very Rare", 8, 8)
    RARE = ("Rare", 7, 7)
    UNCOMMON = ("Uncommon", 5, 6)
    COMMON = ("Common", 1, 4)

    def __init__(self, label: str, minimum: int, maximum: int) -> None:
        self.label = label
        self.minimum = minimum
        self.maximum = maximum

    def contains(self, rarity: int) -> bool:
        return self.minimum <= rarity <= self.maximum

    @classmethod
    def parse(cls, name: "str | RarityTier") -> "RarityTier":
        """Resolve ``name`` from an enum name, label, or camel/kebab-case key."""

        if isinstance(name, cls):
            return name
        # "veryRare" -> "very_rare"; "Very Rare" / "very-rare" -> "very_rare"
        snake = re.sub(r"(?<=[a-z])(?=[A-Z])", "_", str(name).strip())
        key = re.sub(r"[\s\-]+", "_", snake).upper()
        try:
            return cls[key]
        except KeyError:
            raise InvalidInputError(f"Unknown rarity tier: {name!r}") from None


# Per-score labels; 6 and 5 share the "Uncommon" tier but are labelled apart.
_RARITY_LABELS = {
    10: "Legendary",
    9: "Epic",
    8: "Very Rare",
    7: "Rare",
    6: "Uncommon",
    5: "Somewhat Uncommon",
    4: "Vintage",
    3: "Common",
}


def rarity_label(rarity: int) -> str:
    return _RARITY_LABELS.get(rarity, "Regular")


def tier_for(rarity: int) -> RarityTier | None:
    for tier in RarityTier:
        if tier.contains(rarity):
            return tier
    return None


def _check_entry(entry: CatalogEntry) -> None:
    """Raise ``TypeError``/``ValueError`` unless every field of ``entry`` is usable."""

    if not isinstance(entry.satoshi, int):
        raise TypeError(f"satoshi must be an int, got {entry.satoshi!r}")
    validate_satoshi(entry.satoshi)
    if not isinstance(entry.category, Category):
        raise TypeError(f"category must be a Category, got {entry.category!r}")
    if not isinstance(entry.description, str):
        raise TypeError(f"description must be a str, got {entry.description!r}")
    rarity = entry.rarity
    if isinstance(rarity, bool) or not isinstance(rarity, int):
        raise TypeError(f"rarity must be an int, got {rarity!r}")
    if not MIN_RARITY <= rarity <= MAX_RARITY:
        raise ValueError(f"rarity must lie in {MIN_RARITY}-{MAX_RARITY}, got {rarity}")
    if not isinstance(entry.available, bool):
        raise TypeError(f"available must be a bool, got {entry.available!r}")


def _entry_matches(
    entry: CatalogEntry,
    needle: str | None,
    tier: RarityTier | None,
    available_only: bool,
) -> bool:
    _check_entry(entry)
    rarity = entry.rarity

    if needle:
        fields = (str(entry.satoshi), entry.category.label, entry.description)
        if not any(needle in field.lower() for field in fields):
            return False
    if tier is not None and not tier.contains(rarity):
        return False
    if available_only and not entry.available:
        return False
    return True


def filter_entries(
    entries: Iterable[CatalogEntry],
    search_text: str | None = None,
    tier: RarityTier | str | None = None,
    available_only: bool = False,
) -> list[CatalogEntry]:
    """Return the entries passing every active filter.

    Args:
        entries: Catalog entries, typically the output of ``reconcile``.
        search_text: Case-insensitive substring matched against the satoshi's
            decimal string, the category label, or the description.
        tier: Restrict to a rarity tier (a :class:`RarityTier` or its name).
        available_only: Keep only entries the caller holds.

    Empty filters are ignored. Entries whose fields cannot be read are dropped
    and the pass continues.
    """

    needle = search_text.strip().lower() if search_text else None
    resolved_tier = RarityTier.parse(tier) if tier else None

    results: list[CatalogEntry] = []
    for entry in entries:
        try:
            keep = _entry_matches(entry, needle, resolved_tier, available_only)
        except (AttributeError, TypeError, ValueError) as exc:
            logger.debug("Dropping malformed catalog entry %r: %s", entry, exc)
            continue
        if keep:
            results.append(entry)
    return results


def tier_counts(entries: Iterable[CatalogEntry]) -> dict[RarityTier, int]:
    """Count entries per tier; every tier is present, possibly with zero."""

    counts = {tier: 0 for tier in RarityTier}
    for entry in filter_entries(entries):
        tier = tier_for(entry.rarity)
        if tier is not None:
            counts[tier] += 1
    return counts


def find_entry(entries: Sequence[CatalogEntry], satoshi: int | str) -> CatalogEntry | None:
    """Return the entry for ``satoshi`` among ``entries``, if present."""

    wanted = str(satoshi).strip()
    for entry in filter_entries(entries):
        if str(entry.satoshi) == wanted:
            return entry
    return None
