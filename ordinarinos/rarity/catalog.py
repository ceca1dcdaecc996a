"""Browsable catalog of rare-sat categories and wallet reconciliation.

The catalog holds one representative entry per rare category so the full
taxonomy can be shown before any wallet data exists. :func:`reconcile` then
flags which categories the caller actually holds. Both return fresh lists;
nothing here keeps state between calls.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from types import MappingProxyType
from typing import Any, Iterable, Mapping, Sequence

from .classifier import ClassifiedSat, classify
from .taxonomy import RARE_CATEGORIES, Category

logger = logging.getLogger(__name__)

# Fixed example satoshi per category; each satisfies its category's predicate.
REPRESENTATIVES: Mapping[Category, int] = MappingProxyType(
    {
        Category.FIRST: 21,
        Category.BLOCK9: 45_000_000_123,
        Category.BLOCK78: 390_000_012_345,
        Category.RODARMOR: 393_939,
        Category.PIZZA: 285_215_000_000_123,
        Category.ALPHA_MEGA: 1_000_000,
        Category.PALINDROME: 12_321,
        Category.SEQUENCE: 123_456,
        Category.REPEATING: 123_123,
        Category.PRIME: 10_007,
        Category.BLACK: 50_000,
        Category.EVIL: 10_100,
        Category.OMEGA: 6_999,
        Category.WHITE: 18_900,
        Category.BINARY: 10_010,
        Category.VINTAGE: 5_003,
        Category.ASCII: 65,
        Category.UNCOMMON: 100_007,
    }
)


@dataclass(frozen=True)
class CatalogEntry:
    """A classified satoshi plus its availability in the caller's holdings."""

    satoshi: int
    category: Category
    rarity: int
    description: str
    available: bool = False
    representative: bool = False

    @property
    def label(self) -> str:
        return self.category.label

    @classmethod
    def from_classified(
        cls, sat: ClassifiedSat, *, available: bool = False, representative: bool = False
    ) -> "CatalogEntry":
        return cls(
            satoshi=sat.satoshi,
            category=sat.category,
            rarity=sat.rarity,
            description=sat.description,
            available=available,
            representative=representative,
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the record handed to rendering and command-building layers."""

        return {
            "satoshi": str(self.satoshi),
            "category": self.category.label,
            "rarity": self.rarity,
            "description": self.description,
            "available": self.available,
        }


def _representative_entry(category: Category, satoshi: int) -> CatalogEntry:
    classified = classify(satoshi)
    if classified.category is not category:
        logger.debug(
            "Representative %d for %s classifies as %s",
            satoshi,
            category.label,
            classified.category.label,
        )
    return CatalogEntry(
        satoshi=satoshi,
        category=category,
        rarity=category.rarity,
        description=category.description,
        available=False,
        representative=True,
    )


def build_catalog() -> list[CatalogEntry]:
    """Return one unavailable representative entry per rare category."""

    return [_representative_entry(category, REPRESENTATIVES[category]) for category in RARE_CATEGORIES]


def held_categories(held_satoshis: Iterable[Any]) -> set[Category]:
    """Return the set of categories present among ``held_satoshis``."""

    return {classify(sat).category for sat in held_satoshis}


def reconcile(held_satoshis: Iterable[Any], catalog: Sequence[CatalogEntry]) -> list[CatalogEntry]:
    """Return a copy of ``catalog`` with holdings reflected in ``available``.

    Availability is decided per category: an entry is available when at least
    one held satoshi classifies into its category, no matter how many do.

    Raises:
        InvalidInputError: If a held value is not a valid satoshi number.
    """

    present = held_categories(held_satoshis)
    reconciled = [replace(entry, available=entry.category in present) for entry in catalog]
    logger.debug(
        "Reconciled %d catalog entries against %d held categories; %d available",
        len(reconciled),
        len(present),
        sum(entry.available for entry in reconciled),
    )
    return reconciled
