"""Rare-sat classification, catalog reconciliation, and filtering.

Everything in this subpackage is a pure, local heuristic: the ranges and
moduli used to label sats are documented constants, not chain data. Which
sats a wallet holds is supplied by the caller.
"""

from ordinarinos.rarity.catalog import (
    REPRESENTATIVES,
    CatalogEntry,
    build_catalog,
    held_categories,
    reconcile,
)
from ordinarinos.rarity.classifier import (
    PRIORITY,
    ClassifiedSat,
    InvalidInputError,
    Rule,
    classify,
    first_match,
    matching_categories,
    validate_satoshi,
)
from ordinarinos.rarity.query import (
    RarityTier,
    filter_entries,
    find_entry,
    rarity_label,
    tier_counts,
    tier_for,
)
from ordinarinos.rarity.taxonomy import RARE_CATEGORIES, Category, category_from_label

__all__ = [
    "Category",
    "RARE_CATEGORIES",
    "category_from_label",
    "Rule",
    "PRIORITY",
    "ClassifiedSat",
    "InvalidInputError",
    "classify",
    "first_match",
    "matching_categories",
    "validate_satoshi",
    "CatalogEntry",
    "REPRESENTATIVES",
    "build_catalog",
    "held_categories",
    "reconcile",
    "RarityTier",
    "filter_entries",
    "find_entry",
    "rarity_label",
    "tier_counts",
    "tier_for",
]
