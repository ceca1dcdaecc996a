"""Ordinarinos rare-sat classification package."""

from .config import ConfigurationError, SelectorConfig, load_selector_config
from .holdings import HoldingsError, load_held_satoshis, parse_held_satoshis
from .rarity import (
    PRIORITY,
    CatalogEntry,
    Category,
    ClassifiedSat,
    InvalidInputError,
    RarityTier,
    build_catalog,
    classify,
    filter_entries,
    reconcile,
)

__all__ = [
    "Category",
    "ClassifiedSat",
    "CatalogEntry",
    "InvalidInputError",
    "PRIORITY",
    "RarityTier",
    "build_catalog",
    "classify",
    "filter_entries",
    "reconcile",
    "ConfigurationError",
    "SelectorConfig",
    "load_selector_config",
    "HoldingsError",
    "load_held_satoshis",
    "parse_held_satoshis",
]
