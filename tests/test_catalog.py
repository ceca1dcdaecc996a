from __future__ import annotations

import pytest

from ordinarinos.rarity import predicates
from ordinarinos.rarity.catalog import REPRESENTATIVES, CatalogEntry, build_catalog, held_categories, reconcile
from ordinarinos.rarity.classifier import InvalidInputError, classify
from ordinarinos.rarity.taxonomy import RARE_CATEGORIES, Category, category_from_label


def test_catalog_has_one_unavailable_entry_per_rare_category() -> None:
    catalog = build_catalog()

    assert [entry.category for entry in catalog] == list(RARE_CATEGORIES)
    assert Category.COMMON not in {entry.category for entry in catalog}
    assert all(not entry.available for entry in catalog)
    assert all(entry.representative for entry in catalog)
    assert all(entry.rarity == entry.category.rarity for entry in catalog)


def test_representatives_classify_to_their_category() -> None:
    for category, satoshi in REPRESENTATIVES.items():
        if category is Category.ASCII:
            # Every ASCII value is also in the first-block range.
            assert predicates.is_ascii(satoshi)
            continue
        assert classify(satoshi).category is category, category


def test_reconcile_empty_holdings_marks_nothing_available() -> None:
    reconciled = reconcile([], build_catalog())
    assert len(reconciled) == len(RARE_CATEGORIES)
    assert not any(entry.available for entry in reconciled)


def test_reconcile_block9_holding_marks_only_block9() -> None:
    catalog = build_catalog()

    reconciled = reconcile([45_123_456_789, 1_000_006], catalog)

    available = [entry.category for entry in reconciled if entry.available]
    assert available == [Category.BLOCK9]


def test_reconcile_is_category_level() -> None:
    # Two different palindromes still yield one available representative.
    reconciled = reconcile([12_321, 45_654, "45654"], build_catalog())

    available = [entry for entry in reconciled if entry.available]
    assert len(available) == 1
    assert available[0].category is Category.PALINDROME
    assert available[0].satoshi == REPRESENTATIVES[Category.PALINDROME]


def test_reconcile_does_not_mutate_inputs() -> None:
    catalog = build_catalog()
    held = [21, 50_000]
    snapshot = list(catalog)

    reconciled = reconcile(held, catalog)

    assert reconciled is not catalog
    assert catalog == snapshot
    assert held == [21, 50_000]
    assert all(not entry.available for entry in catalog)
    assert {entry.category for entry in reconciled if entry.available} == {Category.FIRST, Category.BLACK}


def test_reconcile_resets_stale_availability() -> None:
    first = reconcile([21], build_catalog())
    second = reconcile([50_000], first)

    assert {entry.category for entry in second if entry.available} == {Category.BLACK}


def test_reconcile_rejects_invalid_holdings() -> None:
    with pytest.raises(InvalidInputError):
        reconcile([21, -3], build_catalog())


def test_held_categories_collects_present_categories() -> None:
    assert held_categories([21, 22, 1_000_006]) == {Category.FIRST, Category.COMMON}


def test_entry_to_dict_uses_wire_shape() -> None:
    entry = CatalogEntry.from_classified(classify(10_007), available=True)

    assert entry.to_dict() == {
        "satoshi": "10007",
        "category": "Prime",
        "rarity": 6,
        "description": Category.PRIME.description,
        "available": True,
    }


def test_category_from_label_accepts_labels_and_names() -> None:
    assert category_from_label("first block") is Category.FIRST
    assert category_from_label("ALPHA_MEGA") is Category.ALPHA_MEGA
    with pytest.raises(KeyError):
        category_from_label("Mythic")
