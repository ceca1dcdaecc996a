from __future__ import annotations

import pytest

from ordinarinos.rarity import predicates
from ordinarinos.rarity.classifier import (
    PRIORITY,
    InvalidInputError,
    Rule,
    classify,
    first_match,
    matching_categories,
    validate_satoshi,
)
from ordinarinos.rarity.taxonomy import RARITY, Category


def _without(*categories: Category) -> list[Rule]:
    return [rule for rule in PRIORITY if rule.category not in categories]


def test_priority_order_is_documented_order() -> None:
    assert [rule.category for rule in PRIORITY] == [
        Category.FIRST,
        Category.BLOCK9,
        Category.BLOCK78,
        Category.RODARMOR,
        Category.PIZZA,
        Category.ALPHA_MEGA,
        Category.PALINDROME,
        Category.SEQUENCE,
        Category.REPEATING,
        Category.PRIME,
        Category.BLACK,
        Category.EVIL,
        Category.OMEGA,
        Category.WHITE,
        Category.BINARY,
        Category.VINTAGE,
        Category.ASCII,
        Category.UNCOMMON,
    ]


def test_common_is_fallback_not_a_rule() -> None:
    assert Category.COMMON not in {rule.category for rule in PRIORITY}
    assert first_match(123, []) is Category.COMMON


def test_classify_first_block() -> None:
    sat = classify(21)
    assert sat.category is Category.FIRST
    assert sat.rarity == 10
    assert sat.satoshi == 21
    assert sat.label == "First Block"


def test_classify_seven_takes_earliest_matching_rule() -> None:
    # 7 is in the first-block range, a one-digit palindrome/sequence, and
    # satisfies the ASCII, VINTAGE and UNCOMMON predicates.
    matches = matching_categories(7)
    assert {Category.ASCII, Category.VINTAGE, Category.UNCOMMON} <= set(matches)
    assert classify(7).category is matches[0] is Category.FIRST

    structural = (
        Category.FIRST,
        Category.PALINDROME,
        Category.SEQUENCE,
    )
    assert first_match(7, _without(*structural)) is Category.VINTAGE
    assert first_match(7, _without(*structural, Category.VINTAGE)) is Category.ASCII
    assert first_match(7, _without(*structural, Category.VINTAGE, Category.ASCII)) is Category.UNCOMMON


def test_palindrome_beats_sequence() -> None:
    # Only single digits are both palindromes and sequences.
    assert predicates.is_palindrome(5) and predicates.is_sequence(5)
    assert first_match(5, _without(Category.FIRST)) is Category.PALINDROME
    assert first_match(5, _without(Category.FIRST, Category.PALINDROME)) is Category.SEQUENCE


@pytest.mark.parametrize(
    "satoshi, expected",
    [
        (45_000_000_123, Category.BLOCK9),
        (390_000_012_345, Category.BLOCK78),
        (393_939, Category.RODARMOR),
        (285_215_000_000_123, Category.PIZZA),
        (999_999, Category.ALPHA_MEGA),
        (12_321, Category.PALINDROME),
        (123_456, Category.SEQUENCE),
        (123_123, Category.REPEATING),
        (10_007, Category.PRIME),
        (50_000, Category.BLACK),
        (10_100, Category.EVIL),
        (6_999, Category.OMEGA),
        (18_900, Category.WHITE),
        (10_010, Category.BINARY),
        (5_003, Category.VINTAGE),
        (100_007, Category.UNCOMMON),
    ],
)
def test_classify_categories(satoshi: int, expected: Category) -> None:
    sat = classify(satoshi)
    assert sat.category is expected
    assert sat.rarity == RARITY[expected]
    assert sat.description == expected.description


def test_block_range_wins_over_structure() -> None:
    # A palindrome inside block 9 is still a block 9 sat.
    assert predicates.is_palindrome(45_000_000_054)
    assert classify(45_000_000_054).category is Category.BLOCK9


def test_small_prime_is_not_prime_category() -> None:
    # 9973 is prime but below the floor; it falls through to VINTAGE.
    assert classify(9_973).category is Category.VINTAGE


@pytest.mark.parametrize("satoshi", [1_000_003, 2_099_999_997_689_999, 10**18 + 7])
def test_classify_is_total_and_deterministic(satoshi: int) -> None:
    first = classify(satoshi)
    second = classify(satoshi)
    assert first == second
    assert 1 <= first.rarity <= 10
    assert isinstance(first.category, Category)


def test_classify_returns_common_when_nothing_matches() -> None:
    # Odd popcount, no digit pattern, past every size range.
    sat = classify(1_000_006)
    assert predicates.popcount(1_000_006) % 2 == 1
    assert sat.category is Category.COMMON
    assert sat.rarity == 1


def test_classify_accepts_decimal_strings() -> None:
    assert classify(" 21 ").satoshi == 21
    assert classify("12321").category is Category.PALINDROME


@pytest.mark.parametrize("value", [-1, "-5", "12a", "", "1.5", 1.0, True, None, "٣"])
def test_validate_satoshi_rejects_invalid_input(value: object) -> None:
    with pytest.raises(InvalidInputError):
        validate_satoshi(value)


def test_invalid_input_error_is_value_error() -> None:
    with pytest.raises(ValueError):
        classify(-21)
