"""Priority-ordered classification of satoshi ordinal numbers.

The cascade is plain data: :data:`PRIORITY` lists ``(category, predicate)``
rules from rarest to most common and :func:`first_match` walks it once.
A satoshi satisfying several predicates always takes the earliest rule;
anything that matches nothing is :attr:`Category.COMMON`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Sequence

from . import predicates
from .taxonomy import Category

logger = logging.getLogger(__name__)

# Upper bound of the ordinal space (total supply in sats). Informational only;
# classification is defined for every non-negative integer.
MAX_SATOSHI = 2_099_999_997_690_000


class InvalidInputError(ValueError):
    """Raised when a value cannot be interpreted as a satoshi number."""


@dataclass(frozen=True)
class Rule:
    """One step of the classification cascade."""

    category: Category
    predicate: Callable[[int], bool]

    def matches(self, satoshi: int) -> bool:
        return self.predicate(satoshi)


PRIORITY: tuple[Rule, ...] = (
    Rule(Category.FIRST, predicates.is_first_block),
    Rule(Category.BLOCK9, predicates.is_block_9),
    Rule(Category.BLOCK78, predicates.is_block_78),
    Rule(Category.RODARMOR, predicates.is_rodarmor),
    Rule(Category.PIZZA, predicates.is_pizza),
    Rule(Category.ALPHA_MEGA, predicates.is_alpha_mega),
    Rule(Category.PALINDROME, predicates.is_palindrome),
    Rule(Category.SEQUENCE, predicates.is_sequence),
    Rule(Category.REPEATING, predicates.is_repeating),
    Rule(Category.PRIME, predicates.is_guarded_prime),
    Rule(Category.BLACK, predicates.is_black),
    Rule(Category.EVIL, predicates.is_evil),
    Rule(Category.OMEGA, predicates.is_omega),
    Rule(Category.WHITE, predicates.is_white),
    Rule(Category.BINARY, predicates.is_binary),
    Rule(Category.VINTAGE, predicates.is_vintage),
    Rule(Category.ASCII, predicates.is_ascii),
    Rule(Category.UNCOMMON, predicates.is_uncommon),
)


@dataclass(frozen=True)
class ClassifiedSat:
    """Classification result for a single satoshi."""

    satoshi: int
    category: Category
    rarity: int
    description: str

    @property
    def label(self) -> str:
        return self.category.label


def validate_satoshi(value: Any) -> int:
    """Return ``value`` as a satoshi number or raise :class:`InvalidInputError`.

    Accepts non-negative ``int`` values and decimal strings. Booleans, floats,
    negatives and anything non-numeric are rejected.
    """

    if isinstance(value, bool):
        raise InvalidInputError(f"Satoshi must be an integer, not {value!r}")
    if isinstance(value, int):
        satoshi = value
    elif isinstance(value, str):
        text = value.strip()
        if not text.isdigit() or not text.isascii():
            raise InvalidInputError(f"Satoshi must be a non-negative decimal integer: {value!r}")
        satoshi = int(text)
    else:
        raise InvalidInputError(
            f"Satoshi must be an integer or decimal string, got {type(value).__name__}"
        )
    if satoshi < 0:
        raise InvalidInputError(f"Satoshi numbers are non-negative: {satoshi}")
    return satoshi


def first_match(satoshi: int, rules: Sequence[Rule]) -> Category:
    """Return the category of the first rule matching ``satoshi``."""

    for rule in rules:
        if rule.matches(satoshi):
            return rule.category
    return Category.COMMON


def matching_categories(satoshi: Any, rules: Sequence[Rule] = PRIORITY) -> list[Category]:
    """Return every category whose rule matches, in priority order."""

    value = validate_satoshi(satoshi)
    return [rule.category for rule in rules if rule.matches(value)]


def classify(satoshi: Any, rules: Sequence[Rule] = PRIORITY) -> ClassifiedSat:
    """Classify ``satoshi`` into exactly one category.

    Args:
        satoshi: A non-negative integer or its decimal string.
        rules: Cascade to evaluate; defaults to :data:`PRIORITY`.

    Returns:
        A :class:`ClassifiedSat` with the category's fixed rarity and
        description.

    Raises:
        InvalidInputError: If ``satoshi`` is negative or not an integer.
    """

    value = validate_satoshi(satoshi)
    category = first_match(value, rules)
    logger.debug("Classified sat %d as %s", value, category.label)
    return ClassifiedSat(
        satoshi=value,
        category=category,
        rarity=category.rarity,
        description=category.description,
    )
