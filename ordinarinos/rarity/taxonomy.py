"""Closed taxonomy of rare-sat categories.

Every category carries a fixed rarity score (1-10, 10 rarest) and a short
description. Scores are a pure lookup on the category and are never assigned
independently of it.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping


class Category(Enum):
    """Rare-sat categories; the value is the display label."""

    FIRST = "First Block"
    BLOCK9 = "Block 9"
    BLOCK78 = "Block 78"
    RODARMOR = "Rodarmor"
    PIZZA = "Pizza"
    ALPHA_MEGA = "Alpha-Mega"
    PALINDROME = "Palindrome"
    SEQUENCE = "Sequence"
    REPEATING = "Repeating"
    PRIME = "Prime"
    BLACK = "Black"
    EVIL = "Evil"
    OMEGA = "Omega"
    WHITE = "White"
    BINARY = "Binary"
    VINTAGE = "Vintage"
    ASCII = "ASCII"
    UNCOMMON = "Uncommon"
    COMMON = "Common"

    @property
    def label(self) -> str:
        return self.value

    @property
    def rarity(self) -> int:
        return RARITY[self]

    @property
    def description(self) -> str:
        return DESCRIPTIONS[self]


RARITY: Mapping[Category, int] = MappingProxyType(
    {
        Category.FIRST: 10,
        Category.BLOCK9: 9,
        Category.BLOCK78: 9,
        Category.RODARMOR: 9,
        Category.PIZZA: 8,
        Category.ALPHA_MEGA: 8,
        Category.PALINDROME: 7,
        Category.SEQUENCE: 7,
        Category.REPEATING: 6,
        Category.PRIME: 6,
        Category.BLACK: 6,
        Category.EVIL: 5,
        Category.OMEGA: 5,
        Category.WHITE: 5,
        Category.BINARY: 5,
        Category.VINTAGE: 4,
        Category.ASCII: 4,
        Category.UNCOMMON: 3,
        Category.COMMON: 1,
    }
)

DESCRIPTIONS: Mapping[Category, str] = MappingProxyType(
    {
        Category.FIRST: "A satoshi from the genesis block, the very first Bitcoin block.",
        Category.BLOCK9: "A satoshi from Block 9, the first block that sent Bitcoin to another person.",
        Category.BLOCK78: "A satoshi from Block 78, which contained a special message from Satoshi Nakamoto.",
        Category.RODARMOR: "A special satoshi named after Casey Rodarmor, creator of Ordinals.",
        Category.PIZZA: "A satoshi from the famous Bitcoin pizza transaction.",
        Category.ALPHA_MEGA: "An Alpha or Omega satoshi - the first or last in a significant range.",
        Category.PALINDROME: "A palindrome satoshi that reads the same forwards and backwards.",
        Category.SEQUENCE: "A satoshi with sequential digits (ascending or descending).",
        Category.REPEATING: "A satoshi with repeating digits pattern.",
        Category.PRIME: "A prime number satoshi - divisible only by 1 and itself.",
        Category.BLACK: "A 'black' satoshi with special cycle properties.",
        Category.EVIL: "An 'evil' satoshi with an even number of 1s in its binary representation.",
        Category.OMEGA: "An Omega satoshi at the end of a numerical range.",
        Category.WHITE: "A 'white' satoshi with special numerical properties.",
        Category.BINARY: "A satoshi whose decimal digits are only zeros and ones.",
        Category.VINTAGE: "One of the first 100,000 satoshis ever created.",
        Category.ASCII: "A satoshi with an ASCII value (0-127).",
        Category.UNCOMMON: "One of the first million satoshis.",
        Category.COMMON: "A regular satoshi with no special properties.",
    }
)

# Categories shown in the browsable catalog; COMMON is "not rare".
RARE_CATEGORIES: tuple[Category, ...] = tuple(c for c in Category if c is not Category.COMMON)


def category_from_label(label: str) -> Category:
    """Return the category for a display label or enum name (case-insensitive)."""

    needle = label.strip().lower()
    for category in Category:
        if needle in {category.value.lower(), category.name.lower()}:
            return category
    raise KeyError(f"Unknown rare-sat category: {label!r}")
