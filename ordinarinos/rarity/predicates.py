"""Numeric and structural predicates over satoshi ordinal numbers.

Each predicate takes a pre-validated non-negative ``int`` and answers a single
question about it. They share no state and never raise for valid input; input
validation happens at the classifier boundary.

The block ranges below are literal ordinal ranges derived from the 50 BTC
subsidy of the early chain (block ``h`` mints sats ``h * 5e9`` up to, but not
including, ``(h + 1) * 5e9``). The first-block range covers only the first
5,000 sats rather than the whole genesis subsidy.
"""

from __future__ import annotations

SATS_PER_EARLY_BLOCK = 5_000_000_000

# Half-open ``(start, end)`` ranges.
FIRST_BLOCK_RANGE: tuple[int, int] = (0, 5_000)
BLOCK_9_RANGE: tuple[int, int] = (9 * SATS_PER_EARLY_BLOCK, 10 * SATS_PER_EARLY_BLOCK)
BLOCK_78_RANGE: tuple[int, int] = (78 * SATS_PER_EARLY_BLOCK, 79 * SATS_PER_EARLY_BLOCK)
# Block 57043 carried the 10,000 BTC pizza purchase.
PIZZA_BLOCK_HEIGHT = 57_043
PIZZA_RANGE: tuple[int, int] = (
    PIZZA_BLOCK_HEIGHT * SATS_PER_EARLY_BLOCK,
    (PIZZA_BLOCK_HEIGHT + 1) * SATS_PER_EARLY_BLOCK,
)

RODARMOR_MARKER = "393939"
ALPHA_MEGA_BOUNDARIES: frozenset[int] = frozenset({999_999, 1_000_000})

ASCII_MAX = 127
VINTAGE_LIMIT = 100_000
UNCOMMON_LIMIT = 1_000_000

BLACK_MODULUS = 10_000
WHITE_MODULUS = 2_100
OMEGA_MODULUS = 1_000
OMEGA_REMAINDER = 999

# Primes at or below this value are too common to count as rare.
PRIME_FLOOR = 10_000


def _in_range(n: int, bounds: tuple[int, int]) -> bool:
    start, end = bounds
    return start <= n < end


def is_first_block(n: int) -> bool:
    return _in_range(n, FIRST_BLOCK_RANGE)


def is_block_9(n: int) -> bool:
    return _in_range(n, BLOCK_9_RANGE)


def is_block_78(n: int) -> bool:
    return _in_range(n, BLOCK_78_RANGE)


def is_pizza(n: int) -> bool:
    return _in_range(n, PIZZA_RANGE)


def is_rodarmor(n: int) -> bool:
    return RODARMOR_MARKER in str(n)


def is_alpha_mega(n: int) -> bool:
    return n in ALPHA_MEGA_BOUNDARIES


def is_palindrome(n: int) -> bool:
    digits = str(n)
    return digits == digits[::-1]


def is_sequence(n: int) -> bool:
    """Return ``True`` when every digit steps by exactly +1, or every digit by -1."""

    digits = [int(d) for d in str(n)]
    steps = {b - a for a, b in zip(digits, digits[1:])}
    return steps <= {1} or steps <= {-1}


def is_repeating(n: int) -> bool:
    """Return ``True`` when the digit string is a proper prefix repeated whole.

    ``123123`` and ``4444`` qualify; ``12121`` does not because no period
    divides its length.
    """

    digits = str(n)
    length = len(digits)
    for period in range(1, length // 2 + 1):
        if length % period:
            continue
        if digits[:period] * (length // period) == digits:
            return True
    return False


def is_prime(n: int) -> bool:
    """Trial division using 6k +/- 1 stepping."""

    if n <= 1:
        return False
    if n <= 3:
        return True
    if n % 2 == 0 or n % 3 == 0:
        return False
    i = 5
    while i * i <= n:
        if n % i == 0 or n % (i + 2) == 0:
            return False
        i += 6
    return True


def is_guarded_prime(n: int) -> bool:
    """Prime above :data:`PRIME_FLOOR`; the form the classifier counts."""

    return n > PRIME_FLOOR and is_prime(n)


def popcount(n: int) -> int:
    return bin(n).count("1")


def is_evil(n: int) -> bool:
    return popcount(n) % 2 == 0


def is_binary(n: int) -> bool:
    return set(str(n)) <= {"0", "1"}


def is_ascii(n: int) -> bool:
    # Every ASCII value is also FIRST and VINTAGE, both earlier in the
    # priority order, so no satoshi classifies as ASCII.
    return 0 <= n <= ASCII_MAX


def is_vintage(n: int) -> bool:
    return n < VINTAGE_LIMIT


def is_uncommon(n: int) -> bool:
    return n < UNCOMMON_LIMIT


def is_black(n: int) -> bool:
    return n % BLACK_MODULUS == 0


def is_white(n: int) -> bool:
    return n % WHITE_MODULUS == 0


def is_omega(n: int) -> bool:
    return n % OMEGA_MODULUS == OMEGA_REMAINDER
