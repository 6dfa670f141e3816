"""
Secret generation and the universe of possible secrets.
"""

from __future__ import annotations

import random
from itertools import permutations
from typing import List, Optional, Tuple

from .validation import DIGITS, GUESS_LENGTH

Secret = Tuple[int, ...]

# Upper bound on digit draws for one secret. Collecting 3 distinct digits out
# of 10 takes ~3.4 draws on average; hitting this means the RNG is broken.
MAX_DRAWS = 1000


def generate_secret(rng: Optional[random.Random] = None) -> Secret:
    """
    Draw uniform digits 0-9, keeping each only if it is new, until 3 are collected.

    Args:
      rng: optional seeded RNG for reproducible games (defaults to `random`)

    Raises:
      RuntimeError if MAX_DRAWS draws did not produce 3 distinct digits.
    """
    rng = rng or random.Random()
    digits: List[int] = []
    for _ in range(MAX_DRAWS):
        d = rng.randrange(10)
        if d not in digits:
            digits.append(d)
            if len(digits) == GUESS_LENGTH:
                return tuple(digits)
    raise RuntimeError(f"could not draw {GUESS_LENGTH} distinct digits in {MAX_DRAWS} draws")


def secret_to_str(secret: Secret) -> str:
    return "".join(str(d) for d in secret)


def secret_from_str(s: str) -> Secret:
    """Parse "123" -> (1, 2, 3). Caller is expected to pass a well-formed guess."""
    return tuple(int(ch) for ch in s)


def all_secrets() -> List[str]:
    """All 720 possible secrets as strings, in lexicographic order."""
    return ["".join(p) for p in permutations(DIGITS, GUESS_LENGTH)]
