"""
Precomputed score table over the whole guess universe.

table[g, s] is the score of guess index g against secret index s, encoded as
strikes * 4 + balls (so every code fits in 0..15). Built once with numpy
broadcasting; solvers then bucket candidates with array ops instead of
calling the scorer hundreds of thousands of times per turn.

Codes agree with packages.engine.score; tests check that on samples.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Dict, List, Tuple

import numpy as np

from packages.engine import all_secrets

NUM_CODES = 16


def encode(strikes: int, balls: int) -> int:
    return strikes * 4 + balls


@lru_cache(maxsize=1)
def score_table() -> Tuple[List[str], Dict[str, int], np.ndarray]:
    """Return (secrets, index_of, table) for all 720 secrets."""
    secrets = all_secrets()
    index_of = {s: i for i, s in enumerate(secrets)}
    digits = np.array([[int(ch) for ch in s] for s in secrets], dtype=np.int8)  # (720, 3)

    g = digits[:, None, :]  # guess   (720, 1, 3)
    s = digits[None, :, :]  # secret  (1, 720, 3)
    strikes = (g == s).sum(axis=-1)
    # digits are distinct, so "shared digits" counts each match once
    common = (g[..., :, None] == s[..., None, :]).sum(axis=(-1, -2))
    balls = common - strikes

    table = (strikes * 4 + balls).astype(np.int8)
    table.setflags(write=False)
    return secrets, index_of, table


def bucket_matrix(guesses: List[str], candidates: List[str]) -> np.ndarray:
    """
    counts[i, code] = how many candidates would answer guesses[i] with `code`.

    Shape (len(guesses), NUM_CODES); every row sums to len(candidates).
    """
    _, index_of, table = score_table()
    rows = np.array([index_of[g] for g in guesses], dtype=np.intp)
    cols = np.array([index_of[c] for c in candidates], dtype=np.intp)
    sub = table[np.ix_(rows, cols)]  # (G, C)
    return (sub[:, :, None] == np.arange(NUM_CODES)[None, None, :]).sum(axis=1)
