"""
Candidate filtering given game history.

Given:
  - a pool of candidate secrets (usually `all_secrets()`)
  - a history of (guess, ScoreResult) pairs

Return:
  - candidates that would have produced exactly those scores.

Solvers use this to keep every future guess consistent with the past.
"""

from typing import Iterable, List, Tuple

from .scoring import ScoreResult, score
from .secret import secret_from_str
from .validation import is_well_formed

History = Iterable[Tuple[str, ScoreResult]]  # (guess, score)


def filter_candidates(candidates: Iterable[str], history: History) -> List[str]:
    """
    Keep only well-formed candidates consistent with every (guess, score) pair.

    Returns:
      List[str] in the same order as `candidates`.
    """
    history = list(history)
    out: List[str] = []

    for c in candidates:
        if not is_well_formed(c):
            continue

        secret = secret_from_str(c)
        if all(score(g, secret) == sr for g, sr in history):
            out.append(c)

    return out
