"""
Baseball-style scoring (feedback) for a single (guess, secret) pair.

Conventions:
  - strike : guessed digit matches the secret's digit at the same position
  - ball   : guessed digit appears in the secret, but somewhere else
  - out    : neither (0 strikes, 0 balls)

Both guess and secret hold distinct digits, so a single pass is enough:
no multiplicity bookkeeping is needed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .validation import GUESS_LENGTH


@dataclass(frozen=True)
class ScoreResult:
    strikes: int
    balls: int

    @property
    def is_out(self) -> bool:
        return self.strikes == 0 and self.balls == 0

    @property
    def is_win(self) -> bool:
        return self.strikes == GUESS_LENGTH

    def key(self) -> str:
        """Compact pattern id, e.g. "1S2B"; handy as a bucket key or CSV cell."""
        return f"{self.strikes}S{self.balls}B"


def score(guess: str, secret: Sequence[int]) -> ScoreResult:
    """
    Compute strikes/balls for `guess` against `secret`.

    Preconditions:
      - len(guess) == len(secret) == 3

    Examples:
      score("321", (1, 2, 3)) -> ScoreResult(strikes=1, balls=2)
      score("123", (1, 2, 3)) -> ScoreResult(strikes=3, balls=0)
      score("456", (1, 2, 3)) -> ScoreResult(strikes=0, balls=0)
    """
    assert len(guess) == len(secret) == GUESS_LENGTH, "Guess and secret must both have 3 digits"

    strikes = 0
    balls = 0
    for i, ch in enumerate(guess):
        d = int(ch)
        if d == secret[i]:
            strikes += 1
        elif d in secret:
            balls += 1
    return ScoreResult(strikes, balls)
