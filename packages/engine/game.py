"""
Game state and its transitions.

There is no module-level game: the caller owns a GameState and passes it to
(and receives it back from) every operation, so any number of independent
games can run side by side.

State machine:
  NOT_STARTED --start_game--> PLAYING
  PLAYING --submit_guess (strikes < 3)--> PLAYING
  PLAYING --submit_guess (strikes == 3)--> WON
  WON --reset_game/start_game--> PLAYING
  submit_guess in WON fails with GameOverError and changes nothing.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional, Tuple

from .results import GameOverError, Result
from .scoring import ScoreResult, score
from .secret import Secret, generate_secret
from .validation import GUESS_LENGTH, is_well_formed, validate_guess

History = Tuple[Tuple[str, ScoreResult], ...]  # (guess, score), oldest first


class Phase(str, Enum):
    NOT_STARTED = "not_started"
    PLAYING = "playing"
    WON = "won"


@dataclass(frozen=True)
class GameState:
    secret: Secret
    attempt_count: int = 0
    is_over: bool = False
    history: History = field(default=())

    def __post_init__(self):
        s = self.secret
        if (len(s) != GUESS_LENGTH or len(set(s)) != GUESS_LENGTH
                or not all(isinstance(d, int) and 0 <= d <= 9 for d in s)):
            raise ValueError(f"secret must be {GUESS_LENGTH} distinct digits 0-9; got {s!r}")


@dataclass(frozen=True)
class Turn:
    """What a successful submit_guess hands back."""
    state: GameState
    score: ScoreResult


def start_game(rng: Optional[random.Random] = None) -> GameState:
    """Fresh game: new secret, zero attempts, not over."""
    return GameState(secret=generate_secret(rng))


def reset_game(rng: Optional[random.Random] = None) -> GameState:
    """Discard whatever came before and start over (any confirmation is the UI's job)."""
    return start_game(rng)


def game_phase(state: Optional[GameState]) -> Phase:
    if state is None:
        return Phase.NOT_STARTED
    return Phase.WON if state.is_over else Phase.PLAYING


def score_guess(guess: str, state: GameState) -> ScoreResult:
    """
    Score an already-validated guess against the game's secret. Pure.

    Calling this on a finished game or with an unvalidated guess is a bug in
    the caller, not a player error.
    """
    assert not state.is_over, "score_guess called on a finished game"
    assert is_well_formed(guess), f"score_guess called with unvalidated guess {guess!r}"
    return score(guess, state.secret)


def submit_guess(state: GameState, raw: str) -> Result[Turn]:
    """
    Validate, count and score one attempt.

    Returns:
      Result with a Turn (new state + score), or an error:
        - GameOverError when the game is already won (input is not even looked at)
        - WrongLength / NonDigit / DuplicateDigit from validation
      On any error the given state is untouched and no attempt is counted.
    """
    if state.is_over:
        return Result.failure(GameOverError("the game is already over; reset to play again"))

    checked = validate_guess(raw)
    if not checked.ok:
        return Result.failure(checked.error)  # type: ignore[arg-type]

    guess = checked.unwrap()
    sr = score_guess(guess, state)
    new_state = replace(
        state,
        attempt_count=state.attempt_count + 1,
        is_over=sr.is_win,
        history=state.history + ((guess, sr),),
    )
    return Result.success(Turn(new_state, sr))
