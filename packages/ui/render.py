"""
Text rendering for engine values.

Everything the engine returns (errors, scores, states) is turned into
player-facing strings here, never inside the engine itself.
"""

from __future__ import annotations

from typing import Dict, List, Type

from packages.engine import (
    DuplicateDigit,
    GameOverError,
    GameState,
    GuessError,
    NonDigit,
    ScoreResult,
    WrongLength,
)
from .messages import DEFAULT_LANG, translate

# Error type -> message key; subclasses resolve through their MRO.
ERROR_KEYS: Dict[Type[GuessError], str] = {
    WrongLength: "alertThreeDigits",
    NonDigit: "alertNumbersOnly",
    DuplicateDigit: "alertNoDuplicates",
    GameOverError: "alertGameOver",
}


def error_message(error: GuessError, lang: str = DEFAULT_LANG) -> str:
    """Localized message for an engine error; falls back to str(error)."""
    for cls in type(error).__mro__:
        key = ERROR_KEYS.get(cls)
        if key:
            return translate(key, lang)
    return str(error)


def result_text(sr: ScoreResult, lang: str = DEFAULT_LANG) -> str:
    """
    "Out" for 0/0, otherwise strikes then balls, zero parts omitted.

    Examples (en):
      ScoreResult(1, 2) -> "1S 2B"
      ScoreResult(0, 1) -> "1B"
      ScoreResult(0, 0) -> "Out"
    """
    if sr.is_out:
        return translate("out", lang)

    parts: List[str] = []
    if sr.strikes > 0:
        parts.append(f"{sr.strikes}{translate('strike', lang)}")
    if sr.balls > 0:
        parts.append(f"{sr.balls}{translate('ball', lang)}")
    return " ".join(parts)


def attempts_text(n: int, lang: str = DEFAULT_LANG) -> str:
    return translate("attemptsUnit", lang).format(n=n)


def history_lines(state: GameState, lang: str = DEFAULT_LANG) -> List[str]:
    """One "<guess>  <result>" line per attempt, newest first."""
    return [f"{g}  {result_text(sr, lang)}" for g, sr in reversed(state.history)]


def game_over_text(state: GameState, lang: str = DEFAULT_LANG) -> str:
    """Win banner: title, message, attempt count. Empty while the game is running."""
    if not state.is_over:
        return ""
    return "\n".join([
        translate("gameOverTitle", lang),
        translate("gameOverMsg", lang),
        f"{translate('gameOverAttempts', lang)} {attempts_text(state.attempt_count, lang)}",
    ])


def share_text(state: GameState, lang: str = DEFAULT_LANG, url: str = "") -> str:
    """Brag line for sharing a finished game, optionally followed by a link."""
    text = f"{translate('shareText', lang)} {attempts_text(state.attempt_count, lang)}!"
    return f"{text}\n{url}" if url else text
