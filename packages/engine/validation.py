"""
Guess validation.

This module answers the question: "Is this input an acceptable guess?"
A guess is valid iff, checked in this order:
  1) it has exactly 3 characters          -> else WrongLength
  2) every character is a digit 0-9       -> else NonDigit
  3) no digit appears twice               -> else DuplicateDigit

The order matters to players: "12" should be reported as too short, not as
containing a bad character, and "1a1" as a bad character, not a duplicate.
"""

from .results import DuplicateDigit, NonDigit, Result, WrongLength

GUESS_LENGTH = 3
DIGITS = "0123456789"


def is_well_formed(guess: str) -> bool:
    """True iff `guess` already satisfies every validation rule."""
    return (
        isinstance(guess, str)
        and len(guess) == GUESS_LENGTH
        and all(ch in DIGITS for ch in guess)
        and len(set(guess)) == GUESS_LENGTH
    )


def validate_guess(raw: str) -> Result[str]:
    """
    Validate one raw input string.

    Returns:
      Result whose value is the guess string on success, or whose error is
      a WrongLength / NonDigit / DuplicateDigit instance.

    Examples:
      validate_guess("12").error   -> WrongLength
      validate_guess("1a2").error  -> NonDigit
      validate_guess("112").error  -> DuplicateDigit
      validate_guess("123").value  -> "123"
    """
    if len(raw) != GUESS_LENGTH:
        return Result.failure(WrongLength(f"expected {GUESS_LENGTH} digits, got {len(raw)} characters"))

    # str.isdigit() also accepts things like "²"; only ASCII 0-9 count here
    if any(ch not in DIGITS for ch in raw):
        return Result.failure(NonDigit(f"only digits 0-9 are allowed: {raw!r}"))

    if len(set(raw)) != GUESS_LENGTH:
        return Result.failure(DuplicateDigit(f"digits must not repeat: {raw!r}"))

    return Result.success(raw)
