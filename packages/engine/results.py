"""
Error taxonomy and the Result value returned by the engine.

The engine never raises these for user mistakes; it hands them back inside
a Result so the caller (CLI, harness, a web view...) decides how to show them.
They are still Exception subclasses so `Result.unwrap()` can raise them when
a caller prefers exceptions.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class GuessError(Exception):
    """Base class for every recoverable, user-facing guess error."""


class ValidationError(GuessError):
    """The raw input is not an acceptable guess."""


class WrongLength(ValidationError):
    """Input length is not exactly 3."""


class NonDigit(ValidationError):
    """Input contains something other than 0-9."""


class DuplicateDigit(ValidationError):
    """Input repeats a digit."""


class GameOverError(GuessError):
    """A guess was submitted after the game was already won."""


@dataclass(frozen=True)
class Result(Generic[T]):
    """Either a value or an error, never both."""
    value: Optional[T] = None
    error: Optional[GuessError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: GuessError) -> "Result[T]":
        return cls(error=error)
