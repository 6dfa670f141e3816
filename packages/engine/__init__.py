from .results import (
    DuplicateDigit,
    GameOverError,
    GuessError,
    NonDigit,
    Result,
    ValidationError,
    WrongLength,
)
from .validation import validate_guess, is_well_formed, GUESS_LENGTH
from .scoring import ScoreResult, score
from .secret import Secret, generate_secret, all_secrets, secret_to_str, secret_from_str
from .game import GameState, Turn, Phase, start_game, reset_game, submit_guess, score_guess, game_phase
from .constraints import filter_candidates

__all__ = [
    "GuessError", "ValidationError", "WrongLength", "NonDigit", "DuplicateDigit", "GameOverError",
    "Result", "validate_guess", "is_well_formed", "GUESS_LENGTH",
    "ScoreResult", "score",
    "Secret", "generate_secret", "all_secrets", "secret_to_str", "secret_from_str",
    "GameState", "Turn", "Phase", "start_game", "reset_game", "submit_guess", "score_guess", "game_phase",
    "filter_candidates",
]
