import pytest
from packages.engine import (
    DuplicateDigit,
    GameOverError,
    GameState,
    NonDigit,
    ScoreResult,
    WrongLength,
    submit_guess,
)
from packages.ui import (
    MESSAGES,
    error_message,
    game_over_text,
    history_lines,
    result_text,
    share_text,
    translate,
)


def test_languages_share_the_same_keys():
    assert set(MESSAGES["ko"]) == set(MESSAGES["en"])


def test_translate_falls_back_to_key():
    assert translate("out", "en") == "Out"
    assert translate("noSuchKey", "en") == "noSuchKey"


def test_translate_unknown_language():
    with pytest.raises(ValueError):
        translate("out", "fr")


@pytest.mark.parametrize("sr,expected", [
    (ScoreResult(0, 0), "Out"),
    (ScoreResult(1, 2), "1S 2B"),
    (ScoreResult(0, 1), "1B"),
    (ScoreResult(2, 0), "2S"),
    (ScoreResult(3, 0), "3S"),
])
def test_result_text_en(sr, expected):
    assert result_text(sr, "en") == expected


def test_result_text_ko_out():
    assert result_text(ScoreResult(0, 0), "ko") == "아웃"


@pytest.mark.parametrize("error,key", [
    (WrongLength(), "alertThreeDigits"),
    (NonDigit(), "alertNumbersOnly"),
    (DuplicateDigit(), "alertNoDuplicates"),
    (GameOverError(), "alertGameOver"),
])
def test_error_message_per_type(error, key):
    assert error_message(error, "en") == MESSAGES["en"][key]
    assert error_message(error, "ko") == MESSAGES["ko"][key]


def test_texts_for_finished_game():
    state = GameState(secret=(1, 2, 3))
    state = submit_guess(state, "321").value.state
    assert game_over_text(state, "en") == ""

    state = submit_guess(state, "123").value.state
    banner = game_over_text(state, "en")
    assert "Congratulations" in banner and "2 attempts" in banner

    assert share_text(state, "en") == "I cleared Number Baseball in 2 attempts!"
    assert share_text(state, "ko", url="https://example.test/").endswith("2회!\nhttps://example.test/")
    assert history_lines(state, "en") == ["123  3S", "321  1S 2B"]
