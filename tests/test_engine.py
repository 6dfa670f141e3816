import random

import pytest
from packages.engine import (
    DuplicateDigit,
    NonDigit,
    ScoreResult,
    WrongLength,
    all_secrets,
    filter_candidates,
    generate_secret,
    score,
    secret_from_str,
    validate_guess,
)
from packages.engine import secret as secret_mod


# --- validation: each rule and the order they are checked in ---
@pytest.mark.parametrize("raw,error", [
    ("12", WrongLength),
    ("", WrongLength),
    ("1234", WrongLength),
    ("ab", WrongLength),      # too short wins over non-digit
    ("1a2", NonDigit),
    ("1 2", NonDigit),
    ("-12", NonDigit),
    ("1a1", NonDigit),        # non-digit wins over duplicate
    ("١٢٣", NonDigit),        # non-ASCII digits are rejected
    ("112", DuplicateDigit),
    ("000", DuplicateDigit),
    ("121", DuplicateDigit),
])
def test_validate_guess_errors(raw, error):
    res = validate_guess(raw)
    assert not res.ok
    assert type(res.error) is error
    assert res.value is None


@pytest.mark.parametrize("raw", ["123", "012", "987", "305"])
def test_validate_guess_ok(raw):
    res = validate_guess(raw)
    assert res.ok
    assert res.unwrap() == raw


def test_unwrap_raises_the_error():
    with pytest.raises(WrongLength):
        validate_guess("12").unwrap()


# --- scoring golden tests ---
@pytest.mark.parametrize("guess,secret,expected", [
    ("321", (1, 2, 3), ScoreResult(1, 2)),
    ("123", (1, 2, 3), ScoreResult(3, 0)),
    ("456", (1, 2, 3), ScoreResult(0, 0)),
    ("312", (1, 2, 3), ScoreResult(0, 3)),
    ("145", (1, 2, 3), ScoreResult(1, 0)),
    ("914", (1, 2, 3), ScoreResult(0, 1)),
    ("013", (0, 1, 2), ScoreResult(2, 0)),
    ("210", (0, 1, 2), ScoreResult(1, 2)),
])
def test_score_golden(guess, secret, expected):
    assert score(guess, secret) == expected


def test_score_result_helpers():
    assert ScoreResult(0, 0).is_out
    assert not ScoreResult(0, 1).is_out
    assert ScoreResult(3, 0).is_win
    assert ScoreResult(1, 2).key() == "1S2B"


def test_score_rejects_wrong_length():
    with pytest.raises(AssertionError):
        score("12", (1, 2, 3))


# --- properties over the whole guess universe ---
@pytest.mark.parametrize("secret", ["123", "012", "987", "450"])
def test_score_bounds_and_win_iff_equal(secret):
    s = secret_from_str(secret)
    for g in all_secrets():
        sr = score(g, s)
        assert 0 <= sr.strikes <= 3 and 0 <= sr.balls <= 3
        assert sr.strikes + sr.balls <= 3
        assert (sr.strikes == 3) == (g == secret)


def test_generated_secrets_are_three_distinct_digits():
    rng = random.Random(0)
    for _ in range(2000):
        s = generate_secret(rng)
        assert len(s) == 3
        assert all(isinstance(d, int) and 0 <= d <= 9 for d in s)
        assert len(set(s)) == 3


def test_generate_secret_is_reproducible_with_seed():
    assert generate_secret(random.Random(42)) == generate_secret(random.Random(42))


def test_generate_secret_covers_every_digit_in_every_position():
    rng = random.Random(7)
    seen = [set(), set(), set()]
    for _ in range(3000):
        for i, d in enumerate(generate_secret(rng)):
            seen[i].add(d)
    assert all(s == set(range(10)) for s in seen)


def test_generate_secret_gives_up_on_a_stuck_rng(monkeypatch):
    class StuckRandom(random.Random):
        def randrange(self, *args, **kwargs):
            return 4

    monkeypatch.setattr(secret_mod, "MAX_DRAWS", 50)
    with pytest.raises(RuntimeError):
        generate_secret(StuckRandom())


def test_all_secrets_universe():
    secrets = all_secrets()
    assert len(secrets) == 720
    assert len(set(secrets)) == 720
    assert all(validate_guess(s).ok for s in secrets)
    assert secrets[0] == "012" and secrets[-1] == "987"


# --- candidate filtering ---
def test_filter_candidates_keeps_the_secret():
    secret = (1, 2, 3)
    history = [(g, score(g, secret)) for g in ("456", "321", "132")]
    cand = filter_candidates(all_secrets(), history)
    assert "123" in cand
    assert "456" not in cand and "321" not in cand
    for c in cand:
        assert all(score(g, secret_from_str(c)) == sr for g, sr in history)


def test_filter_candidates_drops_malformed_and_keeps_order():
    history = [("123", ScoreResult(0, 0))]
    cand = filter_candidates(["456", "44", "abc", "455", "789", "654"], history)
    assert cand == ["456", "789", "654"]
