import csv
import json

import pytest
from packages.engine import all_secrets
from packages.harness import case_seed, run_batch, run_case, summarize, write_csv, write_manifest
from packages.solvers import create_solver


def test_run_case_smoke():
    solver = create_solver("random_consistent")
    r = run_case(solver, "305", max_turns=10, seed=42)
    assert "success" in r and "history" in r
    # consistent guessing always wins within 10 turns
    assert r["success"] is True
    assert r["history"][-1] == ("305", "3S0B")
    assert r["guesses"] == len(r["history"])


@pytest.mark.parametrize("solver_id", ["max_patterns", "entropy"])
def test_informed_solvers_smoke(solver_id):
    solver = create_solver(solver_id)
    r = run_case(solver, "987", max_turns=10, seed=7)
    assert r["success"] is True


def test_run_case_out_of_turns():
    solver = create_solver("random_consistent")
    r = run_case(solver, "012", max_turns=1, seed=1)
    assert r["guesses"] == 1
    assert r["success"] == (r["history"][0][0] == "012")


def test_run_case_rejects_bad_turn_budget():
    with pytest.raises(ValueError):
        run_case(create_solver("random_consistent"), "123", max_turns=0)


def test_run_case_rejects_invalid_solver_guess():
    solver = create_solver("random_consistent")
    solver.next_guess = lambda state: "112"
    with pytest.raises(ValueError):
        run_case(solver, "123")


def test_run_batch_and_outputs(tmp_path):
    solver = create_solver("random_consistent")
    results = run_batch(solver, all_secrets(), seed=3, sample=5)
    assert len(results) == 5
    assert all(r["solver_id"] == "random_consistent" for r in results)

    summary = summarize(results)
    assert summary["num_cases"] == 5 and summary["win_rate"] == 1.0

    csv_path = write_csv(results, str(tmp_path / "out" / "run.csv"), max_turns=10)
    with open(csv_path, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == 5
    assert rows[0]["secret"] == "'012"
    assert rows[0]["guess_1"].startswith("'") and rows[0]["score_1"].endswith("B")

    man_path = write_manifest({"summary": summary}, str(tmp_path / "m.json"))
    with open(man_path, encoding="utf-8") as f:
        assert json.load(f)["summary"]["num_cases"] == 5


@pytest.mark.parametrize("secret", ["112", "1234", "12", "1a2", ""])
def test_run_case_rejects_malformed_secret(secret):
    with pytest.raises(ValueError):
        run_case(create_solver("random_consistent"), secret, max_turns=10, seed=1)


@pytest.mark.parametrize("sample", [0, -5])
def test_run_batch_rejects_non_positive_sample(sample):
    with pytest.raises(ValueError):
        run_batch(create_solver("random_consistent"), all_secrets(), seed=1, sample=sample)


def test_case_seed():
    assert case_seed(None, 3) is None
    assert case_seed(10, 1) == 11
