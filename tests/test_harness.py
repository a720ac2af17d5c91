import csv
from pathlib import Path

import pytest
from absurdle.engine import filter_candidates, InvalidConfiguration
from absurdle.harness import (
    new_game, is_finished, share_summary, run_case, run_batch, write_csv, write_manifest,
)
from absurdle.solvers import create_solver

WORDS = ["crane", "raise", "stare", "trace", "cared", "adieu", "alone", "slate",
         "crane", "toolong", "ant"]


def test_new_game_is_mutable_copy():
    cand = new_game(WORDS, 5)
    assert isinstance(cand, set)
    assert len(cand) == 8
    with pytest.raises(InvalidConfiguration):
        new_game(WORDS, 0)


def test_is_finished():
    assert is_finished([]) is False
    assert is_finished(["GG-"]) is False
    assert is_finished(["GGY"]) is False
    assert is_finished(["G-G", "GGG"]) is True


def test_share_summary():
    assert share_summary(["-Y", "GG"]) == "Absurdle 2/∞\n\n⬜🟨\n🟩🟩"


def test_run_case_smoke():
    solver = create_solver("random_consistent")
    r = run_case(solver, words=WORDS, N=5, seed=42)
    assert r["success"] is True
    assert r["remaining"] == 1
    assert r["guesses"] <= 8
    assert r["history"][-1][1] == "GGGGG"
    # every pattern agrees with the word that finally won
    winner = r["history"][-1][0]
    assert filter_candidates([winner], r["history"], 5) == [winner]


def test_run_case_with_opener():
    solver = create_solver("first_consistent")
    r = run_case(solver, words=WORDS, N=5, opener="zzzzz")
    assert r["opener"] == "zzzzz"
    assert r["history"][0] == ("zzzzz", "-----")
    assert r["success"] is True


def test_run_case_turn_cap():
    solver = create_solver("first_consistent")
    r = run_case(solver, words=WORDS, N=5, opener="zzzzz", max_turns=1)
    assert r["success"] is False
    assert r["guesses"] == 1


def test_run_batch_and_csv(tmp_path: Path):
    solver = create_solver("first_consistent")
    openers = ["slate", "adieu", "crane"]
    results = run_batch(solver, openers, words=WORDS, N=5, seed=1, sample=2)
    assert [r["opener"] for r in results] == ["slate", "adieu"]
    for r in results:
        r["solver_id"] = solver.id

    out = write_csv(results, str(tmp_path / "out" / "run.csv"), N=5)
    with open(out, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == 2
    assert rows[0]["solver"] == "first_consistent"
    assert rows[0]["opener"] == "slate"
    assert rows[0]["guess_1"] == "slate"
    assert rows[0]["patt_1"].startswith("'")


def test_write_manifest(tmp_path: Path):
    p = write_manifest({"run_id": "x", "note": "∞"}, str(tmp_path / "m.json"))
    assert "∞" in Path(p).read_text(encoding="utf-8")


def test_run_batch_reports_each_case():
    solver = create_solver("first_consistent")
    seen = []
    results = run_batch(solver, ["slate", "adieu"], words=WORDS, N=5, seed=5,
                        on_case=lambda idx, total, r: seen.append((idx, total, r["opener"])))
    assert seen == [(1, 2, "slate"), (2, 2, "adieu")]
    assert all(r["solver_id"] == "first_consistent" for r in results)
