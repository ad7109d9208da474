import csv
import json

import pytest
from wordscramble.dictionary import WordSetOracle
from wordscramble.harness import (
    run_case, run_batch, select_roots, summarize, write_csv, write_manifest,
)


VOCAB = ["red", "bred", "bread", "bead", "dare", "drab", "be", "zebra", "read"]


@pytest.fixture
def oracle():
    # 'drab' deliberately missing: spellable but not a word here
    return WordSetOracle(["red", "bred", "bread", "bead", "dare", "read", "be", "zebra"])


def test_run_case_smoke(oracle):
    r = run_case("bread", vocabulary=VOCAB, oracle=oracle, min_length=3)
    assert r["root"] == "bread"
    assert r["tried"] == 7                      # zebra unspellable, be too short
    assert r["words"] == ["red", "bred", "bread", "bead", "dare", "read"]
    assert r["accepted"] == 6
    assert r["rejected"]["not_a_real_word"] == 1
    assert r["rejected"]["already_used"] == 0
    assert r["longest"] == "bread"


def test_run_batch_sample(oracle):
    out = run_batch(["bread", "rugrat", "zebra"], vocabulary=iter(VOCAB), oracle=oracle, sample=2)
    assert [r["root"] for r in out] == ["bread", "rugrat"]
    assert out[1]["accepted"] == 0 and out[1]["longest"] == ""


def test_summarize(oracle):
    results = run_batch(["bread", "rugrat"], vocabulary=VOCAB, oracle=oracle)
    stats = summarize(results)
    assert stats["roots"] == 2
    assert stats["max"] == 6 and stats["min"] == 0
    assert stats["mean"] == 3.0
    assert stats["poorest"] == "rugrat"
    assert summarize([])["roots"] == 0


def test_write_outputs(tmp_path, oracle):
    results = run_batch(["bread"], vocabulary=VOCAB, oracle=oracle)
    p = write_csv(results, str(tmp_path / "out" / "survey.csv"))
    with open(p, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert rows[0]["root"] == "bread"
    assert rows[0]["rejected_not_a_real_word"] == "1"
    assert rows[0]["words"].split() == results[0]["words"]

    m = write_manifest({"summary": summarize(results)}, str(tmp_path / "m.json"))
    with open(m, encoding="utf-8") as f:
        assert json.load(f)["summary"]["roots"] == 1


def test_run_case_mixed_case_root(oracle):
    r = run_case("  Bread ", vocabulary=["bred", "red"], oracle=oracle)
    assert r["root"] == "bread"
    assert r["tried"] == 2 and r["accepted"] == 2
    assert r["rejected"]["not_spellable_from_root"] == 0


@pytest.mark.parametrize("sample,expected", [
    (None, ["bread", "rugrat", "zebra"]),
    (2, ["bread", "rugrat"]),
    (0, []),
])
def test_select_roots(sample, expected):
    assert select_roots(["bread", "rugrat", "zebra"], sample) == expected


def test_select_roots_negative_sample():
    with pytest.raises(ValueError):
        select_roots(["bread"], -1)


def test_run_batch_sample_zero(oracle):
    assert run_batch(["bread"], vocabulary=VOCAB, oracle=oracle, sample=0) == []
