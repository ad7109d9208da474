import pytest
from wordscramble.engine import (
    Session, start_game, Status, Reason, DEFAULT_ROOT_WORD,
)
from wordscramble.dictionary import WordSetOracle


class AnyWordOracle:
    """Recognizes every non-empty token."""
    def is_recognized_word(self, token, language="en"):
        return bool(token)


@pytest.fixture
def bread_session():
    oracle = WordSetOracle(["bred", "bread", "bead", "dare", "red", "bear"])
    return Session("bread", oracle)


def test_bread_scenario(bread_session):
    s = bread_session

    out = s.submit("bred")
    assert out.status is Status.ACCEPTED and out.word == "bred"

    out = s.submit("bred")
    assert out.status is Status.REJECTED and out.reason is Reason.ALREADY_USED

    out = s.submit("zzz")
    assert out.reason is Reason.NOT_SPELLABLE_FROM_ROOT

    # not spellable AND not a word: spelling is checked first
    out = s.submit("qa")
    assert out.reason is Reason.NOT_SPELLABLE_FROM_ROOT

    assert s.used_words == ["bred"]


def test_not_a_real_word(bread_session):
    out = bread_session.submit("drab")  # spellable, not in the word set
    assert out.is_rejected and out.reason is Reason.NOT_A_REAL_WORD
    assert bread_session.used_words == []


def test_already_used_wins_over_unspellable():
    # Every accepted word is spellable from the session's fixed root, so a
    # word that is both used and unspellable can't be produced through the
    # public API. Swap the root underneath to pin the check order anyway.
    s = Session("cats", AnyWordOracle())
    assert s.submit("cats").is_accepted
    s._root_word = "dog"
    out = s.submit("cats")
    assert out.reason is Reason.ALREADY_USED


def test_root_word_is_normalized():
    s = Session("  Bread\n", AnyWordOracle())
    assert s.root_word == "bread"
    assert s.submit("bread").is_accepted
    assert s.submit("BRED").is_accepted


def test_multiplicities():
    s = Session("aab", AnyWordOracle())
    assert s.submit("aab").is_accepted
    assert s.submit("aaab").reason is Reason.NOT_SPELLABLE_FROM_ROOT


def test_insertion_order_most_recent_first():
    s = Session("bcat", AnyWordOracle())
    assert s.submit("cat").is_accepted
    assert s.submit("bat").is_accepted
    assert s.used_words == ["bat", "cat"]


def test_input_is_normalized(bread_session):
    out = bread_session.submit("  BReD \n")
    assert out.is_accepted and out.word == "bred"
    assert bread_session.submit("bred").reason is Reason.ALREADY_USED


@pytest.mark.parametrize("raw", ["", "   ", "\n", "\t \r\n"])
def test_empty_input_is_ignored(bread_session, raw):
    bread_session.submit("red")
    out = bread_session.submit(raw)
    assert out.status is Status.EMPTY and out.reason is None
    assert bread_session.used_words == ["red"]


def test_no_mutation_on_rejection(bread_session):
    bread_session.submit("bear")
    before = bread_session.used_words
    for raw in ["bear", "xyz", "drab", ""]:
        assert not bread_session.submit(raw).is_accepted
    assert bread_session.used_words == before


def test_used_words_is_a_copy(bread_session):
    bread_session.submit("red")
    bread_session.used_words.append("junk")
    assert bread_session.used_words == ["red"]


def test_root_word_resubmission_is_allowed(bread_session):
    assert bread_session.submit("bread").is_accepted


def test_reasons_have_texts():
    for r in Reason:
        assert r.title and r.message


# --- start_game ---
def test_start_game_empty_list_falls_back():
    s = start_game([], AnyWordOracle())
    assert s.root_word == DEFAULT_ROOT_WORD == "rugrat"
    assert s.used_words == []


def test_start_game_blank_entries_fall_back():
    s = start_game(["", "  ", "\n"], AnyWordOracle())
    assert s.root_word == DEFAULT_ROOT_WORD


def test_start_game_picks_from_list():
    words = ["absolute", "Abstract ", "academic"]
    s = start_game(words, AnyWordOracle(), seed=7)
    assert s.root_word in {"absolute", "abstract", "academic"}


def test_start_game_seed_is_reproducible():
    words = [f"word{i}" for i in range(50)]
    a = start_game(words, AnyWordOracle(), seed=123)
    b = start_game(words, AnyWordOracle(), seed=123)
    assert a.root_word == b.root_word


def test_start_game_is_a_fresh_session():
    oracle = AnyWordOracle()
    s1 = start_game(["rugrat"], oracle)
    s1.submit("rug")
    s2 = start_game(["rugrat"], oracle)
    assert s2.used_words == [] and s1.used_words == ["rug"]


@pytest.mark.parametrize("reason,title,message", [
    (Reason.ALREADY_USED, "Word used already", "Be more original"),
    (Reason.NOT_SPELLABLE_FROM_ROOT, "Word not possible", "You can't just make them up, you know!"),
    (Reason.NOT_A_REAL_WORD, "Word not recognized", "That isn't a real word."),
])
def test_reason_texts(reason, title, message):
    assert reason.title == title
    assert reason.message == message
