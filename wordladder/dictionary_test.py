import logging

from wordladder import dictionary as dictionary_module
from wordladder.dictionary import Dictionary
from wordladder.test_utils import SMALL_WORDS


def test_load_file():
    d = Dictionary(SMALL_WORDS)
    assert d.source == SMALL_WORDS
    assert len(d) == 35
    assert "cat" in d
    assert d.contains("word")
    assert "don't" not in d
    assert "email" not in d
    assert d.lengths() == [3, 4, 5]
    assert d.words_of_length(5) == {"apple"}
    assert d.words_of_length(9) == frozenset()


def test_word_length_filter():
    d = Dictionary(SMALL_WORDS, word_length=4)
    assert d.lengths() == [4]
    assert "cold" in d
    assert "cat" not in d
    assert d.source == SMALL_WORDS


def test_from_words():
    d = Dictionary(words=["Cat", "cat", "  cot ", "x-ray", "dog"])
    assert d.source == "<memory>"
    assert sorted(d) == ["cat", "cot", "dog"]
    assert d.alphabet == "acdgot"


def test_missing_file_falls_back_to_builtin(tmp_path, monkeypatch, caplog):
    monkeypatch.setattr(dictionary_module, "DICTIONARY_SEARCH_PATHS", [])
    with caplog.at_level(logging.WARNING, logger="wordladder"):
        d = Dictionary(str(tmp_path / "nope.txt"))
    assert d.source == "<built-in>"
    assert "cat" in d and "dog" in d
    assert "not found" in caplog.text


def test_empty_file_is_skipped(tmp_path, monkeypatch):
    empty = tmp_path / "empty.txt"
    empty.write_text("\n123\n", encoding="utf-8")
    monkeypatch.setattr(dictionary_module, "DICTIONARY_SEARCH_PATHS", [SMALL_WORDS])
    d = Dictionary(str(empty))
    assert d.source == SMALL_WORDS


def test_neighbors_order():
    d = Dictionary(words=["bat", "hat", "cot", "cut", "can", "car", "cat", "cats"])
    # position-major, then alphabetical
    assert list(d.neighbors("cat")) == ["bat", "hat", "cot", "cut", "can", "car"]


def test_neighbors_restartable():
    d = Dictionary(words=["cat", "cot", "dot"])
    first = d.neighbors("cot")
    assert list(first) == ["dot", "cat"]
    assert list(first) == []
    assert list(d.neighbors("cot")) == ["dot", "cat"]


def test_neighbors_excludes_word_itself():
    d = Dictionary(words=["cat"])
    assert list(d.neighbors("cat")) == []


def test_neighbors_of_non_member():
    d = Dictionary(words=["cat", "cot"])
    assert list(d.neighbors("cit")) == ["cat", "cot"]
    assert list(d.neighbors("zzzz")) == []


def test_neighbors_extra():
    d = Dictionary(words=["cat", "cot"])
    # 'g' is not in the corpus alphabet but comes in with the extra word
    assert list(d.neighbors("cot", extra=("cog",))) == ["cat", "cog"]
    assert list(d.neighbors("cot", extra=("cogs",))) == ["cat"]
    assert "cog" not in d
