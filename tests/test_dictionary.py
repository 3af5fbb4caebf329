"""
Word sources and the one-word table.
"""

import pytest

from granny.dictionary import build_level, frequent_words, is_valid_word, read_words
from granny.words import Type


@pytest.mark.parametrize("word,valid", [
    ("granny", True),
    ("abc123", True),
    ("ab", True),
    ("Granny", False),
    ("a", False),
    ("x" * 21, False),
    ("don't", False),
    ("café", False),
    ("", False),
    ("sex", False),
])
def test_is_valid_word(word, valid):
    assert is_valid_word(word) is valid


def test_read_words(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("Granny\npanties\nit's\na\n\n  zack  \nsex\n", encoding="utf-8")
    assert list(read_words(path)) == ["granny", "panties", "zack"]


def test_read_words_skips_undecodable_lines(tmp_path):
    path = tmp_path / "words.txt"
    path.write_bytes(b"granny\n\xff\xfe\npan\xffties\npanties\n")
    assert list(read_words(path)) == ["granny", "panties"]


def test_denylist_matches_whole_words_only():
    assert not is_valid_word("password")
    assert is_valid_word("passwords")


def test_read_words_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_words(tmp_path / "missing.txt")


def test_frequent_words():
    words = frequent_words(200)
    assert 0 < len(words) <= 200
    assert all(is_valid_word(w) for w in words)
    assert "the" in words


def test_build_level():
    level = build_level(["gaa", "gsa", "gpa", "granny"])
    assert len(level) == 2
    # ties keep the first word
    assert level[Type('G', 'A', 3)].words == ("gaa",)
    assert level[Type('G', 'Y', 6)].cost == 14


def test_build_level_from_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("granny\npanties\ngranny\n", encoding="utf-8")
    level = build_level(read_words(path))
    assert len(level) == 2
