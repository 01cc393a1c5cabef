"""Tests for word list loading."""
import pytest

from wordbloom.dataset import load_words


def test_one_word_per_line(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("apple\nbanana\ncherry\n", encoding="utf-8")
    assert load_words(path) == ["apple", "banana", "cherry"]


def test_keeps_empty_lines_and_strips_crlf(tmp_path):
    path = tmp_path / "words.txt"
    path.write_bytes(b"a\r\n\r\nb")
    assert load_words(str(path)) == ["a", "", "b"]


def test_unicode(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("naïve\ncafé\n", encoding="utf-8")
    assert load_words(path) == ["naïve", "café"]


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_words(tmp_path / "nope.txt")
