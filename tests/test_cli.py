"""Tests for the command-line report."""
import pytest

from wordbloom.__main__ import build_parser, main


@pytest.fixture
def words_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("\n".join(f"word{i}" for i in range(1000)) + "\n", encoding="utf-8")
    return path


def test_cross_validation_report(words_file, capsys):
    assert main([str(words_file), "-p", "0.1"]) == 0
    out = capsys.readouterr().out
    assert "Read 1000 words." in out
    assert "(cross validation)" in out
    assert "Training words: 500" in out
    assert "Known test words: 500" in out
    assert "Known true positive rate: 1.000000" in out


def test_no_validation_report(words_file, capsys):
    assert main([str(words_file), "--no-validation", "--hash", "xxh64"]) == 0
    out = capsys.readouterr().out
    assert "(no validation)" in out
    assert "Training words: 1000" in out
    assert "(xxh64)" in out


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.txt")]) == 1
    assert "error:" in capsys.readouterr().err


def test_invalid_probability(words_file, capsys):
    assert main([str(words_file), "-p", "0"]) == 1
    assert "error:" in capsys.readouterr().err


def test_parser_defaults():
    args = build_parser().parse_args(["words.txt"])
    assert args.probability == 0.1
    assert args.seed == 1
    assert args.hash_family == "murmur3"
    assert not args.no_validation


def test_unknown_hash_family_is_argument_error(words_file):
    with pytest.raises(SystemExit) as excinfo:
        main([str(words_file), "--hash", "md5"])
    assert excinfo.value.code == 2
