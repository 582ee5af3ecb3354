import pytest

from wordsearch import words
from wordsearch.words import DictionaryError, load_dictionary, resolve_dictionary_path


def test_load_dictionary_lowercases_and_strips(tmp_path):
    path = tmp_path / "dict.txt"
    path.write_text("Crane\nCRATE  \r\ngrate\n")
    assert load_dictionary(path) == frozenset({"crane", "crate", "grate"})


def test_blank_line_is_the_empty_word(tmp_path):
    path = tmp_path / "dict.txt"
    path.write_text("\nabc\n")
    assert "" in load_dictionary(path)


def test_empty_file_raises(tmp_path):
    path = tmp_path / "dict.txt"
    path.write_text("")
    with pytest.raises(DictionaryError, match="Failed to read in words"):
        load_dictionary(path)


def test_missing_file_raises(tmp_path):
    with pytest.raises(DictionaryError) as info:
        load_dictionary(tmp_path / "nope.txt")
    assert isinstance(info.value.__cause__, OSError)


def test_relative_path_falls_back_to_data_dir(tmp_path, monkeypatch):
    data_dir = tmp_path / "data"
    data_dir.mkdir()
    (data_dir / "bundled.txt").write_text("abc\n")
    monkeypatch.setattr(words, "DATA_DIR", data_dir)
    monkeypatch.chdir(tmp_path)

    assert resolve_dictionary_path("bundled.txt") == data_dir / "bundled.txt"
    assert load_dictionary("bundled.txt") == frozenset({"abc"})


def test_existing_path_is_used_as_given(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "local.txt").write_text("abc\n")
    assert str(resolve_dictionary_path("local.txt")) == "local.txt"
