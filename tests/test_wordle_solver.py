import pytest

import wordle_solver


WORDS = ["crane", "crate", "grate", "plate"]


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "words.txt").write_text("\n".join(WORDS) + "\n")
    return tmp_path


def run(capsys, *argv):
    wordle_solver.main(["--dict", "words.txt", *argv])
    return capsys.readouterr().out.splitlines()


def test_known_first_letter(workdir, capsys):
    assert run(capsys, "--length", "5", "--known", "1c") == ["crane", "crate"]


def test_include_letter(workdir, capsys):
    assert run(capsys, "--include", "t") == ["crate", "grate", "plate"]


def test_exclude_wins_over_include(workdir, capsys):
    assert run(capsys, "--exclude", "t", "--include", "t", "--known", "1c,4t") == [
        "crate"
    ]


def test_excluded_only_word(workdir, capsys):
    (workdir / "words.txt").write_text("abcde\n")
    assert run(capsys, "--exclude", "a") == []


def test_save_writes_solutions_file(workdir, capsys):
    assert run(capsys, "--include", "p", "--save") == []
    assert (workdir / "solutions.txt").read_text() == "plate\n"


def test_save_overwrites_previous_solutions(workdir, capsys):
    (workdir / "solutions.txt").write_text("stale\n")
    run(capsys, "--known", "1z", "--save")
    assert (workdir / "solutions.txt").read_text() == ""


def test_empty_dictionary_reports_and_writes_nothing(workdir, capsys):
    (workdir / "words.txt").write_text("")
    with pytest.raises(SystemExit) as info:
        wordle_solver.main(["--dict", "words.txt", "--save"])
    assert "Failed to read in words from the text file" in str(info.value.code)
    assert capsys.readouterr().out == ""
    assert not (workdir / "solutions.txt").exists()


def test_missing_dictionary_reports(workdir):
    with pytest.raises(SystemExit) as info:
        wordle_solver.main(["--dict", "missing.txt"])
    assert "missing.txt" in str(info.value.code)


def test_debug_prints_parsed_state(workdir, capsys):
    lines = run(capsys, "--debug", "--exclude", "x,q", "--include", "t", "--known", "1c,9z")
    assert lines[:4] == ["Letters to exclude:", "q", "x", ""]
    assert "Valid letters:" in lines
    assert lines[lines.index("Required letters:") + 1] == "t"
    known_at = lines.index("Known letters:")
    assert lines[known_at + 1 : known_at + 3] == ["1 = c", ""]
    assert lines[-1] == "crate"


def test_workers_and_no_prune_give_same_output(workdir, capsys):
    expected = run(capsys, "--known", "5e")
    assert run(capsys, "--known", "5e", "--workers", "2") == expected
    assert run(capsys, "--known", "1c,2r,5e", "--no-prune") == ["crane", "crate"]


def test_rejects_negative_length(workdir):
    with pytest.raises(SystemExit) as info:
        wordle_solver.parse_args(["--length", "-1"])
    assert info.value.code == 2


def test_rejects_zero_workers(workdir):
    with pytest.raises(SystemExit):
        wordle_solver.parse_args(["--workers", "0"])


def test_defaults():
    args = wordle_solver.parse_args([])
    assert args.dictionary == "freebsd_words.txt"
    assert args.length == 5
    assert args.prune is True
    assert args.workers == 1
    assert not args.save and not args.debug
