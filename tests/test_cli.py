from pathlib import Path

import pytest
from apps.cli.solve import SolveArgs, main, make_argparser


@pytest.fixture
def dict_path(tmp_path: Path) -> str:
    p = tmp_path / "wordlewords.txt"
    p.write_text("apple\ngrape\ncrane\nplane\nPlane\ncranes\n\n", encoding="utf-8")
    return str(p)


def test_cli_prints_matches(dict_path, capsys):
    rc = main(["--dict", dict_path, "--require", "a", "--exclude", "g", "--known", "5e"])
    out = capsys.readouterr().out.splitlines()
    assert rc == 0
    assert out == ["4 possible solutions:", "apple", "crane", "plane", "plane"]


def test_cli_include_alias_and_regex_strategy(dict_path, capsys):
    rc = main(["--dict", dict_path, "--include", "p,l", "--strategy", "regex"])
    out = capsys.readouterr().out.splitlines()
    assert rc == 0
    assert out[0] == "3 possible solutions:"


def test_cli_unique_dedupes_and_sorts(dict_path, capsys):
    rc = main(["--dict", dict_path, "--known", "5e", "--unique"])
    out = capsys.readouterr().out.splitlines()
    assert rc == 0
    assert out == ["4 possible solutions:", "apple", "crane", "grape", "plane"]


def test_cli_save_writes_results(dict_path, tmp_path, capsys):
    target = tmp_path / "res.txt"
    rc = main(["--dict", dict_path, "--known", "1c", "--save", str(target)])
    assert rc == 0
    assert target.read_text(encoding="utf-8") == "crane\n"
    assert "Wrote:" in capsys.readouterr().out


def test_cli_save_default_filename(dict_path, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert main(["--dict", dict_path, "--known", "1c", "--save"]) == 0
    assert (tmp_path / "results.txt").read_text(encoding="utf-8") == "crane\n"


def test_cli_save_to_directory_fails_cleanly(dict_path, tmp_path, capsys):
    rc = main(["--dict", dict_path, "--known", "1c", "--save", str(tmp_path)])
    assert rc == 1
    assert "Error:" in capsys.readouterr().err


def test_cli_missing_dictionary(tmp_path, capsys):
    rc = main(["--dict", str(tmp_path / "nope.txt"), "--require", "a"])
    assert rc == 1
    assert "Error:" in capsys.readouterr().err


@pytest.mark.parametrize("argv", [
    ["--exclude", ",".join("abcdefghijklmnopqrstuvwxyz")],
    ["--require", "a", "--exclude", "a"],
    ["--require", "a", "--known", "1a"],
])
def test_cli_invalid_constraint(dict_path, capsys, argv):
    rc = main(["--dict", dict_path] + argv)
    assert rc == 1
    assert "Error:" in capsys.readouterr().err


def test_cli_strict_rejects_malformed_token(dict_path, capsys):
    assert main(["--dict", dict_path, "--require", "ab", "--strict"]) == 1
    assert "Error:" in capsys.readouterr().err


def test_cli_lenient_skips_malformed_token(dict_path, capsys):
    assert main(["--dict", dict_path, "--require", "ab,l"]) == 0
    assert capsys.readouterr().out.startswith("3 possible solutions:")


def test_cli_requires_some_constraint(dict_path):
    with pytest.raises(SystemExit) as e:
        main(["--dict", dict_path])
    assert e.value.code == 2


def test_cli_rejects_short_length(dict_path):
    with pytest.raises(SystemExit) as e:
        main(["--dict", dict_path, "--length", "1", "--require", "a"])
    assert e.value.code == 2


def test_cli_verbose_logs_interpretation(dict_path, capsys):
    assert main(["--dict", dict_path, "--require", "a", "--known", "5e", "-v"]) == 0
    err = capsys.readouterr().err
    assert "Letters to require: a" in err
    assert "____e" in err
    assert "(?=.*a)" in err


def test_solve_args_is_immutable(dict_path):
    ns = make_argparser().parse_args(["--dict", dict_path, "--require", "a"])
    args = SolveArgs.from_namespace(ns)
    assert args.dict_path == dict_path and args.length == 5 and args.save is None
    with pytest.raises(AttributeError):
        args.length = 6
