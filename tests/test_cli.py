from pathlib import Path

import pytest

from rinha.__main__ import main

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.mark.parametrize("extra", [[], ["--no-fib-fast-path"]])
def test_runs_program_and_prints(capsys, extra):
    assert main([*extra, str(FIXTURES / "fib.json")]) == 0
    captured = capsys.readouterr()
    assert captured.out == "fib: 55\n"
    assert captured.err == ""


def test_language_error_is_reported_in_diagnostic_format(capsys):
    assert main([str(FIXTURES / "div_zero.json")]) == 1
    captured = capsys.readouterr()
    assert captured.out == "before\n"
    assert captured.err == "div_zero.rinha:25:31: Arithmetic error, dividing by zero\n"


def test_missing_program(tmp_path, capsys):
    assert main([str(tmp_path / "missing.json")]) == 2
    assert "cannot read" in capsys.readouterr().err


def test_malformed_program(tmp_path, capsys):
    bad = tmp_path / "bad.json"
    bad.write_text('{"name": "x"}')
    assert main([str(bad)]) == 2
    assert "Missing field 'expression'" in capsys.readouterr().err


def test_default_path_comes_from_environment(monkeypatch, capsys):
    monkeypatch.setenv("RINHA_SOURCE_PATH", str(FIXTURES / "fib.json"))
    assert main([]) == 0
    assert capsys.readouterr().out == "fib: 55\n"


def test_bad_config_value(monkeypatch, capsys):
    monkeypatch.setenv("RINHA_FIB_MATRIX_THRESHOLD", "lots")
    assert main([str(FIXTURES / "fib.json")]) == 2
    assert "RINHA_FIB_MATRIX_THRESHOLD must be an integer" in capsys.readouterr().err


def test_unknown_option_exits_with_usage(capsys):
    assert main(["--bogus"]) == 2
    assert "usage: python -m rinha" in capsys.readouterr().err


def _deep_let_chain(depth):
    # Written as text: json.dumps itself would recurse once per level.
    where = '{"start": 0, "end": 1, "filename": "deep.rinha"}'
    opening = "".join(
        f'{{"kind": "Let", "name": {{"text": "x{i}", "location": {where}}}, '
        f'"value": {{"kind": "Int", "value": {i}, "location": {where}}}, "next": '
        for i in range(depth)
    )
    innermost = (
        f'{{"kind": "Print", "value": {{"kind": "Var", "text": "x0", "location": {where}}}, '
        f'"location": {where}}}'
    )
    closing = f', "location": {where}}}' * depth
    return f'{{"name": "deep.rinha", "expression": {opening}{innermost}{closing}, "location": {where}}}'


def test_deeply_nested_program_loads_and_runs(tmp_path, capsys):
    deep = tmp_path / "deep.json"
    deep.write_text(_deep_let_chain(600))
    assert main([str(deep)]) == 0
    assert capsys.readouterr().out == "0\n"


def test_program_that_is_not_utf8(tmp_path, capsys):
    bad = tmp_path / "bad.json"
    bad.write_bytes(b"\xff\xfe{")
    assert main([str(bad)]) == 2
    assert "not valid UTF-8" in capsys.readouterr().err
