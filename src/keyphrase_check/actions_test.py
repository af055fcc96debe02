import pytest

from keyphrase_check.actions import (
    ActionsReporter,
    get_input,
    parse_bool_input,
    parse_int_input,
    require_input,
)


def test_get_input_reads_env(monkeypatch):
    monkeypatch.setenv("INPUT_KEYPHRASE", "  GitHub \n")
    assert get_input("keyphrase") == "GitHub"


def test_get_input_accepts_underscored_name(monkeypatch):
    monkeypatch.delenv("INPUT_TEXT-FILE", raising=False)
    monkeypatch.setenv("INPUT_TEXT_FILE", "README.md")
    assert get_input("text-file") == "README.md"


def test_get_input_missing_is_empty(monkeypatch):
    monkeypatch.delenv("INPUT_TEXT", raising=False)
    assert get_input("text") == ""


def test_require_input():
    assert require_input("keyphrase", "x") == "x"
    with pytest.raises(ValueError, match="Input required and not supplied: keyphrase"):
        require_input("keyphrase", "")


def test_parse_bool_input():
    assert parse_bool_input("case-sensitive", "TRUE") is True
    assert parse_bool_input("case-sensitive", "false") is False
    with pytest.raises(TypeError, match="case-sensitive"):
        parse_bool_input("case-sensitive", "yes")


def test_parse_int_input():
    assert parse_int_input("") is None
    assert parse_int_input(" 3 ") == 3
    assert parse_int_input("-2") == -2
    for bad in ("three", "1_000", "\u0663", "1.5"):
        with pytest.raises(ValueError, match="invalid base-10 integer"):
            parse_int_input(bad)


def test_set_output_appends_to_file(tmp_path):
    out = tmp_path / "github_output"
    reporter = ActionsReporter(output_file=out)
    reporter.set_output("occurrences", 2)
    reporter.set_output("other", "x")
    assert out.read_text() == "occurrences=2\nother=x\n"


def test_set_output_without_file_uses_command(monkeypatch, capsys):
    monkeypatch.delenv("GITHUB_OUTPUT", raising=False)
    ActionsReporter().set_output("occurrences", 0)
    assert capsys.readouterr().out == "::set-output name=occurrences::0\n"


def test_set_failed_escapes_and_marks_failed(monkeypatch, capsys):
    monkeypatch.delenv("GITHUB_OUTPUT", raising=False)
    reporter = ActionsReporter()
    assert not reporter.failed
    reporter.set_failed("100% bad\nreally")
    assert reporter.failed
    assert capsys.readouterr().out == "::error::100%25 bad%0Areally\n"
