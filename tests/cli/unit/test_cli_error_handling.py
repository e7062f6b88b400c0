"""CLI error-handling tests."""

from __future__ import annotations

from graphql_to_openapi.cli import main


def test_missing_required_option_returns_clean_click_error(capsys) -> None:
    exit_code = main(["convert", "--query", "/tmp/query.graphql"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "Missing option" in captured.err
    assert "--schema" in captured.err
    assert "Traceback" not in captured.err


def test_unknown_option_returns_clean_click_error(capsys) -> None:
    exit_code = main(["convert", "--bogus"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "No such option: --bogus" in captured.err
    assert "Traceback" not in captured.err


def test_invalid_format_choice_returns_clean_click_error(capsys) -> None:
    exit_code = main(
        ["convert", "--schema", "s.graphql", "--query", "q.graphql", "--format", "xml"]
    )
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "Invalid value for '--format'" in captured.err
