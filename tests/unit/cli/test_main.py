"""Unit tests for CLI command handling."""

from __future__ import annotations

import pytest

from cli.main import main
from core.constants import TOOLBOX_VERSION
from tests.fixture_paths import fixture_path
from tests.stdin_fakes import TerminalInput, piped_input


def test_cli_hash_sha256_of_empty_pipe(monkeypatch, capsys) -> None:
    """Empty piped input should hash to the empty-string digest."""
    monkeypatch.setattr("sys.stdin", piped_input(""))

    exit_code = main(["hash", "sha256"])
    output = capsys.readouterr().out

    assert exit_code == 0
    assert output == "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855\n"


def test_cli_piped_input_ignores_raw_argument(monkeypatch, capsys) -> None:
    """Piped data should win over a raw positional value."""
    monkeypatch.setattr("sys.stdin", piped_input("piped"))

    exit_code = main(["b64", "encode", "positional", "--raw"])
    output = capsys.readouterr().out.strip()

    assert exit_code == 0 and output == "cGlwZWQ="


def test_cli_raw_argument_is_encoded(monkeypatch, capsys) -> None:
    """Raw positional values should be used when nothing is piped."""
    monkeypatch.setattr("sys.stdin", TerminalInput())

    exit_code = main(["b64", "encode", "--raw", "hello"])
    output = capsys.readouterr().out

    assert exit_code == 0 and output == "aGVsbG8=\n"


def test_cli_reads_positional_file(monkeypatch, capsys) -> None:
    """Non-raw positional values should be read as files."""
    monkeypatch.setattr("sys.stdin", TerminalInput())

    exit_code = main(["json", "minify", str(fixture_path("inputs/config.json"))])
    output = capsys.readouterr().out.strip()

    assert exit_code == 0 and output.startswith('{"name":"toolbox","tags":["cli","text tools"]')


def test_cli_missing_file_reports_file_read_error(monkeypatch, capsys, tmp_path) -> None:
    """Missing files should fail with the action label and --raw hint."""
    monkeypatch.setattr("sys.stdin", TerminalInput())
    missing_path = tmp_path / "missing.json"

    exit_code = main(["json", "unminify", str(missing_path)])
    captured = capsys.readouterr()

    assert exit_code == 1 and captured.out == ""
    assert captured.err.startswith("Error: Unminify JSON")
    assert "specify --raw flag" in captured.err
    assert "Parse Valid JSON" not in captured.err


def test_cli_invalid_base64_fails_without_stdout(monkeypatch, capsys) -> None:
    """Malformed base64 should print nothing on stdout."""
    monkeypatch.setattr("sys.stdin", TerminalInput())

    exit_code = main(["b64", "decode", "--raw", "not-base64!!"])
    captured = capsys.readouterr()

    assert exit_code == 1 and captured.out == ""
    assert "Error: Base64 Decoding" in captured.err


def test_cli_invalid_json_reports_parse_context(monkeypatch, capsys) -> None:
    """Invalid JSON should report both the action and parse context."""
    monkeypatch.setattr("sys.stdin", piped_input("{broken"))

    exit_code = main(["json", "unminify"])
    captured = capsys.readouterr()

    assert exit_code == 1 and "Parse Valid JSON" in captured.err


def test_cli_without_input_source_fails(monkeypatch, capsys) -> None:
    """No pipe and no positional value should exit non-zero."""
    monkeypatch.setattr("sys.stdin", TerminalInput())

    exit_code = main(["hash", "blake3"])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Error: Blake3 Hash" in captured.err
    assert "Not input source found" in captured.err


def test_cli_unknown_command_is_usage_error(capsys) -> None:
    """Unknown subcommands should exit through argparse."""
    with pytest.raises(SystemExit) as exit_info:
        main(["rot13"])

    assert exit_info.value.code == 2
    assert "invalid choice" in capsys.readouterr().err


def test_cli_missing_nested_command_is_usage_error(capsys) -> None:
    """Families without an action should exit through argparse."""
    with pytest.raises(SystemExit) as exit_info:
        main(["hash"])

    assert exit_info.value.code == 2
    _ = capsys.readouterr()


def test_cli_unknown_flag_is_usage_error(capsys) -> None:
    """Malformed flags should exit through argparse."""
    with pytest.raises(SystemExit) as exit_info:
        main(["html", "minify", "--literal", "x"])

    assert exit_info.value.code == 2
    _ = capsys.readouterr()


def test_cli_invalid_log_level_is_usage_error(capsys) -> None:
    """Unknown log levels should be rejected by argparse before any action runs."""
    with pytest.raises(SystemExit) as exit_info:
        main(["--log-level", "loud", "hash", "md5"])
    captured = capsys.readouterr()

    assert exit_info.value.code == 2 and captured.out == ""
    assert "invalid choice" in captured.err


def test_cli_debug_logging_goes_to_stderr(monkeypatch, capsys) -> None:
    """Debug logs should never mix into the result on stdout."""
    monkeypatch.setattr("sys.stdin", piped_input("abc"))

    exit_code = main(["--log-level", "debug", "hash", "md5", "ignored", "--raw"])
    captured = capsys.readouterr()

    assert exit_code == 0
    assert captured.out == "900150983cd24fb0d6963f7d28e17f72\n"
    assert "positional_input_ignored" in captured.err


def test_cli_version_flag(capsys) -> None:
    """--version should print the program version."""
    with pytest.raises(SystemExit) as exit_info:
        main(["--version"])

    assert exit_info.value.code == 0
    assert TOOLBOX_VERSION in capsys.readouterr().out
