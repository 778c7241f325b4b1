from __future__ import annotations

import json
from pathlib import Path

import pytest

from ngseed import __version__
from ngseed.cli import build_parser, main
from ngseed.errors import PromptError


def test_parser_defaults():
    args = build_parser().parse_args([])
    assert args.project is None
    assert args.verbose is False
    assert args.debug is False
    assert args.force is False


def test_parser_short_flags():
    args = build_parser().parse_args(["demo", "-v", "-d", "-f"])
    assert args.project == "demo"
    assert args.verbose and args.debug and args.force


def test_debug_flag_is_hidden_from_help():
    help_text = build_parser().format_help()
    assert "--verbose" in help_text
    assert "--debug" not in help_text


def test_cli_creates_package_json(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, make_prompter, logger):
    monkeypatch.chdir(tmp_path)
    exit_code = main(["demo"], prompter=make_prompter(), logger=logger)

    assert exit_code == 0
    package = json.loads((tmp_path / "package.json").read_text(encoding="utf-8"))
    assert package["name"] == "demo"
    assert logger.lines == ["All done!"]


def test_cli_reports_errors_and_fails(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, make_prompter, logger):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "package.json").write_text("{}\n", encoding="utf-8")

    exit_code = main(["demo"], prompter=make_prompter(), logger=logger)

    assert exit_code == 1
    assert any("already exists" in line for line in logger.error_lines)
    assert "All done!" not in logger.lines


def test_cli_reports_prompt_failures(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, make_prompter, logger):
    monkeypatch.chdir(tmp_path)
    prompter = make_prompter(make_new_directory=PromptError("input closed"))

    assert main([], prompter=prompter, logger=logger) == 1
    assert logger.error_lines == ["input closed"]


def test_cli_rejects_unknown_flags(make_prompter, logger):
    prompter = make_prompter()
    with pytest.raises(SystemExit) as excinfo:
        main(["--bogus"], prompter=prompter, logger=logger)

    assert excinfo.value.code == 2
    assert prompter.asked == []


def test_cli_version(capsys: pytest.CaptureFixture[str]):
    with pytest.raises(SystemExit) as excinfo:
        main(["--version"])

    assert excinfo.value.code == 0
    assert __version__ in capsys.readouterr().out
