from __future__ import annotations

import io
from typing import get_args

import pytest
from rich.console import Console

from ngseed.errors import PromptError
from ngseed.prompts import NEW_FOLDER, PROJECT_NAME, USER_CONFIG, Question, QuestionKind, RichPrompter


def _prompter(monkeypatch: pytest.MonkeyPatch, *replies: str) -> RichPrompter:
    pending = list(replies)

    def fake_input(*args, **kwargs) -> str:
        if not pending:
            raise EOFError
        return pending.pop(0)

    console = Console(file=io.StringIO(), color_system=None)
    monkeypatch.setattr(console, "input", fake_input)
    return RichPrompter(console)


def test_question_defaults():
    assert NEW_FOLDER.kind == "confirm" and NEW_FOLDER.default is True
    assert PROJECT_NAME.kind == "input" and PROJECT_NAME.default == "angular-template"
    assert USER_CONFIG.kind == "confirm" and USER_CONFIG.default is False


def test_confirm_uses_default_on_empty_reply(monkeypatch: pytest.MonkeyPatch):
    prompter = _prompter(monkeypatch, "", "")
    assert prompter.ask(NEW_FOLDER) is True
    assert prompter.ask(USER_CONFIG) is False


def test_confirm_parses_answer(monkeypatch: pytest.MonkeyPatch):
    prompter = _prompter(monkeypatch, "n")
    assert prompter.ask(NEW_FOLDER) is False


def test_input_returns_text_or_default(monkeypatch: pytest.MonkeyPatch):
    prompter = _prompter(monkeypatch, "my-app", "")
    assert prompter.ask(PROJECT_NAME) == "my-app"
    assert prompter.ask(PROJECT_NAME) == "angular-template"


def test_closed_input_raises_prompt_error(monkeypatch: pytest.MonkeyPatch):
    prompter = _prompter(monkeypatch)
    with pytest.raises(PromptError):
        prompter.ask(NEW_FOLDER)


def test_unknown_question_type_is_rejected(monkeypatch: pytest.MonkeyPatch):
    prompter = _prompter(monkeypatch, "anything")
    with pytest.raises(PromptError):
        prompter.ask(Question(kind="choice", name="color", message="Pick one"))  # type: ignore[arg-type]


def test_question_kinds_are_the_supported_ones():
    assert set(get_args(QuestionKind)) == {"confirm", "input"}
    for question in (NEW_FOLDER, PROJECT_NAME, USER_CONFIG):
        assert question.kind in get_args(QuestionKind)
