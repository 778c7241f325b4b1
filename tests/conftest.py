from __future__ import annotations

import io
import sys
from pathlib import Path
from typing import Any, Callable, Mapping

import pytest
from rich.console import Console

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from ngseed.console import Logger  # noqa: E402
from ngseed.prompts import Question  # noqa: E402


class ScriptedPrompter:
    """Answer questions from a mapping and remember what was asked."""

    def __init__(self, answers: Mapping[str, Any] | None = None) -> None:
        self.answers = dict(answers or {})
        self.asked: list[str] = []

    def ask(self, question: Question) -> Any:
        self.asked.append(question.name)
        if question.name in self.answers:
            answer = self.answers[question.name]
            if isinstance(answer, BaseException):
                raise answer
            return answer
        return question.default


class RecordingLogger(Logger):
    """Logger writing plain text into memory."""

    def __init__(self) -> None:
        self.buffer = io.StringIO()
        self.error_buffer = io.StringIO()
        super().__init__(
            Console(file=self.buffer, width=400, color_system=None, highlight=False),
            Console(file=self.error_buffer, width=400, color_system=None, highlight=False),
        )

    @property
    def lines(self) -> list[str]:
        return self.buffer.getvalue().splitlines()

    @property
    def error_lines(self) -> list[str]:
        return self.error_buffer.getvalue().splitlines()


@pytest.fixture()
def make_prompter() -> Callable[..., ScriptedPrompter]:
    def factory(**answers: Any) -> ScriptedPrompter:
        return ScriptedPrompter(answers)

    return factory


@pytest.fixture()
def logger() -> RecordingLogger:
    return RecordingLogger()
