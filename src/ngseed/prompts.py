"""Questions asked by the generator and the engine that asks them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal, Protocol

from rich.console import Console
from rich.prompt import Confirm, Prompt

from .errors import PromptError

__all__ = [
    "NEW_FOLDER",
    "PROJECT_NAME",
    "USER_CONFIG",
    "Prompter",
    "Question",
    "QuestionKind",
    "RichPrompter",
]


QuestionKind = Literal["confirm", "input"]


@dataclass(frozen=True, slots=True)
class Question:
    """A single interactive question.

    ``kind`` is ``"confirm"`` for yes/no questions and ``"input"`` for free
    text. ``name`` identifies the answer.
    """

    kind: QuestionKind
    name: str
    message: str
    default: Any = None


NEW_FOLDER = Question(
    kind="confirm",
    name="make_new_directory",
    message="Are you making a new folder?",
    default=True,
)

PROJECT_NAME = Question(
    kind="input",
    name="project_name",
    message="What is your project name?",
    default="angular-template",
)

USER_CONFIG = Question(
    kind="confirm",
    name="create_user_config",
    message="Do you want to make a user override file for config?",
    default=False,
)


class Prompter(Protocol):
    """Anything that can answer a :class:`Question`."""

    def ask(self, question: Question) -> Any:
        ...


class RichPrompter:
    """Ask questions on the terminal with :mod:`rich.prompt`."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def ask(self, question: Question) -> Any:
        try:
            if question.kind == "confirm":
                return Confirm.ask(
                    question.message,
                    default=bool(question.default),
                    console=self.console,
                )
            if question.kind == "input":
                return Prompt.ask(
                    question.message,
                    default=question.default,
                    console=self.console,
                )
        except EOFError as exc:
            raise PromptError(f"input closed while asking '{question.name}'") from exc

        raise PromptError(f"unknown question type '{question.kind}' for '{question.name}'")
