"""Choice providers: how scaffold operations collect user answers.

Operations describe what they need as a list of :class:`Question` objects
and hand them to a ``ChoiceProvider``.  :class:`RichChoiceProvider` asks on
the terminal with ``rich.prompt``; :class:`StaticChoiceProvider` answers
from a mapping (CLI flags, scripts, tests).
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol

from rich.console import Console
from rich.prompt import Prompt

from express_scaffold.errors import InvalidParameterError
from express_scaffold.utils import console as default_console
from express_scaffold.utils import print_error

# A validator returns True when the answer is acceptable, or an error message.
Validator = Callable[[str], bool | str]


class QuestionKind(str, Enum):
    SINGLE_CHOICE = "single_choice"
    FREE_TEXT = "free_text"


@dataclass(frozen=True)
class Question:
    """One question asked by a scaffold operation."""

    key: str
    prompt: str
    kind: QuestionKind = QuestionKind.FREE_TEXT
    options: tuple[str, ...] = field(default_factory=tuple)
    validator: Validator | None = None


def non_empty(message: str) -> Validator:
    """Build a validator rejecting blank answers with *message*."""

    def _check(answer: str) -> bool | str:
        return True if answer.strip() else message

    return _check


class ChoiceProvider(Protocol):
    def ask(self, questions: Sequence[Question]) -> dict[str, str]:
        ...


class StaticChoiceProvider:
    """Answers questions from a fixed mapping, applying the same rules a prompt would.

    Single-choice answers are matched case-insensitively and normalised to
    the option's spelling.  Since there is nobody to re-prompt, a missing or
    rejected answer raises ``InvalidParameterError``.
    """

    def __init__(self, answers: Mapping[str, str] | None = None) -> None:
        self.answers = {k: v for k, v in (answers or {}).items() if v is not None}

    def ask(self, questions: Sequence[Question]) -> dict[str, str]:
        result: dict[str, str] = {}
        for question in questions:
            if question.key not in self.answers:
                raise InvalidParameterError(question.key, f"No answer given for '{question.key}'.")
            result[question.key] = self._accept(question, self.answers[question.key])
        return result

    @staticmethod
    def _accept(question: Question, answer: str) -> str:
        if question.kind is QuestionKind.SINGLE_CHOICE:
            for option in question.options:
                if option.lower() == answer.strip().lower():
                    return option
            raise InvalidParameterError(
                question.key,
                f"Invalid answer {answer!r} for '{question.key}'; choose one of "
                + ", ".join(question.options),
            )

        if question.validator is not None:
            verdict = question.validator(answer)
            if verdict is not True:
                raise InvalidParameterError(question.key, str(verdict))
        return answer.strip()


class RichChoiceProvider(StaticChoiceProvider):
    """Interactive provider backed by ``rich.prompt.Prompt``.

    Questions already answered through *preset* (e.g. command-line flags)
    are not asked again.  Free-text questions are re-asked until their
    validator accepts the answer.
    """

    def __init__(
        self,
        preset: Mapping[str, str] | None = None,
        *,
        console: Console | None = None,
    ) -> None:
        super().__init__(preset)
        self.console = console or default_console

    def ask(self, questions: Sequence[Question]) -> dict[str, str]:
        result: dict[str, str] = {}
        for question in questions:
            if question.key in self.answers:
                result[question.key] = self._accept(question, self.answers[question.key])
            elif question.kind is QuestionKind.SINGLE_CHOICE:
                result[question.key] = Prompt.ask(
                    question.prompt,
                    choices=list(question.options),
                    console=self.console,
                )
            else:
                result[question.key] = self._ask_free_text(question)
        return result

    def _ask_free_text(self, question: Question) -> str:
        while True:
            answer = Prompt.ask(question.prompt, console=self.console, default="", show_default=False)
            verdict = True if question.validator is None else question.validator(answer)
            if verdict is True:
                return answer.strip()
            print_error(str(verdict))
