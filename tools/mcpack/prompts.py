"""Interactive prompting behind a small capability interface.

Commands never talk to the terminal directly; they ask a Prompter. The CLI
picks QuestionaryPrompter for interactive sessions and NonInteractivePrompter
for scripts (``--no-input`` or a non-TTY stdin). CannedPrompter replays
prepared answers for headless runs and tests.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Any, Iterable, Protocol, Sequence

import questionary

from mcpack.errors import MissingInputError, PromptAbortedError

logger = logging.getLogger(__name__)


class Prompter(Protocol):
    """Capability used by commands to collect missing answers."""

    def ask_text(self, message: str, default: str | None = None) -> str: ...

    def ask_confirm(self, message: str, default: bool = False) -> bool: ...

    def ask_select(self, message: str, choices: Sequence[str]) -> str: ...

    def ask_multi_select(
        self,
        message: str,
        choices: Sequence[str],
        defaults: Iterable[str] = (),
    ) -> list[str]: ...


class QuestionaryPrompter:
    """Terminal prompts rendered with questionary."""

    @staticmethod
    def _answer(message: str, question: questionary.Question) -> Any:
        # questionary returns None when the user hits Ctrl-C or Esc.
        answer = question.ask()
        if answer is None:
            raise PromptAbortedError(message)
        return answer

    def ask_text(self, message: str, default: str | None = None) -> str:
        return self._answer(message, questionary.text(message, default=default or ""))

    def ask_confirm(self, message: str, default: bool = False) -> bool:
        return bool(self._answer(message, questionary.confirm(message, default=default)))

    def ask_select(self, message: str, choices: Sequence[str]) -> str:
        return self._answer(message, questionary.select(message, choices=list(choices)))

    def ask_multi_select(
        self,
        message: str,
        choices: Sequence[str],
        defaults: Iterable[str] = (),
    ) -> list[str]:
        selected = set(defaults)
        question = questionary.checkbox(
            message,
            choices=[questionary.Choice(choice, checked=choice in selected) for choice in choices],
        )
        return list(self._answer(message, question))


class NonInteractivePrompter:
    """Answers every prompt with its default; prompts without one fail."""

    def ask_text(self, message: str, default: str | None = None) -> str:
        if default is None:
            raise MissingInputError(message)
        logger.debug("Using default for '%s': %s", message, default)
        return default

    def ask_confirm(self, message: str, default: bool = False) -> bool:
        logger.debug("Using default for '%s': %s", message, default)
        return default

    def ask_select(self, message: str, choices: Sequence[str]) -> str:
        raise MissingInputError(message)

    def ask_multi_select(
        self,
        message: str,
        choices: Sequence[str],
        defaults: Iterable[str] = (),
    ) -> list[str]:
        return list(defaults)


class CannedPrompter:
    """Replays prepared answers in order.

    Each call pops the next answer; ``messages`` records what was asked so a
    caller can check the conversation afterwards.

    Raises:
        MissingInputError: When a prompt is asked after the answers ran out
    """

    def __init__(self, answers: Iterable[Any] = ()) -> None:
        self.answers = deque(answers)
        self.messages: list[str] = []

    def _next(self, message: str) -> Any:
        self.messages.append(message)
        if not self.answers:
            raise MissingInputError(message)
        return self.answers.popleft()

    def ask_text(self, message: str, default: str | None = None) -> str:
        return str(self._next(message))

    def ask_confirm(self, message: str, default: bool = False) -> bool:
        return bool(self._next(message))

    def ask_select(self, message: str, choices: Sequence[str]) -> str:
        answer = self._next(message)
        if answer not in choices:
            raise ValueError(f"Canned answer {answer!r} is not one of {list(choices)}")
        return answer

    def ask_multi_select(
        self,
        message: str,
        choices: Sequence[str],
        defaults: Iterable[str] = (),
    ) -> list[str]:
        return list(self._next(message))
