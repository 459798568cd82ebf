import pytest

from mcpack import prompts
from mcpack.errors import MissingInputError, PromptAbortedError
from mcpack.prompts import CannedPrompter, NonInteractivePrompter, QuestionaryPrompter


def test_non_interactive_uses_defaults():
    prompter = NonInteractivePrompter()
    assert prompter.ask_text("Name", default="my-datapack") == "my-datapack"
    assert prompter.ask_confirm("Overwrite?") is False
    assert prompter.ask_confirm("Continue?", default=True) is True
    assert prompter.ask_multi_select("Pick", ["a", "b"], defaults=["b"]) == ["b"]


def test_non_interactive_fails_without_default():
    prompter = NonInteractivePrompter()
    with pytest.raises(MissingInputError):
        prompter.ask_text("Enter custom namespace")
    with pytest.raises(MissingInputError):
        prompter.ask_select("Select namespace", ["a", "b"])


def test_canned_prompter_replays_in_order():
    prompter = CannedPrompter(["demo", True, "b", ["x"]])
    assert prompter.ask_text("first") == "demo"
    assert prompter.ask_confirm("second") is True
    assert prompter.ask_select("third", ["a", "b"]) == "b"
    assert prompter.ask_multi_select("fourth", ["x", "y"]) == ["x"]
    assert prompter.messages == ["first", "second", "third", "fourth"]


def test_canned_prompter_runs_out():
    with pytest.raises(MissingInputError):
        CannedPrompter().ask_confirm("anything")


def test_canned_select_must_be_a_choice():
    with pytest.raises(ValueError):
        CannedPrompter(["z"]).ask_select("pick", ["a", "b"])


class _FakeQuestion:
    def __init__(self, answer):
        self.answer = answer

    def ask(self):
        return self.answer


def test_questionary_cancel_raises(monkeypatch):
    monkeypatch.setattr(prompts.questionary, "text", lambda message, default="": _FakeQuestion(None))
    with pytest.raises(PromptAbortedError):
        QuestionaryPrompter().ask_text("Name")


def test_questionary_checkbox_marks_defaults(monkeypatch):
    seen = {}

    def fake_checkbox(message, choices):
        seen["checked"] = [choice.title for choice in choices if choice.checked]
        return _FakeQuestion(["b"])

    monkeypatch.setattr(prompts.questionary, "checkbox", fake_checkbox)
    answer = QuestionaryPrompter().ask_multi_select("Pick", ["a", "b"], defaults=["a"])
    assert answer == ["b"]
    assert seen["checked"] == ["a"]
