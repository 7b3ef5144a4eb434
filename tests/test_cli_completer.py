"""Tests for RegistryCompleter."""

import pytest

from prompt_toolkit.document import Document

from cli.completer import RegistryCompleter
from cli.constants import COMMANDS, KIND_NAMES


@pytest.fixture
def completer():
    return RegistryCompleter()


def get_completions_list(completer, text):
    """Helper to get list of completion texts from completer."""
    doc = Document(text, len(text))
    return [c.text for c in completer.get_completions(doc, None)]


class TestCommandCompletion:
    def test_empty_input_shows_all_commands(self, completer):
        assert get_completions_list(completer, "") == COMMANDS

    def test_partial_command_filters(self, completer):
        completions = get_completions_list(completer, "up")
        assert completions == ["update"]

    def test_command_completion_case_insensitive(self, completer):
        assert "create" in get_completions_list(completer, "CR")


class TestKindCompletion:
    def test_create_kind_position(self, completer):
        assert get_completions_list(completer, "create report.pdf ") == KIND_NAMES

    def test_create_kind_partial(self, completer):
        assert get_completions_list(completer, "create report.pdf p") == ["pdf", "pptx", "png"]

    def test_update_kind_position(self, completer):
        assert get_completions_list(completer, "update 0 report.pdf d") == ["docx"]

    def test_no_completion_for_name_position(self, completer):
        assert get_completions_list(completer, "create ") == []

    def test_no_completion_after_kind(self, completer):
        assert get_completions_list(completer, "create report.pdf pdf ") == []

    def test_no_completion_for_other_commands(self, completer):
        assert get_completions_list(completer, "read ") == []
