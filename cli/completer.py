"""Custom completer for the File Registry CLI with kind autocompletion."""

from typing import Iterable

from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.document import Document

from cli.constants import COMMANDS, KIND_NAMES

# Position of the <kind> argument for commands that take one.
KIND_ARGUMENT_INDEX = {
    "create": 2,
    "update": 3,
}


class RegistryCompleter(Completer):
    """
    Custom completer that provides:
    - Command name completion for the first token
    - File kind completion for the kind argument of 'create' and 'update'
    """

    def get_completions(
        self, document: Document, complete_event
    ) -> Iterable[Completion]:
        text = document.text_before_cursor
        tokens = text.split()

        is_typing_new_token = text.endswith(" ") or not tokens

        if not tokens or (len(tokens) == 1 and not is_typing_new_token):
            yield from self._complete_commands(tokens[0] if tokens else "")
            return

        command = tokens[0].lower()
        kind_index = KIND_ARGUMENT_INDEX.get(command)
        if kind_index is None:
            return

        current_index = len(tokens) if is_typing_new_token else len(tokens) - 1
        if current_index != kind_index:
            return

        current_word = "" if is_typing_new_token else tokens[-1]
        yield from self._complete_kinds(current_word)

    def _complete_commands(self, partial: str) -> Iterable[Completion]:
        """Complete command names matching the partial input."""
        partial_lower = partial.lower()
        for cmd in COMMANDS:
            if cmd.startswith(partial_lower):
                yield Completion(cmd, start_position=-len(partial))

    def _complete_kinds(self, partial: str) -> Iterable[Completion]:
        partial_lower = partial.lower()
        for kind in KIND_NAMES:
            if kind.startswith(partial_lower):
                yield Completion(kind, start_position=-len(partial))
