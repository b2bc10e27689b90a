"""Interactive ex command resolver with prompt_toolkit integration."""

import logging
from pathlib import Path

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.history import FileHistory

from exmap.cli import describe, run_hints, run_lookup
from exmap.commands import ExMap
from exmap.config import ExSettings
from exmap.exceptions import ExMapError

LOGGER = logging.getLogger(__name__)

BUILTINS = {
    "help",
    "commands",
    "scope",
    "quit",
}


def parse_input(text: str) -> tuple[str, str]:
    """Split input into a command token and the rest of the line.

    A leading ``:`` marks a REPL builtin; the token keeps it. The command
    name ends at the first character that cannot be part of a name, so
    ``w!`` and ``s/a/b/`` yield ``w`` and ``s``.
    """
    text = text.strip()
    if not text:
        return "", ""
    if text.startswith(":"):
        parts = text[1:].split(None, 1)
        cmd = ":" + (parts[0] if parts else "")
        args = parts[1].strip() if len(parts) > 1 else ""
        return cmd, args
    if not text[0].isalpha():
        return text[0], text[1:].strip()
    end = 1
    while end < len(text) and text[end].isalpha():
        end += 1
    return text[:end], text[end:].strip()


class ReplApp:
    """Resolves typed command names and shows their syntax hints."""

    def __init__(self, settings: ExSettings, ex_map: ExMap) -> None:
        self._settings = settings
        self._ex_map = ex_map
        self._scope = settings.default_scope

    @property
    def scope(self) -> str | None:
        return self._scope

    def is_builtin(self, cmd: str) -> bool:
        """Check if a token is a REPL builtin such as ``:help``."""
        return cmd.startswith(":") and cmd[1:] in BUILTINS

    def get_completions(self) -> list[str]:
        """Get all completable words for the prompt."""
        words = [f":{name}" for name in BUILTINS]
        words.extend(self._ex_map.all_names())
        return sorted(set(words))

    def _handle_help(self, args: str) -> None:
        if args:
            run_lookup(self._ex_map, args, self._scope)
            return
        print("REPL commands:")
        for name in sorted(BUILTINS):
            print(f"  :{name}")
        print("\nType any abbreviated ex command name to resolve it.")

    def _handle_scope(self, args: str) -> None:
        if not args:
            print(f"Current scope: {self._scope or '(none)'}")
            return
        self._scope = None if args == "-" else args
        print(f"Scope set to: {self._scope or '(none)'}")

    def handle(self, text: str) -> bool:
        """Process one line of input. Returns False when the REPL should stop."""
        cmd, args = parse_input(text)
        if not cmd:
            return True

        if cmd == ":quit":
            return False
        elif cmd == ":help":
            self._handle_help(args)
        elif cmd == ":commands":
            run_hints(self._ex_map, self._scope)
        elif cmd == ":scope":
            self._handle_scope(args)
        elif cmd.startswith(":"):
            print(f"Unknown REPL command: {cmd}")
        else:
            result = self._ex_map.resolve(cmd, self._scope)
            if result.mapping is None:
                run_lookup(self._ex_map, cmd, self._scope)
            else:
                print(describe(self._ex_map, result.mapping, prefix=cmd))
        return True

    def run(self) -> int:
        """Run the REPL loop."""
        history_path = Path(self._settings.history_file).expanduser()
        history_path.parent.mkdir(parents=True, exist_ok=True)
        session: PromptSession[str] = PromptSession(
            history=FileHistory(str(history_path)),
            completer=WordCompleter(self.get_completions()),
        )

        LOGGER.info("REPL started with %d commands", len(self._ex_map))
        print("exmap ready. Type ':help' for commands.\n")

        while True:
            try:
                text = session.prompt(self._settings.prompt)
            except KeyboardInterrupt:
                continue
            except EOFError:
                print("\nBye.")
                return 0

            try:
                if not self.handle(text):
                    print("Bye.")
                    return 0
            except ExMapError as e:
                print(f"Error: {e}")
