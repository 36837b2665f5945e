"""Process-facing surfaces used by command flows."""

from __future__ import annotations

from dataclasses import dataclass
import sys
from typing import Callable, NoReturn, Protocol, Sequence


class RuntimeEnv(Protocol):
    """Where commands report output and request process exit."""

    def log(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...

    def exit(self, code: int) -> None: ...


@dataclass(slots=True)
class _ConsoleRuntime:
    def log(self, message: str) -> None:
        sys.stdout.write(f"{message}\n")

    def error(self, message: str) -> None:
        sys.stderr.write(f"{message}\n")

    def exit(self, code: int) -> NoReturn:
        raise SystemExit(code)


def default_runtime() -> RuntimeEnv:
    return _ConsoleRuntime()


class Prompter(Protocol):
    """Interactive prompts; every method returns ``None`` when cancelled."""

    def select(self, message: str, options: Sequence[tuple[str, str]]) -> str | None: ...

    def text(self, message: str, *, secret: bool = False) -> str | None: ...

    def confirm(self, message: str) -> bool | None: ...


class ConsolePrompter:
    """:class:`Prompter` reading answers from standard input.

    End-of-file and Ctrl-C cancel the current prompt. Selections accept either
    the option number or its value.
    """

    def __init__(
        self,
        read: Callable[[str], str] = input,
        write: Callable[[str], object] = sys.stdout.write,
    ) -> None:
        self._read = read
        self._write = write

    def select(self, message: str, options: Sequence[tuple[str, str]]) -> str | None:
        self._write(f"{message}\n")
        for index, (_, label) in enumerate(options, start=1):
            self._write(f"  {index}) {label}\n")
        values = [value for value, _ in options]
        while True:
            answer = self._ask("> ")
            if answer is None:
                return None
            if answer.isdigit() and 1 <= int(answer) <= len(values):
                return values[int(answer) - 1]
            if answer in values:
                return answer
            self._write(f"Choose 1-{len(values)}.\n")

    def text(self, message: str, *, secret: bool = False) -> str | None:
        if secret:
            from getpass import getpass

            try:
                return getpass(f"{message} ")
            except (EOFError, KeyboardInterrupt):
                return None
        return self._ask(f"{message} ")

    def confirm(self, message: str) -> bool | None:
        answer = self._ask(f"{message} [y/N] ")
        if answer is None:
            return None
        return answer.lower() in ("y", "yes")

    def _ask(self, prompt: str) -> str | None:
        try:
            return self._read(prompt).strip()
        except (EOFError, KeyboardInterrupt):
            return None


__all__ = ["ConsolePrompter", "Prompter", "RuntimeEnv", "default_runtime"]
