from __future__ import annotations

import pytest

from conduit.cli import build_parser, main
from conduit.runtime import ConsolePrompter
from tests.fixtures.gateway_fake import FakePrompter, RecordingRuntime


def test_auth_add_cancel_exits_cleanly(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("CONDUIT_LOG_LEVEL", raising=False)
    runtime = RecordingRuntime()

    exit_code = main(["models", "auth", "add"], runtime=runtime, prompter=FakePrompter([None]))

    assert exit_code == 0
    assert runtime.logs == ["Cancelled."]


def test_auth_add_with_provider_flag(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("CONDUIT_LOG_LEVEL", raising=False)
    runtime = RecordingRuntime()
    prompter = FakePrompter(["api-key", "AIza-test", True])

    exit_code = main(
        ["--log-level", "debug", "models", "auth", "add", "--provider", "google"],
        runtime=runtime,
        prompter=prompter,
    )

    assert exit_code == 0
    assert runtime.logs == ["Added google credential (api-key)."]


def test_parser_rejects_unknown_provider() -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args(["models", "auth", "add", "--provider", "acme"])


def test_console_prompter_select_accepts_number_or_value() -> None:
    answers = iter(["9", "2"])
    written: list[str] = []
    prompter = ConsolePrompter(read=lambda _: next(answers), write=written.append)

    choice = prompter.select("Pick", [("a", "Alpha"), ("b", "Beta")])

    assert choice == "b"
    assert "Choose 1-2.\n" in written


def test_console_prompter_treats_eof_as_cancel() -> None:
    def _read(_: str) -> str:
        raise EOFError

    prompter = ConsolePrompter(read=_read, write=lambda _: None)

    assert prompter.select("Pick", [("a", "Alpha")]) is None
    assert prompter.text("Name?") is None
    assert prompter.confirm("Sure?") is None
