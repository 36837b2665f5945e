from __future__ import annotations

import pytest

from conduit.commands.auth import AuthCredential, models_auth_add_command
from tests.fixtures.gateway_fake import FakePrompter, RecordingRuntime


def test_cancelled_provider_select_stops_the_flow() -> None:
    prompter = FakePrompter([None])
    runtime = RecordingRuntime()

    assert models_auth_add_command({}, runtime, prompter) is None
    assert runtime.logs == ["Cancelled."]
    assert prompter.kinds() == ["select"]
    assert runtime.exit_codes == []


def test_cancelled_method_select_stops_the_flow() -> None:
    prompter = FakePrompter(["anthropic", None])
    runtime = RecordingRuntime()

    assert models_auth_add_command({}, runtime, prompter) is None
    assert runtime.logs == ["Cancelled."]
    assert prompter.kinds() == ["select", "select"]


@pytest.mark.parametrize(
    ("answers", "asked"),
    [
        (["google", "api-key", None], ["select", "select", "text"]),
        (["google", "api-key", "key-123", None], ["select", "select", "text", "confirm"]),
    ],
)
def test_cancelling_later_prompts_stops_the_flow(answers: list[object], asked: list[str]) -> None:
    prompter = FakePrompter(answers)
    runtime = RecordingRuntime()

    assert models_auth_add_command({}, runtime, prompter) is None
    assert runtime.logs == ["Cancelled."]
    assert prompter.kinds() == asked


def test_completed_flow_returns_credential() -> None:
    prompter = FakePrompter(["anthropic", "token", "  tok-abc  ", True])
    runtime = RecordingRuntime()

    credential = models_auth_add_command({}, runtime, prompter)

    assert credential == AuthCredential("anthropic", "token", "tok-abc", make_default=True)
    assert runtime.logs == ["Added anthropic credential (token)."]
    assert "tok-abc" not in repr(credential)


def test_options_skip_prompts() -> None:
    prompter = FakePrompter(["sk-1", False])
    runtime = RecordingRuntime()

    credential = models_auth_add_command({"provider": "openai", "method": "api-key"}, runtime, prompter)

    assert credential is not None
    assert credential.provider == "openai"
    assert prompter.kinds() == ["text", "confirm"]


@pytest.mark.parametrize(
    ("options", "answers"),
    [
        ({"provider": "acme"}, []),
        ({"provider": "openai", "method": "oauth"}, []),
        ({"provider": "openai", "method": "api-key"}, ["   "]),
    ],
)
def test_invalid_input_reports_error_and_exits(options: dict[str, str], answers: list[object]) -> None:
    prompter = FakePrompter(answers)
    runtime = RecordingRuntime()

    assert models_auth_add_command(options, runtime, prompter) is None
    assert len(runtime.errors) == 1
    assert runtime.exit_codes == [1]
    assert "Cancelled." not in runtime.logs
