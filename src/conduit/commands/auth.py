"""``models auth add``: collect a provider credential interactively."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Mapping

from conduit.runtime import Prompter, RuntimeEnv

LOGGER = logging.getLogger(__name__)

CANCELLED = "Cancelled."


@dataclass(frozen=True, slots=True)
class AuthProvider:
    """A provider and the credential methods it accepts."""

    id: str
    label: str
    methods: tuple[tuple[str, str], ...]


PROVIDERS: Mapping[str, AuthProvider] = {
    provider.id: provider
    for provider in (
        AuthProvider(
            "anthropic",
            "Anthropic",
            (("api-key", "API key"), ("token", "Setup token")),
        ),
        AuthProvider(
            "google",
            "Google",
            (("api-key", "API key"), ("oauth", "OAuth access token")),
        ),
        AuthProvider("openai", "OpenAI", (("api-key", "API key"),)),
    )
}


@dataclass(frozen=True, slots=True)
class AuthCredential:
    """Credential collected by :func:`models_auth_add_command`."""

    provider: str
    method: str
    secret: str
    make_default: bool = False

    def __repr__(self) -> str:
        return (
            f"AuthCredential(provider={self.provider!r}, method={self.method!r}, "
            f"secret='***', make_default={self.make_default!r})"
        )


def models_auth_add_command(
    options: Mapping[str, str | None],
    runtime: RuntimeEnv,
    prompter: Prompter,
) -> AuthCredential | None:
    """Run the add-credential flow.

    Cancelling any prompt stops the flow at once: ``"Cancelled."`` is logged a
    single time and no later prompt is shown. Returns ``None`` when cancelled
    or when the options name an unknown provider or method.
    """

    provider_id = options.get("provider")
    if provider_id is None:
        provider_id = prompter.select(
            "Select a provider",
            [(provider.id, provider.label) for provider in PROVIDERS.values()],
        )
        if provider_id is None:
            return _cancel(runtime)

    provider = PROVIDERS.get(provider_id)
    if provider is None:
        runtime.error(f"Unknown provider: {provider_id}")
        runtime.exit(1)
        return None

    method = options.get("method")
    if method is None:
        method = prompter.select(f"Select an auth method for {provider.label}", list(provider.methods))
        if method is None:
            return _cancel(runtime)

    method_labels = dict(provider.methods)
    if method not in method_labels:
        runtime.error(f"Unknown auth method for {provider.label}: {method}")
        runtime.exit(1)
        return None

    secret = prompter.text(f"Paste your {provider.label} {method_labels[method]}:", secret=True)
    if secret is None:
        return _cancel(runtime)
    secret = secret.strip()
    if not secret:
        runtime.error("Credential must not be empty.")
        runtime.exit(1)
        return None

    make_default = prompter.confirm(f"Use this credential by default for {provider.label}?")
    if make_default is None:
        return _cancel(runtime)

    LOGGER.info("collected credential provider=%s method=%s", provider.id, method)
    runtime.log(f"Added {provider.id} credential ({method}).")
    return AuthCredential(provider.id, method, secret, make_default=make_default)


def _cancel(runtime: RuntimeEnv) -> None:
    runtime.log(CANCELLED)
    return None
