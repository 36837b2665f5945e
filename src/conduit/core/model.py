"""Model descriptors used to pick provider conversion rules."""

from __future__ import annotations

from dataclasses import dataclass

_FAMILY_PREFIXES = (
    ("gemini", "gemini"),
    ("claude", "claude"),
)

DEFAULT_FAMILY = "default"


@dataclass(frozen=True, slots=True)
class Model:
    """A model reachable through a provider API.

    The same wire API can front several model families, e.g. Claude models
    served through the Google generative-AI surface, so conversion rules key
    off :attr:`family` rather than :attr:`api`.
    """

    id: str
    provider: str
    api: str = "google-generative-ai"
    input: tuple[str, ...] = ("text",)
    reasoning: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.id, str) or not self.id:
            msg = "model id must be a non-empty string"
            raise ValueError(msg)
        object.__setattr__(self, "input", tuple(self.input))

    @property
    def family(self) -> str:
        model_id = self.id.lower()
        # Strip a "models/" style resource prefix.
        model_id = model_id.rsplit("/", 1)[-1]
        for prefix, family in _FAMILY_PREFIXES:
            if model_id.startswith(prefix):
                return family
        return DEFAULT_FAMILY

    @property
    def supports_images(self) -> bool:
        return "image" in self.input
