"""AI tag suggestions for a note being captured."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from capture.errors import InvalidResponseError
from capture.prompts import DEFAULT_TAGGER_PROMPT, TAGGER_PROMPT

if TYPE_CHECKING:
    from capture.ollama import OllamaClient
    from capture.prompts import PromptLibrary

TAGGER_TIMEOUT = 30.0


@dataclass
class TagSuggestion:
    tags: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TagSuggestion":
        tags = data.get("tags")
        if not isinstance(tags, list) or not all(isinstance(t, str) for t in tags):
            raise InvalidResponseError("'tags' must be a list of strings")
        return cls(tags=tags)

    def filtered(self, allowed: list[str]) -> list[str]:
        """Suggested tags that are part of the *allowed* vocabulary."""
        return [t for t in self.tags if t in allowed]


def build_tagger_prompt(title: str, content: str, available_tags: list[str]) -> str:
    tag_list = ", ".join(f'"{t}"' for t in available_tags)
    return f"Allowed tags: [{tag_list}]\n\nTitle: {title}\nContent: {content}"


def suggest_tags(
    client: "OllamaClient",
    prompts: "PromptLibrary",
    title: str,
    content: str,
    available_tags: list[str],
) -> list[str]:
    """Ask the model for tags and keep only those in *available_tags*."""
    if not title and not content:
        return []
    system = prompts.load_or_default(TAGGER_PROMPT, DEFAULT_TAGGER_PROMPT)
    result = client.generate(
        build_tagger_prompt(title, content, available_tags),
        system=system,
        timeout=TAGGER_TIMEOUT,
    )
    return TagSuggestion.from_dict(result).filtered(available_tags)
