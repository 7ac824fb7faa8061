"""System prompts stored as Markdown files inside the vault.

Prompts live in ``System/Prompts/<name>.md`` so they can be edited from the
vault like any other note.  When a prompt file is missing the built-in
default below is used instead.
"""

from __future__ import annotations

import sys
from pathlib import Path

from capture.errors import PromptNotFoundError

TAGGER_PROMPT = "Tagger"
DAILY_SUMMARY_PROMPT = "DailySummary"

DEFAULT_TAGGER_PROMPT = """\
You are a tag suggestion assistant. Given a note's title and content, suggest the most relevant tags from the provided allowed tag list.

Rules:
- Select 1-3 tags that best describe the note
- Only return tags from the allowed list
- If no tags fit, return empty array

Output strictly in JSON: {"tags": ["태그1", "태그2"]}"""

DEFAULT_DAILY_SUMMARY_PROMPT = """\
You are a personal assistant that organizes daily memos.

Given a list of memo items from today, organize them into these categories:
- **achievements**: Things completed or progress made
- **ideas**: New ideas, insights, or things to explore
- **todos**: Action items or tasks to do

Also provide a one-sentence summary of the day in Korean.

Output strictly in JSON format:
{
  "achievements": ["achievement 1", "achievement 2"],
  "ideas": ["idea 1"],
  "todos": ["todo 1", "todo 2"],
  "summary": "한국어로 오늘 하루 한줄 요약"
}"""


class PromptLibrary:
    """Loads named prompt files from the vault."""

    def __init__(self, vault_dir: Path, folder: str = "System/Prompts") -> None:
        self.prompts_dir = Path(vault_dir) / folder

    def path_for(self, name: str) -> Path:
        return self.prompts_dir / f"{name}.md"

    def load(self, name: str) -> str:
        """Return the text of prompt *name* or raise :class:`PromptNotFoundError`."""
        path = self.path_for(name)
        if not path.is_file():
            raise PromptNotFoundError(name)
        return path.read_text(encoding="utf-8")

    def load_or_default(self, name: str, default: str) -> str:
        try:
            return self.load(name)
        except PromptNotFoundError:
            print(f"[warn] Prompt {name!r} not found, using built-in default", file=sys.stderr)
            return default
