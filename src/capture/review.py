"""Daily review: turn the day's memos into a curated ``## Daily Review``.

The model sorts the memos into achievements, ideas and todos and adds a
one-line summary.  :meth:`DailyReview.to_markdown` renders the result as a
section that :meth:`capture.store.VaultStore.update_daily_review` writes
back into the daily note, replacing any earlier review.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from capture.errors import InvalidResponseError
from capture.prompts import DAILY_SUMMARY_PROMPT, DEFAULT_DAILY_SUMMARY_PROMPT
from capture.store import REVIEW_HEADING

if TYPE_CHECKING:
    from capture.ollama import OllamaClient
    from capture.prompts import PromptLibrary

REVIEW_TIMEOUT = 60.0

ACHIEVEMENTS_HEADING = "### 오늘의 성과"
IDEAS_HEADING = "### 아이디어"
TODOS_HEADING = "### 할 일"


def _string_list(data: dict[str, Any], key: str) -> list[str]:
    value = data.get(key) or []
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise InvalidResponseError(f"{key!r} must be a list of strings")
    return value


@dataclass
class DailyReview:
    achievements: list[str] = field(default_factory=list)
    ideas: list[str] = field(default_factory=list)
    todos: list[str] = field(default_factory=list)
    summary: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "DailyReview":
        summary = data.get("summary")
        if not isinstance(summary, str):
            raise InvalidResponseError("'summary' must be a string")
        return cls(
            achievements=_string_list(data, "achievements"),
            ideas=_string_list(data, "ideas"),
            todos=_string_list(data, "todos"),
            summary=summary,
        )

    def to_markdown(self) -> str:
        """Render as a ``## Daily Review`` section; empty groups are skipped."""
        blocks = [REVIEW_HEADING]
        if self.achievements:
            blocks.append(ACHIEVEMENTS_HEADING)
            blocks.append("\n".join(f"- {a}" for a in self.achievements))
        if self.ideas:
            blocks.append(IDEAS_HEADING)
            blocks.append("\n".join(f"- {i}" for i in self.ideas))
        if self.todos:
            blocks.append(TODOS_HEADING)
            blocks.append("\n".join(f"- [ ] {t}" for t in self.todos))
        blocks.append(f"> {self.summary}")
        return "\n\n".join(blocks)


def build_review_prompt(memos: list[str]) -> str:
    memo_lines = "\n".join(f"- {m}" for m in memos)
    return f"다음 메모들을 분석해줘:\n\n{memo_lines}"


def generate_review(
    client: "OllamaClient", prompts: "PromptLibrary", memos: list[str]
) -> DailyReview:
    if not memos:
        raise ValueError("No memos to review.")
    system = prompts.load_or_default(DAILY_SUMMARY_PROMPT, DEFAULT_DAILY_SUMMARY_PROMPT)
    result = client.generate(build_review_prompt(memos), system=system, timeout=REVIEW_TIMEOUT)
    return DailyReview.from_dict(result)
