"""Core Note dataclass."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from capture.frontmatter import decode, encode


@dataclass
class Note:
    """A single Markdown note: header fields plus free-form body."""

    header: dict[str, str] = field(default_factory=dict)
    body: str = ""
    #: Where the note was read from, if anywhere
    path: Path | None = None

    @classmethod
    def from_text(cls, text: str, path: Path | None = None) -> "Note":
        header, body = decode(text)
        return cls(header=header, body=body, path=path)

    def to_text(self) -> str:
        return encode(self.header, self.body)

    @property
    def title(self) -> str:
        """Header title, falling back to the filename stem."""
        title = self.header.get("title", "")
        if title:
            return title
        return self.path.stem if self.path is not None else ""

    def to_dict(self) -> dict[str, object]:
        return {
            "path": str(self.path) if self.path is not None else None,
            "title": self.title,
            "header": dict(self.header),
            "body": self.body,
        }
