"""VaultStore: file-level access to captured notes and daily notes.

Layout inside the vault root::

    Inbox/2026-02-07-swift-학습-노트.md   – notes created by quick capture
    Daily/2026-02-07.md                   – dated notes with a ``## Memos`` list

Every write replaces the whole file atomically, so a failed write never
leaves a half-rewritten note behind.  One writer per note is assumed.
"""

from __future__ import annotations

import os
import stat
from collections.abc import Iterable
from datetime import date
from pathlib import Path
from tempfile import NamedTemporaryFile

from capture.errors import DailyNoteNotFoundError
from capture.frontmatter import header_end
from capture.note import Note
from capture.sections import extract_list_items, replace_or_append_section
from capture.slug import slugify

MEMOS_HEADING = "## Memos"
REVIEW_HEADING = "## Daily Review"
#: Filename stem used when a title yields an empty slug
FALLBACK_STEM = "메모"


def format_tags(tags: Iterable[str]) -> str:
    """Render *tags* as a raw inline-list header value: ``["a", "b"]``."""
    return "[" + ", ".join(f'"{t}"' for t in tags) + "]"


def _target_mode(path: Path) -> int:
    """Mode of the existing file, or the umask default for a new one."""
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def atomic_write_text(path: Path, text: str) -> None:
    """Write *text* to *path* via a temp file and ``os.replace``.

    The file keeps its permission bits; new files get the umask default.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    mode = _target_mode(path)
    tmp = None
    try:
        tmp = NamedTemporaryFile(
            "w", encoding="utf-8", dir=str(path.parent), suffix=".tmp", delete=False
        )
        tmp.write(text)
        tmp.flush()
        os.fsync(tmp.fileno())
        tmp.close()
        os.chmod(tmp.name, mode)
        os.replace(tmp.name, path)
    finally:
        if tmp is not None:
            tmp.close()
            if os.path.exists(tmp.name):
                os.unlink(tmp.name)


class VaultStore:
    """Creates Inbox notes and edits daily notes under a vault root."""

    def __init__(self, vault_dir: Path, *, inbox: str = "Inbox", daily: str = "Daily") -> None:
        self.vault_dir = Path(vault_dir)
        self.inbox = inbox
        self.daily = daily

    # ------------------------------------------------------------------
    # Paths
    # ------------------------------------------------------------------

    @property
    def is_valid(self) -> bool:
        return self.vault_dir.exists()

    @property
    def inbox_dir(self) -> Path:
        return self.vault_dir / self.inbox

    @property
    def daily_dir(self) -> Path:
        return self.vault_dir / self.daily

    def daily_note_path(self, day: date) -> Path:
        return self.daily_dir / f"{day.isoformat()}.md"

    def _unused_path(self, directory: Path, stem: str) -> Path:
        path = directory / f"{stem}.md"
        n = 2
        while path.exists():
            path = directory / f"{stem}-{n}.md"
            n += 1
        return path

    # ------------------------------------------------------------------
    # Capture
    # ------------------------------------------------------------------

    def create_note(
        self,
        title: str,
        content: str,
        tags: Iterable[str] = (),
        *,
        on: date | None = None,
    ) -> Path:
        """Write a new note into the Inbox folder and return its path.

        The filename is ``<date>-<slug>.md``; an existing file is never
        overwritten, a ``-2``, ``-3``, … suffix is added instead.
        """
        day = (on or date.today()).isoformat()
        slug = slugify(title)
        stem = f"{day}-{slug}" if slug else f"{day}-{FALLBACK_STEM}"

        note = Note(
            header={"title": title, "date": day, "tags": format_tags(tags)},
            body=content,
        )

        self.inbox_dir.mkdir(parents=True, exist_ok=True)
        path = self._unused_path(self.inbox_dir, stem)
        atomic_write_text(path, note.to_text())
        return path

    def read_note(self, path: Path | str) -> Note:
        """Read and decode a note; relative paths resolve under the vault."""
        path = Path(path)
        if not path.is_absolute():
            path = self.vault_dir / path
        return Note.from_text(path.read_text(encoding="utf-8"), path=path)

    # ------------------------------------------------------------------
    # Daily notes
    # ------------------------------------------------------------------

    def extract_memos(self, day: date, heading: str = MEMOS_HEADING) -> list[str]:
        """Return the list items under *heading* in the daily note for *day*.

        A missing daily note simply has no memos.
        """
        path = self.daily_note_path(day)
        if not path.exists():
            return []
        note = self.read_note(path)
        return extract_list_items(note.body, heading)

    def update_daily_review(
        self, day: date, review_markdown: str, heading: str = REVIEW_HEADING
    ) -> Path:
        """Replace (or append) the review section of the daily note for *day*.

        Only the body is edited; the raw header is written back byte for
        byte, never re-encoded.
        """
        path = self.daily_note_path(day)
        if not path.exists():
            raise DailyNoteNotFoundError(path)
        text = path.read_text(encoding="utf-8")
        cut = header_end(text)
        body = replace_or_append_section(text[cut:], heading, review_markdown)
        atomic_write_text(path, text[:cut] + body)
        return path
