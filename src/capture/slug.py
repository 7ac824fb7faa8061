"""Filename slugs for captured notes."""

from __future__ import annotations

import re

# ASCII letters/digits, hyphen, Hangul syllables, Hangul compatibility jamo
_ALLOWED_RUN_RE = re.compile(r"[A-Za-z0-9\-가-힣ㄱ-ㅎㅏ-ㅣ]+")

MAX_SLUG_LENGTH = 50


def slugify(text: str) -> str:
    """Return a filesystem-safe, lowercase slug for *text*.

    Runs of disallowed characters collapse to a single ``-``; the result is
    cut to :data:`MAX_SLUG_LENGTH` characters.  An empty string means the
    caller should pick a fallback name.
    """
    runs = _ALLOWED_RUN_RE.findall(text)
    return "-".join(runs).lower()[:MAX_SLUG_LENGTH]
