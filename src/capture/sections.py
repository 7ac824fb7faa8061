"""Heading-delimited sections inside a note body.

A section starts at a heading (e.g. ``## Memos``) and runs until the next
second-level heading or the end of the body.  Sections are flat: ``###``
sub-headings belong to the enclosing section.
"""

from __future__ import annotations

import re

# Only second-level headings end a section
SECTION_BOUNDARY = "\n## "
LIST_MARKER = "- "


def find_section(body: str, heading: str, *, ignore_case: bool = False) -> tuple[int, int] | None:
    """Locate the first section titled *heading*.

    Returns ``(start, end)`` where ``start`` is the offset of the heading
    itself and ``end`` the offset of the next section boundary (or
    ``len(body)``).  Returns ``None`` when the heading does not occur.
    """
    if ignore_case:
        match = re.search(re.escape(heading), body, re.IGNORECASE)
        if match is None:
            return None
        start, after = match.start(), match.end()
    else:
        start = body.find(heading)
        if start == -1:
            return None
        after = start + len(heading)

    end = body.find(SECTION_BOUNDARY, after)
    if end == -1:
        end = len(body)
    return start, end


def extract_list_items(body: str, heading: str) -> list[str]:
    """Return the ``- item`` texts found under *heading* (case-insensitive).

    A missing heading yields an empty list.
    """
    span = find_section(body, heading, ignore_case=True)
    if span is None:
        return []

    start, end = span
    # skip the heading text itself; its match length equals len(heading)
    section = body[start + len(heading) : end]
    items: list[str] = []
    for line in section.split("\n"):
        line = line.strip()
        if line.startswith(LIST_MARKER):
            items.append(line[len(LIST_MARKER) :])
    return items


def replace_or_append_section(body: str, heading: str, new_section: str) -> str:
    """Replace the section titled *heading* (exact match) with *new_section*.

    *new_section* must carry its own heading line.  When *heading* is not
    present the new section is appended after a blank line.
    """
    span = find_section(body, heading)
    if span is None:
        return f"{body}\n\n{new_section}\n"

    start, end = span
    return body[:start] + new_section + body[end:]
