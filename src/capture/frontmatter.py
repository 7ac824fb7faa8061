"""Header/body codec for captured Markdown notes.

The header is a deliberately small subset of YAML front-matter::

    ---
    date: "2026-02-07"
    tags: ["개발", "학습"]
    title: "My note"
    ---

    Body text...

Every value is kept as a string.  Bracketed values (``[...]``) are *raw*
literals and are written back verbatim; everything else is a *scalar* that
is double-quoted on output and has one layer of matching quotes removed on
input.  There is no escaping and no nesting.
"""

from __future__ import annotations

DELIMITER = "---"
# Closing delimiter: searched for after the opening one
_CLOSING_MARKER = "\n" + DELIMITER


def is_raw_value(value: str) -> bool:
    """True for bracketed literals such as inline lists."""
    return value.startswith("[") and value.endswith("]")


def _strip_quotes(value: str) -> str:
    if (value.startswith('"') and value.endswith('"')) or (
        value.startswith("'") and value.endswith("'")
    ):
        return value[1:-1]
    return value


def _parse_header_block(block: str) -> dict[str, str]:
    header: dict[str, str] = {}
    for line in block.split("\n"):
        line = line.strip()
        if not line:
            continue
        key, sep, value = line.partition(":")
        if not sep:
            continue
        # last duplicate key wins
        header[key.strip()] = _strip_quotes(value.strip())
    return header


def _locate_header(text: str) -> tuple[int, int, int] | None:
    """Offsets into *text* of the header block and the closing marker.

    Returns ``(block_start, block_end, header_end)`` or ``None`` when *text*
    has no complete header.
    """
    trimmed = text.strip()
    if not trimmed.startswith(DELIMITER):
        return None

    block_start = len(text) - len(text.lstrip()) + len(DELIMITER)
    block_end = text.find(_CLOSING_MARKER, block_start)
    if block_end == -1:
        return None
    return block_start, block_end, block_end + len(_CLOSING_MARKER)


def header_end(text: str) -> int:
    """Offset just past the closing delimiter, or ``0`` without a header.

    ``text[:header_end(text)]`` is the raw header exactly as written.
    """
    span = _locate_header(text)
    return span[2] if span is not None else 0


def decode(text: str) -> tuple[dict[str, str], str]:
    """Split a header block from body text.

    Returns ``(header, body)``.  When *text* has no header, or opens one
    without closing it, ``header`` is empty and ``body`` is *text* untouched.
    """
    span = _locate_header(text)
    if span is None:
        return {}, text

    block_start, block_end, end = span
    header = _parse_header_block(text[block_start:block_end])
    body = text[end:].rstrip().strip("\r\n")
    return header, body


def encode(header: dict[str, str], body: str) -> str:
    """Render *header* and *body* as a note document.

    Keys are emitted in sorted order.  With an empty header the body is
    returned as is.
    """
    if not header:
        return body

    lines = []
    for key, value in sorted(header.items()):
        if is_raw_value(value):
            lines.append(f"{key}: {value}")
        else:
            lines.append(f'{key}: "{value}"')
    block = "\n".join(lines)
    return f"{DELIMITER}\n{block}\n{DELIMITER}\n\n{body}\n"
