"""Exceptions raised by the vault façade and the AI collaborators.

The document engine itself (:mod:`capture.frontmatter`,
:mod:`capture.sections`, :mod:`capture.slug`) never raises; everything here
belongs to the layers that touch the filesystem or the network.  ``str(exc)``
is a message suitable for showing to the user.
"""

from __future__ import annotations

from pathlib import Path


class CaptureError(Exception):
    """Base class for all user-facing capture errors."""


class VaultNotConfiguredError(CaptureError):
    def __init__(self) -> None:
        super().__init__("Vault path is not configured.")


class DailyNoteNotFoundError(CaptureError):
    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Daily note not found: {path.name}")


class PromptNotFoundError(CaptureError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Prompt file not found: {name}")


class BackendUnavailableError(CaptureError):
    def __init__(self, detail: str = "") -> None:
        message = "Cannot connect to the Ollama server."
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class InvalidResponseError(CaptureError):
    def __init__(self, detail: str = "") -> None:
        message = "Could not parse the Ollama response."
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)
