"""Runtime configuration for the capture app.

Settings are read from an optional TOML file::

    [capture]
    vault_path   = "~/Obsidian/Main"
    ollama_url   = "http://localhost:11434"
    ollama_model = "llama3"
    tags         = ["개발", "학습", "도구"]

Environment variables (all optional; direct kwargs take precedence):
    CAPTURE_VAULT_PATH    – root folder of the vault
    CAPTURE_OLLAMA_URL    – base URL of the Ollama server
    CAPTURE_OLLAMA_MODEL  – model used for tagging and reviews
    CAPTURE_TAGS          – comma-separated tag vocabulary

The resulting :class:`CaptureConfig` is passed explicitly to the store and
the AI helpers; nothing in the package reads process-wide settings itself.
"""

from __future__ import annotations

import os
import sys
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from capture.errors import VaultNotConfiguredError

DEFAULT_OLLAMA_URL = "http://localhost:11434"
DEFAULT_OLLAMA_MODEL = "llama3"
DEFAULT_TAGS = ["개발", "디자인", "업무", "학습", "아이디어", "회의", "자동화", "도구"]


def _split_tags(raw: str) -> list[str]:
    return [t.strip() for t in raw.split(",") if t.strip()]


@dataclass
class CaptureConfig:
    vault_path: Path | None = None
    ollama_url: str = DEFAULT_OLLAMA_URL
    ollama_model: str = DEFAULT_OLLAMA_MODEL
    available_tags: list[str] = field(default_factory=lambda: list(DEFAULT_TAGS))

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CaptureConfig":
        section = data.get("capture", data)
        tags = section.get("tags", DEFAULT_TAGS)
        if isinstance(tags, str):
            tags = _split_tags(tags)
        vault_path = section.get("vault_path") or None
        return cls(
            vault_path=Path(vault_path).expanduser() if vault_path else None,
            ollama_url=section.get("ollama_url", DEFAULT_OLLAMA_URL),
            ollama_model=section.get("ollama_model", DEFAULT_OLLAMA_MODEL),
            available_tags=list(tags),
        )

    def vault_dir(self) -> Path:
        """Return the vault root or raise :class:`VaultNotConfiguredError`."""
        if self.vault_path is None:
            raise VaultNotConfiguredError()
        return self.vault_path


def load_config(
    path: Path | str | None = None,
    *,
    vault_path: Path | str | None = None,
    ollama_url: str | None = None,
    ollama_model: str | None = None,
    available_tags: list[str] | None = None,
) -> CaptureConfig:
    """Build a :class:`CaptureConfig` from file, environment and kwargs."""
    data: dict[str, Any] = {}
    if path is not None and Path(path).exists():
        try:
            with open(path, "rb") as fh:
                data = tomllib.load(fh)
        except (OSError, tomllib.TOMLDecodeError) as exc:
            print(f"[warn] Ignoring unreadable config {Path(path).name}: {exc}", file=sys.stderr)
            data = {}

    config = CaptureConfig.from_dict(data)

    env_vault = os.getenv("CAPTURE_VAULT_PATH", "")
    env_tags = os.getenv("CAPTURE_TAGS", "")

    if vault_path:
        config.vault_path = Path(vault_path).expanduser()
    elif env_vault:
        config.vault_path = Path(env_vault).expanduser()
    config.ollama_url = ollama_url or os.getenv("CAPTURE_OLLAMA_URL", "") or config.ollama_url
    config.ollama_model = ollama_model or os.getenv("CAPTURE_OLLAMA_MODEL", "") or config.ollama_model
    if available_tags is not None:
        config.available_tags = list(available_tags)
    elif env_tags:
        config.available_tags = _split_tags(env_tags)
    return config
