"""Thin HTTP client for a local Ollama server.

Only the three routes the app needs are used:

GET  /              – liveness probe (answers ``Ollama is running``)
GET  /api/tags      – installed models
POST /api/generate  – one-shot, non-streaming completion in JSON mode

The model is asked for JSON output; :meth:`OllamaClient.generate` returns
the decoded object and leaves mapping it onto result types to the caller.
"""

from __future__ import annotations

import enum
import json
from typing import Any

import httpx

from capture.errors import BackendUnavailableError, InvalidResponseError

DEFAULT_BASE_URL = "http://localhost:11434"
DEFAULT_MODEL = "llama3"


class HealthStatus(enum.Enum):
    READY = "ready"
    SERVER_UNAVAILABLE = "server_unavailable"
    MODEL_NOT_FOUND = "model_not_found"


class OllamaClient:
    """Synchronous Ollama client backed by :class:`httpx.Client`."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        model: str = DEFAULT_MODEL,
        *,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.model = model
        self._client = httpx.Client(
            base_url=self.base_url,
            headers={"Content-Type": "application/json"},
            timeout=timeout,
            transport=transport,
        )

    # ------------------------------------------------------------------
    # Discovery
    # ------------------------------------------------------------------

    def list_models(self) -> list[str]:
        """Names of the installed models; empty when the server can't tell."""
        try:
            r = self._client.get("/api/tags", timeout=5.0)
            r.raise_for_status()
            return [m["name"] for m in r.json().get("models", [])]
        except (httpx.HTTPError, ValueError, KeyError, TypeError, AttributeError):
            return []

    def has_model(self, models: list[str]) -> bool:
        return any(m == self.model or m.startswith(f"{self.model}:") for m in models)

    def health_check(self) -> HealthStatus:
        """Check that the server answers and the configured model is installed."""
        try:
            r = self._client.get("/", timeout=5.0)
        except httpx.HTTPError:
            return HealthStatus.SERVER_UNAVAILABLE
        if r.status_code != 200:
            return HealthStatus.SERVER_UNAVAILABLE

        if self.has_model(self.list_models()):
            return HealthStatus.READY
        return HealthStatus.MODEL_NOT_FOUND

    # ------------------------------------------------------------------
    # Generation
    # ------------------------------------------------------------------

    def generate(self, prompt: str, *, system: str = "", timeout: float | None = None) -> dict[str, Any]:
        """Send *prompt* and return the model's JSON answer as a dict."""
        payload = {
            "model": self.model,
            "system": system,
            "prompt": prompt,
            "stream": False,
            "format": "json",
        }
        kwargs: dict[str, Any] = {"json": payload}
        if timeout is not None:
            kwargs["timeout"] = timeout

        try:
            r = self._client.post("/api/generate", **kwargs)
            r.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise BackendUnavailableError(f"HTTP {exc.response.status_code}") from exc
        except httpx.HTTPError as exc:
            raise BackendUnavailableError(type(exc).__name__) from exc

        try:
            envelope = r.json()
            text = envelope["response"]
            result = json.loads(text)
        except (ValueError, KeyError, TypeError) as exc:
            raise InvalidResponseError(type(exc).__name__) from exc

        if not isinstance(result, dict):
            raise InvalidResponseError("expected a JSON object")
        return result

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "OllamaClient":
        return self

    def __exit__(self, *_: object) -> None:
        self.close()
