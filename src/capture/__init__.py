"""Quick-capture note engine for a Markdown vault."""

from capture.config import CaptureConfig, load_config
from capture.frontmatter import decode, encode
from capture.note import Note
from capture.ollama import HealthStatus, OllamaClient
from capture.prompts import PromptLibrary
from capture.review import DailyReview, generate_review
from capture.sections import extract_list_items, replace_or_append_section
from capture.slug import slugify
from capture.store import VaultStore
from capture.tags import TagSuggestion, suggest_tags

__all__ = [
    "CaptureConfig",
    "load_config",
    "decode",
    "encode",
    "Note",
    "HealthStatus",
    "OllamaClient",
    "PromptLibrary",
    "DailyReview",
    "generate_review",
    "extract_list_items",
    "replace_or_append_section",
    "slugify",
    "VaultStore",
    "TagSuggestion",
    "suggest_tags",
]
