"""Unit tests for capture.slug."""

import pytest

from capture.slug import MAX_SLUG_LENGTH, slugify


class TestSlugify:
    def test_empty_string(self):
        assert slugify("") == ""

    def test_special_characters_collapse(self):
        assert slugify("Hello, World! @#$%") == "hello-world"

    def test_korean_words(self):
        assert slugify("Swift 학습 노트") == "swift-학습-노트"

    def test_nothing_allowed(self):
        assert slugify("!!! ??? ...") == ""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("Meeting 2026 Q1", "meeting-2026-q1"),
            ("well-known   fact", "well-known-fact"),
            ("...hello...", "hello"),
            ("SwiftUI학습", "swiftui학습"),
            ("ㅋㅋ 웃김", "ㅋㅋ-웃김"),
            ("Café au lait", "caf-au-lait"),
            ("line\nbreak\ttab", "line-break-tab"),
        ],
    )
    def test_examples(self, text, expected):
        assert slugify(text) == expected

    def test_truncates_ascii(self):
        assert slugify("a" * 80) == "a" * MAX_SLUG_LENGTH

    def test_truncates_by_character_not_byte(self):
        slug = slugify("가" * 80)
        assert slug == "가" * MAX_SLUG_LENGTH
        assert len(slug) == 50

    def test_deterministic(self):
        assert slugify("Daily Review 정리") == slugify("Daily Review 정리")
