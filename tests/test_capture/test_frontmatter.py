"""Unit tests for capture.frontmatter."""

import textwrap

import pytest
import yaml

from capture.frontmatter import decode, encode, header_end, is_raw_value

# ---------------------------------------------------------------------------
# decode
# ---------------------------------------------------------------------------


class TestDecode:
    def test_no_header_returns_text_untouched(self):
        header, body = decode("그냥 텍스트만 있는 파일")
        assert header == {}
        assert body == "그냥 텍스트만 있는 파일"

    def test_no_header_keeps_surrounding_whitespace(self):
        raw = "\n\n  Some text.\n\n"
        header, body = decode(raw)
        assert header == {}
        assert body == raw

    def test_empty_text(self):
        assert decode("") == ({}, "")

    def test_unclosed_header_is_not_a_header(self):
        raw = "---\ntitle: Nope\nStill no closing line.\n"
        assert decode(raw) == ({}, raw)

    def test_header_not_at_start_is_ignored(self):
        raw = "Intro\n---\ntitle: Nope\n---\nMore text."
        assert decode(raw) == ({}, raw)

    def test_basic_header(self):
        raw = textwrap.dedent("""\
            ---
            title: "테스트 노트"
            date: 2026-02-07
            tags: ["개발", "학습"]
            ---

            본문 내용입니다.
        """)
        header, body = decode(raw)
        assert header["title"] == "테스트 노트"
        assert header["date"] == "2026-02-07"
        assert header["tags"] == '["개발", "학습"]'
        assert body == "본문 내용입니다."

    def test_leading_blank_lines_before_delimiter(self):
        header, body = decode("\n  \n---\nkey: value\n---\nbody")
        assert header == {"key": "value"}
        assert body == "body"

    def test_body_keeps_inner_blank_lines(self):
        header, body = decode("---\na: 1\n---\n\n\nfirst\n\nsecond\n\n")
        assert header == {"a": "1"}
        assert body == "first\n\nsecond"

    def test_empty_header_block(self):
        header, body = decode("---\n---\nBody.")
        assert header == {}
        assert body == "Body."

    def test_single_quotes_are_stripped(self):
        header, _ = decode("---\nname: 'single'\n---\n")
        assert header["name"] == "single"

    def test_only_one_layer_of_quotes_is_stripped(self):
        header, _ = decode('---\nname: ""double""\n---\n')
        assert header["name"] == '"double"'

    def test_mismatched_quotes_are_kept(self):
        header, _ = decode("---\nname: \"open'\n---\n")
        assert header["name"] == "\"open'"

    def test_value_split_at_first_colon(self):
        header, _ = decode("---\nurl: http://localhost:11434\n---\n")
        assert header["url"] == "http://localhost:11434"

    def test_last_duplicate_key_wins(self):
        header, _ = decode("---\ntitle: first\ntitle: second\n---\n")
        assert header == {"title": "second"}

    def test_lines_without_colon_and_blank_lines_are_skipped(self):
        raw = "---\n\njust words\n   \nkey:  spaced  \n---\nbody"
        header, body = decode(raw)
        assert header == {"key": "spaced"}
        assert body == "body"

    def test_raw_value_is_kept_verbatim(self):
        header, _ = decode("---\ntags: []\naliases: ['a', 'b']\n---\n")
        assert header["tags"] == "[]"
        assert header["aliases"] == "['a', 'b']"


# ---------------------------------------------------------------------------
# encode
# ---------------------------------------------------------------------------


class TestEncode:
    def test_empty_header_returns_body_unchanged(self):
        assert encode({}, "plain body") == "plain body"

    def test_exact_layout_with_sorted_keys(self):
        text = encode({"title": "Test", "date": "2026-02-07"}, "Body")
        assert text == '---\ndate: "2026-02-07"\ntitle: "Test"\n---\n\nBody\n'

    def test_raw_values_are_not_quoted(self):
        text = encode({"tags": '["개발", "학습"]'}, "내용")
        assert 'tags: ["개발", "학습"]' in text

    def test_scalar_values_are_double_quoted(self):
        text = encode({"title": "테스트"}, "")
        assert 'title: "테스트"' in text

    def test_header_is_valid_yaml(self):
        text = encode({"title": "Test", "date": "2026-02-07", "tags": '["a", "b"]'}, "body")
        block = text.split("---\n")[1]
        assert yaml.safe_load(block) == {"title": "Test", "date": "2026-02-07", "tags": ["a", "b"]}


class TestIsRawValue:
    @pytest.mark.parametrize(
        "value, expected",
        [
            ("[]", True),
            ('["a", "b"]', True),
            ("[unterminated", False),
            ("plain", False),
            ("", False),
        ],
    )
    def test_bracket_detection(self, value, expected):
        assert is_raw_value(value) is expected


class TestHeaderEnd:
    def test_offset_past_closing_delimiter(self):
        raw = '---\ntitle: "x"\n---\n\nbody\n'
        cut = header_end(raw)
        assert raw[:cut] == '---\ntitle: "x"\n---'
        assert raw[cut:] == "\n\nbody\n"

    def test_leading_whitespace_stays_in_prefix(self):
        raw = "\n\n---\na: 1\n---\nbody"
        assert raw[: header_end(raw)] == "\n\n---\na: 1\n---"

    @pytest.mark.parametrize(
        "raw",
        ["", "plain text", "---\nno closing line\n", "Intro\n---\na: 1\n---\n"],
    )
    def test_zero_without_header(self, raw):
        assert header_end(raw) == 0

    def test_heading_like_header_value(self):
        raw = '---\ntitle: "## Daily Review prep"\n---\n\n## Memos\n'
        assert raw[header_end(raw) :] == "\n\n## Memos\n"


# ---------------------------------------------------------------------------
# Round trip
# ---------------------------------------------------------------------------


class TestRoundTrip:
    @pytest.mark.parametrize(
        "header, body",
        [
            ({"title": "Test", "date": "2026-02-07"}, "Body text."),
            ({"title": "Swift 학습 노트"}, "## Memos\n- one\n- two"),
            ({"b": "2", "a": "1", "c": ""}, ""),
            ({"note": "has: colon"}, "line one\n\nline two"),
        ],
    )
    def test_scalar_header_and_body_survive(self, header, body):
        assert decode(encode(header, body)) == (header, body)

    def test_raw_field_survives_next_to_scalars(self):
        header = {"title": "Test", "date": "2026-02-07", "tags": '["a", "b"]'}
        decoded, body = decode(encode(header, "body"))
        assert decoded["tags"] == '["a", "b"]'
        assert decoded["title"] == "Test"
        assert decoded["date"] == "2026-02-07"
        assert body == "body"

    def test_trailing_whitespace_of_body_is_normalized(self):
        assert decode(encode({"a": "x"}, "b  \t")) == ({"a": "x"}, "b")

    def test_leading_indent_of_body_is_kept(self):
        assert decode(encode({"a": "x"}, "    code")) == ({"a": "x"}, "    code")

    def test_reencoding_is_canonical(self):
        raw = "---\nz: last\na: 'first'\n---\n\nbody\n"
        once = encode(*decode(raw))
        assert once == '---\na: "first"\nz: "last"\n---\n\nbody\n'
        assert encode(*decode(once)) == once
