"""Tests for MarkdownToNotionConverter and convert() end-to-end."""

import json

from mdnotion import convert
from mdnotion.config import ConverterConfig
from mdnotion.converter.md_to_notion import MarkdownToNotionConverter


def _get_rich_text(block):
    """Extract rich_text list from a block."""
    return block[block["type"]]["rich_text"]


def _get_rich_text_content(block):
    """Concatenate text content and equation expressions of a block."""
    return "".join(
        seg["text"]["content"] if seg["type"] == "text" else seg["equation"]["expression"]
        for seg in _get_rich_text(block)
    )


class RecordingMetricsHook:
    def __init__(self):
        self.counters = {}
        self.timings = []
        self.gauges = {}

    def increment(self, name, value=1, tags=None):
        self.counters[name] = self.counters.get(name, 0) + value

    def timing(self, name, ms, tags=None):
        self.timings.append((name, ms))

    def gauge(self, name, value, tags=None):
        self.gauges[name] = value


# =========================================================================
# Headline examples
# =========================================================================

class TestExamples:
    def test_heading(self):
        assert convert("# Title") == [{
            "object": "block",
            "type": "heading_1",
            "heading_1": {"rich_text": [{"type": "text", "text": {"content": "Title"}}]},
        }]

    def test_bold_with_nested_italic_and_code(self):
        blocks = convert("**bold *and* code `x`**")
        assert len(blocks) == 1
        assert blocks[0]["type"] == "paragraph"
        rich_text = _get_rich_text(blocks[0])
        assert all(seg["annotations"]["bold"] for seg in rich_text)
        assert rich_text[1] == {
            "type": "text",
            "text": {"content": "and"},
            "annotations": {"bold": True, "italic": True},
        }
        assert rich_text[3] == {
            "type": "text",
            "text": {"content": "x"},
            "annotations": {"bold": True, "code": True},
        }

    def test_equation_block(self):
        assert convert("$$\na=b\n$$") == [{
            "object": "block",
            "type": "equation",
            "equation": {"expression": "a=b"},
        }]

    def test_code_block(self):
        blocks = convert("```py\nprint(1)\n```")
        assert len(blocks) == 1
        assert blocks[0]["code"]["language"] == "py"
        assert _get_rich_text_content(blocks[0]) == "print(1)"

    def test_divider(self):
        assert convert("---") == [{"object": "block", "type": "divider", "divider": {}}]

    def test_unterminated_code_keeps_trailing_content(self):
        blocks = convert("```\nline one\n\nline three")
        assert len(blocks) == 1
        assert _get_rich_text_content(blocks[0]) == "line one\n\nline three"

    def test_empty_input(self):
        assert convert("") == []
        assert convert(" \n\n\t") == []


class TestPlainLines:
    def test_one_paragraph_per_non_blank_line(self):
        blocks = convert("alpha\n\nbeta gamma\n   \ndelta")
        assert [b["type"] for b in blocks] == ["paragraph"] * 3
        assert [_get_rich_text(b) for b in blocks] == [
            [{"type": "text", "text": {"content": "alpha"}}],
            [{"type": "text", "text": {"content": "beta gamma"}}],
            [{"type": "text", "text": {"content": "delta"}}],
        ]


class TestMixedDocument:
    def test_document(self):
        markdown = "\n".join([
            "# Notes",
            "",
            "Intro with $x$ and `y`.",
            "- item **one**",
            "2. step",
            "> quoted",
            "---",
            "$$E=mc^2$$",
            "```",
            "raw",
            "```",
        ])
        blocks = convert(markdown)
        assert [b["type"] for b in blocks] == [
            "heading_1",
            "paragraph",
            "bulleted_list_item",
            "numbered_list_item",
            "quote",
            "divider",
            "equation",
            "code",
        ]
        assert all(b["object"] == "block" for b in blocks)
        assert _get_rich_text_content(blocks[1]) == "Intro with x and y."
        assert blocks[6]["equation"]["expression"] == "E=mc^2"
        assert blocks[7]["code"]["language"] == "plain text"


# =========================================================================
# Converter object
# =========================================================================

class TestConverter:
    def test_default_config(self):
        converter = MarkdownToNotionConverter()
        assert converter.config == ConverterConfig()

    def test_result_has_blocks_and_warnings(self, converter):
        result = converter.convert("$$\nx")
        assert len(result.blocks) == 1
        assert [w.code for w in result.warnings] == ["FENCE_UNTERMINATED"]

    def test_repeated_calls_are_identical(self, converter):
        markdown = "# A\n**b** $c$"
        assert converter.convert(markdown).blocks == converter.convert(markdown).blocks

    def test_clean_citations_enabled(self):
        converter = MarkdownToNotionConverter(ConverterConfig(clean_citations=True))
        result = converter.convert("[cite_start]Fact.[cite: 3, 4]")
        assert _get_rich_text_content(result.blocks[0]) == "Fact."

    def test_citations_kept_by_default(self, converter):
        result = converter.convert("Fact.[cite: 3]")
        assert _get_rich_text_content(result.blocks[0]) == "Fact.[cite: 3]"

    def test_metrics_reported(self):
        hook = RecordingMetricsHook()
        converter = MarkdownToNotionConverter(ConverterConfig(metrics=hook))
        converter.convert("a\nb\n```\nc")
        assert hook.counters["mdnotion.conversions_total"] == 1
        assert hook.counters["mdnotion.blocks_total"] == 3
        assert hook.counters["mdnotion.conversion_warnings_total"] == 1
        assert [name for name, _ in hook.timings] == ["mdnotion.conversion_duration_ms"]
        assert hook.gauges == {"mdnotion.last_input_chars": 9}

    def test_debug_dump_blocks(self, capsys):
        converter = MarkdownToNotionConverter(ConverterConfig(debug_dump_blocks=True))
        blocks = converter.convert("# Hi").blocks
        err = capsys.readouterr().err
        assert err.startswith("[mdnotion] Notion blocks payload:")
        payload = err.split(":", 1)[1]
        assert json.loads(payload) == blocks

    def test_unterminated_fence_writes_nothing_to_stderr(self, capsys):
        result = MarkdownToNotionConverter().convert("```\ncode")
        assert [w.code for w in result.warnings] == ["FENCE_UNTERMINATED"]
        captured = capsys.readouterr()
        assert captured.err == ""
        assert captured.out == ""
