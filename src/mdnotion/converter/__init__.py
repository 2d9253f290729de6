"""Markdown -> Notion conversion pipeline.

Public API:

- :class:`MarkdownToNotionConverter` -- Markdown → Notion blocks.
- :func:`convert` -- one-call shortcut returning the block list.
- :func:`segment` -- split Markdown into typed blocks.
- :func:`tokenize` -- split one line into styled inline spans.
- :func:`build_blocks` -- emit Notion block dicts for typed blocks.
- :func:`build_rich_text` -- emit a rich_text array for spans.
- :func:`split_rich_text` -- split oversized rich_text segments.
- :func:`clean_gemini_citations` -- strip Gemini citation markers.
"""

from mdnotion.converter.block_builder import build_block, build_blocks
from mdnotion.converter.citations import clean_gemini_citations
from mdnotion.converter.md_to_notion import MarkdownToNotionConverter, convert
from mdnotion.converter.rich_text import build_rich_text, split_rich_text, tokenize
from mdnotion.converter.segmenter import segment

__all__ = [
    "MarkdownToNotionConverter",
    "build_block",
    "build_blocks",
    "build_rich_text",
    "clean_gemini_citations",
    "convert",
    "segment",
    "split_rich_text",
    "tokenize",
]
