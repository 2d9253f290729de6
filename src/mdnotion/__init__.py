"""mdnotion -- Markdown to Notion block conversion.

Public re-exports
-----------------

* **Conversion:** :func:`convert`, :class:`MarkdownToNotionConverter`,
  :func:`clean_gemini_citations`
* **Configuration:** :class:`ConverterConfig`
* **Models:** block and span dataclasses, result types

Usage::

    from mdnotion import convert

    children = convert("# Hello\\n\\nSome **bold** text and $E=mc^2$.")
    # -> [{"object": "block", "type": "heading_1", ...}, ...]

The returned dicts are ready to be sent as ``children`` of a Notion
page-create or block-append request.
"""

from __future__ import annotations

# ── Configuration ───────────────────────────────────────────────────────
from mdnotion.config import RICH_TEXT_CHAR_LIMIT, ConverterConfig

# ── Conversion ──────────────────────────────────────────────────────────
from mdnotion.converter import (
    MarkdownToNotionConverter,
    clean_gemini_citations,
    convert,
)

# ── Models ──────────────────────────────────────────────────────────────
from mdnotion.models import (
    Block,
    BulletItem,
    CodeBlock,
    ConversionResult,
    ConversionWarning,
    Divider,
    EquationBlock,
    EquationSpan,
    Heading,
    NumberedItem,
    Paragraph,
    Quote,
    RichSpan,
    SpanStyle,
    TextSpan,
)

__all__ = [
    # Conversion
    "convert",
    "MarkdownToNotionConverter",
    "clean_gemini_citations",
    # Configuration
    "ConverterConfig",
    "RICH_TEXT_CHAR_LIMIT",
    # Models -- results
    "ConversionResult",
    "ConversionWarning",
    # Models -- blocks
    "Block",
    "Heading",
    "Paragraph",
    "BulletItem",
    "NumberedItem",
    "Quote",
    "Divider",
    "CodeBlock",
    "EquationBlock",
    # Models -- spans
    "RichSpan",
    "TextSpan",
    "EquationSpan",
    "SpanStyle",
]
