"""Converter configuration for mdnotion.

:class:`ConverterConfig` captures every tuneable knob of the
Markdown-to-Notion pipeline.  All defaults reproduce the plain conversion;
the optional knobs only pre-process input or post-process payloads.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

RICH_TEXT_CHAR_LIMIT: int = 2000
"""Notion's maximum length for ``rich_text[].text.content``."""


@dataclass
class ConverterConfig:
    """Complete configuration for a :class:`MarkdownToNotionConverter`.

    Parameters
    ----------
    clean_citations:
        Strip Gemini citation markers (``[cite_start]``, ``[cite: 12]``)
        from the input before parsing.
    split_long_text:
        Split text segments longer than *rich_text_limit* into several
        segments with identical annotations.  Notion rejects longer ones.
    rich_text_limit:
        Maximum characters per text segment when *split_long_text* is on.
    normalize_code_language:
        Map code fence info strings to Notion language identifiers
        (``py`` -> ``python``).  Unknown languages become
        *default_code_language*.  When off, the info string is passed
        through verbatim.
    default_code_language:
        Language used for code blocks with an empty info string.
    metrics:
        Optional :class:`~mdnotion.observability.MetricsHook`.
    debug_dump_blocks:
        Write the emitted block payload to *stderr* on each conversion.
    """

    # ── Input ───────────────────────────────────────────────────────────
    clean_citations: bool = False

    # ── Rich text ───────────────────────────────────────────────────────
    split_long_text: bool = True

    rich_text_limit: int = RICH_TEXT_CHAR_LIMIT

    # ── Code blocks ─────────────────────────────────────────────────────
    normalize_code_language: bool = False

    default_code_language: str = "plain text"

    # ── Observability ──────────────────────────────────────────────────
    metrics: Any | None = None

    # ── Debug ───────────────────────────────────────────────────────────
    debug_dump_blocks: bool = False

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.rich_text_limit < 1:
            raise ValueError(f"rich_text_limit must be >= 1, got {self.rich_text_limit}")
        if self.rich_text_limit > RICH_TEXT_CHAR_LIMIT:
            raise ValueError(
                f"rich_text_limit must be <= {RICH_TEXT_CHAR_LIMIT}, "
                f"got {self.rich_text_limit}"
            )
        if not self.default_code_language.strip():
            raise ValueError("default_code_language must be a non-empty string")
