"""Full Markdown-to-Notion conversion pipeline.

:class:`MarkdownToNotionConverter` runs three stages:

1. **Clean** -- optionally strip Gemini citation markers.
2. **Segment** -- :func:`segment` splits the text into typed blocks, with
   inline spans tokenized.
3. **Build** -- :func:`build_blocks` emits the Notion API block dicts.

The result is a :class:`ConversionResult` holding the blocks and any
non-fatal warnings.  :func:`convert` is the one-call shortcut that returns
just the blocks.
"""

from __future__ import annotations

import json
import sys
import time

from mdnotion.config import ConverterConfig
from mdnotion.converter.block_builder import build_blocks
from mdnotion.converter.citations import clean_gemini_citations
from mdnotion.converter.segmenter import segment
from mdnotion.models import ConversionResult, ConversionWarning
from mdnotion.observability import NoopMetricsHook, get_logger

log = get_logger("mdnotion.converter")


class MarkdownToNotionConverter:
    """Convert Markdown text to Notion API block payloads.

    The converter holds only its configuration, so one instance can be
    shared freely between threads.

    Parameters
    ----------
    config:
        Conversion options.  Defaults to :class:`ConverterConfig()`.

    Examples
    --------
    >>> converter = MarkdownToNotionConverter()
    >>> result = converter.convert("# Hello\\n\\nWorld")
    >>> len(result.blocks)
    2
    >>> result.blocks[0]["type"]
    'heading_1'
    """

    def __init__(self, config: ConverterConfig | None = None) -> None:
        self._config = config if config is not None else ConverterConfig()
        self._metrics = self._config.metrics or NoopMetricsHook()

    @property
    def config(self) -> ConverterConfig:
        return self._config

    def convert(self, markdown: str) -> ConversionResult:
        """Full pipeline: clean -> segment -> build blocks.

        Never raises for string input; malformed markup degrades to
        best-effort blocks and, where useful, a warning.
        """
        started = time.monotonic()
        warnings: list[ConversionWarning] = []

        if self._config.clean_citations:
            markdown = clean_gemini_citations(markdown)

        parsed = segment(markdown, warnings)
        blocks = build_blocks(parsed, self._config)

        if self._config.debug_dump_blocks:
            print(
                "[mdnotion] Notion blocks payload:",
                json.dumps(blocks, indent=2, ensure_ascii=False),
                file=sys.stderr,
            )

        elapsed_ms = (time.monotonic() - started) * 1000
        self._metrics.increment("mdnotion.conversions_total")
        self._metrics.increment("mdnotion.blocks_total", len(blocks))
        if warnings:
            self._metrics.increment("mdnotion.conversion_warnings_total", len(warnings))
        self._metrics.timing("mdnotion.conversion_duration_ms", elapsed_ms)
        self._metrics.gauge("mdnotion.last_input_chars", len(markdown))

        log.debug(
            "convert complete",
            extra={
                "extra_fields": {
                    "op": "convert",
                    "chars": len(markdown),
                    "blocks": len(blocks),
                    "warnings": len(warnings),
                    "duration_ms": round(elapsed_ms, 3),
                }
            },
        )

        return ConversionResult(blocks=blocks, warnings=warnings)


def convert(markdown: str, config: ConverterConfig | None = None) -> list[dict]:
    """Convert *markdown* to a list of Notion block dicts.

    Empty or whitespace-only input yields ``[]``.
    """
    return MarkdownToNotionConverter(config).convert(markdown).blocks
