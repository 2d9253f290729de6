"""Removal of Gemini citation markers.

Markdown exported from Gemini carries inline markers that mean nothing
outside the chat UI::

    [cite_start]The sky is blue. [cite: 12, 14]

:func:`clean_gemini_citations` drops them (case-insensitively) and leaves
every other character alone, including the whitespace around a marker.
"""

from __future__ import annotations

import re

_CITE_START_RE = re.compile(r"\[cite_start\]", re.IGNORECASE)
_CITE_REF_RE = re.compile(r"\[cite:\s*\d+(?:,\s*\d+)*\]", re.IGNORECASE)


def clean_gemini_citations(markdown: str) -> str:
    """Return *markdown* without ``[cite_start]`` and ``[cite: N, ...]`` markers."""
    if not markdown:
        return markdown
    cleaned = _CITE_START_RE.sub("", markdown)
    return _CITE_REF_RE.sub("", cleaned)
