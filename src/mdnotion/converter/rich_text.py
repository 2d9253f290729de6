"""Inline tokenizer and Notion rich_text serialization.

:func:`tokenize` scans one line of block text into :class:`TextSpan` and
:class:`EquationSpan` values.  Recognised delimiters, checked in this order
at every position:

* ``**...**`` -- bold run, body tokenized again with ``bold`` merged
* ``*...*``   -- italic run, body tokenized again with ``italic`` merged
* ```...```   -- inline code, verbatim
* ``$...$``   -- inline equation, verbatim (a ``$`` followed by ``$`` is text)

A delimiter without a closer takes the rest of the line as its content.

:func:`build_rich_text` turns spans into Notion rich_text segments.  A text
segment is::

    {"type": "text", "text": {"content": "hello"}, "annotations": {"bold": true}}

and an equation segment is::

    {"type": "equation", "equation": {"expression": "E=mc^2"}}

``annotations`` is present only when at least one flag is set, and then
contains only the flags that are set.
"""

from __future__ import annotations

from mdnotion.config import RICH_TEXT_CHAR_LIMIT, ConverterConfig
from mdnotion.models import EquationSpan, RichSpan, SpanStyle, TextSpan

_EMPTY_STYLE = SpanStyle()


# ---------------------------------------------------------------------------
# Tokenizer
# ---------------------------------------------------------------------------

def tokenize(text: str, style: SpanStyle | None = None) -> list[RichSpan]:
    """Split *text* into styled spans.

    Parameters
    ----------
    text:
        One line (or one bold/italic body) of inline source.
    style:
        Style inherited from an enclosing run.  Bold is only recognised
        when *style* is empty and italic only when *style* is not already
        italic, so nesting stops one level below the top.

    Returns
    -------
    list[RichSpan]
        May be empty, e.g. for ``""`` or ``"****"``.
    """
    if style is None:
        style = _EMPTY_STYLE

    spans: list[RichSpan] = []
    buffer: list[str] = []
    length = len(text)
    i = 0

    while i < length:
        char = text[i]

        if char == "*" and style.is_empty and text.startswith("**", i):
            _flush_text(spans, buffer, style)
            body, i = _scan_until(text, i + 2, "**")
            spans.extend(tokenize(body, style.merge(bold=True)))

        elif char == "*" and not style.italic:
            _flush_text(spans, buffer, style)
            body, i = _scan_until(text, i + 1, "*")
            spans.extend(tokenize(body, style.merge(italic=True)))

        elif char == "`":
            _flush_text(spans, buffer, style)
            body, i = _scan_until(text, i + 1, "`")
            spans.append(TextSpan(body, style.merge(code=True)))

        elif char == "$" and not text.startswith("$$", i):
            _flush_text(spans, buffer, style)
            body, i = _scan_until(text, i + 1, "$")
            spans.append(EquationSpan(body, style))

        else:
            buffer.append(char)
            i += 1

    _flush_text(spans, buffer, style)
    return spans


def tokenize_line(text: str) -> list[RichSpan]:
    """Tokenize block text, never returning an empty list.

    When the tokenizer yields nothing, the block still gets one unstyled
    span holding *text* itself.
    """
    return tokenize(text) or [TextSpan(text)]


def _scan_until(text: str, start: int, delimiter: str) -> tuple[str, int]:
    """Return the body from *start* to *delimiter* and the index past it.

    Without a closing *delimiter* the body runs to the end of *text*.
    """
    end = text.find(delimiter, start)
    if end == -1:
        return text[start:], len(text)
    return text[start:end], end + len(delimiter)


def _flush_text(spans: list[RichSpan], buffer: list[str], style: SpanStyle) -> None:
    if buffer:
        spans.append(TextSpan("".join(buffer), style))
        buffer.clear()


# ---------------------------------------------------------------------------
# Serialization
# ---------------------------------------------------------------------------

def build_rich_text(
    spans: list[RichSpan] | tuple[RichSpan, ...],
    config: ConverterConfig | None = None,
) -> list[dict]:
    """Convert spans to a Notion rich_text array.

    When ``config.split_long_text`` is on (the default), oversized text
    segments are split with :func:`split_rich_text`.
    """
    segments = [span_to_segment(span) for span in spans]
    if config is None or config.split_long_text:
        limit = config.rich_text_limit if config is not None else RICH_TEXT_CHAR_LIMIT
        segments = split_rich_text(segments, limit)
    return segments


def span_to_segment(span: RichSpan) -> dict:
    """Serialize one span to its Notion rich_text segment."""
    if isinstance(span, EquationSpan):
        seg: dict = {
            "type": "equation",
            "equation": {"expression": span.expression},
        }
    else:
        seg = {
            "type": "text",
            "text": {"content": span.content},
        }
    if not span.style.is_empty:
        seg["annotations"] = span.style.as_annotations()
    return seg


def split_rich_text(segments: list[dict], limit: int = RICH_TEXT_CHAR_LIMIT) -> list[dict]:
    """Split any text segment with content longer than *limit*.

    Annotations are copied onto every piece.  Splitting happens on Python
    code-point boundaries, so no character is ever cut in half.  Equation
    segments pass through unchanged.

    Raises
    ------
    ValueError
        If *limit* is less than 1.
    """
    if limit < 1:
        raise ValueError(f"limit must be >= 1, got {limit}")

    output: list[dict] = []
    for segment in segments:
        if segment.get("type") != "text":
            output.append(segment)
            continue

        content = segment["text"]["content"]
        if len(content) <= limit:
            output.append(segment)
            continue

        for start in range(0, len(content), limit):
            piece: dict = {
                "type": "text",
                "text": {"content": content[start:start + limit]},
            }
            if "annotations" in segment:
                piece["annotations"] = dict(segment["annotations"])
            output.append(piece)

    return output
