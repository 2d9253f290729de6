"""Line-oriented block segmentation.

:func:`segment` walks the input once, top to bottom, and classifies each
line (or fenced run of lines) as one :data:`~mdnotion.models.Block`.  Text
of heading, list, quote and paragraph lines goes through
:func:`~mdnotion.converter.rich_text.tokenize_line`; fenced code and
equation bodies are kept verbatim.

Classification order for a line:

1. whitespace only      -> skipped
2. ``# `` / ``## `` / ``### `` -> heading 1-3
3. ``-``, ``*`` or ``+`` and a space -> bullet item
4. ``<ASCII digits>.`` and a space -> numbered item
5. ``$$``               -> equation (single-line ``$$x$$`` or fenced)
6. ```` ``` ````        -> code block
7. ``> ``               -> quote
8. ``---`` (three or more dashes only) -> divider
9. anything else        -> paragraph

A fence that is never closed swallows the rest of the input.  That is not
an error; a ``FENCE_UNTERMINATED`` warning is recorded when a warnings list
is supplied.
"""

from __future__ import annotations

import re
from collections.abc import Callable

from mdnotion.converter.rich_text import tokenize_line
from mdnotion.models import (
    Block,
    BulletItem,
    CodeBlock,
    ConversionWarning,
    Divider,
    EquationBlock,
    Heading,
    NumberedItem,
    Paragraph,
    Quote,
)
from mdnotion.observability import get_logger

log = get_logger("mdnotion.segmenter")

_HEADING_PREFIXES: tuple[tuple[str, int], ...] = (("# ", 1), ("## ", 2), ("### ", 3))
_BULLET_RE = re.compile(r"^[-*+]\s")
_NUMBERED_RE = re.compile(r"^[0-9]+\.\s")
_DIVIDER_RE = re.compile(r"^---+$")

_EQUATION_FENCE = "$$"
_CODE_FENCE = "```"
_QUOTE_PREFIX = "> "


class _LineCursor:
    """Forward-only cursor over the lines of a document."""

    __slots__ = ("_lines", "_pos")

    def __init__(self, lines: list[str]) -> None:
        self._lines = lines
        self._pos = 0

    @property
    def line_number(self) -> int:
        """1-based number of the line :meth:`next` would return."""
        return self._pos + 1

    def at_end(self) -> bool:
        return self._pos >= len(self._lines)

    def next(self) -> str:
        line = self._lines[self._pos]
        self._pos += 1
        return line

    def take_until(self, is_closer: Callable[[str], bool]) -> tuple[list[str], bool]:
        """Consume lines up to and including the first one matching *is_closer*.

        Returns the lines before the closer and whether a closer was found.
        The closer itself is consumed and not returned.
        """
        taken: list[str] = []
        while not self.at_end():
            line = self.next()
            if is_closer(line):
                return taken, True
            taken.append(line)
        return taken, False


def segment(
    markdown: str,
    warnings: list[ConversionWarning] | None = None,
) -> list[Block]:
    """Split *markdown* into blocks, in input order.

    Parameters
    ----------
    markdown:
        Source text.  Lines are separated by ``"\\n"``.
    warnings:
        Optional mutable list collecting :class:`ConversionWarning`
        instances for unterminated fences.

    Returns
    -------
    list[Block]
        Empty for empty or whitespace-only input.
    """
    cursor = _LineCursor(markdown.split("\n"))
    blocks: list[Block] = []

    while not cursor.at_end():
        line_number = cursor.line_number
        line = cursor.next()
        if not line.strip():
            continue
        block = _classify(line, cursor, line_number, warnings)
        blocks.append(block)

    return blocks


def _classify(
    line: str,
    cursor: _LineCursor,
    line_number: int,
    warnings: list[ConversionWarning] | None,
) -> Block:
    for prefix, level in _HEADING_PREFIXES:
        if line.startswith(prefix):
            return Heading(level, tuple(tokenize_line(line[len(prefix):])))

    match = _BULLET_RE.match(line)
    if match:
        return BulletItem(tuple(tokenize_line(line[match.end():])))

    match = _NUMBERED_RE.match(line)
    if match:
        return NumberedItem(tuple(tokenize_line(line[match.end():])))

    if line.startswith(_EQUATION_FENCE):
        return _equation_block(line, cursor, line_number, warnings)

    if line.startswith(_CODE_FENCE):
        language = line[len(_CODE_FENCE):].strip()
        body, closed = cursor.take_until(lambda candidate: candidate.startswith(_CODE_FENCE))
        if not closed:
            _warn_unterminated("code", line_number, warnings)
        return CodeBlock(language, "\n".join(body))

    if line.startswith(_QUOTE_PREFIX):
        return Quote(tuple(tokenize_line(line[len(_QUOTE_PREFIX):])))

    if _DIVIDER_RE.match(line):
        return Divider()

    return Paragraph(tuple(tokenize_line(line)))


def _equation_block(
    line: str,
    cursor: _LineCursor,
    line_number: int,
    warnings: list[ConversionWarning] | None,
) -> EquationBlock:
    # Single-line form needs a closer strictly after the opening fence:
    # "$$x$$" qualifies, "$$" and "$$$$" open a fenced block.
    rest = line[len(_EQUATION_FENCE):]
    close = rest.rfind(_EQUATION_FENCE)
    if close > 0:
        return EquationBlock(rest[:close])

    body, closed = cursor.take_until(lambda candidate: candidate.startswith(_EQUATION_FENCE))
    if not closed:
        _warn_unterminated("equation", line_number, warnings)
    return EquationBlock("\n".join(body))


def _warn_unterminated(
    kind: str,
    line_number: int,
    warnings: list[ConversionWarning] | None,
) -> None:
    message = f"Unterminated {kind} fence opened on line {line_number}; consumed to end of input."
    log.debug(
        message,
        extra={
            "extra_fields": {
                "op": "segment",
                "fence": kind,
                "line": line_number,
            }
        },
    )
    if warnings is not None:
        warnings.append(ConversionWarning(
            code="FENCE_UNTERMINATED",
            message=message,
            context={"fence": kind, "line": line_number},
        ))
