"""Data models for the mdnotion converter.

Two closed families of frozen dataclasses sit between the parser and the
emitter:

* **Spans** -- :class:`TextSpan` and :class:`EquationSpan`, each carrying a
  :class:`SpanStyle`.  They describe one inline run of a block's text.
* **Blocks** -- one dataclass per supported Notion block kind.

Both are produced once by a parse, read once by
:func:`~mdnotion.converter.block_builder.build_blocks`, then discarded.
Nothing here knows about the Notion wire format; field names are mapped at
the serialization boundary.

:class:`ConversionWarning` and :class:`ConversionResult` are the pipeline's
result containers.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Union

# ---------------------------------------------------------------------------
# Inline spans
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class SpanStyle:
    """Independent inline style flags.

    Flags are OR-merged: once a run is bold, everything tokenized inside it
    stays bold.
    """

    bold: bool = False
    italic: bool = False
    code: bool = False

    def merge(self, **flags: bool) -> SpanStyle:
        """Return a copy with *flags* OR-merged onto this style."""
        merged = {name: getattr(self, name) or value for name, value in flags.items()}
        return replace(self, **merged)

    @property
    def is_empty(self) -> bool:
        return not (self.bold or self.italic or self.code)

    def as_annotations(self) -> dict[str, bool]:
        """Return only the flags that are set, keyed by Notion annotation name."""
        return {
            name: True
            for name in ("bold", "italic", "code")
            if getattr(self, name)
        }


@dataclass(frozen=True)
class TextSpan:
    """A run of literal text."""

    content: str
    style: SpanStyle = field(default_factory=SpanStyle)


@dataclass(frozen=True)
class EquationSpan:
    """An inline ``$...$`` expression.  The expression is never re-tokenized."""

    expression: str
    style: SpanStyle = field(default_factory=SpanStyle)


RichSpan = Union[TextSpan, EquationSpan]


# ---------------------------------------------------------------------------
# Blocks
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Heading:
    """``#``, ``##`` or ``###`` heading."""

    level: int
    spans: tuple[RichSpan, ...]


@dataclass(frozen=True)
class Paragraph:
    spans: tuple[RichSpan, ...]


@dataclass(frozen=True)
class BulletItem:
    spans: tuple[RichSpan, ...]


@dataclass(frozen=True)
class NumberedItem:
    spans: tuple[RichSpan, ...]


@dataclass(frozen=True)
class Quote:
    spans: tuple[RichSpan, ...]


@dataclass(frozen=True)
class Divider:
    pass


@dataclass(frozen=True)
class CodeBlock:
    """A fenced code block.

    Attributes
    ----------
    language:
        The fence info string, stripped.  May be empty.
    code:
        Lines between the fences joined with ``"\\n"``, verbatim.
    """

    language: str
    code: str


@dataclass(frozen=True)
class EquationBlock:
    """A ``$$`` display equation.  *expression* is stored as scanned."""

    expression: str


Block = Union[
    Heading,
    Paragraph,
    BulletItem,
    NumberedItem,
    Quote,
    Divider,
    CodeBlock,
    EquationBlock,
]


# ---------------------------------------------------------------------------
# Conversion results
# ---------------------------------------------------------------------------

@dataclass
class ConversionWarning:
    """A non-fatal issue encountered during conversion.

    Attributes
    ----------
    code:
        A machine-readable warning code (e.g. ``"FENCE_UNTERMINATED"``).
    message:
        A human-readable description of the issue.
    context:
        Arbitrary structured data for diagnostics.
    """

    code: str
    message: str
    context: dict = field(default_factory=dict)


@dataclass
class ConversionResult:
    """Output of :meth:`MarkdownToNotionConverter.convert`.

    Attributes
    ----------
    blocks:
        Notion block payloads (dicts), in input order, ready to be embedded
        as ``children`` of a page-create or block-append request.
    warnings:
        Non-fatal issues discovered during conversion.  Their presence
        never changes *blocks*.
    """

    blocks: list[dict] = field(default_factory=list)
    warnings: list[ConversionWarning] = field(default_factory=list)
