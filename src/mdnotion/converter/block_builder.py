"""Convert :data:`~mdnotion.models.Block` values to Notion block dicts.

Every block becomes exactly one record::

    {"object": "block", "type": T, T: payload}

=================  ======================  ==========================================
Block              ``type``                payload
=================  ======================  ==========================================
Heading(n)         ``heading_n``           ``{"rich_text": [...]}``
Paragraph          ``paragraph``           ``{"rich_text": [...]}``
BulletItem         ``bulleted_list_item``  ``{"rich_text": [...]}``
NumberedItem       ``numbered_list_item``  ``{"rich_text": [...]}``
Quote              ``quote``               ``{"rich_text": [...]}``
Divider            ``divider``             ``{}``
CodeBlock          ``code``                ``{"rich_text": [...], "language": ...}``
EquationBlock      ``equation``            ``{"expression": ...}``
=================  ======================  ==========================================
"""

from __future__ import annotations

import re

from mdnotion.config import ConverterConfig
from mdnotion.converter.rich_text import build_rich_text
from mdnotion.models import (
    Block,
    BulletItem,
    CodeBlock,
    Divider,
    EquationBlock,
    Heading,
    NumberedItem,
    Paragraph,
    Quote,
    TextSpan,
)

# ---------------------------------------------------------------------------
# Notion code language mapping
# ---------------------------------------------------------------------------

# Identifiers the Notion API accepts for code.language.
_NOTION_LANGUAGES: frozenset[str] = frozenset({
    "abap", "arduino", "bash", "basic", "c", "clojure", "coffeescript",
    "c++", "c#", "css", "dart", "diff", "docker", "elixir", "elm",
    "erlang", "flow", "fortran", "f#", "gherkin", "glsl", "go", "graphql",
    "groovy", "haskell", "html", "java", "javascript", "json", "julia",
    "kotlin", "latex", "less", "lisp", "livescript", "lua", "makefile",
    "markdown", "markup", "matlab", "mermaid", "nix", "objective-c",
    "ocaml", "pascal", "perl", "php", "plain text", "powershell",
    "prolog", "protobuf", "python", "r", "reason", "ruby", "rust",
    "sass", "scala", "scheme", "scss", "shell", "sql", "swift",
    "typescript", "vb.net", "verilog", "vhdl", "visual basic",
    "webassembly", "xml", "yaml", "java/c/c++/c#",
})

_LANGUAGE_ALIASES: dict[str, str] = {
    "py": "python",
    "js": "javascript",
    "ts": "typescript",
    "jsx": "javascript",
    "tsx": "typescript",
    "sh": "shell",
    "zsh": "shell",
    "rb": "ruby",
    "rs": "rust",
    "yml": "yaml",
    "md": "markdown",
    "tex": "latex",
    "cpp": "c++",
    "cs": "c#",
    "csharp": "c#",
    "golang": "go",
    "kt": "kotlin",
    "dockerfile": "docker",
    "make": "makefile",
    "ps1": "powershell",
}


def normalize_language(info: str, default: str = "plain text") -> str:
    """Map a code fence info string to a Notion language identifier.

    Only the first word counts, case-insensitively.  A trailing version
    number is dropped (``python3`` -> ``python``).  Anything unrecognised
    maps to *default*.
    """
    words = info.strip().lower().split()
    if not words:
        return default
    lang = words[0]
    for candidate in (lang, re.sub(r"\d+$", "", lang)):
        if candidate in _NOTION_LANGUAGES:
            return candidate
        if candidate in _LANGUAGE_ALIASES:
            return _LANGUAGE_ALIASES[candidate]
    return default


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def build_blocks(blocks: list[Block], config: ConverterConfig | None = None) -> list[dict]:
    """Emit one Notion block dict per block, preserving order."""
    if config is None:
        config = ConverterConfig()
    return [build_block(block, config) for block in blocks]


def build_block(block: Block, config: ConverterConfig | None = None) -> dict:
    """Emit the Notion block dict for a single block.

    Raises
    ------
    TypeError
        If *block* is not one of the block dataclasses.
    """
    if config is None:
        config = ConverterConfig()

    if isinstance(block, Heading):
        return _record(f"heading_{block.level}", {"rich_text": build_rich_text(block.spans, config)})
    if isinstance(block, Paragraph):
        return _record("paragraph", {"rich_text": build_rich_text(block.spans, config)})
    if isinstance(block, BulletItem):
        return _record("bulleted_list_item", {"rich_text": build_rich_text(block.spans, config)})
    if isinstance(block, NumberedItem):
        return _record("numbered_list_item", {"rich_text": build_rich_text(block.spans, config)})
    if isinstance(block, Quote):
        return _record("quote", {"rich_text": build_rich_text(block.spans, config)})
    if isinstance(block, Divider):
        return _record("divider", {})
    if isinstance(block, CodeBlock):
        return _build_code(block, config)
    if isinstance(block, EquationBlock):
        return _record("equation", {"expression": block.expression.strip()})
    raise TypeError(f"Unsupported block: {block!r}")


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _record(block_type: str, payload: dict) -> dict:
    return {
        "object": "block",
        "type": block_type,
        block_type: payload,
    }


def _build_code(block: CodeBlock, config: ConverterConfig) -> dict:
    if config.normalize_code_language:
        language = normalize_language(block.language, config.default_code_language)
    else:
        language = block.language or config.default_code_language
    return _record("code", {
        "rich_text": build_rich_text([TextSpan(block.code)], config),
        "language": language,
    })
