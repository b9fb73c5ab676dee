from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Block:
    """Base class for block-level nodes."""


@dataclass(frozen=True)
class Document:
    blocks: Tuple[Block, ...]


@dataclass(frozen=True)
class InlineElement:
    """Base class for inline nodes."""


@dataclass(frozen=True)
class InlineText(InlineElement):
    text: str


@dataclass(frozen=True)
class InlineBold(InlineElement):
    text: str


@dataclass(frozen=True)
class InlineItalic(InlineElement):
    text: str


@dataclass(frozen=True)
class InlineCode(InlineElement):
    text: str


@dataclass(frozen=True)
class InlineLink(InlineElement):
    label: Tuple[InlineElement, ...]
    url: str


@dataclass(frozen=True)
class Heading(Block):
    level: int
    text: str
    inline: Tuple[InlineElement, ...]


@dataclass(frozen=True)
class Paragraph(Block):
    inline: Tuple[InlineElement, ...]


@dataclass(frozen=True)
class ListItem:
    text: str
    inline: Tuple[InlineElement, ...]


@dataclass(frozen=True)
class ListBlock(Block):
    items: Tuple[ListItem, ...]
    ordered: bool


@dataclass(frozen=True)
class CodeBlock(Block):
    lines: Tuple[str, ...]
    language: str | None = None


@dataclass(frozen=True)
class HorizontalRule(Block):
    """Horizontal rule / thematic break."""
