from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import List

from .inline_parser import resolve_inline
from .model import (
    Block,
    CodeBlock,
    Document,
    Heading,
    HorizontalRule,
    ListBlock,
    ListItem,
    Paragraph,
)

logger = logging.getLogger(__name__)

FENCE = "```"
HEADING_PREFIXES = (("# ", 1), ("## ", 2), ("### ", 3))
RULE = "---"
UNORDERED_MARKERS = ("- ", "* ")

# Whitespace removed by trimming; includes the BOM, excludes the \x1c-\x1f separators.
WHITESPACE = (
    "\t\n\x0b\x0c\r \xa0\u1680\u2000\u2001\u2002\u2003\u2004\u2005\u2006"
    "\u2007\u2008\u2009\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"
)
_WS = "[" + re.escape(WHITESPACE) + "]"
_ORDERED_MARKER = re.compile(r"^[0-9]+\." + _WS)
_ORDERED_PREFIX = re.compile(r"^[0-9]+\." + _WS + "+")

UNORDERED = "unordered"
ORDERED = "ordered"


@dataclass
class _ScanState:
    pending: List[str] = field(default_factory=list)
    in_code: bool = False
    language: str | None = None
    pending_items: List[str] = field(default_factory=list)
    list_kind: str | None = None
    blocks: List[Block] = field(default_factory=list)


def parse_markdown(text: str, source_order: bool = False) -> Document:
    """Scan ``text`` line by line into a Document.

    By default a list directly followed by a plain text line is emitted after
    the paragraph that follows it, because the text line leaves the list open
    and every flush finalises the paragraph first. ``source_order=True`` makes
    a text line close the pending list, so blocks come out in the order they
    appear.
    """
    state = _ScanState()
    for line in text.split("\n"):
        _scan_line(state, line, source_order)

    if state.in_code:
        logger.debug("Unterminated code fence, closing it at end of input")
        _close_code(state)
    else:
        _flush_paragraph(state)
        _flush_list(state)
    return Document(blocks=tuple(state.blocks))


def _scan_line(state: _ScanState, line: str, source_order: bool) -> None:
    stripped = line.strip(WHITESPACE)

    if stripped.startswith(FENCE):
        if state.in_code:
            _close_code(state)
        else:
            _flush_paragraph(state)
            _flush_list(state)
            state.in_code = True
            state.language = stripped[len(FENCE) :].strip(WHITESPACE) or None
            state.pending = []
        return

    if state.in_code:
        state.pending.append(line)
        return

    for prefix, level in HEADING_PREFIXES:
        if stripped.startswith(prefix):
            _flush_paragraph(state)
            _flush_list(state)
            heading_text = stripped[len(prefix) :]
            state.blocks.append(Heading(level=level, text=heading_text, inline=resolve_inline(heading_text)))
            return

    if stripped == RULE:
        _flush_paragraph(state)
        _flush_list(state)
        state.blocks.append(HorizontalRule())
        return

    if stripped.startswith(UNORDERED_MARKERS):
        _add_list_item(state, UNORDERED, stripped[2:])
        return

    if _ORDERED_MARKER.match(stripped):
        _add_list_item(state, ORDERED, _ORDERED_PREFIX.sub("", stripped, count=1))
        return

    if not stripped:
        _flush_paragraph(state)
        _flush_list(state)
        return

    if source_order:
        _flush_list(state)
    state.pending.append(line)


def _add_list_item(state: _ScanState, kind: str, item: str) -> None:
    _flush_paragraph(state)
    if state.list_kind is not None and state.list_kind != kind:
        _flush_list(state)
    state.list_kind = kind
    state.pending_items.append(item)


def _close_code(state: _ScanState) -> None:
    state.blocks.append(CodeBlock(lines=tuple(state.pending), language=state.language))
    state.pending = []
    state.in_code = False
    state.language = None


def _flush_paragraph(state: _ScanState) -> None:
    if not state.pending:
        return
    text = " ".join(state.pending).strip(WHITESPACE)
    if text:
        state.blocks.append(Paragraph(inline=resolve_inline(text)))
    state.pending = []


def _flush_list(state: _ScanState) -> None:
    if state.pending_items:
        items = tuple(ListItem(text=item, inline=resolve_inline(item)) for item in state.pending_items)
        state.blocks.append(ListBlock(items=items, ordered=state.list_kind == ORDERED))
        state.pending_items = []
    state.list_kind = None
