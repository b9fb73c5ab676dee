from __future__ import annotations

import re
from typing import List, Tuple

from .model import (
    InlineBold,
    InlineCode,
    InlineElement,
    InlineItalic,
    InlineLink,
    InlineText,
)

_LINK_SPLIT = re.compile(r"(\[.*?\]\(.*?\))")
_LINK_PARTS = re.compile(r"\[(.*?)\]\((.*?)\)")
_BOLD_SPLIT = re.compile(r"(\*\*.*?\*\*)")
_CODE_SPLIT = re.compile(r"(`.*?`)")
_ITALIC_SPLIT = re.compile(r"(\*.*?\*)")


def resolve_inline(text: str, keep_empty: bool = False) -> Tuple[InlineElement, ...]:
    """Resolve links, bold, inline code and italic spans in ``text``.

    Tiers run in that order and each one only sees the segments the previous
    tier left unmatched. Link labels are resolved again; bold, code and italic
    contents are kept literally. Empty text segments produced by splitting are
    dropped unless ``keep_empty`` is set.
    """
    spans: List[InlineElement] = []
    for part, matched in _split(_LINK_SPLIT, text):
        if matched:
            spans.append(_build_link(part, keep_empty))
        else:
            spans.extend(_resolve_bold(part, keep_empty))
    return tuple(spans)


def _split(pattern: re.Pattern, text: str) -> List[Tuple[str, bool]]:
    # With a single capturing group, odd indices of re.split are the matches.
    return [(part, idx % 2 == 1) for idx, part in enumerate(pattern.split(text))]


def _build_link(part: str, keep_empty: bool) -> InlineLink:
    match = _LINK_PARTS.fullmatch(part)
    label, url = match.group(1), match.group(2)
    return InlineLink(label=resolve_inline(label, keep_empty=keep_empty), url=url)


def _resolve_bold(text: str, keep_empty: bool) -> List[InlineElement]:
    spans: List[InlineElement] = []
    for part, matched in _split(_BOLD_SPLIT, text):
        if matched:
            spans.append(InlineBold(part[2:-2]))
        else:
            spans.extend(_resolve_code(part, keep_empty))
    return spans


def _resolve_code(text: str, keep_empty: bool) -> List[InlineElement]:
    spans: List[InlineElement] = []
    for part, matched in _split(_CODE_SPLIT, text):
        if matched:
            spans.append(InlineCode(part[1:-1]))
        else:
            spans.extend(_resolve_italic(part, keep_empty))
    return spans


def _resolve_italic(text: str, keep_empty: bool) -> List[InlineElement]:
    spans: List[InlineElement] = []
    for part, matched in _split(_ITALIC_SPLIT, text):
        if matched and len(part) > 2:
            spans.append(InlineItalic(part[1:-1]))
        elif part or keep_empty:
            spans.append(InlineText(part))
    return spans


def inline_to_text(inlines) -> str:
    """Flatten resolved spans back into their visible text."""
    parts: list[str] = []
    for inline in inlines:
        if isinstance(inline, InlineLink):
            parts.append(inline_to_text(inline.label))
        else:
            parts.append(inline.text)
    return "".join(parts)
