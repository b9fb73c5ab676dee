from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable

from docx import Document as DocxDocument
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.opc.constants import RELATIONSHIP_TYPE as RT
from docx.oxml import OxmlElement
from docx.oxml.ns import qn
from docx.shared import Pt

from . import docx_format
from .inline_parser import inline_to_text
from .model import (
    Block,
    CodeBlock,
    Document,
    Heading,
    HorizontalRule,
    InlineBold,
    InlineCode,
    InlineElement,
    InlineItalic,
    InlineLink,
    InlineText,
    ListBlock,
    Paragraph,
)
from .style_config import DocxStyle

logger = logging.getLogger(__name__)

BULLET = "• "
RULE_TEXT = "—" * 20

# Anything outside the XML 1.0 Char production, which lxml refuses to serialise.
_XML_INVALID = re.compile("[^\t\n\r\x20-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]")


def _xml_text(text: str) -> str:
    return _XML_INVALID.sub("", text)


def render_document(doc: Document, output_path: str | Path, style: DocxStyle | None = None) -> None:
    output_path = Path(output_path)
    style = style or DocxStyle()
    docx = DocxDocument()
    docx_format.apply_page_layout(docx, style)

    for block in doc.blocks:
        _dispatch_block(docx, block, style)

    title = _document_title(doc)
    if title:
        docx.core_properties.title = _xml_text(title)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    docx.save(output_path)
    logger.debug("Rendered %d blocks into %s", len(doc.blocks), output_path)


def _document_title(doc: Document) -> str | None:
    for block in doc.blocks:
        if isinstance(block, Heading) and block.level == 1:
            return inline_to_text(block.inline).strip() or None
    return None


def _dispatch_block(docx: DocxDocument, block: Block, style: DocxStyle) -> None:
    if isinstance(block, Heading):
        _render_heading(docx, block, style)
    elif isinstance(block, Paragraph):
        _render_paragraph(docx, block, style)
    elif isinstance(block, ListBlock):
        _render_list(docx, block, style)
    elif isinstance(block, CodeBlock):
        _render_code_block(docx, block, style)
    elif isinstance(block, HorizontalRule):
        _render_horizontal_rule(docx, style)
    else:
        raise TypeError(f"Unsupported block type: {type(block).__name__}")


def _render_heading(docx: DocxDocument, heading: Heading, style: DocxStyle) -> None:
    paragraph = docx.add_paragraph()
    _render_inline(paragraph, heading.inline, style, heading=True, size_pt=style.heading_size(heading.level))
    docx_format.apply_heading_format(paragraph, style, heading.level)


def _render_paragraph(docx: DocxDocument, block: Paragraph, style: DocxStyle) -> None:
    paragraph = docx.add_paragraph()
    _render_inline(paragraph, block.inline, style)
    docx_format.apply_body_paragraph_format(paragraph, style)


def _render_list(docx: DocxDocument, block: ListBlock, style: DocxStyle) -> None:
    for idx, item in enumerate(block.items, start=1):
        paragraph = docx.add_paragraph()
        prefix = f"{idx}. " if block.ordered else BULLET
        docx_format.set_run_font(paragraph.add_run(prefix), style)
        _render_inline(paragraph, item.inline, style)
        docx_format.apply_list_item_format(paragraph, style)
    # Restore the gap the items suppress between them.
    if block.items:
        paragraph.paragraph_format.space_after = Pt(style.paragraph_space_after_pt)


def _render_code_block(docx: DocxDocument, block: CodeBlock, style: DocxStyle) -> None:
    paragraph = docx.add_paragraph()
    # python-docx turns "\n" into <w:br/> inside a single run.
    run = paragraph.add_run(_xml_text("\n".join(block.lines)))
    docx_format.set_run_font(run, style, code=True)
    docx_format.apply_code_format(paragraph, style)


def _render_horizontal_rule(docx: DocxDocument, style: DocxStyle) -> None:
    paragraph = docx.add_paragraph()
    run = paragraph.add_run(RULE_TEXT)
    docx_format.set_run_font(run, style)
    docx_format.apply_body_paragraph_format(paragraph, style)
    paragraph.alignment = WD_ALIGN_PARAGRAPH.CENTER


def _render_inline(
    paragraph,
    inlines: Iterable[InlineElement],
    style: DocxStyle,
    heading: bool = False,
    size_pt: float | None = None,
) -> None:
    for inline in inlines:
        if isinstance(inline, InlineLink) and inline.url:
            _add_hyperlink(paragraph, inline, style, heading=heading, size_pt=size_pt)
        else:
            _add_span_run(paragraph, inline, style, heading=heading, size_pt=size_pt)


def _add_span_run(paragraph, inline: InlineElement, style: DocxStyle, heading: bool = False, size_pt=None):
    if isinstance(inline, InlineLink):
        # A link without a url is written as its plain label text.
        text = inline_to_text(inline.label)
    else:
        text = inline.text
    run = paragraph.add_run(_xml_text(text))
    docx_format.set_run_font(
        run,
        style,
        bold=heading or isinstance(inline, InlineBold),
        italic=isinstance(inline, InlineItalic),
        code=isinstance(inline, InlineCode),
        size_pt=size_pt,
    )
    return run


def _add_hyperlink(paragraph, link: InlineLink, style: DocxStyle, heading: bool = False, size_pt=None) -> None:
    """Append an external w:hyperlink whose label spans are underlined runs."""
    r_id = paragraph.part.relate_to(_xml_text(link.url), RT.HYPERLINK, is_external=True)
    hyperlink = OxmlElement("w:hyperlink")
    hyperlink.set(qn("r:id"), r_id)
    label = link.label or (InlineText(link.url),)
    for inline in label:
        run = _add_span_run(paragraph, inline, style, heading=heading, size_pt=size_pt)
        run.font.underline = True
        # lxml append moves the run out of the paragraph into the hyperlink.
        hyperlink.append(run._r)
    paragraph._p.append(hyperlink)
