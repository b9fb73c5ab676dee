from __future__ import annotations

from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.shared import Cm, Pt

from .style_config import DocxStyle


def apply_page_layout(doc, style: DocxStyle) -> None:
    """Apply equal page margins to every section."""
    for section in doc.sections:
        section.left_margin = Cm(style.margin_cm)
        section.right_margin = Cm(style.margin_cm)
        section.top_margin = Cm(style.margin_cm)
        section.bottom_margin = Cm(style.margin_cm)


def set_run_font(
    run,
    style: DocxStyle,
    bold: bool = False,
    italic: bool = False,
    code: bool = False,
    size_pt: float | None = None,
) -> None:
    run.font.name = style.code_font_name if code else style.font_name
    if size_pt is None:
        size_pt = style.code_font_size_pt if code else style.font_size_pt
    run.font.size = Pt(size_pt)
    run.bold = bold
    run.italic = italic


def apply_body_paragraph_format(paragraph, style: DocxStyle) -> None:
    paragraph.alignment = WD_ALIGN_PARAGRAPH.LEFT
    paragraph.paragraph_format.space_before = Pt(0)
    paragraph.paragraph_format.space_after = Pt(style.paragraph_space_after_pt)
    paragraph.paragraph_format.line_spacing = Pt(style.line_spacing_pt)
    paragraph.paragraph_format.first_line_indent = Cm(0)


def apply_heading_format(paragraph, style: DocxStyle, level: int) -> None:
    paragraph.alignment = WD_ALIGN_PARAGRAPH.LEFT
    paragraph.paragraph_format.space_before = Pt(style.heading_size(level))
    paragraph.paragraph_format.space_after = Pt(style.paragraph_space_after_pt)
    paragraph.paragraph_format.keep_with_next = True


def apply_code_format(paragraph, style: DocxStyle) -> None:
    paragraph.alignment = WD_ALIGN_PARAGRAPH.LEFT
    paragraph.paragraph_format.first_line_indent = Cm(0)
    paragraph.paragraph_format.left_indent = Cm(0.5)
    paragraph.paragraph_format.space_before = Pt(0)
    paragraph.paragraph_format.space_after = Pt(style.paragraph_space_after_pt)
    paragraph.paragraph_format.line_spacing = Pt(style.code_font_size_pt * 1.2)


def apply_list_item_format(paragraph, style: DocxStyle) -> None:
    apply_body_paragraph_format(paragraph, style)
    paragraph.paragraph_format.left_indent = Cm(0.75)
    paragraph.paragraph_format.first_line_indent = Cm(-0.5)
    paragraph.paragraph_format.space_after = Pt(0)
