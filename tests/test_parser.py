import textwrap

from LiteMark import markdown_parser
from LiteMark.model import (
    CodeBlock,
    Heading,
    HorizontalRule,
    InlineBold,
    InlineCode,
    InlineItalic,
    InlineLink,
    InlineText,
    ListBlock,
    Paragraph,
)


def _parse(text, **kwargs):
    return list(markdown_parser.parse_markdown(text, **kwargs).blocks)


def _items(block):
    return [item.text for item in block.items]


def test_heading_and_paragraph():
    blocks = _parse("# Title\n\nHello **world**.")
    assert blocks == [
        Heading(level=1, text="Title", inline=(InlineText("Title"),)),
        Paragraph(inline=(InlineText("Hello "), InlineBold("world"), InlineText("."))),
    ]


def test_heading_levels_and_four_hashes():
    blocks = _parse("# One\n## Two\n### Three\n#### Four")
    assert [b.level for b in blocks[:3]] == [1, 2, 3]
    assert [b.text for b in blocks[:3]] == ["One", "Two", "Three"]
    assert blocks[3] == Paragraph(inline=(InlineText("#### Four"),))


def test_heading_without_space_is_text():
    blocks = _parse("#Title")
    assert blocks == [Paragraph(inline=(InlineText("#Title"),))]


def test_byte_order_mark_is_trimmed():
    blocks = _parse("\ufeff# Title\n\ufeff")
    assert blocks == [Heading(level=1, text="Title", inline=(InlineText("Title"),))]


def test_information_separators_are_not_trimmed():
    blocks = _parse("\x1c- a")
    assert blocks == [Paragraph(inline=(InlineText("\x1c- a"),))]


def test_ordered_marker_needs_ascii_digits():
    assert _parse("\u0661. x") == [Paragraph(inline=(InlineText("\u0661. x"),))]
    assert _parse("\uff11. x") == [Paragraph(inline=(InlineText("\uff11. x"),))]


def test_ordered_marker_accepts_unicode_space():
    blocks = _parse("1.\u00a0one")
    assert blocks[0].ordered
    assert _items(blocks[0]) == ["one"]


def test_blank_line_splits_lists():
    blocks = _parse("- a\n- b\n\n- c")
    assert len(blocks) == 2
    assert all(isinstance(b, ListBlock) and not b.ordered for b in blocks)
    assert _items(blocks[0]) == ["a", "b"]
    assert _items(blocks[1]) == ["c"]


def test_ordered_list():
    blocks = _parse("1. one\n2. two\n10.   ten")
    assert len(blocks) == 1
    assert blocks[0].ordered
    assert _items(blocks[0]) == ["one", "two", "ten"]


def test_star_marker_is_unordered():
    blocks = _parse("* a\n- b")
    assert len(blocks) == 1
    assert _items(blocks[0]) == ["a", "b"]


def test_list_kind_switch_closes_list():
    blocks = _parse("- a\n1. b\n- c")
    assert [(b.ordered, _items(b)) for b in blocks] == [(False, ["a"]), (True, ["b"]), (False, ["c"])]


def test_list_items_are_span_resolved():
    blocks = _parse("- a *b* `c`")
    item = blocks[0].items[0]
    assert item.text == "a *b* `c`"
    assert item.inline == (InlineText("a "), InlineItalic("b"), InlineText(" "), InlineCode("c"))


def test_horizontal_rule():
    assert _parse("---") == [HorizontalRule()]


def test_rule_flushes_paragraph_and_list():
    blocks = _parse("text\n---\n- a\n---")
    assert [type(b) for b in blocks] == [Paragraph, HorizontalRule, ListBlock, HorizontalRule]


def test_code_block_verbatim():
    blocks = _parse("```\nraw *text*\n```")
    assert blocks == [CodeBlock(lines=("raw *text*",))]


def test_code_block_keeps_whitespace_and_markdown():
    md_text = "intro\n```python\n    # not a heading\n\n- not a list\n  ---  \n```\nafter"
    blocks = _parse(md_text)
    assert blocks[0] == Paragraph(inline=(InlineText("intro"),))
    assert blocks[1] == CodeBlock(
        lines=("    # not a heading", "", "- not a list", "  ---  "),
        language="python",
    )
    assert blocks[2] == Paragraph(inline=(InlineText("after"),))


def test_fence_flushes_pending_list():
    blocks = _parse("- a\n```\ncode\n```")
    assert isinstance(blocks[0], ListBlock)
    assert blocks[1] == CodeBlock(lines=("code",))


def test_unterminated_fence_closes_at_end():
    blocks = _parse("para\n```\nline one\n\nline two")
    assert blocks == [
        Paragraph(inline=(InlineText("para"),)),
        CodeBlock(lines=("line one", "", "line two")),
    ]


def test_empty_code_block():
    assert _parse("```\n```") == [CodeBlock(lines=())]


def test_paragraph_lines_joined_with_space():
    blocks = _parse("first line\n  second line  \nthird")
    assert blocks == [Paragraph(inline=(InlineText("first line   second line   third"),))]


def test_list_followed_by_text_emits_paragraph_first():
    blocks = _parse("- item\nmore text")
    assert blocks[0] == Paragraph(inline=(InlineText("more text"),))
    assert isinstance(blocks[1], ListBlock)
    assert _items(blocks[1]) == ["item"]


def test_text_between_items_keeps_list_open():
    blocks = _parse("- a\nloose\n- b")
    assert blocks[0] == Paragraph(inline=(InlineText("loose"),))
    assert _items(blocks[1]) == ["a", "b"]


def test_source_order_mode():
    blocks = _parse("- item\nmore text", source_order=True)
    assert isinstance(blocks[0], ListBlock)
    assert _items(blocks[0]) == ["item"]
    assert blocks[1] == Paragraph(inline=(InlineText("more text"),))

    blocks = _parse("- a\nloose\n- b", source_order=True)
    assert [type(b) for b in blocks] == [ListBlock, Paragraph, ListBlock]


def test_link_in_paragraph():
    blocks = _parse("See [**hi**](http://x) now")
    assert blocks[0].inline == (
        InlineText("See "),
        InlineLink(label=(InlineBold("hi"),), url="http://x"),
        InlineText(" now"),
    )


def test_full_document():
    md_text = textwrap.dedent(
        """
        # Notes

        Intro with `code` and a [link](https://example.com).

        ## Steps
        1. First
        2. Second

        ---

        ```
        print("hi")
        ```
        """
    )
    blocks = _parse(md_text)
    assert [type(b) for b in blocks] == [Heading, Paragraph, Heading, ListBlock, HorizontalRule, CodeBlock]
    assert blocks[3].ordered
    assert blocks[5].lines == ('print("hi")',)


def test_total_on_odd_input():
    for text in ["", "\n\n", "**", "[a](", "```", "1.", "- ", "* * *", "`", "###", "\t"]:
        markdown_parser.parse_markdown(text)
    assert _parse("") == []
    assert _parse("```") == [CodeBlock(lines=())]
    assert _parse("1.") == [Paragraph(inline=(InlineText("1."),))]
    blocks = _parse("* * *")
    assert len(blocks) == 1 and not blocks[0].ordered
    assert _items(blocks[0]) == ["* *"]
