import textwrap

import pytest
import yaml

from LiteMark.style_config import DocxStyle, load_style, parse_style


def test_empty_yaml_gives_defaults():
    assert parse_style("") == DocxStyle()


def test_overrides_and_heading_sizes(tmp_path):
    path = tmp_path / "style.yaml"
    path.write_text(
        textwrap.dedent(
            """
            font_name: Georgia
            font_size_pt: 12
            heading_sizes_pt:
              2: 17
            """
        ),
        encoding="utf-8",
    )
    style = load_style(path)
    assert style.font_name == "Georgia"
    assert style.font_size_pt == 12.0
    assert style.heading_size(1) == DocxStyle().heading_size(1)
    assert style.heading_size(2) == 17.0
    assert style.code_font_name == DocxStyle().code_font_name


def test_root_must_be_mapping():
    with pytest.raises(ValueError):
        parse_style("- a\n- b")


@pytest.mark.parametrize(
    "text",
    [
        "colour: red",
        "font_size_pt: -1",
        "font_size_pt: big",
        "margin_cm: true",
        "font_name: ''",
        "heading_sizes_pt: 12",
        "heading_sizes_pt:\n  4: 10",
        "heading_sizes_pt:\n  true: 40",
    ],
)
def test_invalid_fields(text):
    with pytest.raises(ValueError):
        parse_style(text)


def test_yaml_syntax_error_propagates():
    with pytest.raises(yaml.YAMLError):
        parse_style("font_name: [unclosed")
