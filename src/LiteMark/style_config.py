from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from pathlib import Path

import yaml


def _default_heading_sizes() -> dict[int, float]:
    return {1: 24.0, 2: 18.0, 3: 14.0}


@dataclass(frozen=True)
class DocxStyle:
    font_name: str = "Calibri"
    font_size_pt: float = 11.0
    code_font_name: str = "Courier New"
    code_font_size_pt: float = 10.0
    line_spacing_pt: float = 15.0
    paragraph_space_after_pt: float = 8.0
    heading_sizes_pt: dict[int, float] = field(default_factory=_default_heading_sizes)
    margin_cm: float = 2.0

    def heading_size(self, level: int) -> float:
        return self.heading_sizes_pt.get(level, self.font_size_pt)


_NUMBER_KEYS = {
    "font_size_pt",
    "code_font_size_pt",
    "line_spacing_pt",
    "paragraph_space_after_pt",
    "margin_cm",
}
_STRING_KEYS = {"font_name", "code_font_name"}


def load_style(path: str | Path) -> DocxStyle:
    return parse_style(Path(path).read_text(encoding="utf-8"))


def parse_style(text: str) -> DocxStyle:
    """Parse a YAML mapping of style overrides on top of the defaults."""
    data = yaml.safe_load(text) or {}
    if not isinstance(data, dict):
        raise ValueError("Style YAML root must be a mapping of style fields.")

    known = {f.name for f in fields(DocxStyle)}
    unknown = sorted(str(key) for key in data if key not in known)
    if unknown:
        raise ValueError(f"Unknown style fields: {', '.join(unknown)}")

    overrides: dict = {}
    for key, value in data.items():
        if key in _STRING_KEYS:
            if not isinstance(value, str) or not value:
                raise ValueError(f"Style field '{key}' must be a non-empty string.")
            overrides[key] = value
        elif key in _NUMBER_KEYS:
            overrides[key] = _positive_number(key, value)
        elif key == "heading_sizes_pt":
            overrides[key] = _heading_sizes(value)
    return replace(DocxStyle(), **overrides)


def _positive_number(key: str, value) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
        raise ValueError(f"Style field '{key}' must be a positive number.")
    return float(value)


def _heading_sizes(value) -> dict[int, float]:
    if not isinstance(value, dict):
        raise ValueError("Style field 'heading_sizes_pt' must map heading levels to sizes.")
    sizes = _default_heading_sizes()
    for level, size in value.items():
        if isinstance(level, bool) or level not in (1, 2, 3):
            raise ValueError(f"Heading level must be 1, 2 or 3, got {level!r}.")
        sizes[level] = _positive_number(f"heading_sizes_pt.{level}", size)
    return sizes
