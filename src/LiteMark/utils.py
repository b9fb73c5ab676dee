from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

DOCX_SUFFIX = ".docx"


def configure_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Configure a console logger; ``quiet`` wins over ``verbose``."""
    if quiet:
        level = logging.WARNING
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s %(message)s")


def resolve_output_path(input_path: Path, output: Optional[str]) -> Path:
    """Pick the DOCX path: explicit file, file inside a directory, or input renamed."""
    if not output:
        return input_path.with_suffix(DOCX_SUFFIX)
    out_path = Path(output).expanduser()
    if out_path.is_dir():
        return out_path / f"{input_path.stem}{DOCX_SUFFIX}"
    return out_path


def read_markdown(path: Path) -> str:
    # utf-8-sig drops a byte order mark; the scanner splits on "\n" only.
    return path.read_text(encoding="utf-8-sig").replace("\r\n", "\n")
