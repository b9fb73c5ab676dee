from __future__ import annotations

import argparse
import logging
from collections import Counter
from pathlib import Path

from . import markdown_parser, renderer_docx, style_config
from .utils import configure_logging, read_markdown, resolve_output_path


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="LiteMark",
        description="Convert lightweight Markdown notes into a styled DOCX document.",
    )
    parser.add_argument("input", type=str, help="Path to Markdown file")
    parser.add_argument("-o", "--output", type=str, help="Output DOCX path or directory")
    parser.add_argument("--style", type=str, help="YAML file with style overrides")
    parser.add_argument(
        "--source-order",
        action="store_true",
        help="Emit a list before the text line that directly follows it",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("--verbose", action="store_true", help="Enable debug logging")
    verbosity.add_argument("--quiet", action="store_true", help="Only log warnings and errors")
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    configure_logging(verbose=args.verbose, quiet=args.quiet)
    input_path = Path(args.input).expanduser()
    if not input_path.exists():
        raise FileNotFoundError(f"Input file not found: {input_path}")
    output_path = resolve_output_path(input_path, args.output)

    style = None
    if args.style:
        logging.info("Loading style from %s", args.style)
        style = style_config.load_style(args.style)

    logging.info("Reading %s", input_path)
    markdown_text = read_markdown(input_path)
    logging.debug("Markdown length: %d chars", len(markdown_text))

    logging.info("Parsing markdown...")
    document = markdown_parser.parse_markdown(markdown_text, source_order=args.source_order)
    counts = Counter(type(block).__name__ for block in document.blocks)
    logging.debug("Blocks: %s", ", ".join(f"{name}={n}" for name, n in sorted(counts.items())) or "none")

    logging.info("Rendering DOCX to %s", output_path)
    renderer_docx.render_document(document, output_path=output_path, style=style)

    logging.info("Done. Saved to %s", output_path)


if __name__ == "__main__":
    main()
