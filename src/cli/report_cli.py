# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Command line entry point converting a code metrics XML report to CSV or HTML."""

import argparse
import logging
import sys
from pathlib import Path
from typing import TextIO

from rich.console import Console
from rich.logging import RichHandler

from cmr.extractor import ReportExtractor, load_document
from cmr.renderer import Renderer
from cmr.renderers import CsvRenderer, HtmlRenderer

logger = logging.getLogger(__name__)

USAGE_MESSAGE = "Please provide two arguments: the input XML path and the output HTM/CSV path."


def configure_logging(level: int | str = logging.INFO) -> None:
    """Configure application logging with Rich handler.

    Args:
        level: Logging severity threshold.
    """
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI parser.

    Returns:
        Configured argument parser instance.
    """
    parser = argparse.ArgumentParser(
        prog="cmr",
        description="Convert a code metrics XML report to CSV or HTML.",
    )
    parser.add_argument(
        "paths",
        nargs="*",
        metavar="PATH",
        help="Input XML report path followed by the output path.",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        help="Logging threshold.",
    )
    return parser


def select_renderer(output_path: Path) -> Renderer:
    """Pick the renderer matching the output file extension.

    Any extension starting with ``.htm`` (case-insensitive) selects HTML,
    everything else selects CSV. A name made only of an extension, such as
    ``.htm``, counts as that extension.
    """
    name = output_path.name
    extension = name[name.rfind(".") :] if "." in name else ""
    if extension.lower().startswith(".htm"):
        return HtmlRenderer()
    return CsvRenderer()


def convert(input_path: Path, output_path: Path) -> Path:
    """Convert one report file and write the rendered output.

    Args:
        input_path: XML report path.
        output_path: Output file path; overwritten if it exists.

    Returns:
        Absolute path of the written file.

    Raises:
        FileNotFoundError: If the input report does not exist.
        ReportError: If the report cannot be parsed or extracted.
    """
    output_path = output_path.resolve()
    renderer = select_renderer(output_path)
    logger.info(
        f"Converting report (input={input_path} output={output_path} renderer={type(renderer).__name__})"
    )
    report = ReportExtractor().extract(load_document(input_path))
    content = renderer.render(report)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(content, encoding="utf-8")
    return output_path


def run(argv: list[str], stdout: TextIO, stderr: TextIO) -> int:
    """Run the CLI.

    Report errors are not handled here and propagate to the caller.

    Args:
        argv: CLI arguments.
        stdout: Standard output stream.
        stderr: Standard error stream.

    Returns:
        Exit code.
    """
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit:
        logger.warning(f"Argument parsing failed (argv={argv})")
        return 2

    console = Console(file=stdout, force_terminal=False, color_system="truecolor")
    if len(args.paths) < 2:
        console.print(USAGE_MESSAGE, markup=False, highlight=False, soft_wrap=True)
        return 0
    if len(args.paths) > 2:
        logger.warning(f"Too many arguments (paths={args.paths})")
        stderr.write(parser.format_usage())
        return 2

    logging.getLogger().setLevel(args.log_level)
    written = convert(input_path=Path(args.paths[0]), output_path=Path(args.paths[1]))
    console.print(f"Saved: {written}", markup=False, highlight=False, soft_wrap=True)
    return 0


def main() -> None:
    """Run the CLI application and exit."""
    configure_logging()
    exit_code = run(sys.argv[1:], stdout=sys.stdout, stderr=sys.stderr)
    raise SystemExit(exit_code)


if __name__ == "__main__":
    main()
