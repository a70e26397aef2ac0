#!/usr/bin/env python3

import io
import logging
import sys
from typing import Any, Dict, IO, Optional

import click

from unidiffr import __version__
from unidiffr.config import load_config
from unidiffr.diff_parser import parse_diff
from unidiffr.errors import UnidiffError
from unidiffr.line_reader import read_lines
from unidiffr.renderers import RENDERERS, get_renderer

logger = logging.getLogger(__name__)


def run(stream: IO[str], config: Dict[str, Any]) -> str:
    """
    Parse a diff from a stream and render it.

    Args:
        stream: Text stream holding one unified diff
        config: Configuration dictionary

    Returns:
        Rendered output
    """
    lines = read_lines(stream)
    diff = parse_diff(lines)
    renderer = get_renderer(config)
    logger.debug("Rendering %d chunks with %s", len(diff.chunks), renderer.name)
    return renderer.render(diff)


@click.command()
@click.argument("file", type=click.File("rb"), default="-", required=False)
@click.option("--format", "output_format", type=click.Choice(sorted(RENDERERS)), default=None,
              help="Output format (default from UNIDIFFR_OUTPUT_FORMAT, else raw).")
@click.option("-j", "--json", "as_json", is_flag=True, help="Sets the output format to JSON.")
@click.option("--log-level", default=None, help="Logging level (default from UNIDIFFR_LOG_LEVEL).")
@click.version_option(__version__, prog_name="unidiffr")
def main(file: IO[bytes], output_format: Optional[str], as_json: bool, log_level: Optional[str]):
    """Parses unified diff format from FILE, or standard input."""
    config = load_config()

    # Command-line flags override the environment
    if output_format:
        config["output_format"] = output_format
    if as_json:
        config["output_format"] = "json"
    if log_level:
        config["log_level"] = log_level.upper()

    logging.basicConfig(
        level=getattr(logging, config["log_level"], logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        # Decode without newline translation so a lone "\r" stays inside its line
        output = run(io.TextIOWrapper(file, encoding="utf-8", newline=""), config)
    except (UnidiffError, ValueError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(output)


if __name__ == "__main__":
    main()
