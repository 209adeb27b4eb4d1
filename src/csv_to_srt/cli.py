"""CLI entry point for csv-to-srt."""

import logging
from pathlib import Path
from typing import BinaryIO

import click

from .config import Config
from .convert import convert
from .models import ERROR_PREFIX, ConvertOptions


def _configure_logging(level_name: str, verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, level_name, logging.WARNING)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("input_file", type=click.File("rb"), default="-")
@click.option(
    "--keep-gaps",
    is_flag=True,
    help="Keep original timing gaps",
)
@click.option(
    "--no-gaps",
    is_flag=True,
    help="Remove gaps between subtitles (default)",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False),
    help="Output SRT file path (default: stdout)",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Log skipped rows and other details to stderr",
)
def main(
    input_file: BinaryIO,
    keep_gaps: bool,
    no_gaps: bool,
    output: str | None,
    verbose: bool,
) -> None:
    """Convert CSV to SRT subtitle format.

    Reads CSV from INPUT_FILE (default: stdin) and writes SRT to stdout.

    \b
    CSV format:
      3-column: start_time, end_time, text
      4-column: speaker_name, start_time, end_time, text
      Time format: HH:MM:SS:FF (frames at 30fps)

    \b
    Examples:
      cat input.csv | csv-to-srt > output.srt
      csv-to-srt < input.csv > output.srt
      csv-to-srt --keep-gaps input.csv -o output.srt
    """
    config = Config.from_env()
    _configure_logging(config.log_level, verbose)

    if keep_gaps:
        options = ConvertOptions(remove_gaps=False)
    elif no_gaps:
        options = ConvertOptions(remove_gaps=True)
    else:
        options = config.options()

    try:
        csv_text = input_file.read().decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise click.ClickException(f"Input is not valid UTF-8: {e}")

    result = convert(csv_text, options)
    if not result.ok:
        raise click.ClickException(f"{ERROR_PREFIX}{result.error}")

    if output is None:
        click.echo(result.srt, nl=False)
        return

    try:
        Path(output).write_text(result.srt, encoding="utf-8")
    except OSError as e:
        raise click.ClickException(f"Cannot write {output}: {e}")

    if verbose:
        click.secho(f"Saved to {output}", fg="green", err=True)


if __name__ == "__main__":
    main()
