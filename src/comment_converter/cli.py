from __future__ import annotations

import logging
import sys
from pathlib import Path

import typer
import yaml

from .config import ConverterConfig, load_config
from .pipeline import convert as convert_comment

LOGGER = logging.getLogger(__name__)

app = typer.Typer(help="Block to line documentation comment converter.", no_args_is_help=True)


@app.command()
def convert(
    input_path: Path | None = typer.Option(
        None,
        "--input",
        "-i",
        exists=True,
        readable=True,
        dir_okay=False,
        file_okay=True,
        help="Comment to convert (defaults to stdin).",
    ),
    output_path: Path | None = typer.Option(
        None, "--output", "-o", dir_okay=False, help="Destination (defaults to stdout)."
    ),
    config: Path | None = typer.Option(
        None, "--config", "-c", exists=True, dir_okay=False, readable=True
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log each stage."),
) -> None:
    """Convert one block documentation comment into line comments."""
    _configure_logging(verbose)
    cfg = _load_config(config)
    source = _read_source(input_path)
    result = convert_comment(source, cfg)
    if output_path is None:
        stdout = typer.get_binary_stream("stdout")
        stdout.write(result.encode("utf-8"))
        stdout.flush()
        return
    output_path.parent.mkdir(parents=True, exist_ok=True)
    # newline="" keeps the converted text byte-for-byte on every platform.
    with output_path.open("w", encoding="utf-8", newline="") as handle:
        handle.write(result)
    LOGGER.info("Wrote converted comment to %s", output_path)


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = ConverterConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False))


def main() -> None:
    app()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        stream=sys.stderr,
    )


def _load_config(path: Path | None) -> ConverterConfig:
    """Load the YAML config, reporting malformed files as bad CLI parameters."""
    try:
        return load_config(path)
    except (ValueError, TypeError, yaml.YAMLError) as exc:
        raise typer.BadParameter(f"Invalid configuration {path}: {exc}") from exc


def _read_source(path: Path | None) -> str:
    """Read the whole comment as UTF-8 from a file or stdin."""
    if path is None:
        raw = typer.get_binary_stream("stdin").read()
    else:
        raw = path.read_bytes()
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise typer.BadParameter(f"Input is not valid UTF-8: {exc}") from exc


if __name__ == "__main__":
    main()
