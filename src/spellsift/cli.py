from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import BinaryIO, List

import typer

from . import __version__
from .checker import check_stream, format_misspelling
from .config import ConfigError, SpellsiftConfig, load_config
from .dictionaries import Broker, DictionaryNotFoundError, SpellingDictionary
from .textio import default_language, resolve_charset

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

app = typer.Typer(help="List misspellings in a file.", add_completion=False)


@app.command()
def check(
    ctx: typer.Context,
    files: List[str] | None = typer.Argument(
        None, metavar="FILE...", help="Files to check (default: standard input)."
    ),
    errors_only: bool = typer.Option(
        False,
        "--errors-only",
        "-l",
        help="List misspellings in the input files, or standard input.",
    ),
    dictionary: str | None = typer.Option(
        None, "--dictionary", "-d", help="Use the given language."
    ),
    pwl: Path | None = typer.Option(
        None, "--pwl", "-p", help="Use the given personal word list."
    ),
    show_lines: bool = typer.Option(
        False, "--show-lines", "-L", help="Display line numbers."
    ),
    list_providers: bool = typer.Option(
        False, "--list-providers", help="List spelling providers."
    ),
    list_dicts: bool = typer.Option(False, "--list-dicts", help="List all dictionaries."),
    default_dict: bool = typer.Option(
        False,
        "--default-dict",
        help="Show the default dictionary for the given or default language.",
    ),
    word_chars: bool = typer.Option(
        False,
        "--word-chars",
        help="Show the word characters for the given or default language.",
    ),
    version: bool = typer.Option(
        False, "--version", "-v", help="Display version information and exit."
    ),
    config: Path | None = typer.Option(
        None, "--config", "-c", exists=True, dir_okay=False, readable=True
    ),
    log_level: str | None = typer.Option(
        None, "--log-level", help="Override the configured log level."
    ),
) -> None:
    """List misspellings in a file."""
    if version:
        typer.echo(f"spellsift {__version__}")
        raise typer.Exit()

    cfg = _load_config(config)
    _apply_overrides(cfg, dictionary, pwl, show_lines, log_level)
    _configure_logging(cfg.log_level)
    broker = _build_broker(cfg)
    # An explicit language wins; otherwise follow the user's locale.
    language = cfg.dictionary or default_language()

    if list_providers:
        for provider in broker.describe():
            typer.echo(f"{provider.name} ({provider.description})")
        raise typer.Exit()
    if list_dicts:
        for info in broker.list_dicts():
            typer.echo(f"{info.tag} ({info.provider_name})")
        raise typer.Exit()
    if default_dict or word_chars:
        selected = _request_dictionary(broker, language, None)
        if default_dict:
            typer.echo(f"{selected.tag} ({selected.provider_name})")
        else:
            typer.echo(selected.extra_word_characters)
        raise typer.Exit()

    if not errors_only:
        typer.echo(ctx.get_help())
        raise typer.Exit(code=1)

    spelling = _request_dictionary(broker, language, cfg.personal_word_list)
    charset = resolve_charset(cfg.encoding)
    if not files:
        _report(sys.stdin.buffer, spelling, charset, cfg.show_lines)
        return

    for name in files:
        try:
            handle = Path(name).open("rb")
        except OSError:
            typer.echo(
                f'Error: Could not open the file "{name}" for reading.', err=True
            )
            raise typer.Exit(code=1) from None
        with handle:
            _report(handle, spelling, charset, cfg.show_lines)


def main() -> None:
    app()


def _load_config(path: Path | None) -> SpellsiftConfig:
    try:
        return load_config(path)
    except ConfigError as exc:
        raise typer.BadParameter(str(exc), param_hint="--config") from exc


def _apply_overrides(
    config: SpellsiftConfig,
    dictionary: str | None,
    pwl: Path | None,
    show_lines: bool,
    log_level: str | None,
) -> None:
    """Apply CLI overrides to config fields when provided."""
    if dictionary:
        config.dictionary = dictionary
    if pwl:
        config.personal_word_list = str(pwl)
    if show_lines:
        config.show_lines = True
    if log_level:
        config.log_level = log_level


def _configure_logging(level_name: str) -> None:
    level = logging.getLevelName(level_name.upper())
    if not isinstance(level, int):
        raise typer.BadParameter(
            f"Unknown log level '{level_name}'.", param_hint="--log-level"
        )
    logging.basicConfig(level=level, format=LOG_FORMAT)


def _build_broker(config: SpellsiftConfig) -> Broker:
    try:
        return Broker.from_config(config)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="providers") from exc


def _request_dictionary(
    broker: Broker, language: str, personal_word_list: str | None
) -> SpellingDictionary:
    """Load the dictionary or exit with the broker's explanation."""
    try:
        return broker.request_dict(language, personal_word_list)
    except DictionaryNotFoundError as exc:
        typer.echo(f"No dictionary available for '{exc.tag}': {exc.reason}", err=True)
        raise typer.Exit(code=1) from exc


def _report(
    stream: BinaryIO, dictionary: SpellingDictionary, charset: str, show_lines: bool
) -> None:
    for misspelling in check_stream(stream, dictionary, charset):
        typer.echo(format_misspelling(misspelling, show_lines))


if __name__ == "__main__":
    main()
