#!/usr/bin/env python3
import os
from pathlib import Path
from typing import Optional

import click
from rich.console import Console

from . import __version__
from .config import DEFAULT_CONFIG_FILENAME, Config
from .errors import CommitParseError
from .observers import CommitChecker, ConsoleLogObserver, FileLogObserver


def read_message(message: Optional[str], file: Optional[Path]) -> str:
    """Resolve the commit message from the argument, a file or stdin.

    Line endings are normalized to ``\\n``. Trailing newlines left by
    editors are dropped from file and stdin input, but an argument is
    taken verbatim.
    """
    if message is not None and file is not None:
        raise click.UsageError("Pass either MESSAGE or --file, not both")

    if file is not None:
        text = file.read_text(encoding="utf-8")
    elif message == "-":
        with click.open_file("-") as f:
            text = f.read()
    elif message is not None:
        return message.replace("\r\n", "\n")
    else:
        raise click.UsageError("Missing commit message: pass MESSAGE, '-' or --file")

    return text.replace("\r\n", "\n").rstrip("\n")


def print_config(console: Console, config: Config, config_path: Path) -> None:
    console.print("\n[bold]Current Configuration Settings:[/bold]")
    if config_path.exists():
        console.print(f"[dim]Config file: {str(config_path).replace(os.sep, '/')}[/dim]")
    else:
        console.print("[dim]Using default values (no config file found)[/dim]")

    console.print(f"\n{'Setting':<20} {'Value':<20}")
    console.print("-" * 40)
    for name, value in config.model_dump().items():
        console.print(f"{name:<20} {str(value):<20}")


@click.command()
@click.argument("message", required=False)
@click.option(
    "-f",
    "--file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Read the commit message from a file (e.g. from a commit-msg hook)",
)
@click.option(
    "-p",
    "--path",
    default=".",
    help="Directory containing the config file (defaults to current directory)",
    type=click.Path(exists=True, file_okay=False, dir_okay=True, path_type=Path),
)
@click.option(
    "-l",
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Optional file to log checks to (overrides config setting)",
)
@click.option("--no-color", is_flag=True, help="Disable colored output")
@click.option("--json", "as_json", is_flag=True, help="Print the parsed commit as JSON")
@click.option("--config-list", is_flag=True, help="Display current configuration settings")
@click.option("--version", is_flag=True, help="Display version information and exit")
@click.pass_context
def main(
    ctx: click.Context,
    message: Optional[str],
    file: Optional[Path],
    path: Path,
    log_file: Optional[Path],
    no_color: bool,
    as_json: bool,
    config_list: bool,
    version: bool,
):
    """
    Check if a commit message follows the Conventional Commits standard.

    MESSAGE is the full commit message; pass '-' to read it from stdin.

    Configuration can be set in .conventionalcheck.toml in the given path.
    Command line options override configuration file settings.
    """
    if version:
        click.echo(f"conventional-check {__version__}")
        return

    config = Config.load(path.absolute())
    if no_color:
        config.color = False
    if log_file is not None:
        config.log_file = str(log_file)

    color_system = "auto" if config.color else None
    console = Console(color_system=color_system, highlight=False, soft_wrap=True, emoji=False)
    error_console = Console(stderr=True, color_system=color_system, highlight=False, soft_wrap=True, emoji=False)

    if config_list:
        print_config(console, config, path.absolute() / DEFAULT_CONFIG_FILENAME)
        return

    text = read_message(message, file)

    checker = CommitChecker()
    if not as_json:
        checker.add_observer(ConsoleLogObserver(console, error_console))

    log_file_path = log_file or config.get_log_file()
    if log_file_path:
        checker.add_observer(FileLogObserver(str(log_file_path)))

    try:
        commit = checker.check(text)
    except CommitParseError as e:
        if as_json:
            click.echo(f"Conventional Commit: commit is not valid:\n{e}", err=True)
        ctx.exit(1)

    if as_json:
        click.echo(commit.model_dump_json(indent=2))


if __name__ == "__main__":
    main()
