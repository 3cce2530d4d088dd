import sys
from enum import Enum
from importlib.metadata import PackageNotFoundError, version as dist_version
from typing import Optional

import typer
from rich.console import Console

from arena.engine import BattleRegistry
from arena.errors import CommandFormatError
from .config import get_settings
from .logging import setup_logger
from .reader import read_commands
from .runner import CommandRunner

app = typer.Typer(help="Robot arena battle simulator")
err_console = Console(stderr=True)


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


@app.command()
def version():
    try:
        typer.echo(dist_version("robot-arena"))
    except PackageNotFoundError:
        typer.echo("unknown")


@app.command()
def run(
    path: str = typer.Argument("-", help="Input file, '-' for stdin"),
    log_level: Optional[LogLevel] = typer.Option(None, "--log-level", help="Override ARENA_LOG_LEVEL"),
):
    """
    Replay a command stream and print one `D <team> <robot>` line per destroyed robot.
    """
    settings = get_settings()
    level = log_level.value if log_level else settings.log_level
    for name in ("arena", "arena_runtime"):
        setup_logger(name, level)

    try:
        stream = sys.stdin if path == "-" else open(path, encoding="utf-8")
    except OSError as exc:
        err_console.print(f"{settings.service_name}: {exc}", style="red", markup=False)
        raise typer.Exit(code=1)

    runner = CommandRunner(BattleRegistry(), emit=typer.echo)
    try:
        runner.run(read_commands(stream))
    except CommandFormatError as exc:
        err_console.print(f"{settings.service_name}: {exc}", style="red", markup=False)
        raise typer.Exit(code=1)
    finally:
        if stream is not sys.stdin:
            stream.close()
