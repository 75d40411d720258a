"""Main CLI entry point for the outline command.

This module provides the Typer application that serves as the entry point
for the outline command-line tool. Global options (verbosity, config path,
colors) live on the callback; each document operation is a subcommand that
delegates to DocumentCommands.
"""

import logging
import sys
from datetime import datetime
from functools import partial
from pathlib import Path
from typing import Callable, Optional

import typer

from src.cli.config import ConfigLoader
from src.cli.document_commands import DocumentCommands
from src.cli.errors import CLIError, CommandError
from src.cli.models import ExitCode
from src.cli.output import OutputHandler
from src.outline_client.errors import (
    RemoteAPIError,
    RemoteStatusError,
    TransportError,
)

__version__ = "0.1.0"

app = typer.Typer(
    name="outline",
    help="""Manage Outline documents locally.

Pull documents to Markdown files, edit them, and push the changes back.

QUICK START:
  outline pull <doc_id>       # Write <doc_id>.md in the current directory
  outline push <doc_id>       # Replace the document text with <doc_id>.md
  outline list                # Show document IDs and titles
  outline create "My Title"   # Create a document and print its ID""",
    add_completion=False,
    rich_markup_mode=None,  # Disable Rich markup to avoid compatibility issues
    no_args_is_help=True,
)

# Module logger
logger = logging.getLogger(__name__)

# Remote statuses reported as authentication failures
AUTH_FAILURE_STATUSES = (401, 403)


def _configure_logging(verbosity: int, logdir: Optional[str] = None) -> None:
    """Configure logging based on verbosity level.

    Configures only the 'src' namespace logger to avoid affecting third-party
    libraries. The root logger is left unchanged.

    Args:
        verbosity: Verbosity level (0=WARNING, 1=INFO, 2=DEBUG)
        logdir: Optional directory for log files (creates timestamped log file)
    """
    if verbosity == 0:
        level = logging.WARNING
    elif verbosity == 1:
        level = logging.INFO
    else:  # verbosity >= 2
        level = logging.DEBUG

    app_logger = logging.getLogger("src")
    app_logger.setLevel(level)
    # Repeated invocations in one process (tests) must not stack handlers
    app_logger.handlers.clear()

    log_format = "%(asctime)s [%(levelname)8s] %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"
    formatter = logging.Formatter(log_format, datefmt=date_format)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    app_logger.addHandler(console_handler)

    if logdir:
        log_path = Path(logdir)
        log_path.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = log_path / f"outline-sync_{timestamp}.log"

        file_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        file_formatter = logging.Formatter(file_format, datefmt=date_format)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(file_formatter)
        app_logger.addHandler(file_handler)

        logger.info(f"Logging to file: {log_file}")


def _exit_code_for(error: CLIError) -> ExitCode:
    """Map a failed command to the process exit code."""
    cause = getattr(error, "cause", None)
    if isinstance(cause, TransportError):
        return ExitCode.NETWORK_ERROR
    if (
        isinstance(cause, (RemoteAPIError, RemoteStatusError))
        and cause.status_code in AUTH_FAILURE_STATUSES
    ):
        return ExitCode.AUTH_ERROR
    return ExitCode.GENERAL_ERROR


def _run(ctx: typer.Context, action: Callable[[DocumentCommands], object]) -> None:
    """Run one command, turning failures into an error line and exit code."""
    commands: DocumentCommands = ctx.obj
    output = commands.output_handler

    try:
        action(commands)
    except CommandError as e:
        logger.info(f"Command failed at stage '{e.stage}'")
        output.error(str(e))
        raise typer.Exit(_exit_code_for(e))
    except Exception as e:
        logger.exception("Unexpected error")
        output.error(f"Unexpected error: {e}")
        raise typer.Exit(ExitCode.GENERAL_ERROR)

    raise typer.Exit(ExitCode.SUCCESS)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"outline-sync version {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Echo HTTP requests and responses to stderr",
    ),
    verbosity: int = typer.Option(
        0,
        "--verbosity",
        help="Log level: 0=warnings, 1=info, 2=debug",
    ),
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Config file (default: ~/.outline-cli/config.json)",
        metavar="PATH",
    ),
    logdir: Optional[str] = typer.Option(
        None,
        "--logdir",
        help="Directory for log files (creates timestamped log file)",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable colored output",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        help="Show version and exit",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """Manage Outline documents locally."""
    _configure_logging(verbosity, logdir)

    ctx.obj = DocumentCommands(
        config_loader=partial(ConfigLoader.load, config_path),
        output_handler=OutputHandler(verbosity=verbosity, no_color=no_color),
        verbose=verbose,
    )


@app.command()
def pull(
    ctx: typer.Context,
    doc_id: str = typer.Argument(..., metavar="DOC_ID", help="Document ID to fetch"),
) -> None:
    """Pull a document from Outline into DOC_ID.md."""
    _run(ctx, lambda commands: commands.pull(doc_id))


@app.command()
def push(
    ctx: typer.Context,
    doc_id: str = typer.Argument(..., metavar="DOC_ID", help="Document ID to update"),
) -> None:
    """Push DOC_ID.md to Outline, replacing the document text."""
    _run(ctx, lambda commands: commands.push(doc_id))


@app.command("list")
def list_command(ctx: typer.Context) -> None:
    """List available documents."""
    _run(ctx, lambda commands: commands.list_documents())


@app.command()
def create(
    ctx: typer.Context,
    title: str = typer.Argument(..., help="Title of the new document"),
    collection: Optional[str] = typer.Option(
        None,
        "--collection",
        "-c",
        help="Collection ID (default: collection_id from the config)",
        metavar="ID",
    ),
    file: Optional[str] = typer.Option(
        None,
        "--file",
        "-f",
        help="Markdown file to use as the document body",
        metavar="PATH",
    ),
) -> None:
    """Create a new document."""
    _run(
        ctx,
        lambda commands: commands.create(
            title, collection_id=collection, text_path=file
        ),
    )


@app.command("test")
def test_command(ctx: typer.Context) -> None:
    """Test the API connection."""
    _run(ctx, lambda commands: commands.check_connection())


@app.command()
def publish(
    ctx: typer.Context,
    doc_id: str = typer.Argument(..., metavar="DOC_ID", help="Document ID to publish"),
) -> None:
    """Publish a draft document."""
    _run(ctx, lambda commands: commands.publish(doc_id))


@app.command()
def debug(ctx: typer.Context) -> None:
    """Print the active configuration (API key masked)."""
    _run(ctx, lambda commands: commands.show_config())


def main() -> None:
    """Main entry point for the CLI application.

    This function is called when the module is executed directly or
    when the console script is invoked.
    """
    app()


# Allow running as: python -m src.cli.main
if __name__ == "__main__":
    main()
