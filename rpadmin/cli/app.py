"""
RPNow Admin Console command.

Single interactive command. All errors from the console loop end up in
`main`, which prints them and exits with status 1.

Usage:
    rpadmin                                   # Use config/settings/application.yaml
    rpadmin --base-url http://10.0.0.5:12789  # Override server address
    rpadmin --ignore-delete-status            # Treat any completed DELETE as success
    rpadmin --debug                           # DEBUG logging on stderr
"""

import asyncio
from dataclasses import dataclass
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from rpadmin.cli.admin_api import AdminAPI
from rpadmin.cli.client import DEFAULT_TIMEOUT, APIClient
from rpadmin.cli.console import AdminConsole
from rpadmin.cli.formatting import DEFAULT_TITLE_WIDTH
from rpadmin.cli.prompts import ConsolePrompter, OperatorExit
from rpadmin.core.config import get_app_config, get_server_base_url, get_settings
from rpadmin.core.exceptions import ApplicationError, ConfigurationError
from rpadmin.core.logging import (
    get_logger,
    log_with_source,
    setup_fallback_logging,
    setup_logging,
)

logger = get_logger(__name__)

app = typer.Typer(
    name="rpadmin",
    help="RPNow Admin Console - browse, inspect and destroy hosted RPs.",
    add_completion=False,
    rich_markup_mode="rich",
)

console = Console()
err_console = Console(stderr=True)


@dataclass(frozen=True)
class ConsoleOptions:
    """Resolved settings for one console session."""

    base_url: str
    timeout: float
    destroy_checks_status: bool = True
    title_width: int = DEFAULT_TITLE_WIDTH


def resolve_options(
    base_url: str | None,
    timeout: float | None,
    ignore_delete_status: bool,
) -> ConsoleOptions:
    """
    Merge CLI overrides with environment and YAML settings.

    Without a readable config directory, --base-url or RPADMIN_BASE_URL
    is enough; everything else falls back to built-in defaults.

    Raises:
        ConfigurationError: If no base URL can be determined.
    """
    try:
        config_base_url, config_timeout = get_server_base_url()
        console_settings = get_app_config().application.console
    except (RuntimeError, FileNotFoundError, ValueError) as e:
        settings = get_settings()
        base_url = base_url or settings.base_url
        if base_url is None:
            raise ConfigurationError(
                f"Could not determine server URL from config/settings/application.yaml: {e}"
            ) from e
        if timeout is None:
            timeout = settings.timeout if settings.timeout is not None else DEFAULT_TIMEOUT
        return ConsoleOptions(
            base_url=base_url.rstrip("/"),
            timeout=timeout,
            destroy_checks_status=not ignore_delete_status,
        )

    return ConsoleOptions(
        base_url=(base_url or config_base_url).rstrip("/"),
        timeout=timeout if timeout is not None else config_timeout,
        destroy_checks_status=console_settings.destroy_checks_status and not ignore_delete_status,
        title_width=console_settings.title_width,
    )


async def run_console(options: ConsoleOptions) -> None:
    """Open a client for the session and run the console loop."""
    log_with_source(logger, "cli", "info", "Console starting", base_url=options.base_url)

    async with APIClient(options.base_url, timeout=options.timeout) as client:
        admin = AdminConsole(
            AdminAPI(client, destroy_checks_status=options.destroy_checks_status),
            ConsolePrompter(console),
            console=console,
            title_width=options.title_width,
        )
        await admin.run()


def _configure_logging(verbose: bool, debug: bool) -> None:
    level = "DEBUG" if debug else "INFO" if verbose else None
    try:
        setup_logging(level=level)
    except (RuntimeError, FileNotFoundError):
        setup_fallback_logging(level or "WARNING")


@app.command()
def main(
    base_url: Optional[str] = typer.Option(
        None,
        "--base-url",
        "-u",
        help="Admin server base URL (default from application.yaml or RPADMIN_BASE_URL)",
    ),
    timeout: Optional[float] = typer.Option(
        None,
        "--timeout",
        "-t",
        min=0.1,
        help="Request timeout in seconds",
    ),
    ignore_delete_status: bool = typer.Option(
        False,
        "--ignore-delete-status",
        help="Treat any completed DELETE as success, whatever its HTTP status",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output (INFO level logging)",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        "-d",
        help="Enable debug mode (DEBUG level logging)",
    ),
) -> None:
    """
    Start the interactive RPNow admin console.

    Lists RPs, shows their participant and spectator URLs, and destroys
    an RP after its confirmation phrase is typed exactly.
    """
    try:
        _configure_logging(verbose, debug)
        options = resolve_options(base_url, timeout, ignore_delete_status)
        asyncio.run(run_console(options))
    except OperatorExit:
        pass
    except KeyboardInterrupt:
        err_console.print("\n[dim]Interrupted[/dim]")
        raise typer.Exit(130)
    except ApplicationError as e:
        log_with_source(logger, "cli", "error", "Console aborted", code=e.code, error=e.message)
        err_console.print(f"[red]Error: {escape(e.message)}[/red]")
        raise typer.Exit(1)

    console.print("[dim]Goodbye![/dim]")


if __name__ == "__main__":
    app()
