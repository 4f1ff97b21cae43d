"""
Shared plumbing for CLI commands: options, host construction, output.
"""

import json
from typing import Any, NoReturn, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..backend import FileBackend
from ..config import load_settings
from ..core.errors import BackendError, CommitmentError, ConfigError, DeterminismError
from ..host import Host
from ..logging_config import setup_logging
from ..store import CommitmentStore

console = Console()

EXIT_DOMAIN_ERROR = 1
EXIT_ENVIRONMENT_ERROR = 2

StateOption = typer.Option(None, "--state", "-s", help="Path to JSON state file")
CallerOption = typer.Option(..., "--caller", "-c", help="Invoking identity")
HeightOption = typer.Option(0, "--height", "-H", min=0, help="Current height counter")
RequiredHeightOption = typer.Option(..., "--height", "-H", min=0, help="Current height counter")
JsonOption = typer.Option(False, "--json", help="Output as JSON")


def open_backend(state: Optional[str]) -> FileBackend:
    settings = load_settings()
    setup_logging(settings.log_level, settings.log_format)
    return FileBackend(state or settings.state_path)


def report_error(code: str, message: str, json_output: bool, exit_code: int) -> NoReturn:
    """Print a failure in the requested format and exit with exit_code."""
    if json_output:
        print(json.dumps({"ok": False, "error": code, "message": message}))
    else:
        console.print(f"[red]Error ({code}):[/red] {escape(message)}")
    raise typer.Exit(exit_code)


def _emit(result: Any, json_output: bool) -> None:
    if isinstance(result, str):
        if json_output:
            print(json.dumps({"ok": True, "result": result}))
        else:
            console.print(f"[green]{escape(result)}[/green]")
        return

    data = result.to_dict()
    if json_output:
        print(json.dumps({"ok": True, "result": data}, sort_keys=True))
        return

    table = Table(show_header=False, box=None)
    for key, value in data.items():
        table.add_row(f"[bold]{key}[/bold]", escape(str(value)))
    console.print(table)


def run(
    operation: str,
    caller: str,
    height: int,
    state: Optional[str],
    json_output: bool,
    **params: Any,
) -> None:
    """
    Execute one host operation against the file-backed store and print it.

    Exit codes: 0 ok, 1 domain error, 2 config/backend/height failure.
    """
    try:
        backend = open_backend(state)
        host = Host(CommitmentStore(backend))
        result = host.invoke(operation, caller=caller, height=height, **params)
    except CommitmentError as ex:
        report_error(ex.code, ex.message, json_output, EXIT_DOMAIN_ERROR)
    except ConfigError as ex:
        report_error("config-error", str(ex), json_output, EXIT_ENVIRONMENT_ERROR)
    except BackendError as ex:
        report_error("backend-error", str(ex), json_output, EXIT_ENVIRONMENT_ERROR)
    except DeterminismError as ex:
        report_error("height-regression", str(ex), json_output, EXIT_ENVIRONMENT_ERROR)
    else:
        _emit(result, json_output)
