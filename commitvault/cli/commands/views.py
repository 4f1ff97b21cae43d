"""
Read-only commands: inspect, analytics, metadata, deadline-status, health, export
"""

import json
from typing import Optional

from rich.syntax import Syntax

from ...core.canonical import state_digest
from ...core.errors import BackendError, ConfigError
from .._common import (
    EXIT_ENVIRONMENT_ERROR,
    CallerOption,
    HeightOption,
    JsonOption,
    RequiredHeightOption,
    StateOption,
    console,
    open_backend,
    report_error,
    run,
)


def inspect_command(
    caller: str = CallerOption,
    height: int = HeightOption,
    state: Optional[str] = StateOption,
    json_output: bool = JsonOption,
):
    """Show whether the caller has a commitment, its length and completion."""
    run("inspect", caller, height, state, json_output)


def analytics_command(
    caller: str = CallerOption,
    height: int = HeightOption,
    state: Optional[str] = StateOption,
    json_output: bool = JsonOption,
):
    """Show completion plus whether priority and deadline are configured."""
    run("analytics", caller, height, state, json_output)


def metadata_command(
    caller: str = CallerOption,
    height: int = HeightOption,
    state: Optional[str] = StateOption,
    json_output: bool = JsonOption,
):
    """Show the combined inspect + analytics view."""
    run("metadata", caller, height, state, json_output)


def deadline_status_command(
    caller: str = CallerOption,
    height: int = RequiredHeightOption,
    state: Optional[str] = StateOption,
    json_output: bool = JsonOption,
):
    """
    Show the caller's deadline relative to the given height.

    Examples:
        commitvault deadline-status --height 650 --caller alice
    """
    run("deadline_status", caller, height, state, json_output)


def health_command(
    caller: str = CallerOption,
    height: int = HeightOption,
    state: Optional[str] = StateOption,
    json_output: bool = JsonOption,
):
    """Report operational status, caller and height."""
    run("health", caller, height, state, json_output)


def export_command(
    state: Optional[str] = StateOption,
    json_output: bool = JsonOption,
):
    """
    Dump all three collections with a SHA-256 digest of their canonical form.
    """
    try:
        snapshot = open_backend(state).snapshot()
    except ConfigError as ex:
        report_error("config-error", str(ex), json_output, EXIT_ENVIRONMENT_ERROR)
    except BackendError as ex:
        report_error("backend-error", str(ex), json_output, EXIT_ENVIRONMENT_ERROR)

    out = {"digest": state_digest(snapshot), "collections": snapshot}
    if json_output:
        print(json.dumps({"ok": True, "result": out}, sort_keys=True))
        return

    console.print(f"[bold]Digest:[/bold] {out['digest']}")
    console.print(Syntax(json.dumps(snapshot, indent=2, sort_keys=True), "json", theme="monokai"))
