"""
Mutating commands: register, update, delegate, deadline, priority, acknowledge, purge
"""

from typing import Optional

import typer

from .._common import (
    CallerOption,
    HeightOption,
    JsonOption,
    RequiredHeightOption,
    StateOption,
    run,
)


def register_command(
    text: str = typer.Argument(..., help="Commitment declaration (1-100 characters)"),
    caller: str = CallerOption,
    height: int = HeightOption,
    state: Optional[str] = StateOption,
    json_output: bool = JsonOption,
):
    """
    Register the caller's commitment.

    Examples:
        commitvault register "finish report" --caller alice
    """
    run("register", caller, height, state, json_output, text=text)


def update_command(
    text: str = typer.Argument(..., help="New declaration (1-100 characters)"),
    completed: bool = typer.Option(False, "--completed/--open", help="Completion flag"),
    caller: str = CallerOption,
    height: int = HeightOption,
    state: Optional[str] = StateOption,
    json_output: bool = JsonOption,
):
    """
    Replace the caller's commitment text and completion flag.

    Examples:
        commitvault update "finish report v2" --completed --caller alice
    """
    run("update", caller, height, state, json_output, text=text, completed=completed)


def delegate_command(
    target: str = typer.Argument(..., help="Identity that will own the commitment"),
    text: str = typer.Argument(..., help="Commitment declaration (1-100 characters)"),
    caller: str = CallerOption,
    height: int = HeightOption,
    state: Optional[str] = StateOption,
    json_output: bool = JsonOption,
):
    """
    Register a commitment on behalf of another identity.

    Examples:
        commitvault delegate bob "review PR" --caller alice
    """
    run("delegate", caller, height, state, json_output, target=target, text=text)


def deadline_command(
    duration: int = typer.Argument(..., help="Blocks from the current height"),
    caller: str = CallerOption,
    height: int = RequiredHeightOption,
    state: Optional[str] = StateOption,
    json_output: bool = JsonOption,
):
    """
    Set the caller's deadline to height + duration.

    Examples:
        commitvault deadline 100 --height 500 --caller alice
    """
    run("set_deadline", caller, height, state, json_output, duration=duration)


def priority_command(
    tier: int = typer.Argument(..., help="1=low, 2=medium, 3=high"),
    caller: str = CallerOption,
    height: int = HeightOption,
    state: Optional[str] = StateOption,
    json_output: bool = JsonOption,
):
    """Set the caller's priority tier."""
    run("set_priority", caller, height, state, json_output, tier=tier)


def acknowledge_command(
    caller: str = CallerOption,
    height: int = HeightOption,
    state: Optional[str] = StateOption,
    json_output: bool = JsonOption,
):
    """Mark the caller's deadline alert as sent."""
    run("acknowledge_alert", caller, height, state, json_output)


def purge_command(
    caller: str = CallerOption,
    height: int = HeightOption,
    state: Optional[str] = StateOption,
    json_output: bool = JsonOption,
):
    """Remove the caller's commitment, deadline and priority."""
    run("purge", caller, height, state, json_output)
