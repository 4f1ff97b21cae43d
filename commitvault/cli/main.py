#!/usr/bin/env python3
"""
commitvault CLI

Main entrypoint for the commitvault command-line tool.
"""

import typer
from rich.table import Table

from .. import __version__
from ._common import console
from .commands import records, views

app = typer.Typer(
    name="commitvault",
    help="Per-identity commitments with deadlines and priorities",
    add_completion=False,
)

app.command("register")(records.register_command)
app.command("update")(records.update_command)
app.command("delegate")(records.delegate_command)
app.command("deadline")(records.deadline_command)
app.command("priority")(records.priority_command)
app.command("acknowledge")(records.acknowledge_command)
app.command("purge")(records.purge_command)

app.command("inspect")(views.inspect_command)
app.command("analytics")(views.analytics_command)
app.command("metadata")(views.metadata_command)
app.command("deadline-status")(views.deadline_status_command)
app.command("health")(views.health_command)
app.command("export")(views.export_command)


@app.command()
def version():
    """Show version information."""
    table = Table(show_header=False, box=None)
    table.add_row("[bold]commitvault[/bold]", f"v{__version__}")
    console.print(table)


def main():
    """Main entrypoint."""
    app()


if __name__ == "__main__":
    main()
