"""CLI for the simplecalc console calculator.

Usage:
    python -m simplecalc            # Interactive session
    python -m simplecalc --verbose  # Trace state changes to stderr
"""

from __future__ import annotations

import typer
from rich.console import Console

from simplecalc.session import run_session

app = typer.Typer(
    name="simplecalc",
    help="Interactive two-operand console calculator",
    add_completion=False,
)


@app.command()
def cmd_run(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Trace the loop on stderr"),
) -> None:
    """Start an interactive calculator session."""
    # Echoed numbers can be long; never let rich wrap or colour them.
    console = Console(highlight=False, soft_wrap=True)
    trace = Console(stderr=True, highlight=False) if verbose else None
    run_session(console, trace=trace)


if __name__ == "__main__":
    app()
