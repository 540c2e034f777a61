"""CLI for termcalc.

Usage:
    python -m termcalc "3 + (3 + 5) * 6"    # Evaluate once and exit
    python -m termcalc                      # Interactive loop ('clear', 'exit')
    python -m termcalc -v                   # Interactive loop with debug logging
"""

from __future__ import annotations

import logging
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from termcalc.errors import CalculationError
from termcalc.expression import evaluate, parse

app = typer.Typer(
    name="termcalc",
    help="Evaluate arithmetic expressions with + - * / and parentheses",
    add_completion=False,
)
console = Console(stderr=True)
out = Console(highlight=False)

log = logging.getLogger("termcalc")


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _report(error: CalculationError) -> None:
    console.print(f"[red]{escape(str(error))}[/red]")


def calculate_line(line: str) -> float:
    return evaluate(parse(line))


def repl(prompt: str) -> None:
    """Read lines until 'exit' or end of input, printing each result."""
    while True:
        try:
            line = console.input(prompt, markup=False)
        except EOFError:
            break

        line = line.strip().lower()
        if not line:
            continue
        if line == "exit":
            break
        if line == "clear":
            out.clear()
            continue

        try:
            result = calculate_line(line)
        except CalculationError as e:
            log.debug("rejected %r: %s", line, e)
            _report(e)
            continue

        out.print(repr(result))


@app.command()
def main(
    expression: Optional[str] = typer.Argument(None, help="Expression to evaluate; omit for the interactive loop"),
    prompt: str = typer.Option("> ", "--prompt", "-p", envvar="TERMCALC_PROMPT", help="Prompt shown by the interactive loop"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log parsing and evaluation steps"),
) -> None:
    """Evaluate one expression, or start the interactive loop."""
    _configure_logging(verbose)

    if expression is None:
        repl(prompt)
        return

    try:
        result = calculate_line(expression)
    except CalculationError as e:
        _report(e)
        raise typer.Exit(1)

    out.print(repr(result))


if __name__ == "__main__":
    app()
