"""Terminal front end for pocketcalc.

Usage:
    pocketcalc eval "12+3*2="       # Feed keys, print the display
    pocketcalc eval "5/0="          # Exits with status 1 on an error display
    pocketcalc repl                 # Interactive: type keys, c clears, q quits
    pocketcalc --log-level DEBUG eval "1+1="
"""

from __future__ import annotations

from typing import Optional

import typer
from rich.console import Console

from pocketcalc.core import Calculator
from pocketcalc.config import load_settings, setup_logging
from pocketcalc.display import Display
from pocketcalc.exceptions import CalculatorError
from pocketcalc.keys import tokenize

app = typer.Typer(
    name="pocketcalc",
    help="Four-function calculator driven by key presses",
    no_args_is_help=True,
)
console = Console()

QUIT_WORDS = {"q", "quit", "exit"}


def render(display: Display) -> None:
    """Print the history line dimmed and the primary line, red on error."""
    console.print(f"[dim]{display.history}[/dim]" if display.history else "")
    style = "bold red" if display.is_error else "bold"
    console.print(display.primary, style=style, highlight=False)


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(None, "--log-level", "-l", help="Logging level (default from POCKETCALC_LOG_LEVEL)"),
) -> None:
    """Configure logging before any command runs."""
    try:
        level = log_level or load_settings().log_level
        setup_logging(level)
    except CalculatorError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(2)


@app.command("eval")
def cmd_eval(
    keys: str = typer.Argument(help="Keys to press, e.g. '12+3='"),
) -> None:
    """Press the given keys on a fresh calculator and show the display."""
    try:
        presses = tokenize(keys)
    except CalculatorError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(2)

    calc = Calculator().press_all(presses)
    render(calc.display)
    if calc.display.is_error:
        raise typer.Exit(1)


@app.command("repl")
def cmd_repl() -> None:
    """Read key lines until 'q' or end of input, showing the display after each."""
    calc = Calculator()
    render(calc.display)
    while True:
        try:
            line = console.input("> ")
        except EOFError:
            break
        if line.strip().lower() in QUIT_WORDS:
            break
        try:
            presses = tokenize(line)
        except CalculatorError as e:
            console.print(f"[yellow]{e}[/yellow]")
            continue
        render(calc.press_all(presses).display)


if __name__ == "__main__":
    app()
