"""Command-line driver for the calculator engine.

Usage:
    padcalc eval "(2+3)*4"          # Evaluate a whole expression
    padcalc keys 12+5 =             # Replay key presses, print the display
    padcalc keys 3 "()" 4 BS --steps
    padcalc keys 5 -- -3            # Keys starting with '-' go after '--'
    padcalc check "2**3"            # Report the first key the editor refuses
"""

from __future__ import annotations

import logging
from typing import List

import typer
from rich.console import Console
from rich.table import Table

from calc_config import DEBUG, PRECISION
from calculator import KEYS, Calculator, compute
from edits import can_append
from expr_parser import canonical
from numfmt import format_number

app = typer.Typer(
    name="padcalc",
    help="Keypad-style arithmetic calculator",
    no_args_is_help=True,
)
console = Console()

ACTIONS = {
    "=": Calculator.finalize,
    "C": Calculator.clear,
    "BS": Calculator.backspace,
    "()": Calculator.parentheses,
}


def press(calc: Calculator, key: str) -> list:
    """Apply one command-line key to `calc`, returning the displays it produced."""
    if key in ACTIONS:
        return [ACTIONS[key](calc)]
    return [calc.submit_char(ch) for ch in key]


@app.callback()
def main() -> None:
    logging.basicConfig(level=logging.DEBUG if DEBUG else logging.WARNING)


@app.command("eval")
def cmd_eval(
    expression: str = typer.Argument(help="Expression, e.g. '(2+3)*4'"),
    precision: int = typer.Option(PRECISION, "--precision", "-p", help="Fractional digits"),
) -> None:
    """Evaluate a whole expression."""
    res = compute(expression)
    if not res.ok:
        console.print(f"[red]{res.error.kind}[/red]: {res.error}")
        raise typer.Exit(1)
    console.print(format_number(res.value, precision))


@app.command("keys")
def cmd_keys(
    keys: List[str] = typer.Argument(help="Keys to press; '=', 'C', 'BS' and '()' are actions"),
    precision: int = typer.Option(PRECISION, "--precision", "-p", help="Fractional digits"),
    steps: bool = typer.Option(False, "--steps", "-s", help="Show the display after every key"),
) -> None:
    """Replay key presses and print the resulting display."""
    calc = Calculator(precision=precision)
    table = Table(show_header=True, header_style="bold")
    table.add_column("Key", style="green")
    table.add_column("Expression")
    table.add_column("Result", justify="right")

    for key in keys:
        for display in press(calc, key):
            table.add_row(key, display.expression, display.result)

    if steps:
        console.print(table)
    else:
        display = calc.display()
        console.print(display.expression)
        console.print(f"[bold]{display.result}[/bold]")


@app.command("check")
def cmd_check(
    expression: str = typer.Argument(help="Expression to type key by key"),
) -> None:
    """Type an expression into an empty calculator and report refused keys."""
    calc = Calculator()
    for i, ch in enumerate(canonical(expression)):
        if ch.isspace():
            continue
        before = calc.expression
        if ch not in KEYS or not can_append(before, ch):
            console.print(f"[red]Refused {ch!r} at {i}[/red] after {before!r}")
            raise typer.Exit(1)
        calc.submit_char(ch)
    console.print(f"[green]OK[/green] {calc.display().expression}")


if __name__ == "__main__":
    app()
