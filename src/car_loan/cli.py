"""Interactive CLI — click entry point + interactive update loop.

Session startup:
  1. Take any field values passed as options; the rest use form defaults.
  2. Optionally replace the APR with the latest online rate (--fetch-apr).
  3. Evaluate and enter the interactive update loop.

Update loop:
  - Every change re-runs the evaluation and redisplays the result.
  - Let the user update a field, reset it to its default, fetch the APR
    online, show the current parameters, or exit.
"""
from __future__ import annotations

import sys
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich import box

from .calculator import LoanResult, evaluate_affordability
from .config import CENT, CURRENCY_SYMBOL
from .fetcher import FetchError, fetch_auto_loan_apr
from .fields import FIELD_ORDER, SUPPORTED_FIELDS, get_field
from .resolver import InvalidInputError, ResolvedInput, UserInputs, parse_value, resolve, validate_value

console = Console()
err_console = Console(stderr=True, style="bold red")

# ──────────────────────────────────────────────────────────────────────────────
# Formatting helpers
# ──────────────────────────────────────────────────────────────────────────────

def _fmt_money(value: Decimal | int) -> str:
    return f"{CURRENCY_SYMBOL}{Decimal(value).quantize(CENT, rounding=ROUND_HALF_UP):,.2f}"


def _fmt_months(n: int) -> str:
    years, months = divmod(n, 12)
    if months == 0:
        return f"{n} months ({years} years)"
    return f"{n} months ({years}y {months}m)"


def _fmt_flag(ok: bool) -> str:
    return "[green]Yes[/green]" if ok else "[red]No[/red]"


def _fmt_value(name: str, value: Decimal | int) -> str:
    if name == "apr":
        return f"{value}%"
    if name == "term":
        return _fmt_months(int(value))
    return _fmt_money(value)


# ──────────────────────────────────────────────────────────────────────────────
# Result display
# ──────────────────────────────────────────────────────────────────────────────

def display_result(result: LoanResult) -> None:
    console.print()
    t = Table(box=box.SIMPLE, show_header=False, padding=(0, 2))
    t.add_column("Check", style="bold")
    t.add_column("Value", justify="right")

    t.add_row("Good Down Payment:", _fmt_flag(result.good_down_payment))
    t.add_row("Good Loan Duration:", _fmt_flag(result.good_loan_duration))
    t.add_row("Good Monthly Payment:", _fmt_flag(result.good_monthly_payment))
    t.add_row("Loan amount:", _fmt_money(max(result.loan_amount, Decimal(0))))
    t.add_row("Monthly Payment:", _fmt_money(result.monthly_payment))
    console.print(t)


def display_params(resolved: ResolvedInput) -> None:
    t = Table(title="Current Parameters", box=box.SIMPLE, show_header=True, padding=(0, 2))
    t.add_column("Parameter", style="cyan")
    t.add_column("Value", justify="right")
    t.add_column("Source", style="dim")

    for name in FIELD_ORDER:
        t.add_row(
            get_field(name).label,
            _fmt_value(name, getattr(resolved.loan, name)),
            resolved.sources.get(name, ""),
        )
    console.print(t)


# ──────────────────────────────────────────────────────────────────────────────
# Input helpers
# ──────────────────────────────────────────────────────────────────────────────

def _prompt_field_value(name: str) -> Decimal | int:
    spec = get_field(name)
    console.print(
        f"  [dim]{spec.description} "
        f"(typical range {spec.min}–{spec.max}{spec.suffix}, step {spec.step})[/dim]"
    )
    while True:
        raw = console.input(f"[bold]New {spec.label.lower()}:[/bold] ")
        try:
            value = validate_value(name, parse_value(name, raw))
        except InvalidInputError as exc:
            err_console.print(f"  {exc}")
            continue
        if not spec.in_slider_range(value):
            console.print(
                f"  [yellow]{spec.label} {value}{spec.suffix} is outside the usual range "
                f"{spec.min}–{spec.max}{spec.suffix}.[/yellow]"
            )
        return value


def _prompt_field_name(prompt: str) -> Optional[str]:
    console.print(f"  Fields: {', '.join(FIELD_ORDER)}")
    field = console.input(f"[bold]{prompt}[/bold] ").strip().lower()
    if field not in SUPPORTED_FIELDS:
        err_console.print(f"  Unknown field '{field}'.")
        return None
    return field


# ──────────────────────────────────────────────────────────────────────────────
# Evaluation runner
# ──────────────────────────────────────────────────────────────────────────────

def run_evaluation(inputs: UserInputs) -> Optional[ResolvedInput]:
    """Resolve and evaluate. Prints errors and returns None on failure."""
    try:
        resolved = resolve(inputs)
    except InvalidInputError as exc:
        err_console.print(f"Parameter error: {exc}")
        return None

    display_result(evaluate_affordability(resolved.loan))
    return resolved


def _apply_fetched_apr(inputs: UserInputs) -> bool:
    console.print("  Fetching latest average new-car loan APR…")
    try:
        rate = fetch_auto_loan_apr()
    except FetchError as exc:
        err_console.print(f"  Fetch failed: {exc}")
        return False
    inputs.apr = rate
    console.print(f"  [green]Applied fetched APR: {rate}%[/green]")
    return True


# ──────────────────────────────────────────────────────────────────────────────
# Interactive update loop
# ──────────────────────────────────────────────────────────────────────────────

def interactive_loop(inputs: UserInputs) -> None:
    last: Optional[ResolvedInput] = run_evaluation(inputs)

    while True:
        console.print()
        console.print(
            "[bold]Actions:[/bold] "
            "[cyan]update[/cyan] · [cyan]reset[/cyan] · [cyan]fetch[/cyan] · "
            "[cyan]params[/cyan] · [cyan]exit[/cyan]"
        )
        action = console.input("[bold]> [/bold]").strip().lower()

        if action in ("exit", "quit", "q"):
            console.print("Goodbye.")
            break

        elif action == "params":
            if last:
                display_params(last)
            else:
                err_console.print("No valid parameters yet.")

        elif action == "update":
            field = _prompt_field_name("Field to update:")
            if field is None:
                continue
            try:
                setattr(inputs, field, _prompt_field_value(field))
            except (KeyboardInterrupt, EOFError):
                console.print("\n  Update cancelled.")
                continue
            last = run_evaluation(inputs) or last

        elif action == "reset":
            field = _prompt_field_name("Field to reset to default:")
            if field is None:
                continue
            setattr(inputs, field, None)
            last = run_evaluation(inputs) or last

        elif action == "fetch":
            if _apply_fetched_apr(inputs):
                last = run_evaluation(inputs) or last

        else:
            err_console.print(f"  Unknown action '{action}'.")


# ──────────────────────────────────────────────────────────────────────────────
# Click entry point
# ──────────────────────────────────────────────────────────────────────────────

@click.command()
@click.option("--price", type=str, default=None, help="Purchase price of the car")
@click.option("--down-payment", type=str, default=None, help="Amount paid upfront")
@click.option("--apr", type=str, default=None, help="Annual percentage rate, in percent (e.g. 5.0)")
@click.option("--term", type=str, default=None, help="Loan length in months")
@click.option("--income", type=str, default=None, help="Yearly income before taxes")
@click.option("--fetch-apr", is_flag=True, default=False, help="Use the latest average new-car loan APR from FRED (needs FRED_API_KEY).")
def main(
    price: Optional[str],
    down_payment: Optional[str],
    apr: Optional[str],
    term: Optional[str],
    income: Optional[str],
    fetch_apr: bool,
) -> None:
    """Car loan affordability calculator."""
    console.print(Panel("[bold blue]Car Loan Calculator[/bold blue]", expand=False))

    def _parse_opt(s: Optional[str], name: str, option: str) -> Optional[Decimal | int]:
        if s is None:
            return None
        try:
            return parse_value(name, s)
        except InvalidInputError as exc:
            err_console.print(f"Invalid value for --{option}: {exc}")
            sys.exit(1)

    inputs = UserInputs(
        purchase_price=_parse_opt(price, "purchase_price", "price"),
        down_payment=_parse_opt(down_payment, "down_payment", "down-payment"),
        apr=_parse_opt(apr, "apr", "apr"),
        term=_parse_opt(term, "term", "term"),
        yearly_income=_parse_opt(income, "yearly_income", "income"),
    )

    if fetch_apr:
        _apply_fetched_apr(inputs)

    try:
        interactive_loop(inputs)
    except (KeyboardInterrupt, EOFError):
        console.print("\nSession ended.")
