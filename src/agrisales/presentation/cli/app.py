"""AgriSales CLI application using Typer.

This module renders the sales dashboard reports as rich tables. The dataset
is generated once per process by the demo generator and every command reads
from the same immutable store.
"""

import logging
import sys
from collections.abc import Callable
from functools import lru_cache
from typing import Optional, TypeVar

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from agrisales.application.queries.reports import (
    CategoryBreakdownQuery,
    CategoryProductBreakdownQuery,
    CategorySalesByNameQuery,
    CustomerCategoryBreakdownQuery,
    DealerSummaryQuery,
    SalesOverTimeQuery,
    TopCustomersQuery,
)
from agrisales.domain.shared.exceptions import DomainException
from agrisales.infrastructure.reporting import InMemoryReportFactory
from agrisales.presentation.formatting import format_currency, format_percentage
from agrisales_config.settings import get_settings
from agrisales_demo.seed import generate_demo_store

T = TypeVar("T")

app = typer.Typer(
    name="agrisales",
    help="AgriSales - sales reporting for the crop-input dealer network",
    no_args_is_help=True,
)
console = Console()

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def _configure_logging() -> None:
    """Configure application logging.

    Console output with timestamps and module names, at the level taken
    from settings.
    """
    settings = get_settings()
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    logging.getLogger("agrisales").setLevel(log_level)
    logging.getLogger("agrisales_demo").setLevel(log_level)


@lru_cache(maxsize=1)
def get_report_factory() -> InMemoryReportFactory:
    """Build the demo store once and return a factory bound to it."""
    settings = get_settings()
    store = generate_demo_store(settings)
    return InMemoryReportFactory(store, settings)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _run(report: Callable[[], T]) -> T:
    """Run a report, turning domain errors into a red line and exit code 1."""
    try:
        return report()
    except DomainException as exc:
        console.print(f"[red]Error: {escape(exc.message)}[/red]")
        raise typer.Exit(1) from exc


def _placeholder(what: str, dealer_name: str, period_label: str) -> None:
    console.print(
        f"[yellow]No {what} for {escape(dealer_name)} "
        f"in {escape(period_label)}.[/yellow]"
    )


def _period_or_default(period: Optional[str]) -> str:
    return period if period is not None else get_settings().default_period


def _title(name: str, dealer_name: str, period_label: str) -> str:
    return f"{name} - {dealer_name} - {period_label}"


# ---------------------------------------------------------------------------
# Options
# ---------------------------------------------------------------------------

DealerOption = typer.Option(
    None,
    "--dealer",
    "-d",
    help="Dealer id to filter by (omit for all dealers)",
)
PeriodOption = typer.Option(
    None,
    "--period",
    "-p",
    help="Period token: 'past-12-months' or 'Q<1-4> <year>'",
)


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


@app.callback()
def main() -> None:
    """Sales reports for dealers, customers and product categories."""
    _configure_logging()


@app.command()
def summary(
    dealer: Optional[str] = DealerOption,
    period: Optional[str] = PeriodOption,
) -> None:
    """Show network total, dealer total and the dealer's share."""
    query = DealerSummaryQuery.from_factory(get_report_factory())
    result = _run(
        lambda: query.execute(period=_period_or_default(period), dealer_id=dealer)
    )

    console.print(
        f"[bold]{escape(_title('Sales Summary', result.dealer_name, result.period_label))}"
        "[/bold]"
    )
    console.print(f"Total (all dealers): {format_currency(result.total, result.currency)}")
    console.print(
        f"{escape(result.dealer_name)}: "
        f"{format_currency(result.dealer_total, result.currency)} "
        f"({format_percentage(result.percentage)})"
    )

    if result.total == 0:
        _placeholder("sales", result.dealer_name, result.period_label)
        return

    if result.dealers:
        table = Table(title="Per-Dealer Breakdown")
        table.add_column("Dealer", style="cyan")
        table.add_column("Sales", justify="right")
        table.add_column("Share", justify="right")
        for share in result.dealers:
            table.add_row(
                share.name,
                format_currency(share.amount, result.currency),
                format_percentage(share.percentage),
            )
        console.print(table)


@app.command()
def categories(
    dealer: Optional[str] = DealerOption,
    period: Optional[str] = PeriodOption,
) -> None:
    """Show sales per category, largest first."""
    query = CategoryBreakdownQuery.from_factory(get_report_factory())
    result = _run(
        lambda: query.execute(period=_period_or_default(period), dealer_id=dealer)
    )

    if result.total == 0:
        _placeholder("sales", result.dealer_name, result.period_label)
        return

    table = Table(
        title=_title("Sales by Category", result.dealer_name, result.period_label),
    )
    table.add_column("Category", style="cyan")
    table.add_column("Sales", justify="right")
    table.add_column("Share", justify="right")
    for item in result.items:
        table.add_row(
            item.label,
            format_currency(item.amount, result.currency),
            format_percentage(item.percentage),
        )
    console.print(table)
    console.print(f"Total: [bold]{format_currency(result.total, result.currency)}[/bold]")


@app.command()
def products(
    dealer: Optional[str] = DealerOption,
    period: Optional[str] = PeriodOption,
) -> None:
    """Show sales per category with the products inside each category."""
    query = CategoryProductBreakdownQuery.from_factory(get_report_factory())
    result = _run(
        lambda: query.execute(period=_period_or_default(period), dealer_id=dealer)
    )

    if result.total == 0:
        _placeholder("sales", result.dealer_name, result.period_label)
        return

    table = Table(
        title=_title("Sales by Product", result.dealer_name, result.period_label),
    )
    table.add_column("Category / Product", style="cyan")
    table.add_column("Sales", justify="right")
    table.add_column("Share", justify="right")
    for item in result.items:
        table.add_row(
            f"[bold]{escape(item.label)}[/bold]",
            format_currency(item.amount, result.currency),
            format_percentage(item.percentage),
        )
        for product in item.products:
            table.add_row(
                f"  {escape(product.name)}",
                format_currency(product.amount, result.currency),
                format_percentage(product.percentage),
            )
        if item.unassigned > 0:
            table.add_row(
                "  [dim](no product)[/dim]",
                format_currency(item.unassigned, result.currency),
                "",
            )
    console.print(table)


@app.command()
def trend(
    dealer: Optional[str] = DealerOption,
    period: Optional[str] = PeriodOption,
) -> None:
    """Show sales per week (quarter) or per month (rolling window)."""
    query = SalesOverTimeQuery.from_factory(get_report_factory())
    result = _run(
        lambda: query.execute(period=_period_or_default(period), dealer_id=dealer)
    )

    if result.total == 0:
        _placeholder("sales", result.dealer_name, result.period_label)
        return

    table = Table(
        title=_title("Sales over Time", result.dealer_name, result.period_label),
    )
    table.add_column(result.granularity.capitalize(), style="cyan")
    table.add_column("Sales", justify="right")
    for point in result.data_points:
        table.add_row(point.period_label, format_currency(point.value, result.currency))
    console.print(table)
    console.print(
        f"Total: [bold]{format_currency(result.total, result.currency)}[/bold]  "
        f"Average: {format_currency(result.average, result.currency)}"
    )


@app.command()
def customers(
    dealer: Optional[str] = DealerOption,
    period: Optional[str] = PeriodOption,
    top: Optional[int] = typer.Option(
        None,
        "--top",
        "-n",
        help="Number of customers to show (default from settings)",
    ),
) -> None:
    """Show the top customers by sales."""
    top_n = top if top is not None else get_settings().leaderboard_size
    query = TopCustomersQuery.from_factory(get_report_factory())
    result = _run(
        lambda: query.execute(
            period=_period_or_default(period),
            top_n=top_n,
            dealer_id=dealer,
        )
    )

    if not result.items:
        _placeholder("customers", result.dealer_name, result.period_label)
        return

    show_dealer = any(item.dealer_name is not None for item in result.items)
    table = Table(
        title=_title(
            f"Top {result.top_n} Customers",
            result.dealer_name,
            result.period_label,
        ),
    )
    table.add_column("#", justify="right")
    table.add_column("Customer", style="cyan")
    if show_dealer:
        table.add_column("Dealer")
    table.add_column("Sales", justify="right")
    table.add_column("Share", justify="right")
    for item in result.items:
        row = [str(item.rank), item.name]
        if show_dealer:
            row.append(item.dealer_name or "")
        row += [
            format_currency(item.amount, result.currency),
            format_percentage(item.percentage_of_total),
        ]
        table.add_row(*row)
    console.print(table)


@app.command()
def customer(
    customer_id: int = typer.Argument(..., help="Customer id"),
    dealer: Optional[str] = DealerOption,
    period: Optional[str] = typer.Option(
        None,
        "--period",
        "-p",
        help="Period token (omit for all time)",
    ),
) -> None:
    """Show the categories one customer has bought."""
    query = CustomerCategoryBreakdownQuery.from_factory(get_report_factory())
    result = _run(
        lambda: query.execute(
            customer_id=customer_id,
            dealer_id=dealer,
            period=period,
        )
    )

    if not result.items:
        _placeholder("sales", result.customer_name, result.period_label)
        return

    table = Table(title=f"{result.customer_name} - {result.period_label}")
    table.add_column("Category", style="cyan")
    table.add_column("Sales", justify="right")
    table.add_column("Share", justify="right")
    for item in result.items:
        table.add_row(
            item.label,
            format_currency(item.amount, result.currency),
            format_percentage(item.percentage),
        )
    console.print(table)
    console.print(
        "Category breakdown - Total: "
        f"[bold]{format_currency(result.total, result.currency)}[/bold]"
    )


@app.command()
def axis(
    dealer: Optional[str] = DealerOption,
    period: Optional[str] = typer.Option(
        None,
        "--period",
        "-p",
        help="Period token (omit for all time)",
    ),
) -> None:
    """Show sales per category in alphabetical order."""
    query = CategorySalesByNameQuery.from_factory(get_report_factory())
    result = _run(lambda: query.execute(dealer_id=dealer, period=period))

    if result.total == 0:
        _placeholder("sales", result.dealer_name, result.period_label)
        return

    table = Table(
        title=_title("Sales by Category Name", result.dealer_name, result.period_label),
    )
    table.add_column("Category", style="cyan")
    table.add_column("Sales", justify="right")
    for item in result.items:
        table.add_row(item.label, format_currency(item.amount, result.currency))
    console.print(table)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
