# ABOUTME: Rich table builders for catalog listings, detail records and logging status
# ABOUTME: Keeps CLI rendering separate from the extraction and service layers

from typing import Any

from rich.box import ROUNDED
from rich.console import Console
from rich.table import Table

from bulbapedia_crawler.core.models import MISSING_VALUE, PokemonDetails, PokemonReference


def create_key_value_table(
    title: str,
    data: dict[str, str],
    title_style: str = "bold cyan",
    key_style: str = "bold blue",
    value_style: str = "green",
    box_style=ROUNDED,
) -> Table:
    """Create a two-column field/value table.

    Args:
        title: Table title
        data: Dictionary of key-value pairs to display
        title_style: Style for the table title
        key_style: Style for the key column
        value_style: Style for the value column
        box_style: Border style for the table

    Returns:
        Formatted Rich table ready for printing
    """
    table = Table(
        title=f"[{title_style}]{title}[/{title_style}]",
        box=box_style,
        show_header=True,
        header_style="bold magenta",
        border_style="cyan",
        title_justify="left",
        expand=False,
    )

    table.add_column("Field", style=key_style, no_wrap=False)
    table.add_column("Value", style=value_style, no_wrap=False)

    for key, value in data.items():
        table.add_row(key, str(value))

    return table


def create_references_table(references: list[PokemonReference], total: int | None = None) -> Table:
    """Create a table listing catalog references.

    Args:
        references: References to display, in order
        total: Size of the full catalog when only a slice is shown
    """
    shown = len(references)
    title = f"📖 National Index ({shown} of {total})" if total and total != shown else f"📖 National Index ({shown})"

    table = Table(
        title=f"[bold cyan]{title}[/bold cyan]",
        box=ROUNDED,
        show_header=True,
        header_style="bold magenta",
        border_style="cyan",
        title_justify="left",
        row_styles=["", "dim"],
    )
    table.add_column("#", style="bold blue", justify="right")
    table.add_column("Name", style="green")

    for reference in references:
        table.add_row(f"{reference.number:04d}", reference.name)

    return table


def _format_value(value: int) -> str:
    return "Unknown" if value == MISSING_VALUE else f"{value:,}"


def create_details_table(details: PokemonDetails) -> Table:
    """Create a table for one detail record."""
    if details.hatch_time_min == details.hatch_time_max:
        hatch_time = f"{details.hatch_time_min:,} steps" if details.hatch_time_min else "Unknown"
    else:
        hatch_time = f"{details.hatch_time_min:,} - {details.hatch_time_max:,} steps"

    data = {
        "🆔 Number": f"#{details.number:04d}",
        "📛 Name": details.name,
        "🔥 Types": " / ".join(details.types) if details.types else "Unknown",
        "🎯 Catch rate": _format_value(details.catch_rate),
        "⭐ Base experience yield": _format_value(details.base_experience_yield),
        "🥚 Hatch time": hatch_time,
        "💛 Base friendship": _format_value(details.base_friendship),
    }

    return create_key_value_table(title=f"🔍 {details.name}", data=data)


def create_logging_status_table(status: dict[str, Any]) -> Table:
    """Create a table describing the logging configuration."""
    logging_data = {
        "🖥️ Mode": status["mode"],
        "📂 Log Directory": status["log_directory"] or "Not created",
        "🔇 Suppressed Loggers": ", ".join(status["third_party_suppressed"]),
    }
    if status["log_files"]["main"]:
        logging_data["📄 Main Log"] = status["log_files"]["main"]
    if status["log_files"]["errors"]:
        logging_data["🚨 Error Log"] = status["log_files"]["errors"]

    return create_key_value_table(
        title="🔍 Logging Configuration",
        data=logging_data,
        title_style="bold green",
        key_style="blue",
        value_style="white",
    )


def print_rich_table(console: Console, table: Table) -> None:
    """Print a rich table with consistent spacing.

    Args:
        console: Rich console instance
        table: Configured table to print
    """
    console.print()
    console.print(table)
    console.print()
