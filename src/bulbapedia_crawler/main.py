# ABOUTME: Main CLI application entry point using asyncclick for native async support
# ABOUTME: Provides commands for listing the catalog, showing details and managing caches

import json as jsonlib
from contextlib import nullcontext

import asyncclick as click
from rich.console import Console

from bulbapedia_crawler.config import get_config
from bulbapedia_crawler.core.service import PokemonService
from bulbapedia_crawler.extraction.base import CrawlerError
from bulbapedia_crawler.utils.logging import (
    LoggingMode,
    configure_logging,
    get_logging_status,
    with_command_context,
    with_pokemon_context,
)
from bulbapedia_crawler.utils.rich_tables import (
    create_details_table,
    create_logging_status_table,
    create_references_table,
    print_rich_table,
)

console = Console()


def _echo_json(payload) -> None:
    click.echo(jsonlib.dumps(payload, ensure_ascii=False, indent=2))


@click.command(name="list")
@click.option("--limit", "-n", type=int, default=None, help="Only show the first N entries")
@click.pass_context
async def list_references(ctx, limit: int | None):
    """
    📖 List every entry of the national index.
    """
    json_output = ctx.obj["json_output"]
    with with_command_context("list", limit=limit) as logger:
        service = PokemonService()
        try:
            with console.status("📖 Reading the national index...", spinner="dots") if not json_output else nullcontext():
                references = await service.list_references()
        except CrawlerError as e:
            logger.warning("Listing failed", error=str(e))
            console.print(f"[red]❌ {e}[/red]")
            ctx.exit(1)
        finally:
            await service.close()

        logger.info("Listing complete", count=len(references))
        shown = references[:limit] if limit is not None else references

        if json_output:
            _echo_json([reference.model_dump() for reference in shown])
        else:
            print_rich_table(console, create_references_table(shown, total=len(references)))


@click.command(name="ids")
@click.pass_context
async def ids(ctx):
    """
    🔢 Print every catalog number, one per line.
    """
    service = PokemonService()
    try:
        numbers = await service.get_ids()
    except CrawlerError as e:
        console.print(f"[red]❌ {e}[/red]")
        ctx.exit(1)
    finally:
        await service.close()

    if ctx.obj["json_output"]:
        _echo_json(numbers)
    else:
        for number in numbers:
            click.echo(number)


@click.command(name="show")
@click.argument("number", type=int)
@click.pass_context
async def show(ctx, number: int):
    """
    🔍 Show the details of the entry with the given catalog number.
    """
    json_output = ctx.obj["json_output"]
    with with_pokemon_context(number) as logger:
        service = PokemonService()
        try:
            reference = await service.get_reference(number)
            if reference is None:
                logger.warning("Unknown catalog number")
                console.print(f"[red]❌ No entry with number {number}[/red]")
                ctx.exit(1)

            with console.status(f"🔍 Reading {reference.name}...", spinner="dots") if not json_output else nullcontext():
                details = await service.get_details(reference)
        except CrawlerError as e:
            logger.warning("Detail lookup failed", error=str(e), error_type=type(e).__name__)
            console.print(f"[red]❌ {e}[/red]")
            ctx.exit(1)
        finally:
            await service.close()

        logger.info("Detail lookup complete", name=details.name)

        if json_output:
            _echo_json(details.model_dump(mode="json", by_alias=True))
        else:
            print_rich_table(console, create_details_table(details))
            if details.description:
                console.print(details.description)


@click.command(name="clear-cache")
async def clear_cache():
    """
    🧹 Drop cached detail records.
    """
    if not get_config().details_cache_enabled:
        console.print("[yellow]Details cache is disabled, nothing to clear.[/yellow]")
        return

    service = PokemonService()
    try:
        await service.clear_cache(include_details=True)
    finally:
        await service.close()
    console.print("[green]🧹 Details cache cleared[/green]")


@click.command(name="logging-status")
def logging_status():
    """
    📊 Show current logging configuration and status.
    """
    status = get_logging_status()
    print_rich_table(console, create_logging_status_table(status))


def _initialize_logging(json_output: bool, log_level: str | None = None, log_file: str | None = None) -> None:
    """Initialize logging configuration."""
    config = get_config()
    mode = LoggingMode.PRODUCTION if json_output else config.log_mode

    # Use config defaults when CLI parameters are not provided
    final_log_level = log_level or config.log_level
    final_log_file = log_file or (str(config.log_file) if config.log_file else None)

    configure_logging(mode=mode, log_level=final_log_level, log_file=final_log_file)


@click.group(invoke_without_command=True)
@click.option("--json", is_flag=True, help="Output JSON instead of the rich interface")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Logging level",
)
@click.option("--log-file", help="Custom log file path")
@click.pass_context
def app(ctx, json: bool, log_level: str | None, log_file: str | None):
    """
    📚 Bulbapedia Crawler - catalog and species data from Bulbapedia

    Reads the national index and species pages of Bulbapedia and turns them
    into structured records.
    """
    # Store global options in context for commands to access
    ctx.ensure_object(dict)
    ctx.obj["json_output"] = json

    # Initialize logging once here instead of in each command
    _initialize_logging(json, log_level, log_file)

    # Show help if no command provided
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


# Add commands to the main group
app.add_command(list_references)
app.add_command(ids)
app.add_command(show)
app.add_command(clear_cache)
app.add_command(logging_status)


if __name__ == "__main__":
    app()
