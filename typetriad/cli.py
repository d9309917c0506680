"""ABOUTME: CLI entry point for typetriad.
ABOUTME: Ranks defensive type combinations or shows the defense profile of given types via Typer."""

import polars as pl
import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from typetriad.exceptions import UnknownTypeError
from typetriad.frames import profile_frame, ranking_frame
from typetriad.logs import init_logging
from typetriad.settings import settings
from typetriad.type_chart import DEFAULT_COMBINATION_SIZE, aggregate_defense_profile, rank_defensive_combinations
from typetriad.registry import Language, resolve_all

app = typer.Typer(
    name="typetriad",
    help="Type effectiveness calculator and defensive type combination ranker.",
    add_completion=False,
)

console = Console()


def _print_frame(frame: pl.DataFrame, title: str) -> None:
    """Render a DataFrame as a rich table."""
    table = Table(title=title)
    for column in frame.columns:
        table.add_column(column, justify="left" if frame.schema[column] == pl.Utf8 else "right")
    for row in frame.iter_rows():
        table.add_row(*(value if isinstance(value, str) else f"{value:g}" for value in row))
    console.print(table)


def _show_ranking(size: int, top: int, language: Language, csv: bool) -> None:
    """Rank all combinations of `size` types and print them, best first."""
    try:
        ranking = rank_defensive_combinations(size)
    except ValueError as e:
        console.print(f"[red]Error:[/] {e}")
        raise typer.Exit(1) from None

    frame = ranking_frame(ranking, language)
    if top > 0:
        frame = frame.head(top)

    if csv:
        typer.echo(frame.write_csv(), nl=False)
        return

    console.print(f"[green]Combinations: {len(ranking)}[/]")
    _print_frame(frame, f"Defensive combinations of {size} types")


def _show_profile(names: list[str], language: Language, csv: bool) -> None:
    """Resolve type names and print the multiplier of every attacking type against them."""
    try:
        defenders = resolve_all(names, language)
    except UnknownTypeError as e:
        console.print(f"[red]Error:[/] {escape(str(e))}")
        raise typer.Exit(1) from None

    frame = profile_frame(aggregate_defense_profile(defenders), language)

    if csv:
        typer.echo(frame.write_csv(), nl=False)
        return

    _print_frame(frame, f"Incoming multipliers against {' / '.join(names)}")


@app.command()
def main(
    types: list[str] | None = typer.Argument(None, help="Defending type names; omit to rank all combinations"),
    language: Language = typer.Option(settings.LANGUAGE, "--language", "-l", help="Language of type names"),
    top: int = typer.Option(0, "--top", "-n", help="Only show the best N combinations (0 = all)"),
    size: int = typer.Option(DEFAULT_COMBINATION_SIZE, "--size", "-s", help="Types per ranked combination"),
    csv: bool = typer.Option(False, "--csv", help="Print CSV instead of a table"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Rank defensive type combinations, or show the defense profile of the given types."""
    if verbose:
        try:
            init_logging(settings.logging_config_path)
        except FileNotFoundError as e:
            console.print(f"[yellow]Warning:[/] {e}")

    if types:
        _show_profile(types, language, csv)
    else:
        _show_ranking(size, top, language, csv)


if __name__ == "__main__":
    app()
