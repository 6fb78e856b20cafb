from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer

from . import config
from .models import AgendaState
from .pipeline.backend import BackendUnavailableError
from .pipeline.formatting import primary_month, week_range_label
from .pipeline.holidays import build_holiday_table
from .pipeline.render_preview import render_previews
from .pipeline.run import ExportError, export_agenda

app = typer.Typer(help="Printable weekly agenda builder")


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Log progress")) -> None:
    if verbose:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")


@app.command()
def build(
    start: str = typer.Option(config.DEFAULT_START, "--start", help="First day (YYYY-MM-DD)"),
    end: str = typer.Option(config.DEFAULT_END, "--end", help="Last day (YYYY-MM-DD)"),
    out: Optional[Path] = typer.Option(None, "--out", help="Output directory"),
    paper: str = typer.Option("letter", "--paper", help="letter or a4"),
    no_holidays: bool = typer.Option(False, "--no-holidays", help="Hide holiday labels"),
    previews: int = typer.Option(0, "--previews", help="Render the first N pages to PNG"),
) -> None:
    if out:
        config.set_out_dir(out)
    state = AgendaState(start, end, show_holidays=not no_holidays).regenerate()
    if not state.weeks:
        typer.echo(f"No weeks between {start} and {end}", err=True)
        raise typer.Exit(code=1)
    try:
        result = export_agenda(state, out_dir=config.OUT_DIR, paper=paper)
    except (BackendUnavailableError, ExportError, ValueError) as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    typer.echo(f"Pages: {result.page_count}")
    typer.echo(f"Saved: {result.path}")
    if previews > 0:
        for path in render_previews(start, end, result.path, base_dir=config.OUT_DIR, pages=previews):
            typer.echo(f"Preview: {path}")


@app.command()
def weeks(
    start: str = typer.Option(config.DEFAULT_START, "--start", help="First day (YYYY-MM-DD)"),
    end: str = typer.Option(config.DEFAULT_END, "--end", help="Last day (YYYY-MM-DD)"),
) -> None:
    state = AgendaState(start, end).regenerate()
    if not state.weeks:
        typer.echo("No weeks to process")
        return
    for week in state.weeks:
        typer.echo(f"{week[0].isoformat()}  {primary_month(week):<10} {week_range_label(week)}")
    typer.echo(f"Weeks: {len(state.weeks)}")


@app.command()
def holidays(
    year: int = typer.Option(..., "--year", help="First year"),
    end_year: Optional[int] = typer.Option(None, "--end-year", help="Last year (defaults to --year)"),
) -> None:
    table = build_holiday_table(year, end_year if end_year is not None else year)
    for key in sorted(table):
        typer.echo(f"{key}  {table[key]}")


if __name__ == "__main__":
    app()
