"""
Patro CLI - Click-based command line interface.

Usage:
    patro today                          # Today's BS date
    patro to-bs 2025-12-19               # AD -> BS
    patro to-ad 2082 9 4                 # BS -> AD
    patro format 2082 9 4 --day-display long
    patro numeral 2082-09-04             # ASCII -> Devanagari digits
    patro month 2082 9 --lang np         # Month grid
    patro select 2082 9 4                # Picker result as JSON
"""

from __future__ import annotations

import json
import logging
import sys
from collections.abc import Callable
from functools import wraps
from typing import TypeVar

import click

from patro.calendar.converter import BSDate, ad_to_bs, bs_to_ad
from patro.calendar.formatter import DateFormat, DisplayType, format_ad, format_bs
from patro.calendar.metadata import LANGUAGES
from patro.calendar.nepali_date import NepaliDate
from patro.calendar.numerals import to_english_numeral, to_nepali_numeral
from patro.calendar.picker import MonthView, select, weekday_labels
from patro.core.config import Config
from patro.core.exceptions import PatroError

# Windows UTF-8 encoding
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")
    sys.stderr.reconfigure(encoding="utf-8", errors="replace")

FORMAT_CHOICES = [f.value for f in DateFormat]
DISPLAY_CHOICES = [d.value for d in DisplayType]

T = TypeVar("T")


def reports_errors(f: Callable[..., T]) -> Callable[..., T]:
    """Decorator turning library errors into Click errors (exit status 1)."""

    @wraps(f)
    def wrapper(*args, **kwargs):
        try:
            return f(*args, **kwargs)
        except PatroError as e:
            raise click.ClickException(str(e)) from e

    return wrapper


@click.group()
@click.option("-c", "--config", "config_path", type=click.Path(dir_okay=False), help="YAML config file")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, verbose: bool) -> None:
    """Patro - Bikram Sambat date converter

    Convert between AD and BS dates:
        patro to-bs 2025-12-19
        patro to-ad 2082 9 4
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        ctx.obj = Config(config_path)
    except PatroError as e:
        raise click.ClickException(str(e)) from e


@cli.command()
@click.option("--nepali", is_flag=True, help="Print with Devanagari numerals")
@click.pass_obj
@reports_errors
def today(config: Config, nepali: bool) -> None:
    """Today's date in BS."""
    current = NepaliDate.today()
    if nepali:
        click.echo(current.format(config.date_format, config.month_display, config.day_display))
    else:
        click.echo(str(current))


@cli.command("to-bs")
@click.argument("ad_date")
@click.option("--nepali", is_flag=True, help="Print with Devanagari numerals")
@click.pass_obj
@reports_errors
def to_bs(config: Config, ad_date: str, nepali: bool) -> None:
    """Convert AD_DATE (YYYY-MM-DD) to BS."""
    bs = ad_to_bs(ad_date)
    if nepali:
        click.echo(format_bs(bs, config.date_format, config.month_display, config.day_display))
    else:
        click.echo(bs.isoformat())


@cli.command("to-ad")
@click.argument("year", type=int)
@click.argument("month", type=int)
@click.argument("day", type=int)
@click.option("-f", "--format", "fmt", type=click.Choice(FORMAT_CHOICES), help="Output layout")
@click.pass_obj
@reports_errors
def to_ad(config: Config, year: int, month: int, day: int, fmt: str | None) -> None:
    """Convert a BS date to AD."""
    click.echo(format_ad(bs_to_ad(year, month, day), fmt or config.date_format))


@cli.command("format")
@click.argument("year", type=int)
@click.argument("month", type=int)
@click.argument("day", type=int)
@click.option("-f", "--format", "fmt", type=click.Choice(FORMAT_CHOICES), help="Output layout")
@click.option("--month-display", type=click.Choice(DISPLAY_CHOICES), help="Month rendering")
@click.option("--day-display", type=click.Choice(DISPLAY_CHOICES), help="Day rendering")
@click.pass_obj
@reports_errors
def format_command(
    config: Config,
    year: int,
    month: int,
    day: int,
    fmt: str | None,
    month_display: str | None,
    day_display: str | None,
) -> None:
    """Render a BS date in Nepali script."""
    click.echo(
        format_bs(
            BSDate(year, month, day),
            fmt or config.date_format,
            month_display or config.month_display,
            day_display or config.day_display,
        )
    )


@cli.command()
@click.argument("text")
@click.option("-r", "--reverse", is_flag=True, help="Devanagari -> ASCII digits")
def numeral(text: str, reverse: bool) -> None:
    """Transliterate the digits in TEXT."""
    click.echo(to_english_numeral(text) if reverse else to_nepali_numeral(text))


@cli.command()
@click.argument("year", type=int)
@click.argument("month", type=int)
@click.option("--lang", type=click.Choice(LANGUAGES), help="Label language")
@click.pass_obj
@reports_errors
def month(config: Config, year: int, month: int, lang: str | None) -> None:
    """Print the day grid of a BS month."""
    lang = lang or config.language
    try:
        view = MonthView(year, month)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="MONTH") from e

    click.echo(view.title(lang))
    click.echo(" ".join(f"{label:>3}" for label in weekday_labels(lang)))
    for week in view.weeks():
        cells = []
        for cell in week:
            if cell is None:
                cells.append("   ")
            else:
                text = to_nepali_numeral(cell) if lang == "np" else str(cell)
                cells.append(f"{text:>3}")
        click.echo(" ".join(cells).rstrip())


@cli.command("select")
@click.argument("year", type=int)
@click.argument("month", type=int)
@click.argument("day", type=int)
@reports_errors
def select_command(year: int, month: int, day: int) -> None:
    """Print the picker result for a BS date as JSON."""
    click.echo(json.dumps(select(year, month, day).to_dict(), ensure_ascii=False))


if __name__ == "__main__":
    cli()
