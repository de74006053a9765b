#!filepath: dtrange/cli.py
from contextlib import contextmanager
from datetime import datetime
from typing import Optional

import typer
from pydantic import ValidationError
from rich import print
from rich.markup import escape

from dtrange import AppConfig, __version__, logs
from dtrange.core.clock import FixedClock
from dtrange.core.presets import Preset
from dtrange.picker import RangePicker
from dtrange.utils.datetime_utils import DateTimeUtils as dt
from dtrange.utils.errors import UserInputError

app = typer.Typer(help="dtrange: bounded date-time range picker CLI")

CONFIG_OPTION = typer.Option(None, "--config", "-c", help="YAML config path")
NOW_OPTION = typer.Option(None, "--now", help="Evaluation instant, ISO 8601 (naive = local zone)")


@contextmanager
def _user_errors():
    """
    User mistakes → one red line + exit code 2, no traceback.
    """
    try:
        yield
    except (UserInputError, FileNotFoundError) as e:
        logs.debug(f"[CLI] rejected: {e}")
        print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(code=2)


def _build_picker(
    config: Optional[str],
    now: Optional[str],
    start: str = "",
    end: str = "",
    tz: Optional[str] = None,
) -> RangePicker:
    try:
        cfg = AppConfig.load(config)
    except ValidationError as e:
        raise UserInputError(f"Invalid config: {e}") from e
    logs.configure(cfg.log)

    picker = RangePicker.from_config(cfg, initial_start=start, initial_end=end, initial_timezone=tz)
    if now is None:
        return picker

    try:
        instant = datetime.fromisoformat(now)
    except ValueError as e:
        raise UserInputError(f"Invalid --now value {now!r}: {e}") from e
    if instant.tzinfo is None:
        instant = dt.localize(instant, picker.local_tz)
    picker.clock = FixedClock(instant)
    return picker


def _print_preview(picker: RangePicker, now: datetime) -> None:
    snap = picker.snapshot(now)
    for label, value in picker.preview_lines(now):
        print(f"[bold]{label}:[/bold] {escape(value)}")
    print(f"[dim]{snap.help_text}[/dim]")
    if snap.error:
        print(f"[red]{snap.error}[/red]")


@app.command()
def version():
    print(f"v{__version__}")


@app.command()
def timezones(config: Optional[str] = CONFIG_OPTION):
    """
    List the configured (and validated) display timezones.
    """
    with _user_errors():
        picker = _build_picker(config, None)
        for tz in picker.registry:
            marker = "*" if tz == picker.state.timezone else " "
            print(f"{marker} {tz}")


@app.command()
def check(
    start: str = typer.Argument("", help="YYYY-MM-DDTHH:mm, empty = unset"),
    end: str = typer.Argument("", help="YYYY-MM-DDTHH:mm, empty = unset"),
    now: Optional[str] = NOW_OPTION,
    config: Optional[str] = CONFIG_OPTION,
):
    """
    Validate a range; exit code 1 if it is not acceptable.
    """
    with _user_errors():
        picker = _build_picker(config, now, start=start, end=end)
        message = picker.error_message(picker.clock.now())

    if message:
        print(f"[red]{message}[/red]")
        raise typer.Exit(code=1)
    print("[green]OK[/green]")


@app.command()
def preset(
    name: Preset = typer.Argument(..., help="today | last7 | clear"),
    tz: Optional[str] = typer.Option(None, "--tz", help="Display timezone"),
    now: Optional[str] = NOW_OPTION,
    config: Optional[str] = CONFIG_OPTION,
):
    """
    Apply a named preset and print the resulting range.
    """
    with _user_errors():
        picker = _build_picker(config, now, tz=tz)
        instant = picker.clock.now()
        picker.apply_preset(name, instant)
        print(f"[yellow]{name.label}[/yellow]")
        _print_preview(picker, instant)


@app.command()
def show(
    start: str = typer.Option("", "--start", help="YYYY-MM-DDTHH:mm"),
    end: str = typer.Option("", "--end", help="YYYY-MM-DDTHH:mm"),
    tz: Optional[str] = typer.Option(None, "--tz", help="Display timezone"),
    now: Optional[str] = NOW_OPTION,
    config: Optional[str] = CONFIG_OPTION,
):
    """
    Print the preview block for a range.
    """
    with _user_errors():
        picker = _build_picker(config, now, start=start, end=end, tz=tz)
        _print_preview(picker, picker.clock.now())


if __name__ == "__main__":
    app()

# python -m dtrange.cli show --start 2026-03-08T01:30 --end 2026-03-08T03:30 --tz America/New_York
