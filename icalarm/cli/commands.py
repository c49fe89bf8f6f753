"""CLI commands for icalarm."""

import json
from datetime import datetime
from pathlib import Path

import typer
from rich.console import Console

from icalarm import __version__
from icalarm.alarm import Alarm, StaticEventContext
from icalarm.config.loader import load_config
from icalarm.errors import IcalAlarmError
from icalarm.logging_config import setup_logging

app = typer.Typer(
    name="icalarm",
    help="icalarm - iCalendar VALARM generator",
    no_args_is_help=True,
)

console = Console(stderr=True)


def version_callback(value: bool):
    if value:
        typer.echo(f"icalarm v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None, "--version", "-v", callback=version_callback, is_eager=True
    ),
):
    """icalarm - iCalendar VALARM generator."""
    pass


def _parse_x(values: list[str]) -> list[tuple[str, str]]:
    pairs = []
    for raw in values:
        key, sep, value = raw.partition("=")
        if not sep or not key:
            raise typer.BadParameter(f"expected KEY=VALUE, got {raw!r}", param_hint="--x")
        pairs.append((key, value))
    return pairs


@app.command()
def render(
    alarm_type: str = typer.Option(..., "--type", "-t", help="display or audio"),
    trigger: int = typer.Option(None, "--trigger", help="Seconds before the event starts"),
    after: bool = typer.Option(False, "--after", help="Count --trigger from the event end instead"),
    at: datetime = typer.Option(None, "--at", help="Absolute trigger time (ISO 8601)"),
    repeat: int = typer.Option(None, "--repeat", help="Number of repetitions"),
    interval: int = typer.Option(None, "--interval", help="Seconds between repetitions"),
    attach: str = typer.Option(None, "--attach", help="Sound URI for audio alarms"),
    mime: str = typer.Option(None, "--mime", help="Media type of --attach"),
    description: str = typer.Option(None, "--description", "-d", help="Text for display alarms"),
    summary: str = typer.Option("", "--summary", "-s", help="Event summary (display fallback)"),
    tz: str = typer.Option(None, "--tz", help="Event timezone, e.g. Europe/Berlin"),
    x: list[str] = typer.Option(None, "--x", help="Custom attribute KEY=VALUE (repeatable)"),
    as_json: bool = typer.Option(False, "--json", help="Print the alarm as JSON instead"),
    config_path: Path = typer.Option(None, "--config", help="Path to config.json"),
):
    """Print a VALARM block for one alarm."""
    if at is not None and trigger is not None:
        raise typer.BadParameter("use either --trigger or --at", param_hint="--at")
    if mime and not attach:
        raise typer.BadParameter("--mime needs --attach", param_hint="--mime")

    try:
        config = load_config(config_path)
        setup_logging(config=config.logging)

        event = StaticEventContext(summary_text=summary, tz=tz)
        alarm = Alarm(
            event,
            type=alarm_type,
            repeat=repeat,
            interval=interval,
            attach={"uri": attach, "mime": mime} if attach else None,
            description=description,
            x=_parse_x(x or []),
        )
        if at is not None:
            alarm.trigger = at
        elif after:
            alarm.trigger_after = trigger
        else:
            alarm.trigger = trigger

        if as_json:
            typer.echo(json.dumps(alarm.to_dict(), default=str, indent=2))
        else:
            typer.echo(alarm.to_ical(config.render), nl=False)
    except IcalAlarmError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
