# interim/cli.py
from __future__ import annotations
import json
import logging
from datetime import datetime, tzinfo
from typing import List, Optional
import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from rich import box

from . import config as cfgmod
from . import timeparse as tparse
from .errors import DateError
from .lexer import tokenize
from .model import Dialect, Interval
from .parser import DateParser
from .resolve import resolve

console = Console()
# Show help when no args; disable shell-completion noise
app = typer.Typer(help="Parse English date/time phrases", add_completion=False, no_args_is_help=True)

# ---------- global context & config ----------

class Ctx:
    dialect: Dialect
    tz: Optional[tzinfo]
    fmt: str

def _load_ctx(dialect_opt: Optional[str], tz_opt: Optional[str]) -> Ctx:
    cfg = cfgmod.load()
    ctx = Ctx()
    ctx.dialect = cfgmod.dialect_from(dialect_opt or cfg.get("dialect"))
    ctx.tz = cfgmod.tzinfo_from(tz_opt or cfg.get("timezone"))
    ctx.fmt = str(cfg.get("format") or "iso")
    return ctx

@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    dialect: str = typer.Option(None, "--dialect", help="uk|us (from config or uk)"),
    tz: str = typer.Option(None, "--tz", help="IANA zone for 'now' (from config or local)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
):
    """Initialize context + config; print help when no subcommand."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(message)s", handlers=[RichHandler(console=console)])
    try:
        ctx.obj = _load_ctx(dialect, tz)
    except ValueError as e:
        console.print(f"[red]{e}[/red]"); raise typer.Exit(1)

# ---------- helpers ----------

def _text(words: List[str]) -> str:
    return " ".join(words)

def _reference(ctx: typer.Context, now: Optional[str]) -> datetime:
    if not now:
        return tparse.now_local(ctx.obj.tz)
    try:
        return tparse.parse_dt(now, ctx.obj.tz)
    except ValueError as e:
        console.print(f"[red]bad --now: {e}[/red]"); raise typer.Exit(1)

def fmt_datetime(dt: datetime, fmt: str) -> str:
    return dt.isoformat() if fmt == "iso" else dt.strftime(fmt)

def fmt_interval(iv: Interval) -> str:
    return f"{iv.value} {iv.unit}"

def _print_spec_table(spec) -> None:
    table = Table(box=box.SIMPLE_HEAVY)
    table.add_column("Part")
    table.add_column("Parsed")
    table.add_row("date", repr(spec.date) if spec.date is not None else "[dim](none)[/dim]")
    table.add_row("time", repr(spec.time) if spec.time is not None else "[dim](none)[/dim]")
    console.print(table)

# ---------- commands ----------

# phrases may start with "-" ("-3h"); pass those through as words
_PHRASE_ARGS = {"ignore_unknown_options": True}

@app.command(context_settings=_PHRASE_ARGS)
def date(
    ctx: typer.Context,
    words: List[str] = typer.Argument(..., help="Phrase, e.g. next friday 8pm"),
    now: str = typer.Option(None, "--now", help="Reference time (ISO or 'YYYY-MM-DD HH:MM'); default: now"),
    json_out: bool = typer.Option(False, "--json"),
    explain: bool = typer.Option(False, "--explain", help="Show the parsed date and time parts"),
):
    """Resolve a date/time phrase against now (or --now)."""
    text = _text(words)
    ref = _reference(ctx, now)
    try:
        spec = DateParser(text).parse(ctx.obj.dialect)
        result = resolve(spec, ref, ctx.obj.dialect)
    except DateError as e:
        console.print(f"[red]{e}[/red]"); raise typer.Exit(1)
    if explain:
        _print_spec_table(spec)
    if json_out:
        typer.echo(json.dumps({
            "input": text, "dialect": ctx.obj.dialect.value,
            "reference": ref.isoformat(), "result": result.isoformat(),
        }, indent=2))
        return
    typer.echo(fmt_datetime(result, ctx.obj.fmt))

@app.command(context_settings=_PHRASE_ARGS)
def duration(
    words: List[str] = typer.Argument(..., help="Span, e.g. 3 weeks ago"),
    json_out: bool = typer.Option(False, "--json"),
):
    """Parse a relative span (seconds, days or months)."""
    text = _text(words)
    try:
        iv = tparse.parse_duration(text)
    except DateError as e:
        console.print(f"[red]{e}[/red]"); raise typer.Exit(1)
    if json_out:
        typer.echo(json.dumps({"input": text, "unit": iv.unit, "value": iv.value}, indent=2))
        return
    typer.echo(fmt_interval(iv))

@app.command(context_settings=_PHRASE_ARGS)
def tokens(words: List[str] = typer.Argument(..., help="Text to tokenize")):
    """Show how a phrase is tokenized."""
    table = Table(box=box.SIMPLE_HEAVY)
    table.add_column("Span", justify="right"); table.add_column("Kind"); table.add_column("Text")
    for tok in tokenize(_text(words)):
        kind = f"[red]{tok.kind.value}[/red]" if tok.kind.value == "error" else tok.kind.value
        table.add_row(f"{tok.start}..{tok.end}", kind, tok.text)
    console.print(table)

# ---------- entry point ----------

if __name__ == "__main__":
    app()
