from __future__ import annotations

import json
import logging
from typing import Callable, List, Optional

import typer
from rich.console import Console
from rich.table import Table
from rich import box
from rich.markup import escape

from .client import CfpTime
from .config import ClientConfig
from .core import Conference
from .errors import CfpTimeError, NotFound

app = typer.Typer(add_completion=False, help="cfptime - browse conferences from the CFPTime API")
console = Console()


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")
    level = logging.DEBUG if verbose else logging.WARNING
    for name in ("cfptime", "httpx", "httpcore"):
        logging.getLogger(name).setLevel(level)


def make_client(base_url: Optional[str] = None, timeout_s: Optional[float] = None) -> CfpTime:
    cfg = ClientConfig.from_env().with_overrides(base_url=base_url, timeout_s=timeout_s)
    return CfpTime(cfg)


# ------------------------------- Rendering -------------------------------
def _location(c: Conference) -> str:
    return ", ".join(part for part in (c.city, c.province, c.country) if part)


def render_list(confs: List[Conference], title: str) -> None:
    table = Table(title=title, box=box.SIMPLE_HEAVY)
    table.add_column("ID", style="dim", no_wrap=True)
    table.add_column("Name", style="bold")
    table.add_column("Location", style="magenta")
    table.add_column("CFP deadline", style="cyan", no_wrap=True)
    table.add_column("Starts", style="cyan", no_wrap=True)
    table.add_column("Website", style="blue", overflow="fold")

    for c in confs:
        table.add_row(
            str(c.id),
            escape(c.name),
            escape(_location(c)),
            escape(c.cfp_deadline),
            escape(c.conf_start_date),
            escape(c.website),
        )

    console.print(table)


def render_detail(c: Conference) -> None:
    console.rule(f"[bold]{escape(c.name)}")
    console.print(f"[dim]ID:[/] {c.id}")
    console.print(f"[magenta]Location:[/] {escape(_location(c))}")
    console.print(f"[cyan]CFP deadline:[/] {escape(c.cfp_deadline) or '-'}")
    console.print(f"[cyan]Starts:[/] {escape(c.conf_start_date) or '-'}", end="")
    if c.number_of_days:
        console.print(f" ({c.number_of_days} days)")
    else:
        console.print()
    console.print(f"[blue]Website:[/] {escape(c.website)}")
    if c.twitter:
        console.print(f"[blue]Twitter:[/] {escape(c.twitter)}")
    if c.cfp_details:
        console.print(f"[green]CFP details:[/] {escape(c.cfp_details)}")
    if c.speaker_benefits:
        console.print(f"[green]Speaker benefits:[/] {escape(c.speaker_benefits)}")
    if c.code_of_conduct:
        console.print(f"[green]Code of conduct:[/] {escape(c.code_of_conduct)}")


def print_json(payload) -> None:
    # plain print so the output stays machine readable
    typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))


# --------------------------------- CLI ----------------------------------
def _call(ctx: typer.Context, fn: Callable[[CfpTime], object]):
    opts = ctx.obj or {}
    try:
        api = make_client(opts.get("base_url"), opts.get("timeout"))
    except ValueError as e:
        # bad CFPTIME_TIMEOUT and similar config values
        console.print(f"[red]Error:[/] {escape(str(e))}")
        raise typer.Exit(code=1)
    try:
        with api:
            return fn(api)
    except NotFound as e:
        console.print(f"[red]Not found:[/] {escape(e.path)}")
        raise typer.Exit(code=1)
    except CfpTimeError as e:
        console.print(f"[red]Error:[/] {escape(str(e))}")
        raise typer.Exit(code=1)


def _list(ctx: typer.Context, fetch: Callable[[CfpTime], List[Conference]], title: str, as_json: bool) -> None:
    confs = _call(ctx, fetch)
    if as_json:
        print_json([c.to_dict() for c in confs])
        return
    if not confs:
        console.print("[yellow]No conferences returned.[/]")
        raise typer.Exit(code=0)
    render_list(confs, title)


def _show(ctx: typer.Context, fetch: Callable[[CfpTime], Conference], as_json: bool) -> None:
    c = _call(ctx, fetch)
    if as_json:
        print_json(c.to_dict())
        return
    render_detail(c)


@app.callback()
def main_options(
    ctx: typer.Context,
    base_url: Optional[str] = typer.Option(None, "--base-url", help="API root (default: CFPTIME_BASE_URL or api.cfptime.org)"),
    timeout: Optional[float] = typer.Option(None, "--timeout", help="Request timeout in seconds"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log HTTP requests"),
) -> None:
    setup_logging(verbose)
    ctx.obj = {"base_url": base_url, "timeout": timeout}


@app.command("cfps")
def cmd_cfps(ctx: typer.Context, as_json: bool = typer.Option(False, "--json", help="Print raw JSON")) -> None:
    """List conferences with an open call for proposals."""
    _list(ctx, lambda api: api.list_cfps(), "Open CFPs", as_json)


@app.command("cfp")
def cmd_cfp(
    ctx: typer.Context,
    cfp_id: int = typer.Argument(..., help="CFP id"),
    as_json: bool = typer.Option(False, "--json", help="Print raw JSON"),
) -> None:
    """Show one CFP by id."""
    _show(ctx, lambda api: api.get_cfp(cfp_id), as_json)


@app.command("upcoming")
def cmd_upcoming(ctx: typer.Context, as_json: bool = typer.Option(False, "--json", help="Print raw JSON")) -> None:
    """List upcoming conferences."""
    _list(ctx, lambda api: api.list_upcoming(), "Upcoming Conferences", as_json)


@app.command("confs")
def cmd_confs(ctx: typer.Context, as_json: bool = typer.Option(False, "--json", help="Print raw JSON")) -> None:
    """List all conferences."""
    _list(ctx, lambda api: api.list_confs(), "Conferences", as_json)


@app.command("conf")
def cmd_conf(
    ctx: typer.Context,
    conf_id: int = typer.Argument(..., help="Conference id"),
    as_json: bool = typer.Option(False, "--json", help="Print raw JSON"),
) -> None:
    """Show one conference by id."""
    _show(ctx, lambda api: api.get_conf(conf_id), as_json)


def main() -> None:  # entry point
    app()


if __name__ == "__main__":
    main()
