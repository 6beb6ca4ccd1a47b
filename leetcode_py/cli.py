"""Command-line interface for leetcode_py."""

import getpass
from typing import Callable, Optional, Tuple, TypeVar

import click
import requests
from rich.console import Console

from . import __version__
from .client import LeetCodeClient, ParseError
from .config import LocalConfig
from .config.local_config import DEFAULT_LANG
from .utils.logging_config import configure_logging
from .utils.terminal import (
    create_table,
    format_level_color,
    format_percent,
    format_status,
    html_to_text,
)


console = Console()

T = TypeVar("T")


def fetch(call: Callable[..., T], *args) -> T:
    """Run a client call, turning transport and parse failures into a clean exit."""
    try:
        return call(*args)
    except ParseError as e:
        console.print(f"[red]Unexpected response from server ({e}).[/red]")
        console.print("[yellow]Please retry, or report it if it keeps happening.[/yellow]")
    except requests.RequestException as e:
        console.print(f"[red]Request failed: {e}[/red]")
    raise SystemExit(1)


@click.group()
@click.version_option(version=__version__)
@click.option("--debug", is_flag=True, default=False, help="Enable debug output")
def cli(debug: bool):
    """leetcode_py - browse LeetCode problems, contests and questions."""
    configure_logging(debug)


@cli.command()
@click.option("--csrftoken", help="csrftoken cookie value")
@click.option("--session", help="LEETCODE_SESSION cookie value")
def login(csrftoken: Optional[str], session: Optional[str]):
    """Save LeetCode session cookies for future use."""
    if csrftoken is None:
        csrftoken = input("csrftoken: ")
    if session is None:
        session = getpass.getpass("LEETCODE_SESSION: ")

    client = LeetCodeClient()
    client.save_credentials(csrftoken.strip(), session.strip())

    identity = fetch(client.get_user_info)
    if identity is None:
        console.print("[red]Login failed: cookies were not accepted[/red]")
        raise SystemExit(1)
    console.print(f"[green]Successfully logged in as {identity.username}[/green]")


@cli.command()
def user():
    """Show the logged in user."""
    client = LeetCodeClient()
    identity = fetch(client.get_user_info)

    if identity is None:
        console.print("[yellow]Not logged in. Run 'leetcode-py login' first.[/yellow]")
        return

    console.print(f"[bold]User:[/bold] {identity.username}")
    premium = "[green]yes[/green]" if identity.is_premium else "no"
    console.print(f"[bold]Premium:[/bold] {premium}")


@cli.command()
def daily():
    """Show today's daily challenge id."""
    client = LeetCodeClient()
    fid = fetch(client.get_question_daily)
    console.print(f"[bold cyan]Daily challenge:[/bold cyan] {fid}")


@cli.command()
@click.argument("slug")
def tag(slug: str):
    """List question ids of a topic tag."""
    client = LeetCodeClient()
    ids = fetch(client.get_question_ids_by_tag, slug)

    if not ids:
        console.print(f"[yellow]No questions found for tag '{slug}'.[/yellow]")
        return

    console.print(f"[bold cyan]{len(ids)} questions tagged {slug}:[/bold cyan]")
    console.print(", ".join(ids))


@cli.command()
@click.argument("slug")
@click.option("--register", is_flag=True, default=False, help="Register for the contest first")
def contest(slug: str, register: bool):
    """Show contest information and questions."""
    client = LeetCodeClient()
    if register:
        fetch(client.register_contest, slug)
        console.print(f"[green]Registered for {slug}[/green]")

    info = fetch(client.get_contest_info, slug)

    console.print(f"\n[bold cyan]{info.title}[/bold cyan] ({info.title_slug})")
    console.print(f"[bold]Start:[/bold] {info.start_time}  [bold]Duration:[/bold] {info.duration}s")
    flags = []
    if info.is_virtual:
        flags.append("virtual")
    if info.contains_premium:
        flags.append("premium")
    flags.append("registered" if info.registered else "not registered")
    console.print(f"[bold]Flags:[/bold] {', '.join(flags)}")

    table = create_table(None, ["ID", "Credit", "Title", "Slug"], {"ID": "cyan", "Credit": "yellow"})
    for stub in info.questions:
        table.add_row(str(stub.question_id), str(stub.credit), stub.title, stub.title_slug)
    console.print(table)

    if info.skipped:
        console.print(
            f"[yellow]{len(info.skipped)} question(s) could not be read and were skipped.[/yellow]"
        )


@cli.command()
@click.argument("categories", nargs=-1)
@click.option("-n", "--limit", type=int, default=50, help="Rows to show (default: 50)")
def problems(categories: Tuple[str, ...], limit: int):
    """List problems of the given categories (default: all)."""
    client = LeetCodeClient()
    console.print("[cyan]Fetching problems...[/cyan]")
    found = fetch(client.get_problems, categories or None)

    if not found:
        console.print("[yellow]No problems found.[/yellow]")
        return

    found.sort(key=lambda p: p.fid)
    table = create_table("Problems", ["", "#", "Title", "Level", "AC"], {"#": "cyan", "AC": "magenta"})

    for problem in found[:limit]:
        name = f"{problem.name} [dim](locked)[/dim]" if problem.locked else problem.name
        table.add_row(
            format_status(problem.status),
            str(problem.fid),
            name,
            format_level_color(problem.level),
            format_percent(problem.percent),
        )

    console.print(table)


@cli.command()
@click.argument("slug")
@click.option("-l", "--lang", help="Language slug for the code template (default: from config)")
def show(slug: str, lang: Optional[str]):
    """Show a question with its statement and code template."""
    client = LeetCodeClient()
    result = fetch(client.get_question_detail, slug)

    if result is None:
        console.print("[yellow]Question content is not available.[/yellow]")
        console.print("[yellow]It is probably premium only; log in with a premium account.[/yellow]")
        return

    problem, question = result
    console.print(
        f"\n[bold cyan][{problem.fid}] {problem.name}[/bold cyan]  "
        f"{format_level_color(problem.level)}  {question.stats.rate} accepted"
    )
    console.print(html_to_text(question.content), markup=False, highlight=False)

    console.print("\n[bold cyan]Sample test case:[/bold cyan]")
    console.print(question.all_cases, markup=False, highlight=False)

    if lang is None:
        config = LocalConfig.load()
        lang = config.default_lang if config else DEFAULT_LANG

    definition = question.get_definition(lang)
    if definition is None:
        available = ", ".join(d.value for d in question.defs)
        console.print(f"[yellow]No template for {lang}. Available: {available}[/yellow]")
        return

    console.print(f"\n[bold cyan]{definition.text} template:[/bold cyan]")
    console.print(definition.default_code, markup=False, highlight=False)


@cli.command(name="set-lang")
@click.argument("lang")
def set_lang(lang: str):
    """Choose the default language for code templates."""
    config = LocalConfig.load()
    if config is None:
        config = LocalConfig()

    config.default_lang = lang
    config.save()

    console.print(f"[green]Default language set to: {lang}[/green]")


@cli.command()
def version():
    """Show version information."""
    console.print(f"[bold cyan]leetcode_py[/bold cyan] version [green]{__version__}[/green]")
    console.print("CLI client for LeetCode")


def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
