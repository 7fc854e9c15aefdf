"""PrayerWall CLI — run the moderation filter from a terminal."""

import logging

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from prayerwall import __version__

console = Console()


@click.group()
@click.version_option(version=__version__)
@click.option("--config", "config_path", default=None, help="Path to a moderation config YAML file")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, config_path: str | None, verbose: bool):
    """PrayerWall — moderation tools for community prayer requests.

    Check prayer text the same way the app does before submission, inspect
    the quick typing check, and validate zip codes and user IDs.
    """
    from prayerwall.config import ConfigError, build_validator, load_settings

    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        settings = load_settings(config_path)
    except ConfigError as e:
        raise click.BadParameter(str(e), param_hint="--config") from e

    validator = build_validator(settings)
    ctx.obj = {"settings": settings, "validator": validator, "filter": validator.engine}


def _print_verdict(verdict) -> None:
    if verdict.is_clean:
        console.print(Panel("[green]Clean[/], ready to share", title="Content Check"))
        return

    body = f"[red]Rejected[/] ({verdict.violation_type})\n{verdict.reason}"
    if verdict.suggestions:
        body += "\n\n" + "\n".join(f"  • {s}" for s in verdict.suggestions)
    console.print(Panel(body, title="Content Check"))


# ── Content checks ───────────────────────────────────────────────────


@main.command()
@click.argument("text")
@click.pass_obj
def check(obj: dict, text: str):
    """Run the full content check on TEXT."""
    verdict = obj["filter"].filter_content(text)
    _print_verdict(verdict)
    if not verdict.is_clean:
        raise SystemExit(1)


@main.command()
@click.argument("text")
@click.pass_obj
def quick(obj: dict, text: str):
    """Run the quick typing check on TEXT."""
    verdict = obj["filter"].quick_validate(text)
    if verdict.is_valid:
        console.print("  [green]v[/] Looks good so far")
    else:
        console.print(f"  [yellow]![/] {verdict.message}")
        raise SystemExit(1)


@main.command()
@click.argument("text")
@click.option("--min-length", type=int, default=None, help="Override the minimum length")
@click.option("--max-length", type=int, default=None, help="Override the maximum length")
@click.pass_obj
def validate(obj: dict, text: str, min_length: int | None, max_length: int | None):
    """Validate TEXT as a prayer request submission (length + content)."""
    from prayerwall.validation.validator import PrayerValidator

    base = obj["validator"]
    validator = PrayerValidator(
        base.engine,
        min_length=min_length if min_length is not None else base.min_length,
        max_length=max_length if max_length is not None else base.max_length,
    )
    result = validator.validate_prayer_text(text)

    if result.is_valid:
        console.print("  [green]v[/] Valid prayer request")
        return

    console.print(f"  [red]x[/] {result.error}")
    for suggestion in result.suggestions:
        console.print(f"     [dim]{suggestion}[/]")
    raise SystemExit(1)


@main.command("zip")
@click.argument("zip_code")
def zip_(zip_code: str):
    """Check that ZIP_CODE is five digits."""
    from prayerwall.validation.validator import validate_zip_code

    if validate_zip_code(zip_code):
        console.print(f"  [green]v[/] {zip_code} is a valid zip code")
    else:
        console.print(f"  [red]x[/] {zip_code} is not a valid zip code")
        raise SystemExit(1)


@main.command("user-id")
@click.argument("user_id")
def user_id(user_id: str):
    """Check the format of USER_ID."""
    from prayerwall.validation.validator import validate_user_id

    if validate_user_id(user_id):
        console.print(f"  [green]v[/] {user_id} is a valid user ID")
    else:
        console.print(f"  [red]x[/] {user_id} is not a valid user ID")
        raise SystemExit(1)


# ── Batch / diagnostics ──────────────────────────────────────────────


def _print_stats(stats) -> None:
    table = Table(title="Validation Cache")
    table.add_column("Size", justify="right")
    table.add_column("Limit", justify="right")
    table.add_column("Enabled")
    table.add_row(str(stats.size), str(stats.limit), "yes" if stats.enabled else "no")
    console.print(table)


@main.command()
@click.pass_obj
def stats(obj: dict):
    """Show validation cache statistics."""
    _print_stats(obj["filter"].get_cache_stats())


@main.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.pass_obj
def batch(obj: dict, path: str):
    """Run the full check on every non-blank line of the file at PATH."""
    engine = obj["filter"]
    with open(path, encoding="utf-8") as f:
        lines = [line.rstrip("\n") for line in f if line.strip()]

    if not lines:
        console.print("[yellow]No prayer requests found.[/]")
        return

    table = Table(title=f"Prayer Requests ({len(lines)} checked)")
    table.add_column("#", style="dim", width=4)
    table.add_column("Request")
    table.add_column("Result")
    table.add_column("Reason")

    rejected = 0
    for i, line in enumerate(lines, start=1):
        verdict = engine.filter_content(line)
        if not verdict.is_clean:
            rejected += 1
        table.add_row(
            str(i),
            line[:60],
            "[green]clean[/]" if verdict.is_clean else f"[red]{verdict.violation_type}[/]",
            verdict.reason or "",
        )

    console.print(table)
    console.print(f"\n{len(lines) - rejected} clean, {rejected} rejected")
    _print_stats(engine.get_cache_stats())
