"""
Dart exports — CLI entrypoint.

Usage:
    python -m dart_exports.main --help
    python -m dart_exports.main generate lib/src
    python -m dart_exports.main config check
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from dart_exports import __version__
from dart_exports.core.observability.logging_config import level_from_flags, setup_logging


@click.group()
@click.version_option(version=__version__, prog_name="dart-exports")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to dart_exports.yml (default: auto-detect).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """Dart exports — generate barrel files for a Dart source tree."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["debug"] = debug
    ctx.obj["config_path"] = Path(config_path) if config_path else None

    # ── Logging setup (once, at process start) ──────────────────
    setup_logging(level=level_from_flags(debug=debug, verbose=verbose, quiet=quiet))


def _load_settings_or_exit(ctx: click.Context, start_dir: Path):
    """Resolve settings for ``start_dir``; exit 1 on a bad config file."""
    from dart_exports.core.config.loader import ConfigError, resolve_settings

    try:
        settings, _ = resolve_settings(ctx.obj.get("config_path"), start_dir)
    except ConfigError as e:
        click.secho(f"❌ {e}", fg="red", err=True)
        sys.exit(1)
    return settings


# ── Generate ────────────────────────────────────────────────────


@cli.command()
@click.argument("path", type=click.Path(file_okay=True, dir_okay=True, path_type=Path))
@click.option(
    "--on-conflict",
    type=click.Choice(["ask", "overwrite", "skip", "overwrite-all"]),
    default="ask",
    show_default=True,
    help="How to answer when an aggregator file already exists.",
)
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def generate(ctx: click.Context, path: Path, on_conflict: str, as_json: bool) -> None:
    """Create exporter files recursively under PATH."""
    from dart_exports.core.use_cases.generate import generate_exports
    from dart_exports.ui.cli.prompts import collaborator_for

    root = path.resolve()
    settings = _load_settings_or_exit(ctx, root if root.is_dir() else Path.cwd())
    quiet = ctx.obj.get("quiet", False)

    result = generate_exports(root, collaborator_for(on_conflict, quiet=quiet), settings)

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(1 if result.failed else 0)
        return

    if not result.root_exists:
        # Nothing to do; not an error
        return

    if not quiet:
        click.echo()
        for outcome in result.outcomes:
            icon = {"written": "✅", "skipped": "⏭️ ", "dismissed": "⏭️ ", "empty": "➖", "failed": "❌"}[outcome.status]
            click.echo(f"   {icon} {outcome.path}/{outcome.target}")
        click.echo()
        click.secho(
            f"   {result.written} written, {result.skipped} skipped, "
            f"{result.empty} empty, {result.failed} failed",
            fg="green" if result.ok else "yellow",
            bold=True,
        )

    if result.failed:
        sys.exit(1)


@cli.command()
@click.argument(
    "path",
    type=click.Path(exists=True, file_okay=False, dir_okay=True, path_type=Path),
)
@click.pass_context
def resolve(ctx: click.Context, path: Path) -> None:
    """Print the aggregator filename PATH would use."""
    from dart_exports.core.services.export_content import resolve_aggregator_name

    root = path.resolve()
    settings = _load_settings_or_exit(ctx, root)
    click.echo(resolve_aggregator_name(root, settings))


# ── Config ──────────────────────────────────────────────────────


@cli.group()
def config() -> None:
    """Export configuration commands."""


@config.command("check")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def config_check(ctx: click.Context, as_json: bool) -> None:
    """Validate dart_exports.yml."""
    from dart_exports.core.use_cases.config_check import check_config

    result = check_config(config_path=ctx.obj.get("config_path"))

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(0 if result.valid else 1)
        return

    if result.valid:
        assert result.settings is not None  # guaranteed when valid
        click.secho("✅ Configuration is valid", fg="green", bold=True)
        click.echo(f"   File: {result.config_path or '(defaults)'}")
        click.echo(f"   Skipped folders: {', '.join(result.settings.skip_folders) or '-'}")
        click.echo(f"   Skipped suffixes: {', '.join(result.settings.skip_file_suffixes) or '-'}")
    else:
        click.secho("❌ Configuration errors:", fg="red", bold=True)
        for err in result.errors:
            click.echo(f"   • {err}")

    if result.warnings:
        click.echo()
        click.secho("⚠️  Warnings:", fg="yellow")
        for warn in result.warnings:
            click.echo(f"   • {warn}")

    if not result.valid:
        click.echo()
        sys.exit(1)

    click.echo()


@config.command("show")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def config_show(ctx: click.Context, as_json: bool) -> None:
    """Print the effective export settings."""
    settings = _load_settings_or_exit(ctx, Path.cwd())

    if as_json:
        click.echo(json.dumps(settings.model_dump(), indent=2))
        return

    for key, value in settings.model_dump().items():
        if isinstance(value, list):
            value = ", ".join(value) or "-"
        click.echo(f"{key}: {value}")


if __name__ == "__main__":
    cli()
