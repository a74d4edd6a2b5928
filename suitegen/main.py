"""
suitegen — CLI entrypoint.

Usage:
    python -m suitegen.main --help
    python -m suitegen.main new -f invoice_mr.js -t mapreduce -m record -m search
    python -m suitegen.main config check
"""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path

import click

from suitegen import __version__
from suitegen.core.observability.logging_config import (
    ENV_FILE,
    ENV_FILE_LEVEL,
    resolve_level,
    setup_logging,
)


@click.group()
@click.version_option(version=__version__, prog_name="suitegen")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to .suitegen.yml (default: auto-detect).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """suitegen — generate SuiteScript 2.x boilerplate files."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["debug"] = debug
    ctx.obj["config_path"] = Path(config_path) if config_path else None

    # ── Logging setup (once, at process start) ──────────────────
    setup_logging(
        level=resolve_level(debug=debug, verbose=verbose, quiet=quiet),
        log_file=os.environ.get(ENV_FILE),
        log_file_level=os.environ.get(ENV_FILE_LEVEL),
    )


def _split_modules(values: tuple[str, ...]) -> list[str]:
    """Accept both ``-m record -m search`` and ``-m record,search``."""
    modules: list[str] = []
    for value in values:
        modules.extend(part.strip() for part in value.split(",") if part.strip())
    return modules


@cli.command()
@click.option("--filename", "-f", required=True, help="The JavaScript file to create.")
@click.option("--stype", "-t", "script_type", default="", help="The SuiteScript type to create.")
@click.option("--api-version", "-a", default=None, help="SuiteScript API version (default: 2.1).")
@click.option(
    "--module", "-m", "modules", multiple=True,
    help="N/ module to import (repeatable, or comma-separated).",
)
@click.option("--copyright", "copyright_path", default="", help="Text file with a copyright header.")
@click.option("--dry-run", is_flag=True, help="Print the file instead of writing it.")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def new(
    ctx: click.Context,
    filename: str,
    script_type: str,
    api_version: str | None,
    modules: tuple[str, ...],
    copyright_path: str,
    dry_run: bool,
    as_json: bool,
) -> None:
    """Create a new SuiteScript file."""
    from suitegen.core.config.loader import ConfigError, find_config_file, load_config
    from suitegen.core.models.script import ScriptRequest
    from suitegen.core.use_cases.generate import generate_script

    config_path: Path | None = ctx.obj.get("config_path")
    if config_path is None:
        target_dir = Path(filename).parent
        config_path = find_config_file(target_dir if target_dir.is_dir() else None)

    try:
        config = load_config(config_path) if config_path else None
    except ConfigError as e:
        click.secho(f"❌ {e}", fg="red")
        sys.exit(1)

    request = ScriptRequest(
        path=filename,
        script_type=script_type,
        api_version=api_version,
        modules=_split_modules(modules),
        copyright_path=copyright_path,
    )
    result = generate_script(request, config, write=not dry_run)

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(0 if result.ok else 1)

    if not result.ok:
        click.secho("❌ Cannot generate script:", fg="red", bold=True)
        for err in result.errors:
            click.echo(f"   • {err}")
        sys.exit(1)

    assert result.file is not None  # guaranteed when ok
    if dry_run:
        click.echo(result.file.content)
        return

    if not ctx.obj.get("quiet"):
        click.secho(f"✅ Created {result.file.path}", fg="green")
        click.echo(f"   {result.file.reason}")


@cli.group()
def config() -> None:
    """Generator configuration commands."""


@config.command("check")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def config_check(ctx: click.Context, as_json: bool) -> None:
    """Validate .suitegen.yml configuration."""
    from suitegen.core.use_cases.config_check import check_config

    result = check_config(config_path=ctx.obj.get("config_path"))

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(0 if result.valid else 1)

    if result.valid:
        assert result.config is not None  # guaranteed when valid
        defaults = result.config.defaults
        click.secho("✅ Configuration is valid", fg="green", bold=True)
        click.echo(f"   File: {result.config_path}")
        click.echo(f"   API version: {defaults.api_version or '(built-in default)'}")
        click.echo(f"   Script type: {defaults.script_type or '(none)'}")
        click.echo(f"   Modules: {', '.join(defaults.modules) or '(none)'}")
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


# ── Register sub-groups ─────────────────────────────────────────

from suitegen.ui.cli.catalog import catalog  # noqa: E402

cli.add_command(catalog)


if __name__ == "__main__":
    cli()
