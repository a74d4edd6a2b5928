"""
CLI commands for browsing the reference catalogs.

Thin wrappers over ``suitegen.core.data``.
"""

from __future__ import annotations

import json

import click


@click.group()
def catalog() -> None:
    """Catalog — list accepted script types, API versions and modules."""


@catalog.command("types")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
def types(as_json: bool) -> None:
    """List script types and their @NScriptType tags."""
    from suitegen.core.data import get_registry
    from suitegen.core.services.generators.suitescript import script_type_tag

    registry = get_registry()
    rows = [
        {"key": key, "name": name, "tag": script_type_tag(name)}
        for key, name in registry.script_type_names.items()
    ]

    if as_json:
        click.echo(json.dumps(rows, indent=2))
        return

    click.secho("📜 Script types:", fg="cyan", bold=True)
    for row in rows:
        click.echo(f"   {row['key']:<12} → @NScriptType {row['tag']}")
    click.echo()


@catalog.command("versions")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
def versions(as_json: bool) -> None:
    """List accepted API versions."""
    from suitegen.core.data import get_registry

    registry = get_registry()

    if as_json:
        click.echo(json.dumps({
            "versions": list(registry.api_versions),
            "aliases": dict(registry.api_aliases),
            "default": registry.default_api_version,
        }, indent=2))
        return

    click.secho("🔢 API versions:", fg="cyan", bold=True)
    for version in registry.api_versions:
        notes = []
        if version in registry.api_aliases:
            notes.append(f"written as {registry.api_aliases[version]}")
        if version == registry.default_api_version:
            notes.append("default")
        suffix = f"  ({', '.join(notes)})" if notes else ""
        click.echo(f"   {version}{suffix}")
    click.echo()


@catalog.command("modules")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
def modules(as_json: bool) -> None:
    """List importable N/ modules."""
    from suitegen.core.data import get_registry
    from suitegen.core.services.normalize import normalize_module

    registry = get_registry()
    rows = [{"key": key, "display": normalize_module(key)} for key in registry.modules]

    if as_json:
        click.echo(json.dumps(rows, indent=2))
        return

    click.secho(f"📦 Modules ({len(rows)}):", fg="cyan", bold=True)
    for row in rows:
        display = f"  → N/{row['display']}" if row["display"] != row["key"] else ""
        click.echo(f"   {row['key']}{display}")
    click.echo()
