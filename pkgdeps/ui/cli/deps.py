"""
CLI commands for package dependency resolution.

Thin wrappers over ``pkgdeps.core.use_cases``.
"""

from __future__ import annotations

import json
import sys

import click


def _emit_error(error: str) -> None:
    click.secho(f"❌ {error}", fg="red")
    sys.exit(1)


# ── Platform ────────────────────────────────────────────────────


@click.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def platform(ctx: click.Context, as_json: bool) -> None:
    """Show the active distro identity and its lookup tiers."""
    from pkgdeps.core.use_cases.platform import get_platform

    result = get_platform(
        config_path=ctx.obj.get("config_path"),
        override=ctx.obj.get("override"),
    )

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        if result.error:
            sys.exit(1)
        return

    if result.error:
        _emit_error(result.error)

    identity = result.identity
    assert identity is not None
    click.secho(f"\n🐧 {identity.label()}", fg="cyan", bold=True)
    click.echo(f"   Source:   {identity.source}")
    click.echo(f"   Mappings: {result.mapping_count}")
    click.echo("   Tiers:")
    for i, tier in enumerate(result.tiers, 1):
        click.echo(f"     {i}. {tier}")
    click.echo()


# ── Resolve ─────────────────────────────────────────────────────


@click.command()
@click.argument("names", nargs=-1, required=True)
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def resolve(ctx: click.Context, names: tuple[str, ...], as_json: bool) -> None:
    """Resolve abstract dependency names to concrete packages."""
    from pkgdeps.core.use_cases.resolve import resolve_names

    result = resolve_names(
        list(names),
        config_path=ctx.obj.get("config_path"),
        override=ctx.obj.get("override"),
    )

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        if result.error:
            sys.exit(1)
        return

    if result.error:
        _emit_error(result.error)

    for entry in result.entries:
        click.echo(f"   {entry['name']:<30} → {entry['package']:<35} [{entry['tier']}]")


# ── List (primary query) ────────────────────────────────────────


@click.command("list")
@click.argument("roots", nargs=-1, required=True)
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.option("--plain", is_flag=True, help="One package per line, nothing else.")
@click.pass_context
def list_cmd(ctx: click.Context, roots: tuple[str, ...], as_json: bool, plain: bool) -> None:
    """List concrete packages needed by ROOTS and everything they link."""
    from pkgdeps.core.models.graph import DependencyKind
    from pkgdeps.core.use_cases.resolve import list_packages

    result = list_packages(
        list(roots),
        config_path=ctx.obj.get("config_path"),
        override=ctx.obj.get("override"),
    )

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        if result.error:
            sys.exit(1)
        return

    if result.error:
        _emit_error(result.error)

    report = result.report
    assert report is not None

    if plain:
        for pkg in report.packages:
            click.echo(pkg)
        return

    quiet = ctx.obj.get("quiet", False)
    if not quiet:
        click.secho(
            f"\n📦 Packages for {', '.join(report.roots)} on {report.identity.label()}",
            fg="cyan", bold=True,
        )
        click.echo(f"   Targets visited: {report.visited_count}")

    for kind, title in ((DependencyKind.RUNTIME, "Runtime"), (DependencyKind.TOOL, "Tools")):
        pkgs = report.packages_of_kind(kind)
        if not pkgs:
            continue
        click.secho(f"   {title}:", fg="white", bold=True)
        for pkg in pkgs:
            click.echo(f"     • {pkg}")

    if not report.packages:
        click.secho("   ✅ No package dependencies", fg="green")
    click.echo()


# ── Check ───────────────────────────────────────────────────────


@click.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def check(ctx: click.Context, as_json: bool) -> None:
    """Validate packages.yml against the active platform."""
    from pkgdeps.core.use_cases.check import check_manifest

    result = check_manifest(
        config_path=ctx.obj.get("config_path"),
        override=ctx.obj.get("override"),
    )

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(0 if result.valid else 1)

    if result.valid:
        click.secho("✅ Manifest is valid", fg="green", bold=True)
        click.echo(f"   Targets:  {result.target_count}")
        if result.identity is not None:
            click.echo(f"   Platform: {result.identity.label()}")
    else:
        click.secho("❌ Manifest errors:", fg="red", bold=True)
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
