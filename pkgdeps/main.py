"""
pkgdeps — CLI entrypoint.

Usage:
    python -m pkgdeps.main --help
    python -m pkgdeps.main platform
    python -m pkgdeps.main list app
"""

from __future__ import annotations

import os
from pathlib import Path

import click

from pkgdeps import __version__
from pkgdeps.core.observability.logging_config import setup_logging


@click.group()
@click.version_option(version=__version__, prog_name="pkgdeps")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to packages.yml (default: auto-detect).",
)
@click.option("--distro", "distro_id", default=None, help="Override the detected distro id.")
@click.option(
    "--distro-version",
    default=None,
    help="Override the detected distro version (used with --distro).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
    distro_id: str | None,
    distro_version: str | None,
) -> None:
    """pkgdeps — resolve abstract build dependencies to distro packages."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["debug"] = debug
    ctx.obj["config_path"] = Path(config_path) if config_path else None

    override = None
    if distro_id:
        from pkgdeps.core.models.distro import DistroIdentity

        override = DistroIdentity.create(distro_id, distro_version or "", source="override")
    elif distro_version:
        raise click.UsageError("--distro-version requires --distro.")
    ctx.obj["override"] = override

    # ── Logging setup (once, at process start) ──────────────────
    if debug:
        level = "DEBUG"
    elif verbose:
        level = "INFO"
    elif quiet:
        level = "ERROR"
    else:
        level = os.environ.get("PKGDEPS_LOG_LEVEL", "WARNING")

    setup_logging(
        level=level,
        log_file=os.environ.get("PKGDEPS_LOG_FILE"),
        log_file_level=os.environ.get("PKGDEPS_LOG_FILE_LEVEL"),
    )


# ── Register sub-commands from pkgdeps/ui/cli/ ──────────────────────

from pkgdeps.ui.cli.deps import check, list_cmd, platform, resolve  # noqa: E402

cli.add_command(platform)
cli.add_command(resolve)
cli.add_command(list_cmd)
cli.add_command(check)


if __name__ == "__main__":
    cli()
