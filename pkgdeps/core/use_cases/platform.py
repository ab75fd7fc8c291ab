"""
Platform use case — settle the active distro identity and mapping table.

Shared by every other use case. The identity comes from, in order:

    CLI override  >  PKGDEPS_DISTRO_* env vars  >  manifest ``platform:``  >  probing
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from pkgdeps.core.config.loader import ConfigError, find_manifest_file, load_manifest
from pkgdeps.core.errors import MalformedMapping
from pkgdeps.core.models.distro import DistroIdentity
from pkgdeps.core.models.manifest import Manifest
from pkgdeps.core.services.package_deps.data.known_mappings import register_known_mappings
from pkgdeps.core.services.package_deps.data.registry import MappingRegistry
from pkgdeps.core.services.package_deps.detection.distro import (
    detect_distro,
    platform_override_from_env,
)

logger = logging.getLogger(__name__)


def build_registry(manifest: Manifest | None = None) -> MappingRegistry:
    """Known mappings first (if enabled), then the manifest's own, so
    manifest entries override the built-in ones.

    Raises:
        MalformedMapping: A manifest entry is unusable.
    """
    registry = MappingRegistry()
    if manifest is None or manifest.builtin_mappings:
        register_known_mappings(registry)
    if manifest is not None:
        registry.register_many(manifest.mappings)
    return registry


@dataclass
class Session:
    """Everything resolved once per process: manifest, identity, mappings."""

    identity: DistroIdentity
    registry: MappingRegistry
    manifest: Manifest | None = None
    config_path: Path | None = None


def select_override(
    cli_override: DistroIdentity | None,
    manifest: Manifest | None,
) -> DistroIdentity | None:
    """Pick the highest-priority override, or None to probe."""
    if cli_override is not None:
        return cli_override
    env_override = platform_override_from_env()
    if env_override is not None:
        return env_override
    if manifest is not None:
        return manifest.platform_override()
    return None


def load_session(
    config_path: Path | None = None,
    override: DistroIdentity | None = None,
    *,
    require_manifest: bool = False,
) -> Session:
    """Load the manifest (if any), build the registry, detect the platform.

    Args:
        config_path: Explicit packages.yml. If None, searches upward and
            continues with built-in mappings only when nothing is found.
        override: Platform identity from the command line.
        require_manifest: Fail when no manifest can be found.

    Raises:
        ConfigError: Manifest missing (when required) or invalid, including
            malformed mappings.
    """
    if config_path is None:
        config_path = find_manifest_file()

    manifest: Manifest | None = None
    if config_path is not None:
        manifest = load_manifest(config_path)
    elif require_manifest:
        raise ConfigError("No packages.yml found. Specify one with --config.")

    if manifest is None:
        logger.debug("No manifest, using built-in mappings only")
    try:
        registry = build_registry(manifest)
    except MalformedMapping as e:
        raise ConfigError(f"Invalid manifest {config_path}: {e}") from e

    identity = detect_distro(select_override(override, manifest))
    return Session(
        identity=identity,
        registry=registry,
        manifest=manifest,
        config_path=config_path,
    )


@dataclass
class PlatformResult:
    """Active platform and the lookup tiers it implies."""

    identity: DistroIdentity | None = None
    tiers: list[str] = field(default_factory=list)
    mapping_count: int = 0
    error: str | None = None

    def to_dict(self) -> dict:
        if self.error:
            return {"error": self.error}
        assert self.identity is not None
        return {
            "id": self.identity.id,
            "version": self.identity.version,
            "source": self.identity.source,
            "tiers": self.tiers,
            "mapping_count": self.mapping_count,
        }


def get_platform(
    config_path: Path | None = None,
    override: DistroIdentity | None = None,
) -> PlatformResult:
    """Report the active distro identity."""
    result = PlatformResult()
    try:
        session = load_session(config_path, override)
    except ConfigError as e:
        result.error = str(e)
        return result

    result.identity = session.identity
    result.tiers = session.identity.tier_keys()
    result.mapping_count = len(session.registry)
    return result
