"""
Manifest check use case — validate packages.yml and report issues.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from pkgdeps.core.config.loader import ConfigError
from pkgdeps.core.models.distro import DistroIdentity
from pkgdeps.core.services.package_deps.resolver.graph_walk import is_target_name
from pkgdeps.core.services.package_deps.resolver.tier_lookup import Resolver
from pkgdeps.core.use_cases.platform import load_session


@dataclass
class ManifestCheckResult:
    """Result of manifest validation."""

    valid: bool = False
    config_path: Path | None = None
    identity: DistroIdentity | None = None
    target_count: int = 0
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "valid": self.valid,
            "config_path": str(self.config_path) if self.config_path else None,
            "platform": (
                {"id": self.identity.id, "version": self.identity.version}
                if self.identity else None
            ),
            "target_count": self.target_count,
            "errors": self.errors,
            "warnings": self.warnings,
        }


def check_manifest(
    config_path: Path | None = None,
    override: DistroIdentity | None = None,
) -> ManifestCheckResult:
    """Validate the manifest against the active platform.

    Unmapped names are errors: ``list`` would fail on them. Link values
    that look like target names but name no target are warnings, since
    they may be external libraries.
    """
    result = ManifestCheckResult()

    try:
        session = load_session(config_path, override, require_manifest=True)
    except ConfigError as e:
        result.errors.append(str(e))
        return result

    manifest = session.manifest
    assert manifest is not None
    result.config_path = session.config_path
    result.identity = session.identity
    result.target_count = len(manifest.targets)

    if not manifest.targets:
        result.warnings.append("No targets defined. Nothing to resolve.")

    resolver = Resolver(session.registry.snapshot(), session.identity)
    for name in manifest.abstract_names():
        if resolver.try_resolve(name) is None:
            result.errors.append(
                f"No package mapping for '{name}' on '{session.identity.label()}'"
            )

    for target, spec in manifest.targets.items():
        for link in [*spec.links, *spec.interface_links]:
            if is_target_name(link) and link not in manifest.targets:
                result.warnings.append(
                    f"Target '{target}' links '{link}', which is not a target (ignored)"
                )

    result.valid = len(result.errors) == 0
    return result
