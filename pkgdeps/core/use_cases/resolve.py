"""
Resolve use cases — abstract names and whole target graphs.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from pkgdeps.core.config.loader import ConfigError
from pkgdeps.core.errors import PackageDepsError
from pkgdeps.core.models.distro import DistroIdentity
from pkgdeps.core.services.package_deps.resolver.tier_lookup import Resolver
from pkgdeps.core.services.package_deps.service import (
    PackageDependencyReport,
    PackageDependencyService,
)
from pkgdeps.core.use_cases.platform import load_session


@dataclass
class ResolveNamesResult:
    """Concrete packages for explicitly named abstract dependencies."""

    identity: DistroIdentity | None = None
    entries: list[dict] = field(default_factory=list)
    error: str | None = None

    def to_dict(self) -> dict:
        if self.error:
            return {"error": self.error}
        assert self.identity is not None
        return {
            "platform": {"id": self.identity.id, "version": self.identity.version},
            "resolved": self.entries,
        }


def resolve_names(
    names: list[str],
    config_path: Path | None = None,
    override: DistroIdentity | None = None,
) -> ResolveNamesResult:
    """Resolve each abstract name, stopping at the first failure."""
    result = ResolveNamesResult()
    try:
        session = load_session(config_path, override)
        result.identity = session.identity
        resolver = Resolver(session.registry.snapshot(), session.identity)
        for name in names:
            package, tier = resolver.resolve_with_tier(name)
            result.entries.append({"name": name, "package": package, "tier": tier})
    except (ConfigError, PackageDepsError) as e:
        result.entries = []
        result.error = str(e)
    return result


@dataclass
class PackageListResult:
    """Result of the primary query."""

    report: PackageDependencyReport | None = None
    error: str | None = None

    def to_dict(self) -> dict:
        if self.error:
            return {"error": self.error}
        assert self.report is not None
        return self.report.to_dict()


def list_packages(
    roots: list[str],
    config_path: Path | None = None,
    override: DistroIdentity | None = None,
) -> PackageListResult:
    """Concrete packages needed by *roots* in the manifest's target graph."""
    result = PackageListResult()
    try:
        session = load_session(config_path, override, require_manifest=True)
        assert session.manifest is not None
        service = PackageDependencyService(
            session.manifest.build_graph(),
            Resolver(session.registry.snapshot(), session.identity),
        )
        result.report = service.collect(roots)
    except (ConfigError, PackageDepsError) as e:
        result.error = str(e)
    return result
