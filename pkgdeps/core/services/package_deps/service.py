"""
Package dependency service — the public entry point.

Walks the build graph from a set of roots, resolves every abstract
dependency found, and returns deduplicated concrete package names.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from pkgdeps.core.models.distro import DistroIdentity
from pkgdeps.core.models.graph import DependencyKind, GraphSource
from pkgdeps.core.services.package_deps.resolver.graph_walk import GraphWalker
from pkgdeps.core.services.package_deps.resolver.tier_lookup import Resolver

logger = logging.getLogger(__name__)


def _unique(values: Iterable[str]) -> list[str]:
    """Drop repeats, keep first appearance."""
    return list(dict.fromkeys(values))


@dataclass
class PackageDependencyReport:
    """Everything one ``collect`` call found."""

    roots: list[str]
    identity: DistroIdentity
    runtime_names: list[str] = field(default_factory=list)
    tool_names: list[str] = field(default_factory=list)
    resolved: dict[str, str] = field(default_factory=dict)
    packages: list[str] = field(default_factory=list)
    visited_count: int = 0

    def packages_of_kind(self, kind: DependencyKind) -> list[str]:
        names = self.runtime_names if kind is DependencyKind.RUNTIME else self.tool_names
        return _unique(self.resolved[name] for name in names)

    def to_dict(self) -> dict:
        return {
            "roots": self.roots,
            "platform": {"id": self.identity.id, "version": self.identity.version},
            "runtime": {name: self.resolved[name] for name in self.runtime_names},
            "tools": {name: self.resolved[name] for name in self.tool_names},
            "packages": self.packages,
            "targets_visited": self.visited_count,
        }


class PackageDependencyService:
    """Composes ``GraphWalker`` and ``Resolver``."""

    def __init__(self, graph: GraphSource, resolver: Resolver) -> None:
        self.walker = GraphWalker(graph)
        self.resolver = resolver

    def collect(self, roots: Iterable[str]) -> PackageDependencyReport:
        """Walk every root with one shared visited set and resolve.

        Runtime names are resolved before tool names. Any unresolved
        name aborts the whole call; nothing partial is returned.

        Raises:
            UnknownTargetReference: A root is not a target.
            UnresolvedDependency: A name has no mapping on this platform.
        """
        roots = list(roots)
        walk = self.walker.walk(roots, visited=set())

        report = PackageDependencyReport(
            roots=roots,
            identity=self.resolver.identity,
            runtime_names=_unique(walk.runtime_names),
            tool_names=_unique(walk.tool_names),
            visited_count=len(walk.visited),
        )

        for name in [*report.runtime_names, *report.tool_names]:
            if name not in report.resolved:
                report.resolved[name] = self.resolver.resolve(name)

        report.packages = _unique(
            report.resolved[name] for name in [*report.runtime_names, *report.tool_names]
        )
        logger.info(
            "Resolved %d abstract dependencies to %d packages for %s",
            len(report.resolved), len(report.packages), self.resolver.identity.label(),
        )
        return report

    def get_package_dependencies(self, roots: Iterable[str]) -> list[str]:
        """Concrete package names needed by *roots*, deduplicated."""
        return self.collect(roots).packages
