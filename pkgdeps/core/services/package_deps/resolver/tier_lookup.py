"""
L2 Resolver — Tiered mapping lookup.

Resolves an abstract dependency name to a concrete package name for
the active distro identity. Tiers are tried in order, first hit wins:

  1. Exact        — ``{id}-{version}``   (e.g. ubuntu-24.04)
  2. Major        — ``{id}-{major}``     (e.g. rhel-10 for version 10.1)
  3. Distro       — ``{id}``             (e.g. ubuntu, any version)
  4. Generic      — ``generic``

No I/O. Pure lookups against a frozen ``MappingTable``.
"""

from __future__ import annotations

import logging

from pkgdeps.core.errors import UnresolvedDependency
from pkgdeps.core.models.distro import DistroIdentity
from pkgdeps.core.services.package_deps.data.registry import MappingRegistry, MappingTable

logger = logging.getLogger(__name__)


class Resolver:
    """Abstract name -> concrete package name for one distro identity."""

    def __init__(self, table: MappingTable | MappingRegistry, identity: DistroIdentity) -> None:
        if isinstance(table, MappingRegistry):
            table = table.snapshot()
        self.table = table
        self.identity = identity
        self._tiers = identity.tier_keys()

    @property
    def tiers(self) -> list[str]:
        return list(self._tiers)

    def resolve_with_tier(self, abstract_name: str) -> tuple[str, str]:
        """Resolve and report which tier matched.

        Returns:
            ``(concrete_name, tier_key)``.

        Raises:
            UnresolvedDependency: No tier has an entry.
        """
        for tier in self._tiers:
            concrete = self.table.get(tier, abstract_name)
            if concrete is not None:
                logger.debug("Resolved '%s' -> '%s' via tier '%s'", abstract_name, concrete, tier)
                return concrete, tier

        raise UnresolvedDependency(abstract_name, self.identity.id, self.identity.version)

    def resolve(self, abstract_name: str) -> str:
        return self.resolve_with_tier(abstract_name)[0]

    def try_resolve(self, abstract_name: str) -> str | None:
        """Non-raising probe for diagnostics."""
        try:
            return self.resolve(abstract_name)
        except UnresolvedDependency:
            return None
