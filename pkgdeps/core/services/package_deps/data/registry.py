"""
L0 Data — Mapping registry.

Table of ``(tier, abstract_name) -> concrete_name`` entries. Filled
during a single setup phase, then frozen into a ``MappingTable``
snapshot that the resolver reads.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import NamedTuple

from pkgdeps.core.errors import MalformedMapping

logger = logging.getLogger(__name__)

_WHITESPACE_RE = re.compile(r"\s+")


class MappingKey(NamedTuple):
    tier: str
    name: str


def normalize_tier(tier_spec: str) -> str:
    """``"Ubuntu 24.04"`` -> ``"ubuntu-24.04"``, ``"ubuntu "`` -> ``"ubuntu"``."""
    return _WHITESPACE_RE.sub("-", tier_spec.strip().lower())


class MappingTable:
    """Read-only snapshot of a registry."""

    def __init__(self, entries: Mapping[MappingKey, str]) -> None:
        self._entries = MappingProxyType(dict(entries))

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def get(self, tier: str, name: str) -> str | None:
        return self._entries.get(MappingKey(tier, name))

    def items(self):
        return self._entries.items()


class MappingRegistry:
    """Append-only registry of abstract name -> concrete package mappings.

    Usage::

        registry = MappingRegistry()
        registry.register(
            "boost-program-options",
            "ubuntu 24.04", "libboost-program-options1.83.0",
            "rhel 10", "boost-program-options",
        )
        table = registry.snapshot()
    """

    def __init__(self) -> None:
        self._entries: dict[MappingKey, str] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def register(self, abstract_name: str, *tier_and_package: str) -> None:
        """Register ``tier_spec, concrete_name`` pairs for one abstract name.

        Raises:
            MalformedMapping: Odd argument count, or an empty name / tier /
                package. Nothing is registered when this is raised.
        """
        if not abstract_name or not abstract_name.strip():
            raise MalformedMapping(str(abstract_name), "abstract name is empty")
        if len(tier_and_package) % 2 != 0:
            raise MalformedMapping(
                abstract_name,
                "arguments must be pairs of 'distro_ident' 'package_name' "
                f"(got {len(tier_and_package)} values)",
            )

        pairs: list[tuple[MappingKey, str]] = []
        for i in range(0, len(tier_and_package), 2):
            tier_spec, package = tier_and_package[i], tier_and_package[i + 1]
            tier = normalize_tier(str(tier_spec))
            if not tier:
                raise MalformedMapping(abstract_name, f"empty distro ident at position {i}")
            if not package or not str(package).strip():
                raise MalformedMapping(abstract_name, f"empty package name for '{tier_spec}'")
            pairs.append((MappingKey(tier, abstract_name), str(package).strip()))

        for key, package in pairs:
            previous = self._entries.get(key)
            if previous is not None and previous != package:
                logger.warning(
                    "Mapping for '%s' on '%s' redefined: '%s' -> '%s'",
                    key.name, key.tier, previous, package,
                )
            self._entries[key] = package

    def register_many(self, mappings: Mapping[str, Iterable[str] | Mapping[str, str]]) -> None:
        """Register several abstract names at once.

        Each value is either a flat ``[tier, package, tier, package]``
        sequence or a ``{tier: package}`` mapping.
        """
        for abstract_name, spec in mappings.items():
            if isinstance(spec, Mapping):
                flat: list[str] = []
                for tier_spec, package in spec.items():
                    flat.extend((tier_spec, package))
                self.register(abstract_name, *flat)
            else:
                self.register(abstract_name, *spec)

    def abstract_names(self) -> list[str]:
        return sorted({key.name for key in self._entries})

    def tiers_for(self, abstract_name: str) -> dict[str, str]:
        """All registered tiers for one abstract name."""
        return {
            key.tier: package
            for key, package in sorted(self._entries.items())
            if key.name == abstract_name
        }

    def snapshot(self) -> MappingTable:
        """Freeze the current entries. Later registrations don't leak in."""
        logger.debug("Mapping snapshot taken with %d entries", len(self._entries))
        return MappingTable(self._entries)
