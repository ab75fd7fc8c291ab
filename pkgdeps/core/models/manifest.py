"""
Manifest model — the contents of packages.yml.

Declares an optional platform override, extra package mappings, and the
build targets with their abstract dependencies and link edges.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from pkgdeps.core.models.distro import DistroIdentity
from pkgdeps.core.models.graph import BuildGraph, BuildGraphNode, NodeKind


class PlatformOverride(BaseModel):
    """Pin the distro instead of probing the host."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    id: str
    version: str = ""  # quote it in YAML: 24.10 would load as 24.1


class TargetSpec(BaseModel):
    """One build target as written in the manifest."""

    kind: NodeKind = NodeKind.ORDINARY
    runtime: list[str] = Field(default_factory=list)
    tools: list[str] = Field(default_factory=list)
    links: list[str] = Field(default_factory=list)
    interface_links: list[str] = Field(default_factory=list)


class Manifest(BaseModel):
    """Root of packages.yml."""

    version: int = 1
    platform: PlatformOverride | None = None
    builtin_mappings: bool = True

    # abstract name -> flat [tier, package, ...] list or {tier: package}
    mappings: dict[str, list[str] | dict[str, str]] = Field(default_factory=dict)
    targets: dict[str, TargetSpec] = Field(default_factory=dict)

    @field_validator("targets", mode="before")
    @classmethod
    def _empty_targets(cls, value: object) -> object:
        # "targets:" or "app:" with no body loads as None
        if value is None:
            return {}
        if isinstance(value, dict):
            return {name: spec if spec is not None else {} for name, spec in value.items()}
        return value

    def platform_override(self) -> DistroIdentity | None:
        if self.platform is None:
            return None
        return DistroIdentity.create(self.platform.id, self.platform.version, source="override")

    def build_graph(self) -> BuildGraph:
        return BuildGraph(
            BuildGraphNode(
                name=name,
                kind=spec.kind,
                runtime_deps=list(spec.runtime),
                tool_deps=list(spec.tools),
                direct_links=list(spec.links),
                interface_links=list(spec.interface_links),
            )
            for name, spec in self.targets.items()
        )

    def abstract_names(self) -> list[str]:
        """Every abstract name any target declares."""
        names: dict[str, None] = {}
        for spec in self.targets.values():
            for name in [*spec.runtime, *spec.tools]:
                names.setdefault(name, None)
        return list(names)
