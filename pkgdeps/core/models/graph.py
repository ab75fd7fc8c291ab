"""
Build graph model — targets, their abstract dependencies and link edges.

The graph is owned by whoever describes the build (a manifest, a
generator, a test). The resolution core only reads it through
``node_exists`` / ``get_node``.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from enum import Enum
from typing import Protocol

from pydantic import BaseModel, Field

from pkgdeps.core.errors import UnknownTargetReference


class DependencyKind(str, Enum):
    """Classification of an abstract dependency. Does not affect lookup."""

    RUNTIME = "runtime"
    TOOL = "tool"


class NodeKind(str, Enum):
    """Whether a target has a link footprint of its own."""

    ORDINARY = "ordinary"
    INTERFACE = "interface"  # header-only / umbrella target


class BuildGraphNode(BaseModel):
    """A single build target and what it declares."""

    name: str
    kind: NodeKind = NodeKind.ORDINARY
    runtime_deps: list[str] = Field(default_factory=list)
    tool_deps: list[str] = Field(default_factory=list)
    direct_links: list[str] = Field(default_factory=list)
    interface_links: list[str] = Field(default_factory=list)

    @property
    def is_interface_only(self) -> bool:
        return self.kind is NodeKind.INTERFACE

    def deps_of_kind(self, kind: DependencyKind) -> list[str]:
        if kind is DependencyKind.RUNTIME:
            return self.runtime_deps
        return self.tool_deps

    def followed_links(self) -> list[str]:
        """Edges the walker considers: interface links always, direct links
        only when the node has a link footprint."""
        if self.is_interface_only:
            return list(self.interface_links)
        return [*self.direct_links, *self.interface_links]


class GraphSource(Protocol):
    """Read access the walker needs from any graph representation."""

    def node_exists(self, name: str) -> bool: ...

    def get_node(self, name: str) -> BuildGraphNode: ...


class BuildGraph:
    """In-memory build graph keyed by target name."""

    def __init__(self, nodes: Iterable[BuildGraphNode] = ()) -> None:
        self._nodes: dict[str, BuildGraphNode] = {}
        for node in nodes:
            self.add_node(node)

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[BuildGraphNode]:
        return iter(self._nodes.values())

    def __contains__(self, name: object) -> bool:
        return name in self._nodes

    def names(self) -> list[str]:
        return list(self._nodes)

    def node_exists(self, name: str) -> bool:
        return name in self._nodes

    def get_node(self, name: str) -> BuildGraphNode:
        node = self._nodes.get(name)
        if node is None:
            raise UnknownTargetReference(name, operation="get_node")
        return node

    def add_node(self, node: BuildGraphNode) -> BuildGraphNode:
        """Add (or replace) a target."""
        self._nodes[node.name] = node
        return node

    def add_target(self, name: str, kind: NodeKind = NodeKind.ORDINARY) -> BuildGraphNode:
        return self.add_node(BuildGraphNode(name=name, kind=kind))

    # ── Annotation API ──────────────────────────────────────────

    def add_runtime_dependency(self, target: str, *abstract_names: str) -> None:
        """Append abstract runtime dependencies to an existing target."""
        if not self.node_exists(target):
            raise UnknownTargetReference(target, operation="add_runtime_dependency")
        self._nodes[target].runtime_deps.extend(abstract_names)

    def add_tool_dependency(self, target: str, *abstract_names: str) -> None:
        """Append abstract tool dependencies to an existing target."""
        if not self.node_exists(target):
            raise UnknownTargetReference(target, operation="add_tool_dependency")
        self._nodes[target].tool_deps.extend(abstract_names)

    def add_dependency(self, target: str, kind: DependencyKind, *abstract_names: str) -> None:
        if kind is DependencyKind.RUNTIME:
            self.add_runtime_dependency(target, *abstract_names)
        else:
            self.add_tool_dependency(target, *abstract_names)

    def add_link(self, target: str, *links: str, interface: bool = False) -> None:
        """Record link edges. Values are kept verbatim, even ones that
        name no target; the walker decides what to follow."""
        if not self.node_exists(target):
            raise UnknownTargetReference(target, operation="add_link")
        node = self._nodes[target]
        if interface:
            node.interface_links.extend(links)
        else:
            node.direct_links.extend(links)
