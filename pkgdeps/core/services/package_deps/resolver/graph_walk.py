"""
L2 Resolver — Build graph walk.

Collects abstract dependencies reachable from root targets with a
breadth-first walk over link edges.
"""

from __future__ import annotations

import logging
import re
from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass, field

from pkgdeps.core.errors import UnknownTargetReference
from pkgdeps.core.models.graph import GraphSource

logger = logging.getLogger(__name__)

# Plain target names. Generator expressions ("$<...>") and paths never match.
_TARGET_NAME_RE = re.compile(r"[A-Za-z0-9_:-]+")


def is_target_name(value: str) -> bool:
    return _TARGET_NAME_RE.fullmatch(value) is not None


@dataclass
class WalkResult:
    """Abstract names accumulated during one walk, in visit order."""

    runtime_names: list[str] = field(default_factory=list)
    tool_names: list[str] = field(default_factory=list)
    visited: set[str] = field(default_factory=set)


class GraphWalker:
    """Breadth-first dependency collector over a ``GraphSource``."""

    def __init__(self, graph: GraphSource) -> None:
        self.graph = graph

    def walk(self, roots: Iterable[str], visited: set[str] | None = None) -> WalkResult:
        """Walk from *roots*, expanding each target at most once.

        Args:
            roots: Target names to start from.
            visited: Optional shared visited set. Mutated in place so
                several walks can skip each other's targets.

        Raises:
            UnknownTargetReference: A root names no target. Checked
                for every root before anything is walked.
        """
        roots = list(roots)
        for root in roots:
            if not self.graph.node_exists(root):
                raise UnknownTargetReference(root, operation="get_package_dependencies")

        result = WalkResult(visited=visited if visited is not None else set())
        worklist: deque[str] = deque(roots)

        while worklist:
            current = worklist.popleft()
            if current in result.visited:
                continue
            result.visited.add(current)

            node = self.graph.get_node(current)
            result.runtime_names.extend(node.runtime_deps)
            result.tool_names.extend(node.tool_deps)

            for link in node.followed_links():
                if not is_target_name(link) or not self.graph.node_exists(link):
                    logger.debug("Skipping link '%s' of '%s' (not a target)", link, current)
                    continue
                worklist.append(link)

        logger.debug(
            "Walked %d targets: %d runtime, %d tool dependencies",
            len(result.visited), len(result.runtime_names), len(result.tool_names),
        )
        return result
