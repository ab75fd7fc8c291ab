"""
L2 Resolver — ``__init__.py`` re-exports the lookup and the graph walk.

These turn L0 mapping data and a build graph into concrete package
names.
"""

from pkgdeps.core.services.package_deps.resolver.graph_walk import (  # noqa: F401
    GraphWalker,
    WalkResult,
    is_target_name,
)
from pkgdeps.core.services.package_deps.resolver.tier_lookup import (  # noqa: F401
    Resolver,
)
