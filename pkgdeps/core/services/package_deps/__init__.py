"""
Package dependency resolution — package re-exports.

Each symbol lives in its single-responsibility module inside the
appropriate layer (data → resolver → detection), with the service on
top::

    from pkgdeps.core.services.package_deps import PackageDependencyService
"""

# ── Errors ──
from pkgdeps.core.errors import (  # noqa: F401
    MalformedMapping,
    PackageDepsError,
    UnknownTargetReference,
    UnresolvedDependency,
)

# ── L0: Data ──
from pkgdeps.core.services.package_deps.data.known_mappings import (  # noqa: F401
    KNOWN_MAPPINGS,
    register_known_mappings,
)
from pkgdeps.core.services.package_deps.data.registry import (  # noqa: F401
    MappingRegistry,
    MappingTable,
    normalize_tier,
)

# ── L2: Resolver ──
from pkgdeps.core.services.package_deps.resolver.graph_walk import (  # noqa: F401
    GraphWalker,
    WalkResult,
)
from pkgdeps.core.services.package_deps.resolver.tier_lookup import (  # noqa: F401
    Resolver,
)

# ── L3: Detection ──
from pkgdeps.core.services.package_deps.detection.distro import (  # noqa: F401
    detect_distro,
    platform_override_from_env,
)

# ── Service ──
from pkgdeps.core.services.package_deps.service import (  # noqa: F401
    PackageDependencyReport,
    PackageDependencyService,
)
