"""
L0 Data — ``__init__.py`` re-exports the mapping registry and database.

Pure data and the containers that hold it. No probing, no graph access.
"""

from pkgdeps.core.services.package_deps.data.known_mappings import (  # noqa: F401
    KNOWN_MAPPINGS,
    register_known_mappings,
)
from pkgdeps.core.services.package_deps.data.registry import (  # noqa: F401
    MappingKey,
    MappingRegistry,
    MappingTable,
    normalize_tier,
)
