"""
Resolution errors.

Every failure in the resolution core is fatal for the current run.
There is no retry policy: a missing or malformed static mapping cannot
change between attempts within one process.
"""

from __future__ import annotations


class PackageDepsError(Exception):
    """Base class for all package dependency resolution errors."""


class MalformedMapping(PackageDepsError):
    """A mapping registration call was given unusable arguments.

    Raised at registration time, never deferred to resolution.
    """

    def __init__(self, abstract_name: str, reason: str) -> None:
        self.abstract_name = abstract_name
        self.reason = reason
        super().__init__(
            f"Malformed package mapping for '{abstract_name}': {reason}"
        )


class UnknownTargetReference(PackageDepsError):
    """A caller referenced a build target that is not in the graph."""

    def __init__(self, target: str, operation: str = "scan") -> None:
        self.target = target
        self.operation = operation
        super().__init__(f"{operation} called on non-target: {target}")


class UnresolvedDependency(PackageDepsError):
    """No fallback tier has a mapping for an abstract name."""

    def __init__(self, abstract_name: str, distro_id: str, version: str) -> None:
        self.abstract_name = abstract_name
        self.distro_id = distro_id
        self.version = version
        super().__init__(
            f"No package mapping found for dependency '{abstract_name}' "
            f"on '{distro_id} {version}'"
        )
