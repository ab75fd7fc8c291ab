"""
Domain models — Pydantic types for package dependency resolution.

All models are re-exported here for convenient access:

    from pkgdeps.core.models import BuildGraph, DistroIdentity, Manifest
"""

from pkgdeps.core.models.distro import GENERIC_ID, DistroIdentity
from pkgdeps.core.models.graph import (
    BuildGraph,
    BuildGraphNode,
    DependencyKind,
    GraphSource,
    NodeKind,
)
from pkgdeps.core.models.manifest import Manifest, PlatformOverride, TargetSpec

__all__ = [
    # graph.py
    "BuildGraph",
    "BuildGraphNode",
    "DependencyKind",
    # distro.py
    "DistroIdentity",
    "GENERIC_ID",
    "GraphSource",
    # manifest.py
    "Manifest",
    "NodeKind",
    "PlatformOverride",
    "TargetSpec",
]
