"""
L0 Data — Database of known package mappings.

Keys are abstract dependency names. Values are flat
``distro_ident, package_name`` sequences, exactly as passed to
``MappingRegistry.register``. A distro ident can be ``"ubuntu"``
(all versions), ``"ubuntu 24.04"`` (specific), ``"rhel 10"`` (any
10.x via major-version fallback) or ``"generic"``.
"""

from __future__ import annotations

from pkgdeps.core.services.package_deps.data.registry import MappingRegistry

KNOWN_MAPPINGS: dict[str, tuple[str, ...]] = {
    # ── Libraries ───────────────────────────────────────────────
    "boost-program-options": (
        "ubuntu 24.04", "libboost-program-options1.83.0",
        "debian 13",    "libboost-program-options1.83.0",
        "rhel 10",      "boost-program-options",
    ),

    # ── LLVM 19 toolchain ───────────────────────────────────────
    "llvm-19": (
        "ubuntu 22.04", "llvm-19",
        "ubuntu 24.04", "llvm-19",
        "ubuntu 25.04", "llvm-19",
        "debian 13",    "llvm-19",
        "rhel 10",      "llvm19",
    ),
    "clang-19": (
        "ubuntu 22.04", "clang-19",
        "ubuntu 24.04", "clang-19",
        "ubuntu 25.04", "clang-19",
        "debian 13",    "clang-19",
        "rhel 10",      "clang19",
    ),
    "lld-19": (
        "ubuntu 22.04", "lld-19",
        "ubuntu 24.04", "lld-19",
        "ubuntu 25.04", "lld-19",
        "debian 13",    "lld-19",
        "rhel 10",      "lld19",
    ),

    # ── libzip command line tools ───────────────────────────────
    "ziptool": (
        "ubuntu 24.04", "ziptool",
        "debian 13",    "ziptool",
    ),
    "zipcmp": (
        "ubuntu 24.04", "zipcmp",
        "debian 13",    "zipcmp",
    ),
    "zipmerge": (
        "ubuntu 24.04", "zipmerge",
        "debian 13",    "zipmerge",
    ),
}


def register_known_mappings(registry: MappingRegistry) -> MappingRegistry:
    """Seed *registry* with every entry of ``KNOWN_MAPPINGS``."""
    for abstract_name, pairs in KNOWN_MAPPINGS.items():
        registry.register(abstract_name, *pairs)
    return registry
