"""
Shared test fixtures and configuration.
"""

import textwrap
from pathlib import Path

import pytest

from pkgdeps.core.models.distro import DistroIdentity
from pkgdeps.core.services.package_deps.data.registry import MappingRegistry


@pytest.fixture(autouse=True)
def no_platform_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the host's PKGDEPS_* variables out of every test."""
    for name in (
        "PKGDEPS_DISTRO_ID",
        "PKGDEPS_DISTRO_VERSION",
        "PKGDEPS_LOG_FILE",
        "PKGDEPS_LOG_FILE_LEVEL",
        "PKGDEPS_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def ubuntu_2404() -> DistroIdentity:
    return DistroIdentity.create("ubuntu", "24.04")


@pytest.fixture
def rhel_101() -> DistroIdentity:
    return DistroIdentity.create("rhel", "10.1")


@pytest.fixture
def boost_registry() -> MappingRegistry:
    """The boost-program-options example mapping, nothing else."""
    registry = MappingRegistry()
    registry.register(
        "boost-program-options",
        "ubuntu 24.04", "libboost-program-options1.83.0",
        "rhel 10", "boost-program-options",
    )
    return registry


@pytest.fixture
def manifest_yml(tmp_path: Path) -> Path:
    """A packages.yml with a small target graph."""
    content = textwrap.dedent("""\
        version: 1
        builtin_mappings: true

        mappings:
          libzip:
            - "ubuntu 24.04"
            - libzip4t64
            - "rhel"
            - libzip
          python3:
            generic: python3

        targets:
          app:
            runtime: [boost-program-options]
            tools: [python3]
            links: [core, "$<BUILD_INTERFACE:warnings>", "-lpthread"]
          core:
            kind: interface
            runtime: [libzip]
            links: [never_followed]
            interface_links: [zip_tools]
          zip_tools:
            tools: [ziptool, zipcmp]
          never_followed:
            runtime: [llvm-19]
    """)
    path = tmp_path / "packages.yml"
    path.write_text(content)
    return path
