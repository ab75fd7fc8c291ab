"""
Tests for tiered resolution — precedence, major-version fallback, failures.
"""

import pytest

from pkgdeps.core.errors import UnresolvedDependency
from pkgdeps.core.models.distro import DistroIdentity
from pkgdeps.core.services.package_deps.data.registry import MappingRegistry
from pkgdeps.core.services.package_deps.resolver.tier_lookup import Resolver


@pytest.fixture
def all_tiers() -> MappingRegistry:
    registry = MappingRegistry()
    registry.register(
        "libfoo",
        "ubuntu 24.04", "libfoo-exact",
        "ubuntu 24", "libfoo-major",
        "ubuntu", "libfoo-distro",
        "generic", "libfoo-generic",
    )
    return registry


def _resolver(registry: MappingRegistry, distro_id: str, version: str) -> Resolver:
    return Resolver(registry.snapshot(), DistroIdentity.create(distro_id, version))


class TestTierPrecedence:
    def test_exact_match_wins(self, all_tiers: MappingRegistry):
        assert _resolver(all_tiers, "ubuntu", "24.04").resolve("libfoo") == "libfoo-exact"

    def test_major_beats_distro(self, all_tiers: MappingRegistry):
        assert _resolver(all_tiers, "ubuntu", "24.10").resolve("libfoo") == "libfoo-major"

    def test_distro_beats_generic(self, all_tiers: MappingRegistry):
        assert _resolver(all_tiers, "ubuntu", "22.04").resolve("libfoo") == "libfoo-distro"

    def test_generic_fallback(self, all_tiers: MappingRegistry):
        assert _resolver(all_tiers, "fedora", "40").resolve("libfoo") == "libfoo-generic"

    def test_resolve_with_tier_reports_tier(self, all_tiers: MappingRegistry):
        resolver = _resolver(all_tiers, "ubuntu", "24.10")
        assert resolver.resolve_with_tier("libfoo") == ("libfoo-major", "ubuntu-24")

    def test_generic_identity(self, all_tiers: MappingRegistry):
        resolver = Resolver(all_tiers.snapshot(), DistroIdentity())
        assert resolver.tiers == ["generic"]
        assert resolver.resolve("libfoo") == "libfoo-generic"


class TestMajorVersionFallback:
    @pytest.fixture
    def rhel_only(self) -> MappingRegistry:
        registry = MappingRegistry()
        registry.register("llvm-19", "rhel 10", "llvm19")
        return registry

    @pytest.mark.parametrize("version", ["10.1", "10.4", "10.0.2"])
    def test_minor_versions_match(self, rhel_only: MappingRegistry, version: str):
        assert _resolver(rhel_only, "rhel", version).resolve("llvm-19") == "llvm19"

    def test_bare_major_matches_as_exact(self, rhel_only: MappingRegistry):
        assert _resolver(rhel_only, "rhel", "10").resolve_with_tier("llvm-19") == ("llvm19", "rhel-10")

    def test_other_distro_does_not_match(self, rhel_only: MappingRegistry):
        with pytest.raises(UnresolvedDependency):
            _resolver(rhel_only, "centos", "10.1").resolve("llvm-19")

    def test_other_major_does_not_match(self, rhel_only: MappingRegistry):
        with pytest.raises(UnresolvedDependency):
            _resolver(rhel_only, "rhel", "9.4").resolve("llvm-19")

    def test_no_pattern_matching(self):
        registry = MappingRegistry()
        registry.register("llvm-19", "rhel 1", "llvm19")
        with pytest.raises(UnresolvedDependency):
            _resolver(registry, "rhel", "10.1").resolve("llvm-19")


class TestNormalization:
    def test_mixed_case_registration_resolves(self):
        registry = MappingRegistry()
        registry.register("boost-program-options", "Ubuntu 24.04", "libboost-program-options1.83.0")
        resolver = _resolver(registry, "ubuntu", "24.04")
        assert resolver.resolve("boost-program-options") == "libboost-program-options1.83.0"

    def test_identity_is_lowercased(self, boost_registry: MappingRegistry):
        resolver = _resolver(boost_registry, "Ubuntu", "24.04")
        assert resolver.resolve("boost-program-options") == "libboost-program-options1.83.0"


class TestUnresolved:
    def test_error_carries_name_and_platform(self, boost_registry: MappingRegistry):
        resolver = _resolver(boost_registry, "fedora", "40")
        with pytest.raises(UnresolvedDependency) as exc_info:
            resolver.resolve("boost-program-options")
        err = exc_info.value
        assert err.abstract_name == "boost-program-options"
        assert err.distro_id == "fedora"
        assert err.version == "40"
        assert "No package mapping found for dependency 'boost-program-options' on 'fedora 40'" in str(err)

    def test_unknown_name(self, boost_registry: MappingRegistry, ubuntu_2404: DistroIdentity):
        resolver = Resolver(boost_registry.snapshot(), ubuntu_2404)
        with pytest.raises(UnresolvedDependency):
            resolver.resolve("llvm-19")

    def test_try_resolve_returns_none(self, boost_registry: MappingRegistry, ubuntu_2404: DistroIdentity):
        resolver = Resolver(boost_registry.snapshot(), ubuntu_2404)
        assert resolver.try_resolve("llvm-19") is None
        assert resolver.try_resolve("boost-program-options") == "libboost-program-options1.83.0"


class TestResolverInput:
    def test_accepts_registry_and_snapshots_it(self, boost_registry: MappingRegistry, ubuntu_2404: DistroIdentity):
        resolver = Resolver(boost_registry, ubuntu_2404)
        boost_registry.register("git", "generic", "git")
        with pytest.raises(UnresolvedDependency):
            resolver.resolve("git")
