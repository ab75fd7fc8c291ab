"""
Tests for use cases — platform precedence, name resolution, manifest checks.
"""

import logging
import textwrap
from pathlib import Path
from unittest.mock import patch

import pytest

from pkgdeps.core.config.loader import ConfigError
from pkgdeps.core.models.distro import DistroIdentity
from pkgdeps.core.use_cases.check import check_manifest
from pkgdeps.core.use_cases.platform import get_platform, load_session
from pkgdeps.core.use_cases.resolve import list_packages, resolve_names


@pytest.fixture
def pinned_manifest(tmp_path: Path) -> Path:
    path = tmp_path / "packages.yml"
    path.write_text(textwrap.dedent("""\
        platform:
          id: ubuntu
          version: "24.04"
        targets:
          app:
            runtime: [boost-program-options]
    """))
    return path


class TestLoadSession:
    def test_manifest_platform(self, pinned_manifest: Path):
        session = load_session(pinned_manifest)
        assert session.identity.label() == "ubuntu 24.04"
        assert session.config_path == pinned_manifest

    def test_env_beats_manifest(self, pinned_manifest: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("PKGDEPS_DISTRO_ID", "debian")
        monkeypatch.setenv("PKGDEPS_DISTRO_VERSION", "13")
        session = load_session(pinned_manifest)
        assert session.identity.label() == "debian 13"

    def test_cli_beats_env(self, pinned_manifest: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("PKGDEPS_DISTRO_ID", "debian")
        session = load_session(pinned_manifest, DistroIdentity.create("rhel", "10.1"))
        assert session.identity.id == "rhel"

    @patch("pkgdeps.core.use_cases.platform.detect_distro")
    def test_probes_without_override(self, mock_detect, manifest_yml: Path):
        mock_detect.return_value = DistroIdentity.create("arch", source="os-release")
        session = load_session(manifest_yml)
        mock_detect.assert_called_once_with(None)
        assert session.identity.source == "os-release"

    def test_no_manifest_uses_builtins(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        isolated = tmp_path / "isolated"
        isolated.mkdir()
        monkeypatch.chdir(isolated)
        session = load_session(override=DistroIdentity.create("debian", "13"))
        assert session.manifest is None
        assert "ziptool" in session.registry.abstract_names()

    def test_malformed_mapping_is_config_error(self, tmp_path: Path):
        path = tmp_path / "packages.yml"
        path.write_text('mappings:\n  libzip: ["ubuntu 24.04", libzip4t64, rhel]\n')
        with pytest.raises(ConfigError, match="Malformed package mapping for 'libzip'"):
            load_session(path, DistroIdentity.create("ubuntu", "24.04"))

    def test_redefinition_warned_once(self, tmp_path: Path, caplog: pytest.LogCaptureFixture):
        path = tmp_path / "packages.yml"
        path.write_text('mappings:\n  llvm-19:\n    "rhel 10": llvm-toolset-19\n')
        with caplog.at_level(logging.WARNING):
            session = load_session(path, DistroIdentity.create("rhel", "10.1"))
        redefined = [r for r in caplog.records if "redefined" in r.getMessage()]
        assert len(redefined) == 1
        assert session.registry.snapshot().get("rhel-10", "llvm-19") == "llvm-toolset-19"

    def test_require_manifest(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        isolated = tmp_path / "isolated"
        isolated.mkdir()
        monkeypatch.chdir(isolated)
        with pytest.raises(ConfigError, match="No packages.yml"):
            load_session(require_manifest=True)


class TestGetPlatform:
    def test_reports_tiers(self, pinned_manifest: Path):
        result = get_platform(pinned_manifest)
        assert result.error is None
        assert result.tiers == ["ubuntu-24.04", "ubuntu-24", "ubuntu", "generic"]
        assert result.mapping_count > 0

    def test_bad_config(self, tmp_path: Path):
        result = get_platform(tmp_path / "missing.yml")
        assert result.error is not None
        assert result.to_dict() == {"error": result.error}


class TestResolveNames:
    def test_stops_at_first_failure(self, pinned_manifest: Path):
        result = resolve_names(["llvm-19", "nonexistent"], pinned_manifest)
        assert result.entries == []
        assert "nonexistent" in result.error

    def test_entries_carry_tier(self, pinned_manifest: Path, rhel_101: DistroIdentity):
        result = resolve_names(["boost-program-options"], pinned_manifest, rhel_101)
        assert result.entries == [
            {"name": "boost-program-options", "package": "boost-program-options", "tier": "rhel-10"},
        ]


class TestListPackages:
    def test_primary_query(self, manifest_yml: Path, ubuntu_2404: DistroIdentity):
        result = list_packages(["app"], manifest_yml, ubuntu_2404)
        assert result.error is None
        assert result.report.packages[0] == "libboost-program-options1.83.0"

    def test_unknown_root(self, manifest_yml: Path, ubuntu_2404: DistroIdentity):
        result = list_packages(["app", "ghost"], manifest_yml, ubuntu_2404)
        assert result.report is None
        assert "ghost" in result.error


class TestCheckManifest:
    def test_valid(self, manifest_yml: Path, ubuntu_2404: DistroIdentity):
        result = check_manifest(manifest_yml, ubuntu_2404)
        assert result.valid
        assert result.target_count == 4
        assert result.errors == []

    def test_unmapped_on_rhel(self, manifest_yml: Path, rhel_101: DistroIdentity):
        result = check_manifest(manifest_yml, rhel_101)
        assert not result.valid
        assert result.errors == [
            "No package mapping for 'ziptool' on 'rhel 10.1'",
            "No package mapping for 'zipcmp' on 'rhel 10.1'",
        ]

    def test_flag_like_link_is_warning(self, manifest_yml: Path, ubuntu_2404: DistroIdentity):
        result = check_manifest(manifest_yml, ubuntu_2404)
        assert any("'-lpthread'" in w for w in result.warnings)

    def test_no_targets(self, tmp_path: Path, ubuntu_2404: DistroIdentity):
        path = tmp_path / "packages.yml"
        path.write_text("version: 1\n")
        result = check_manifest(path, ubuntu_2404)
        assert result.valid
        assert result.warnings == ["No targets defined. Nothing to resolve."]

    def test_invalid_manifest(self, tmp_path: Path, ubuntu_2404: DistroIdentity):
        path = tmp_path / "packages.yml"
        path.write_text("targets: [a, b]\n")
        result = check_manifest(path, ubuntu_2404)
        assert not result.valid
        assert "Invalid manifest" in result.errors[0]
