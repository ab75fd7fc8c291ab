"""
L3 Detection — Host distribution identity.

Read-only probes for the distro id and version. Priority:

    override  >  lsb_release  >  /etc/os-release  >  "generic"
"""

from __future__ import annotations

import logging
import os
import re
import shutil
import subprocess
from collections.abc import Mapping
from pathlib import Path

from pkgdeps.core.models.distro import DistroIdentity

logger = logging.getLogger(__name__)

OS_RELEASE_PATH = Path("/etc/os-release")

ENV_DISTRO_ID = "PKGDEPS_DISTRO_ID"
ENV_DISTRO_VERSION = "PKGDEPS_DISTRO_VERSION"

_ID_RE = re.compile(r'^ID="?([a-zA-Z0-9_.-]+)"?')
_VERSION_ID_RE = re.compile(r'^VERSION_ID="?([a-zA-Z0-9_.-]+)"?')


def _run_lsb_release(flag: str) -> str:
    r = subprocess.run(
        ["lsb_release", flag],
        capture_output=True, text=True, timeout=5,
    )
    if r.returncode != 0:
        return ""
    return r.stdout.strip()


def probe_lsb_release() -> tuple[str, str] | None:
    """Ask ``lsb_release`` for the distributor id and release.

    Returns:
        ``(id, version)`` or None when the binary is missing, fails,
        or prints no id.
    """
    if not shutil.which("lsb_release"):
        return None
    try:
        distro_id = _run_lsb_release("-is")
        version = _run_lsb_release("-rs")
    except (OSError, subprocess.SubprocessError) as e:
        logger.debug("lsb_release probe failed: %s", e)
        return None
    if not distro_id:
        return None
    return distro_id, version


def probe_os_release(path: Path = OS_RELEASE_PATH) -> tuple[str, str] | None:
    """Parse ``ID=`` and ``VERSION_ID=`` out of an os-release file."""
    try:
        lines = path.read_text(encoding="utf-8").splitlines()
    except (FileNotFoundError, OSError):
        return None

    distro_id = ""
    version = ""
    for line in lines:
        m = _ID_RE.match(line)
        if m:
            distro_id = m.group(1)
        m = _VERSION_ID_RE.match(line)
        if m:
            version = m.group(1)

    if not distro_id:
        return None
    return distro_id, version


def platform_override_from_env(environ: Mapping[str, str] | None = None) -> DistroIdentity | None:
    """Build an override from ``PKGDEPS_DISTRO_ID`` / ``PKGDEPS_DISTRO_VERSION``."""
    env = os.environ if environ is None else environ
    distro_id = env.get(ENV_DISTRO_ID, "").strip()
    if not distro_id:
        return None
    return DistroIdentity.create(distro_id, env.get(ENV_DISTRO_VERSION, ""), source="override")


def detect_distro(
    override: DistroIdentity | None = None,
    *,
    os_release_path: Path = OS_RELEASE_PATH,
) -> DistroIdentity:
    """Produce the active distro identity.

    Args:
        override: Externally supplied identity (reproducible or cross
            builds). Used as-is, no probing.
        os_release_path: os-release file to parse when ``lsb_release``
            is unavailable.

    Returns:
        A normalized ``DistroIdentity``. Falls back to
        ``generic`` with an empty version when nothing is found.
    """
    if override is not None:
        identity = DistroIdentity.create(override.id, override.version, source="override")
        logger.info("Using platform override '%s' version '%s'", identity.id, identity.version)
        return identity

    identity = DistroIdentity()
    found = probe_lsb_release()
    if found:
        identity = DistroIdentity.create(*found, source="lsb_release")
    else:
        found = probe_os_release(os_release_path)
        if found:
            identity = DistroIdentity.create(*found, source="os-release")

    logger.info("Detected '%s' version '%s'", identity.id, identity.version)
    return identity
