"""
L3 Detection — ``__init__.py`` re-exports all detection functions.

These functions READ system state but never WRITE.
"""

from pkgdeps.core.services.package_deps.detection.distro import (  # noqa: F401
    ENV_DISTRO_ID,
    ENV_DISTRO_VERSION,
    OS_RELEASE_PATH,
    detect_distro,
    platform_override_from_env,
    probe_lsb_release,
    probe_os_release,
)
