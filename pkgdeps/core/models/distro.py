"""
DistroIdentity model — which platform packages are resolved for.

Produced once at process start (probed or overridden) and never
changed afterwards.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

GENERIC_ID = "generic"


class DistroIdentity(BaseModel):
    """Host distribution identifier and version, both lower-cased."""

    model_config = ConfigDict(frozen=True)

    id: str = GENERIC_ID
    version: str = ""
    source: str = "fallback"  # override, lsb_release, os-release, fallback

    @classmethod
    def create(cls, distro_id: str | None, version: str | None = "", source: str = "override") -> DistroIdentity:
        """Build a normalized identity; an empty id becomes ``generic``."""
        norm_id = (distro_id or "").strip().lower()
        norm_version = (version or "").strip().lower()
        if not norm_id:
            return cls(id=GENERIC_ID, version=norm_version, source="fallback")
        return cls(id=norm_id, version=norm_version, source=source)

    @property
    def major(self) -> str | None:
        """Version before the first dot, or None when there is no dot."""
        if "." not in self.version:
            return None
        major = self.version.split(".", 1)[0]
        return major or None

    def tier_keys(self) -> list[str]:
        """Lookup keys in fallback order: exact, major, id, generic."""
        keys: list[str] = []
        if self.version:
            keys.append(f"{self.id}-{self.version}")
        if self.major is not None:
            keys.append(f"{self.id}-{self.major}")
        keys.append(self.id)
        keys.append(GENERIC_ID)

        # id == "generic" would otherwise repeat the last tier
        unique: list[str] = []
        for key in keys:
            if key not in unique:
                unique.append(key)
        return unique

    def label(self) -> str:
        return f"{self.id} {self.version}".strip()
