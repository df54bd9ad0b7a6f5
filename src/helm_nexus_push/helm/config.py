"""
helm_nexus_push.helm.config — Per-invocation Helm configuration.

Helm 3+ (plugin home under the user's home directory):

    ~/.helm/
    ├── cache/          ← XDG_CACHE_HOME for child helm processes
    ├── config/         ← XDG_CONFIG_HOME
    ├── data/           ← XDG_DATA_HOME
    └── auth.<repo>     ← cached login, one line "username:password"

Helm 2:

    $(helm home)/repository/auth.<repo>
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

from helm_nexus_push.errors import HelmError
from helm_nexus_push.helm.command import run_helm


PLUGIN_HOME_NAME = ".helm"

_VERSION_RE = re.compile(r"v(\d+)\.\d+")


def detect_major_version() -> int:
    """Major version of the helm client (`helm version --client --short`)."""
    out = run_helm("version", "--client", "--short").stdout
    match = _VERSION_RE.search(out)
    if match is None:
        raise HelmError(f"Cannot detect helm version from {out.strip()!r}")
    return int(match.group(1))


@dataclass
class HelmConfig:
    """Paths the plugin uses, built once per invocation."""
    major_version: int
    home: Path
    cache_home: Path | None = None
    config_home: Path | None = None
    data_home: Path | None = None

    @classmethod
    def detect(cls, user_home: Path | None = None) -> HelmConfig:
        major = detect_major_version()
        if major >= 3:
            return cls.for_home(user_home or Path.home(), major_version=major)
        helm_home = run_helm("home").stdout.strip()
        return cls(major_version=major, home=Path(helm_home))

    @classmethod
    def for_home(cls, user_home: Path, major_version: int = 3) -> HelmConfig:
        home = Path(user_home) / PLUGIN_HOME_NAME
        return cls(
            major_version=major_version,
            home=home,
            cache_home=home / "cache",
            config_home=home / "config",
            data_home=home / "data",
        )

    @property
    def legacy(self) -> bool:
        """True for Helm 2."""
        return self.major_version < 3

    def auth_file(self, repo: str) -> Path:
        if self.legacy:
            return self.home / "repository" / f"auth.{repo}"
        return self.home / f"auth.{repo}"

    def env(self) -> dict[str, str]:
        """Environment overrides for child helm processes."""
        if self.legacy:
            return {}
        return {
            "HELM_HOME": str(self.home),
            "XDG_CACHE_HOME": str(self.cache_home),
            "XDG_CONFIG_HOME": str(self.config_home),
            "XDG_DATA_HOME": str(self.data_home),
        }

    def ensure_dirs(self) -> None:
        for d in (self.home, self.cache_home, self.config_home, self.data_home):
            if d is not None:
                d.mkdir(parents=True, exist_ok=True)
