"""helm_nexus_push.helm — Thin wrappers around the helm binary."""

from helm_nexus_push.helm.command import run_helm, helm_bin
from helm_nexus_push.helm.config import HelmConfig, detect_major_version
from helm_nexus_push.helm.repos import Repository, list_repositories, resolve_repository
from helm_nexus_push.helm.package import package_chart, resolve_chart_package

__all__ = [
    "run_helm", "helm_bin",
    "HelmConfig", "detect_major_version",
    "Repository", "list_repositories", "resolve_repository",
    "package_chart", "resolve_chart_package",
]
