"""helm_nexus_push.errors — Exception hierarchy."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from helm_nexus_push.helm.repos import Repository


class NexusPushError(Exception):
    pass


class HelmError(NexusPushError):
    """The helm binary is missing or a helm command failed."""


class RepositoryNotFoundError(NexusPushError):
    """No configured repository matches name; known lists the candidates."""

    def __init__(self, name: str, known: list[Repository] | None = None):
        self.name = name
        self.known = known or []
        super().__init__(f"Repository '{name}' not found")


class PackageError(NexusPushError):
    pass


class UploadError(NexusPushError):
    """Upload rejected or not completed.

    status is the HTTP status as text ("000" when no response came back).
    """

    def __init__(self, package: str, status: str, detail: str = ""):
        self.package = package
        self.status = status
        self.detail = detail
        super().__init__(
            f"Cannot upload chart {package} to helm registry. "
            f"HTTP status: {status}"
        )
