"""
helm_nexus_push — Push Helm charts to a Nexus Helm repository.

Packages a chart directory (or takes a ready .tgz), resolves the
repository URL from Helm's repository list and uploads the archive
with per-repository cached login credentials.
"""

from helm_nexus_push.errors import (
    NexusPushError, HelmError, RepositoryNotFoundError,
    PackageError, UploadError,
)
from helm_nexus_push.auth import (
    Credentials, CredentialSource, ResolvedAuth,
    login, logout, resolve_auth,
)
from helm_nexus_push.client import upload_chart

__version__ = "0.2.0"

__all__ = [
    "NexusPushError", "HelmError", "RepositoryNotFoundError",
    "PackageError", "UploadError",
    "Credentials", "CredentialSource", "ResolvedAuth",
    "login", "logout", "resolve_auth",
    "upload_chart",
]
