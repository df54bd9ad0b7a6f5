"""
helm_nexus_push.client — Upload a chart archive to a Nexus Helm repository.

Nexus hosted Helm repositories accept a plain PUT of the .tgz below
the repository URL:

    PUT https://nexus.example.com/repository/helm-hosted/mychart-0.1.0.tgz
"""

from __future__ import annotations

from pathlib import Path

import requests

from helm_nexus_push.auth import ResolvedAuth
from helm_nexus_push.errors import UploadError


# curl reports 000 when no HTTP response was received
NO_RESPONSE_STATUS = "000"


def upload_url(repo_url: str, package: str | Path) -> str:
    """Target URL: the archive file name appended to the repository URL."""
    return repo_url.rstrip("/") + "/" + Path(package).name


def upload_chart(
    package: str | Path,
    repo_url: str,
    auth: ResolvedAuth,
) -> str:
    """PUT a chart archive to the repository. Single attempt, no retries.

    Returns:
        The URL the chart was uploaded to

    Raises:
        UploadError: the server did not answer 200, or no response
    """
    package = Path(package)
    url = upload_url(repo_url, package)

    try:
        with open(package, "rb") as f:
            response = requests.put(
                url, data=f, auth=auth.basic_auth(), allow_redirects=False,
            )
    except requests.RequestException as e:
        raise UploadError(str(package), NO_RESPONSE_STATUS, detail=str(e)) from e

    if response.status_code != 200:
        raise UploadError(
            str(package), str(response.status_code),
            detail=(response.text or "").strip(),
        )
    return url
