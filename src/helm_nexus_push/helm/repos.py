"""
helm_nexus_push.helm.repos — Repository resolution from `helm repo list`.

Helm 3+ is asked for YAML:

    - name: nexus
      url: https://nexus.example.com/repository/helm-hosted

Helm 2 only prints a table:

    NAME    URL
    nexus   https://nexus.example.com/repository/helm-hosted
"""

from __future__ import annotations

from dataclasses import dataclass

import yaml

from helm_nexus_push.errors import HelmError, RepositoryNotFoundError
from helm_nexus_push.helm.command import run_helm
from helm_nexus_push.helm.config import HelmConfig


_NO_REPOS_MARKER = "no repositories"


@dataclass
class Repository:
    """A repository entry from Helm's local configuration."""
    name: str
    url: str

    @property
    def base_url(self) -> str:
        """URL with exactly one trailing slash; charts are uploaded below it."""
        return self.url.rstrip("/") + "/"


def list_repositories(config: HelmConfig) -> list[Repository]:
    """Read the configured repositories.

    An empty repository list is not an error: helm exits nonzero
    with "no repositories to show", which maps to [].
    """
    if config.legacy:
        result = run_helm("repo", "list", check=False)
    else:
        result = run_helm("repo", "list", "-o", "yaml", check=False)

    if result.returncode != 0:
        if _NO_REPOS_MARKER in (result.stderr or "").lower():
            return []
        raise HelmError(f"helm repo list failed: {result.stderr.strip()}")

    if config.legacy:
        return _parse_table(result.stdout)
    return _parse_yaml(result.stdout)


def _parse_yaml(text: str) -> list[Repository]:
    try:
        data = yaml.safe_load(text) or []
    except yaml.YAMLError as e:
        raise HelmError(f"Cannot parse helm repo list output: {e}") from e

    repos = []
    for entry in data:
        if isinstance(entry, dict) and entry.get("name"):
            repos.append(Repository(
                name=str(entry["name"]),
                url=str(entry.get("url", "")),
            ))
    return repos


def _parse_table(text: str) -> list[Repository]:
    repos = []
    for line in text.splitlines():
        fields = line.split()
        if len(fields) < 2:
            continue
        if fields[0] == "NAME" and fields[1] == "URL":
            continue
        repos.append(Repository(name=fields[0], url=fields[1]))
    return repos


def resolve_repository(name: str, repos: list[Repository]) -> Repository:
    """First repository whose name starts with name.

    Raises:
        RepositoryNotFoundError: nothing matches; carries repos.
    """
    if name:
        for repo in repos:
            if repo.name.startswith(name):
                return repo
    raise RepositoryNotFoundError(name, known=repos)
