"""
helm_nexus_push.auth — Per-repository login credentials.

The auth file holds a single line:

    username:password

`login` writes it, `logout` deletes it and `push` reads it
through resolve_auth().
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

import click

from helm_nexus_push.helm.config import HelmConfig


class CredentialSource(str, Enum):
    """Where the credential used for an upload came from."""
    FLAGS = "flags"
    CACHED_FILE = "cached-file"
    PROMPT = "prompt"


@dataclass
class Credentials:
    username: str = ""
    password: str = ""

    @classmethod
    def parse(cls, line: str) -> Credentials:
        """Split an auth line at the first colon."""
        username, _, password = line.partition(":")
        return cls(username=username, password=password)

    @property
    def complete(self) -> bool:
        return bool(self.username) and bool(self.password)

    def combined(self) -> str:
        return f"{self.username}:{self.password}"


@dataclass
class ResolvedAuth:
    """A combined "username:password" string ready for basic auth."""
    combined: str
    source: CredentialSource

    def basic_auth(self) -> tuple[str, str]:
        username, _, password = self.combined.partition(":")
        return username, password


def _prompt_missing(creds: Credentials) -> Credentials:
    username = creds.username or click.prompt("Username", err=True)
    password = creds.password or click.prompt(
        "Password", hide_input=True, err=True,
    )
    return Credentials(username=username, password=password)


def read_cached(config: HelmConfig, repo: str) -> str | None:
    """Raw auth file contents without the trailing newline, None if absent."""
    path = config.auth_file(repo)
    if not path.is_file():
        return None
    return path.read_text().rstrip("\r\n")


def login(
    config: HelmConfig,
    repo: str,
    username: str | None = None,
    password: str | None = None,
) -> Path:
    """Store credentials for repo, prompting for whatever is missing.

    An existing auth file is overwritten.

    Returns:
        The auth file path
    """
    creds = _prompt_missing(Credentials(username or "", password or ""))

    path = config.auth_file(repo)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(creds.combined() + "\n")
    path.chmod(0o600)
    return path


def logout(config: HelmConfig, repo: str) -> bool:
    """Remove the auth file. Returns False if there was none."""
    path = config.auth_file(repo)
    if not path.exists():
        return False
    path.unlink()
    return True


def resolve_auth(
    config: HelmConfig,
    repo: str,
    username: str | None = None,
    password: str | None = None,
) -> ResolvedAuth:
    """Pick the credential for a push.

    Order:
      1. An existing auth file replaces both flag values.
      2. If a field is still empty, the raw auth file line is used as is;
         with no auth file the missing fields are prompted for.
      3. Otherwise the two fields are joined.
    """
    creds = Credentials(username or "", password or "")

    cached = read_cached(config, repo)
    if cached is not None:
        creds = Credentials.parse(cached)

    if not creds.complete:
        if cached is not None:
            click.echo("Using cached login creds...", err=True)
            return ResolvedAuth(cached, CredentialSource.CACHED_FILE)
        creds = _prompt_missing(creds)
        return ResolvedAuth(creds.combined(), CredentialSource.PROMPT)

    source = CredentialSource.FLAGS if cached is None else CredentialSource.CACHED_FILE
    return ResolvedAuth(creds.combined(), source)
