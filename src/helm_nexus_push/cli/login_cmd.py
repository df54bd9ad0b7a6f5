"""
helm_nexus_push.cli.login_cmd — login / logout actions.

  helm nexus-push nexus login
  helm nexus-push nexus login -u admin -p s3cret
  helm nexus-push nexus logout
"""

import click

from helm_nexus_push.auth import login, logout
from helm_nexus_push.helm.config import HelmConfig


def run_login(config: HelmConfig, repo: str, username, password) -> None:
    path = login(config, repo, username=username, password=password)
    click.echo(f"✓ Login information for '{repo}' saved to {path}", err=True)


def run_logout(config: HelmConfig, repo: str) -> None:
    if logout(config, repo):
        click.echo(f"✓ Login information for '{repo}' removed", err=True)
