"""
helm_nexus_push.cli.push_cmd — push action.

  helm nexus-push nexus ./mychart
  helm nexus-push nexus mychart-0.1.0.tgz -u admin -p s3cret
"""

import sys
import click

from helm_nexus_push.auth import resolve_auth
from helm_nexus_push.client import upload_chart
from helm_nexus_push.errors import UploadError
from helm_nexus_push.helm.config import HelmConfig
from helm_nexus_push.helm.package import resolve_chart_package
from helm_nexus_push.helm.repos import Repository


def run_push(
    config: HelmConfig,
    repo_name: str,
    repo: Repository,
    chart: str,
    username,
    password,
) -> None:
    """Resolve credentials, package if needed and upload."""
    auth = resolve_auth(config, repo_name, username=username, password=password)
    package = resolve_chart_package(chart, config)

    click.echo(f"Pushing {chart} to repo {repo.base_url}...", err=True)
    try:
        upload_chart(package, repo.base_url, auth)
    except UploadError as e:
        click.echo(str(e), err=True)
        if e.detail:
            click.echo(f"  {e.detail}", err=True)
        sys.exit(1)

    click.echo(
        f"Chart {package} was successfully uploaded to helm registry "
        f"{repo.base_url}."
    )
    click.echo("Done")
