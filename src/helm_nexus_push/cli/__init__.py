"""
helm_nexus_push.cli — CLI entry point.

  helm nexus-push [repo] login [flags]     — Setup login information for repo
  helm nexus-push [repo] logout [flags]    — Remove login information for repo
  helm nexus-push [repo] [CHART] [flags]   — Push chart to repo
"""

import sys
from typing import NoReturn

import click

from helm_nexus_push.cli.actions import Login, Logout, Push, parse_action
from helm_nexus_push.cli.login_cmd import run_login, run_logout
from helm_nexus_push.cli.push_cmd import run_push
from helm_nexus_push.errors import NexusPushError, RepositoryNotFoundError
from helm_nexus_push.helm.config import HelmConfig
from helm_nexus_push.helm.repos import list_repositories, resolve_repository


CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
    "ignore_unknown_options": True,
}

USERNAME_OPTS = ("-u", "--username")
PASSWORD_OPTS = ("-p", "--password")


def usage_error(ctx: click.Context, message: str | None = None) -> NoReturn:
    if message:
        click.echo(message, err=True)
    click.echo("---", err=True)
    click.echo(ctx.get_help(), err=True)
    ctx.exit(1)


def bind_password_values(args: list[str]) -> list[str]:
    """`-p VALUE` takes the next token even when it starts with a dash."""
    bound = []
    i = 0
    while i < len(args):
        token = args[i]
        if token in PASSWORD_OPTS and i + 1 < len(args) and args[i + 1]:
            bound.append(f"--password={args[i + 1]}")
            i += 2
            continue
        bound.append(token)
        i += 1
    return bound


class NexusPushCommand(click.Command):
    """Usage errors print the full help and exit with status 1."""

    def parse_args(self, ctx, args):
        try:
            return super().parse_args(ctx, bind_password_values(args))
        except click.UsageError as e:
            if isinstance(e, click.BadOptionUsage) \
               and e.option_name in USERNAME_OPTS:
                usage_error(ctx, "Must specify username!")
            usage_error(ctx, e.format_message())


@click.command(
    "nexus-push",
    cls=NexusPushCommand,
    context_settings=CONTEXT_SETTINGS,
)
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@click.option("-u", "--username", default=None,
              help="Username for authenticated repo "
                   "(assumes anonymous access if unspecified)")
@click.option("-p", "--password", is_flag=False, flag_value="", default=None,
              help="Password for authenticated repo "
                   "(prompts if unspecified and -u specified)")
@click.version_option(package_name="helm-nexus-push")
@click.pass_context
def main(ctx, args, username, password):
    """Push Helm Chart to Nexus repository.

    This plugin provides ability to push a Helm Chart directory or package
    to a remote Nexus Helm repository.

    \b
    Usage:
      helm nexus-push [repo] login [flags]    Setup login information for repo
      helm nexus-push [repo] logout [flags]   Remove login information for repo
      helm nexus-push [repo] [CHART] [flags]  Pushes chart to repo
    """
    if username == "":
        usage_error(ctx, "Must specify username!")
    if len(args) < 2:
        usage_error(ctx, "Missing arguments!")

    repo_name = args[0]
    action = parse_action(args[1])

    try:
        config = HelmConfig.detect()
        click.echo(f"Detected HELM version: {config.major_version}", err=True)
        config.ensure_dirs()

        repos = list_repositories(config)
        try:
            repo = resolve_repository(repo_name, repos)
        except RepositoryNotFoundError as e:
            click.echo(
                "Invalid repo specified!  Must specify one of these repos...",
                err=True,
            )
            for known in e.known:
                click.echo(f"  {known.name:20s} {known.url}", err=True)
            usage_error(ctx)

        if isinstance(action, Login):
            run_login(config, repo_name, username, password)
        elif isinstance(action, Logout):
            run_logout(config, repo_name)
        elif isinstance(action, Push):
            run_push(config, repo_name, repo, action.chart, username, password)

    except NexusPushError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
