"""CLI interface for gh-api-cli."""

import logging
import sys
from contextlib import contextmanager

import click
from rich.console import Console

from . import __version__
from .api.github_client import GitHubService
from .config import (
    DEFAULT_CACHE_TTL_SECONDS,
    DEFAULT_LIST_LIMIT,
    MAX_PAGE_SIZE,
    ServiceConfig,
)
from .formatters.console_formatter import ConsoleFormatter
from .utils.errors import ConfigurationError, GitHubAPIError, GHApiCliError

logger = logging.getLogger(__name__)


class CliGroup(click.Group):
    """Command group that exits with status 1 on every usage error."""

    def main(self, *args, **kwargs):
        kwargs["standalone_mode"] = False
        try:
            rv = super().main(*args, **kwargs)
        except click.ClickException as e:
            e.show()
            sys.exit(1)
        except click.Abort:
            click.echo("Aborted!", err=True)
            sys.exit(1)
        sys.exit(rv if isinstance(rv, int) else 0)


@click.group(cls=CliGroup, invoke_without_command=True)
@click.version_option(version=__version__)
@click.option("--token", "-t", help="GitHub API token (overrides GITHUB_TOKEN)")
@click.option(
    "--cache/--no-cache",
    default=False,
    help="Cache responses in memory for the duration of the command",
)
@click.option(
    "--cache-ttl",
    type=click.IntRange(min=0),
    default=DEFAULT_CACHE_TTL_SECONDS,
    help=f"Cache TTL in seconds (default: {DEFAULT_CACHE_TTL_SECONDS})",
)
@click.option(
    "--fail-on-rate-limit",
    is_flag=True,
    help="Fail instead of waiting when the API quota is exhausted",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx, token, cache, cache_ttl, fail_on_rate_limit, verbose):
    """Query the GitHub REST API for users, repositories, contributors and quota."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    ctx.ensure_object(dict)
    ctx.obj.update(
        token=token,
        cache_enabled=cache,
        cache_ttl_seconds=cache_ttl,
        fail_on_rate_limit=fail_on_rate_limit,
    )

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        ctx.exit(1)


def _build_service(ctx: click.Context) -> GitHubService:
    """Create the service from CLI options; closed with the command context."""
    options = ctx.obj
    config = ServiceConfig.from_env(
        token=options["token"],
        cache_enabled=options["cache_enabled"],
        cache_ttl_seconds=options["cache_ttl_seconds"],
        fail_on_rate_limit=options["fail_on_rate_limit"],
    )
    service = GitHubService(config)
    ctx.call_on_close(service.close)
    return service


@contextmanager
def _report_errors(formatter: ConsoleFormatter):
    """Print failures and abort with exit code 1."""
    try:
        yield
    except ConfigurationError as e:
        formatter.print_error("Configuration Error", e)
        raise click.Abort()
    except GitHubAPIError as e:
        formatter.print_error("GitHub API Error", e)
        raise click.Abort()
    except GHApiCliError as e:
        formatter.print_error("Error", e)
        raise click.Abort()
    except Exception as e:
        logger.debug("Unexpected failure", exc_info=True)
        formatter.print_error("Unexpected Error", e)
        raise click.Abort()


@cli.command()
@click.argument("username")
@click.pass_context
def user(ctx, username: str):
    """
    Show a user's profile.

    Example:
        gh-api-cli user octocat
    """
    formatter = ConsoleFormatter(Console())

    with _report_errors(formatter):
        service = _build_service(ctx)
        formatter.print_user(service.get_user(username))


@cli.command()
@click.argument("owner")
@click.argument("repo")
@click.pass_context
def repo(ctx, owner: str, repo: str):
    """
    Show repository details.

    Example:
        gh-api-cli repo microsoft vscode
    """
    formatter = ConsoleFormatter(Console())

    with _report_errors(formatter):
        service = _build_service(ctx)
        formatter.print_repository(service.get_repository(owner, repo))


@cli.command()
@click.argument("username")
@click.argument(
    "limit",
    type=click.IntRange(1, MAX_PAGE_SIZE),
    default=DEFAULT_LIST_LIMIT,
    required=False,
)
@click.pass_context
def repos(ctx, username: str, limit: int):
    """
    List a user's most recently updated repositories.

    Example:
        gh-api-cli repos octocat 10
    """
    formatter = ConsoleFormatter(Console())

    with _report_errors(formatter):
        service = _build_service(ctx)
        repositories = service.list_user_repositories(username, per_page=limit)
        formatter.print_repository_list(username, repositories)


@cli.command()
@click.argument("owner")
@click.argument("repo")
@click.argument(
    "limit",
    type=click.IntRange(min=0),
    default=DEFAULT_LIST_LIMIT,
    required=False,
)
@click.pass_context
def contributors(ctx, owner: str, repo: str, limit: int):
    """
    List a repository's top contributors.

    Example:
        gh-api-cli contributors microsoft vscode 20
    """
    formatter = ConsoleFormatter(Console())

    with _report_errors(formatter):
        service = _build_service(ctx)
        contributor_list = service.list_repository_contributors(owner, repo, limit)
        formatter.print_contributor_list(owner, repo, contributor_list)


@cli.command()
@click.pass_context
def rate(ctx):
    """
    Show API rate limit status.

    Example:
        gh-api-cli rate
    """
    formatter = ConsoleFormatter(Console())

    with _report_errors(formatter):
        service = _build_service(ctx)
        formatter.print_rate_limit(service.get_rate_limit_status())


if __name__ == "__main__":
    cli()
