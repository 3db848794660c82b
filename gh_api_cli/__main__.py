"""Allow running as ``python -m gh_api_cli``."""

from .cli import cli

cli(prog_name="gh-api-cli")
