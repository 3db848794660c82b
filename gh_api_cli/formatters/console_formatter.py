"""Format API results for the rich console."""

from datetime import datetime
from typing import List, Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text

from ..api.models import Contributor, GitHubRepository, GitHubUser, RateLimitStatus
from .color_scheme import ColorScheme

NOT_AVAILABLE = "N/A"


class ConsoleFormatter:
    """Print users, repositories, contributors and quota."""

    def __init__(self, console: Optional[Console] = None):
        """
        Initialize formatter.

        Args:
            console: Optional Rich console instance
        """
        self.console = console or Console()
        self.colors = ColorScheme()

    def print_user(self, user: GitHubUser) -> None:
        """Print a user profile."""
        self._print_header("GitHub User Information")
        self._print_field("Name", user.name)
        self._print_field("Username", user.login)
        self._print_field("Bio", user.bio)
        self._print_field("Company", user.company)
        self._print_field("Location", user.location)
        self._print_field("Public Repos", user.public_repos)
        self._print_field("Followers", user.followers)
        self._print_field("Following", user.following)
        self._print_field("Created", self._format_date(user.created))
        self._print_field("Profile", user.html_url)

    def print_repository(self, repo: GitHubRepository) -> None:
        """Print repository details."""
        self._print_header("Repository Information")
        self._print_field("Name", repo.name)
        self._print_field("Full Name", repo.full_name)
        self._print_field("Description", repo.description)
        self._print_field("Language", repo.language)
        self._print_field("Stars", repo.stargazers_count)
        self._print_field("Forks", repo.forks_count)
        self._print_field("Open Issues", repo.open_issues_count)
        self._print_field("License", repo.license.name if repo.license else None)
        self._print_field("Created", self._format_date(repo.created))
        self._print_field("Updated", self._format_date(repo.updated))
        self._print_field("URL", repo.html_url)

    def print_repository_list(self, username: str, repos: List[GitHubRepository]) -> None:
        """Print a numbered repository list."""
        self._print_header(f"{username}'s Repositories ({len(repos)})")

        table = Table(show_header=True, header_style=self.colors.TABLE_HEADER)
        table.add_column("#", justify="right", width=4)
        table.add_column("Repository", style=self.colors.NAME, no_wrap=False, max_width=40)
        table.add_column("Stars", justify="right", width=8)
        table.add_column("Forks", justify="right", width=8)
        table.add_column("Language", width=14)
        table.add_column("Description", no_wrap=False, max_width=50)

        for index, repo in enumerate(repos, start=1):
            table.add_row(
                str(index),
                repo.name,
                str(repo.stargazers_count),
                str(repo.forks_count),
                repo.language or "Unknown",
                repo.description or "No description",
            )

        self.console.print(table)

    def print_contributor_list(
        self, owner: str, name: str, contributors: List[Contributor]
    ) -> None:
        """Print a numbered contributor list."""
        self._print_header(f"Contributors for {owner}/{name} ({len(contributors)})")

        table = Table(show_header=True, header_style=self.colors.TABLE_HEADER)
        table.add_column("#", justify="right", width=4)
        table.add_column("Login", style=self.colors.NAME)
        table.add_column("Contributions", justify="right", style=self.colors.COUNT)
        table.add_column("Profile", overflow="fold")
        table.add_column("Avatar", overflow="fold")

        for index, contributor in enumerate(contributors, start=1):
            table.add_row(
                str(index),
                contributor.login,
                str(contributor.contributions),
                contributor.html_url or NOT_AVAILABLE,
                contributor.avatar_url or NOT_AVAILABLE,
            )

        self.console.print(table)

    def print_rate_limit(self, status: RateLimitStatus) -> None:
        """Print API quota."""
        self._print_header("API Rate Limit")
        self._print_field("Limit", f"{status.limit} requests/hour")
        self.console.print(
            Text.assemble(("Remaining: ", self.colors.LABEL), self._format_remaining(status))
        )
        reset_local = status.reset_at.astimezone()
        self._print_field("Reset", reset_local.strftime("%Y-%m-%d %H:%M:%S %Z"))

    def print_error(self, title: str, error: Exception) -> None:
        """Print an error line."""
        self.console.print(
            Text.assemble((f"{title}: ", "red bold"), (str(error), self.colors.ERROR))
        )

    def _print_header(self, title: str) -> None:
        self.console.print(f"\n[{self.colors.HEADER}]=== {title} ===[/{self.colors.HEADER}]")

    def _print_field(self, label: str, value) -> None:
        display = Text(str(value)) if value not in (None, "") else Text(NOT_AVAILABLE, style=self.colors.MISSING)
        self.console.print(Text.assemble((f"{label}: ", self.colors.LABEL), display))

    def _format_remaining(self, status: RateLimitStatus) -> Text:
        """Color remaining quota by how much is left."""
        if status.remaining <= 0:
            style = self.colors.QUOTA_EXHAUSTED
        elif status.limit and status.remaining / status.limit < 0.1:
            style = self.colors.QUOTA_LOW
        else:
            style = self.colors.QUOTA_OK
        return Text(str(status.remaining), style=style)

    def _format_date(self, value: Optional[datetime]) -> Optional[str]:
        if value is None:
            return None
        return value.strftime("%Y-%m-%d")
