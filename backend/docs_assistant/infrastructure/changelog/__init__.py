"""SDK changelog infrastructure package."""

from .github_changelog_fetcher import GitHubChangelogFetcher

__all__ = ["GitHubChangelogFetcher"]
