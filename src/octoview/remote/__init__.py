"""Remote data sources for Octoview."""

from .github import NOT_FOUND_MESSAGE, GitHubClient, is_not_found

__all__ = [
    "GitHubClient",
    "NOT_FOUND_MESSAGE",
    "is_not_found",
]
