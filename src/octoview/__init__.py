"""Octoview - terminal browser for GitHub profiles, organizations,
repositories and followers."""

__version__ = "0.1.0"
