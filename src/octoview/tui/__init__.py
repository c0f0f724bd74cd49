"""Terminal UI for Octoview."""

from .app import OctoviewApp

__all__ = ["OctoviewApp"]
