"""
gl-cloner: pick a project from a GitLab group and clone it.

Reads (or asks for, then saves) the GitLab URL, group ID and access token,
lists the group's projects sorted by name, prompts for a project ID and runs
``git clone`` on it in the current directory.
"""

__version__ = "0.1.0"

from gl_cloner.cli import main  # noqa: E402

__all__ = ["main", "__version__"]
