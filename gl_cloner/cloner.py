"""Clone the selected project with the git command-line client."""

from __future__ import annotations

import logging
import subprocess
import sys
from typing import TextIO

from gl_cloner.exceptions import CloneError
from gl_cloner.models import GIT_EXECUTABLE, LOGGER_NAME, Project

logger = logging.getLogger(LOGGER_NAME)


def clone_command(project: Project) -> list[str]:
    return [GIT_EXECUTABLE, "clone", project.http_url_to_repo]


def clone_project(project: Project, out: TextIO | None = None, cwd: str | None = None) -> None:
    """
    Run ``git clone <http_url_to_repo>`` and wait for it to finish.

    git inherits this process's working directory (unless ``cwd`` is given),
    environment and standard streams, so credentials come from whatever
    helper the local git installation has configured.
    """
    out = out or sys.stdout
    print("Cloning project...", file=out)
    print(f"Cloning {project.name}", file=out)
    out.flush()

    cmd = clone_command(project)
    logger.debug(f"Running: {' '.join(cmd)}")
    try:
        subprocess.run(cmd, check=True, cwd=cwd)
    except subprocess.CalledProcessError as e:
        raise CloneError(f"Error cloning project: git exited with status {e.returncode}") from e
    except OSError as e:
        raise CloneError(f"Error cloning project: {e}") from e

    print("Project cloned successfully.", file=out)
