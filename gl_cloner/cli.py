"""CLI entry point for gl-cloner."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, TextIO

from gl_cloner import __version__
from gl_cloner.client import GitLabClient
from gl_cloner.cloner import clone_project
from gl_cloner.config import load_config
from gl_cloner.exceptions import ClonerError
from gl_cloner.logging_utils import setup_logging
from gl_cloner.models import LOGGER_NAME
from gl_cloner.presenter import print_projects, select_project, sort_projects


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gl-cloner",
        description="List the projects of a GitLab group and clone the one you pick.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
On first run you are asked for the GitLab URL (with a trailing slash), the
group ID and an access token. They are saved to ~/config.json and reused.

Examples:
    # List the group's own projects and clone one
    gl-cloner

    # Include projects from subgroups and show an android/ios tag
    gl-cloner --include-subgroups --platform-tags

    # Give up on the API call after 30 seconds
    gl-cloner --timeout 30
""",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--json", action="store_true", dest="json_output", help="Output log records as JSON lines (to stderr)"
    )
    parser.add_argument(
        "--config", dest="config_path", type=Path, default=None, help="Config file path (default: ~/config.json)"
    )
    parser.add_argument(
        "--include-subgroups",
        action="store_true",
        help="Also list projects of subgroups (first 100 results)",
    )
    parser.add_argument(
        "--platform-tags",
        action="store_true",
        help="Annotate each project with 'android', 'ios' or its namespaced name",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="HTTP timeout in seconds for the GitLab API call (default: wait indefinitely)",
    )
    return parser


def run(
    args: argparse.Namespace, input_func: Callable[[str], str] | None = None, out: TextIO | None = None
) -> None:
    """Config -> fetch -> list -> select -> clone. Any ClonerError stops the pipeline."""
    input_func = input_func or input
    out = out or sys.stdout
    logger = logging.getLogger(LOGGER_NAME)

    config = load_config(args.config_path, input_func=input_func)
    logger.debug(f"Using GitLab at {config.gitlab_url}, group {config.group_id}")

    with GitLabClient(config.gitlab_url, config.access_token, timeout=args.timeout) as client:
        projects = client.list_group_projects(config.group_id, include_subgroups=args.include_subgroups)

    projects = sort_projects(projects)
    print_projects(projects, tag_platforms=args.platform_tags, out=out)
    out.flush()

    project = select_project(projects, input_func=input_func)
    clone_project(project, out=out)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logger = setup_logging(json_mode=args.json_output, verbose=args.verbose)

    try:
        run(args)
    except ClonerError as e:
        logger.error(str(e), extra={"stage": type(e).__name__})
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
