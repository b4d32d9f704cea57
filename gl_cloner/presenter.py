"""Listing and interactive selection of projects."""

from __future__ import annotations

import sys
from typing import Callable, Iterable, TextIO

from gl_cloner.exceptions import SelectionError
from gl_cloner.models import PLATFORM_ANDROID, PLATFORM_IOS, Project

LISTING_HEADER = "Available Projects:"
SELECTION_PROMPT = "Enter the project ID to clone: "


def sort_projects(projects: Iterable[Project]) -> list[Project]:
    """Sort by case-insensitive name. Ties keep their original order."""
    return sorted(projects, key=lambda p: p.name.lower())


def platform_tag(project: Project) -> str:
    """Coarse platform guess from the namespaced name, android taking precedence over ios."""
    lowered = project.name_with_namespace.lower()
    if PLATFORM_ANDROID in lowered:
        return PLATFORM_ANDROID
    if PLATFORM_IOS in lowered:
        return PLATFORM_IOS
    return project.name_with_namespace


def format_project_line(project: Project, tag_platforms: bool = False) -> str:
    line = f"{project.name} {project.id}"
    if tag_platforms:
        line += f" {platform_tag(project)}"
    return line


def print_projects(projects: Iterable[Project], tag_platforms: bool = False, out: TextIO | None = None) -> None:
    out = out or sys.stdout
    print(LISTING_HEADER, file=out)
    for project in projects:
        print(format_project_line(project, tag_platforms), file=out)


def find_project(projects: Iterable[Project], project_id: str) -> Project | None:
    """Return the first project whose id, as printed, equals ``project_id``."""
    for project in projects:
        if str(project.id) == project_id:
            return project
    return None


def select_project(projects: list[Project], input_func: Callable[[str], str] = input) -> Project:
    """Prompt once for a project id. An unknown id is fatal; there is no second prompt."""
    try:
        answer = input_func(SELECTION_PROMPT)
    except EOFError:
        answer = ""
    selected = find_project(projects, answer.strip())
    if selected is None:
        raise SelectionError("Invalid project selected")
    return selected
