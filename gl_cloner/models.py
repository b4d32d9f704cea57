"""Data models and constants for gl-cloner."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

LOGGER_NAME = "gl-cloner"

CONFIG_FILENAME = "config.json"
CONFIG_FILE_MODE = 0o644

# Appended verbatim to the configured base URL, which is expected to end in "/"
API_V4_GROUP_PROJECTS = "api/v4/groups/{group_id}/projects"
PER_PAGE = 100

GIT_EXECUTABLE = "git"

PLATFORM_ANDROID = "android"
PLATFORM_IOS = "ios"


# ---------------------------------------------------------------------------
# Data Classes
# ---------------------------------------------------------------------------


@dataclass
class Config:
    """Per-user settings persisted in the config file."""

    gitlab_url: str = ""
    group_id: str = ""
    access_token: str = ""

    def is_complete(self) -> bool:
        return bool(self.gitlab_url and self.group_id and self.access_token)

    def to_dict(self) -> dict:
        return {
            "gitlab_url": self.gitlab_url,
            "group_id": self.group_id,
            "access_token": self.access_token,
        }

    @classmethod
    def from_dict(cls, data: Any) -> Config:
        """Build a Config from a decoded JSON document. Missing keys (or a null document) become empty strings."""
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ValueError(f"expected a JSON object, got {type(data).__name__}")
        values = {}
        for key in ("gitlab_url", "group_id", "access_token"):
            value = data.get(key)
            if value is None:
                value = ""
            if not isinstance(value, str):
                raise ValueError(f"'{key}' must be a string, got {type(value).__name__}")
            values[key] = value
        return cls(**values)


@dataclass(frozen=True)
class Project:
    """One entry of the group projects listing."""

    id: int
    name: str
    http_url_to_repo: str
    name_with_namespace: str = ""
    namespace_full_path: str = ""
    subprojects_count: int | None = None

    @classmethod
    def from_api(cls, data: Any) -> Project:
        if not isinstance(data, dict):
            raise ValueError(f"expected a project object, got {type(data).__name__}")

        project_id = data.get("id", 0)
        if isinstance(project_id, bool) or not isinstance(project_id, int):
            raise ValueError(f"project 'id' must be an integer, got {project_id!r}")

        namespace = data.get("namespace") or {}
        if not isinstance(namespace, dict):
            raise ValueError(f"project 'namespace' must be an object, got {type(namespace).__name__}")

        name_with_namespace = _string_field(data, "name_with_namespace") or _string_field(
            namespace, "name_with_namespace"
        )
        subprojects_count = data.get("subprojects_count")
        if subprojects_count is not None and (
            isinstance(subprojects_count, bool) or not isinstance(subprojects_count, int)
        ):
            raise ValueError(f"project 'subprojects_count' must be an integer, got {subprojects_count!r}")

        return cls(
            id=project_id,
            name=_string_field(data, "name"),
            http_url_to_repo=_string_field(data, "http_url_to_repo"),
            name_with_namespace=name_with_namespace,
            namespace_full_path=_string_field(namespace, "full_path"),
            subprojects_count=subprojects_count,
        )


def _string_field(data: dict, key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"project '{key}' must be a string, got {type(value).__name__}")
    return value
