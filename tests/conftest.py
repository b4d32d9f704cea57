"""Shared test fixtures for gl-cloner tests."""

import argparse
import sys
from pathlib import Path
from typing import Any

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from gl_cloner.models import Config, Project

# Constants for use in tests - pytest makes conftest.py fixtures available,
# but these constants need to be imported directly from tests
MOCK_GITLAB_URL = "https://gitlab.example.com/"
MOCK_PROJECTS_URL = f"{MOCK_GITLAB_URL}api/v4/groups/42/projects"


class ScriptedInput:
    """Stands in for input(): returns queued answers and records the prompts shown."""

    def __init__(self, *answers: str):
        self.answers = list(answers)
        self.prompts: list[str] = []

    def __call__(self, prompt: str = "") -> str:
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)


@pytest.fixture
def config_path(tmp_path) -> Path:
    return tmp_path / "config.json"


@pytest.fixture
def sample_config() -> Config:
    return Config(gitlab_url=MOCK_GITLAB_URL, group_id="42", access_token="tok123")


@pytest.fixture
def sample_projects_payload() -> list[dict[str, Any]]:
    """Sample group projects API response, in server order."""
    return [
        {
            "id": 1,
            "name": "Zeta",
            "http_url_to_repo": f"{MOCK_GITLAB_URL}mobile/zeta.git",
            "name_with_namespace": "Mobile / Android / Zeta",
            "namespace": {"id": 7, "full_path": "mobile/android"},
        },
        {
            "id": 2,
            "name": "alpha",
            "http_url_to_repo": f"{MOCK_GITLAB_URL}mobile/alpha.git",
            "name_with_namespace": "Mobile / iOS / alpha",
            "namespace": {"id": 8, "full_path": "mobile/ios"},
        },
        {
            "id": 3,
            "name": "Backend",
            "http_url_to_repo": f"{MOCK_GITLAB_URL}mobile/backend.git",
            "name_with_namespace": "Mobile / Backend",
            "namespace": {"id": 9, "full_path": "mobile"},
        },
    ]


@pytest.fixture
def sample_projects(sample_projects_payload) -> list[Project]:
    return [Project.from_api(p) for p in sample_projects_payload]


def make_project(id: int, name: str, name_with_namespace: str = "") -> Project:
    return Project(
        id=id,
        name=name,
        http_url_to_repo=f"{MOCK_GITLAB_URL}group/{name.lower()}.git",
        name_with_namespace=name_with_namespace,
    )


def make_args(**kwargs) -> argparse.Namespace:
    """Helper to create argparse.Namespace with default values."""
    defaults = {
        "verbose": False,
        "json_output": False,
        "config_path": None,
        "include_subgroups": False,
        "platform_tags": False,
        "timeout": None,
    }
    defaults.update(kwargs)
    return argparse.Namespace(**defaults)
