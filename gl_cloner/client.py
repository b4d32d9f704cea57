"""GitLab API client for listing the projects of a group."""

from __future__ import annotations

import logging
import re
from typing import Any

import requests
from requests.auth import AuthBase

from gl_cloner.exceptions import FetchError, ResponseDecodeError
from gl_cloner.models import API_V4_GROUP_PROJECTS, LOGGER_NAME, PER_PAGE, Project

_TOKEN_IN_QUERY = re.compile(r"(private_token=)[^&\s'\")]+")


class NoAuth(AuthBase):
    """Leaves requests untouched so Session does not fall back to ~/.netrc credentials."""

    def __call__(self, r: requests.PreparedRequest) -> requests.PreparedRequest:
        return r


class GitLabClient:
    """
    Thin wrapper around the GitLab REST API v4 group projects endpoint.

    The token travels as the ``private_token`` query parameter; no auth header
    is sent. ``base_url`` is used as a plain prefix and should end in "/".
    Requests have no timeout unless one is given.
    """

    def __init__(self, base_url: str, token: str, timeout: float | None = None):
        self.base_url = base_url
        self.token = token
        self.timeout = timeout
        self.session = requests.Session()
        # trust_env stays on for proxy settings; an explicit auth disables the netrc lookup
        self.session.auth = NoAuth()
        self.logger = logging.getLogger(LOGGER_NAME)

    def __enter__(self) -> GitLabClient:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self.session.close()

    def group_projects_url(self, group_id: str) -> str:
        return self.base_url + API_V4_GROUP_PROJECTS.format(group_id=group_id)

    @staticmethod
    def _redact(text: str) -> str:
        """Mask the private_token query value in URLs quoted by requests/urllib3 errors."""
        return _TOKEN_IN_QUERY.sub(r"\1***", text)

    def _get(self, url: str, params: dict) -> requests.Response:
        shown = {k: ("***" if k == "private_token" else v) for k, v in params.items()}
        self.logger.debug(f"GET {url} {shown}")
        try:
            resp = self.session.get(url, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            raise FetchError(f"Error fetching projects: {self._redact(str(e))}") from e

        if resp.status_code >= 400:
            self.logger.debug(f"API error {resp.status_code}: {resp.text[:500]}")
            raise FetchError(f"Error fetching projects: HTTP {resp.status_code} {resp.reason}: {_api_message(resp)}")
        return resp

    def list_group_projects(self, group_id: str, include_subgroups: bool = False) -> list[Project]:
        """Fetch a single page of the group's projects, optionally including subgroup projects."""
        params: dict[str, Any] = {"private_token": self.token}
        if include_subgroups:
            params["include_subgroups"] = "true"
            params["per_page"] = PER_PAGE

        resp = self._get(self.group_projects_url(group_id), params)

        try:
            data = resp.json()
        except ValueError as e:
            raise ResponseDecodeError(f"Error parsing JSON response: {e}") from e
        if not isinstance(data, list):
            raise ResponseDecodeError(
                f"Error parsing JSON response: expected a JSON array, got {type(data).__name__}"
            )

        try:
            projects = [Project.from_api(item) for item in data]
        except ValueError as e:
            raise ResponseDecodeError(f"Error parsing JSON response: {e}") from e

        if resp.headers.get("x-next-page"):
            self.logger.debug("More projects are available on later pages; only the first page is listed")
        self.logger.debug(f"Fetched {len(projects)} projects for group {group_id}")
        return projects


def _api_message(resp: requests.Response) -> str:
    """Best-effort extraction of GitLab's error message from a response body."""
    try:
        body = resp.json()
    except ValueError:
        return resp.text[:200]
    if isinstance(body, dict):
        message = body.get("message") or body.get("error")
        if message:
            return str(message)
    return resp.text[:200]
