"""Load the per-user config file, prompting for it on first run."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Callable

from gl_cloner.exceptions import ConfigError
from gl_cloner.models import CONFIG_FILE_MODE, CONFIG_FILENAME, LOGGER_NAME, Config

logger = logging.getLogger(LOGGER_NAME)

PROMPTS = (
    ("gitlab_url", "Enter GitLab URL (e.g., https://gitlab.com): "),
    ("group_id", "Enter the group ID: "),
    ("access_token", "Enter the access token: "),
)


def default_config_path() -> Path:
    return Path.home() / CONFIG_FILENAME


def read_config(path: Path) -> Config | None:
    """Read and decode the config file. Returns None if it does not exist."""
    if not path.exists():
        logger.debug(f"No config file at {path}")
        return None
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Error reading config file: {e}") from e
    try:
        return Config.from_dict(json.loads(raw))
    except ValueError as e:
        # json.JSONDecodeError is a ValueError subclass
        raise ConfigError(f"Error parsing config file: {e}") from e


def prompt_config(input_func: Callable[[str], str] = input) -> Config:
    """Ask for the three settings in a fixed order. End of input counts as an empty answer."""
    values = {}
    for key, prompt in PROMPTS:
        try:
            answer = input_func(prompt)
        except EOFError:
            answer = ""
        values[key] = answer.strip()
    return Config(**values)


def write_config(path: Path, config: Config) -> None:
    """Overwrite the config file with compact JSON, creating it with mode 0644."""
    try:
        data = json.dumps(config.to_dict(), separators=(",", ":"))
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Error serializing config: {e}") from e
    try:
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, CONFIG_FILE_MODE)
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(data)
    except OSError as e:
        raise ConfigError(f"Error writing config file: {e}") from e
    logger.debug(f"Saved config to {path}")


def load_config(path: Path | None = None, input_func: Callable[[str], str] = input) -> Config:
    """
    Return the stored config, or collect and persist a new one.

    A file holding all three values is used unmodified. A missing file, or one
    with any empty value, triggers prompting for all three values once.
    """
    path = path or default_config_path()
    config = read_config(path)
    if config is not None and config.is_complete():
        return config

    config = prompt_config(input_func)
    write_config(path, config)
    return config
