"""Error taxonomy for gl-cloner.

Every stage raises one of these; the CLI driver logs the message and exits
non-zero. Nothing is retried.
"""

from __future__ import annotations


class ClonerError(Exception):
    """Base class for all fatal gl-cloner errors."""


class ConfigError(ClonerError):
    """The config file could not be read, decoded or written."""


class FetchError(ClonerError):
    """The project listing request failed at the transport or HTTP level."""


class ResponseDecodeError(ClonerError):
    """The project listing response was not the expected JSON array."""


class SelectionError(ClonerError):
    """The operator entered an id that matches no listed project."""


class CloneError(ClonerError):
    """git could not be started or exited with a non-zero status."""
