"""Error types for vhost."""

from __future__ import annotations


class VhostError(Exception):
    """Base class for all vhost errors."""


class ArgumentError(VhostError, TypeError):
    """A setup-time argument was missing or unusable."""


class PatternError(VhostError):
    """A pre-built pattern could not be compiled by RE2.

    Raised the first time the pattern is executed, not when the vhost
    stage is created.
    """

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f'invalid host pattern "{source}": {reason}')


class ConfigParseError(VhostError):
    """Error parsing a config dict into config types."""


class InvalidConfigError(VhostError):
    """A config payload parsed but is semantically invalid."""

    def __init__(self, source: str) -> None:
        self.source = source
        super().__init__(f"invalid config: {source}")


class UnknownHandlerError(VhostError):
    """A config entry named a handler that was not supplied."""

    def __init__(self, name: str, available: list[str]) -> None:
        self.name = name
        self.available = sorted(available)
        if self.available:
            registered = ", ".join(self.available)
            msg = f"unknown handler: {name!r} (registered: {registered})"
        else:
            msg = f"unknown handler: {name!r} (no handlers are registered)"
        super().__init__(msg)
