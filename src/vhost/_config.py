"""Config types for building vhost chains from dict-shaped config.

Config-driven construction path:
  dict → parse_vhosts_config() → VhostsConfig → build_chain() → Chain

Expected shape (JSON or YAML)::

    vhosts:
      - hostname: "*.example.com"
        handler: api
      - regex: "^(www\\.)?example\\.org$"
        handler: site

Each entry carries exactly one of ``hostname`` (literal with ``*``
wildcards) or ``regex`` (expression source), plus the name of a handler
looked up in the mapping given to ``build_chain``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import re2

from vhost._chain import Chain
from vhost._errors import ConfigParseError, InvalidConfigError, UnknownHandlerError
from vhost._middleware import vhost

if TYPE_CHECKING:
    from collections.abc import Mapping

    from vhost._types import HostSpec, Stage

logger = logging.getLogger(__name__)

# ═══════════════════════════════════════════════════════════════════════════════
# Config types
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class VhostConfig:
    """One vhost entry. Exactly one of hostname or regex is set."""

    handler: str
    hostname: str | None = None
    regex: str | None = None

    def host_spec(self) -> HostSpec:
        """The hostname specification for this entry.

        Raises:
            InvalidConfigError: If the regex is not valid RE2 syntax.
        """
        if self.hostname is not None:
            return self.hostname
        try:
            return re2.compile(self.regex)
        except re2.error as e:
            msg = f"regex {self.regex!r}: {e}"
            raise InvalidConfigError(msg) from e


@dataclass(frozen=True, slots=True)
class VhostsConfig:
    """Ordered vhost entries; the first matching entry wins."""

    vhosts: tuple[VhostConfig, ...]


# ═══════════════════════════════════════════════════════════════════════════════
# Parsing (dict → config types)
# ═══════════════════════════════════════════════════════════════════════════════

_HOST_KEYS = ("hostname", "regex")


def parse_vhosts_config(data: dict[str, Any]) -> VhostsConfig:
    """Parse a dict into a VhostsConfig.

    Raises:
        ConfigParseError: If the dict is malformed.
    """
    if not isinstance(data, dict):
        msg = f"expected dict, got {type(data).__name__}"
        raise ConfigParseError(msg)

    raw_vhosts = data.get("vhosts")
    if raw_vhosts is None:
        msg = "missing required field 'vhosts'"
        raise ConfigParseError(msg)
    if not isinstance(raw_vhosts, list):
        msg = f"'vhosts' must be a list, got {type(raw_vhosts).__name__}"
        raise ConfigParseError(msg)

    return VhostsConfig(vhosts=tuple(_parse_vhost(v) for v in raw_vhosts))


def _parse_vhost(data: dict[str, Any]) -> VhostConfig:
    """Parse a single vhost entry, enforcing oneof hostname/regex."""
    if not isinstance(data, dict):
        msg = f"vhost must be a dict, got {type(data).__name__}"
        raise ConfigParseError(msg)

    handler = data.get("handler")
    if handler is None:
        msg = "vhost missing required field 'handler'"
        raise ConfigParseError(msg)
    if not isinstance(handler, str):
        msg = f"handler must be a string, got {type(handler).__name__}"
        raise ConfigParseError(msg)

    present = [k for k in _HOST_KEYS if k in data]
    if len(present) == 2:
        msg = "exactly one of 'hostname' or 'regex' must be set, got both"
        raise ConfigParseError(msg)
    if not present:
        msg = "one of 'hostname' or 'regex' is required"
        raise ConfigParseError(msg)

    key = present[0]
    value = data[key]
    if not isinstance(value, str):
        msg = f"{key} must be a string, got {type(value).__name__}"
        raise ConfigParseError(msg)
    if not value:
        msg = f"{key} must not be empty"
        raise ConfigParseError(msg)

    return VhostConfig(handler=handler, **{key: value})


# ═══════════════════════════════════════════════════════════════════════════════
# Building (config types → Chain)
# ═══════════════════════════════════════════════════════════════════════════════


def build_chain(config: VhostsConfig, handlers: Mapping[str, Stage]) -> Chain:
    """Build a Chain of vhost stages from config.

    Raises:
        UnknownHandlerError: If an entry names a handler not in ``handlers``.
        InvalidConfigError: If an entry's regex is not valid RE2 syntax.
    """
    stages = []
    for entry in config.vhosts:
        handle = handlers.get(entry.handler)
        if handle is None:
            raise UnknownHandlerError(entry.handler, list(handlers))
        stages.append(vhost(entry.host_spec(), handle))

    logger.debug("built vhost chain with %d stage(s)", len(stages))
    return Chain(stages=tuple(stages))
