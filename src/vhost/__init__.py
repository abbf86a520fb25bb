"""vhost — Hostname-based request dispatch for (request, response, next) chains.

All public types are exported from this module for flat imports:

    from vhost import vhost, chain, VhostMatch, compile_host_pattern
"""

__version__ = "0.1.0"

# Chain
from vhost._chain import Chain, chain

# Config types — see vhost._config for details
from vhost._config import (
    VhostConfig,
    VhostsConfig,
    build_chain,
    parse_vhosts_config,
)

# Errors
from vhost._errors import (
    ArgumentError,
    ConfigParseError,
    InvalidConfigError,
    PatternError,
    UnknownHandlerError,
    VhostError,
)

# Hostname extraction
from vhost._hostname import hostname_of, strip_port

# Matching
from vhost._match import VHOST_KEY, VhostMatch, match_host, vhost_of

# Stage factory
from vhost._middleware import Vhost, vhost

# Pattern compiler
from vhost._pattern import (
    WILDCARD_GROUP,
    HostPattern,
    anchor,
    compile_host_pattern,
    escape_hostname,
    is_end_anchored,
)

# Protocols
from vhost._types import HostSpec, Next, PatternLike, Stage, VhostRequest

__all__ = [
    # Protocols
    "HostSpec",
    "PatternLike",
    "VhostRequest",
    "Stage",
    "Next",
    # Pattern compiler
    "HostPattern",
    "compile_host_pattern",
    "escape_hostname",
    "is_end_anchored",
    "anchor",
    "WILDCARD_GROUP",
    # Hostname extraction
    "hostname_of",
    "strip_port",
    # Matching
    "VhostMatch",
    "vhost_of",
    "match_host",
    "VHOST_KEY",
    # Stage
    "Vhost",
    "vhost",
    # Chain
    "Chain",
    "chain",
    # Config
    "VhostConfig",
    "VhostsConfig",
    "parse_vhosts_config",
    "build_chain",
    # Errors
    "VhostError",
    "ArgumentError",
    "PatternError",
    "ConfigParseError",
    "InvalidConfigError",
    "UnknownHandlerError",
]
