"""Match browser user-agent strings against a browserslist support policy."""

from .browsers import BrowserslistResolver, alias_family, normalize_query, parse_browsers_list
from .common.logging_utils import configure_logging
from .errors import BrowserslistUserAgentError, QueryResolutionError
from .matcher import matches_user_agent
from .useragent import ParsedUserAgent, parse_user_agent, resolve_user_agent
from .versioning import Options, QueryEntry, ResolvedAgent, compare_versions, expand_range, normalize_version

__all__ = [
    "BrowserslistResolver",
    "BrowserslistUserAgentError",
    "Options",
    "ParsedUserAgent",
    "QueryEntry",
    "QueryResolutionError",
    "ResolvedAgent",
    "alias_family",
    "compare_versions",
    "configure_logging",
    "expand_range",
    "matches_user_agent",
    "normalize_query",
    "normalize_version",
    "parse_browsers_list",
    "parse_user_agent",
    "resolve_user_agent",
]
