"""User-agent parsing and resolution."""

from .parser import NamedVersion, ParsedUserAgent, parse_user_agent
from .resolver import resolve_parsed_user_agent, resolve_user_agent

__all__ = [
    "NamedVersion",
    "ParsedUserAgent",
    "parse_user_agent",
    "resolve_parsed_user_agent",
    "resolve_user_agent",
]
