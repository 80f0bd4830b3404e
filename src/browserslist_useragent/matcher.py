"""Matching a user-agent string against a browserslist support policy."""

from __future__ import annotations

import logging
import os
from typing import Any, Callable, List, Optional, Sequence

from .browsers.aliases import normalize_query
from .browsers.parser import parse_browsers_list
from .browsers.resolver import BrowserslistResolver
from .useragent.resolver import resolve_user_agent
from .versioning.models import Options
from .versioning.semver import compare_versions

logger = logging.getLogger(__name__)

QueryResolver = Callable[[Optional[Sequence[str]], Optional[str], str], List[str]]


def matches_user_agent(
    ua_string: Optional[str],
    options: Optional[Options] = None,
    resolver: Optional[QueryResolver] = None,
    **overrides: Any,
) -> bool:
    """Return True if the user agent is one of the browsers the policy supports.

    Args:
        ua_string: Raw User-Agent header value.
        options: Matching options; defaults ignore patch-level differences.
        resolver: Callable expanding ``(queries, env, path)`` into browserslist
            results; a BrowserslistResolver is used when omitted.
        **overrides: Option fields (snake_case or camelCase) applied on top
            of options.

    Returns:
        True on a match. Unknown browsers and unparseable versions give False.

    Raises:
        QueryResolutionError: browserslist rejected the queries, env or path.
        ValueError: an override names no option.
    """
    # bail out early if the user agent is invalid
    if not ua_string:
        return False

    opts = (options or Options()).merged(**overrides)

    queries = None
    if opts.browsers is not None:
        queries = [normalize_query(query) for query in opts.browsers]

    resolve = resolver or BrowserslistResolver()
    browsers = resolve(queries, opts.env, opts.path or os.getcwd())
    entries = parse_browsers_list(browsers)

    agent = resolve_user_agent(ua_string)
    if not agent.family or not agent.version:
        logger.debug("Unresolvable user agent: %s", ua_string)
        return False

    family = agent.family.lower()
    for entry in entries:
        if not entry.version:
            continue
        if entry.family.lower() == family and compare_versions(agent.version, entry.version, opts):
            logger.debug("User agent %s %s matched %s %s", agent.family, agent.version, entry.family, entry.version)
            return True
    return False
