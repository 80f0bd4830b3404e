"""Browser name aliasing between browserslist short codes and families."""

import re

from ..constants import BROWSER_NAME_MAP

_ALIAS_PATTERN = re.compile("(" + "|".join(re.escape(key) for key in BROWSER_NAME_MAP) + ")")


def alias_family(name: str) -> str:
    """Return the canonical family for a browserslist name, or the name itself."""
    return BROWSER_NAME_MAP.get(name, name)


def normalize_query(query: str) -> str:
    """Rewrite the first alias token found in a browserslist query.

    "ie 11" -> "Explorer 11". Only the first occurrence of the first alias is
    replaced; a query without aliases comes back unchanged.
    """
    match = _ALIAS_PATTERN.search(query)
    if not match:
        return query
    return query[:match.start()] + BROWSER_NAME_MAP[match.group(0)] + query[match.end():]
