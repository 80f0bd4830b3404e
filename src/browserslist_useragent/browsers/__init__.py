"""browserslist query handling: aliases, result parsing and resolution."""

from .aliases import alias_family, normalize_query
from .parser import parse_browsers_list
from .resolver import BrowserslistResolver

__all__ = [
    "BrowserslistResolver",
    "alias_family",
    "normalize_query",
    "parse_browsers_list",
]
