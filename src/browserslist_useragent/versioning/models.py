"""Data models for user-agent resolution and browser matching."""

from dataclasses import dataclass, fields, replace
from typing import Any, List, Mapping, Optional

from ..constants import Constants


@dataclass(frozen=True)
class ResolvedAgent:
    """Canonical identity of a requesting browser."""
    family: Optional[str]
    version: Optional[str]  # normalized major.minor.patch


@dataclass(frozen=True)
class QueryEntry:
    """One browser from an expanded support policy; never a range."""
    family: str
    version: Optional[str]


_CAMEL_CASE_KEYS = {
    "ignoreMinor": "ignore_minor",
    "ignorePatch": "ignore_patch",
    "allowHigherVersions": "allow_higher_versions",
}


@dataclass
class Options:
    """Matching options; field defaults are the defaults applied to every match."""
    browsers: Optional[List[str]] = None
    env: Optional[str] = None
    path: Optional[str] = None
    ignore_minor: bool = Constants.DEFAULT_IGNORE_MINOR
    ignore_patch: bool = Constants.DEFAULT_IGNORE_PATCH
    allow_higher_versions: bool = Constants.DEFAULT_ALLOW_HIGHER_VERSIONS

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Options":
        """Build Options from snake_case or camelCase keys.

        Raises:
            ValueError: for keys that name no option.
        """
        return cls().merged(**dict(data))

    def merged(self, **overrides: Any) -> "Options":
        """Return a copy with overrides applied; caller values win."""
        known = {f.name for f in fields(self)}
        changes = {}
        for key, value in overrides.items():
            name = _CAMEL_CASE_KEYS.get(key, key)
            if name not in known:
                raise ValueError(f"Unknown option: {key}")
            changes[name] = value
        return replace(self, **changes)
