"""Version models and loose semver helpers."""

from .models import Options, QueryEntry, ResolvedAgent
from .semver import coerce_version, compare_versions, expand_range, normalize_version

__all__ = [
    "Options",
    "QueryEntry",
    "ResolvedAgent",
    "coerce_version",
    "compare_versions",
    "expand_range",
    "normalize_version",
]
