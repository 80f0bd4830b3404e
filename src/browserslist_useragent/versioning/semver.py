"""Loose semantic version helpers built on semantic_version.

Browser and OS versions rarely follow semver: "10", "10.2" or "80.0.3987.95"
all show up. These helpers coerce such tokens to major.minor.patch, expand
browserslist ranges and compare versions with patch/minor tolerance.
"""
from __future__ import annotations

import logging
import re
from typing import List, Optional

import semantic_version

from .models import Options

logger = logging.getLogger(__name__)

# First run of up to three dot-separated numbers, as npm's semver.coerce does.
_COERCE_PATTERN = re.compile(r"(?:^|[^\d])(\d{1,16})(?:\.(\d{1,16}))?(?:\.(\d{1,16}))?(?:$|[^\d])")


def coerce_version(version: Optional[str]) -> Optional[semantic_version.Version]:
    """Coerce a loose version token into a Version, or None."""
    if not version:
        return None
    match = _COERCE_PATTERN.search(str(version))
    if not match:
        return None
    major, minor, patch = (int(part) if part else 0 for part in match.groups())
    return semantic_version.Version(major=major, minor=minor, patch=patch)


def normalize_version(version: Optional[str]) -> Optional[str]:
    """Convert a version token to a semver string.

    2.5 -> 2.5.0; 1 -> 1.0.0; garbage -> None
    """
    coerced = coerce_version(version)
    if coerced is None:
        return None
    return str(coerced)


def expand_range(version_range: str) -> List[str]:
    """Unwrap a browserslist range into minor steps.

    10.0-10.2 -> 10.0.0, 10.1.0, 10.2.0

    Returns an empty list when either bound is not a version.
    """
    start, _, end = version_range.partition("-")
    start_version = coerce_version(start)
    end_version = coerce_version(end)

    if start_version is None or end_version is None:
        logger.warning("Dropping malformed version range: %s", version_range)
        return []

    versions = []
    current = start_version
    while end_version >= current:
        versions.append(str(current))
        current = current.next_minor()
    return versions


def compare_versions(version_a: str, version_b: str, options: Options) -> bool:
    """Return True when version_a satisfies version_b under options.

    allow_higher_versions accepts anything >= version_b. Otherwise a reference
    range is built from version_b: ``~`` when ignore_patch is set, else ``^``
    when ignore_minor is set, else the exact version.
    """
    semver_a = coerce_version(version_a)
    semver_b = coerce_version(version_b)

    if semver_a is None or semver_b is None:
        return False

    if options.allow_higher_versions:
        return semver_a >= semver_b

    reference = str(semver_b)
    if options.ignore_patch:
        reference = f"~{semver_b}"
    elif options.ignore_minor:
        reference = f"^{semver_b}"

    return semantic_version.NpmSpec(reference).match(semver_a)
