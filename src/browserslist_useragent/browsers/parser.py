"""Parsing of browserslist output into flat query entries."""

import logging
from typing import Iterable, List

from ..constants import Constants
from ..versioning.models import QueryEntry
from ..versioning.semver import expand_range
from .aliases import alias_family

logger = logging.getLogger(__name__)


def parse_browsers_list(browsers: Iterable[str]) -> List[QueryEntry]:
    """Turn "name version" strings into QueryEntry records.

    Technology previews are dropped, names are aliased to families and
    ranges such as "ios_saf 9.0-9.2" become one entry per minor version.

    Args:
        browsers: browserslist results, e.g. ["ie 11", "chrome 10.0-10.2"]

    Returns:
        List of QueryEntry in input order
    """
    entries: List[QueryEntry] = []
    for browser in browsers:
        name, _, version = browser.partition(" ")
        if version == Constants.TECHNOLOGY_PREVIEW:
            continue

        family = alias_family(name)
        if not version:
            entries.append(QueryEntry(family=family, version=None))
        elif version.find("-") > 0:
            entries.extend(QueryEntry(family=family, version=v) for v in expand_range(version))
        else:
            entries.append(QueryEntry(family=family, version=version))

    logger.debug("Parsed %d browserslist entries", len(entries))
    return entries
