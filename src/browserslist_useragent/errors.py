"""Exceptions raised by browserslist_useragent.

Only configuration problems raise. Unparseable user agents, versions and
ranges are data problems and resolve to "no match" instead.
"""

from __future__ import annotations

from typing import Optional, Sequence


class BrowserslistUserAgentError(Exception):
    """Base class for errors raised by this package."""


class QueryResolutionError(BrowserslistUserAgentError):
    """The support-policy resolver could not turn queries into browsers.

    Raised for an unknown environment name, an invalid config path, a
    missing browserslist executable or unreadable tool output.
    """

    def __init__(
        self,
        message: str,
        command: Optional[Sequence[str]] = None,
        returncode: Optional[int] = None,
        stderr: Optional[str] = None,
    ):
        super().__init__(message)
        self.command = list(command) if command else None
        self.returncode = returncode
        self.stderr = stderr
