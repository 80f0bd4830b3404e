"""Resolution of a user-agent string into a canonical browser family and version.

Browsers misreport themselves in many ways: third-party iOS browsers all run
the system WebKit, Blink-based browsers carry their own brand names, Firefox
forks report odd browser versions. The rules below are evaluated top to
bottom and the first that applies wins, so narrower rules come first.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from ..constants import Constants, Engine, Family
from ..versioning.models import ResolvedAgent
from ..versioning.semver import normalize_version
from .parser import ParsedUserAgent, parse_user_agent

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _Versions:
    browser: Optional[str]
    os: Optional[str]
    engine: Optional[str]


Rule = Tuple[str, Callable[[ParsedUserAgent], bool], Callable[[ParsedUserAgent, _Versions], ResolvedAgent]]


def _family(family: Family, source: str) -> Callable[[ParsedUserAgent, _Versions], ResolvedAgent]:
    def build(_ua: ParsedUserAgent, versions: _Versions) -> ResolvedAgent:
        return ResolvedAgent(family=family.value, version=getattr(versions, source))
    return build


def _passthrough(ua: ParsedUserAgent, versions: _Versions) -> ResolvedAgent:
    return ResolvedAgent(family=ua.browser.name or None, version=versions.browser)


RULES: Tuple[Rule, ...] = (
    # Safari on iOS reports its own version correctly
    ("ios-safari",
     lambda ua: ua.browser.name == "Safari" and ua.os.name == "iOS",
     _family(Family.IOS, "browser")),
    # Other iOS browsers embed the system WebKit, which is at least as new as the OS
    ("ios-webview",
     lambda ua: ua.os.name == "iOS",
     _family(Family.IOS, "os")),
    ("opera-mobile",
     lambda ua: (ua.browser.name == "Opera" and ua.device_type == "mobile") or ua.browser.name == "Opera Mobi",
     _family(Family.OPERA_MOBILE, "browser")),
    ("samsung",
     lambda ua: ua.browser.name == "Samsung Internet",
     _family(Family.SAMSUNG, "browser")),
    ("explorer",
     lambda ua: ua.browser.name == "IE",
     _family(Family.EXPLORER, "browser")),
    ("explorer-mobile",
     lambda ua: ua.browser.name == "IEMobile",
     _family(Family.EXPLORER_MOBILE, "browser")),
    # Gecko forks are versioned by engine
    ("gecko",
     lambda ua: ua.engine.name == Engine.GECKO.value,
     _family(Family.FIREFOX, "engine")),
    # Every Blink browser is treated as the Chrome of its engine version
    ("blink",
     lambda ua: ua.engine.name == Engine.BLINK.value,
     _family(Family.CHROME, "engine")),
    # Chrome builds from before Blink (WebKit)
    ("chrome-webkit",
     lambda ua: ua.browser.name in Constants.CHROME_BROWSERS,
     _family(Family.CHROME, "browser")),
    # Stock Android browser versions tracked the OS until system Chrome web-views
    ("android-browser",
     lambda ua: ua.browser.name == "Android Browser",
     _family(Family.ANDROID, "os")),
)


def resolve_parsed_user_agent(ua: ParsedUserAgent) -> ResolvedAgent:
    """Apply the resolution rules to already parsed user-agent fields."""
    versions = _Versions(
        browser=normalize_version(ua.browser.version),
        os=normalize_version(ua.os.version),
        engine=normalize_version(ua.engine.version),
    )
    for name, applies, build in RULES:
        if applies(ua):
            resolved = build(ua, versions)
            logger.debug("User agent resolved by rule %s: %s", name, resolved)
            return resolved
    return _passthrough(ua, versions)


def resolve_user_agent(ua_string: str) -> ResolvedAgent:
    """Resolve a user-agent string to a canonical family and semver version.

    Args:
        ua_string: Raw User-Agent header value

    Returns:
        ResolvedAgent; family and version are None when undetectable
    """
    return resolve_parsed_user_agent(parse_user_agent(ua_string))
