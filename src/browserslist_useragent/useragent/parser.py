"""User-agent parsing adapter over ua-parser.

ua-parser (uap-core) reports browser, OS and device families. The resolver
also needs the rendering engine and a coarse device type, so those are
detected here from the raw string, and uap family names are translated to
the names the resolution rules are written against.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Tuple

import ua_parser

from ..constants import Engine

# uap-core family -> ua-parser-js style name used by the resolution rules.
# Browsers on iOS are resolved by OS before their name is consulted.
BROWSER_FAMILY_NAMES = {
    "Mobile Safari": "Safari",
    "Chrome Mobile": "Chrome",
    "Chrome Mobile WebView": "Chrome WebView",
    "HeadlessChrome": "Chrome Headless",
    "Firefox Mobile": "Firefox",
    "IE Mobile": "IEMobile",
    "Opera Mobile": "Opera Mobi",
    "Android": "Android Browser",
    "Edge Mobile": "Edge",
    "UC Browser": "UCBrowser",
    "QQ Browser": "QQBrowser",
    "QQ Browser Mobile": "QQBrowser",
    "BlackBerry WebKit": "BlackBerry",
}

UNKNOWN_FAMILY = "Other"

# Checked in order; the first pattern that matches names the engine.
_ENGINE_PATTERNS: Tuple[Tuple[re.Pattern, Optional[str]], ...] = (
    (re.compile(r"windows.+ edge/([\w.]+)", re.IGNORECASE), Engine.EDGE_HTML.value),
    (re.compile(r"webkit/537\.36.+chrome/(?!27)([\w.]+)", re.IGNORECASE), Engine.BLINK.value),
    (re.compile(r"presto/([\w.]+)", re.IGNORECASE), Engine.PRESTO.value),
    (re.compile(r"trident/([\w.]+)", re.IGNORECASE), Engine.TRIDENT.value),
    (re.compile(r"webkit/([\w.]+)", re.IGNORECASE), Engine.WEBKIT.value),
    (re.compile(r"rv:([\w.]{1,9})\b.+gecko", re.IGNORECASE), Engine.GECKO.value),
)

_TABLET_PATTERN = re.compile(r"ipad|tablet|kindle|silk/|playbook", re.IGNORECASE)
_MOBILE_PATTERN = re.compile(r"mobi|iphone|ipod|opera mini|windows phone|blackberry|bb10", re.IGNORECASE)
_MOBILE_DEVICES = frozenset(["iPhone", "iPod", "Generic Smartphone", "Generic Feature Phone"])


@dataclass(frozen=True)
class NamedVersion:
    """A name/version pair; either side may be None."""
    name: Optional[str] = None
    version: Optional[str] = None


@dataclass(frozen=True)
class ParsedUserAgent:
    """Raw fields of a user-agent string as seen by the resolver."""
    browser: NamedVersion
    os: NamedVersion
    engine: NamedVersion
    device_type: Optional[str] = None


def _join_version(*parts: Optional[str]) -> Optional[str]:
    present = []
    for part in parts:
        if part is None or part == "":
            break
        present.append(str(part))
    return ".".join(present) or None


def _family(name: Optional[str]) -> Optional[str]:
    if not name or name == UNKNOWN_FAMILY:
        return None
    return name


def detect_engine(ua_string: str) -> NamedVersion:
    """Detect the rendering engine and its version from the raw string."""
    for pattern, name in _ENGINE_PATTERNS:
        match = pattern.search(ua_string)
        if match:
            return NamedVersion(name=name, version=match.group(1))
    return NamedVersion()


def detect_device_type(ua_string: str, device_family: Optional[str]) -> Optional[str]:
    """Return "tablet", "mobile" or None for desktops and unknowns."""
    if _TABLET_PATTERN.search(ua_string) or (device_family and _TABLET_PATTERN.search(device_family)):
        return "tablet"
    if device_family in _MOBILE_DEVICES or _MOBILE_PATTERN.search(ua_string):
        return "mobile"
    return None


def parse_user_agent(ua_string: str) -> ParsedUserAgent:
    """Parse a user-agent string into browser, OS, engine and device fields."""
    result = ua_parser.parse(ua_string).with_defaults()
    agent, operating_system, device = result.user_agent, result.os, result.device

    browser_family = _family(agent.family)
    browser = NamedVersion(
        name=BROWSER_FAMILY_NAMES.get(browser_family, browser_family) if browser_family else None,
        version=_join_version(agent.major, agent.minor, agent.patch, agent.patch_minor),
    )
    os_info = NamedVersion(
        name=_family(operating_system.family),
        version=_join_version(
            operating_system.major, operating_system.minor, operating_system.patch, operating_system.patch_minor
        ),
    )
    return ParsedUserAgent(
        browser=browser,
        os=os_info,
        engine=detect_engine(ua_string),
        device_type=detect_device_type(ua_string, _family(device.family)),
    )
