"""Constants used in the project."""

from enum import Enum
from types import MappingProxyType


class Family(Enum):
    """Canonical browser families used for matching.

    Args:
        Enum (string): Family name as browserslist spells it.
    """

    ANDROID = "Android"
    BLACKBERRY = "BlackBerry"
    CHROME = "Chrome"
    EXPLORER = "Explorer"
    EXPLORER_MOBILE = "ExplorerMobile"
    FIREFOX = "Firefox"
    IOS = "iOS"
    OPERA_MINI = "OperaMini"
    OPERA_MOBILE = "OperaMobile"
    QQ_ANDROID = "QQAndroid"
    SAMSUNG = "Samsung"
    UC_ANDROID = "UCAndroid"


class Engine(Enum):
    """Rendering engines detected from a user-agent string.

    Args:
        Enum (string): Engine name.
    """

    BLINK = "Blink"
    EDGE_HTML = "EdgeHTML"
    GECKO = "Gecko"
    PRESTO = "Presto"
    TRIDENT = "Trident"
    WEBKIT = "WebKit"


# Equivalent browser names, see https://github.com/ai/browserslist/issues/156
# Key order is significant: query rewriting tries the keys in this order.
BROWSER_NAME_MAP = MappingProxyType({
    "bb": Family.BLACKBERRY.value,
    "and_chr": Family.CHROME.value,
    "ChromeAndroid": Family.CHROME.value,
    "FirefoxAndroid": Family.FIREFOX.value,
    "ff": Family.FIREFOX.value,
    "ie_mob": Family.EXPLORER_MOBILE.value,
    "ie": Family.EXPLORER.value,
    "and_ff": Family.FIREFOX.value,
    "ios_saf": Family.IOS.value,
    "op_mini": Family.OPERA_MINI.value,
    "op_mob": Family.OPERA_MOBILE.value,
    "and_qq": Family.QQ_ANDROID.value,
    "and_uc": Family.UC_ANDROID.value,
})


class Constants:  # pylint: disable=too-few-public-methods
    """General constants used in the project.
    Data holder for configuration constants; not intended to provide behavior.
    """

    DEFAULT_IGNORE_MINOR = False
    DEFAULT_IGNORE_PATCH = True
    DEFAULT_ALLOW_HIGHER_VERSIONS = False

    # browserslist query results that carry no numeric version
    TECHNOLOGY_PREVIEW = "TP"

    BROWSERSLIST_COMMAND = ["npx", "browserslist"]
    BROWSERSLIST_TIMEOUT = None  # seconds; None blocks until the tool exits
    QUERY_SEPARATOR = ", "

    ENV_BROWSERSLIST_COMMAND = "BROWSERSLIST_UA_COMMAND"
    ENV_BROWSERSLIST_TIMEOUT = "BROWSERSLIST_UA_TIMEOUT"
    ENV_LOG_LEVEL = "BROWSERSLIST_UA_LOG_LEVEL"

    LOG_FORMAT = "[%(levelname)s] %(message)s"
    DEFAULT_LOG_LEVEL = "WARNING"

    CHROME_BROWSERS = frozenset(["Chrome", "Chromium", "Chrome WebView", "Chrome Headless"])
