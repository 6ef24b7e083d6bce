"""HTTP header names, as flat constants and as grouped enums.

Names and spellings follow the MDN HTTP header reference
(https://developer.mozilla.org/en-US/docs/Web/HTTP/Headers).

Direct access::

    from http_helpers import headers as h

    h.CONTENT_TYPE  # "Content-Type"
    h.STRICT_TRANSPORT_SECURITY  # "Strict-Transport-Security"

Grouped access, for discoverability. Group members are ``StrEnum``
values, so they compare equal to (and format as) the plain strings::

    h.CORS.ALLOW_ORIGIN  # "Access-Control-Allow-Origin"
    h.Security.HSTS  # "Strict-Transport-Security"
    [str(name) for name in h.Cookies]  # ["Cookie", "Set-Cookie"]
"""

from enum import StrEnum
from types import MappingProxyType

# Authentication
AUTHORIZATION = "Authorization"
PROXY_AUTHORIZATION = "Proxy-Authorization"
WWW_AUTHENTICATE = "WWW-Authenticate"
PROXY_AUTHENTICATE = "Proxy-Authenticate"

# Caching
AGE = "Age"
CACHE_CONTROL = "Cache-Control"
CLEAR_SITE_DATA = "Clear-Site-Data"
EXPIRES = "Expires"
NO_VARY_SEARCH = "No-Vary-Search"

# Conditionals
ETAG = "ETag"
IF_MATCH = "If-Match"
IF_NONE_MATCH = "If-None-Match"
IF_MODIFIED_SINCE = "If-Modified-Since"
IF_UNMODIFIED_SINCE = "If-Unmodified-Since"
LAST_MODIFIED = "Last-Modified"
VARY = "Vary"

# Connection management
CONNECTION = "Connection"
KEEP_ALIVE = "Keep-Alive"

# Content negotiation
ACCEPT = "Accept"
ACCEPT_ENCODING = "Accept-Encoding"
ACCEPT_LANGUAGE = "Accept-Language"
ACCEPT_PATCH = "Accept-Patch"
ACCEPT_POST = "Accept-Post"

# Controls
EXPECT = "Expect"
MAX_FORWARDS = "Max-Forwards"

# Cookies
COOKIE = "Cookie"
SET_COOKIE = "Set-Cookie"

# CORS
ACCESS_CONTROL_ALLOW_CREDENTIALS = "Access-Control-Allow-Credentials"
ACCESS_CONTROL_ALLOW_HEADERS = "Access-Control-Allow-Headers"
ACCESS_CONTROL_ALLOW_METHODS = "Access-Control-Allow-Methods"
ACCESS_CONTROL_ALLOW_ORIGIN = "Access-Control-Allow-Origin"
ACCESS_CONTROL_EXPOSE_HEADERS = "Access-Control-Expose-Headers"
ACCESS_CONTROL_MAX_AGE = "Access-Control-Max-Age"
ACCESS_CONTROL_REQUEST_HEADERS = "Access-Control-Request-Headers"
ACCESS_CONTROL_REQUEST_METHOD = "Access-Control-Request-Method"
ORIGIN = "Origin"
TIMING_ALLOW_ORIGIN = "Timing-Allow-Origin"

# Downloads
CONTENT_DISPOSITION = "Content-Disposition"

# Integrity digests
CONTENT_DIGEST = "Content-Digest"
REPR_DIGEST = "Repr-Digest"
WANT_CONTENT_DIGEST = "Want-Content-Digest"
WANT_REPR_DIGEST = "Want-Repr-Digest"

# Message body information
CONTENT_ENCODING = "Content-Encoding"
CONTENT_LANGUAGE = "Content-Language"
CONTENT_LENGTH = "Content-Length"
CONTENT_LOCATION = "Content-Location"
CONTENT_TYPE = "Content-Type"

# Preferences
PREFER = "Prefer"
PREFERENCE_APPLIED = "Preference-Applied"

# Proxies
FORWARDED = "Forwarded"
VIA = "Via"

# Range requests
ACCEPT_RANGES = "Accept-Ranges"
CONTENT_RANGE = "Content-Range"
IF_RANGE = "If-Range"
RANGE = "Range"

# Redirects
LOCATION = "Location"
REFRESH = "Refresh"

# Request context
FROM = "From"
HOST = "Host"
REFERER = "Referer"
REFERRER_POLICY = "Referrer-Policy"
USER_AGENT = "User-Agent"

# Response context
ALLOW = "Allow"
SERVER = "Server"

# Security
CONTENT_SECURITY_POLICY = "Content-Security-Policy"
CONTENT_SECURITY_POLICY_REPORT_ONLY = "Content-Security-Policy-Report-Only"
CROSS_ORIGIN_EMBEDDER_POLICY = "Cross-Origin-Embedder-Policy"
CROSS_ORIGIN_OPENER_POLICY = "Cross-Origin-Opener-Policy"
CROSS_ORIGIN_RESOURCE_POLICY = "Cross-Origin-Resource-Policy"
PERMISSIONS_POLICY = "Permissions-Policy"
REPORTING_ENDPOINTS = "Reporting-Endpoints"
STRICT_TRANSPORT_SECURITY = "Strict-Transport-Security"
UPGRADE_INSECURE_REQUESTS = "Upgrade-Insecure-Requests"
X_CONTENT_TYPE_OPTIONS = "X-Content-Type-Options"
X_FRAME_OPTIONS = "X-Frame-Options"
X_PERMITTED_CROSS_DOMAIN_POLICIES = "X-Permitted-Cross-Domain-Policies"
X_POWERED_BY = "X-Powered-By"
X_XSS_PROTECTION = "X-XSS-Protection"

# Fetch metadata
SEC_FETCH_DEST = "Sec-Fetch-Dest"
SEC_FETCH_MODE = "Sec-Fetch-Mode"
SEC_FETCH_SITE = "Sec-Fetch-Site"
SEC_FETCH_USER = "Sec-Fetch-User"
SEC_PURPOSE = "Sec-Purpose"

# Fetch storage access
SEC_FETCH_STORAGE_ACCESS = "Sec-Fetch-Storage-Access"
ACTIVATE_STORAGE_ACCESS = "Activate-Storage-Access"

# Reporting
REPORT_TO = "Report-To"

# Transfer coding
TE = "TE"
TRAILER = "Trailer"
TRANSFER_ENCODING = "Transfer-Encoding"

# WebSockets
SEC_WEBSOCKET_ACCEPT = "Sec-WebSocket-Accept"
SEC_WEBSOCKET_EXTENSIONS = "Sec-WebSocket-Extensions"
SEC_WEBSOCKET_KEY = "Sec-WebSocket-Key"
SEC_WEBSOCKET_PROTOCOL = "Sec-WebSocket-Protocol"
SEC_WEBSOCKET_VERSION = "Sec-WebSocket-Version"

# Other
ALT_SVC = "Alt-Svc"
ALT_USED = "Alt-Used"
DATE = "Date"
LINK = "Link"
RETRY_AFTER = "Retry-After"
SERVER_TIMING = "Server-Timing"
SERVICE_WORKER = "Service-Worker"
SERVICE_WORKER_ALLOWED = "Service-Worker-Allowed"
SERVICE_WORKER_NAVIGATION_PRELOAD = "Service-Worker-Navigation-Preload"
SOURCE_MAP = "SourceMap"
UPGRADE = "Upgrade"
PRIORITY = "Priority"

# Client hints
ACCEPT_CH = "Accept-CH"
CRITICAL_CH = "Critical-CH"
SEC_CH_UA = "Sec-CH-UA"
SEC_CH_UA_ARCH = "Sec-CH-UA-Arch"
SEC_CH_UA_BITNESS = "Sec-CH-UA-Bitness"
SEC_CH_UA_FORM_FACTORS = "Sec-CH-UA-Form-Factors"
SEC_CH_UA_FULL_VERSION = "Sec-CH-UA-Full-Version"
SEC_CH_UA_FULL_VERSION_LIST = "Sec-CH-UA-Full-Version-List"
SEC_CH_UA_MOBILE = "Sec-CH-UA-Mobile"
SEC_CH_UA_MODEL = "Sec-CH-UA-Model"
SEC_CH_UA_PLATFORM = "Sec-CH-UA-Platform"
SEC_CH_UA_PLATFORM_VERSION = "Sec-CH-UA-Platform-Version"
SEC_CH_UA_WOW64 = "Sec-CH-UA-WoW64"
SEC_CH_PREFERS_COLOR_SCHEME = "Sec-CH-Prefers-Color-Scheme"
SEC_CH_PREFERS_REDUCED_MOTION = "Sec-CH-Prefers-Reduced-Motion"
SEC_CH_PREFERS_REDUCED_TRANSPARENCY = "Sec-CH-Prefers-Reduced-Transparency"
SEC_CH_DEVICE_MEMORY = "Sec-CH-Device-Memory"
SEC_CH_DPR = "Sec-CH-DPR"
SEC_CH_VIEWPORT_HEIGHT = "Sec-CH-Viewport-Height"
SEC_CH_VIEWPORT_WIDTH = "Sec-CH-Viewport-Width"
DOWNLINK = "Downlink"
ECT = "ECT"
RTT = "RTT"
SAVE_DATA = "Save-Data"

# Compression dictionary transport
AVAILABLE_DICTIONARY = "Available-Dictionary"
DICTIONARY_ID = "Dictionary-ID"
USE_AS_DICTIONARY = "Use-As-Dictionary"

# Privacy
DNT = "DNT"
TK = "Tk"
SEC_GPC = "Sec-GPC"

# Non-standard but common
X_FORWARDED_FOR = "X-Forwarded-For"
X_FORWARDED_HOST = "X-Forwarded-Host"
X_FORWARDED_PROTO = "X-Forwarded-Proto"
X_DNS_PREFETCH_CONTROL = "X-DNS-Prefetch-Control"
X_ROBOTS_TAG = "X-Robots-Tag"

# Deprecated
PRAGMA = "Pragma"
WARNING = "Warning"


ALL_HEADERS: frozenset[str] = frozenset(
    value for name, value in globals().items() if name.isupper() and isinstance(value, str)
)


# -- Groups --


class Auth(StrEnum):
    """Authentication headers."""

    AUTHORIZATION = AUTHORIZATION
    PROXY_AUTHORIZATION = PROXY_AUTHORIZATION
    WWW_AUTHENTICATE = WWW_AUTHENTICATE
    PROXY_AUTHENTICATE = PROXY_AUTHENTICATE


class Cache(StrEnum):
    """Caching headers, including the deprecated ``Pragma``."""

    AGE = AGE
    CACHE_CONTROL = CACHE_CONTROL
    CLEAR_SITE_DATA = CLEAR_SITE_DATA
    EXPIRES = EXPIRES
    NO_VARY_SEARCH = NO_VARY_SEARCH
    PRAGMA = PRAGMA


class Cond(StrEnum):
    """Conditional request headers."""

    ETAG = ETAG
    IF_MATCH = IF_MATCH
    IF_NONE_MATCH = IF_NONE_MATCH
    IF_MODIFIED_SINCE = IF_MODIFIED_SINCE
    IF_UNMODIFIED_SINCE = IF_UNMODIFIED_SINCE
    LAST_MODIFIED = LAST_MODIFIED
    VARY = VARY


class Conn(StrEnum):
    """Connection management headers."""

    CONNECTION = CONNECTION
    KEEP_ALIVE = KEEP_ALIVE


class Negotiation(StrEnum):
    """Content negotiation headers."""

    ACCEPT = ACCEPT
    ACCEPT_ENCODING = ACCEPT_ENCODING
    ACCEPT_LANGUAGE = ACCEPT_LANGUAGE
    ACCEPT_PATCH = ACCEPT_PATCH
    ACCEPT_POST = ACCEPT_POST


class Cookies(StrEnum):
    COOKIE = COOKIE
    SET_COOKIE = SET_COOKIE


class CORS(StrEnum):
    """Cross-Origin Resource Sharing headers.

    Member names drop the ``Access-Control-`` prefix.
    """

    ALLOW_CREDENTIALS = ACCESS_CONTROL_ALLOW_CREDENTIALS
    ALLOW_HEADERS = ACCESS_CONTROL_ALLOW_HEADERS
    ALLOW_METHODS = ACCESS_CONTROL_ALLOW_METHODS
    ALLOW_ORIGIN = ACCESS_CONTROL_ALLOW_ORIGIN
    EXPOSE_HEADERS = ACCESS_CONTROL_EXPOSE_HEADERS
    MAX_AGE = ACCESS_CONTROL_MAX_AGE
    REQUEST_HEADERS = ACCESS_CONTROL_REQUEST_HEADERS
    REQUEST_METHOD = ACCESS_CONTROL_REQUEST_METHOD
    ORIGIN = ORIGIN
    TIMING_ALLOW_ORIGIN = TIMING_ALLOW_ORIGIN


class Content(StrEnum):
    """``Content-*`` headers. Member names drop the ``Content-`` prefix."""

    DISPOSITION = CONTENT_DISPOSITION
    ENCODING = CONTENT_ENCODING
    LANGUAGE = CONTENT_LANGUAGE
    LENGTH = CONTENT_LENGTH
    LOCATION = CONTENT_LOCATION
    TYPE = CONTENT_TYPE
    RANGE = CONTENT_RANGE


class Ranges(StrEnum):
    """Range request headers."""

    ACCEPT_RANGES = ACCEPT_RANGES
    CONTENT_RANGE = CONTENT_RANGE
    IF_RANGE = IF_RANGE
    RANGE = RANGE


class Redirect(StrEnum):
    LOCATION = LOCATION
    REFRESH = REFRESH


class RequestContext(StrEnum):
    """Headers describing who sent a request and from where."""

    FROM = FROM
    HOST = HOST
    REFERER = REFERER
    REFERRER_POLICY = REFERRER_POLICY
    USER_AGENT = USER_AGENT


class ResponseContext(StrEnum):
    ALLOW = ALLOW
    SERVER = SERVER


class Security(StrEnum):
    """Security policy headers, with the usual short names (CSP, HSTS, ...)."""

    CSP = CONTENT_SECURITY_POLICY
    CSP_REPORT_ONLY = CONTENT_SECURITY_POLICY_REPORT_ONLY
    COEP = CROSS_ORIGIN_EMBEDDER_POLICY
    COOP = CROSS_ORIGIN_OPENER_POLICY
    CORP = CROSS_ORIGIN_RESOURCE_POLICY
    PERMISSIONS_POLICY = PERMISSIONS_POLICY
    HSTS = STRICT_TRANSPORT_SECURITY
    UPGRADE_INSECURE_REQUESTS = UPGRADE_INSECURE_REQUESTS
    X_CONTENT_TYPE_OPTIONS = X_CONTENT_TYPE_OPTIONS
    X_FRAME_OPTIONS = X_FRAME_OPTIONS
    X_XSS_PROTECTION = X_XSS_PROTECTION


class WS(StrEnum):
    """WebSocket handshake headers. Member names drop ``Sec-WebSocket-``."""

    ACCEPT = SEC_WEBSOCKET_ACCEPT
    EXTENSIONS = SEC_WEBSOCKET_EXTENSIONS
    KEY = SEC_WEBSOCKET_KEY
    PROTOCOL = SEC_WEBSOCKET_PROTOCOL
    VERSION = SEC_WEBSOCKET_VERSION


GROUPS: MappingProxyType[str, type[StrEnum]] = MappingProxyType(
    {
        group.__name__: group
        for group in (
            Auth,
            Cache,
            Cond,
            Conn,
            Negotiation,
            Cookies,
            CORS,
            Content,
            Ranges,
            Redirect,
            RequestContext,
            ResponseContext,
            Security,
            WS,
        )
    }
)
