"""Tests for http_helpers.headers — header name constants and groups."""

from enum import StrEnum

import pytest

from http_helpers import headers as h

GROUPED = [
    (h.Auth.AUTHORIZATION, "Authorization"),
    (h.Auth.PROXY_AUTHORIZATION, "Proxy-Authorization"),
    (h.Auth.WWW_AUTHENTICATE, "WWW-Authenticate"),
    (h.Auth.PROXY_AUTHENTICATE, "Proxy-Authenticate"),
    (h.Cache.AGE, "Age"),
    (h.Cache.CACHE_CONTROL, "Cache-Control"),
    (h.Cache.CLEAR_SITE_DATA, "Clear-Site-Data"),
    (h.Cache.EXPIRES, "Expires"),
    (h.Cache.NO_VARY_SEARCH, "No-Vary-Search"),
    (h.Cache.PRAGMA, "Pragma"),
    (h.Cond.ETAG, "ETag"),
    (h.Cond.IF_MATCH, "If-Match"),
    (h.Cond.IF_NONE_MATCH, "If-None-Match"),
    (h.Cond.IF_MODIFIED_SINCE, "If-Modified-Since"),
    (h.Cond.IF_UNMODIFIED_SINCE, "If-Unmodified-Since"),
    (h.Cond.LAST_MODIFIED, "Last-Modified"),
    (h.Cond.VARY, "Vary"),
    (h.Conn.CONNECTION, "Connection"),
    (h.Conn.KEEP_ALIVE, "Keep-Alive"),
    (h.Negotiation.ACCEPT, "Accept"),
    (h.Negotiation.ACCEPT_ENCODING, "Accept-Encoding"),
    (h.Negotiation.ACCEPT_LANGUAGE, "Accept-Language"),
    (h.Negotiation.ACCEPT_PATCH, "Accept-Patch"),
    (h.Negotiation.ACCEPT_POST, "Accept-Post"),
    (h.Cookies.COOKIE, "Cookie"),
    (h.Cookies.SET_COOKIE, "Set-Cookie"),
    (h.CORS.ALLOW_CREDENTIALS, "Access-Control-Allow-Credentials"),
    (h.CORS.ALLOW_HEADERS, "Access-Control-Allow-Headers"),
    (h.CORS.ALLOW_METHODS, "Access-Control-Allow-Methods"),
    (h.CORS.ALLOW_ORIGIN, "Access-Control-Allow-Origin"),
    (h.CORS.EXPOSE_HEADERS, "Access-Control-Expose-Headers"),
    (h.CORS.MAX_AGE, "Access-Control-Max-Age"),
    (h.CORS.REQUEST_HEADERS, "Access-Control-Request-Headers"),
    (h.CORS.REQUEST_METHOD, "Access-Control-Request-Method"),
    (h.CORS.ORIGIN, "Origin"),
    (h.CORS.TIMING_ALLOW_ORIGIN, "Timing-Allow-Origin"),
    (h.Content.DISPOSITION, "Content-Disposition"),
    (h.Content.ENCODING, "Content-Encoding"),
    (h.Content.LANGUAGE, "Content-Language"),
    (h.Content.LENGTH, "Content-Length"),
    (h.Content.LOCATION, "Content-Location"),
    (h.Content.TYPE, "Content-Type"),
    (h.Content.RANGE, "Content-Range"),
    (h.Ranges.ACCEPT_RANGES, "Accept-Ranges"),
    (h.Ranges.CONTENT_RANGE, "Content-Range"),
    (h.Ranges.IF_RANGE, "If-Range"),
    (h.Ranges.RANGE, "Range"),
    (h.Redirect.LOCATION, "Location"),
    (h.Redirect.REFRESH, "Refresh"),
    (h.RequestContext.FROM, "From"),
    (h.RequestContext.HOST, "Host"),
    (h.RequestContext.REFERER, "Referer"),
    (h.RequestContext.REFERRER_POLICY, "Referrer-Policy"),
    (h.RequestContext.USER_AGENT, "User-Agent"),
    (h.ResponseContext.ALLOW, "Allow"),
    (h.ResponseContext.SERVER, "Server"),
    (h.Security.CSP, "Content-Security-Policy"),
    (h.Security.CSP_REPORT_ONLY, "Content-Security-Policy-Report-Only"),
    (h.Security.COEP, "Cross-Origin-Embedder-Policy"),
    (h.Security.COOP, "Cross-Origin-Opener-Policy"),
    (h.Security.CORP, "Cross-Origin-Resource-Policy"),
    (h.Security.PERMISSIONS_POLICY, "Permissions-Policy"),
    (h.Security.HSTS, "Strict-Transport-Security"),
    (h.Security.UPGRADE_INSECURE_REQUESTS, "Upgrade-Insecure-Requests"),
    (h.Security.X_CONTENT_TYPE_OPTIONS, "X-Content-Type-Options"),
    (h.Security.X_FRAME_OPTIONS, "X-Frame-Options"),
    (h.Security.X_XSS_PROTECTION, "X-XSS-Protection"),
    (h.WS.ACCEPT, "Sec-WebSocket-Accept"),
    (h.WS.EXTENSIONS, "Sec-WebSocket-Extensions"),
    (h.WS.KEY, "Sec-WebSocket-Key"),
    (h.WS.PROTOCOL, "Sec-WebSocket-Protocol"),
    (h.WS.VERSION, "Sec-WebSocket-Version"),
]


def _constants() -> dict[str, str]:
    return {name: value for name, value in vars(h).items() if name.isupper() and isinstance(value, str)}


class TestGroupedHeaders:
    @pytest.mark.parametrize(("member", "expected"), GROUPED, ids=lambda v: str(v))
    def test_value(self, member: StrEnum, expected: str) -> None:
        assert member == expected
        assert str(member) == expected
        assert f"{member}" == expected

    def test_every_member_covered(self) -> None:
        listed = {(type(member), member.name) for member, _ in GROUPED}
        declared = {(group, member.name) for group in h.GROUPS.values() for member in group}
        assert listed == declared

    def test_groups_registry(self) -> None:
        assert set(h.GROUPS) == {
            "Auth",
            "Cache",
            "Cond",
            "Conn",
            "Negotiation",
            "Cookies",
            "CORS",
            "Content",
            "Ranges",
            "Redirect",
            "RequestContext",
            "ResponseContext",
            "Security",
            "WS",
        }
        assert h.GROUPS["CORS"] is h.CORS

    def test_groups_registry_read_only(self) -> None:
        with pytest.raises(TypeError):
            h.GROUPS["Extra"] = h.Auth  # type: ignore[index]

    def test_group_members_are_catalog_values(self) -> None:
        for group in h.GROUPS.values():
            for member in group:
                assert member.value in h.ALL_HEADERS

    def test_iterating_a_group(self) -> None:
        assert [str(name) for name in h.Cookies] == ["Cookie", "Set-Cookie"]

    def test_usable_as_dict_key(self) -> None:
        fields = {h.Content.TYPE: "text/html"}
        assert fields["Content-Type"] == "text/html"


class TestDirectConstants:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (h.AUTHORIZATION, "Authorization"),
            (h.CONTENT_TYPE, "Content-Type"),
            (h.CACHE_CONTROL, "Cache-Control"),
            (h.USER_AGENT, "User-Agent"),
            (h.SET_COOKIE, "Set-Cookie"),
            (h.ACCESS_CONTROL_ALLOW_ORIGIN, "Access-Control-Allow-Origin"),
            (h.STRICT_TRANSPORT_SECURITY, "Strict-Transport-Security"),
            (h.X_FORWARDED_FOR, "X-Forwarded-For"),
            (h.SOURCE_MAP, "SourceMap"),
            (h.SEC_CH_UA_WOW64, "Sec-CH-UA-WoW64"),
            (h.TE, "TE"),
            (h.TK, "Tk"),
        ],
    )
    def test_value(self, value: str, expected: str) -> None:
        assert value == expected

    def test_values_unique(self) -> None:
        constants = _constants()
        assert len(set(constants.values())) == len(constants)

    def test_all_headers_matches_constants(self) -> None:
        assert h.ALL_HEADERS == frozenset(_constants().values())

    def test_catalog_size(self) -> None:
        assert len(h.ALL_HEADERS) == 143

    def test_no_surrounding_whitespace_or_colons(self) -> None:
        for value in h.ALL_HEADERS:
            assert value == value.strip()
            assert ":" not in value
            assert " " not in value
