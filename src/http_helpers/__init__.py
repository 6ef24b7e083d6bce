"""http-helpers — typed query parameter extraction and HTTP header names.

Query values come out typed, with a default whenever a parameter is
missing, empty, or malformed::

    from http_helpers import Request, query

    async def app(scope, receive, send):
        request = Request.from_asgi(scope)
        page = query.get_int(request, "page", 1)
        tags = query.get_list(request, "tag")
        ...

Header names are plain constants, also grouped by context::

    from http_helpers import headers as h

    h.CONTENT_TYPE  # "Content-Type"
    h.CORS.ALLOW_ORIGIN  # "Access-Control-Allow-Origin"
"""

# Declare free-threading support (PEP 703)
_Py_mod_gil = 0

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "Headers",
    "HttpHelpersError",
    "MultiValueMapping",
    "QueryConfig",
    "QueryParams",
    "Request",
    "headers",
    "query",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import http_helpers`` fast while providing a clean top-level API.
    """
    if name in ("headers", "query"):
        import importlib

        return importlib.import_module(f"http_helpers.{name}")

    if name == "Request":
        from http_helpers.http.request import Request

        return Request

    if name == "QueryParams":
        from http_helpers.http.query import QueryParams

        return QueryParams

    if name == "Headers":
        from http_helpers.http.headers import Headers

        return Headers

    if name == "MultiValueMapping":
        from http_helpers._internal.multimap import MultiValueMapping

        return MultiValueMapping

    if name == "QueryConfig":
        from http_helpers.config import QueryConfig

        return QueryConfig

    if name in ("ConfigurationError", "HttpHelpersError"):
        from http_helpers import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
