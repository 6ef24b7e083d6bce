"""http-helpers exception hierarchy.

Extraction functions never raise; these types cover the places where a
caller hands the library something it cannot work with.
"""


class HttpHelpersError(Exception):
    """Base for all http-helpers errors."""


class ConfigurationError(HttpHelpersError):
    """Raised when a configuration object is invalid.

    Raised at construction time (e.g. ``QueryConfig(separators="")``),
    never during value extraction.
    """
