"""Locale detection from request paths.

The first path segment carries the locale (``/en/about``). Detection maps
that segment to a configured locale; redirection decides where to send a
request whose first segment is not a usable locale.
"""

from typing import List, Optional, Sequence

from multilang.logging import get_module_logger
from multilang.texts.models import LocaleTable

logger = get_module_logger()


def path_segments(path: str) -> List[str]:
    """Split a URL path into its non-empty segments."""
    return [segment for segment in path.split("/") if segment]


def localized_path(path: str, locale: Optional[str]) -> str:
    """Prefix a path with a locale segment; unchanged when locale is empty."""
    if locale:
        return f"{locale}/{path.lstrip('/')}"
    return path


class LocaleDetector:
    """Derives the active locale from path segments.

    Attributes:
        locale_table: Configured locales.
        default_locale: Fallback locale code.
    """

    def __init__(self, locale_table: LocaleTable, default_locale: Optional[str] = None):
        """Initialize the detector.

        Args:
            locale_table: Configured locales.
            default_locale: Fallback locale, defaults to the table's default.
        """
        self.locale_table = locale_table
        self.default_locale = default_locale or locale_table.default_locale
        self.log = logger.bind(default_locale=self.default_locale)

    def detect(self, segments: Sequence[str]) -> str:
        """Return the locale for the first segment, or the default locale.

        A configured segment resolves to its canonical locale when the table
        defines one, otherwise to the segment itself.
        """
        segment = segments[0] if segments else None
        if segment is not None and segment in self.locale_table:
            return self.locale_table[segment].canonical
        return self.default_locale

    def redirect_target(
        self, segments: Sequence[str], query_string: str = ""
    ) -> Optional[str]:
        """Return the path to redirect to, or None when no redirect is needed.

        - A two-character first segment that is not configured is replaced
          by the default locale (``/xx/page`` -> ``/en/page``).
        - Any other first segment, or none at all, gets the default locale
          prepended (``/page`` -> ``/en/page``).
        - A configured first segment needs no redirect.

        The query string, when present, is preserved.
        """
        segments = list(segments)
        segment = segments[0] if segments else ""

        if len(segment) == 2:
            if segment in self.locale_table:
                return None
            segments[0] = self.default_locale
            target = "/".join(segments)
        else:
            target = f"{self.default_locale}/" + "/".join(segments)

        if query_string:
            target = f"{target}?{query_string}"

        self.log.debug("locale_redirect_required", segment=segment, target=target)
        return f"/{target}"
