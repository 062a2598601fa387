"""Locale resolution logic for determining user's preferred language.

Parses the Accept-Language header into ranked preferences and negotiates
the best supported locale, falling back to a configured default.
"""

import math
from typing import List, Optional, Sequence

from core.logging import get_module_logger
from infrastructure.i18n.exceptions import InvalidConfigurationError
from infrastructure.i18n.models import PreferenceEntry, language_of

logger = get_module_logger()


def _parse_quality(raw: str) -> Optional[float]:
    try:
        quality = float(raw)
    except ValueError:
        return None
    if not math.isfinite(quality):
        return None
    return min(max(quality, 0.0), 1.0)


def parse_accept_language(header: Optional[str]) -> List[PreferenceEntry]:
    """Parse an Accept-Language header into preferences ordered by quality.

    Parses "fr-FR;q=0.7,en-US;q=0.9" -> [(en-us, 0.9), (fr-fr, 0.7)]. Equal
    qualities keep their header order. A `q` value that is not a finite number
    gets quality 0.0 and `valid=False`; the entry still takes part in matching.

    Args:
        header: Raw Accept-Language header value.

    Returns:
        List of PreferenceEntry, highest quality first.
    """
    if not header:
        return []

    preferences = []
    for part in header.split(","):
        params = part.split(";")
        code = params[0].strip().lower()
        if not code:
            continue

        quality = 1.0
        valid = True
        for param in params[1:]:
            name, _, value = param.partition("=")
            if name.strip().lower() != "q":
                continue
            value = value.strip()
            # An empty q= counts as absent; only the first q parameter is read
            if value:
                parsed = _parse_quality(value)
                if parsed is None:
                    logger.warning(
                        "malformed_quality_value", language_range=code, value=value
                    )
                    quality, valid = 0.0, False
                else:
                    quality = parsed
            break

        preferences.append(PreferenceEntry(code=code, quality=quality, valid=valid))

    # sorted() is stable, so equal qualities keep header order
    return sorted(preferences, key=lambda entry: entry.quality, reverse=True)


def select_locale(
    header: Optional[str],
    supported: Sequence[str],
    fallback: str,
) -> str:
    """Select the best supported locale for an Accept-Language header.

    For each preference in quality order, an exact (case-insensitive) match
    wins; otherwise the first supported locale starting with the preference's
    base language wins. Supported tags are returned in their configured casing.

    Args:
        header: Accept-Language header value.
        supported: Supported locale tags in priority order.
        fallback: Locale returned when nothing matches.

    Returns:
        Matching supported locale, or fallback.
    """
    preferences = parse_accept_language(header)
    if not preferences:
        return fallback

    match = LanguageNegotiator.find_best_match(
        [entry.code for entry in preferences], supported
    )
    return match if match is not None else fallback


class LanguageNegotiator:
    """Negotiates a request locale against a fixed set of supported locales.

    Attributes:
        supported_locales: Supported locale tags in priority order.
        default_locale: Fallback when no preference matches.
    """

    def __init__(self, supported_locales: Sequence[str], default_locale: str):
        """Initialize language negotiator.

        Args:
            supported_locales: Supported locale tags in priority order.
            default_locale: Fallback locale; must be one of supported_locales.

        Raises:
            InvalidConfigurationError: If supported_locales is empty or does
                not contain default_locale.
        """
        if not supported_locales:
            raise InvalidConfigurationError("At least one supported locale is required")
        if default_locale not in supported_locales:
            raise InvalidConfigurationError(
                f"Default locale '{default_locale}' is not in supported locales: "
                f"{list(supported_locales)}"
            )
        self.supported_locales = tuple(supported_locales)
        self.default_locale = default_locale
        self.log = logger.bind(default_locale=default_locale)

    def select(self, accept_language: Optional[str]) -> str:
        """Resolve locale from an Accept-Language header value.

        Args:
            accept_language: Accept-Language header value.

        Returns:
            Resolved locale tag, or the default if none match.
        """
        locale = select_locale(
            accept_language, self.supported_locales, self.default_locale
        )
        self.log.debug(
            "resolved_from_header", accept_language=accept_language, locale=locale
        )
        return locale

    @staticmethod
    def matches_language(
        requested: str,
        available: str,
        strict: bool = False,
    ) -> bool:
        """Check if available language matches requested language.

        Args:
            requested: Requested language tag (e.g., "fr-CA").
            available: Available language tag (e.g., "fr-FR").
            strict: If True, requires exact match. If False, also accepts an
                available tag starting with the requested base language.

        Returns:
            True if languages match.
        """
        if requested.lower() == available.lower():
            return True

        if strict:
            return False

        return available.lower().startswith(language_of(requested))

    @staticmethod
    def find_best_match(
        requested: Sequence[str],
        available: Sequence[str],
        default: Optional[str] = None,
    ) -> Optional[str]:
        """Find best matching language from available options.

        Args:
            requested: Requested language tags in preference order.
            available: Available language tags in priority order.
            default: Default if no match found.

        Returns:
            Best matching language from available, or default if no match.
        """
        for req_lang in requested:
            # Try exact match first
            for avail_lang in available:
                if LanguageNegotiator.matches_language(
                    req_lang, avail_lang, strict=True
                ):
                    return avail_lang

            # Then the first available tag sharing the base language
            for avail_lang in available:
                if LanguageNegotiator.matches_language(
                    req_lang, avail_lang, strict=False
                ):
                    return avail_lang

        return default
