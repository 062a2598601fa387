"""Custom exceptions for the i18n system.

Per-request lookups never raise: a missing translation degrades to the key.
These exceptions cover construction-time configuration problems and the
opt-in strict catalog mode.
"""

from typing import Optional


class I18nError(Exception):
    """Base exception for all i18n errors.

    Example:
        try:
            factory = create_intl(messages, default_locale="en-US")
        except I18nError as e:
            logger.error("intl_setup_failed", error=str(e))
    """

    pass


class MissingLocaleError(I18nError):
    """Raised in strict mode when no catalog exists for the selected locale
    or the default locale.

    Attributes:
        locale: The locale that had no catalog.
        default_locale: The default locale that was also missing, if known.
    """

    def __init__(self, locale: str, default_locale: Optional[str] = None):
        self.locale = locale
        self.default_locale = default_locale
        message = f"No message catalog for locale '{locale}'"
        if default_locale and default_locale != locale:
            message += f" or default locale '{default_locale}'"
        super().__init__(message)


class InvalidCatalogError(I18nError, ValueError):
    """Raised when catalog content contains something other than nested
    mappings and string leaves.
    """

    pass


class InvalidNamespaceError(I18nError, ValueError):
    """Raised when a namespace does not resolve to a subtree of the catalog."""

    pass


class InvalidConfigurationError(I18nError, ValueError):
    """Raised when the supported locales or default locale are inconsistent."""

    pass
