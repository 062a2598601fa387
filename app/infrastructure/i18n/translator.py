"""Translation service for retrieving and interpolating translated messages.

Resolves dotted key paths inside a catalog, substitutes `{name}`
placeholders, and selects per-locale catalogs with default-locale fallback.
"""

import re
from typing import Any, Dict, Mapping, Optional, Union

from core.logging import get_module_logger
from infrastructure.i18n.exceptions import MissingLocaleError
from infrastructure.i18n.models import (
    KEY_SEPARATOR,
    MessageLeaf,
    ResolutionResult,
    TranslationCatalog,
)

logger = get_module_logger()

PLACEHOLDER_PATTERN = re.compile(r"\{(\w+)\}")

CatalogSource = Union[TranslationCatalog, Mapping[str, Any]]


def resolve(
    catalog: TranslationCatalog,
    namespace: Optional[str],
    key: str,
) -> ResolutionResult:
    """Look up a key, optionally under a namespace.

    Args:
        catalog: Catalog to search.
        namespace: Optional dotted subtree path prefixed to key.
        key: Dotted message key.

    Returns:
        ResolutionResult with the message, or with the full looked-up path
        when the path is missing or names a subtree instead of a message.
    """
    full_path = f"{namespace}{KEY_SEPARATOR}{key}" if namespace else key
    entry = catalog.find(full_path)
    if isinstance(entry, MessageLeaf):
        return ResolutionResult(found=True, value=entry.value)
    return ResolutionResult(found=False, value=full_path)


def resolve_message(
    catalog: TranslationCatalog,
    namespace: Optional[str],
    key: str,
) -> ResolutionResult:
    """Resolve a key for display to a caller.

    Same as resolve(), except that a miss under a namespace reports the key
    as given so the namespace never shows up in user-facing text.
    """
    result = resolve(catalog, namespace, key)
    if not result.found and namespace:
        return ResolutionResult(found=False, value=key)
    return result


def interpolate(template: str, params: Optional[Mapping[str, Any]] = None) -> str:
    """Perform placeholder substitution in a message string.

    Replaces each {name} with str(params[name]). Placeholders whose value is
    missing or None are left as written. Substituted text is not scanned again.

    Args:
        template: Message string with {name} placeholders.
        params: Mapping of placeholder name -> value.

    Returns:
        Message with placeholders substituted.
    """
    if not params:
        return template

    def _replace(match: "re.Match[str]") -> str:
        value = params.get(match.group(1))
        if value is None:
            return match.group(0)
        return str(value)

    return PLACEHOLDER_PATTERN.sub(_replace, template)


class Translator:
    """Selects the message catalog for a request locale.

    Holds one immutable catalog per locale and picks the catalog for a
    request locale, falling back to the default locale's catalog.

    Attributes:
        catalogs: Catalogs by locale tag.
        fallback_locale: Locale whose catalog is used when the requested one is missing.
        strict: When True, a locale with no catalog and no fallback catalog raises
            MissingLocaleError instead of using an empty catalog.
    """

    def __init__(
        self,
        catalogs: Mapping[str, CatalogSource],
        fallback_locale: str,
        strict: bool = False,
    ):
        """Initialize Translator.

        Args:
            catalogs: Mapping of locale tag to TranslationCatalog or nested dict.
                Dicts are compiled into catalogs once, here.
            fallback_locale: Default locale.
            strict: Raise instead of falling back to an empty catalog.

        Raises:
            InvalidCatalogError: If a dict catalog contains non-string leaves.
        """
        self.fallback_locale = fallback_locale
        self.strict = strict
        self.catalogs: Dict[str, TranslationCatalog] = {
            locale: _compile(locale, source) for locale, source in catalogs.items()
        }
        self._empty = TranslationCatalog.empty(fallback_locale)
        logger.info(
            "initialized_translator",
            fallback_locale=fallback_locale,
            locales=list(self.catalogs),
            strict=strict,
        )

    def get_catalog(self, locale: str) -> TranslationCatalog:
        """Get the catalog to use for a locale.

        Args:
            locale: Locale tag selected for the request.

        Returns:
            The locale's catalog, else the fallback locale's, else an empty one.

        Raises:
            MissingLocaleError: In strict mode, when neither catalog exists.
        """
        catalog = self.catalogs.get(locale)
        if catalog is not None:
            return catalog

        catalog = self.catalogs.get(self.fallback_locale)
        if catalog is not None:
            logger.info(
                "used_fallback_catalog",
                requested_locale=locale,
                fallback_locale=self.fallback_locale,
            )
            return catalog

        if self.strict:
            logger.error(
                "catalog_not_found",
                locale=locale,
                fallback_locale=self.fallback_locale,
            )
            raise MissingLocaleError(locale, self.fallback_locale)

        logger.warning(
            "used_empty_catalog",
            requested_locale=locale,
            fallback_locale=self.fallback_locale,
        )
        return self._empty


def translate_with(
    catalog: TranslationCatalog,
    key: str,
    params: Optional[Mapping[str, Any]] = None,
    namespace: Optional[str] = None,
) -> str:
    """Resolve then interpolate a key against one catalog."""
    result = resolve_message(catalog, namespace, key)
    if not result.found:
        logger.debug(
            "translation_not_found",
            key=key,
            namespace=namespace,
            locale=catalog.locale,
        )
        return result.value
    return interpolate(result.value, params)


def _compile(locale: str, source: CatalogSource) -> TranslationCatalog:
    if isinstance(source, TranslationCatalog):
        return source
    return TranslationCatalog.from_dict(locale, source)
