"""Per-request intl sessions.

Composes locale negotiation, catalog selection, key resolution and
interpolation behind a single `get(key, params)` accessor.

Usage:
    intl = create_intl(
        messages={"en-US": en_us, "fr-FR": fr},
        default_locale="en-US",
        locales=["en-US", "fr-FR"],
    )
    errors = intl.with_namespace("errors")

    # Per request
    accessor = errors.create({"accept-language": "fr-CA,fr;q=0.9"})
    accessor.get("validation_error", {"field": "email"})
"""

from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional, Sequence

from core.config import settings
from core.logging import get_module_logger
from infrastructure.i18n.exceptions import InvalidNamespaceError
from infrastructure.i18n.models import KEY_SEPARATOR, TranslationCatalog
from infrastructure.i18n.resolvers import LanguageNegotiator
from infrastructure.i18n.translator import CatalogSource, Translator, translate_with

logger = get_module_logger()

ACCEPT_LANGUAGE_HEADER = "accept-language"

LocaleSelector = Callable[[Mapping[str, str]], str]


@dataclass(frozen=True)
class IntlAccessor:
    """Message accessor bound to one request's locale and one namespace.

    Attributes:
        locale: Locale selected for the request.
        catalog: Catalog messages are read from.
        namespace: Optional dotted subtree keys are relative to.
    """

    locale: str
    catalog: TranslationCatalog
    namespace: Optional[str] = None

    def get(self, key: str, params: Optional[Mapping[str, Any]] = None) -> str:
        """Translate a key, returning the key itself when no message exists."""
        return translate_with(self.catalog, key, params, self.namespace)

    def has(self, key: str) -> bool:
        path = f"{self.namespace}{KEY_SEPARATOR}{key}" if self.namespace else key
        return self.catalog.has_message(path)


class IntlSessionFactory:
    """Builds an IntlAccessor for each request.

    Catalogs and negotiation settings are fixed at construction and shared
    by every accessor; each call to create() allocates fresh request state.

    Attributes:
        negotiator: Accept-Language negotiator over the supported locales.
        translator: Holder of per-locale catalogs.
        locale_selector: Optional custom selector. Its result is used as-is,
            without checking it against the supported locales.
        namespace: Subtree every accessor resolves keys under.
    """

    def __init__(
        self,
        negotiator: LanguageNegotiator,
        translator: Translator,
        locale_selector: Optional[LocaleSelector] = None,
        namespace: Optional[str] = None,
    ):
        self.negotiator = negotiator
        self.translator = translator
        self.locale_selector = locale_selector
        self.namespace = namespace

    @property
    def default_locale(self) -> str:
        return self.negotiator.default_locale

    @property
    def locales(self) -> tuple:
        return self.negotiator.supported_locales

    def with_namespace(self, namespace: Optional[str]) -> "IntlSessionFactory":
        """Return a factory whose accessors resolve keys under namespace.

        In strict mode the namespace must name a subtree of the default
        locale's catalog.

        Raises:
            InvalidNamespaceError: In strict mode, if the namespace is not a
                subtree of the default catalog.
        """
        if namespace and self.translator.strict:
            default_catalog = self.translator.catalogs.get(self.default_locale)
            if default_catalog is None or not default_catalog.has_namespace(namespace):
                raise InvalidNamespaceError(
                    f"Namespace '{namespace}' is not a subtree of the "
                    f"'{self.default_locale}' catalog"
                )
        return IntlSessionFactory(
            negotiator=self.negotiator,
            translator=self.translator,
            locale_selector=self.locale_selector,
            namespace=namespace or None,
        )

    def select_locale(self, headers: Mapping[str, str]) -> str:
        if self.locale_selector is not None:
            locale = self.locale_selector(headers)
            logger.debug("resolved_from_selector", locale=locale)
            return locale
        return self.negotiator.select(headers.get(ACCEPT_LANGUAGE_HEADER))

    def create(self, headers: Optional[Mapping[str, str]] = None) -> IntlAccessor:
        """Build the accessor for one request.

        Args:
            headers: Request headers with lowercased names.

        Returns:
            IntlAccessor for the negotiated locale.

        Raises:
            MissingLocaleError: In strict mode, when neither the selected nor
                the default locale has a catalog.
        """
        locale = self.select_locale(headers or {})
        catalog = self.translator.get_catalog(locale)
        return IntlAccessor(locale=locale, catalog=catalog, namespace=self.namespace)


def create_intl(
    messages: Mapping[str, CatalogSource],
    default_locale: Optional[str] = None,
    locales: Optional[Sequence[str]] = None,
    locale_selector: Optional[LocaleSelector] = None,
    strict: Optional[bool] = None,
) -> IntlSessionFactory:
    """Create an IntlSessionFactory from in-memory catalogs.

    Arguments left as None are read from settings.i18n.

    Args:
        messages: Mapping of locale tag to TranslationCatalog or nested dict.
        default_locale: Fallback locale; must be in locales.
        locales: Supported locale tags in priority order.
        locale_selector: Optional function of the request headers returning a
            locale tag, used instead of Accept-Language negotiation.
        strict: Raise MissingLocaleError instead of serving an empty catalog.

    Returns:
        IntlSessionFactory without a namespace.

    Raises:
        InvalidConfigurationError: If default_locale is not a supported locale.
        InvalidCatalogError: If a catalog contains non-string leaves.
    """
    i18n_settings = settings.i18n
    default_locale = default_locale or i18n_settings.DEFAULT_LOCALE
    locales = list(locales) if locales is not None else list(i18n_settings.SUPPORTED_LOCALES)
    strict = i18n_settings.STRICT_CATALOGS if strict is None else strict

    negotiator = LanguageNegotiator(locales, default_locale)
    translator = Translator(messages, fallback_locale=default_locale, strict=strict)

    missing = [locale for locale in locales if locale not in translator.catalogs]
    if missing:
        logger.warning("locales_without_catalog", locales=missing)

    return IntlSessionFactory(
        negotiator=negotiator,
        translator=translator,
        locale_selector=locale_selector,
    )
