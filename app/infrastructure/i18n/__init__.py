"""i18n system - locale negotiation and message resolution.

Selects the best supported locale from an Accept-Language header, resolves
dotted keys in immutable per-locale message catalogs, and substitutes
`{name}` placeholders.

Main components:
- models: TranslationCatalog, MessageNode, MessageLeaf, PreferenceEntry, ResolutionResult
- resolvers: parse_accept_language, select_locale, LanguageNegotiator
- translator: resolve, resolve_message, interpolate, Translator
- session: create_intl, IntlSessionFactory, IntlAccessor
- dependencies: intl_dependency for FastAPI routes
"""

from infrastructure.i18n.dependencies import REQUEST_STATE_KEY, intl_dependency
from infrastructure.i18n.exceptions import (
    I18nError,
    InvalidCatalogError,
    InvalidConfigurationError,
    InvalidNamespaceError,
    MissingLocaleError,
)
from infrastructure.i18n.models import (
    MessageLeaf,
    MessageNode,
    PreferenceEntry,
    ResolutionResult,
    TranslationCatalog,
    language_of,
)
from infrastructure.i18n.resolvers import (
    LanguageNegotiator,
    parse_accept_language,
    select_locale,
)
from infrastructure.i18n.session import (
    IntlAccessor,
    IntlSessionFactory,
    create_intl,
)
from infrastructure.i18n.translator import (
    Translator,
    interpolate,
    resolve,
    resolve_message,
    translate_with,
)

__all__ = [
    "I18nError",
    "InvalidCatalogError",
    "InvalidConfigurationError",
    "InvalidNamespaceError",
    "MissingLocaleError",
    "MessageLeaf",
    "MessageNode",
    "PreferenceEntry",
    "ResolutionResult",
    "TranslationCatalog",
    "language_of",
    "LanguageNegotiator",
    "parse_accept_language",
    "select_locale",
    "Translator",
    "interpolate",
    "resolve",
    "resolve_message",
    "translate_with",
    "IntlAccessor",
    "IntlSessionFactory",
    "create_intl",
    "REQUEST_STATE_KEY",
    "intl_dependency",
]
