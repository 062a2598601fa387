"""Infrastructure modules for the intl engine.

- i18n: Locale negotiation, message catalogs and interpolation
"""
