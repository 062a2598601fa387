"""FastAPI dependency wiring for intl sessions.

Usage:
    intl = create_intl(messages, default_locale="en-US", locales=["en-US", "fr-FR"])
    ErrorsIntlDep = Annotated[IntlAccessor, Depends(intl_dependency(intl.with_namespace("errors")))]

    @router.get("/missing")
    def missing(intl: ErrorsIntlDep):
        return {"detail": intl.get("not_found")}
"""

from typing import Callable

from fastapi import Request

from infrastructure.i18n.session import IntlAccessor, IntlSessionFactory

# Attribute name on request.state where the accessor is attached
REQUEST_STATE_KEY = "intl"


def intl_dependency(
    session_factory: IntlSessionFactory,
) -> Callable[[Request], IntlAccessor]:
    """Create a FastAPI dependency that builds the request's IntlAccessor.

    The accessor is also stored on `request.state.intl` for handlers and
    middleware that read it from the request.

    Args:
        session_factory: Factory bound to the namespace the route uses.

    Returns:
        Dependency callable taking the current Request.
    """

    def _get_intl(request: Request) -> IntlAccessor:
        headers = {name.lower(): value for name, value in request.headers.items()}
        accessor = session_factory.create(headers)
        setattr(request.state, REQUEST_STATE_KEY, accessor)
        return accessor

    return _get_intl
