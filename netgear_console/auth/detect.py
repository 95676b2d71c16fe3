"""Model detection from unauthenticated pages and login-page recognition."""

from ..config import (
    GENERIC_30X_MODEL,
    LOGIN_PAGE_MARKERS,
    MIN_DATA_PAGE_LENGTH,
    MODEL_SEARCH_ORDER,
    REDIRECT_MARKERS,
)


def detect_model(html: str) -> str:
    """
    Return the model name found in *html*, or an empty string.

    Specific names are tested longest-first so that ``GS316EPP`` never
    matches as ``GS316EP``.  A GS30x root page often only says "Redirect to
    Login"; that yields the generic ``GS30xEPx`` placeholder, which callers
    may refine by probing the login page itself.
    """
    for name in MODEL_SEARCH_ORDER:
        if name in html:
            return name
    if any(marker in html for marker in REDIRECT_MARKERS):
        return GENERIC_30X_MODEL
    return ""


def is_login_required(body: str) -> bool:
    """
    Return True when a data page came back as (a pointer to) the login page.

    The switch answers expired sessions with a tiny redirect stub or the
    login form, both of which reference one of the login paths.
    """
    if len(body) < MIN_DATA_PAGE_LENGTH:
        return True
    return any(marker in body for marker in LOGIN_PAGE_MARKERS)
