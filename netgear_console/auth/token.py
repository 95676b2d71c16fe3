"""Seed, token and device error-message extraction from login responses."""

from __future__ import annotations

import re

from bs4 import BeautifulSoup

from ..config import BS4_PARSER, GAMBIT_PARAM, SEED_ELEMENT_ID, SESSION_COOKIE_NAME

_GAMBIT_NAME_RE = re.compile(r"^gambit$", re.I)
# Quoted script assignments such as  var gambit = "ab12";  or  Gambit: 'ab12'
_GAMBIT_ASSIGN_RE = re.compile(
    r"""gambit['"]?\s*[:=]\s*['"]([A-Za-z0-9_\-]+)['"]""", re.I
)
_GAMBIT_QUERY_RE = re.compile(rf"""[?&]{GAMBIT_PARAM}=([^&#\s"'<>;]+)""", re.I)

_ERROR_PATTERNS = (
    re.compile(r'error["\s]*[:=]["\s]*"([^"]+)"'),
    re.compile(r"<div[^>]*error[^>]*>([^<]+)</div>", re.I),
    re.compile(r"""alert\s*\(\s*["']([^"']+)["']\s*\)"""),
)


def extract_seed_value(html: str) -> str:
    """
    Return the value of ``<input id="rand" value="…">`` from a login page,
    or an empty string when the element (or its value) is missing.
    """
    soup = BeautifulSoup(html, BS4_PARSER)
    el = soup.find(id=SEED_ELEMENT_ID)
    if el is None:
        return ""
    return (el.get("value") or "").strip()


def extract_session_token(set_cookie: str, name: str = SESSION_COOKIE_NAME) -> str:
    """
    Pull the session id out of a ``Set-Cookie`` header value.

    ``SID=tok1;Path=/;HttpOnly`` -> ``tok1``.  Folded multi-cookie headers
    (``a=1, SID=tok1; Path=/``) are handled as well.
    """
    m = re.search(rf"(?:^|[;,]\s*){re.escape(name)}=([^;,\s]*)", set_cookie or "")
    return m.group(1) if m else ""


def extract_gambit_token(body: str, location: str = "") -> str:
    """
    Find the Gambit token in a GS316 login response.

    Looked up, in order: an ``<input>`` named/id'd "gambit" (any case), a
    ``Gambit=…`` query in the body, a quoted script assignment, and only then
    the redirect ``Location`` header.
    """
    soup = BeautifulSoup(body, BS4_PARSER)
    for attr in ("name", "id"):
        el = soup.find("input", attrs={attr: _GAMBIT_NAME_RE})
        if el is not None and el.get("value"):
            return el["value"].strip()

    for pattern in (_GAMBIT_QUERY_RE, _GAMBIT_ASSIGN_RE):
        m = pattern.search(body)
        if m:
            return m.group(1)

    m = _GAMBIT_QUERY_RE.search(location)
    return m.group(1) if m else ""


def extract_error_message(body: str) -> str:
    """Return a device-reported error message from *body*, or ''."""
    for pattern in _ERROR_PATTERNS:
        m = pattern.search(body)
        if m:
            return m.group(1).strip()
    return ""
