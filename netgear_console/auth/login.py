"""
Login protocols for the two switch families.

Both follow the same handshake::

    GET <login page>        -> <input id="rand" value="SEED">
    POST <login endpoint>   -> md5(interleave(password, SEED))
    token                   <- Set-Cookie (session) | response body (gambit)

and differ only in paths, the password field name, where the token comes
back, and how it is attached to later requests.
"""

from __future__ import annotations

import requests

from ..config import (
    GAMBIT_LOGIN_PAGE,
    GAMBIT_LOGIN_POST,
    GAMBIT_PARAM,
    GAMBIT_PASSWORD_FIELD,
    SESSION_COOKIE_NAME,
    SESSION_LOGIN_PAGE,
    SESSION_LOGIN_POST,
    SESSION_PASSWORD_FIELD,
)
from ..errors import AuthenticationError, InvalidCredentials, SeedNotFound
from ..logging_setup import log, mask
from ..models import Family, Model
from ..network.client import Transport
from .password import encrypt_password
from .token import (
    extract_error_message,
    extract_gambit_token,
    extract_seed_value,
    extract_session_token,
)


class AuthProtocol:
    """One family's login handshake and per-request credential attachment."""

    family: Family
    login_page: str
    login_post: str
    password_field: str

    def __init__(self, transport: Transport) -> None:
        self.transport = transport

    def fetch_seed(self) -> str:
        resp = self.transport.get(self.login_page)
        seed = extract_seed_value(resp.text)
        if not seed:
            raise SeedNotFound(f"seed value not found in {self.login_page}")
        log.debug("Seed from %s: %s", self.login_page, seed)
        return seed

    def login(self, password: str) -> str:
        """
        Run the handshake and return the non-empty token issued by the switch.

        Raises AuthenticationError when the seed is missing or the switch
        reports an error, InvalidCredentials when it silently refuses, and
        NetworkError for transport failures.
        """
        try:
            seed = self.fetch_seed()
        except SeedNotFound as exc:
            raise AuthenticationError("seed value not found", exc) from exc

        digest = encrypt_password(password, seed)
        resp = self.transport.post(self.login_post, data={self.password_field: digest})

        token = self.extract_token(resp)
        if not token:
            message = extract_error_message(resp.text)
            if message:
                raise AuthenticationError(f"{self.family.value} login failed: {message}")
            raise InvalidCredentials()

        log.debug("%s login issued token %s", self.family.value, mask(token))
        return token

    def extract_token(self, resp: requests.Response) -> str:
        raise NotImplementedError

    def attach(
        self, token: str, headers: dict[str, str], data: dict[str, str]
    ) -> None:
        """Add the credential for *token* to an outgoing request in place."""
        raise NotImplementedError


class SessionProtocol(AuthProtocol):
    """GS30x: ``password`` posted to /login.cgi, ``SID`` cookie back."""

    family = Family.SESSION
    login_page = SESSION_LOGIN_PAGE
    login_post = SESSION_LOGIN_POST
    password_field = SESSION_PASSWORD_FIELD

    def extract_token(self, resp: requests.Response) -> str:
        return extract_session_token(resp.headers.get("Set-Cookie", ""))

    def attach(self, token, headers, data):
        headers["Cookie"] = f"{SESSION_COOKIE_NAME}={token}"


class GambitProtocol(AuthProtocol):
    """GS316: ``LoginPassword`` posted to /redirect.html, token in the body."""

    family = Family.GAMBIT
    login_page = GAMBIT_LOGIN_PAGE
    login_post = GAMBIT_LOGIN_POST
    password_field = GAMBIT_PASSWORD_FIELD

    def extract_token(self, resp: requests.Response) -> str:
        return extract_gambit_token(resp.text, resp.headers.get("Location", ""))

    def attach(self, token, headers, data):
        data[GAMBIT_PARAM] = token


PROTOCOLS: dict[Family, type[AuthProtocol]] = {
    Family.SESSION: SessionProtocol,
    Family.GAMBIT: GambitProtocol,
}


def protocol_for(model: Model, transport: Transport) -> AuthProtocol:
    """Return the login protocol for *model*'s family."""
    return PROTOCOLS[model.family](transport)
