"""
SwitchClient – authenticated access to one Netgear switch's web console.

Construction tries, in order:

1. a cached credential from the token store (trusted without re-checking),
2. a password from the resolver → detect the model → log in,
3. detect the model only; ``login()`` must then be called explicitly.

Errors raised while constructing tell the remedies apart: NetworkError (the
switch could not be reached), ModelError (reached, model not recognised),
AutoLoginError (model known, resolved password rejected).
"""

from __future__ import annotations

import threading

from .auth.detect import detect_model
from .auth.login import AuthProtocol, protocol_for
from .config import DEFAULT_TIMEOUT, GENERIC_30X_MODEL, LOGIN_CGI, ROOT_PAGE
from .credentials import PasswordResolver
from .errors import (
    AuthenticationError,
    AutoLoginError,
    ModelError,
    ModelNotDetected,
    NetgearError,
    NotAuthenticated,
    OperationError,
    TokenNotFound,
    TokenStoreError,
)
from .logging_setup import log
from .models import Credential, Model, SwitchConfig
from .network.client import Transport, with_query
from .storage.tokens import MemoryTokenStore, TokenStore


class SwitchClient:
    """
    Session façade for one switch.

    The credential is replaced atomically under a lock, so one client may be
    shared by several threads issuing reads and writes concurrently.

    Example:
        >>> client = SwitchClient("192.168.0.239")
        >>> client.login("secret")
        >>> client.poe.get_status()
    """

    def __init__(
        self,
        address: str,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        token_store: TokenStore | None = None,
        password_resolver: PasswordResolver | None = None,
        transport: Transport | None = None,
    ) -> None:
        self.address = address
        self.transport = transport if transport is not None else Transport(address, timeout=timeout)
        self.token_store = token_store if token_store is not None else MemoryTokenStore()
        self.password_resolver = password_resolver

        self._lock = threading.Lock()
        self._credential: Credential | None = None
        self._model: Model | None = None
        self._protocol: AuthProtocol | None = None

        cached = self._load_cached_credential()
        if cached is not None:
            self._use_model(cached.model)
            self._credential = cached
            log.info("Loaded cached %s token for %s", cached.model.value, address)
            return

        config = self._resolve_password()
        self._use_model(self._detect_model(hint=config.model if config else ""))

        if config is None:
            log.info("Detected %s at %s; call login() to authenticate", self._model.value, address)
            return

        log.info("Auto-authenticating to %s with resolved password", address)
        try:
            self.login(config.password)
        except AuthenticationError as exc:
            raise AutoLoginError(f"automatic login to {address} failed", exc) from exc

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def model(self) -> Model | None:
        return self._model

    @property
    def is_authenticated(self) -> bool:
        with self._lock:
            return self._credential is not None

    @property
    def credential(self) -> Credential | None:
        with self._lock:
            return self._credential

    @property
    def poe(self):
        from .poe import PoeManager
        return PoeManager(self)

    @property
    def ports(self):
        from .ports import PortManager
        return PortManager(self)

    def _use_model(self, model: Model) -> None:
        self._model = model
        self._protocol = protocol_for(model, self.transport)

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    def _load_cached_credential(self) -> Credential | None:
        try:
            token, model = self.token_store.get(self.address)
        except TokenNotFound:
            return None
        except (TokenStoreError, ModelError) as exc:
            log.warning("Ignoring cached token for %s: %s", self.address, exc)
            return None
        return Credential(token=token, model=model)

    def _resolve_password(self) -> SwitchConfig | None:
        if self.password_resolver is None:
            return None
        return self.password_resolver.resolve(self.address)

    def _detect_model(self, hint: str = "") -> Model:
        """
        Check the root page for the model; when it only shows the generic
        GS30x redirect, fetch /login.cgi once for a more specific name.
        """
        resp = self.transport.get(ROOT_PAGE)
        name = detect_model(resp.text)

        if name == GENERIC_30X_MODEL:
            name = self._refine_generic_model(name)

        if not name:
            if hint:
                model = Model.parse(hint)
                log.info("Model not detectable at %s, using configured %s", self.address, model.value)
                return model
            raise ModelNotDetected(f"could not detect switch model at {self.address}")

        model = Model.parse(name)
        log.debug("Detected model %s at %s", model.value, self.address)
        return model

    def _refine_generic_model(self, name: str) -> str:
        try:
            resp = self.transport.get(LOGIN_CGI)
        except NetgearError as exc:
            log.debug("Login page lookup failed, keeping %s: %s", name, exc)
            return name
        specific = detect_model(resp.text)
        if specific and specific != GENERIC_30X_MODEL:
            return specific
        return name

    # ------------------------------------------------------------------
    # Session
    # ------------------------------------------------------------------

    def login(self, password: str = "") -> None:
        """
        Authenticate with *password*, or with the resolver's password when
        *password* is empty.  The new credential replaces any previous one
        and is persisted best-effort.
        """
        if not password:
            config = self._resolve_password()
            if config is None or not config.password:
                raise AuthenticationError("password cannot be empty")
            password = config.password
            log.debug("Using resolved password for %s", self.address)

        model = self._model
        token = self._protocol.login(password)
        credential = Credential(token=token, model=model)
        with self._lock:
            self._credential = credential
        log.info("Logged in to %s (%s, %s auth)", self.address, model.value, model.family.value)

        try:
            self.token_store.store(self.address, token, model)
        except NetgearError as exc:
            log.warning("Could not persist token for %s: %s", self.address, exc)

    def logout(self) -> None:
        """Forget the credential locally; the switch has no logout endpoint."""
        with self._lock:
            self._credential = None
        try:
            self.token_store.delete(self.address)
        except TokenStoreError as exc:
            log.warning("Could not delete stored token for %s: %s", self.address, exc)

    def authenticated_request(
        self, method: str, path: str, data: dict[str, str] | None = None
    ) -> str:
        """
        Send *method* *path* with the credential attached and return the body.

        GET requests carry *data* in the query string, POST requests as a
        urlencoded form.  Raises NotAuthenticated without touching the
        network when no credential is held.
        """
        credential = self.credential
        if credential is None:
            raise NotAuthenticated(f"not authenticated to {self.address}")

        method = method.upper()
        headers: dict[str, str] = {}
        data = dict(data or {})
        protocol = protocol_for(credential.model, self.transport)
        protocol.attach(credential.token, headers, data)

        if method == "GET":
            resp = self.transport.get(with_query(path, data), headers=headers)
        elif method == "POST":
            resp = self.transport.post(path, data=data, headers=headers)
        else:
            raise OperationError(f"unsupported HTTP method {method}")
        return resp.text

    def close(self) -> None:
        self.transport.close()

    def __enter__(self) -> "SwitchClient":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def __repr__(self) -> str:
        model = self._model.value if self._model else "?"
        return f"SwitchClient({self.address!r}, model={model}, authenticated={self.is_authenticated})"
