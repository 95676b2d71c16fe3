"""
Password resolution for automatic login.

The client never reads the environment itself; it asks a resolver for the
``SwitchConfig`` of an address and receives ``None`` when nothing is known.

EnvironmentPasswordResolver lookup order:

1. ``NETGEAR_PASSWORD_<HOST>`` (+ optional ``NETGEAR_MODEL_<HOST>``) where
   ``<HOST>`` is the address upper-cased with ``.``, ``:`` and ``-`` → ``_``.
2. ``NETGEAR_SWITCHES="host1=pw1[,model1];host2=pw2[,model2]"``.
"""

from __future__ import annotations

import os
import re
from typing import Mapping

from .config import MODEL_ENV_PREFIX, PASSWORD_ENV_PREFIX, SWITCHES_ENV
from .logging_setup import log
from .models import SwitchConfig


class PasswordResolver:
    def resolve(self, address: str) -> SwitchConfig | None:
        raise NotImplementedError


class StaticPasswordResolver(PasswordResolver):
    """Resolve from an in-memory ``{address: password}`` mapping."""

    def __init__(self, passwords: Mapping[str, str], models: Mapping[str, str] | None = None) -> None:
        self._passwords = dict(passwords)
        self._models = dict(models or {})

    def resolve(self, address):
        password = self._passwords.get(address)
        if not password:
            return None
        return SwitchConfig(host=address, password=password, model=self._models.get(address, ""))


class EnvironmentPasswordResolver(PasswordResolver):
    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = os.environ if environ is None else environ

    @staticmethod
    def normalise_host(address: str) -> str:
        return re.sub(r"[.:\-]", "_", address).upper()

    def resolve(self, address):
        host_key = self.normalise_host(address)
        password = self._environ.get(PASSWORD_ENV_PREFIX + host_key, "")
        if password:
            log.debug("Password for %s found in %s%s", address, PASSWORD_ENV_PREFIX, host_key)
            return SwitchConfig(
                host=address,
                password=password,
                model=self._environ.get(MODEL_ENV_PREFIX + host_key, "").strip(),
            )

        config = self._from_switches_var(address)
        if config is not None:
            log.debug("Password for %s found in %s", address, SWITCHES_ENV)
        return config

    def _from_switches_var(self, address: str) -> SwitchConfig | None:
        for entry in self._environ.get(SWITCHES_ENV, "").split(";"):
            host, sep, rest = entry.strip().partition("=")
            if not sep or host.strip() != address:
                continue
            password, _, model = rest.strip().partition(",")
            if not password.strip():
                return None
            return SwitchConfig(host=address, password=password.strip(), model=model.strip())
        return None
