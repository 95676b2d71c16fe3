"""Shared plumbing for the PoE and port managers."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .auth.detect import is_login_required
from .auth.token import extract_error_message
from .config import ENDPOINTS
from .errors import NotAuthenticated, OperationError, SessionExpired
from .logging_setup import log

if TYPE_CHECKING:
    from .client import SwitchClient


class DataManager:
    def __init__(self, client: "SwitchClient") -> None:
        self.client = client

    def _require_auth(self) -> None:
        if not self.client.is_authenticated:
            raise NotAuthenticated(f"not authenticated to {self.client.address}")

    def _endpoint(self, name: str) -> str:
        self._require_auth()
        return ENDPOINTS[self.client.model.family.value][name]

    def _fetch(self, name: str) -> str:
        """GET a data page; a login page in its place means the session died."""
        body = self.client.authenticated_request("GET", self._endpoint(name))
        if is_login_required(body):
            log.warning("Session for %s expired, dropping stored token", self.client.address)
            self.client.logout()
            raise SessionExpired(f"session for {self.client.address} expired, please log in again")
        return body

    def _submit(self, name: str, form: dict[str, str], port_id: int, action: str) -> None:
        body = self.client.authenticated_request("POST", self._endpoint(name), form)
        message = extract_error_message(body)
        if message:
            raise OperationError(f"{action} failed for port {port_id}: {message}")
        log.debug("%s applied to port %d on %s", action, port_id, self.client.address)

    @staticmethod
    def _find_port(records: list, port_id: int):
        for record in records:
            if record.port_id == port_id:
                return record
        raise OperationError(f"port {port_id} not found")
