"""
Credential persistence keyed by switch address.

Two backends share the ``TokenStore`` interface:

* ``MemoryTokenStore`` – a dict behind a lock, gone when the process exits.
* ``FileTokenStore``  – one ``<model>:<token>`` file per address under
  ``<root>/.config/netgear-console/``, named after an FNV-1a hash of the
  address and readable by the owner only.
"""

from __future__ import annotations

import os
import tempfile
import threading
from pathlib import Path

from ..config import TOKEN_CONFIG_DIR, TOKEN_FILE_PREFIX, TOKEN_PRODUCT_DIR
from ..errors import (
    CorruptTokenError,
    ModelNotSupported,
    StaleTokenError,
    TokenNotFound,
    TokenStoreError,
)
from ..logging_setup import log
from ..models import Model

_FNV32_OFFSET = 0x811C9DC5
_FNV32_PRIME = 0x01000193


def fnv1a_32(data: bytes) -> int:
    """32-bit FNV-1a hash of *data*."""
    h = _FNV32_OFFSET
    for byte in data:
        h ^= byte
        h = (h * _FNV32_PRIME) & 0xFFFFFFFF
    return h


class TokenStore:
    """Interface: get / store / delete a (token, model) pair per address."""

    def get(self, address: str) -> tuple[str, Model]:
        """Return ``(token, model)``; raise TokenNotFound when absent."""
        raise NotImplementedError

    def store(self, address: str, token: str, model: Model) -> None:
        raise NotImplementedError

    def delete(self, address: str) -> None:
        """Remove the entry; deleting a missing entry is not an error."""
        raise NotImplementedError


class MemoryTokenStore(TokenStore):
    def __init__(self) -> None:
        self._tokens: dict[str, tuple[str, Model]] = {}
        self._lock = threading.Lock()

    def get(self, address):
        with self._lock:
            try:
                return self._tokens[address]
            except KeyError:
                raise TokenNotFound(f"no token stored for {address}") from None

    def store(self, address, token, model):
        with self._lock:
            self._tokens[address] = (token, Model(model))

    def delete(self, address):
        with self._lock:
            self._tokens.pop(address, None)


class FileTokenStore(TokenStore):
    """
    Durable token store.

    Writes go to a temporary file in the token directory which is then
    renamed over the target, so concurrent writers for one address never
    leave a half-written file behind.
    """

    def __init__(self, root: str | os.PathLike | None = None) -> None:
        self.root = Path(root) if root else Path(tempfile.gettempdir())
        self.token_dir = self.root / TOKEN_CONFIG_DIR / TOKEN_PRODUCT_DIR

    def token_path(self, address: str) -> Path:
        return self.token_dir / f"{TOKEN_FILE_PREFIX}{fnv1a_32(address.encode('utf-8'))}"

    def get(self, address):
        path = self.token_path(address)
        try:
            content = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            raise TokenNotFound(f"no token file for {address}") from None
        except OSError as exc:
            raise TokenStoreError(f"failed to read token file {path}", exc) from exc

        if not content.strip():
            raise StaleTokenError(f"token file {path} is empty, please log in again")
        if ":" not in content:
            raise CorruptTokenError(f"malformed token file {path}")

        # Segments after the token are ignored
        model_name, token = content.strip().split(":")[:2]
        try:
            model = Model.parse(model_name)
        except ModelNotSupported:
            raise ModelNotSupported(
                f"unknown model '{model_name.strip()}' in token file {path}"
            ) from None
        token = token.strip()
        if not token:
            raise CorruptTokenError(f"token file {path} holds no token")
        return token, model

    def store(self, address, token, model):
        model = Model(model)
        path = self.token_path(address)
        try:
            self.token_dir.mkdir(parents=True, exist_ok=True, mode=0o700)
            fd, tmp_name = tempfile.mkstemp(dir=self.token_dir, prefix=".tmp-token-")
        except OSError as exc:
            raise TokenStoreError(f"failed to create token file in {self.token_dir}", exc) from exc

        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(f"{model.value}:{token}")
            os.chmod(tmp_name, 0o600)
            os.replace(tmp_name, path)
        except OSError as exc:
            Path(tmp_name).unlink(missing_ok=True)
            raise TokenStoreError(f"failed to write token file {path}", exc) from exc
        log.debug("Stored %s token for %s in %s", model.value, address, path)

    def delete(self, address):
        path = self.token_path(address)
        try:
            path.unlink(missing_ok=True)
        except OSError as exc:
            raise TokenStoreError(f"failed to delete token file {path}", exc) from exc
