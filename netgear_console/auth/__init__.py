"""Authentication submodule – model detection, password encoding, login protocols."""

from netgear_console.auth.detect import detect_model, is_login_required
from netgear_console.auth.login import (
    AuthProtocol,
    GambitProtocol,
    SessionProtocol,
    protocol_for,
)
from netgear_console.auth.password import encrypt_password, interleave
from netgear_console.auth.token import (
    extract_error_message,
    extract_gambit_token,
    extract_seed_value,
    extract_session_token,
)

__all__ = [
    "detect_model",
    "is_login_required",
    "AuthProtocol",
    "GambitProtocol",
    "SessionProtocol",
    "protocol_for",
    "encrypt_password",
    "interleave",
    "extract_error_message",
    "extract_gambit_token",
    "extract_seed_value",
    "extract_session_token",
]
