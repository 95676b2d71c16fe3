"""Password encoding helpers for Netgear GS30x / GS316 switches."""

import hashlib


def interleave(password: str, seed: str) -> str:
    """
    Merge *password* and *seed* character by character, as the switch's
    login.js does:  p[0] s[0] p[1] s[1] …, then the tail of the longer one.

        interleave("ab", "1234")  -> "a1b234"
        interleave("abcd", "1")   -> "a1bcd"
    """
    merged = []
    for i in range(max(len(password), len(seed))):
        if i < len(password):
            merged.append(password[i])
        if i < len(seed):
            merged.append(seed[i])
    return "".join(merged)


def encrypt_password(password: str, seed: str) -> str:
    """
    Replicate the firmware's password obfuscation: MD5 over the UTF-8 bytes
    of ``interleave(password, seed)``, rendered as lowercase hex.

    The switch verifies exactly this digest, so the (weak) scheme must be
    reproduced unchanged.
    """
    return hashlib.md5(interleave(password, seed).encode("utf-8")).hexdigest()
