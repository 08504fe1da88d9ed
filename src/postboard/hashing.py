"""
Password hashing collaborators.

A hasher turns a plaintext password into a digest string before it is
stored on a user document. Mutation handlers only depend on ``hash``; the
concrete scheme is picked from settings.
"""

from __future__ import annotations

import base64
import hashlib
import hmac
import secrets
from typing import Protocol

from .logging import get_logger

logger = get_logger(__name__)


class PasswordHasher(Protocol):
    """One-way function from plaintext to a digest string.

    Mutation handlers only call ``hash``. ``verify`` completes the contract
    for credential checks and is how a salted digest is confirmed to match.
    """

    name: str

    def hash(self, plaintext: str) -> str: ...

    def verify(self, plaintext: str, digest: str) -> bool: ...


def _b64encode(raw: bytes) -> str:
    return base64.urlsafe_b64encode(raw).decode("ascii").rstrip("=")


def _b64decode(value: str) -> bytes:
    padding = "=" * (-len(value) % 4)
    return base64.urlsafe_b64decode(value + padding)


class ScryptHasher:
    """Salted, memory-hard hashing via ``hashlib.scrypt``.

    Digests are self-describing: ``scrypt$<n>$<r>$<p>$<salt>$<hash>``, so
    cost parameters can be raised later without breaking stored digests.
    """

    name = "scrypt"

    def __init__(
        self, n: int = 2**14, r: int = 8, p: int = 1, salt_bytes: int = 16, dklen: int = 32
    ):
        self.n = n
        self.r = r
        self.p = p
        self.salt_bytes = salt_bytes
        self.dklen = dklen

    def _derive(self, plaintext: str, salt: bytes, n: int, r: int, p: int, dklen: int) -> bytes:
        return hashlib.scrypt(
            plaintext.encode("utf-8"),
            salt=salt,
            n=n,
            r=r,
            p=p,
            maxmem=128 * n * r * p * 2,
            dklen=dklen,
        )

    def hash(self, plaintext: str) -> str:
        salt = secrets.token_bytes(self.salt_bytes)
        derived = self._derive(plaintext, salt, self.n, self.r, self.p, self.dklen)
        return f"scrypt${self.n}${self.r}${self.p}${_b64encode(salt)}${_b64encode(derived)}"

    def verify(self, plaintext: str, digest: str) -> bool:
        try:
            scheme, n, r, p, salt, expected = digest.split("$")
        except ValueError:
            return False
        if scheme != self.name:
            return False

        expected_bytes = _b64decode(expected)
        derived = self._derive(
            plaintext, _b64decode(salt), int(n), int(r), int(p), len(expected_bytes)
        )
        return hmac.compare_digest(derived, expected_bytes)


class Sha256Hasher:
    """Deterministic, unsalted SHA-256 hex digest.

    Kept for compatibility with data written by older deployments; not
    suitable for new installations.
    """

    name = "sha256"

    def hash(self, plaintext: str) -> str:
        return hashlib.sha256(plaintext.encode("utf-8")).hexdigest()

    def verify(self, plaintext: str, digest: str) -> bool:
        return hmac.compare_digest(self.hash(plaintext), digest)


_HASHERS: dict[str, type] = {
    ScryptHasher.name: ScryptHasher,
    Sha256Hasher.name: Sha256Hasher,
}


def get_hasher(name: str) -> PasswordHasher:
    """Build the hasher registered under ``name``.

    Raises:
        ValueError: If no hasher is registered under that name
    """
    hasher_cls = _HASHERS.get(name.lower())
    if hasher_cls is None:
        raise ValueError(
            f"Unknown password hasher '{name}'. Available: {', '.join(sorted(_HASHERS))}"
        )
    if hasher_cls is Sha256Hasher:
        logger.warning("Using unsalted sha256 password hashing")
    return hasher_cls()
