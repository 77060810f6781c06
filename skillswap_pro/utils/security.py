# skillswap_pro/utils/security.py
"""
Pluggable credential checks.

The legacy store compares passwords verbatim (``plaintext``). That keeps demo
fixtures and old rows working but is not fit for production; deployments
should set ``CREDENTIAL_SCHEME=bcrypt`` so stored credentials are hashes.
"""

from typing import Optional, Protocol

from passlib.context import CryptContext

from skillswap_pro.config import settings


pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto"
)


# ==========================
# PASSWORD UTILS
# ==========================

def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """
    Bcrypt max input length = 72 bytes
    Truncate safely to avoid crash
    """
    password_bytes = password.encode("utf-8")

    if len(password_bytes) > 72:
        password_bytes = password_bytes[:72]
        password = password_bytes.decode("utf-8", errors="ignore")

    return pwd_context.hash(password)


# ==========================
# CREDENTIAL VERIFIERS
# ==========================

class CredentialVerifier(Protocol):
    def prepare(self, password: str) -> str:
        """Turn a fresh password into the value to store."""
        ...

    def verify(self, stored: Optional[str], provided: str) -> bool:
        ...


class PlaintextVerifier:
    """Equality check against the stored value."""

    def prepare(self, password: str) -> str:
        return password

    def verify(self, stored: Optional[str], provided: str) -> bool:
        return stored is not None and stored == provided


class BcryptVerifier:
    def prepare(self, password: str) -> str:
        return get_password_hash(password)

    def verify(self, stored: Optional[str], provided: str) -> bool:
        if not stored:
            return False
        try:
            return verify_password(provided, stored)
        except ValueError:
            # Stored value is not a bcrypt hash
            return False


VERIFIERS = {
    "plaintext": PlaintextVerifier,
    "bcrypt": BcryptVerifier,
}


def get_verifier(scheme: Optional[str] = None) -> CredentialVerifier:
    key = (scheme or settings.CREDENTIAL_SCHEME or "plaintext").strip().lower()
    try:
        return VERIFIERS[key]()
    except KeyError:
        raise ValueError(f"Unknown credential scheme: {key}")
