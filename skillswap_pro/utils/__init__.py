__all__ = [
    "verify_password",
    "get_password_hash",
    "get_verifier",
    "CredentialVerifier",
    "PlaintextVerifier",
    "BcryptVerifier",
]


def __getattr__(name):
    if name in __all__:
        from . import security as _security
        return getattr(_security, name)
    raise AttributeError(f"module 'skillswap_pro.utils' has no attribute '{name}'")
