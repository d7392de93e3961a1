"""Warnings about unencrypted gateway connections."""

from __future__ import annotations

NO_TLS_WARN = (
    "WARNING! You are not using an encrypted connection to the gateway, "
    "consider using HTTPS."
)

_SAFE_PREFIXES = ("https", "http://127.0.0.1", "http://localhost")


def check_tls_insecure(gateway: str, tls_insecure: bool) -> str:
    """Return a warning for a plain-HTTP remote gateway, else an empty string.

    No warning is given when ``tls_insecure`` is set.
    """
    if tls_insecure or gateway.startswith(_SAFE_PREFIXES):
        return ""
    return NO_TLS_WARN