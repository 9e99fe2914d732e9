"""Shared-secret checks for webhook and admin requests."""

import hmac
from typing import Optional


def timing_safe_equal(provided: Optional[str], expected: Optional[str]) -> bool:
    """Compare a provided secret against the configured one in constant time.

    An empty configured secret never matches, so an unconfigured deployment
    rejects every request instead of accepting the empty string.

    Args:
        provided: Secret supplied by the caller (may be None).
        expected: Secret from configuration.

    Returns:
        True if both are non-empty and equal.
    """
    if not provided or not expected:
        return False
    return hmac.compare_digest(provided.encode("utf-8"), expected.encode("utf-8"))


def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    """Return the token of a ``Bearer <token>`` Authorization header, if any."""
    if not authorization or not authorization.startswith("Bearer "):
        return None
    return authorization[len("Bearer ") :]
