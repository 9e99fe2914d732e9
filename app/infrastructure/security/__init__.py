"""Infrastructure security: request trust boundaries.

Exports:
    timing_safe_equal: Constant-time shared-secret comparison
    extract_bearer_token: Parse a Bearer Authorization header
    verify_discord_signature: Ed25519 verification of Discord interactions
"""

from infrastructure.security.shared_secret import extract_bearer_token, timing_safe_equal
from infrastructure.security.signatures import (
    SIGNATURE_HEADER,
    TIMESTAMP_HEADER,
    verify_discord_signature,
)

__all__ = [
    "timing_safe_equal",
    "extract_bearer_token",
    "verify_discord_signature",
    "SIGNATURE_HEADER",
    "TIMESTAMP_HEADER",
]
