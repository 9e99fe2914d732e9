"""Ed25519 verification of Discord interaction requests.

Discord signs ``timestamp + raw_body`` with the application's private key
and sends the hex signature and timestamp in the ``X-Signature-Ed25519`` and
``X-Signature-Timestamp`` headers.
"""

from typing import Optional

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PublicKey

from infrastructure.logging import get_module_logger

logger = get_module_logger()

SIGNATURE_HEADER = "X-Signature-Ed25519"
TIMESTAMP_HEADER = "X-Signature-Timestamp"


def verify_discord_signature(
    public_key_hex: str,
    signature_hex: Optional[str],
    timestamp: Optional[str],
    body: bytes,
) -> bool:
    """Verify a Discord interaction signature.

    Args:
        public_key_hex: Application public key (hex) from the developer portal.
        signature_hex: Value of the X-Signature-Ed25519 header.
        timestamp: Value of the X-Signature-Timestamp header.
        body: Raw request body, exactly as received.

    Returns:
        True if the signature is valid, False for missing headers, malformed
        hex or a bad signature.
    """
    if not signature_hex or not timestamp or not public_key_hex:
        return False

    try:
        public_key = Ed25519PublicKey.from_public_bytes(bytes.fromhex(public_key_hex))
        public_key.verify(bytes.fromhex(signature_hex), timestamp.encode() + body)
    except InvalidSignature:
        logger.warning("discord_signature_invalid")
        return False
    except ValueError as e:
        logger.warning("discord_signature_malformed", error=str(e))
        return False

    return True
