# stealth_addr/stealth/recover.py
"""
Stealth-Addr Private Key Recovery

    k = (s_spend + keccak256(v*E)) mod n

Dual of the sender's P = B_spend + h*G, since a*G + b*G == (a+b)*G, so
k*G is exactly the stealth point and k controls the stealth address.
"""

from __future__ import annotations

import logging
from typing import Optional

from ..errors import InvalidPointEncodingError, ScalarOutOfRangeError
from ..cryptography.common import (
    SECP256K1_ORDER,
    HexLike,
    StealthKeyBundle,
    check_scalar,
    hex_to_bytes,
    scalar_to_bytes,
    to_hex,
)
from ..cryptography.curve import CurveBackend, get_backend
from .shared import shared_secret_digest


logger = logging.getLogger("stealth-addr.recover")


def compute_stealth_private_key(
    keys: StealthKeyBundle,
    ephemeral_public_key: HexLike,
    backend: Optional[CurveBackend] = None,
) -> str:
    """
    Recover the private key of a stealth address.

    Args:
        keys: Recipient's StealthKeyBundle (both private keys)
        ephemeral_public_key: Announced 33-byte compressed ephemeral key
        backend: Curve backend (default: coincurve)

    Returns:
        "0x" + 64 hex chars, big-endian, zero-padded

    Raises:
        InvalidPointEncodingError: Ephemeral key does not decode
        ScalarOutOfRangeError: Digest or resulting key is not a valid scalar
    """
    try:
        ephemeral = hex_to_bytes(ephemeral_public_key)
    except (ValueError, TypeError) as e:
        raise InvalidPointEncodingError(f"Ephemeral public key is not valid hex: {e}") from e

    spending = check_scalar(keys.spending_key.private_key, "spending private key")
    digest = shared_secret_digest(get_backend(backend), keys.viewing_key.private_key, ephemeral)
    h = check_scalar(digest, "shared secret digest")

    stealth_private_key = (spending + h) % SECP256K1_ORDER
    if stealth_private_key == 0:
        raise ScalarOutOfRangeError("Recovered stealth private key is zero")

    logger.debug("Recovered stealth private key for ephemeral key %s", to_hex(ephemeral))
    return to_hex(scalar_to_bytes(stealth_private_key))
