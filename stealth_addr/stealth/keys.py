# stealth_addr/stealth/keys.py
"""
Stealth-Addr Key Derivation

Splits one 65-byte seed signature into two independent private keys:

    0x | r (32B) | s (32B) | v (1B)
         └─ keccak256 → spending private key
                   └─ keccak256 → viewing private key

The digests are used as scalars directly. A digest of zero or >= n is
rejected rather than reduced, so valid keys stay byte-identical to other
implementations of the same scheme.
"""

from __future__ import annotations

import logging
from typing import Optional, Tuple

from ..errors import MalformedSeedError
from ..schemes import DEFAULT_SCHEME
from ..cryptography.common import (
    HexLike,
    Keypair,
    StealthKeyBundle,
    check_scalar,
    keccak256,
    to_hex,
)
from ..cryptography.curve import CurveBackend, get_backend
from ..block.account import sign_stealth_message


logger = logging.getLogger("stealth-addr.keys")

HEX_PREFIX = "0x"
PORTION_HEX_LENGTH = 2 * DEFAULT_SCHEME.portion_size    # 64 hex chars per 32B chunk
SIGNATURE_HEX_LENGTH = len(HEX_PREFIX) + 2 * DEFAULT_SCHEME.signature_size


def extract_portions(signature: str) -> Tuple[str, str, str]:
    """
    Slice a 0x-prefixed signature into (portion1, portion2, last_byte) hex.

    No validation happens here; ``derive_stealth_keys`` checks that the
    three slices re-assemble into the input.
    """
    start = len(HEX_PREFIX)
    portion1 = signature[start:start + PORTION_HEX_LENGTH]
    portion2 = signature[start + PORTION_HEX_LENGTH:start + 2 * PORTION_HEX_LENGTH]
    last_byte = signature[-2:]
    return portion1, portion2, last_byte


def _signature_hex(signature: HexLike) -> str:
    if isinstance(signature, (bytes, bytearray)):
        return to_hex(signature)
    if not isinstance(signature, str):
        raise MalformedSeedError(f"Signature must be hex or bytes, got {type(signature).__name__}")
    if not signature.startswith(HEX_PREFIX):
        raise MalformedSeedError("Signature must start with 0x")
    return signature


def derive_stealth_keys(
    signature: HexLike,
    backend: Optional[CurveBackend] = None,
) -> StealthKeyBundle:
    """
    Derive the spending and viewing keypairs from a seed signature.

    Args:
        signature: 65-byte signature, "0x" + 130 hex chars or raw bytes
        backend: Curve backend (default: coincurve)

    Returns:
        StealthKeyBundle

    Raises:
        MalformedSeedError: Wrong length, bad prefix, or non-hex content
        ScalarOutOfRangeError: A derived key is not a valid scalar
    """
    sig_hex = _signature_hex(signature)
    portion1, portion2, last_byte = extract_portions(sig_hex)

    if f"{HEX_PREFIX}{portion1}{portion2}{last_byte}" != sig_hex:
        raise MalformedSeedError(
            f"Signature incorrectly generated or parsed: expected {SIGNATURE_HEX_LENGTH} chars, "
            f"got {len(sig_hex)}"
        )

    try:
        chunk1 = bytes.fromhex(portion1)
        chunk2 = bytes.fromhex(portion2)
        bytes.fromhex(last_byte)
    except ValueError as e:
        raise MalformedSeedError(f"Signature is not valid hex: {e}") from e

    spending_private_key = keccak256(chunk1)
    viewing_private_key = keccak256(chunk2)
    check_scalar(spending_private_key, "spending private key")
    check_scalar(viewing_private_key, "viewing private key")

    curve = get_backend(backend)
    bundle = StealthKeyBundle(
        viewing_key=Keypair(
            public_key=curve.scalar_multiply_base(viewing_private_key),
            private_key=viewing_private_key,
        ),
        spending_key=Keypair(
            public_key=curve.scalar_multiply_base(spending_private_key),
            private_key=spending_private_key,
        ),
    )

    logger.debug(
        "Derived stealth keys: spending=%s viewing=%s",
        bundle.spending_key.public_key_hex,
        bundle.viewing_key.public_key_hex,
    )
    return bundle


def derive_stealth_keys_from_account(
    private_key: HexLike,
    backend: Optional[CurveBackend] = None,
) -> StealthKeyBundle:
    """Sign the seed message with an account key and derive its bundle."""
    _, signature = sign_stealth_message(private_key)
    return derive_stealth_keys(signature, backend=backend)
