# stealth_addr/stealth/generator.py
"""
Stealth-Addr Generator (sender side)

Produces a fresh one-time address for a recipient's meta-address:

    1. e  ← random scalar in [1, n-1]
    2. E  = e*G                         (ephemeral public key, announced)
    3. h  = keccak256(e*V)
    4. view_tag = h[0]
    5. P  = B_spend + h*G
    6. stealth_address = address(P)

Randomness is injected as ``rng(n) -> bytes`` so tests can pin it; the
default is ``secrets.token_bytes``. A failing source is fatal and never
replaced by a weaker one.

Usage:
    from stealth_addr import generate_stealth_address

    result = generate_stealth_address(meta_address_hex)
    result.stealth_address      # pay here
    result.ephemeral_public_key # announce
    result.view_tag             # announce
"""

from __future__ import annotations

import logging
import secrets
from typing import Callable, Optional

from ..errors import InsufficientEntropyError
from ..cryptography.common import (
    SCALAR_SIZE,
    StealthAddress,
    is_valid_scalar,
    view_tag_of,
)
from ..cryptography.curve import CurveBackend, get_backend
from ..block.address import public_key_to_address
from .meta import MetaAddressLike, as_meta_address
from .shared import shared_secret_digest, stealth_public_key


logger = logging.getLogger("stealth-addr.generator")

RandomSource = Callable[[int], bytes]

# Rejection sampling bound. An honest source fails a draw with
# probability ~2^-128, so hitting this means the source is broken.
MAX_SAMPLE_ATTEMPTS = 64


def sample_ephemeral_scalar(rng: Optional[RandomSource] = None) -> bytes:
    """
    Draw a scalar in [1, n-1] by rejection sampling.

    Raises:
        InsufficientEntropyError: Source unavailable, short output, or
            no in-range draw within MAX_SAMPLE_ATTEMPTS
    """
    source = rng if rng is not None else secrets.token_bytes

    for attempt in range(1, MAX_SAMPLE_ATTEMPTS + 1):
        try:
            candidate = source(SCALAR_SIZE)
        except (OSError, NotImplementedError) as e:
            raise InsufficientEntropyError(f"Randomness source unavailable: {e}") from e

        if not isinstance(candidate, (bytes, bytearray)) or len(candidate) != SCALAR_SIZE:
            raise InsufficientEntropyError(
                f"Randomness source must return {SCALAR_SIZE} bytes"
            )
        if is_valid_scalar(bytes(candidate)):
            return bytes(candidate)

        logger.warning("Rejected out-of-range ephemeral scalar (draw %d)", attempt)

    raise InsufficientEntropyError(f"No valid scalar after {MAX_SAMPLE_ATTEMPTS} draws")


def generate_stealth_address(
    meta_address: MetaAddressLike,
    rng: Optional[RandomSource] = None,
    backend: Optional[CurveBackend] = None,
) -> StealthAddress:
    """
    Generate a one-time stealth address for a meta-address.

    Args:
        meta_address: StealthMetaAddress, or its 66-byte hex/bytes encoding
        rng: Randomness source, rng(n) -> n bytes (default: secrets.token_bytes)
        backend: Curve backend (default: coincurve)

    Returns:
        StealthAddress (address, ephemeral public key, view tag)

    Raises:
        InvalidMetaAddressLengthError: Meta-address is not 66 bytes
        InvalidPointEncodingError: A meta-address key is not on the curve
        InsufficientEntropyError: Randomness source failed
    """
    meta = as_meta_address(meta_address)
    curve = get_backend(backend)

    for _ in range(MAX_SAMPLE_ATTEMPTS):
        ephemeral_private_key = sample_ephemeral_scalar(rng)
        digest = shared_secret_digest(curve, ephemeral_private_key, meta.viewing_public_key)

        # h is used as a scalar for h*G; redraw e when it cannot be one
        if not is_valid_scalar(digest):
            logger.warning("Shared secret digest outside [1, n-1], redrawing ephemeral key")
            continue

        ephemeral_public_key = curve.scalar_multiply_base(ephemeral_private_key)
        point = stealth_public_key(curve, meta.spending_public_key, digest)
        result = StealthAddress(
            stealth_address=public_key_to_address(point, backend=curve),
            ephemeral_public_key=ephemeral_public_key,
            view_tag=view_tag_of(digest),
        )

        logger.debug(
            "Generated stealth address %s (view tag %s)",
            result.stealth_address,
            result.view_tag_hex,
        )
        return result

    raise InsufficientEntropyError(f"No usable ephemeral key after {MAX_SAMPLE_ATTEMPTS} draws")
