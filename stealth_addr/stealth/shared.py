# stealth_addr/stealth/shared.py
"""
Steps shared by the sender and the recipient.

    S = e*V = v*E                      (ECDH, compressed point)
    h = keccak256(S)
    P = B_spend + h*G
"""

from __future__ import annotations

from ..cryptography.common import keccak256
from ..cryptography.curve import CurveBackend


def shared_secret_digest(curve: CurveBackend, scalar: bytes, point: bytes) -> bytes:
    """keccak256 of the compressed ECDH point. The point itself is never kept."""
    return keccak256(curve.ecdh(scalar, point))


def stealth_public_key(curve: CurveBackend, spending_public_key: bytes, digest: bytes) -> bytes:
    """B_spend + h*G, compressed. ``digest`` must already be a valid scalar."""
    return curve.point_add(spending_public_key, curve.scalar_multiply_base(digest))
