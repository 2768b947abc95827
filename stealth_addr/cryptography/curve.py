# stealth_addr/cryptography/curve.py
"""
Stealth-Addr Curve Adapter

Capability interface for the elliptic-curve operations the protocol needs.
The protocol modules only talk to ``CurveBackend``; the default backend
binds it to libsecp256k1 through coincurve.

Operations:
    - scalar_multiply_base(k)   k*G
    - point_add(P, Q)           P + Q
    - ecdh(k, P)                k*P (compressed shared point, unhashed)
    - compress(P) / decompress(P)

All points cross the interface as SEC1 bytes: 33-byte compressed form,
or 65-byte uncompressed form from ``decompress``.

Usage:
    from stealth_addr.cryptography.curve import get_backend

    curve = get_backend()
    pub = curve.scalar_multiply_base(priv)
    shared = curve.ecdh(priv, peer_pub)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from coincurve import PublicKey

from ..errors import InvalidPointEncodingError
from .common import POINT_SIZE, UNCOMPRESSED_POINT_SIZE, check_scalar


COMPRESSED_PREFIXES = (0x02, 0x03)


# =============================================================================
# Abstract Interface
# =============================================================================

class CurveBackend(ABC):
    """
    Abstract secp256k1 backend.

    Implementations must raise ``InvalidPointEncodingError`` for points that
    do not decode and ``ScalarOutOfRangeError`` for scalars outside [1, n-1].
    """

    name: str = "abstract"

    @abstractmethod
    def scalar_multiply_base(self, scalar: bytes) -> bytes:
        """Return scalar*G, compressed."""
        pass

    @abstractmethod
    def point_add(self, a: bytes, b: bytes) -> bytes:
        """Return a + b, compressed."""
        pass

    @abstractmethod
    def ecdh(self, scalar: bytes, point: bytes) -> bytes:
        """Return scalar*point, compressed."""
        pass

    @abstractmethod
    def compress(self, point: bytes) -> bytes:
        """Re-encode any SEC1 point in 33-byte compressed form."""
        pass

    @abstractmethod
    def decompress(self, point: bytes) -> bytes:
        """Re-encode any SEC1 point in 65-byte uncompressed form."""
        pass

    def is_valid_point(self, point: bytes) -> bool:
        """Check if bytes are a valid compressed point."""
        if len(point) != POINT_SIZE or point[0] not in COMPRESSED_PREFIXES:
            return False
        try:
            self.decompress(point)
        except InvalidPointEncodingError:
            return False
        return True


# =============================================================================
# coincurve Backend
# =============================================================================

class CoincurveBackend(CurveBackend):
    """libsecp256k1 via coincurve."""

    name = "coincurve"

    @staticmethod
    def _load(point: bytes, compressed_only: bool = True) -> PublicKey:
        if compressed_only:
            if len(point) != POINT_SIZE:
                raise InvalidPointEncodingError(
                    f"Compressed point must be {POINT_SIZE} bytes, got {len(point)}"
                )
            if point[0] not in COMPRESSED_PREFIXES:
                raise InvalidPointEncodingError(f"Invalid point prefix: 0x{point[0]:02x}")
        elif len(point) not in (POINT_SIZE, UNCOMPRESSED_POINT_SIZE):
            raise InvalidPointEncodingError(f"Invalid point length: {len(point)}")
        try:
            return PublicKey(bytes(point))
        except ValueError as e:
            raise InvalidPointEncodingError(f"Point not on curve: {e}") from e

    def scalar_multiply_base(self, scalar: bytes) -> bytes:
        check_scalar(scalar)
        return PublicKey.from_secret(bytes(scalar)).format(compressed=True)

    def point_add(self, a: bytes, b: bytes) -> bytes:
        pa = self._load(a)
        pb = self._load(b)
        try:
            total = PublicKey.combine_keys([pa, pb])
        except ValueError as e:
            # a == -b
            raise InvalidPointEncodingError("Point sum is the point at infinity") from e
        return total.format(compressed=True)

    def ecdh(self, scalar: bytes, point: bytes) -> bytes:
        check_scalar(scalar)
        return self._load(point).multiply(bytes(scalar)).format(compressed=True)

    def compress(self, point: bytes) -> bytes:
        return self._load(point, compressed_only=False).format(compressed=True)

    def decompress(self, point: bytes) -> bytes:
        return self._load(point, compressed_only=False).format(compressed=False)


# =============================================================================
# Backend Selection
# =============================================================================

_DEFAULT_BACKEND: CurveBackend = CoincurveBackend()


def get_backend(backend: Optional[CurveBackend] = None) -> CurveBackend:
    """Return ``backend`` or the process-wide coincurve backend."""
    return backend if backend is not None else _DEFAULT_BACKEND


__all__ = [
    "CurveBackend",
    "CoincurveBackend",
    "get_backend",
]
