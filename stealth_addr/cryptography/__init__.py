# stealth_addr/cryptography/__init__.py
"""
Stealth-Addr Cryptography Module

Primitives the protocol is built on:
  - keccak-256 (web3)
  - secp256k1 point/scalar operations behind CurveBackend (coincurve)

Wire Format:
  - Scalars: 32 bytes big-endian
  - Points: 33-byte compressed SEC1
"""

from .common import (
    # Constants
    SECP256K1_ORDER,
    SCALAR_SIZE,
    POINT_SIZE,
    UNCOMPRESSED_POINT_SIZE,
    META_ADDRESS_SIZE,
    SIGNATURE_SIZE,
    VIEW_TAG_SIZE,
    # Utilities
    keccak256,
    hex_to_bytes,
    to_hex,
    strip_0x,
    scalar_to_bytes,
    is_valid_scalar,
    check_scalar,
    parse_scalar,
    view_tag_of,
    parse_view_tag,
    # Data structures
    Keypair,
    StealthKeyBundle,
    StealthMetaAddress,
    StealthAddress,
)

from .curve import (
    CurveBackend,
    CoincurveBackend,
    get_backend,
)

__all__ = [
    # Constants
    "SECP256K1_ORDER",
    "SCALAR_SIZE",
    "POINT_SIZE",
    "UNCOMPRESSED_POINT_SIZE",
    "META_ADDRESS_SIZE",
    "SIGNATURE_SIZE",
    "VIEW_TAG_SIZE",
    # Utilities
    "keccak256",
    "hex_to_bytes",
    "to_hex",
    "strip_0x",
    "scalar_to_bytes",
    "is_valid_scalar",
    "check_scalar",
    "parse_scalar",
    "view_tag_of",
    "parse_view_tag",
    # Data structures
    "Keypair",
    "StealthKeyBundle",
    "StealthMetaAddress",
    "StealthAddress",
    # Curve
    "CurveBackend",
    "CoincurveBackend",
    "get_backend",
]
