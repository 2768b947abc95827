# stealth_addr/cryptography/common.py
"""
Stealth-Addr Common Components

Shared utilities, constants, and data structures for the stealth address
protocol.

Wire Formats:
  - Scalars (private keys, digests): 32 bytes, big-endian
  - Points: 33-byte SEC1 compressed form (0x02/0x03 || x)
  - Meta-address: spending point (33B) || viewing point (33B)
  - Hex strings on the API surface always carry a "0x" prefix
"""

from __future__ import annotations

import hmac
from dataclasses import dataclass, field
from typing import Any, Dict, Union

from web3 import Web3

from ..errors import InvalidMetaAddressLengthError, InvalidViewTagError, ScalarOutOfRangeError
from ..schemes import DEFAULT_SCHEME


# =============================================================================
# Constants
# =============================================================================

# secp256k1 group order (n)
SECP256K1_ORDER: int = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141

SCALAR_SIZE: int = DEFAULT_SCHEME.scalar_size
POINT_SIZE: int = DEFAULT_SCHEME.point_size
UNCOMPRESSED_POINT_SIZE: int = 65
META_ADDRESS_SIZE: int = DEFAULT_SCHEME.meta_address_size
SIGNATURE_SIZE: int = DEFAULT_SCHEME.signature_size
VIEW_TAG_SIZE: int = DEFAULT_SCHEME.view_tag_size

HexLike = Union[str, bytes, bytearray]


# =============================================================================
# Utility Functions
# =============================================================================

def keccak256(*chunks: bytes) -> bytes:
    """Compute keccak-256 of concatenated inputs."""
    return bytes(Web3.keccak(b"".join(chunks)))


def _ct_eq(a: bytes, b: bytes) -> bool:
    """Constant-time byte comparison."""
    if len(a) != len(b):
        return False
    return hmac.compare_digest(a, b)


def _int_from_bytes(b: bytes) -> int:
    """Convert bytes to integer (big-endian, unsigned)."""
    return int.from_bytes(b, "big", signed=False)


def strip_0x(value: str) -> str:
    """Drop a leading 0x/0X prefix."""
    if value[:2] in ("0x", "0X"):
        return value[2:]
    return value


def hex_to_bytes(value: HexLike) -> bytes:
    """
    Accept raw bytes or a hex string (with or without 0x).

    Raises:
        ValueError: If the string is not valid hex
    """
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    if not isinstance(value, str):
        raise TypeError(f"Expected hex string or bytes, got {type(value).__name__}")
    return bytes.fromhex(strip_0x(value))


def to_hex(data: bytes) -> str:
    """Encode bytes as 0x-prefixed lowercase hex."""
    return "0x" + bytes(data).hex()


def scalar_to_bytes(k: int) -> bytes:
    """Encode a scalar as 32 bytes, big-endian, zero-padded."""
    return k.to_bytes(SCALAR_SIZE, "big")


def is_valid_scalar(value: bytes) -> bool:
    """True if value is a 32-byte scalar in [1, n-1]."""
    if len(value) != SCALAR_SIZE:
        return False
    return 0 < _int_from_bytes(value) < SECP256K1_ORDER


def check_scalar(value: bytes, what: str = "scalar") -> int:
    """
    Validate a 32-byte scalar and return it as an integer.

    Raises:
        ScalarOutOfRangeError: If value is zero or >= curve order
    """
    if len(value) != SCALAR_SIZE:
        raise ScalarOutOfRangeError(f"{what} must be {SCALAR_SIZE} bytes, got {len(value)}")
    k = _int_from_bytes(value)
    if not 0 < k < SECP256K1_ORDER:
        raise ScalarOutOfRangeError(f"{what} outside [1, n-1]")
    return k


def parse_scalar(value: HexLike, what: str = "scalar") -> bytes:
    """
    Decode a hex or bytes private key and range-check it.

    Raises:
        ScalarOutOfRangeError: Not hex, wrong length, or outside [1, n-1]
    """
    try:
        scalar = hex_to_bytes(value)
    except (ValueError, TypeError) as e:
        raise ScalarOutOfRangeError(f"{what} is not valid hex: {e}") from e
    check_scalar(scalar, what)
    return scalar


def view_tag_of(digest: bytes) -> int:
    """View tag: leading byte of the hashed shared secret."""
    return digest[0]


def parse_view_tag(value: Union[int, str, bytes]) -> int:
    """
    Accept a view tag as int, 1-byte bytes, or hex string ("0x66").

    Raises:
        InvalidViewTagError: Wrong type, not hex, or outside [0, 255]
    """
    if isinstance(value, bool):
        raise InvalidViewTagError("View tag must not be a bool")
    if isinstance(value, int):
        tag = value
    elif isinstance(value, (bytes, bytearray)):
        if len(value) != VIEW_TAG_SIZE:
            raise InvalidViewTagError(f"View tag must be {VIEW_TAG_SIZE} byte, got {len(value)}")
        tag = value[0]
    elif isinstance(value, str):
        try:
            tag = int(strip_0x(value), 16)
        except ValueError as e:
            raise InvalidViewTagError(f"View tag is not valid hex: {value!r}") from e
    else:
        raise InvalidViewTagError(f"Expected view tag as int, bytes or hex, got {type(value).__name__}")
    if not 0 <= tag <= 0xFF:
        raise InvalidViewTagError(f"View tag out of range: {tag}")
    return tag


# =============================================================================
# Data Structures
# =============================================================================

@dataclass(frozen=True)
class Keypair:
    """
    secp256k1 keypair.

    Invariant: public_key == private_key * G
    """
    public_key: bytes                          # 33 bytes, compressed
    private_key: bytes = field(repr=False)     # 32 bytes, big-endian

    @property
    def public_key_hex(self) -> str:
        return to_hex(self.public_key)

    @property
    def private_key_hex(self) -> str:
        return to_hex(self.private_key)

    def to_dict(self) -> Dict[str, str]:
        """Hex view, as exchanged with wallets."""
        return {
            "publicKey": self.public_key_hex,
            "privateKey": self.private_key_hex,
        }


@dataclass(frozen=True)
class StealthMetaAddress:
    """
    Recipient's published handle.

    Wire format: spending_public_key (33B) || viewing_public_key (33B)
    """
    spending_public_key: bytes
    viewing_public_key: bytes

    def to_bytes(self) -> bytes:
        """Serialize to wire format."""
        return self.spending_public_key + self.viewing_public_key

    def to_hex(self) -> str:
        return to_hex(self.to_bytes())

    @classmethod
    def from_bytes(cls, data: bytes) -> "StealthMetaAddress":
        """Deserialize from wire format with length validation."""
        if len(data) != META_ADDRESS_SIZE:
            raise InvalidMetaAddressLengthError(len(data), META_ADDRESS_SIZE)
        return cls(
            spending_public_key=data[:POINT_SIZE],
            viewing_public_key=data[POINT_SIZE:],
        )

    def to_dict(self) -> Dict[str, str]:
        return {
            "spendingPublicKey": to_hex(self.spending_public_key),
            "viewingPublicKey": to_hex(self.viewing_public_key),
        }


@dataclass(frozen=True)
class StealthKeyBundle:
    """
    Recipient's long-lived key material, derived once from a seed signature.

    Never transmitted; only ``meta_address`` is published.
    """
    viewing_key: Keypair
    spending_key: Keypair

    @property
    def meta_address(self) -> StealthMetaAddress:
        return StealthMetaAddress(
            spending_public_key=self.spending_key.public_key,
            viewing_public_key=self.viewing_key.public_key,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "viewingKey": self.viewing_key.to_dict(),
            "spendingKey": self.spending_key.to_dict(),
        }


@dataclass(frozen=True)
class StealthAddress:
    """
    One-time stealth address and the announcement data the recipient scans.

    Attributes:
        stealth_address: EIP-55 checksummed chain address
        ephemeral_public_key: 33-byte compressed ephemeral point
        view_tag: leading byte of keccak256(shared secret)
    """
    stealth_address: str
    ephemeral_public_key: bytes
    view_tag: int

    @property
    def view_tag_hex(self) -> str:
        return f"0x{self.view_tag:02x}"

    def to_dict(self) -> Dict[str, str]:
        return {
            "stealthAddress": self.stealth_address,
            "ephemeralPublicKey": to_hex(self.ephemeral_public_key),
            "viewTag": self.view_tag_hex,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "StealthAddress":
        """Parse the hex view produced by ``to_dict``."""
        return cls(
            stealth_address=data["stealthAddress"],
            ephemeral_public_key=hex_to_bytes(data["ephemeralPublicKey"]),
            view_tag=parse_view_tag(data["viewTag"]),
        )
