# stealth_addr/block/address.py
"""
Stealth-Addr Block: Chain Address Conversion

EVM address derivation for stealth points and recovered private keys:

    address = EIP55( keccak256(X || Y)[-20:] )

where X || Y is the 64-byte uncompressed point without the 0x04 prefix.

Usage:
    from stealth_addr.block.address import public_key_to_address

    addr = public_key_to_address(stealth_point)   # "0x7E5F..."
    addresses_equal(addr, addr.lower())           # True
"""

from __future__ import annotations

from typing import Optional

from eth_account import Account
from web3 import Web3

from ..errors import AddressError, InvalidPointEncodingError
from ..schemes import DEFAULT_SCHEME
from ..cryptography.common import HexLike, hex_to_bytes, keccak256, parse_scalar, to_hex
from ..cryptography.curve import CurveBackend, get_backend


ADDRESS_SIZE = DEFAULT_SCHEME.address_size
ADDRESS_HEX_LENGTH = 2 + 2 * ADDRESS_SIZE  # "0x" + 40


def public_key_to_address(public_key: HexLike, backend: Optional[CurveBackend] = None) -> str:
    """
    Convert a public key to its checksummed chain address.

    Args:
        public_key: 33-byte compressed or 65-byte uncompressed point
        backend: Curve backend (default: coincurve)

    Returns:
        EIP-55 checksummed address

    Raises:
        InvalidPointEncodingError: If the point does not decode
    """
    try:
        point = hex_to_bytes(public_key)
    except (ValueError, TypeError) as e:
        raise InvalidPointEncodingError(f"Public key is not valid hex: {e}") from e

    uncompressed = get_backend(backend).decompress(point)
    digest = keccak256(uncompressed[1:])
    return Web3.to_checksum_address(to_hex(digest[-ADDRESS_SIZE:]))


def private_key_to_address(private_key: HexLike) -> str:
    """Address controlled by a private key (eth_account)."""
    key = parse_scalar(private_key, "private key")
    return Account.from_key(key).address


def normalize_address(address: str) -> str:
    """
    Validate address format and return it checksummed.

    Raises:
        AddressError: If address is not 0x + 40 hex chars
    """
    if not isinstance(address, str) or not address.startswith("0x"):
        raise AddressError("Address must start with 0x")
    if len(address) != ADDRESS_HEX_LENGTH:
        raise AddressError(f"Address must be {ADDRESS_HEX_LENGTH} chars, got {len(address)}")
    try:
        int(address, 16)
    except ValueError:
        raise AddressError("Address must be valid hex")
    try:
        return Web3.to_checksum_address(address)
    except ValueError as e:
        raise AddressError(f"Address must be valid hex: {e}") from e


def addresses_equal(a: str, b: str) -> bool:
    """Compare two addresses ignoring checksum casing."""
    return normalize_address(a) == normalize_address(b)
