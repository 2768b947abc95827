# stealth_addr/stealth/meta.py
"""
Stealth-Addr Meta-Address Codec

    meta_address = 0x || spending_public_key (33B) || viewing_public_key (33B)

No delimiter, fixed layout, 132 hex characters after the prefix. The codec
is byte-level only; points are checked for length and prefix here and for
curve membership when first used.
"""

from __future__ import annotations

from typing import Union

from ..errors import InvalidMetaAddressLengthError, InvalidPointEncodingError
from ..cryptography.common import (
    META_ADDRESS_SIZE,
    POINT_SIZE,
    HexLike,
    StealthMetaAddress,
    hex_to_bytes,
    strip_0x,
)
from ..cryptography.curve import COMPRESSED_PREFIXES


MetaAddressLike = Union[StealthMetaAddress, HexLike]


def _compressed_point(value: HexLike, what: str) -> bytes:
    try:
        point = hex_to_bytes(value)
    except (ValueError, TypeError) as e:
        raise InvalidPointEncodingError(f"{what} is not valid hex: {e}") from e
    if len(point) != POINT_SIZE:
        raise InvalidPointEncodingError(f"{what} must be {POINT_SIZE} bytes, got {len(point)}")
    if point[0] not in COMPRESSED_PREFIXES:
        raise InvalidPointEncodingError(f"{what} has invalid prefix 0x{point[0]:02x}")
    return point


def encode_meta_address(spending_public_key: HexLike, viewing_public_key: HexLike) -> str:
    """
    Pack two compressed public keys into a meta-address.

    Returns:
        "0x" + 132 hex chars

    Raises:
        InvalidPointEncodingError: If either key is not a 33-byte compressed point
    """
    meta = StealthMetaAddress(
        spending_public_key=_compressed_point(spending_public_key, "spending public key"),
        viewing_public_key=_compressed_point(viewing_public_key, "viewing public key"),
    )
    return meta.to_hex()


def decode_meta_address(meta_address: HexLike) -> StealthMetaAddress:
    """
    Unpack a meta-address into its spending and viewing public keys.

    Raises:
        InvalidMetaAddressLengthError: Unless exactly 66 bytes
        InvalidPointEncodingError: If the hex does not parse
    """
    if isinstance(meta_address, str):
        digits = strip_0x(meta_address)
        if len(digits) != 2 * META_ADDRESS_SIZE:
            raise InvalidMetaAddressLengthError(len(digits) // 2, META_ADDRESS_SIZE)
        try:
            data = bytes.fromhex(digits)
        except ValueError as e:
            raise InvalidPointEncodingError(f"Meta-address is not valid hex: {e}") from e
    else:
        data = bytes(meta_address)
    return StealthMetaAddress.from_bytes(data)


def as_meta_address(value: MetaAddressLike) -> StealthMetaAddress:
    """Accept a decoded meta-address or its hex/bytes encoding."""
    if isinstance(value, StealthMetaAddress):
        return value
    return decode_meta_address(value)
