# stealth_addr/stealth/scanner.py
"""
Stealth-Addr Scanner (recipient side)

Decides whether an announced stealth address belongs to the recipient:

    1. S' = v*E,  h' = keccak256(S')
    2. h'[0] != view_tag   → not mine (no further EC work)
    3. address(B_spend + h'*G) == announced address

The view tag only filters: a 1-in-256 collision passes step 2 and is then
rejected by the exact comparison in step 3, so the overall check has no
false positives. A tag mismatch is the common, successful "not mine"
answer and is returned as a value, never raised.

Each call reads only the recipient keys and one announcement, so callers
may scan announcements in any order or in parallel.
"""

from __future__ import annotations

import logging
from enum import IntEnum
from typing import Optional, Union

from ..errors import InvalidPointEncodingError, ScalarOutOfRangeError, StealthError
from ..cryptography.common import (
    HexLike,
    _ct_eq,
    hex_to_bytes,
    is_valid_scalar,
    parse_scalar,
    parse_view_tag,
    view_tag_of,
)
from ..cryptography.curve import CurveBackend, get_backend
from ..block.address import normalize_address, public_key_to_address
from .shared import shared_secret_digest, stealth_public_key


logger = logging.getLogger("stealth-addr.scanner")

ViewTagLike = Union[int, str, bytes]


class ScanStatus(IntEnum):
    """Outcome of scanning one announcement."""
    MATCH = 0
    VIEW_TAG_MISMATCH = 1    # Rejected by the 1-byte hint
    ADDRESS_MISMATCH = 2     # Tag collided, exact comparison failed
    MALFORMED = 3            # Announcement data does not decode


def _point(value: HexLike, what: str) -> bytes:
    try:
        return hex_to_bytes(value)
    except (ValueError, TypeError) as e:
        raise InvalidPointEncodingError(f"{what} is not valid hex: {e}") from e


def _scan(
    stealth_address: str,
    ephemeral_public_key: HexLike,
    spending_public_key: HexLike,
    viewing_private_key: HexLike,
    view_tag: ViewTagLike,
    curve: CurveBackend,
) -> ScanStatus:
    announced = normalize_address(stealth_address)
    ephemeral = _point(ephemeral_public_key, "ephemeral public key")
    spending = _point(spending_public_key, "spending public key")
    viewing = parse_scalar(viewing_private_key, "viewing private key")
    tag = parse_view_tag(view_tag)

    digest = shared_secret_digest(curve, viewing, ephemeral)
    if view_tag_of(digest) != tag:
        return ScanStatus.VIEW_TAG_MISMATCH

    # A conforming sender never announces a digest that is not a scalar
    if not is_valid_scalar(digest):
        return ScanStatus.ADDRESS_MISMATCH

    expected = public_key_to_address(stealth_public_key(curve, spending, digest), backend=curve)
    if _ct_eq(expected.encode(), announced.encode()):
        return ScanStatus.MATCH
    return ScanStatus.ADDRESS_MISMATCH


def check_stealth_address(
    stealth_address: str,
    ephemeral_public_key: HexLike,
    spending_public_key: HexLike,
    viewing_private_key: HexLike,
    view_tag: ViewTagLike,
    backend: Optional[CurveBackend] = None,
) -> bool:
    """
    Check whether an announced stealth address belongs to the recipient.

    Args:
        stealth_address: Announced chain address (checksum casing optional)
        ephemeral_public_key: Announced 33-byte compressed ephemeral key
        spending_public_key: Recipient's spending public key
        viewing_private_key: Recipient's viewing private key
        view_tag: Announced view tag (int, 1 byte, or "0xNN")
        backend: Curve backend (default: coincurve)

    Returns:
        True iff the address was generated for this recipient

    Raises:
        AddressError: Announced address is malformed
        InvalidPointEncodingError: A public key does not decode
        ScalarOutOfRangeError: Viewing private key is not a valid scalar
        InvalidViewTagError: View tag is not a single byte
    """
    status = _scan(
        stealth_address,
        ephemeral_public_key,
        spending_public_key,
        viewing_private_key,
        view_tag,
        get_backend(backend),
    )
    return status is ScanStatus.MATCH


def classify_announcement(
    stealth_address: str,
    ephemeral_public_key: HexLike,
    spending_public_key: HexLike,
    viewing_private_key: HexLike,
    view_tag: ViewTagLike,
    backend: Optional[CurveBackend] = None,
) -> ScanStatus:
    """
    Like ``check_stealth_address`` but never raises for bad input.

    Bulk scanners use this to tell "not mine" from "malformed" without
    exception handling per announcement.
    """
    try:
        status = _scan(
            stealth_address,
            ephemeral_public_key,
            spending_public_key,
            viewing_private_key,
            view_tag,
            get_backend(backend),
        )
    except StealthError as e:
        logger.debug("Malformed announcement for %s: %s", stealth_address, e)
        return ScanStatus.MALFORMED
    return status


def compute_stealth_public_key(
    ephemeral_public_key: HexLike,
    spending_public_key: HexLike,
    viewing_private_key: HexLike,
    backend: Optional[CurveBackend] = None,
) -> bytes:
    """
    Recompute the compressed stealth point B_spend + h*G for an announcement.

    Raises:
        InvalidPointEncodingError: A public key does not decode
        ScalarOutOfRangeError: Viewing key or shared secret digest is not a valid scalar
    """
    curve = get_backend(backend)
    viewing = parse_scalar(viewing_private_key, "viewing private key")
    digest = shared_secret_digest(curve, viewing, _point(ephemeral_public_key, "ephemeral public key"))
    if not is_valid_scalar(digest):
        raise ScalarOutOfRangeError("Shared secret digest outside [1, n-1]")
    return stealth_public_key(curve, _point(spending_public_key, "spending public key"), digest)
