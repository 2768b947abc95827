# stealth_addr/validation.py
"""
Stealth-Addr: Encoding and Consistency Validation

Checks used by wallets before publishing keys and by the test suite:
1. Fixed-width hex segmentation (signatures, meta-addresses)
2. Meta-address round trip
3. Keypair consistency (public_key == private_key * G)
4. View tag distribution (histogram + chi-square against uniform)

The view tag statistics are a sanity check on the hash output, not a
security argument.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional, Sequence

import numpy as np
from scipy.stats import chisquare

from .cryptography.common import HexLike, StealthKeyBundle, hex_to_bytes, strip_0x, to_hex
from .cryptography.curve import CurveBackend, get_backend
from .stealth.meta import decode_meta_address, encode_meta_address


VIEW_TAG_VALUES = 256


# =============================================================================
# Hex Segmentation
# =============================================================================

def segment_hex(value: str, widths: Sequence[int]) -> List[str]:
    """
    Split a 0x-prefixed hex string into fixed-width byte segments.

    Args:
        value: "0x..." hex string
        widths: Segment sizes in bytes; must cover the input exactly

    Returns:
        List of "0x"-prefixed segments

    Raises:
        ValueError: Missing prefix, or widths do not match the input length
    """
    if not value.startswith("0x"):
        raise ValueError("Hex value must start with 0x")
    digits = strip_0x(value)
    if 2 * sum(widths) != len(digits):
        raise ValueError(f"Segments cover {sum(widths)} bytes, value has {len(digits) / 2:g}")

    segments = []
    offset = 0
    for width in widths:
        segments.append("0x" + digits[offset:offset + 2 * width])
        offset += 2 * width
    return segments


# =============================================================================
# Round-Trip Checks
# =============================================================================

def check_meta_address_round_trip(spending_public_key: HexLike, viewing_public_key: HexLike) -> bool:
    """decode(encode(s, v)) == (s, v)"""
    spending = hex_to_bytes(spending_public_key)
    viewing = hex_to_bytes(viewing_public_key)
    meta = decode_meta_address(encode_meta_address(spending, viewing))
    return meta.spending_public_key == spending and meta.viewing_public_key == viewing


def check_bundle_consistency(keys: StealthKeyBundle, backend: Optional[CurveBackend] = None) -> bool:
    """Both keypairs satisfy public_key == private_key * G."""
    curve = get_backend(backend)
    for keypair in (keys.spending_key, keys.viewing_key):
        if curve.scalar_multiply_base(keypair.private_key) != keypair.public_key:
            return False
    return True


def check_signature_segments(signature: HexLike) -> bool:
    """Signature splits into r(32) || s(32) || v(1) with nothing left over."""
    sig_hex = signature if isinstance(signature, str) else to_hex(signature)
    try:
        r, s, v = segment_hex(sig_hex, (32, 32, 1))
    except ValueError:
        return False
    return "0x" + strip_0x(r) + strip_0x(s) + strip_0x(v) == sig_hex


# =============================================================================
# View Tag Statistics
# =============================================================================

def view_tag_histogram(tags: Iterable[int]) -> np.ndarray:
    """Count of each view tag value 0..255."""
    arr = np.fromiter(tags, dtype=np.int64)
    if arr.size and (arr.min() < 0 or arr.max() >= VIEW_TAG_VALUES):
        raise ValueError("View tags must be in [0, 255]")
    return np.bincount(arr, minlength=VIEW_TAG_VALUES)


def view_tag_uniformity(tags: Iterable[int], alpha: float = 1e-4) -> Dict[str, Any]:
    """
    Chi-square goodness of fit of view tags against the uniform distribution.

    Returns:
        dict with samples, chi2, p_value, min/max bucket counts, and
        ``uniform`` (p_value >= alpha)
    """
    counts = view_tag_histogram(tags)
    samples = int(counts.sum())
    if samples == 0:
        raise ValueError("No view tags to analyse")

    result = chisquare(counts)
    p_value = float(result.pvalue)
    return {
        "samples": samples,
        "chi2": float(result.statistic),
        "p_value": p_value,
        "min_count": int(counts.min()),
        "max_count": int(counts.max()),
        "uniform": p_value >= alpha,
    }
