# stealth_addr/schemes.py
"""
Stealth-Addr Protocol Schemes

Defines the parameter set of the stealth address protocol so that every
size, prefix and hash choice lives in one table.

Scheme Selection:
    - Scheme 0x01: secp256k1 + keccak-256, EVM (EIP-55) chain addresses

Usage:
    from stealth_addr.schemes import SCHEMES, get_scheme

    scheme = get_scheme(0x01)
    print(scheme.meta_address_size)  # 66
    print(scheme.message_prefix)     # "Stealth Signed Message:\\n"
"""

from typing import Dict
from dataclasses import dataclass


# =============================================================================
# Scheme Definitions
# =============================================================================

@dataclass(frozen=True)
class Scheme:
    """Stealth address parameter scheme."""
    id: int
    name: str
    curve: str
    hash_name: str
    message_prefix: str      # Seed message template, signed as prefix + address
    signature_size: int      # r(32) + s(32) + v(1)
    portion_size: int        # Bytes of signature hashed into each private key
    scalar_size: int         # Private key / hash digest size
    point_size: int          # Compressed public key size
    view_tag_size: int       # Leading digest bytes used as the view tag
    address_size: int        # Chain address size in bytes

    @property
    def meta_address_size(self) -> int:
        """Spending key + viewing key."""
        return 2 * self.point_size


SCHEMES: Dict[int, Scheme] = {
    0x01: Scheme(
        id=0x01,
        name="secp256k1-keccak256-evm",
        curve="secp256k1",
        hash_name="keccak256",
        message_prefix="Stealth Signed Message:\n",
        signature_size=65,
        portion_size=32,
        scalar_size=32,
        point_size=33,
        view_tag_size=1,
        address_size=20,
    ),
}

DEFAULT_SCHEME_ID = 0x01


def get_scheme(scheme_id: int) -> Scheme:
    """
    Get scheme by ID.

    Args:
        scheme_id: Scheme identifier (0x01)

    Returns:
        Scheme instance

    Raises:
        ValueError: If scheme_id is unknown
    """
    if scheme_id not in SCHEMES:
        raise ValueError(f"Unknown scheme_id: 0x{scheme_id:02x}. Valid: {list(SCHEMES.keys())}")
    return SCHEMES[scheme_id]


DEFAULT_SCHEME = get_scheme(DEFAULT_SCHEME_ID)
