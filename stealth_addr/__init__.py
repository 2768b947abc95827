# stealth_addr/__init__.py
"""
Stealth-Addr: Dual-Key Stealth Addresses for EVM Chains

A recipient publishes one meta-address; any sender derives a fresh,
unlinkable one-time address from it that only the recipient can recognize
and spend from. No interaction between sender and recipient is needed.

- Keys derived from a wallet signature (nothing to back up)
- Meta-address: spending key ‖ viewing key (66 bytes)
- 1-byte view tag for cheap scanning
- Private key recovery for the one-time address

Architecture:
    ┌─────────────────────────────────────────────────────────┐
    │  stealth_addr                                           │
    │  ├── cryptography/     # Primitives                     │
    │  │   ├── common.py     # Constants, helpers, dataclasses│
    │  │   └── curve.py      # CurveBackend (coincurve)       │
    │  │                                                      │
    │  ├── block/            # Chain integration              │
    │  │   ├── address.py    # Public key → EIP-55 address    │
    │  │   └── account.py    # Seed message signing           │
    │  │                                                      │
    │  ├── stealth/          # Protocol                       │
    │  │   ├── keys.py       # Seed signature → key bundle    │
    │  │   ├── meta.py       # Meta-address codec             │
    │  │   ├── generator.py  # Sender                         │
    │  │   ├── scanner.py    # Recipient: is it mine?         │
    │  │   └── recover.py    # Recipient: spending key        │
    │  │                                                      │
    │  ├── schemes.py        # Parameter table                │
    │  ├── validation.py     # Consistency checks, tag stats  │
    │  └── demo.py           # End-to-end walkthrough         │
    └─────────────────────────────────────────────────────────┘

Quick Start:
    from stealth_addr import (
        derive_stealth_keys, generate_stealth_address,
        check_stealth_address, compute_stealth_private_key,
    )

    keys = derive_stealth_keys(signature)
    meta = keys.meta_address.to_hex()

    # Sender
    sa = generate_stealth_address(meta)

    # Recipient
    if check_stealth_address(
        sa.stealth_address, sa.ephemeral_public_key,
        keys.spending_key.public_key, keys.viewing_key.private_key,
        sa.view_tag,
    ):
        key = compute_stealth_private_key(keys, sa.ephemeral_public_key)
"""

__version__ = "0.1.0"

# =============================================================================
# Configuration & Errors
# =============================================================================

from .schemes import (
    SCHEMES,
    Scheme,
    get_scheme,
    DEFAULT_SCHEME_ID,
)

from .errors import (
    StealthError,
    MalformedSeedError,
    InvalidMetaAddressLengthError,
    InvalidPointEncodingError,
    InsufficientEntropyError,
    ScalarOutOfRangeError,
    AddressError,
    InvalidViewTagError,
)

# =============================================================================
# Primitives
# =============================================================================

from .cryptography.common import (
    SECP256K1_ORDER,
    keccak256,
    Keypair,
    StealthKeyBundle,
    StealthMetaAddress,
    StealthAddress,
)

from .cryptography.curve import (
    CurveBackend,
    CoincurveBackend,
)

# =============================================================================
# Chain Integration
# =============================================================================

from .block import (
    STEALTH_MESSAGE_PREFIX,
    stealth_message,
    sign_stealth_message,
    public_key_to_address,
    private_key_to_address,
)

# =============================================================================
# Protocol
# =============================================================================

from .stealth import (
    derive_stealth_keys,
    derive_stealth_keys_from_account,
    encode_meta_address,
    decode_meta_address,
    generate_stealth_address,
    ScanStatus,
    check_stealth_address,
    classify_announcement,
    compute_stealth_public_key,
    compute_stealth_private_key,
)

__all__ = [
    "__version__",
    # Configuration
    "SCHEMES",
    "Scheme",
    "get_scheme",
    "DEFAULT_SCHEME_ID",
    # Errors
    "StealthError",
    "MalformedSeedError",
    "InvalidMetaAddressLengthError",
    "InvalidPointEncodingError",
    "InsufficientEntropyError",
    "ScalarOutOfRangeError",
    "AddressError",
    "InvalidViewTagError",
    # Primitives
    "SECP256K1_ORDER",
    "keccak256",
    "Keypair",
    "StealthKeyBundle",
    "StealthMetaAddress",
    "StealthAddress",
    "CurveBackend",
    "CoincurveBackend",
    # Chain
    "STEALTH_MESSAGE_PREFIX",
    "stealth_message",
    "sign_stealth_message",
    "public_key_to_address",
    "private_key_to_address",
    # Protocol
    "derive_stealth_keys",
    "derive_stealth_keys_from_account",
    "encode_meta_address",
    "decode_meta_address",
    "generate_stealth_address",
    "ScanStatus",
    "check_stealth_address",
    "classify_announcement",
    "compute_stealth_public_key",
    "compute_stealth_private_key",
]
