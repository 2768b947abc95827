# stealth_addr/stealth/__init__.py
"""
Stealth-Addr Protocol

Flow:
    keys.derive_stealth_keys        seed signature → StealthKeyBundle
    meta.encode_meta_address        publish spending ‖ viewing keys
    generator.generate_stealth_address   [sender]
    scanner.check_stealth_address        [recipient]
    recover.compute_stealth_private_key  [recipient]
"""

from .keys import (
    extract_portions,
    derive_stealth_keys,
    derive_stealth_keys_from_account,
)

from .meta import (
    encode_meta_address,
    decode_meta_address,
    as_meta_address,
)

from .generator import (
    MAX_SAMPLE_ATTEMPTS,
    sample_ephemeral_scalar,
    generate_stealth_address,
)

from .scanner import (
    ScanStatus,
    check_stealth_address,
    classify_announcement,
    compute_stealth_public_key,
)

from .recover import compute_stealth_private_key

__all__ = [
    # Keys
    "extract_portions",
    "derive_stealth_keys",
    "derive_stealth_keys_from_account",
    # Meta-address
    "encode_meta_address",
    "decode_meta_address",
    "as_meta_address",
    # Generator
    "MAX_SAMPLE_ATTEMPTS",
    "sample_ephemeral_scalar",
    "generate_stealth_address",
    # Scanner
    "ScanStatus",
    "check_stealth_address",
    "classify_announcement",
    "compute_stealth_public_key",
    # Recovery
    "compute_stealth_private_key",
]
