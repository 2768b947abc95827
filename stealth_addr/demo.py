# stealth_addr/demo.py
"""
Stealth-Addr: End-to-End Walkthrough

    1. Create a mnemonic account (recipient)
    2. Sign the seed message, derive the stealth key bundle
    3. Publish the meta-address
    4. Sender generates a one-time stealth address
    5. Recipient scans the announcement and recovers the private key

Run:
    python -m stealth_addr.demo
"""

from __future__ import annotations

import logging
from typing import Any, Dict

from .block.account import create_mnemonic_account, sign_stealth_message
from .block.address import addresses_equal, private_key_to_address
from .cryptography.common import to_hex
from .stealth.keys import derive_stealth_keys
from .stealth.meta import decode_meta_address, encode_meta_address
from .stealth.generator import generate_stealth_address
from .stealth.scanner import check_stealth_address
from .stealth.recover import compute_stealth_private_key


logger = logging.getLogger("stealth-addr.demo")


def run_demo() -> Dict[str, Any]:
    """Run the full recipient/sender flow and report each step."""
    print("=" * 70)
    print("Stealth-Addr End-to-End Demo")
    print("=" * 70)

    # Recipient bootstrap
    account, mnemonic = create_mnemonic_account()
    print(f"\n  Generated mnemonic: {mnemonic}")
    print(f"  Main account: {account.address}")

    address, signature = sign_stealth_message(bytes(account.key))
    print(f"  Signature: {signature[:18]}...")

    keys = derive_stealth_keys(signature)
    print(f"  Spending public key: {keys.spending_key.public_key_hex}")
    print(f"  Viewing public key:  {keys.viewing_key.public_key_hex}")

    meta_address = encode_meta_address(keys.spending_key.public_key, keys.viewing_key.public_key)
    print(f"  Stealth meta address: {meta_address}")

    # Sender
    parsed = decode_meta_address(meta_address)
    stealth = generate_stealth_address(parsed)
    print(f"\n  New stealth address: {stealth.stealth_address}")
    print(f"  Ephemeral public key: {to_hex(stealth.ephemeral_public_key)}")
    print(f"  View tag: {stealth.view_tag_hex}")

    # Recipient
    is_valid = check_stealth_address(
        stealth.stealth_address,
        stealth.ephemeral_public_key,
        parsed.spending_public_key,
        keys.viewing_key.private_key,
        stealth.view_tag,
    )
    print(f"\n  Is valid stealth address: {is_valid}")

    stealth_private_key = compute_stealth_private_key(keys, stealth.ephemeral_public_key)
    controls = addresses_equal(private_key_to_address(stealth_private_key), stealth.stealth_address)
    print(f"  Is valid stealth account: {controls}")

    all_pass = is_valid and controls
    logger.info("Demo finished: %s", "passed" if all_pass else "failed")
    print("\n" + "=" * 70)
    print(f"{'DEMO PASSED ✅' if all_pass else 'DEMO FAILED ❌'}")
    print("=" * 70)

    return {
        "account": address,
        "meta_address": meta_address,
        "stealth_address": stealth.stealth_address,
        "is_valid": is_valid,
        "controls": controls,
        "passed": all_pass,
    }


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    run_demo()
