# stealth_addr/block/account.py
"""
Stealth-Addr Block: Seed Message Signing

Stealth keys are not stored: they are re-derived from the account's
signature over a fixed message, so re-signing the same message with the
same account always yields the same keys.

    message   = "Stealth Signed Message:\\n" + checksummed account address
    signature = personal_sign(message)        # EIP-191, 65 bytes r||s||v

The template bytes are part of the compatibility surface with existing
deployments and must not change.

Usage:
    from stealth_addr.block.account import sign_stealth_message

    address, signature = sign_stealth_message(private_key)
    keys = derive_stealth_keys(signature)
"""

from __future__ import annotations

import logging
from typing import Tuple

from eth_account import Account
from eth_account.messages import encode_defunct
from eth_account.signers.local import LocalAccount

from ..schemes import DEFAULT_SCHEME
from ..cryptography.common import HexLike, parse_scalar, to_hex
from .address import normalize_address


logger = logging.getLogger("stealth-addr.account")

STEALTH_MESSAGE_PREFIX: str = DEFAULT_SCHEME.message_prefix


def stealth_message(address: str) -> str:
    """Seed message for an account (address is checksummed first)."""
    return STEALTH_MESSAGE_PREFIX + normalize_address(address)


def sign_stealth_message(private_key: HexLike) -> Tuple[str, str]:
    """
    Sign the seed message with an account key.

    Args:
        private_key: Account private key (32 bytes or hex)

    Returns:
        Tuple of (account address, 0x-prefixed 65-byte signature)

    Raises:
        ScalarOutOfRangeError: Key is not hex or not a valid scalar
    """
    key = parse_scalar(private_key, "account private key")

    account = Account.from_key(key)
    signable = encode_defunct(text=stealth_message(account.address))
    signed = Account.sign_message(signable, private_key=key)

    logger.debug("Signed stealth seed message for %s", account.address)
    return account.address, to_hex(bytes(signed.signature))


def create_mnemonic_account() -> Tuple[LocalAccount, str]:
    """
    Create a fresh BIP-39 account (m/44'/60'/0'/0/0).

    Returns:
        Tuple of (account, mnemonic phrase)
    """
    Account.enable_unaudited_hdwallet_features()
    account, mnemonic = Account.create_with_mnemonic()
    logger.debug("Created mnemonic account %s", account.address)
    return account, mnemonic


def account_from_mnemonic(mnemonic: str) -> LocalAccount:
    """Restore the first account of a BIP-39 mnemonic."""
    Account.enable_unaudited_hdwallet_features()
    return Account.from_mnemonic(mnemonic)
