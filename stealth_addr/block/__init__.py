# stealth_addr/block/__init__.py
"""
Stealth-Addr Block: Chain Integration Layer

Submodules:
    address/  - Public key / private key → EIP-55 chain address
    account/  - Seed message template and account signing (eth_account)
"""

from .address import (
    ADDRESS_SIZE,
    public_key_to_address,
    private_key_to_address,
    normalize_address,
    addresses_equal,
)

from .account import (
    STEALTH_MESSAGE_PREFIX,
    stealth_message,
    sign_stealth_message,
    create_mnemonic_account,
    account_from_mnemonic,
)

__all__ = [
    # Address
    "ADDRESS_SIZE",
    "public_key_to_address",
    "private_key_to_address",
    "normalize_address",
    "addresses_equal",
    # Account
    "STEALTH_MESSAGE_PREFIX",
    "stealth_message",
    "sign_stealth_message",
    "create_mnemonic_account",
    "account_from_mnemonic",
]
