# stealth_addr/errors.py
"""
Stealth-Addr Exceptions

All failures are malformed-input conditions and are raised to the caller
unchanged. A view tag mismatch is not an error: scanners get a plain
``False`` (or ``ScanStatus.VIEW_TAG_MISMATCH``).
"""


class StealthError(Exception):
    """Base stealth address error."""
    pass


class MalformedSeedError(StealthError):
    """Seed signature has the wrong length or does not re-assemble."""
    pass


class InvalidMetaAddressLengthError(StealthError):
    """Meta-address is not exactly two compressed points."""
    def __init__(self, length: int, expected: int):
        self.length = length
        self.expected = expected
        super().__init__(f"Meta-address must be {expected} bytes, got {length}")


class InvalidPointEncodingError(StealthError):
    """Public key is not a valid compressed curve point."""
    pass


class InsufficientEntropyError(StealthError):
    """Randomness source failed while sampling an ephemeral key."""
    pass


class ScalarOutOfRangeError(StealthError):
    """Scalar is zero or not below the curve order."""
    pass


class AddressError(StealthError):
    """Invalid chain address."""
    pass


class InvalidViewTagError(StealthError):
    """View tag is not a single byte."""
    pass
