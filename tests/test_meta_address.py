# tests/test_meta_address.py
"""
Stealth-Addr Meta-Address Codec Test Suite

Tests for: encode_meta_address, decode_meta_address, StealthMetaAddress
Categories:
  M1. Correctness (layout, round trip)
  M2. Robustness (length, prefix, hex)
"""

import pytest

from stealth_addr import (
    InvalidMetaAddressLengthError,
    InvalidPointEncodingError,
    StealthMetaAddress,
    decode_meta_address,
    encode_meta_address,
)
from stealth_addr.cryptography.curve import get_backend
from stealth_addr.stealth.generator import sample_ephemeral_scalar
from stealth_addr.stealth.meta import as_meta_address
from stealth_addr.validation import check_meta_address_round_trip, segment_hex


G_COMPRESSED = bytes.fromhex("0279BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798")
G2_COMPRESSED = bytes.fromhex("02C6047F9441ED7D6D3045406E95C07CD85C778E4B8CEF3CA7ABAC09B95C709EE5")


def _random_point() -> bytes:
    return get_backend().scalar_multiply_base(sample_ephemeral_scalar())


# =============================================================================
# M1. Correctness
# =============================================================================

def test_m1_1_layout():
    """M1.1: spending ‖ viewing, no delimiter"""
    print("\n[M1.1] Meta-Address Layout")
    print("-" * 50)

    meta = encode_meta_address(G_COMPRESSED, G2_COMPRESSED)
    print(f"  {meta[:24]}...")

    assert meta == "0x" + G_COMPRESSED.hex() + G2_COMPRESSED.hex()
    assert len(meta) == 2 + 132

    spending, viewing = segment_hex(meta, (33, 33))
    assert spending == "0x" + G_COMPRESSED.hex()
    assert viewing == "0x" + G2_COMPRESSED.hex()


def test_m1_2_round_trip_random_points():
    """M1.2: decode(encode(s, v)) == (s, v)"""
    print("\n[M1.2] Round Trip")
    print("-" * 50)

    for _ in range(50):
        s, v = _random_point(), _random_point()
        decoded = decode_meta_address(encode_meta_address(s, v))
        assert decoded.spending_public_key == s
        assert decoded.viewing_public_key == v
        assert check_meta_address_round_trip(s, v)
    print("  50/50 round trips exact")


def test_m1_3_hex_inputs():
    """M1.3: hex-encoded keys encode the same as bytes"""
    assert encode_meta_address("0x" + G_COMPRESSED.hex(), G2_COMPRESSED.hex()) == \
        encode_meta_address(G_COMPRESSED, G2_COMPRESSED)


def test_m1_4_decode_bytes():
    raw = G_COMPRESSED + G2_COMPRESSED
    decoded = decode_meta_address(raw)
    assert decoded == StealthMetaAddress(G_COMPRESSED, G2_COMPRESSED)
    assert decoded.to_bytes() == raw
    assert as_meta_address(decoded) is decoded
    assert as_meta_address(raw) == decoded


def test_m1_5_to_dict():
    view = StealthMetaAddress(G_COMPRESSED, G2_COMPRESSED).to_dict()
    assert view == {
        "spendingPublicKey": "0x" + G_COMPRESSED.hex(),
        "viewingPublicKey": "0x" + G2_COMPRESSED.hex(),
    }


# =============================================================================
# M2. Robustness
# =============================================================================

@pytest.mark.parametrize("value", [
    "0x" + "02" * 65,
    "0x" + "02" * 67,
    "0x" + "0" * 131,
    "0x",
    bytes(65),
    bytes(67),
])
def test_m2_1_wrong_length(value):
    """M2.1: anything but 66 bytes raises InvalidMetaAddressLengthError"""
    with pytest.raises(InvalidMetaAddressLengthError):
        decode_meta_address(value)


def test_m2_2_error_carries_lengths():
    with pytest.raises(InvalidMetaAddressLengthError) as exc:
        decode_meta_address(bytes(65))
    assert exc.value.length == 65
    assert exc.value.expected == 66


def test_m2_3_non_hex():
    with pytest.raises(InvalidPointEncodingError):
        decode_meta_address("0x" + "zz" * 66)


@pytest.mark.parametrize("spending", [
    G_COMPRESSED[:32],                      # short
    b"\x04" + G_COMPRESSED[1:],             # wrong prefix
    b"\x04" + bytes(64),                    # uncompressed length
    "0xnothex",
])
def test_m2_4_encode_rejects_bad_points(spending):
    """M2.4: encode accepts only 33-byte 02/03 points"""
    with pytest.raises(InvalidPointEncodingError):
        encode_meta_address(spending, G2_COMPRESSED)


def test_m2_5_segment_hex_requires_exact_cover():
    with pytest.raises(ValueError):
        segment_hex("0x" + "00" * 66, (33, 32))
    with pytest.raises(ValueError):
        segment_hex("00" * 66, (33, 33))


def run_all_meta_tests() -> None:
    print("=" * 70)
    print("M. META-ADDRESS CODEC")
    print("=" * 70)
    test_m1_1_layout()
    test_m1_2_round_trip_random_points()
    print("\nRESULT: ALL TESTS PASSED ✓")


if __name__ == "__main__":
    run_all_meta_tests()
