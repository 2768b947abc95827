# tests/test_address.py
"""
Stealth-Addr Chain Address and Curve Adapter Test Suite

Tests for: public_key_to_address, private_key_to_address, CurveBackend
Categories:
  C1. Known-answer vectors
  C2. Curve adapter
  C3. Address validation
"""

import pytest

from stealth_addr import (
    AddressError,
    InvalidPointEncodingError,
    ScalarOutOfRangeError,
    keccak256,
    private_key_to_address,
    public_key_to_address,
)
from stealth_addr.block.address import addresses_equal, normalize_address
from stealth_addr.cryptography.common import scalar_to_bytes
from stealth_addr.cryptography.curve import CoincurveBackend, CurveBackend, get_backend


# Private key k -> (compressed k*G, address)
KNOWN_KEYS = {
    1: (
        "0279be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798",
        "0x7E5F4552091A69125d5DfCb7b8C2659029395Bdf",
    ),
    2: (
        "02c6047f9441ed7d6d3045406e95c07cd85c778e4b8cef3ca7abac09b95c709ee5",
        "0x2B5AD5c4795c026514f8317c7a215E218DcCD6cF",
    ),
    3: (
        "02f9308a019258c31049344f85f89d5229b531c845836f99b08601f113bce036f9",
        "0x6813Eb9362372EEF6200f3b1dbC3f819671cBA69",
    ),
}


# =============================================================================
# C1. Known-Answer Vectors
# =============================================================================

def test_c1_1_keccak_empty():
    assert keccak256(b"").hex() == "c5d2460186f7233c927e7db2dcc703c0e500b653ca82273b7bfad8045d85a470"


def test_c1_2_keccak_chunks_concatenate():
    assert keccak256(b"ab", b"cd") == keccak256(b"abcd")


@pytest.mark.parametrize("k", sorted(KNOWN_KEYS))
def test_c1_3_public_key_vectors(k):
    """C1.3: k*G and its address"""
    point_hex, address = KNOWN_KEYS[k]
    point = get_backend().scalar_multiply_base(scalar_to_bytes(k))

    assert point.hex() == point_hex
    assert public_key_to_address(point) == address
    assert private_key_to_address(scalar_to_bytes(k)) == address
    print(f"  k={k}: {address}")


def test_c1_4_uncompressed_input():
    """C1.4: compressed and uncompressed points map to the same address"""
    point = bytes.fromhex(KNOWN_KEYS[1][0])
    uncompressed = get_backend().decompress(point)

    assert len(uncompressed) == 65 and uncompressed[0] == 0x04
    assert public_key_to_address(uncompressed) == KNOWN_KEYS[1][1]
    assert public_key_to_address("0x" + point.hex()) == KNOWN_KEYS[1][1]


# =============================================================================
# C2. Curve Adapter
# =============================================================================

def test_c2_1_point_add():
    """C2.1: 1G + 2G == 3G"""
    curve = get_backend()
    g1 = bytes.fromhex(KNOWN_KEYS[1][0])
    g2 = bytes.fromhex(KNOWN_KEYS[2][0])
    assert curve.point_add(g1, g2).hex() == KNOWN_KEYS[3][0]


def test_c2_2_ecdh_symmetry():
    """C2.2: a*(b*G) == b*(a*G)"""
    curve = get_backend()
    a = scalar_to_bytes(0x1234567890ABCDEF)
    b = scalar_to_bytes(0xFEDCBA0987654321)
    assert curve.ecdh(a, curve.scalar_multiply_base(b)) == curve.ecdh(b, curve.scalar_multiply_base(a))


def test_c2_3_ecdh_with_generator():
    """C2.3: 3*G via ecdh equals scalar_multiply_base"""
    curve = get_backend()
    g1 = bytes.fromhex(KNOWN_KEYS[1][0])
    assert curve.ecdh(scalar_to_bytes(3), g1).hex() == KNOWN_KEYS[3][0]


def test_c2_4_compress_round_trip():
    curve = get_backend()
    point = bytes.fromhex(KNOWN_KEYS[2][0])
    assert curve.compress(curve.decompress(point)) == point


def test_c2_5_invalid_points():
    """C2.5: length and prefix checks surface as InvalidPointEncodingError"""
    curve = get_backend()
    g1 = bytes.fromhex(KNOWN_KEYS[1][0])

    with pytest.raises(InvalidPointEncodingError):
        curve.ecdh(scalar_to_bytes(2), g1[:32])
    with pytest.raises(InvalidPointEncodingError):
        curve.ecdh(scalar_to_bytes(2), b"\x05" + g1[1:])
    with pytest.raises(InvalidPointEncodingError):
        curve.point_add(g1, b"\x04" + g1[1:])
    with pytest.raises(InvalidPointEncodingError):
        curve.decompress(bytes(10))
    with pytest.raises(InvalidPointEncodingError):
        public_key_to_address("0xzz")

    assert curve.is_valid_point(g1)
    assert not curve.is_valid_point(b"\x05" + g1[1:])
    assert not curve.is_valid_point(g1 + b"\x00")


def test_c2_6_invalid_scalars():
    curve = get_backend()
    with pytest.raises(ScalarOutOfRangeError):
        curve.scalar_multiply_base(bytes(32))
    with pytest.raises(ScalarOutOfRangeError):
        curve.ecdh(b"\xff" * 32, bytes.fromhex(KNOWN_KEYS[1][0]))
    with pytest.raises(ScalarOutOfRangeError):
        private_key_to_address(bytes(32))
    with pytest.raises(ScalarOutOfRangeError):
        private_key_to_address("0xnothex")


def test_c2_7_point_sum_at_infinity():
    """C2.7: P + (-P) has no encoding"""
    curve = get_backend()
    g1 = bytes.fromhex(KNOWN_KEYS[1][0])
    neg_g1 = bytes([g1[0] ^ 0x01]) + g1[1:]
    with pytest.raises(InvalidPointEncodingError):
        curve.point_add(g1, neg_g1)


def test_c2_8_backend_selection():
    custom = CoincurveBackend()
    assert get_backend(custom) is custom
    assert isinstance(get_backend(), CurveBackend)
    with pytest.raises(TypeError):
        CurveBackend()


# =============================================================================
# C3. Address Validation
# =============================================================================

def test_c3_1_checksum_agnostic_equality():
    address = KNOWN_KEYS[1][1]
    assert addresses_equal(address, address.lower())
    assert normalize_address(address.lower()) == address
    assert not addresses_equal(address, KNOWN_KEYS[2][1])


@pytest.mark.parametrize("address", [
    "7E5F4552091A69125d5DfCb7b8C2659029395Bdf",
    "0x7E5F4552091A69125d5DfCb7b8C2659029395Bd",
    "0x7E5F4552091A69125d5DfCb7b8C2659029395BdfAA",
    "0xZZ5F4552091A69125d5DfCb7b8C2659029395Bdf",
    "0x7E5F_552091A69125d5DfCb7b8C2659029395Bdf",
])
def test_c3_2_malformed_addresses(address):
    with pytest.raises(AddressError):
        normalize_address(address)
