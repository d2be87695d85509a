import pytest
from hypothesis import given, strategies as st

from xxhashpy.xxh32 import Digest32, sum32

SEQ_1024 = bytes(i % 256 for i in range(1024))

AGAINST_DIGEST_CASES = [
    b"",
    b"a",
    b"hello world",
    bytes(range(8)),
    b"\xaa" * 1024,
    bytes(range(256)),
]


@pytest.mark.parametrize("data", AGAINST_DIGEST_CASES)
def test_sum32_matches_digest(data):
    d = Digest32()
    d.reset()
    d.update(data)
    assert sum32(data) == d.intdigest()


@pytest.mark.parametrize("split", [1, 2, 3, 4, 7, 8, 15, 16, 17, 32, 64, 128])
def test_incremental_equivalence(split):
    base = sum32(SEQ_1024)
    d = Digest32()
    for start in range(0, len(SEQ_1024), split):
        d.update(SEQ_1024[start:start + split])
    assert d.intdigest() == base


def test_consistency():
    data = b"consistency-test-bytes"
    first = sum32(data)
    d = Digest32()
    for value in data:
        d.update(bytes([value]))
    assert d.intdigest() == first
    assert sum32(data) == first
    assert 0 <= first <= 0xFFFFFFFF
    assert sum32(data + b"!") != first


@pytest.mark.parametrize(
    "text, expected",
    [
        ("", 0x02CC5D05),
        ("a", 0x550D7456),
        ("abc", 0x32D153FF),
        ("message digest", 0x7C948494),
        ("abcdefghijklmnopqrstuvwxyz", 0x63A14D5F),
        (
            "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789",
            0x9C285E64,
        ),
        (
            "1234567890" * 8,
            0x9C05F475,
        ),
    ],
)
def test_known_values(text, expected):
    assert sum32(text.encode()) == expected
    d = Digest32()
    d.update(text.encode())
    assert d.intdigest() == expected


def test_digest_and_hexdigest_forms():
    d = Digest32()
    d.update(b"abc")
    assert d.digest() == bytes.fromhex("32d153ff")
    assert d.hexdigest() == "32d153ff"


def test_reset_restores_initial_state():
    d = Digest32()
    d.update(b"some data that will be discarded")
    d.reset()
    d.update(b"abc")
    assert d.intdigest() == 0x32D153FF


def test_seeded_digest_reset_to_zero_seed():
    d = Digest32(12345)
    d.update(b"abc")
    seeded = d.intdigest()
    d.reset()
    d.update(b"abc")
    assert d.intdigest() == 0x32D153FF
    assert seeded != 0x32D153FF


def test_intdigest_does_not_change_state():
    d = Digest32()
    d.update(b"message ")
    d.intdigest()
    d.update(b"digest")
    assert d.intdigest() == 0x7C948494


def test_state_roundtrip_mid_stream():
    whole = b"abcdefghijklmnopqrstuvwxyz"
    d = Digest32()
    d.update(whole[:19])
    state = d.to_bytes()
    assert len(state) == 44
    assert state[:4] == b"xxh\x03"

    restored = Digest32()
    restored.load(state)
    assert restored.to_bytes() == state
    restored.update(whole[19:])
    assert restored.intdigest() == 0x63A14D5F


def test_state_of_fresh_digest_has_zeroed_buffer():
    state = Digest32().to_bytes()
    assert state[-16:] == bytes(16)


def test_load_rejects_bad_identifier():
    with pytest.raises(ValueError, match="identifier"):
        Digest32().load(b"bad")


def test_load_rejects_bad_size():
    with pytest.raises(ValueError, match="size"):
        Digest32().load(b"xxh\x03" + bytes(10))


@pytest.mark.parametrize("seed", [-1, 2**32])
def test_seed_out_of_range(seed):
    with pytest.raises(ValueError):
        Digest32(seed)


@given(st.binary(max_size=200), st.integers(min_value=0, max_value=200))
def test_any_split_matches_one_shot(data, cut):
    d = Digest32()
    d.update(data[:cut])
    d.update(data[cut:])
    assert d.intdigest() == sum32(data)
    assert 0 <= d.intdigest() <= 0xFFFFFFFF


@given(st.binary(max_size=100), st.binary(max_size=100))
def test_state_roundtrip_property(head, tail):
    d = Digest32()
    d.update(head)
    other = Digest32()
    other.load(d.to_bytes())
    other.update(tail)
    assert other.intdigest() == sum32(head + tail)