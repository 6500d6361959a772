import pytest

from auth_service.errors import MalformedPadding
from auth_service.utils.padding import pad, unpad


@pytest.mark.parametrize("block_size", [1, 8, 16, 255])
@pytest.mark.parametrize("data", [b"", b"a", b"hello world", b"x" * 16, bytes(range(40))])
def test_unpad_recovers_padded_data(data, block_size):
    padded = pad(data, block_size)
    assert len(padded) % block_size == 0
    assert unpad(padded, block_size) == data


def test_pad_adds_full_block_when_aligned():
    padded = pad(b"0123456789abcdef", 16)
    assert len(padded) == 32
    assert padded[16:] == bytes([16]) * 16


def test_pad_values_equal_pad_length():
    assert pad(b"abc", 8) == b"abc" + bytes([5]) * 5


@pytest.mark.parametrize("block_size", [0, -1, 256])
def test_pad_rejects_bad_block_size(block_size):
    with pytest.raises(ValueError):
        pad(b"abc", block_size)


def test_unpad_rejects_zero_pad_byte():
    with pytest.raises(MalformedPadding):
        unpad(b"abc\x00")


def test_unpad_rejects_pad_longer_than_data():
    with pytest.raises(MalformedPadding):
        unpad(b"\x05\x05")


def test_unpad_rejects_pad_longer_than_block():
    data = b"a" * 31 + bytes([17])
    with pytest.raises(MalformedPadding):
        unpad(data, 16)


def test_unpad_rejects_empty_input():
    with pytest.raises(MalformedPadding):
        unpad(b"")


@pytest.mark.parametrize("block_size", [16, 17, 32, 64, 255])
@pytest.mark.parametrize("data", [b"", b"abc", b"y" * 40])
def test_unpad_without_block_size(data, block_size):
    assert unpad(pad(data, block_size)) == data


def test_unpad_without_block_size_still_checks_data_length():
    with pytest.raises(MalformedPadding):
        unpad(b"abc" + bytes([200]))
