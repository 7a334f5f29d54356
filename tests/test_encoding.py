import pytest

from classgroup.bignum import compl, setbit
from classgroup.encoding import (
    BufferTooSmallError,
    crem_u16,
    export_obj,
    frem_u32,
    import_obj,
    size_in_bits,
    three_gcd,
)


def test_check_expected_bit_width():
    s = -2
    assert size_in_bits(s) == 2
    s = compl(s)
    assert s == 1
    s = setbit(s, 2)
    assert s == 5


def test_check_export():
    s = compl(0x100)
    assert export_obj(s, 3) == bytes([0xFF, 0xFE, 0xFF])
    assert export_obj(0, 0) == b""


def test_check_rem():
    assert crem_u16(-100, 3) == 1
    assert crem_u16(100, 3) == 2


def test_frem_u32_floor_remainder():
    assert frem_u32(100, 3) == 1
    assert frem_u32(-100, 3) == 2


@pytest.mark.parametrize("func", [crem_u16, frem_u32])
def test_zero_divisor_rejected(func):
    with pytest.raises(ZeroDivisionError):
        func(10, 0)


def test_divisor_range():
    with pytest.raises(ValueError):
        crem_u16(10, 0x10000)
    with pytest.raises(ValueError):
        frem_u32(10, 1 << 32)


def test_import_empty_is_zero():
    assert import_obj(b"") == 0


def test_import_negative():
    assert import_obj(bytes([0xFF, 0xFE, 0xFF])) == compl(0x100)
    assert import_obj(b"\xff\xff") == -1
    assert import_obj(b"\x80") == -128


def test_import_positive():
    assert import_obj(b"\x00\xff") == 255
    assert import_obj(b"\x7f") == 127


@pytest.mark.parametrize(
    "value", [0, 1, -1, 127, -128, 255, -257, 2**64, -(2**64), 12345678901234567890]
)
@pytest.mark.parametrize("extra", [0, 1, 5])
def test_round_trip(value, extra):
    length = (size_in_bits(value) + 8) // 8 + extra
    data = export_obj(value, length)
    assert len(data) == length
    assert import_obj(data) == value


def test_buffer_too_small_reports_needed():
    with pytest.raises(BufferTooSmallError) as info:
        export_obj(0x100, 1)
    assert info.value.needed == 2


def test_sign_bit_always_reserved():
    with pytest.raises(BufferTooSmallError) as info:
        export_obj(255, 1)
    assert info.value.needed == 2
    with pytest.raises(BufferTooSmallError) as info:
        export_obj(-128, 1)
    assert info.value.needed == 2


def test_nonzero_into_empty_buffer_fails():
    with pytest.raises(BufferTooSmallError) as info:
        export_obj(5, 0)
    assert info.value.needed == 1


def test_leading_padding():
    assert export_obj(1, 4) == b"\x00\x00\x00\x01"
    assert export_obj(-1, 3) == b"\xff\xff\xff"


def test_negative_length_rejected():
    with pytest.raises(ValueError):
        export_obj(1, -1)


def test_three_gcd():
    assert three_gcd(12, 18, 30) == 6
    assert three_gcd(0, 0, 7) == 7
    assert three_gcd(-8, 12, 20) == 4