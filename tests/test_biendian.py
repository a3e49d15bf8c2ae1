import io
import struct

import pytest

from utils.biendian import decode16, decode32, validate
from utils.common import FieldRangeException


@pytest.mark.parametrize("value", [0, 1, 0x1234, 0x8000, 0xFFFF])
def test_decode16_consistent(value):
    data = struct.pack("<H", value) + struct.pack(">H", value)
    decoded = decode16(data, 0)
    out = io.StringIO()
    assert validate("Field", decoded, out)
    assert decoded.value == value
    assert out.getvalue() == ""


@pytest.mark.parametrize("value", [0, 2048, 0xDEADBEEF, 0xFFFFFFFF])
def test_decode32_consistent(value):
    data = b"\xAA" + struct.pack("<I", value) + struct.pack(">I", value)
    decoded = decode32(data, 1)
    assert decoded.is_consistent()
    assert decoded.value == value
    assert decoded.width == 32


def test_mismatch_reports_both_values():
    data = struct.pack("<H", 2048) + struct.pack(">H", 512)
    decoded = decode16(data, 0)
    out = io.StringIO()
    assert not validate("Block Size", decoded, out)
    assert out.getvalue() == "\t\t??? Block Size: LE and BE mismatch: LE 2048, BE 512\n"
    assert decoded.value == 2048


def test_decode_past_end_of_buffer():
    with pytest.raises(FieldRangeException):
        decode32(bytes(8), 4)
