import struct

SECTOR_SIZE = 2048


class IsoInfoException(Exception):
    pass


class FieldRangeException(IsoInfoException, ValueError):
    pass


def read_field(data, offset, length):
    """Return exactly ``length`` bytes of ``data`` starting at ``offset``.

    Every decoder goes through this accessor instead of slicing directly, so a
    bad offset raises FieldRangeException rather than silently returning a
    short slice.
    """
    if offset < 0 or length < 0 or offset + length > len(data):
        raise FieldRangeException(
            f"field at offset {offset} length {length} outside {len(data)} byte buffer"
        )
    return bytes(data[offset:offset + length])


def decode_string(field):
    # Stops at the first NUL, keeps space padding, non-ASCII bytes become \xNN escapes
    return field.split(b"\x00", 1)[0].decode("ascii", errors="backslashreplace")


def read_string(data, offset, length):
    return decode_string(read_field(data, offset, length))


def read_u8(data, offset):
    return read_field(data, offset, 1)[0]


def read_u16le(data, offset):
    return struct.unpack("<H", read_field(data, offset, 2))[0]


def read_u16be(data, offset):
    return struct.unpack(">H", read_field(data, offset, 2))[0]


def read_u32le(data, offset):
    return struct.unpack("<I", read_field(data, offset, 4))[0]


def read_u32be(data, offset):
    return struct.unpack(">I", read_field(data, offset, 4))[0]


def format_bar_desc(text, max_len):
    if len(text) > max_len:
        return "..." + text[-(max_len - 3):]
    else:
        return text.rjust(max_len, " ")
