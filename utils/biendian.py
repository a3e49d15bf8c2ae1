import logging
from dataclasses import dataclass

from utils.common import read_u16le, read_u16be, read_u32le, read_u32be

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class BiendianValue:
    """An integer recorded twice, little-endian first then big-endian."""
    le: int
    be: int
    width: int

    def is_consistent(self):
        return self.le == self.be

    @property
    def value(self):
        # When the two copies disagree the little-endian one is trusted
        return self.le


def decode16(data, offset):
    return BiendianValue(read_u16le(data, offset), read_u16be(data, offset + 2), 16)


def decode32(data, offset):
    return BiendianValue(read_u32le(data, offset), read_u32be(data, offset + 4), 32)


def validate(name, value, out):
    if value.is_consistent():
        return True
    LOGGER.debug("%s biendian mismatch le=%d be=%d", name, value.le, value.be)
    print(f"\t\t??? {name}: LE and BE mismatch: LE {value.le}, BE {value.be}", file=out)
    return False
