import struct
from dataclasses import dataclass

from utils.common import read_field

STANDARD_IDENTIFIER = b"CD001"


class Struct:
    struct = None

    @classmethod
    def unpack(cls, data):
        return cls(*cls.struct.unpack(data))

    @classmethod
    def unpack_from(cls, data, offset=0):
        return cls.unpack(read_field(data, offset, cls.struct.size))


@dataclass(frozen=True)
class VolumeDescriptorHeader(Struct):
    type: int
    identifier: bytes
    version: int

    struct = struct.Struct("<B5sB")

    def check_magic(self):
        return self.identifier == STANDARD_IDENTIFIER
