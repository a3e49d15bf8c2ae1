import enum
import struct
from dataclasses import dataclass

from common.types import Struct

ELTORITO_SIGNATURE = "EL TORITO SPECIFICATION"
VALIDATION_KEY = (0x55, 0xAA)
BOOTABLE = 0x88
NOT_BOOTABLE = 0x00


class Platform(enum.IntEnum):
    X86 = 0x00
    PPC = 0x01
    MAC = 0x02
    EFI = 0xEF

    @property
    def label(self):
        return "Mac" if self is Platform.MAC else self.name


class MediaType(enum.IntEnum):
    NOEMU = 0x00
    FDD12 = 0x01
    FDD144 = 0x02
    FDD288 = 0x03
    HDD = 0x04

    @property
    def label(self):
        return self.name


@dataclass(frozen=True)
class Unknown:
    """A platform or media type byte outside the known values."""
    value: int

    @property
    def label(self):
        return "??? UNKNOWN"


def decode_platform(value):
    try:
        return Platform(value)
    except ValueError:
        return Unknown(value)


def decode_media_type(value):
    try:
        return MediaType(value)
    except ValueError:
        return Unknown(value)


@dataclass(frozen=True)
class BootRecord(Struct):
    type: int
    identifier: bytes
    version: int
    boot_system_identifier: bytes
    boot_identifier: bytes
    catalog_sector: int  # only meaningful for El Torito

    struct = struct.Struct("<B5sB32s32sI")


@dataclass(frozen=True)
class ValidationEntry(Struct):
    header_id: int
    platform_id: int
    reserved: int
    id_string: bytes
    checksum: int
    keybyte1: int
    keybyte2: int

    struct = struct.Struct("<BBH24sHBB")

    @staticmethod
    def compute_checksum(data):
        """Sum of the sixteen little-endian words of the entry, modulo 2**16."""
        words = struct.unpack("<16H", data)
        return sum(words) & 0xFFFF


@dataclass(frozen=True)
class InitialEntry(Struct):
    boot_indicator: int
    boot_media_type: int
    load_segment: int
    system_type: int
    reserved: int
    sector_count: int
    load_rba: int

    struct = struct.Struct("<BBHBBHI20x")
