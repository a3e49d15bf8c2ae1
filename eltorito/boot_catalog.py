import logging

from eltorito.types import (
    BOOTABLE,
    NOT_BOOTABLE,
    VALIDATION_KEY,
    InitialEntry,
    Unknown,
    ValidationEntry,
    decode_media_type,
    decode_platform,
)
from utils.common import decode_string, read_field

LOGGER = logging.getLogger(__name__)

INITIAL_ENTRY_OFFSET = 0x20
DEFAULT_LOAD_SEGMENT = 0x7C00


def print_validation_entry(sector, out):
    """Check and print the validation entry, returns False if it is unusable."""
    print("\t\t--- Validation Entry", file=out)
    entry = ValidationEntry.unpack_from(sector)

    if entry.header_id != 0x01:
        print("\t\t??? Validation entry missing", file=out)
        return False

    if entry.reserved != 0:
        print("\t\t??? Reserved bytes 2-3 not zero", file=out)
        return False

    if (entry.keybyte1, entry.keybyte2) != VALIDATION_KEY:
        print("\t\t??? Key missing or incorrect", file=out)
        return False

    checksum = ValidationEntry.compute_checksum(read_field(sector, 0, ValidationEntry.struct.size))
    if checksum != 0:
        print(f"\t\t??? Checksum {checksum} invalid!", file=out)
        return False

    platform = decode_platform(entry.platform_id)
    print(f"\t\tPlatform ID = 0x{entry.platform_id:02X} ({platform.label})", file=out)
    print(f"\t\tManufacturer = [{decode_string(entry.id_string)}]", file=out)
    return True


def print_initial_entry(sector, out):
    print("\t\t--- Initial Entry", file=out)
    entry = InitialEntry.unpack_from(sector, INITIAL_ENTRY_OFFSET)

    if entry.boot_indicator not in (BOOTABLE, NOT_BOOTABLE):
        print(f"\t\t??? Unexpected boot indicator {entry.boot_indicator:02X}", file=out)
        return None

    media_type = decode_media_type(entry.boot_media_type)
    print(f"\t\tBOOTABLE   = {'YES' if entry.boot_indicator == BOOTABLE else 'NO'}", file=out)
    print(f"\t\tMEDIA TYPE = 0x{entry.boot_media_type:02X} ({media_type.label})", file=out)
    # The remaining fields depend on the media type
    if isinstance(media_type, Unknown):
        print(f"\t\t??? Unexpected media type ID {entry.boot_media_type:02X}", file=out)
        return None

    print(f"\t\tLOAD SEG  = 0x{entry.load_segment:04X}", file=out)
    if entry.load_segment == 0:
        print(f"\t\t[Load segment 0, assume default 0x{DEFAULT_LOAD_SEGMENT:04X}]", file=out)
    print(f"\t\tSYS TYPE  = 0x{entry.system_type:02X}", file=out)

    if entry.reserved != 0:
        print("\t\t??? Byte 0x05 unexpectedly non-zero", file=out)
        return None

    print(f"\t\tBOOT SEC  = {entry.load_rba} [2048 byte sector]", file=out)
    print(f"\t\tSECTORS   = {entry.sector_count} [512 byte sectors]", file=out)
    return entry


def print_boot_catalog(sector, out):
    # Only the first catalog sector is decoded, section entries after the
    # initial entry are ignored.
    if not print_validation_entry(sector, out):
        LOGGER.debug("Boot catalog validation entry rejected")
        return None
    return print_initial_entry(sector, out)
