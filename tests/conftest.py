import struct

import pytest

from utils.files import SectorReadException

SECTOR_SIZE = 2048


def biendian16(value):
    return struct.pack("<H", value) + struct.pack(">H", value)


def biendian32(value):
    return struct.pack("<I", value) + struct.pack(">I", value)


def make_descriptor(vd_type, version=1, identifier=b"CD001"):
    sector = bytearray(SECTOR_SIZE)
    sector[0] = vd_type
    sector[1:6] = identifier
    sector[6] = version
    return sector


def make_pvd(space_size=18):
    sector = make_descriptor(1)
    sector[8:40] = b"LINUX".ljust(32)
    sector[40:72] = b"TESTVOL".ljust(32)
    sector[80:88] = biendian32(space_size)
    sector[120:124] = biendian16(1)
    sector[124:128] = biendian16(1)
    sector[128:132] = biendian16(2048)
    sector[132:140] = biendian32(10)
    sector[140:144] = struct.pack("<I", 19)
    sector[144:148] = struct.pack("<I", 0)
    sector[148:152] = struct.pack(">I", 21)
    sector[152:156] = struct.pack(">I", 0)
    sector[190:190 + 128] = b"SET".ljust(128)
    sector[318:318 + 128] = b"PUBLISHER".ljust(128)
    sector[813:830] = b"2023011512304567\x04"
    sector[881] = 1
    return sector


def make_boot_record(catalog_sector, system_id=b"EL TORITO SPECIFICATION", boot_id=b""):
    sector = make_descriptor(0)
    sector[7:7 + len(system_id)] = system_id
    sector[39:39 + len(boot_id)] = boot_id
    sector[71:75] = struct.pack("<I", catalog_sector)
    return sector


def make_terminator():
    return make_descriptor(255)


def make_validation_entry(platform_id=0x00, id_string=b"TESTING"):
    entry = bytearray(32)
    entry[0] = 0x01
    entry[1] = platform_id
    entry[4:4 + len(id_string)] = id_string
    entry[30] = 0x55
    entry[31] = 0xAA
    words = struct.unpack("<16H", entry)
    entry[28:30] = struct.pack("<H", -sum(words) & 0xFFFF)
    return entry


def make_initial_entry(boot_indicator=0x88, media_type=0x00, load_segment=0, system_type=0,
                       reserved=0, sector_count=4, load_rba=30):
    return bytearray(struct.pack("<BBHBBHI20x", boot_indicator, media_type, load_segment, system_type,
                                 reserved, sector_count, load_rba))


def make_catalog(validation=None, initial=None):
    sector = bytearray(SECTOR_SIZE)
    sector[0:32] = make_validation_entry() if validation is None else validation
    sector[32:64] = make_initial_entry() if initial is None else initial
    return sector


class FakeSectors:
    """Serves sectors from a dict, anything missing fails to read."""

    def __init__(self, sectors):
        self.sectors = {k: bytes(v) for k, v in sectors.items()}
        self.reads = []

    def __call__(self, number):
        self.reads.append(number)
        try:
            return self.sectors[number]
        except KeyError:
            raise SectorReadException(f"failed reading sector {number}")


@pytest.fixture
def write_image(tmp_path):
    def _write_image(sectors, count=18, name="test.iso"):
        data = bytearray(SECTOR_SIZE * count)
        for number, sector in sectors.items():
            data[number * SECTOR_SIZE:(number + 1) * SECTOR_SIZE] = sector
        path = tmp_path / name
        path.write_bytes(bytes(data))
        return path

    return _write_image
