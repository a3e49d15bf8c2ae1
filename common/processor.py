import logging

from common.types import VolumeDescriptorHeader
from eltorito.boot_catalog import print_boot_catalog
from eltorito.boot_record import print_boot_record
from pvd import print_pvd
from utils.common import IsoInfoException, format_bar_desc
from utils.dump import dump_sector
from utils.files import SectorReadException

LOGGER = logging.getLogger(__name__)

VOLUME_DESCRIPTOR_START = 16

BOOT_RECORD = 0
PRIMARY_VOLUME_DESCRIPTOR = 1
VOLUME_DESCRIPTOR_SET_TERMINATOR = 255


class DescriptorException(IsoInfoException):
    pass


class DescriptorProcessor:
    """Walks the volume descriptor set and the El Torito boot catalog.

    ``read_sector`` is any callable returning the 2048 bytes of a sector or
    raising SectorReadException. Output is written to ``out``.
    """
    _bar_desc_len = 24

    def __init__(self, read_sector, filename, out, progress_manager=None):
        self.read_sector = read_sector
        self.filename = filename
        self.out = out
        self.progress_manager = progress_manager

    def process(self):
        boot_catalog_sector = self.walk_descriptors()
        if boot_catalog_sector != 0:
            self.process_boot_catalog(boot_catalog_sector)
        return boot_catalog_sector

    def walk_descriptors(self):
        print("=== Volume Descriptors", file=self.out)
        boot_catalog_sector = 0
        sector_number = VOLUME_DESCRIPTOR_START

        pbar = None
        if self.progress_manager is not None:
            pbar = self.progress_manager.counter(desc=format_bar_desc(self.filename, self._bar_desc_len),
                                                 unit="descriptors", leave=False)
        try:
            while True:
                sector = self.read_sector(sector_number)
                header = VolumeDescriptorHeader.unpack_from(sector)
                if not header.check_magic():
                    raise DescriptorException(f"sector {sector_number} missing CD001 descriptor")

                LOGGER.debug("Sector %d holds descriptor type %d", sector_number, header.type)
                print(f"Sector {sector_number}: descriptor type {header.type} version {header.version}",
                      file=self.out)
                dump_sector(sector, self.out)

                if header.type == BOOT_RECORD:
                    boot_catalog_sector = print_boot_record(sector, boot_catalog_sector, self.out)
                elif header.type == PRIMARY_VOLUME_DESCRIPTOR:
                    print_pvd(sector, self.out)

                if pbar is not None:
                    pbar.update()

                if header.type == VOLUME_DESCRIPTOR_SET_TERMINATOR:
                    break
                sector_number += 1
        finally:
            if pbar is not None:
                pbar.close()

        print(f"TOTAL: {sector_number - VOLUME_DESCRIPTOR_START + 1} volume descriptors "
              f"(sectors {VOLUME_DESCRIPTOR_START}-{sector_number})", file=self.out)
        return boot_catalog_sector

    def process_boot_catalog(self, sector_number):
        try:
            sector = self.read_sector(sector_number)
        except SectorReadException as e:
            raise SectorReadException(f"failed reading boot catalog sector {sector_number}") from e

        LOGGER.info("Reading El Torito boot catalog at sector %d", sector_number)
        print("=== El Torito", file=self.out)
        print(f"Sector {sector_number}: EL TORITO BOOT CATALOG", file=self.out)
        dump_sector(sector, self.out)
        return print_boot_catalog(sector, self.out)
