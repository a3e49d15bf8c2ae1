import logging

from eltorito.types import BootRecord, ELTORITO_SIGNATURE
from utils.common import decode_string

LOGGER = logging.getLogger(__name__)


def print_boot_record(sector, boot_catalog_sector, out):
    """Decode a type 0 descriptor.

    ``boot_catalog_sector`` is the pointer captured so far (0 for none). The
    return value is the pointer after this record, replaced when the record is
    El Torito and unchanged otherwise.
    """
    record = BootRecord.unpack_from(sector)
    boot_system_id = decode_string(record.boot_system_identifier)
    boot_id = decode_string(record.boot_identifier)

    print("\tTYPE 0: BOOT RECORD", file=out)
    print(f"\t\tBoot System Id = [{boot_system_id}]", file=out)
    print(f"\t\tBoot Id        = [{boot_id}]", file=out)

    if boot_system_id != ELTORITO_SIGNATURE or boot_id:
        print("\t!!! NOT EL TORITO", file=out)
        return boot_catalog_sector

    print("\t\t=== EL TORITO FOUND", file=out)
    if boot_catalog_sector != 0:
        print("\t\t??? MULTIPLE EL TORITO BOOT RECORDS ???", file=out)

    LOGGER.debug("El Torito boot catalog at sector %d", record.catalog_sector)
    print(f"\t\tBOOT CATALOG SECTOR = {record.catalog_sector}", file=out)
    return record.catalog_sector
