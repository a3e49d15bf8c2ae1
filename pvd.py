import logging
from dataclasses import dataclass

from dates import str_from_iso_date
from utils.biendian import BiendianValue, decode16, decode32, validate
from utils.common import read_string, read_u8, read_u32le, read_u32be, read_field
from utils.dump import dump_binary

LOGGER = logging.getLogger(__name__)

APPLICATION_USE_OFFSET = 883
APPLICATION_USE_ROWS = 2


@dataclass(frozen=True)
class PrimaryVolumeDescriptor:
    system_identifier: str
    volume_identifier: str
    volume_set_identifier: str
    publisher_identifier: str
    data_preparer_identifier: str
    application_identifier: str
    copyright_file_identifier: str
    abstract_file_identifier: str
    bibliographic_file_identifier: str
    space_size: BiendianValue
    set_size: BiendianValue
    seqnum: BiendianValue
    log_block_size: BiendianValue
    path_tbl_size: BiendianValue
    path_table_location_le: int
    optional_path_table_location_le: int
    path_table_location_be: int
    optional_path_table_location_be: int
    volume_creation_date: str
    volume_modification_date: str
    volume_expiration_date: str
    volume_effective_date: str
    file_structure_version: int
    application_use: bytes

    @classmethod
    def parse(cls, sector):
        return cls(
            system_identifier=read_string(sector, 8, 32),
            volume_identifier=read_string(sector, 40, 32),
            volume_set_identifier=read_string(sector, 190, 128),
            publisher_identifier=read_string(sector, 318, 128),
            data_preparer_identifier=read_string(sector, 446, 128),
            application_identifier=read_string(sector, 574, 128),
            copyright_file_identifier=read_string(sector, 702, 37),
            abstract_file_identifier=read_string(sector, 739, 37),
            bibliographic_file_identifier=read_string(sector, 776, 37),
            space_size=decode32(sector, 80),
            set_size=decode16(sector, 120),
            seqnum=decode16(sector, 124),
            log_block_size=decode16(sector, 128),
            path_tbl_size=decode32(sector, 132),
            # The four path table pointers are separate values, not biendian pairs
            path_table_location_le=read_u32le(sector, 140),
            optional_path_table_location_le=read_u32le(sector, 144),
            path_table_location_be=read_u32be(sector, 148),
            optional_path_table_location_be=read_u32be(sector, 152),
            volume_creation_date=str_from_iso_date(sector, 813),
            volume_modification_date=str_from_iso_date(sector, 830),
            volume_expiration_date=str_from_iso_date(sector, 847),
            volume_effective_date=str_from_iso_date(sector, 864),
            file_structure_version=read_u8(sector, 881),
            application_use=read_field(sector, APPLICATION_USE_OFFSET, APPLICATION_USE_ROWS * 16),
        )

    def validate(self, out):
        for name, value in (
            ("Volume Space Size", self.space_size),
            ("Volume Set Size", self.set_size),
            ("Volume Sequence", self.seqnum),
            ("Block Size", self.log_block_size),
            ("Path Table Size", self.path_tbl_size),
        ):
            if not validate(name, value, out):
                return False
        return True


def print_pvd(sector, out):
    print("\tTYPE 1: PRIMARY VOLUME DESCRIPTOR", file=out)
    pvd = PrimaryVolumeDescriptor.parse(sector)
    if not pvd.validate(out):
        LOGGER.debug("Primary volume descriptor failed biendian checks, skipping fields")
        return None

    fields = (
        ("System Id", f"[{pvd.system_identifier}]"),
        ("Volume Id", f"[{pvd.volume_identifier}]"),
        ("Volume Space Size", pvd.space_size.value),
        ("Volume Set Size", pvd.set_size.value),
        ("Volume Sequence", pvd.seqnum.value),
        ("Block Size", pvd.log_block_size.value),
        ("Path Table Size", pvd.path_tbl_size.value),
        ("Path Table     LE", pvd.path_table_location_le),
        ("Path Table Opt LE", pvd.optional_path_table_location_le),
        ("Path Table     BE", pvd.path_table_location_be),
        ("Path Table Opt BE", pvd.optional_path_table_location_be),
        ("Volume Set Id", f"[{pvd.volume_set_identifier}]"),
        ("Publisher Id", f"[{pvd.publisher_identifier}]"),
        ("Data Prep Id", f"[{pvd.data_preparer_identifier}]"),
        ("Application Id", f"[{pvd.application_identifier}]"),
        ("Copyright File", f"[{pvd.copyright_file_identifier}]"),
        ("Abstract File", f"[{pvd.abstract_file_identifier}]"),
        ("Biblio File", f"[{pvd.bibliographic_file_identifier}]"),
        ("Volume Created", pvd.volume_creation_date),
        ("Volume Modified", pvd.volume_modification_date),
        ("Volume Expires", pvd.volume_expiration_date),
        ("Volume Effective", pvd.volume_effective_date),
        ("File Struct Ver", f"0x{pvd.file_structure_version:02X}"),
    )
    for label, value in fields:
        print(f"\t\t{label:<17} = {value}", file=out)

    print("\t\t=== APPLICATION USE AREA", file=out)
    dump_binary(pvd.application_use, APPLICATION_USE_ROWS, out)
    return pvd
