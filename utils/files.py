import logging
import os
import stat

from utils.common import IsoInfoException, SECTOR_SIZE

LOGGER = logging.getLogger(__name__)

MINIMUM_SECTORS = 17


class ImageException(IsoInfoException):
    pass


class SectorReadException(IsoInfoException):
    pass


class SectorFile:
    """Reads whole 2048 byte sectors from an image file.

    Nothing is cached, every call seeks and reads the sector again.
    """

    def __init__(self, fp):
        self.fp = fp

    @classmethod
    def open(cls, path):
        try:
            fp = open(path, "rb")
        except OSError as e:
            raise ImageException(f"open failed: {e.strerror}") from e
        return cls(fp)

    def close(self):
        self.fp.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def read_sector(self, number):
        LOGGER.debug(f"read sector {number}")
        if number < 0:
            raise SectorReadException(f"failed reading sector {number}")
        try:
            self.fp.seek(number * SECTOR_SIZE)
            data = self.fp.read(SECTOR_SIZE)
        except OSError as e:
            raise SectorReadException(f"failed reading sector {number}: {e}") from e
        if len(data) != SECTOR_SIZE:
            raise SectorReadException(f"failed reading sector {number}")
        return data


def check_image(path):
    """Validate the image file before it is opened and return its sector count."""
    try:
        st = os.stat(path)
    except OSError as e:
        raise ImageException(f"stat failed: {e.strerror}") from e

    if not stat.S_ISREG(st.st_mode):
        raise ImageException("not a regular file")

    extra = st.st_size % SECTOR_SIZE
    if extra:
        raise ImageException(f"extra {extra} bytes at end of image")

    sectors = st.st_size // SECTOR_SIZE
    if sectors < MINIMUM_SECTORS:
        raise ImageException(f"not a valid image, {sectors} is too few sectors")

    return sectors


def image_name(path):
    return os.path.basename(path) or path
