import argparse
import logging
import sys

import enlighten

from common.processor import DescriptorProcessor
from utils.common import IsoInfoException
from utils.files import SectorFile, check_image, image_name

LOGGER = logging.getLogger(__name__)

LOG_FORMAT = "|%(levelname)s| %(message)s"


class ArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        LOGGER.error("Usage: %s [--] FILENAME (%s)", self.prog, message)
        sys.exit(1)


def build_parser():
    parser = ArgumentParser(prog="isoinfo",
                            usage="%(prog)s [-h] [-l LEVEL] [--no-progress] [--] FILENAME",
                            description="Dump the volume descriptors and El Torito boot catalog of an ISO 9660 image")

    parser.add_argument("filename", help="Image file to inspect, put -- first if the name starts with -")

    parser.add_argument("-l", "--log", dest="logLevel", choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                        help="Set the logging level", default="WARNING")

    parser.add_argument('--no-progress',
                        help="Disable the progress bar",
                        action='store_true',
                        default=False)
    return parser


def get_iso_info(filename, out, progress_manager=None):
    name = image_name(filename)
    sectors = check_image(filename)
    print(f"{name}: {sectors} sectors", file=out)

    with SectorFile.open(filename) as iso:
        processor = DescriptorProcessor(iso.read_sector, name, out, progress_manager)
        return processor.process()


def main(argv=None):
    logging.basicConfig(format=LOG_FORMAT, stream=sys.stderr)
    try:
        args = build_parser().parse_args(argv)
    except SystemExit as e:
        return e.code

    logging.getLogger().setLevel(getattr(logging, args.logLevel))

    progress_manager = None
    if not args.no_progress:
        progress_manager = enlighten.get_manager(stream=sys.stderr)

    try:
        get_iso_info(args.filename, sys.stdout, progress_manager)
    except IsoInfoException as e:
        sys.stdout.flush()
        LOGGER.error("%s: %s", image_name(args.filename), e)
        return 1
    finally:
        if progress_manager is not None:
            progress_manager.stop()

    return 0


if __name__ == '__main__':
    sys.exit(main())
