from utils.common import read_field

ROW_SIZE = 16


def _ascii(row):
    return "".join(chr(ch) if 0x20 <= ch <= 0x7E else "." for ch in row)


def dump_binary(data, rows, out):
    """Write ``rows`` 16 byte rows of ``data`` as hex and printable ASCII.

    The second consecutive all-zero row is replaced by a single ``...`` line
    and the rest of that run is left out. The last row is always written.
    """
    zero_run = 0
    for i in range(rows):
        row = read_field(data, i * ROW_SIZE, ROW_SIZE)
        if any(row):
            zero_run = 0
        else:
            zero_run += 1

        if i < rows - 1:
            if zero_run == 2:
                print("\t...", file=out)
                continue
            if zero_run > 2:
                continue

        print(f"\t{i * ROW_SIZE:03x}: {row.hex()} {_ascii(row)}", file=out)


def dump_sector(sector, out):
    dump_binary(sector, len(sector) // ROW_SIZE, out)
