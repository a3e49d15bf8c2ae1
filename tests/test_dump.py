import io

from utils.dump import dump_binary, dump_sector

ZERO_ROW = "0" * 32 + " " + "." * 16


def render(data, rows=None):
    out = io.StringIO()
    if rows is None:
        dump_sector(data, out)
    else:
        dump_binary(data, rows, out)
    return out.getvalue().splitlines()


def test_all_zero_sector_elides_middle_rows():
    assert render(bytes(2048)) == [
        f"\t000: {ZERO_ROW}",
        "\t...",
        f"\t7f0: {ZERO_ROW}",
    ]


def test_no_consecutive_zero_rows_prints_every_row():
    data = bytearray(2048)
    for row in range(0, 128, 2):
        data[row * 16] = 0x41
    lines = render(data)
    assert len(lines) == 128
    assert "\t..." not in lines
    assert lines[0] == "\t000: 41000000000000000000000000000000 A..............."
    assert lines[1] == f"\t010: {ZERO_ROW}"


def test_zero_run_ends_on_non_zero_row():
    data = bytearray(16 * 6)
    data[0] = 1
    data[16 * 4] = 2
    lines = render(data, rows=6)
    assert lines == [
        "\t000: 01000000000000000000000000000000 ................",
        f"\t010: {ZERO_ROW}",
        "\t...",
        "\t040: 02000000000000000000000000000000 ................",
        f"\t050: {ZERO_ROW}",
    ]


def test_two_row_region_is_printed_in_full():
    assert render(bytes(32), rows=2) == [
        f"\t000: {ZERO_ROW}",
        f"\t010: {ZERO_ROW}",
    ]


def test_ascii_column():
    row = b"CD001 ~\x7f\x1f" + bytes(range(0x61, 0x68))
    assert render(row, rows=1) == [f"\t000: {row.hex()} CD001 ~..abcdefg"]
