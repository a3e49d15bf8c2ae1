from utils.common import read_field

ISO_DATE_SIZE = 17

# (name, offset, width) of the ASCII digit groups in a volume descriptor date
ISO_DATE_FIELDS = (
    ("year", 0, 4),
    ("month", 4, 2),
    ("day", 6, 2),
    ("hour", 8, 2),
    ("minute", 10, 2),
    ("second", 12, 2),
    ("hundredths", 14, 2),
)


def str_from_iso_date(data, offset=0):
    """Render a 17 byte volume descriptor date.

    Digit groups are reproduced as written, they are never checked against the
    calendar. The last byte is a signed GMT offset in 15 minute steps.
    """
    raw = read_field(data, offset, ISO_DATE_SIZE)
    if not any(raw):
        return "(all zeros)"

    parts = {}
    for name, start, width in ISO_DATE_FIELDS:
        group = raw[start:start + width]
        if not all(0x30 <= ch <= 0x39 for ch in group):
            return f"[invalid {name}]"
        parts[name] = group.decode("ascii")

    gmtoffset = int.from_bytes(raw[16:17], byteorder="little", signed=True) * 15
    sign = "-" if gmtoffset < 0 else "+"
    tz_hours, tz_minutes = divmod(abs(gmtoffset), 60)

    return (
        f"{parts['year']}-{parts['month']}-{parts['day']} "
        f"{parts['hour']}:{parts['minute']}:{parts['second']}.{parts['hundredths']} "
        f"{sign}{tz_hours:02d}:{tz_minutes:02d}"
    )
