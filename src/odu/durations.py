"""Convert timedeltas to and from short duration strings like "350ms", modelled on Go's Duration format."""
import datetime
import decimal
import re

from .util import maybe_int

UNITS = {
    "h": datetime.timedelta(hours=1),
    "m": datetime.timedelta(minutes=1),
    "s": datetime.timedelta(seconds=1),
    "ms": datetime.timedelta(milliseconds=1),
    "us": datetime.timedelta(microseconds=1),
}

# longer unit names first, so "ms" is not read as "m" followed by garbage
TERM_MATCHER = re.compile(r"(\d+(?:\.\d*)?)(ms|us|h|m|s)")


def format_duration(val: datetime.timedelta) -> str:
    if val == datetime.timedelta():
        return "0"
    sign = ""
    if val < datetime.timedelta():
        sign = "-"
        val = -val

    if val < UNITS["ms"]:
        return f"{sign}{val.microseconds}us"
    if val < UNITS["s"]:
        return f"{sign}{maybe_int(val / UNITS['ms'])}ms"

    parts = [sign]
    for unit in ("h", "m"):
        whole, val = divmod(val, UNITS[unit])
        if whole:
            parts.append(f"{whole}{unit}")
    if val:
        parts.append(f"{maybe_int(val.total_seconds())}s")
    return "".join(parts)


def parse_duration(val: str) -> datetime.timedelta:
    sign = 1
    if val[:1] in ("-", "+"):
        sign = -1 if val[0] == "-" else 1
        val = val[1:]
    if not val:
        raise ValueError("Empty duration string")
    if val == "0":
        return datetime.timedelta()

    accum = datetime.timedelta()
    pos = 0
    while pos < len(val):
        match = TERM_MATCHER.match(val, pos)
        if match is None:
            raise ValueError(f"Invalid duration string {val!r} at position {pos}")
        number = decimal.Decimal(match.group(1))
        unit = UNITS[match.group(2)]
        whole = int(number // 1)
        num, denom = (number % 1).as_integer_ratio()
        accum += sign * (whole * unit + num * unit / denom)
        pos = match.end()
    return accum
