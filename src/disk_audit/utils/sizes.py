"""Human-readable byte sizes — parse ``100MB`` and render ``1.2 GB``.

Parsing accepts SI (``kB`` = 1000) and IEC (``KiB`` = 1024) units, case
insensitive.  Rendering keeps one decimal below 10 and none above::

    >>> parse_size("100MB")
    100000000
    >>> format_size(150_000_000)
    '150 MB'
    >>> format_size(1_288_490_189, binary=True)
    '1.2 GiB'
"""

from __future__ import annotations

import re
from fractions import Fraction

_SI_UNITS = ("B", "kB", "MB", "GB", "TB", "PB", "EB", "ZB", "YB")
_IEC_UNITS = ("B", "KiB", "MiB", "GiB", "TiB", "PiB", "EiB", "ZiB", "YiB")

_NUMBER_RE = re.compile(r"^[\d.,]*")


def _build_unit_table() -> dict[str, int]:
    table: dict[str, int] = {"": 1, "b": 1}
    for power, prefix in enumerate("kmgtpezy", start=1):
        table[prefix] = table[f"{prefix}b"] = 1000 ** power
        table[f"{prefix}i"] = table[f"{prefix}ib"] = 1024 ** power
    return table


_UNIT_MULTIPLIERS = _build_unit_table()


def parse_size(text: str) -> int:
    """Parse a human-readable size string into a byte count.

    Raises ``ValueError`` on an empty or malformed number or an unknown unit.
    """
    stripped = text.strip()
    number = _NUMBER_RE.match(stripped).group(0)
    unit = stripped[len(number):].strip().lower()

    digits = number.replace(",", "")
    if not digits:
        raise ValueError(f"missing numeric value in {text!r}")
    try:
        value = Fraction(digits)
    except ValueError:
        raise ValueError(f"malformed number {number!r}") from None

    multiplier = _UNIT_MULTIPLIERS.get(unit)
    if multiplier is None:
        raise ValueError(f"unhandled size name: {unit}")

    return int(value * multiplier)


def format_size(size: int, *, binary: bool = False) -> str:
    """Render *size* bytes with SI units, or IEC units when *binary*."""
    if size < 10:
        return f"{size} B"

    base = 1024 if binary else 1000
    units = _IEC_UNITS if binary else _SI_UNITS

    # integer fold: only the last remainder contributes to the fraction
    quotient, remainder, magnitude = size, 0, 0
    while quotient >= base and magnitude < len(units) - 1:
        quotient, remainder = divmod(quotient, base)
        magnitude += 1
    value = quotient + remainder / base

    fmt = "%.1f %s" if value < 10 else "%.0f %s"
    return fmt % (value, units[magnitude])
