"""Random character string generation over a configurable charset."""

import logging
from collections.abc import Iterator

from rsgen.core.charsets import (
    PRINTABLE_ASCII_HIGH,
    PRINTABLE_ASCII_LOW,
    PRINTABLE_ASCII_SPACE,
    CharsetSpec,
    LatinAlphabet,
    LatinAlphabetAndNumeric,
    Numeric,
    PrintableAsciiWithoutSpace,
    PrintableAsciiWithSpace,
    charset_for,
)
from rsgen.core.sampling import draw_codes, draw_indices
from rsgen.core.sources import RandomIndexSource, secure_source

logger = logging.getLogger(__name__)


def _from_table(table: str, source: RandomIndexSource, length: int) -> str:
    return "".join(table[i] for i in draw_indices(source, len(table), length))


def generate(
    length: int, spec: CharsetSpec, source: RandomIndexSource
) -> str:
    """Generate a string of exactly `length` characters drawn from `spec`.

    Each output character consumes one draw from `source`, so a zero
    length leaves the source untouched.
    """
    if length < 0:
        raise ValueError(f"length must be >= 0, got {length}")

    match spec:
        case LatinAlphabet() | LatinAlphabetAndNumeric():
            return _from_table(charset_for(spec), source, length)
        case Numeric():
            return "".join(
                str(digit) for digit in draw_codes(source, 0, 9, length)
            )
        case PrintableAsciiWithoutSpace():
            codes = draw_codes(
                source, PRINTABLE_ASCII_LOW, PRINTABLE_ASCII_HIGH, length
            )
            return "".join(map(chr, codes))
        case PrintableAsciiWithSpace():
            codes = draw_codes(
                source, PRINTABLE_ASCII_SPACE, PRINTABLE_ASCII_HIGH, length
            )
            return "".join(map(chr, codes))
    raise TypeError(f"Unknown charset spec: {spec!r}")


def generate_lines(
    length: int, lines: int, spec: CharsetSpec, source: RandomIndexSource
) -> Iterator[str]:
    """Yield `lines` independent strings drawn from the same source."""
    logger.debug(
        "Generating %d line(s) of %d character(s) from %s",
        lines,
        length,
        spec.kind,
    )
    for _ in range(lines):
        yield generate(length, spec, source)


def gen_random_string(length: int, spec: CharsetSpec | None = None) -> str:
    """Generate a string with a fresh secure source.

    `spec` defaults to upper and lower case letters plus digits.
    """
    if spec is None:
        spec = LatinAlphabetAndNumeric()
    return generate(length, spec, secure_source())
