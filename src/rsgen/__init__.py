"""rsgen: generate random character strings."""

__version__ = "0.1.0"

from rsgen.core.charsets import (  # noqa: E402
    CharsetSpec,
    LatinAlphabet,
    LatinAlphabetAndNumeric,
    Numeric,
    PrintableAsciiWithoutSpace,
    PrintableAsciiWithSpace,
    charset_for,
)
from rsgen.core.sources import (  # noqa: E402
    RandomIndexSource,
    SharedSource,
    fast_source,
    secure_source,
)
from rsgen.generate import (  # noqa: E402
    gen_random_string,
    generate,
    generate_lines,
)

__all__ = [
    "CharsetSpec",
    "LatinAlphabet",
    "LatinAlphabetAndNumeric",
    "Numeric",
    "PrintableAsciiWithSpace",
    "PrintableAsciiWithoutSpace",
    "RandomIndexSource",
    "SharedSource",
    "charset_for",
    "fast_source",
    "gen_random_string",
    "generate",
    "generate_lines",
    "secure_source",
]
