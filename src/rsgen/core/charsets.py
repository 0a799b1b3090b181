import string
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

PRINTABLE_ASCII_LOW = 0x21
PRINTABLE_ASCII_SPACE = 0x20
PRINTABLE_ASCII_HIGH = 0x7E


class LatinAlphabet(BaseModel):
    """Latin letters, optionally restricted to one case."""

    model_config = ConfigDict(frozen=True)
    kind: Literal["latin_alphabet"] = "latin_alphabet"
    use_upper_case: bool = True
    use_lower_case: bool = True


class LatinAlphabetAndNumeric(BaseModel):
    """Latin letters followed by the decimal digits."""

    model_config = ConfigDict(frozen=True)
    kind: Literal["latin_alphabet_and_numeric"] = "latin_alphabet_and_numeric"
    use_upper_case: bool = True
    use_lower_case: bool = True


class Numeric(BaseModel):
    model_config = ConfigDict(frozen=True)
    kind: Literal["numeric"] = "numeric"


class PrintableAsciiWithoutSpace(BaseModel):
    """Printable ASCII without SPACE (0x21-0x7E)."""

    model_config = ConfigDict(frozen=True)
    kind: Literal["printable_ascii_without_space"] = (
        "printable_ascii_without_space"
    )


class PrintableAsciiWithSpace(BaseModel):
    """Printable ASCII with SPACE (0x20-0x7E)."""

    model_config = ConfigDict(frozen=True)
    kind: Literal["printable_ascii_with_space"] = "printable_ascii_with_space"


CharsetSpec = Annotated[
    LatinAlphabet
    | LatinAlphabetAndNumeric
    | Numeric
    | PrintableAsciiWithoutSpace
    | PrintableAsciiWithSpace,
    Field(discriminator="kind"),
]

charset_spec_adapter = TypeAdapter(CharsetSpec)


def latin_table(use_upper_case: bool, use_lower_case: bool) -> str:
    """Return the ordered letter table for a case combination.

    Disabling both cases falls back to both, so the table is never empty.
    """
    match (use_upper_case, use_lower_case):
        case (True, False):
            return string.ascii_uppercase
        case (False, True):
            return string.ascii_lowercase
        case _:
            return string.ascii_uppercase + string.ascii_lowercase


def _ascii_range(low: int) -> str:
    return "".join(chr(code) for code in range(low, PRINTABLE_ASCII_HIGH + 1))


def charset_for(spec: CharsetSpec) -> str:
    """Return the ordered characters `spec` draws from."""
    match spec:
        case LatinAlphabet(
            use_upper_case=use_upper_case, use_lower_case=use_lower_case
        ):
            return latin_table(use_upper_case, use_lower_case)
        case LatinAlphabetAndNumeric(
            use_upper_case=use_upper_case, use_lower_case=use_lower_case
        ):
            return latin_table(use_upper_case, use_lower_case) + string.digits
        case Numeric():
            return string.digits
        case PrintableAsciiWithoutSpace():
            return _ascii_range(PRINTABLE_ASCII_LOW)
        case PrintableAsciiWithSpace():
            return _ascii_range(PRINTABLE_ASCII_SPACE)
    raise TypeError(f"Unknown charset spec: {spec!r}")
