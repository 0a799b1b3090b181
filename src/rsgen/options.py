import logging

from pydantic import BaseModel, ConfigDict, Field, model_validator

from rsgen.core.charsets import (
    CharsetSpec,
    LatinAlphabet,
    LatinAlphabetAndNumeric,
    Numeric,
    PrintableAsciiWithoutSpace,
    PrintableAsciiWithSpace,
)
from rsgen.core.sources import (
    RandomIndexSource,
    SharedSource,
    fast_source,
    secure_source,
)

logger = logging.getLogger(__name__)

_CHARSET_FLAGS = {
    "numeric": "--numeric",
    "printable_ascii": "--printable-ascii",
    "printable_ascii_with_space": "--printable-ascii-with-space",
}
_LATIN_FLAGS = {
    "only_upper_case": "--only-upper-case",
    "only_lower_case": "--only-lower-case",
    "only_latin_alphabet": "--only-latin-alphabet",
}


class GenerateOptions(BaseModel):
    """Resolved command-line configuration for one invocation."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    count: int = Field(default=8, ge=1)
    lines: int = Field(default=1, ge=1)
    numeric: bool = False
    printable_ascii: bool = False
    printable_ascii_with_space: bool = False
    only_upper_case: bool = False
    only_lower_case: bool = False
    only_latin_alphabet: bool = False
    fast: bool = False
    seed: int | None = None

    @model_validator(mode="after")
    def validate_exclusive_flags(self) -> "GenerateOptions":
        charset_flags = [
            flag for name, flag in _CHARSET_FLAGS.items() if getattr(self, name)
        ]
        latin_flags = [
            flag for name, flag in _LATIN_FLAGS.items() if getattr(self, name)
        ]
        if len(charset_flags) > 1:
            raise ValueError(
                f"{charset_flags[0]} cannot be used with {charset_flags[1]}"
            )
        if charset_flags and latin_flags:
            raise ValueError(
                f"{charset_flags[0]} cannot be used with {latin_flags[0]}"
            )
        if self.only_upper_case and self.only_lower_case:
            raise ValueError(
                "--only-upper-case cannot be used with --only-lower-case"
            )
        if self.seed is not None and not self.fast:
            raise ValueError("--seed requires --fast")
        return self

    def charset_spec(self) -> CharsetSpec:
        if self.numeric:
            return Numeric()
        if self.printable_ascii:
            return PrintableAsciiWithoutSpace()
        if self.printable_ascii_with_space:
            return PrintableAsciiWithSpace()
        use_upper_case = not self.only_lower_case
        use_lower_case = not self.only_upper_case
        if self.only_latin_alphabet:
            return LatinAlphabet(
                use_upper_case=use_upper_case, use_lower_case=use_lower_case
            )
        return LatinAlphabetAndNumeric(
            use_upper_case=use_upper_case, use_lower_case=use_lower_case
        )

    def make_source(self) -> RandomIndexSource:
        if self.fast:
            logger.debug("Using fast source")
            return SharedSource(fast_source(self.seed))
        logger.debug("Using secure source")
        return secure_source()
