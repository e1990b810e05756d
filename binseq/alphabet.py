"""
binseq Digit Alphabets

An Alphabet is an ordered set of symbols: position i is the character for
digit value i. Decoding is a table lookup that can ignore case, so "A" and
"a" decode to the same digit when the alphabet is case-insensitive.

The tables below are process-wide constants. Alphabet instances are frozen
and safe to share.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from binseq.errors import ConfigurationError, FormatError


DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
HEX_LOWER = DIGITS[:16]
HEX_UPPER = HEX_LOWER.upper()
BASE32_RFC4648 = "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"
BASE64_STANDARD = (
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
)
BASE64_URL_SAFE = BASE64_STANDARD[:62] + "-_"

MIN_RADIX = 2
MAX_RADIX = len(DIGITS)


@dataclass(frozen=True)
class Alphabet:
    """Bidirectional digit <-> character table.

    Attributes:
        symbols: Characters for digit values 0..radix-1, in order
        case_insensitive: Whether decode folds case before lookup
    """
    symbols: str
    case_insensitive: bool = True
    _decode_table: dict = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if len(self.symbols) < MIN_RADIX:
            raise ConfigurationError(
                f"alphabet needs at least {MIN_RADIX} symbols, got {len(self.symbols)}"
            )
        table: dict[str, int] = {}
        for value, char in enumerate(self.symbols):
            keys = {char, char.lower(), char.upper()} if self.case_insensitive else {char}
            for key in keys:
                if key in table and table[key] != value:
                    raise ConfigurationError(
                        f"symbol {char!r} is ambiguous in alphabet {self.symbols!r}"
                    )
                table[key] = value
        object.__setattr__(self, "_decode_table", table)

    @property
    def radix(self) -> int:
        return len(self.symbols)

    def encode(self, value: int) -> str:
        """Character for a digit value."""
        return self.symbols[value]

    def decode(self, char: str, position: int = -1) -> int:
        """Digit value for a character; FormatError if it is not in the alphabet."""
        try:
            return self._decode_table[char]
        except KeyError:
            raise FormatError(
                f"character {char!r} is not a base-{self.radix} digit", position
            ) from None

    def __contains__(self, char: object) -> bool:
        return char in self._decode_table

    def __len__(self) -> int:
        return len(self.symbols)

    def __repr__(self) -> str:
        case = "ci" if self.case_insensitive else "cs"
        return f"<Alphabet base-{self.radix} {case} {self.symbols[:8]!r}...>"


def for_radix(radix: int, upper_case: bool = False) -> Alphabet:
    """The positional alphabet for radix 2..36: 0-9 then a-z."""
    if not MIN_RADIX <= radix <= MAX_RADIX:
        raise ConfigurationError(
            f"supported radix is between {MIN_RADIX} and {MAX_RADIX}, got {radix}"
        )
    symbols = DIGITS[:radix]
    return Alphabet(symbols.upper() if upper_case else symbols)


HEX = Alphabet(HEX_LOWER)
BASE32 = Alphabet(BASE32_RFC4648)
BASE64 = Alphabet(BASE64_STANDARD, case_insensitive=False)
BASE64_URL = Alphabet(BASE64_URL_SAFE, case_insensitive=False)
