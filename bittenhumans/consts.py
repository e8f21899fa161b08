#
# Bittenhumans Numeral Systems and Magnitudes
#

# Standard library -----------------------------------------------------------------------------------------------------
from enum import IntEnum, unique

# @formatter:off

MAGNITUDE_PREFIXES = ("K", "M", "G", "T", "P", "E")

U64_MAX = 2**64 - 1

# @formatter:on

# Classes --------------------------------------------------------------------------------------------------------------


@unique
class NumeralSystem(IntEnum):
    """
    Base used for magnitude scaling.

    Attributes:
        BINARY (int)  : Powers of 1024 - KiB, MiB, GiB
        DECIMAL (int) : Powers of 1000 - KB, MB, GB
    """
    BINARY = 1024
    DECIMAL = 1000

    @property
    def base(self) -> int:
        return int(self)

    @property
    def infix(self) -> str:
        """Unit infix placed between the prefix and 'B', 'i' for binary units only."""
        return "i" if self is NumeralSystem.BINARY else ""


@unique
class Magnitude(IntEnum):
    """
    Rank of a magnitude prefix, the exponent applied to a NumeralSystem base.

    Ranks start at 1, so there is no member for an unscaled byte count. Iteration
    yields members in ascending rank order.
    """
    KILO = 1
    MEGA = 2
    GIGA = 3
    TERA = 4
    PETA = 5
    EXA = 6

    @property
    def rank(self) -> int:
        return int(self)

    @property
    def prefix(self) -> str:
        """One-character prefix, e.g. 'K' for KILO."""
        return MAGNITUDE_PREFIXES[self.rank - 1]

    @classmethod
    def from_prefix(cls, prefix: str) -> "Magnitude":
        """Lookup a magnitude by its one-character prefix, e.g. 'G' -> GIGA."""
        if prefix not in MAGNITUDE_PREFIXES:
            raise ValueError(f"Invalid magnitude prefix: '{prefix}', expected one of {MAGNITUDE_PREFIXES}")
        return cls(MAGNITUDE_PREFIXES.index(prefix) + 1)


# Module Sanity Checks -------------------------------------------------------------------------------------------------

# Ranks must index the prefix table 1:1 with no gaps.
if [m.rank for m in Magnitude] != list(range(1, len(MAGNITUDE_PREFIXES) + 1)):
    raise AssertionError(
        "Configuration Error: Magnitude ranks must be contiguous from 1 and match MAGNITUDE_PREFIXES length."
    )
