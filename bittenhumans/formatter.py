#
# Bittenhumans Byte Size Formatter
#

# Standard library -----------------------------------------------------------------------------------------------------
from dataclasses import dataclass, field
from typing import Any, Self

# Local ----------------------------------------------------------------------------------------------------------------
from .consts import Magnitude, NumeralSystem
from .validators import validate_byte_count, validate_precision


class FormatterConf:
    PRECISION = 2
    SEPARATOR = " "
    BYTE_SUFFIX = "B"


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class ByteSizeFormatter:
    """
    Renders byte counts in a fixed unit, e.g. "1.50 MB" or "953.67 MiB".

    The unit is chosen once, either explicitly from a (system, magnitude) pair or by
    ByteSizeFormatter.fit() for a reference value. Every value passed to format_value()
    is then divided by the same divisor, so readings such as disk total and disk used
    can be shown side by side in one unit.

    Attributes:
        system: Numeral system, BINARY (1024) or DECIMAL (1000).
        magnitude: Magnitude rank, KILO through EXA.
        precision: Digits after the decimal point.
        separator: Text between number and unit.
        divisor: system.base ** magnitude.rank, derived.
        unit: Unit string like "KiB" or "GB", derived.

    Examples:
        >>> ByteSizeFormatter(NumeralSystem.DECIMAL, Magnitude.KILO).format_value(1000)
        '1.00 KB'
        >>> ByteSizeFormatter(NumeralSystem.BINARY, Magnitude.MEGA).format_value(1024 * 1024)
        '1.00 MiB'
    """

    system: NumeralSystem
    magnitude: Magnitude
    precision: int = FormatterConf.PRECISION
    separator: str = FormatterConf.SEPARATOR

    divisor: int = field(init=False, repr=False)
    unit: str = field(init=False, repr=False)

    def __post_init__(self):
        # Enum constructors reject bases other than 1024/1000 and ranks outside the prefix table
        system = NumeralSystem(self.system)
        magnitude = Magnitude(self.magnitude)
        validate_precision(self.precision)

        object.__setattr__(self, 'system', system)
        object.__setattr__(self, 'magnitude', magnitude)
        object.__setattr__(self, 'divisor', _divisor(system, magnitude))
        object.__setattr__(self, 'unit', f"{magnitude.prefix}{system.infix}{FormatterConf.BYTE_SUFFIX}")

    @classmethod
    def new(cls, system: NumeralSystem | int, magnitude: Magnitude | int, **kwargs: Any) -> Self:
        """Create a formatter for a specific unit, same as calling the class directly."""
        return cls(system, magnitude, **kwargs)

    @classmethod
    def fit(cls, value: int, system: NumeralSystem | int, **kwargs: Any) -> Self:
        """
        Create a formatter for the largest magnitude that keeps value at 1.0 or above.

        Magnitudes are tried in ascending order starting at KILO; the scan stops at the
        first one whose quotient drops below 1.0. A quotient of exactly 1.0 still fits,
        so 1024 bytes in BINARY fits KILO ("1.00 KiB") and 1048576 bytes fits MEGA.

        Values below one Kilo unit, including 0, still get KILO, there is no plain-bytes
        unit. Values beyond the EXA divisor clamp to EXA.

        The comparison is done in double precision. Near the top of the 64-bit range the
        float conversion of value is inexact; this approximation is accepted.

        Args:
            value: Byte count, 0 <= value <= 2**64 - 1.
            system: Numeral system to use.
            **kwargs: Passed to the constructor (precision, separator).

        Examples:
            >>> disk_total = 1_000_000_000
            >>> f = ByteSizeFormatter.fit(disk_total, NumeralSystem.BINARY)
            >>> f.format_value(disk_total), f.format_value(disk_total // 1000)
            ('953.67 MiB', '0.95 MiB')
        """
        value = validate_byte_count(value)
        system = NumeralSystem(system)

        last = Magnitude.KILO
        for magnitude in Magnitude:
            if float(value) / float(_divisor(system, magnitude)) < 1.0:
                break
            last = magnitude

        return cls(system, last, **kwargs)

    @classmethod
    def format_auto(cls, value: int, system: NumeralSystem | int, **kwargs: Any) -> str:
        """
        Format value with the magnitude picked by fit().

        Examples:
            >>> ByteSizeFormatter.format_auto(1_500_000, NumeralSystem.DECIMAL)
            '1.50 MB'
            >>> ByteSizeFormatter.format_auto(1_500_000, NumeralSystem.BINARY)
            '1.43 MiB'
        """
        return cls.fit(value, system, **kwargs).format_value(value)

    def format_value(self, value: int) -> str:
        """Format value in this formatter's unit with fixed precision."""
        value = validate_byte_count(value)
        quotient = float(value) / float(self.divisor)
        return f"{quotient:.{self.precision}f}{self.separator}{self.unit}"

    def get_unit(self) -> str:
        return self.unit

    def get_divisor(self) -> int:
        return self.divisor

    def __call__(self, value: int) -> str:
        return self.format_value(value)

    def __str__(self):
        return self.unit


# Methods --------------------------------------------------------------------------------------------------------------

def format_bytes(value: int, system: NumeralSystem | int = NumeralSystem.BINARY, **kwargs: Any) -> str:
    """
    Format a byte count with an auto-fit unit.

    Examples:
        >>> format_bytes(1536)
        '1.50 KiB'
        >>> format_bytes(1536, NumeralSystem.DECIMAL, precision=1)
        '1.5 KB'
    """
    return ByteSizeFormatter.format_auto(value, system, **kwargs)


def _divisor(system: NumeralSystem, magnitude: Magnitude) -> int:
    return system.base ** magnitude.rank
