"""
CLI interface for byte size formatting.

Usage:
    python -m bittenhumans 1500000
    python -m bittenhumans 1500000 --decimal --magnitude G
    python -m bittenhumans 1000000000 1000000 --fit-first
"""

import argparse
from typing import Sequence

from .consts import MAGNITUDE_PREFIXES, Magnitude, NumeralSystem
from .formatter import ByteSizeFormatter, FormatterConf


def main(argv: Sequence[str] | None = None) -> int:
    """Main CLI entry point, prints one formatted line per value."""
    parser = argparse.ArgumentParser(
        description="Convert byte counts to human-readable sizes", prog="python -m bittenhumans"
    )
    parser.add_argument("values", nargs="+", help="Byte counts, non-negative integers")
    parser.add_argument(
        "--decimal", action="store_true", help="Use powers of 1000 (KB, MB) instead of 1024 (KiB, MiB)"
    )
    parser.add_argument(
        "--magnitude", "-m", choices=MAGNITUDE_PREFIXES, help="Pin the unit prefix instead of auto-fitting"
    )
    parser.add_argument(
        "--precision", "-p", type=int, default=FormatterConf.PRECISION,
        help=f"Digits after the decimal point (default: {FormatterConf.PRECISION})"
    )
    parser.add_argument(
        "--fit-first", action="store_true", help="Fit the unit on the first value and reuse it for the rest"
    )

    args = parser.parse_args(argv)

    system = NumeralSystem.DECIMAL if args.decimal else NumeralSystem.BINARY
    if args.precision < 0:
        parser.error(f"--precision must be >= 0, got {args.precision}")

    values = []
    for raw in args.values:
        try:
            values.append(int(raw))
        except ValueError:
            parser.error(f"invalid byte count: {raw!r}")

    try:
        if args.magnitude is not None:
            magnitude = Magnitude.from_prefix(args.magnitude)
            formatter = ByteSizeFormatter(system, magnitude, precision=args.precision)
            lines = [formatter.format_value(v) for v in values]
        elif args.fit_first:
            formatter = ByteSizeFormatter.fit(values[0], system, precision=args.precision)
            lines = [formatter.format_value(v) for v in values]
        else:
            lines = [ByteSizeFormatter.format_auto(v, system, precision=args.precision) for v in values]
    except (TypeError, ValueError) as e:
        parser.error(str(e))

    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
