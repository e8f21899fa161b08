#
# Bittenhumans - Validators Tests
#

# Standard library -----------------------------------------------------------------------------------------------------
from decimal import Decimal

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from bittenhumans.validators import fmt_type, fmt_value, validate_byte_count, validate_precision


# Tests ----------------------------------------------------------------------------------------------------------------

class _Index:
    """Integer-like object, stands in for numpy integer scalars."""

    def __init__(self, value):
        self.value = value

    def __index__(self):
        return self.value


class TestFmt:

    def test_fmt_type(self):
        assert fmt_type(4.5) == "<type: float>"
        assert fmt_type(int) == "<type: int>"

    def test_fmt_value(self):
        assert fmt_value(-1) == "<int: -1>"
        assert fmt_value("1 MB") == "<str: '1 MB'>"

    def test_fmt_value_escapes_and_truncates(self):
        assert fmt_value("a>b") == "<str: 'a\\>b'>"
        assert fmt_value("x" * 50, max_repr=5) == "<str: 'xxxx...>"

    def test_fmt_value_broken_repr(self):
        class Broken:
            def __repr__(self):
                raise RuntimeError("boom")

        assert "repr failed: RuntimeError" in fmt_value(Broken())


class TestValidateByteCount:

    @pytest.mark.parametrize(
        "value, expected",
        [
            pytest.param(0, 0, id="zero"),
            pytest.param(1024, 1024, id="int"),
            pytest.param(2**64 - 1, 2**64 - 1, id="u64-max"),
            pytest.param(_Index(512), 512, id="index-protocol"),
        ],
    )
    def test_valid(self, value, expected):
        res = validate_byte_count(value)
        assert res == expected
        assert type(res) is int

    @pytest.mark.parametrize(
        "value",
        [
            pytest.param(1.0, id="float"),
            pytest.param("1024", id="str"),
            pytest.param(None, id="none"),
            pytest.param(True, id="bool"),
            pytest.param(Decimal("1024"), id="decimal"),
        ],
    )
    def test_type_error(self, value):
        with pytest.raises(TypeError, match="byte count must be an int"):
            validate_byte_count(value)

    @pytest.mark.parametrize("value", [-1, 2**64, 10**30])
    def test_out_of_range(self, value):
        with pytest.raises(ValueError, match="byte count must be in range"):
            validate_byte_count(value)


class TestValidatePrecision:

    def test_valid(self):
        assert validate_precision(0) == 0
        assert validate_precision(5) == 5

    def test_negative(self):
        with pytest.raises(ValueError, match="precision must be >= 0"):
            validate_precision(-1)

    @pytest.mark.parametrize("precision", [1.5, "2", None, True])
    def test_type_error(self, precision):
        with pytest.raises(TypeError, match="precision must be an int"):
            validate_precision(precision)
