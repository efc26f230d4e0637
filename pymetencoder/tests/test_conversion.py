################################################################################
# pymetencoder/tests/test_conversion.py
#
# Unit tests for conversion and number formatting. Requires pytest
#
# 2026-10-19:
#   * First version
################################################################################
# CONFIGURATION
################################################################################
import pytest
from datetime import datetime, timedelta, timezone
from pymetencoder import conversion as c
from pymetencoder import code_tables as ct
################################################################################
# CLASSES
################################################################################
class TestNumberFormatting:
    @pytest.mark.parametrize("value, width, expected", [
        (5, 2, "05"),
        ("7", 3, "007"),
        (123, 2, "123"),
        (None, 3, "000"),
        ("abc", 2, "00"),
        (-4, 2, "00"),
        (2.5, 2, "03")
    ])
    def test_zero_pad(self, value, width, expected):
        assert c.zero_pad(value, width) == expected
    @pytest.mark.parametrize("value, expected", [
        (0.0, "0000"),
        (0, "0000"),
        (-0.05, "1001"),
        (-0.04, "1000"),
        (25.3, "0253"),
        (-7.3, "1073"),
        ("12.35", "0124"),
        (None, "0000")
    ])
    def test_sign_magnitude(self, value, expected):
        assert c.sign_magnitude(value) == expected
    @pytest.mark.parametrize("value, expected", [
        ("1008.5", "10085"),
        (1008.5, "10085"),
        (1008.0, "1008"),
        ("1008.50", "10085"),
        ("1008.0", "1008"),
        (1000.0, "1000"),
        ("-1.2", "12"),
        (None, "")
    ])
    def test_digits(self, value, expected):
        assert c.digits(value) == expected
    def test_last_digits(self):
        assert c.last_digits("1012.3", 4) == "0123"
        assert c.last_digits("12", 3) == "012"
        assert c.last_digits(None, 4) == "0000"
    @pytest.mark.parametrize("value, expected", [
        ("12", 12.0), (" 3.5 ", 3.5), (7, 7.0), ("", None), (None, None), ("x", None), ("nan", None), (True, None)
    ])
    def test_to_number(self, value, expected):
        assert c.to_number(value) == expected
class TestConversion:
    def test_speed(self):
        assert c.convert(10, "m/s", "KT", "speed") == pytest.approx(19.4384)
        assert c.convert(10, "KT", "KT", "speed") == 10
        with pytest.raises(c.ConversionError):
            c.convert(10, "km/h", "KT", "speed")
        with pytest.raises(c.ConversionError):
            c.convert(10, "KT", "m/s", "speed")
    def test_time(self):
        assert c.convert(5400, "s", "h", "time") == 1.5
        with pytest.raises(c.ConversionError):
            c.convert(1, "week", "h", "time")
    def test_unknown_type(self):
        with pytest.raises(ValueError):
            c.convert(1, "m", "km", "length")
    def test_to_utc(self):
        dhaka = timezone(timedelta(hours=6))
        assert c.to_utc(datetime(2026, 1, 1, 6, 0, tzinfo=dhaka)) == datetime(2026, 1, 1, 0, 0, tzinfo=timezone.utc)
        assert c.to_utc(datetime(2026, 1, 1, 6, 0)).tzinfo == timezone.utc
        assert c.to_utc("2026-01-01T06:00:00Z") == datetime(2026, 1, 1, 6, 0, tzinfo=timezone.utc)
        assert c.to_utc(None) is None
    def test_hours_between(self):
        start = datetime(2026, 1, 1, 0, 0)
        end = datetime(2026, 1, 1, 7, 30, tzinfo=timezone(timedelta(hours=6)))
        assert c.hours_between(start, end) == 1.5
class TestCodeTables:
    @pytest.mark.parametrize("direction, expected", [
        (10, 1), (4, 0), (5, 1), (144, 14), (354, 35), (355, 36), (360, 36)
    ])
    def test_0877(self, direction, expected):
        assert ct.CodeTable0877().encode({ "value": direction }) == expected
    def test_0877_calm(self):
        assert ct.CodeTable0877().encode({ "value": 200, "calm": True }) == 0
    def test_4677(self):
        assert ct.CodeTable4677().remark("95") == "/remarks/96.png - Heavy thunderstorm with hail at time of obs"
        assert ct.CodeTable4677().remark("5") == "/remarks/6.png - Haze"
        assert ct.CodeTable4677().remark(None) == "/remarks/default.png - No remark available for this weather code"
        assert ct.CodeTable4677().decode("61")["description"] == "Continuous rain (not freezing), slight at time of obs (-RA)"
    def test_4677_immutable(self):
        with pytest.raises(TypeError):
            ct.CodeTable4677._REMARKS["00"] = ("x", "y")
