import pytest

from metarconv.converters.temperature import TemperatureConverter
from metarconv.errors import ParseError


@pytest.mark.parametrize(
    "text, expected",
    [("M08", -8), ("15", 15), ("00", 0), ("M00", 0), ("M12", -12), ("35", 35)],
)
def test_convert_temperature_code(text: str, expected: int) -> None:
    assert TemperatureConverter.convert_temperature_code(text) == expected


@pytest.mark.parametrize("text", ["M", "M8", "MXX", "abc", "", "1A"])
def test_convert_temperature_code_rejects_malformed(text: str) -> None:
    with pytest.raises(ParseError):
        TemperatureConverter.convert_temperature_code(text)


@pytest.mark.parametrize(
    "sign, magnitude, expected",
    [("1", "023", -2.3), ("0", "023", 2.3), ("0", "000", 0.0), ("1", "105", -10.5)],
)
def test_convert_temperature_remark(sign: str, magnitude: str, expected: float) -> None:
    assert TemperatureConverter.convert_temperature_remark(sign, magnitude) == pytest.approx(expected)


def test_any_nonzero_sign_is_negative() -> None:
    assert TemperatureConverter.convert_temperature_remark("9", "010") == pytest.approx(-1.0)


@pytest.mark.parametrize("magnitude", ["0A3", "", "nan", "inf", "-inf"])
def test_convert_temperature_remark_rejects_malformed(magnitude: str) -> None:
    with pytest.raises(ParseError):
        TemperatureConverter.convert_temperature_remark("0", magnitude)


@pytest.mark.parametrize("c, f", [(0, 32), (100, 212), (-40, -40)])
def test_celsius_to_fahrenheit(c: float, f: float) -> None:
    assert TemperatureConverter.celsius_to_fahrenheit(c) == pytest.approx(f)
