import pytest

from metarconv.constants import SM_TO_KM
from metarconv.converters.visibility import VisibilityConverter
from metarconv.errors import ParseError


@pytest.mark.parametrize(
    "text, expected",
    [("9999", ">10km"), ("0800", "800m"), ("0000", "0m"), ("1500", "1500m")],
)
def test_convert_visibility(text: str, expected: str) -> None:
    assert VisibilityConverter.convert_visibility(text) == expected


@pytest.mark.parametrize("text", ["abc", "", "08 0", "P6SM"])
def test_convert_visibility_rejects_non_integer(text: str) -> None:
    with pytest.raises(ParseError):
        VisibilityConverter.convert_visibility(text)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("15SM", 15 * SM_TO_KM),
        ("10KM", 10.0),
        ("800M", 0.8),
        (">10KM", 10.0),
        ("10km", 10.0),
        ("1/2SM", 2 * SM_TO_KM),
        ("P6SM", 6 * SM_TO_KM),
    ],
)
def test_convert_visibility_to_km(text: str, expected: float) -> None:
    assert VisibilityConverter.convert_visibility_to_km(text) == pytest.approx(expected)


def test_statute_miles_example() -> None:
    assert VisibilityConverter.convert_visibility_to_km("15SM") == pytest.approx(24.14, abs=0.01)


@pytest.mark.parametrize("text", ["15XX", "9999", "", "SM", "10 KM", "3MI", "10KM,", "10,"])
def test_convert_visibility_to_km_without_known_unit(text: str) -> None:
    assert VisibilityConverter.convert_visibility_to_km(text) is None


@pytest.mark.parametrize("magnitude", [1, 3, 7, 10, 25])
def test_statute_miles_scale_by_ratio(magnitude: int) -> None:
    result = VisibilityConverter.convert_visibility_to_km(f"{magnitude}SM")
    assert result == pytest.approx(magnitude * 1.609344)
