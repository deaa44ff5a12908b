from pathlib import Path

import pytest
from typer.testing import CliRunner

from metarconv.cli import app
from metarconv.settings import ConverterSettings

runner = CliRunner()


@pytest.fixture(autouse=True)
def no_user_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("METARCONV_CONFIG", raising=False)
    monkeypatch.setattr(ConverterSettings, "DEFAULT_CONFIG_PATHS", [tmp_path / "none.yaml"])


@pytest.mark.parametrize(
    "args, expected",
    [
        (["direction", "230"], "SW (South West)"),
        (["direction", "abc"], "VRB (Variable)"),
        (["visibility", "9999"], ">10km"),
        (["visibility", "0800"], "800m"),
        (["visibility-km", "15SM"], "24.14 km"),
        (["visibility-km", "15XX"], "n/a"),
        (["temperature", "M08"], "-8.00°C"),
        (["remark-temperature", "1", "023"], "-2.30°C"),
        (["pressure", "29.92"], "1013.21 hPa"),
        (["time", "0830"], "08:30"),
        (["precipitation", "0125"], "1.25 in"),
        (["km-to-sm", "1.609344"], "1.00 SM"),
        (["sm-to-km", "1"], "1.61 km"),
    ],
)
def test_commands(args: list[str], expected: str) -> None:
    result = runner.invoke(app, args)
    assert result.exit_code == 0, result.output
    assert result.output.strip() == expected


@pytest.mark.parametrize(
    "args",
    [["visibility", "abc"], ["time", "2500"], ["temperature", "MX"], ["precipitation", "abc"]],
)
def test_parse_errors_exit_nonzero(args: list[str]) -> None:
    result = runner.invoke(app, args)
    assert result.exit_code == 1


def test_config_option(tmp_path: Path) -> None:
    cfg_file = tmp_path / "cfg.yaml"
    cfg_file.write_text("locale: fr\ntemperature_unit: F\ndecimals: 0\n")
    result = runner.invoke(app, ["--config", str(cfg_file), "temperature", "M08"])
    assert result.exit_code == 0, result.output
    assert result.output.strip() == "18°F"
    result = runner.invoke(app, ["--config", str(cfg_file), "direction", "90"])
    assert result.output.strip() == "E (Est)"


def test_config_validate(tmp_path: Path) -> None:
    good = tmp_path / "good.yaml"
    good.write_text("decimals: 3\n")
    bad = tmp_path / "bad.yaml"
    bad.write_text("decimals: -1\n")
    assert runner.invoke(app, ["config", "validate", str(good)]).exit_code == 0
    assert runner.invoke(app, ["config", "validate", str(bad)]).exit_code == 1


def test_direction_with_unreadable_catalog(tmp_path: Path) -> None:
    labels = tmp_path / "labels.yaml"
    labels.write_text("a: [unclosed\n", encoding="utf-8")
    cfg_file = tmp_path / "cfg.yaml"
    cfg_file.write_text(f'catalog_file: "{labels}"\n')
    result = runner.invoke(app, ["--config", str(cfg_file), "direction", "90"])
    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert "Unable to read message catalog" in result.output
