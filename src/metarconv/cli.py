"""Weather report token conversion CLI.

Thin command-line wrapper over the converters, mostly for checking how a
single token decodes.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Final, NoReturn, Optional

import typer

from metarconv.converters import (
    DirectionConverter,
    DistanceConverter,
    PrecipitationConverter,
    PressureConverter,
    TemperatureConverter,
    TimeConverter,
    VisibilityConverter,
)
from metarconv.errors import ConversionError
from metarconv.settings import ConverterSettings

# ── CLI setup ────────────────────────────────────────────────────────────────
app = typer.Typer(help="Weather report token converter", add_completion=False)
config_app = typer.Typer(help="Config helpers")
app.add_typer(config_app, name="config")

logger: Final = logging.getLogger(__name__)  # Will be "metarconv.cli"

CONFIG_OPTION = typer.Option(None, "--config", "-c", exists=True, dir_okay=False)
DEBUG_OPTION = typer.Option(False, "--debug", help="Enable debug logging")
TOKEN_ARGUMENT = typer.Argument(..., help="Report token to convert")


def _settings(ctx: typer.Context) -> ConverterSettings:
    settings: ConverterSettings = ctx.obj
    return settings


def _fail(exc: ConversionError) -> NoReturn:
    typer.secho(str(exc), fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1) from exc


@app.callback()
def main(
    ctx: typer.Context,
    config: Optional[Path] = CONFIG_OPTION,
    debug: bool = DEBUG_OPTION,
) -> None:
    """Load settings shared by every command."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )
    if ctx.invoked_subcommand == "config":
        return
    try:
        ctx.obj = ConverterSettings.load(config)
    except (FileNotFoundError, RuntimeError) as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc


@app.command()
def direction(ctx: typer.Context, bearing: str = TOKEN_ARGUMENT) -> None:
    """Print the compass direction of a bearing in degrees."""
    settings = _settings(ctx)
    try:
        messages = settings.messages()
    except RuntimeError as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc
    key = DirectionConverter.degrees_to_direction(bearing)
    label = DirectionConverter.describe(bearing, messages)
    typer.echo(f"{key.value} ({label})")


@app.command()
def visibility(ctx: typer.Context, token: str = TOKEN_ARGUMENT) -> None:
    """Print a metre visibility token as display text."""
    try:
        typer.echo(VisibilityConverter.convert_visibility(token))
    except ConversionError as exc:
        _fail(exc)


@app.command("visibility-km")
def visibility_km(ctx: typer.Context, token: str = TOKEN_ARGUMENT) -> None:
    """Print a visibility with a unit suffix in kilometres."""
    try:
        km = VisibilityConverter.convert_visibility_to_km(token)
    except ConversionError as exc:
        _fail(exc)
    if km is None:
        typer.echo("n/a")
    else:
        typer.echo(f"{_settings(ctx).format_real(km)} km")


def _echo_temperature(settings: ConverterSettings, celsius: float) -> None:
    if settings.temperature_unit == "F":
        value = TemperatureConverter.celsius_to_fahrenheit(celsius)
    else:
        value = celsius
    typer.echo(f"{settings.format_real(value)}°{settings.temperature_unit}")


@app.command()
def temperature(ctx: typer.Context, token: str = TOKEN_ARGUMENT) -> None:
    """Print a main-group temperature token such as M08."""
    try:
        celsius = TemperatureConverter.convert_temperature_code(token)
    except ConversionError as exc:
        _fail(exc)
    _echo_temperature(_settings(ctx), celsius)


@app.command("remark-temperature")
def remark_temperature(
    ctx: typer.Context,
    sign: str = typer.Argument(..., help="0 for positive, 1 for negative"),
    magnitude: str = typer.Argument(..., help="Tenths of a degree, e.g. 023"),
) -> None:
    """Print a remark temperature given as sign flag and tenths."""
    try:
        celsius = TemperatureConverter.convert_temperature_remark(sign, magnitude)
    except ConversionError as exc:
        _fail(exc)
    _echo_temperature(_settings(ctx), celsius)


@app.command()
def pressure(ctx: typer.Context, inches: float = typer.Argument(..., help="Inches of mercury")) -> None:
    """Print an altimeter setting in hectopascals."""
    hpa = PressureConverter.inches_mercury_to_hpascal(inches)
    typer.echo(f"{_settings(ctx).format_real(hpa)} hPa")


@app.command("time")
def time_of_day(ctx: typer.Context, token: str = TOKEN_ARGUMENT) -> None:
    """Print an HHMM token as a time of day."""
    try:
        typer.echo(TimeConverter.string_to_time(token).strftime("%H:%M"))
    except ConversionError as exc:
        _fail(exc)


@app.command()
def precipitation(ctx: typer.Context, token: str = TOKEN_ARGUMENT) -> None:
    """Print a precipitation amount given in hundredths of an inch."""
    try:
        inches = PrecipitationConverter.convert_precipitation_amount(token)
    except ConversionError as exc:
        _fail(exc)
    typer.echo(f"{_settings(ctx).format_real(inches)} in")


@app.command("km-to-sm")
def km_to_sm(ctx: typer.Context, km: float = typer.Argument(..., help="Kilometres")) -> None:
    """Convert kilometres to statute miles."""
    typer.echo(f"{_settings(ctx).format_real(DistanceConverter.km_to_sm(km))} SM")


@app.command("sm-to-km")
def sm_to_km(ctx: typer.Context, sm: float = typer.Argument(..., help="Statute miles")) -> None:
    """Convert statute miles to kilometres."""
    typer.echo(f"{_settings(ctx).format_real(DistanceConverter.sm_to_km(sm))} km")


# ───────────────────────── config sub-commands ───────────────────────────────
@config_app.command("validate")
def validate_config(file: Path) -> None:
    """Validate a YAML config file against the schema."""
    try:
        ConverterSettings.load(file)
        typer.echo("✅ Config valid")
    except RuntimeError as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc


# ───────────────────────── module entrypoint ────────────────────────────────
if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        sys.exit(0)
