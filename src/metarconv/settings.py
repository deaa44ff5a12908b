"""User-configurable settings loaded from a YAML file."""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path
from typing import ClassVar, Final, Literal

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

from metarconv.i18n.messages import Messages

logger: Final = logging.getLogger(__name__)

# Load environment variables from .env file(s)
load_dotenv()


def _interpolate_env(content: str) -> str:
    return re.sub(r"\$\{(\w+)\}", lambda m: os.getenv(m.group(1), ""), content)


class ConverterSettings(BaseModel):
    """Settings for label lookup and result display.

    The converters themselves take no settings; these values only decide
    which labels are used for directions and how the CLI prints results.
    """

    # Default search paths for configuration
    DEFAULT_CONFIG_PATHS: ClassVar[list[Path]] = [
        Path("metarconv.yaml"),
        Path("~/.config/metarconv/config.yaml").expanduser(),
    ]

    locale: Literal["en", "fr"] = Field("en", description="Built-in label catalog")
    catalog_file: Path | None = Field(
        None, description="YAML file with labels overriding the built-in catalog"
    )
    temperature_unit: Literal["C", "F"] = Field("C", description="Display unit for temperatures")
    decimals: int = Field(2, ge=0, le=6, description="Digits kept when printing real values")

    @field_validator("catalog_file")
    @classmethod
    def validate_catalog_file(cls, v: Path | None) -> Path | None:
        """Ensure the catalog file exists when one is configured."""
        if v is not None and not v.expanduser().is_file():
            raise ValueError(f"catalog_file not found: {v}")
        return v.expanduser() if v is not None else None

    def messages(self) -> Messages:
        """Build the label catalog for these settings."""
        if self.catalog_file is None:
            return Messages(self.locale)
        return Messages.from_yaml(self.catalog_file, self.locale)

    def format_real(self, value: float) -> str:
        """Format a real result with the configured number of decimals."""
        return f"{value:.{self.decimals}f}"

    @classmethod
    def load(cls, path: Path | None = None) -> ConverterSettings:
        """Load settings from a YAML file.

        Args:
            path: Path to config file (optional, searches default locations if None)

        Returns:
            Validated settings; defaults when no file is given or found

        Raises:
            FileNotFoundError: If METARCONV_CONFIG names a missing file
            RuntimeError: If the config file cannot be parsed or is invalid
        """
        if path is None:
            env_path = os.environ.get("METARCONV_CONFIG")
            if env_path:
                path = Path(env_path)
                if not path.exists():
                    raise FileNotFoundError(f"Config file from METARCONV_CONFIG not found: {path}")
            else:
                for default_path in cls.DEFAULT_CONFIG_PATHS:
                    if default_path.exists():
                        path = default_path
                        break
                else:
                    logger.debug("No config file found, using defaults")
                    return cls()

        try:
            raw = _interpolate_env(path.read_text())
            data = yaml.safe_load(raw) or {}
        except (OSError, yaml.YAMLError) as exc:
            raise RuntimeError(f"Unable to read config YAML: {exc}") from exc

        try:
            return cls.model_validate(data)
        except ValidationError as err:
            raise RuntimeError(f"Invalid configuration:\n{err}") from err
