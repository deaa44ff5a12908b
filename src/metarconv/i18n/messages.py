"""Message catalogs for direction labels.

Converters only return symbolic keys. A :class:`Messages` instance maps
``Converter.<KEY>`` strings to display text and can be passed wherever a
``Mapping[str, str]`` lookup is accepted.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Final

import yaml

logger: Final = logging.getLogger(__name__)

DEFAULT_LOCALE: Final = "en"

CATALOGS: Final[Mapping[str, Mapping[str, str]]] = MappingProxyType(
    {
        "en": MappingProxyType(
            {
                "Converter.N": "North",
                "Converter.NNE": "North North East",
                "Converter.NE": "North East",
                "Converter.ENE": "East North East",
                "Converter.E": "East",
                "Converter.ESE": "East South East",
                "Converter.SE": "South East",
                "Converter.SSE": "South South East",
                "Converter.S": "South",
                "Converter.SSW": "South South West",
                "Converter.SW": "South West",
                "Converter.WSW": "West South West",
                "Converter.W": "West",
                "Converter.WNW": "West North West",
                "Converter.NW": "North West",
                "Converter.NNW": "North North West",
                "Converter.VRB": "Variable",
            }
        ),
        "fr": MappingProxyType(
            {
                "Converter.N": "Nord",
                "Converter.NNE": "Nord Nord Est",
                "Converter.NE": "Nord Est",
                "Converter.ENE": "Est Nord Est",
                "Converter.E": "Est",
                "Converter.ESE": "Est Sud Est",
                "Converter.SE": "Sud Est",
                "Converter.SSE": "Sud Sud Est",
                "Converter.S": "Sud",
                "Converter.SSW": "Sud Sud Ouest",
                "Converter.SW": "Sud Ouest",
                "Converter.WSW": "Ouest Sud Ouest",
                "Converter.W": "Ouest",
                "Converter.WNW": "Ouest Nord Ouest",
                "Converter.NW": "Nord Ouest",
                "Converter.NNW": "Nord Nord Ouest",
                "Converter.VRB": "Variable",
            }
        ),
    }
)


class Messages(Mapping[str, str]):
    """Read-only label catalog with fallback to the default locale.

    Lookups try the locale's entries (plus any overrides) first, then the
    English catalog.
    """

    def __init__(
        self,
        locale: str = DEFAULT_LOCALE,
        overrides: Mapping[str, str] | None = None,
    ) -> None:
        """Initialize the catalog.

        Args:
            locale: Built-in catalog name ("en" or "fr")
            overrides: Extra or replacement labels keyed like the catalog

        Raises:
            KeyError: If the locale has no built-in catalog
        """
        if locale not in CATALOGS:
            raise KeyError(f"Unknown locale: {locale}")
        self.locale = locale
        entries = dict(CATALOGS[DEFAULT_LOCALE])
        entries.update(CATALOGS[locale])
        entries.update(overrides or {})
        self._entries: Mapping[str, str] = MappingProxyType(entries)

    def __getitem__(self, key: str) -> str:
        return self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    @classmethod
    def from_yaml(cls, path: Path, locale: str = DEFAULT_LOCALE) -> Messages:
        """Build a catalog with overrides read from a YAML file.

        The file holds a flat mapping of catalog keys to labels.

        Args:
            path: YAML file to read
            locale: Built-in catalog to start from

        Returns:
            Catalog with the file's labels applied

        Raises:
            RuntimeError: If the file cannot be read or is not a flat mapping
        """
        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        except (OSError, yaml.YAMLError) as exc:
            raise RuntimeError(f"Unable to read message catalog: {exc}") from exc

        if not isinstance(data, dict):
            raise RuntimeError(f"Message catalog must be a mapping: {path}")
        overrides = {str(k): str(v) for k, v in data.items()}
        logger.debug("Loaded %d labels from %s", len(overrides), path)
        return cls(locale, overrides)
