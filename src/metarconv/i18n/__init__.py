"""Localized labels for symbolic conversion results."""

from metarconv.i18n.messages import CATALOGS, Messages

__all__ = ["CATALOGS", "Messages"]
