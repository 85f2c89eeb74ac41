"""Parsing and display of the day-and-hour dates the system works with."""

from __future__ import annotations

from datetime import datetime

__all__ = ["parse_fecha", "format_fecha"]

_FORMATOS_ENTRADA = ("%d/%m/%Y - %H", "%d/%m/%y - %H")
_FORMATO_SALIDA = "%d/%m/%Y - %H"


def parse_fecha(texto: str) -> datetime:
    """Parse a date written as 'DD/MM/YYYY - HH' (or with a two-digit year).

    Raises ValueError when the text does not follow the format.
    """
    limpio = texto.strip()
    for formato in _FORMATOS_ENTRADA:
        try:
            return datetime.strptime(limpio, formato)
        except ValueError:
            continue
    raise ValueError("Formato de fecha y hora incorrecto")


def format_fecha(fecha: datetime) -> str:
    """Render a date as 'DD/MM/YYYY - HH hs'."""
    return f"{fecha.strftime(_FORMATO_SALIDA)} hs"