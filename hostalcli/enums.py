"""Enumerations shared by the hostel management system."""

from __future__ import annotations

import re
from enum import Enum

__all__ = [
    "Cargo",
    "ComparacionFecha",
    "Estado",
    "Tipo",
    "cargo_desde_texto",
    "estado_reserva_texto",
]


class Cargo(Enum):
    """Position an employee holds in a hostel."""

    Administracion = 0
    Limpieza = 1
    Recepcion = 2
    Infraestructura = 3

    def __str__(self) -> str:
        return self.name


class ComparacionFecha(Enum):
    """Result of comparing one date against another."""

    Menor = 0
    Igual = 1
    Mayor = 2


class Estado(Enum):
    """State of a reservation."""

    Abierta = 0
    Cerrada = 1
    Cancelada = 2

    def __str__(self) -> str:
        return self.name


class Tipo(Enum):
    """Kind of reservation."""

    Individual = 0
    Grupal = 1


_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def cargo_desde_texto(texto: str) -> Cargo:
    """Return the position whose number ("0".."3") starts ``texto``.

    Raises ValueError when the text does not start with a number or the
    number does not name a position.
    """
    match = _LEADING_INT.match(texto)
    if match is None:
        raise ValueError(f"'{texto}' no es un cargo valido")
    try:
        return Cargo(int(match.group(1)))
    except ValueError:
        raise ValueError(f"'{texto}' no es un cargo valido") from None


def estado_reserva_texto(estado: Estado | int) -> str:
    """Return the display name of a reservation state."""
    return Estado(estado).name