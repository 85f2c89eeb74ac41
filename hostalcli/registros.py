"""Records describing reservations, stays, reviews and full hostel details."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from datetime import datetime

from hostalcli.datatypes import DTHabitacion
from hostalcli.enums import Estado
from hostalcli.fechas import format_fecha

__all__ = [
    "DTReserva",
    "DTReservaCompleto",
    "DTReview",
    "DTEstadia",
    "DTHostalCompleto",
]

_NC = "\033[0m"
_GREEN = "\033[0;32m"
_CYAN = "\033[0;36m"

_ESTADO_RESERVA = {
    Estado.Abierta: "Abierto",
    Estado.Cerrada: "Cerrada",
    Estado.Cancelada: "Cancelada",
}


@dataclass(frozen=True)
class DTReserva:
    """Summary of a reservation."""

    codigo: int
    checkin: datetime
    checkout: datetime
    estado: Estado

    def __str__(self) -> str:
        return (
            f"| Codigo: {self.codigo} |\n"
            f"| Chekin: {format_fecha(self.checkin)} |\n"
            f"| Checkout: {format_fecha(self.checkout)} |\n"
            f"| Estado: {_ESTADO_RESERVA[Estado(self.estado)]} |\n\n"
        )


@dataclass(frozen=True)
class DTReservaCompleto:
    """A reservation with its room, guests and cost."""

    codigo: int
    numero_habitacion: int
    checkin: datetime
    checkout: datetime
    estado: Estado
    huespedes: tuple[str, ...] = ()
    costo: float = 0.0

    def __post_init__(self) -> None:
        # Guests are kept ordered by e-mail, without repetitions.
        object.__setattr__(self, "huespedes", tuple(sorted(set(self.huespedes))))


@dataclass(frozen=True)
class DTReview:
    """A rating left by a guest for a stay."""

    codigo: int
    fecha: datetime
    calificacion: int
    comentario: str

    def __str__(self) -> str:
        return (
            f"| Codigo: {self.codigo} |\n"
            f"| Fecha: {format_fecha(self.fecha)} |\n"
            f"| Comentario: {self.comentario} |\n"
            f"| Calificacion: {self.calificacion} |\n\n"
        )


@dataclass
class DTEstadia:
    """A guest's stay at a hostel."""

    codigo: int
    checkin: datetime
    checkout: datetime
    email: str
    promo: str = " "

    def __str__(self) -> str:
        return (
            f"| Codigo: {self.codigo} |\n"
            f"| Chekin: {format_fecha(self.checkin)} |\n"
            f"| Checkout: {format_fecha(self.checkout)} |\n"
            f"| Huesped: {self.email} |\n"
            f"| Promo: {self.promo} |\n"
        )


def _valores(coleccion: Mapping | Iterable) -> Iterable:
    return coleccion.values() if isinstance(coleccion, Mapping) else coleccion


@dataclass
class DTHostalCompleto:
    """A hostel with its reviews and rooms, each ordered by their number."""

    nombre: str
    direccion: str
    telefono: str
    promedio: float = 0.0
    reviews: dict[int, DTReview] = field(default_factory=dict)
    habitaciones: dict[int, DTHabitacion] = field(default_factory=dict)

    def __post_init__(self) -> None:
        reviews = {review.codigo: review for review in _valores(self.reviews)}
        habitaciones = {hab.numero: hab for hab in _valores(self.habitaciones)}
        self.reviews = dict(sorted(reviews.items()))
        self.habitaciones = dict(sorted(habitaciones.items()))

    def __str__(self) -> str:
        partes = [
            f"Nombre: {self.nombre}\n"
            f"Direccion: {self.direccion}\n"
            f"Telefono: {self.telefono}\n"
            f"Calificación Promedio: {self.promedio:g}\n"
        ]
        if self.reviews:
            partes.append("\nLista de reviews: \n")
            partes.extend(f"{_GREEN}{review}{_NC}\n" for review in self.reviews.values())
        else:
            partes.append("\nReviews: Aún no tiene reviews\n")
        if self.habitaciones:
            partes.append("\nLista de habitaciones: \n")
            partes.extend(f"{_CYAN}{hab}{_NC}\n" for hab in self.habitaciones.values())
        else:
            partes.append("\nHabitaciones: Aún no tiene habitaciones\n")
        return "".join(partes)