"""Plain records describing users, rooms and hostels."""

from __future__ import annotations

from dataclasses import dataclass, field

from hostalcli.enums import Cargo

__all__ = ["DTEmpleado", "DTHuesped", "DTHabitacion", "DTHostal"]


@dataclass(frozen=True)
class DTEmpleado:
    """An employee, optionally attached to a hostel."""

    nombre: str
    email: str
    contrasena: str = field(repr=False)
    cargo: Cargo
    nombre_hostal: str = ""

    def __str__(self) -> str:
        hostal = self.nombre_hostal or "Sin hostal asignado"
        return (
            f"| Nombre: {self.nombre} |\n"
            f"| Email: {self.email} |\n"
            f"| Trabaja para el hostal de nombre: {hostal} |\n"
            f"| Cargo: {Cargo(self.cargo).name} |\n"
        )


@dataclass(frozen=True)
class DTHuesped:
    """A guest."""

    nombre: str
    email: str
    contrasena: str = field(repr=False)
    es_tecno: bool

    def __str__(self) -> str:
        tecnopacker = "Sí" if self.es_tecno else "No"
        return (
            f"| Nombre: {self.nombre} |\n"
            f"| Email: {self.email} |\n"
            f"| ¿Es tecnopacker?: {tecnopacker} |\n"
        )


@dataclass(frozen=True)
class DTHabitacion:
    """A room of a hostel."""

    numero: int
    precio: float
    capacidad: int
    nombre_hostal: str = ""

    def __str__(self) -> str:
        return (
            f"| Número: {self.numero} |\n"
            f"| Precio: {self.precio:g} |\n"
            f"| Capacidad: {self.capacidad} |\n"
        )


@dataclass(frozen=True)
class DTHostal:
    """A hostel with its average rating."""

    nombre: str
    direccion: str
    telefono: str
    promedio: float = 0.0

    def __str__(self) -> str:
        return (
            f"| Nombre: {self.nombre} |\n"
            f"| Direccion: {self.direccion} |\n"
            f"| Telefono: {self.telefono} |\n"
            f"| Calificación Promedio: {self.promedio:g} |\n\n"
        )