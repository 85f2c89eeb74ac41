"""In-memory controller holding hostels, users, reservations, stays and reviews."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum

from hostalcli.datatypes import DTEmpleado, DTHabitacion, DTHostal, DTHuesped
from hostalcli.enums import Cargo, ComparacionFecha, Estado, Tipo
from hostalcli.registros import (
    DTEstadia,
    DTHostalCompleto,
    DTReserva,
    DTReservaCompleto,
    DTReview,
)

__all__ = ["TipoUsuario", "Controlador"]


class TipoUsuario(Enum):
    """Kind of registered user."""

    Huesped = 0
    Empleado = 1


@dataclass
class _Hostal:
    nombre: str
    direccion: str
    telefono: str
    habitaciones: dict[int, DTHabitacion] = field(default_factory=dict)


@dataclass
class _Reserva:
    codigo: int
    nombre_hostal: str
    numero_habitacion: int
    checkin: datetime
    checkout: datetime
    huespedes: tuple[str, ...]
    tipo: Tipo
    estado: Estado = Estado.Abierta

    def solapa(self, checkin: datetime, checkout: datetime) -> bool:
        return self.checkin < checkout and checkin < self.checkout


@dataclass
class _Estadia:
    codigo: int
    codigo_reserva: int
    nombre_hostal: str
    email: str
    checkin: datetime
    checkout: datetime | None = None
    codigo_review: int | None = None

    @property
    def activa(self) -> bool:
        return self.checkout is None


@dataclass
class _Review:
    codigo: int
    nombre_hostal: str
    codigo_estadia: int
    email: str
    comentario: str
    calificacion: int
    fecha: datetime
    respuesta: str | None = None
    email_empleado: str | None = None
    fecha_respuesta: datetime | None = None


def _hora_actual() -> datetime:
    return datetime.now().replace(minute=0, second=0, microsecond=0)


class Controlador:
    """Keeps the whole state of the system and performs its use cases.

    Failures are reported with ValueError.
    """

    def __init__(self, fecha_sistema: datetime | None = None) -> None:
        self.fecha_sistema: datetime = fecha_sistema or _hora_actual()
        self.contador_reserva = 0
        self.contador_estadia = 0
        self.contador_review = 0
        self._huespedes: dict[str, DTHuesped] = {}
        self._empleados: dict[str, DTEmpleado] = {}
        self._hostales: dict[str, _Hostal] = {}
        self._reservas: dict[int, _Reserva] = {}
        self._estadias: dict[int, _Estadia] = {}
        self._reviews: dict[int, _Review] = {}

    # ----------------------------------------------------------------- lookups

    def _hostal(self, nombre: str) -> _Hostal:
        try:
            return self._hostales[nombre]
        except KeyError:
            raise ValueError(f"No existe un hostal con el nombre {nombre}") from None

    def _habitacion(self, nombre_hostal: str, numero: int) -> DTHabitacion:
        hostal = self._hostal(nombre_hostal)
        try:
            return hostal.habitaciones[numero]
        except KeyError:
            raise ValueError(
                f"No existe la habitacion {numero} en el hostal {nombre_hostal}"
            ) from None

    def _empleado(self, email: str) -> DTEmpleado:
        try:
            return self._empleados[email]
        except KeyError:
            raise ValueError(f"No existe un empleado con el email {email}") from None

    def _huesped(self, email: str) -> DTHuesped:
        try:
            return self._huespedes[email]
        except KeyError:
            raise ValueError(f"No existe un huesped con el email {email}") from None

    def _estadia(self, codigo: int, email: str) -> _Estadia:
        estadia = self._estadias.get(codigo)
        if estadia is None or estadia.email != email:
            raise ValueError(f"No existe la estadia {codigo} del huesped {email}")
        return estadia

    def _promedio(self, nombre_hostal: str) -> float:
        notas = [r.calificacion for r in self._reviews.values() if r.nombre_hostal == nombre_hostal]
        return sum(notas) / len(notas) if notas else 0.0

    def _disponible(self, nombre_hostal: str, numero: int, checkin: datetime, checkout: datetime) -> bool:
        return not any(
            r.nombre_hostal == nombre_hostal
            and r.numero_habitacion == numero
            and r.estado is not Estado.Cancelada
            and r.solapa(checkin, checkout)
            for r in self._reservas.values()
        )

    def _costo(self, reserva: _Reserva) -> float:
        precio = self._habitacion(reserva.nombre_hostal, reserva.numero_habitacion).precio
        noches = max(1, (reserva.checkout.date() - reserva.checkin.date()).days)
        return precio * noches

    @staticmethod
    def _dt_reserva(reserva: _Reserva) -> DTReserva:
        return DTReserva(reserva.codigo, reserva.checkin, reserva.checkout, reserva.estado)

    @staticmethod
    def _dt_review(review: _Review) -> DTReview:
        return DTReview(review.codigo, review.fecha, review.calificacion, review.comentario)

    # ------------------------------------------------------------------- dates

    def comparar_fechas_generico(self, primera_fecha: datetime, segunda_fecha: datetime) -> ComparacionFecha:
        """Compare the first date against the second."""
        if primera_fecha < segunda_fecha:
            return ComparacionFecha.Menor
        if primera_fecha == segunda_fecha:
            return ComparacionFecha.Igual
        return ComparacionFecha.Mayor

    def comparar_fechas(self, fecha_nueva: datetime) -> ComparacionFecha:
        """Compare a date against the system date."""
        return self.comparar_fechas_generico(fecha_nueva, self.fecha_sistema)

    def actualizar_estado_reservas(self) -> None:
        """Close the open reservations whose checkout is before the system date."""
        for reserva in self._reservas.values():
            if reserva.estado is Estado.Abierta and reserva.checkout < self.fecha_sistema:
                reserva.estado = Estado.Cerrada

    # ------------------------------------------------------------------- users

    def verificar_email(self, entrada: str) -> bool:
        """Return whether any user is registered with this e-mail."""
        return entrada in self._huespedes or entrada in self._empleados

    def validar_email_huesped(self, email_huesped: str) -> bool:
        return email_huesped in self._huespedes

    def verificar_email_empleado(self, email_empleado: str) -> bool:
        return email_empleado in self._empleados

    def verificar_email_y_tipo(self, email: str) -> TipoUsuario | None:
        """Return the kind of user registered with the e-mail, or None."""
        if email in self._huespedes:
            return TipoUsuario.Huesped
        if email in self._empleados:
            return TipoUsuario.Empleado
        return None

    def alta_huesped(self, nuevo_huesped: DTHuesped) -> None:
        if self.verificar_email(nuevo_huesped.email):
            raise ValueError(f"Ya existe un usuario con el email {nuevo_huesped.email}")
        self._huespedes[nuevo_huesped.email] = nuevo_huesped

    def alta_empleado(self, nuevo_empleado: DTEmpleado) -> None:
        if self.verificar_email(nuevo_empleado.email):
            raise ValueError(f"Ya existe un usuario con el email {nuevo_empleado.email}")
        self._empleados[nuevo_empleado.email] = nuevo_empleado

    def obtener_usuarios(self) -> list[str]:
        """E-mails of every user, in order."""
        return sorted({*self._huespedes, *self._empleados})

    def obtener_huespedes(self) -> list[str]:
        return sorted(self._huespedes)

    def obtener_empleados(self) -> list[str]:
        return sorted(self._empleados)

    def obtener_huesped_completo(self, email: str) -> DTHuesped:
        return self._huesped(email)

    def obtener_empleado_completo(self, email: str) -> DTEmpleado:
        return self._empleado(email)

    # ---------------------------------------------------------------- hostels

    def existe_hostal(self, nombre: str) -> None:
        """Raise ValueError if a hostel with this name exists."""
        if nombre in self._hostales:
            raise ValueError(f"Ya existe un hostal con el nombre {nombre}")

    def no_existe_hostal(self, nombre: str) -> None:
        """Raise ValueError if no hostel with this name exists."""
        self._hostal(nombre)

    def existe_hostal_bool(self, nombre_hostal: str) -> bool:
        return nombre_hostal in self._hostales

    def alta_hostal(self, nuevo_hostal: DTHostal) -> None:
        self.existe_hostal(nuevo_hostal.nombre)
        self._hostales[nuevo_hostal.nombre] = _Hostal(
            nuevo_hostal.nombre, nuevo_hostal.direccion, nuevo_hostal.telefono
        )

    def alta_habitacion(self, nueva_habitacion: DTHabitacion, nombre_hostal: str) -> None:
        hostal = self._hostal(nombre_hostal)
        if nueva_habitacion.numero in hostal.habitaciones:
            raise ValueError(
                f"Ya existe la habitacion {nueva_habitacion.numero} en el hostal {nombre_hostal}"
            )
        hostal.habitaciones[nueva_habitacion.numero] = replace(
            nueva_habitacion, nombre_hostal=nombre_hostal
        )

    def asignar_empleado_hostal(self, nombre_hostal: str, email_empleado: str, cargo: Cargo) -> None:
        self._hostal(nombre_hostal)
        empleado = self._empleado(email_empleado)
        self._empleados[email_empleado] = replace(
            empleado, nombre_hostal=nombre_hostal, cargo=Cargo(cargo)
        )

    def obtener_hostales(self) -> list[DTHostal]:
        """Every hostel with its average rating, ordered by name."""
        return [
            DTHostal(h.nombre, h.direccion, h.telefono, self._promedio(h.nombre))
            for _, h in sorted(self._hostales.items())
        ]

    def obtener_top_3_hostales(self) -> list[DTHostal]:
        """The three hostels with the best average rating, best first."""
        return sorted(self.obtener_hostales(), key=lambda h: h.promedio, reverse=True)[:3]

    def obtener_no_empleados_hostal(self, nombre_hostal: str) -> dict[str, DTEmpleado]:
        """Employees not working for the hostel, keyed by e-mail."""
        self._hostal(nombre_hostal)
        return {
            email: emp
            for email, emp in sorted(self._empleados.items())
            if emp.nombre_hostal != nombre_hostal
        }

    def obtener_hostal_completo(self, nombre_hostal: str) -> DTHostalCompleto:
        hostal = self._hostal(nombre_hostal)
        reviews = [
            self._dt_review(r) for r in self._reviews.values() if r.nombre_hostal == nombre_hostal
        ]
        return DTHostalCompleto(
            hostal.nombre,
            hostal.direccion,
            hostal.telefono,
            self._promedio(nombre_hostal),
            reviews,
            hostal.habitaciones,
        )

    def obtener_capacidad_habitacion(self, numero_habitacion: int, nombre_hostal: str) -> int:
        return self._habitacion(nombre_hostal, numero_habitacion).capacidad

    def obtener_habitaciones_individuales(
        self, nombre_hostal: str, checkin: datetime, checkout: datetime
    ) -> dict[int, DTHabitacion]:
        """Rooms of the hostel free during the period, keyed by number."""
        hostal = self._hostal(nombre_hostal)
        return {
            numero: hab
            for numero, hab in sorted(hostal.habitaciones.items())
            if self._disponible(nombre_hostal, numero, checkin, checkout)
        }

    def obtener_habitaciones_grupales(
        self, nombre_hostal: str, checkin: datetime, checkout: datetime
    ) -> dict[int, DTHabitacion]:
        """Rooms for more than one guest free during the period."""
        return {
            numero: hab
            for numero, hab in self.obtener_habitaciones_individuales(
                nombre_hostal, checkin, checkout
            ).items()
            if hab.capacidad > 1
        }

    # ----------------------------------------------------------- reservations

    def _crear_reserva(
        self,
        nombre_hostal: str,
        numero_habitacion: int,
        huespedes: tuple[str, ...],
        checkin: datetime,
        checkout: datetime,
        tipo: Tipo,
    ) -> int:
        habitacion = self._habitacion(nombre_hostal, numero_habitacion)
        if not huespedes:
            raise ValueError("La reserva debe tener al menos un huesped")
        for email in huespedes:
            self._huesped(email)
        if checkout < checkin:
            raise ValueError("La fecha de checkout no puede ser anterior a la de checkin")
        if len(huespedes) > habitacion.capacidad:
            raise ValueError("La cantidad de huespedes supera la capacidad de la habitacion")
        if not self._disponible(nombre_hostal, numero_habitacion, checkin, checkout):
            raise ValueError("La habitacion no esta disponible en esas fechas")
        self.contador_reserva += 1
        codigo = self.contador_reserva
        self._reservas[codigo] = _Reserva(
            codigo, nombre_hostal, numero_habitacion, checkin, checkout, huespedes, tipo
        )
        return codigo

    def alta_reserva_individual(
        self,
        nombre_hostal: str,
        numero_habitacion: int,
        email_huesped: str,
        checkin: datetime,
        checkout: datetime,
    ) -> int:
        """Book a room for one guest and return the reservation code."""
        return self._crear_reserva(
            nombre_hostal, numero_habitacion, (email_huesped,), checkin, checkout, Tipo.Individual
        )

    def alta_reserva_grupal(
        self,
        nombre_hostal: str,
        numero_habitacion: int,
        huespedes: Iterable[str],
        checkin: datetime,
        checkout: datetime,
    ) -> int:
        """Book a room for several guests and return the reservation code."""
        return self._crear_reserva(
            nombre_hostal,
            numero_habitacion,
            tuple(dict.fromkeys(huespedes)),
            checkin,
            checkout,
            Tipo.Grupal,
        )

    def obtener_reservas_hostal(self, nombre_hostal: str) -> dict[int, DTReserva]:
        self._hostal(nombre_hostal)
        return {
            codigo: self._dt_reserva(r)
            for codigo, r in sorted(self._reservas.items())
            if r.nombre_hostal == nombre_hostal
        }

    def obtener_reservas_completas_hostal(self, nombre_hostal: str) -> list[DTReservaCompleto]:
        self._hostal(nombre_hostal)
        return [
            DTReservaCompleto(
                r.codigo,
                r.numero_habitacion,
                r.checkin,
                r.checkout,
                r.estado,
                tuple(self._huespedes[email].nombre for email in r.huespedes),
                self._costo(r),
            )
            for _, r in sorted(self._reservas.items())
            if r.nombre_hostal == nombre_hostal
        ]

    def obtener_reserva_usuario(self, nombre_hostal: str, email: str) -> dict[int, DTReserva]:
        """Non-cancelled reservations of a guest at a hostel, keyed by code."""
        return {
            codigo: self._dt_reserva(r)
            for codigo, r in sorted(self._reservas.items())
            if r.nombre_hostal == nombre_hostal
            and email in r.huespedes
            and r.estado is not Estado.Cancelada
        }

    # ------------------------------------------------------------------ stays

    def alta_estadia(self, codigo_reserva: int, email_huesped: str, checkin: datetime | None = None) -> int:
        """Register a guest's stay for a reservation and return its code."""
        reserva = self._reservas.get(codigo_reserva)
        if reserva is None:
            raise ValueError(f"No existe la reserva {codigo_reserva}")
        if email_huesped not in reserva.huespedes:
            raise ValueError(f"El huesped {email_huesped} no pertenece a la reserva {codigo_reserva}")
        if reserva.estado is Estado.Cancelada:
            raise ValueError(f"La reserva {codigo_reserva} esta cancelada")
        self.contador_estadia += 1
        codigo = self.contador_estadia
        self._estadias[codigo] = _Estadia(
            codigo,
            codigo_reserva,
            reserva.nombre_hostal,
            email_huesped,
            checkin or self.fecha_sistema,
        )
        return codigo

    def finalizar_estadia(
        self, codigo_estadia: int, email_huesped: str, checkout: datetime | None = None
    ) -> None:
        estadia = self._estadia(codigo_estadia, email_huesped)
        if not estadia.activa:
            raise ValueError(f"La estadia {codigo_estadia} ya fue finalizada")
        estadia.checkout = checkout or self.fecha_sistema

    def existe_estadia(self, nombre_hostal: str, email_huesped: str) -> int:
        """Code of the guest's active stay at the hostel."""
        for codigo, estadia in sorted(self._estadias.items()):
            if estadia.activa and estadia.email == email_huesped and estadia.nombre_hostal == nombre_hostal:
                return codigo
        raise ValueError(f"El huesped {email_huesped} no tiene estadias activas en {nombre_hostal}")

    def contar_estadias_activas(self, email_huesped: str, nombre_hostal: str | None = None) -> int:
        return sum(
            1
            for e in self._estadias.values()
            if e.activa
            and e.email == email_huesped
            and (nombre_hostal is None or e.nombre_hostal == nombre_hostal)
        )

    def obtener_estadias_fin_huesped(self, nombre_hostal: str, email_huesped: str) -> dict[int, DTEstadia]:
        """Finished, not yet rated stays of a guest at a hostel, keyed by code."""
        return {
            codigo: DTEstadia(codigo, e.checkin, e.checkout, e.email)
            for codigo, e in sorted(self._estadias.items())
            if e.checkout is not None
            and e.codigo_review is None
            and e.email == email_huesped
            and e.nombre_hostal == nombre_hostal
        }

    # ---------------------------------------------------------------- reviews

    def calificar_estadia(
        self,
        nombre_hostal: str,
        codigo_estadia: int,
        comentario: str,
        calificacion: int,
        email_huesped: str,
        fecha: datetime | None = None,
    ) -> int:
        """Rate a finished stay and return the review code."""
        estadia = self._estadia(codigo_estadia, email_huesped)
        if estadia.nombre_hostal != nombre_hostal:
            raise ValueError(f"La estadia {codigo_estadia} no pertenece al hostal {nombre_hostal}")
        if estadia.activa:
            raise ValueError(f"La estadia {codigo_estadia} no fue finalizada")
        if estadia.codigo_review is not None:
            raise ValueError(f"La estadia {codigo_estadia} ya fue calificada")
        if not 1 <= calificacion <= 5:
            raise ValueError("La calificacion debe estar entre 1 y 5")
        self.contador_review += 1
        codigo = self.contador_review
        self._reviews[codigo] = _Review(
            codigo,
            nombre_hostal,
            codigo_estadia,
            email_huesped,
            comentario,
            calificacion,
            fecha or self.fecha_sistema,
        )
        estadia.codigo_review = codigo
        return codigo

    def alta_respuesta(
        self, codigo_review: int, email_empleado: str, respuesta: str, fecha: datetime | None = None
    ) -> None:
        review = self._reviews.get(codigo_review)
        if review is None:
            raise ValueError(f"No existe la review {codigo_review}")
        self._empleado(email_empleado)
        if review.respuesta is not None:
            raise ValueError(f"La review {codigo_review} ya fue respondida")
        review.respuesta = respuesta
        review.email_empleado = email_empleado
        review.fecha_respuesta = fecha or self.fecha_sistema

    def listar_comentarios_sin_responder(self, email_empleado: str) -> dict[int, DTReview]:
        """Unanswered reviews of the employee's hostel, keyed by code."""
        empleado = self._empleado(email_empleado)
        if not empleado.nombre_hostal:
            return {}
        return {
            codigo: self._dt_review(r)
            for codigo, r in sorted(self._reviews.items())
            if r.nombre_hostal == empleado.nombre_hostal and r.respuesta is None
        }