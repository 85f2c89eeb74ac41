"""Loads a fixed sample data set into the controller."""

from __future__ import annotations

from hostalcli.consola import GREEN, NC, RED, Consola
from hostalcli.controlador import Controlador
from hostalcli.datatypes import DTEmpleado, DTHabitacion, DTHostal, DTHuesped
from hostalcli.enums import Cargo
from hostalcli.fechas import parse_fecha

__all__ = ["CargadorDatosPrueba"]

_CONTRASENA = "password"

_EMPLEADOS = (
    ("Emilia", "emilia@example.com", Cargo.Recepcion),
    ("Leonardo", "leonardo@example.com", Cargo.Recepcion),
    ("Alina", "alina@example.com", Cargo.Administracion),
    ("Barliman", "barliman@example.com", Cargo.Recepcion),
)

_HUESPEDES = (
    ("Sofia", "sofia@example.com", True),
    ("Frodo", "frodo@example.com", True),
    ("Sam", "sam@example.com", False),
    ("Merry", "merry@example.com", False),
    ("Pippin", "pippin@example.com", False),
    ("Seba", "seba@example.com", True),
)

_HOSTALES = (
    ("La posada del finger", "Av de la playa 123,Maldonado", "099111111"),
    ("Mochileros", "Rambla Costanera 333,Rocha", "42579512"),
    ("El Pony Pisador", "Bree (preguntar por Gandalf)", "000"),
    ("Altos del Fing", "Av del Toro 1424", "099892992"),
    ("Caverna Lujosa", "Amaya 2515", "233233235"),
)

_HABITACIONES = (
    ("La posada del finger", 1, 40, 2),
    ("La posada del finger", 2, 10, 7),
    ("La posada del finger", 3, 30, 3),
    ("La posada del finger", 4, 5, 12),
    ("Caverna Lujosa", 1, 3, 2),
    ("El Pony Pisador", 1, 9, 5),
)

_ASIGNACIONES = (
    ("La posada del finger", "emilia@example.com", Cargo.Recepcion),
    ("Mochileros", "leonardo@example.com", Cargo.Recepcion),
    ("Mochileros", "alina@example.com", Cargo.Administracion),
    ("El Pony Pisador", "barliman@example.com", Cargo.Recepcion),
)

_GRUPO_PONY = (
    "frodo@example.com",
    "sam@example.com",
    "merry@example.com",
    "pippin@example.com",
)

_COMENTARIO_POSADA = (
    "Un poco caro para lo que ofrecen. El famoso gimnasio era una caminadora "
    "(que hacía tremendo ruido) y 2 pesas, la piscina parecía el lago del Parque Rodó "
    "y el desayuno eran 2 tostadas con mermelada. Internet se pasaba cayendo. No vuelvo."
)
_COMENTARIO_PONY = (
    "Se pone peligroso de noche, no recomiendo. "
    "Además no hay caja fuerte para guardar anillos."
)
_COMENTARIO_CAVERNA = "Había pulgas en la habitación. Que lugar más mamarracho!!"


class CargadorDatosPrueba:
    """Loads the sample data set once per controller."""

    def __init__(self, controlador: Controlador) -> None:
        self.controlador = controlador
        self.cargados = False

    def cargar(self, consola: Consola) -> bool:
        """Load the sample data; return False if it was already loaded."""
        if self.cargados:
            consola.escribir(
                RED,
                "Los datos de prueba ya han sido cargados!, "
                "si desea cargarlos nuevamente reinicie el programa.",
                NC,
            )
            return False
        self.cargados = True
        self._cargar_datos()
        consola.escribir(GREEN, "Datos de prueba cargados correctamente!", NC)
        self.controlador.actualizar_estado_reservas()
        return True

    def _cargar_datos(self) -> None:
        c = self.controlador

        for nombre, email, cargo in _EMPLEADOS:
            c.alta_empleado(DTEmpleado(nombre, email, _CONTRASENA, cargo))
        for nombre, email, es_tecno in _HUESPEDES:
            c.alta_huesped(DTHuesped(nombre, email, _CONTRASENA, es_tecno))
        for nombre, direccion, telefono in _HOSTALES:
            c.alta_hostal(DTHostal(nombre, direccion, telefono))
        for hostal, numero, precio, capacidad in _HABITACIONES:
            c.alta_habitacion(DTHabitacion(numero, precio, capacidad), hostal)
        for hostal, email, cargo in _ASIGNACIONES:
            c.asignar_empleado_hostal(hostal, email, cargo)

        reserva_sofia = c.alta_reserva_individual(
            "La posada del finger", 1, "sofia@example.com",
            parse_fecha("01/05/2022 - 14"), parse_fecha("10/05/2022 - 10"),
        )
        reserva_pony = c.alta_reserva_grupal(
            "El Pony Pisador", 1, _GRUPO_PONY,
            parse_fecha("04/01/2001 - 20"), parse_fecha("05/01/2001 - 02"),
        )
        c.alta_reserva_individual(
            "La posada del finger", 3, "sofia@example.com",
            parse_fecha("07/06/2022 - 14"), parse_fecha("30/06/2022 - 11"),
        )
        reserva_seba = c.alta_reserva_individual(
            "Caverna Lujosa", 1, "seba@example.com",
            parse_fecha("10/06/2022 - 14"), parse_fecha("30/06/2022 - 11"),
        )

        estadia_sofia = c.alta_estadia(
            reserva_sofia, "sofia@example.com", parse_fecha("01/05/2022 - 18")
        )
        checkin_pony = parse_fecha("04/01/2001 - 21")
        estadias_pony = [c.alta_estadia(reserva_pony, email, checkin_pony) for email in _GRUPO_PONY]
        estadia_seba = c.alta_estadia(
            reserva_seba, "seba@example.com", parse_fecha("07/06/2022 - 18")
        )

        c.finalizar_estadia(estadia_sofia, "sofia@example.com", parse_fecha("10/05/2022 - 09"))
        checkout_pony = parse_fecha("05/01/2001 - 02")
        for codigo, email in zip(estadias_pony, _GRUPO_PONY):
            c.finalizar_estadia(codigo, email, checkout_pony)
        c.finalizar_estadia(estadia_seba, "seba@example.com", parse_fecha("15/06/2022 - 22"))

        c.calificar_estadia(
            "La posada del finger", estadia_sofia, _COMENTARIO_POSADA, 3,
            "sofia@example.com", parse_fecha("11/05/2022 - 18"),
        )
        review_pony = c.calificar_estadia(
            "El Pony Pisador", estadias_pony[0], _COMENTARIO_PONY, 2,
            "frodo@example.com", parse_fecha("05/01/2001 - 03"),
        )
        c.calificar_estadia(
            "Caverna Lujosa", estadia_seba, _COMENTARIO_CAVERNA, 1,
            "seba@example.com", parse_fecha("15/06/2022 - 23"),
        )

        c.alta_respuesta(
            review_pony, "barliman@example.com", "Desapareció y se fue sin pagar",
            parse_fecha("15/06/2022 - 23"),
        )