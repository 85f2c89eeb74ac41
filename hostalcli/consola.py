"""Terminal input and output shared by the menu's use cases."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterable
from datetime import datetime
from typing import TextIO

from hostalcli.controlador import Controlador
from hostalcli.datatypes import DTEmpleado, DTHostal
from hostalcli.enums import ComparacionFecha
from hostalcli.fechas import parse_fecha
from hostalcli.registros import DTEstadia, DTReserva, DTReview

__all__ = ["Consola", "NC", "RED", "GREEN", "CYAN", "REDB"]

NC = "\033[0m"
RED = "\033[0;31m"
GREEN = "\033[0;32m"
CYAN = "\033[0;36m"
REDB = "\033[41m"

_MENU = (
    "  1. Alta usuario",
    "  2. Alta hostal",
    "  3. Alta habitacion",
    "  4. Asignar empleado a hostal",
    "  5. Realizar reserva",
    "  6. Consultar top 3 de hostales",
    "  7. Registrar estadia",
    "  8. Finalizar estadia",
    "  9. Calificar estadia",
    "  10. Comentar calificacion",
    "  11. Consulta de usuario",
    "  12. Consulta de hostal",
    "  13. Consulta de reserva",
    "  14. Consulta de estadia",
    "  15. Baja de reserva",
    "  16. Modificar fecha del sistema",
    "  17. Cargar de Datos de Prueba",
    "  18. Salir",
)

_DIGITOS = re.compile(r"\d+")
_ERROR_FORMATO = "Formato de fecha y hora incorrecto. Por favor, intente nuevamente..."


def _opcion(entrada: str) -> int:
    """Number the option text starts with, or 0."""
    partes = entrada.split()
    match = _DIGITOS.match(partes[0]) if partes else None
    return int(match.group()) if match else 0


class Consola:
    """Reads answers from a text stream and prints the system's listings."""

    def __init__(
        self,
        controlador: Controlador,
        entrada: TextIO | None = None,
        salida: TextIO | None = None,
    ) -> None:
        self.controlador = controlador
        self.entrada = entrada if entrada is not None else sys.stdin
        self.salida = salida if salida is not None else sys.stdout

    # ---------------------------------------------------------- basic input/output

    def escribir(self, *args: object) -> None:
        """Write the pieces one after another, then a newline."""
        print(*args, sep="", file=self.salida)

    def _escribir_sin_salto(self, texto: object) -> None:
        self.salida.write(str(texto))

    def _error(self, mensaje: str) -> None:
        self.escribir("\n", REDB, mensaje, NC)

    def leer_linea(self, mensaje: str = "") -> str:
        """Show a prompt and read one line; raise EOFError when input ends."""
        if mensaje:
            self.salida.write(mensaje)
            self.salida.flush()
        linea = self.entrada.readline()
        if not linea:
            raise EOFError("no hay mas entrada")
        return linea.rstrip("\r\n")

    def limpiar(self) -> None:
        """Clear the screen when writing to a terminal."""
        isatty = getattr(self.salida, "isatty", None)
        if isatty is not None and isatty():
            self.salida.write("\033[H\033[2J")
            self.salida.flush()

    def press_enter(self) -> None:
        """Wait until a line is entered."""
        try:
            self.leer_linea(f"\n{CYAN}Presiona ENTER para continuar...{NC}")
        except EOFError:
            pass

    # ------------------------------------------------------------------- menu

    def mostrar_menu_principal(self) -> None:
        self.limpiar()
        self.escribir(GREEN, "╔════════════════╗")
        self.escribir("║ Menú principal ║")
        self.escribir("╚════════════════╝")
        for linea in _MENU[:-1]:
            self.escribir(linea)
        self.escribir(_MENU[-1], NC)

    def eleccion_menu_principal(self) -> int:
        """Show the menu and read an option between 1 and 18."""
        self.mostrar_menu_principal()
        while True:
            opcion = _opcion(self.leer_linea(f"{GREEN}Ingresa una opción(1..18): {NC}"))
            if 1 <= opcion <= len(_MENU):
                self.limpiar()
                return opcion
            self.escribir(
                "\n", REDB, "La opción que has ingresado no es válida. Inténtalo otra vez.", NC, "\n"
            )

    # ------------------------------------------------------------------ dates

    def verificar_fecha(self, texto: str) -> datetime | None:
        """Parse a date, reporting a malformed one and returning None."""
        try:
            return parse_fecha(texto)
        except ValueError:
            self._error(_ERROR_FORMATO)
            return None

    def verificar_fecha_checkin(self, texto: str) -> datetime | None:
        """Parse a checkin date that must not be before the system date."""
        fecha = self.verificar_fecha(texto)
        if fecha is None:
            return None
        if self.controlador.comparar_fechas(fecha) is ComparacionFecha.Menor:
            self._error(
                "La fecha de checkin no puede ser anterior a la fecha actual del sistema. "
                "Por favor, intente nuevamente..."
            )
            return None
        return fecha

    def verificar_fecha_checkout(self, texto: str, checkin: datetime) -> datetime | None:
        """Parse a checkout date that must not be before the checkin."""
        fecha = self.verificar_fecha(texto)
        if fecha is None:
            return None
        if self.controlador.comparar_fechas_generico(fecha, checkin) is ComparacionFecha.Menor:
            self._error(
                "La fecha de checkout no puede ser anterior a la fecha de checkin. "
                "Por favor, intente nuevamente..."
            )
            return None
        return fecha

    # --------------------------------------------------------------- listings

    def mostrar_hostales(self) -> list[DTHostal]:
        hostales = self.controlador.obtener_hostales()
        self.escribir("\n", GREEN, "| Lista de hostales |", NC, "\n")
        for hostal in hostales:
            self.escribir(
                f"| Nombre: {hostal.nombre} |\n"
                f"| Direccion: {hostal.direccion} |\n"
                f"| Telefono: {hostal.telefono} |\n"
            )
        return hostales

    def mostrar_hostales_con_promedio(self) -> list[DTHostal]:
        hostales = self.controlador.obtener_hostales()
        self.escribir("\n", GREEN, "| Lista de hostales |", NC, "\n")
        for hostal in hostales:
            self._escribir_sin_salto(hostal)
        return hostales

    def mostrar_estadias_finalizadas(self, nombre_hostal: str, email_huesped: str) -> dict[int, DTEstadia]:
        estadias = self.controlador.obtener_estadias_fin_huesped(nombre_hostal, email_huesped)
        self.escribir("\n", GREEN, "| Lista de estadias finalizadas |", NC, "\n")
        for estadia in estadias.values():
            self.escribir(estadia)
        return estadias

    def listar_comentarios_sin_responder(self, email_empleado: str) -> dict[int, DTReview]:
        reviews = self.controlador.listar_comentarios_sin_responder(email_empleado)
        self.escribir("\n", GREEN, "| Lista de comentarios sin responder |", NC, "\n")
        for review in reviews.values():
            self.escribir(review)
        return reviews

    def _mostrar_reservas(self, reservas: dict[int, DTReserva] | Iterable[DTReserva]) -> None:
        valores = reservas.values() if isinstance(reservas, dict) else reservas
        for reserva in valores:
            self._escribir_sin_salto(reserva)

    def mostrar_reservas_usuario(self, reservas: dict[int, DTReserva] | Iterable[DTReserva]) -> None:
        self.escribir("\n", GREEN, "| Lista de reservas no canceladas |", NC, "\n")
        self._mostrar_reservas(reservas)

    def mostrar_reservas_hostal(
        self, reservas: dict[int, DTReserva] | Iterable[DTReserva], nombre_hostal: str
    ) -> None:
        self.escribir("\n", GREEN, f"| Lista de reservas del hostal: {nombre_hostal} |", NC, "\n")
        self._mostrar_reservas(reservas)

    def mostrar_no_empleados_hostal(self, nombre_hostal: str) -> dict[str, DTEmpleado]:
        empleados = self.controlador.obtener_no_empleados_hostal(nombre_hostal)
        self.escribir(
            "\n", GREEN, f"| Lista de empleados que no son del hostal: {nombre_hostal} |", NC, "\n"
        )
        for empleado in empleados.values():
            self.escribir(f"| {empleado.nombre}|{empleado.email}|\n")
        return empleados

    def mostrar_usuarios(self) -> list[str]:
        emails = self.controlador.obtener_usuarios()
        self.escribir("\n", GREEN, "Lista de usuarios registrados en el sistema: ", NC, "\n")
        for email in emails:
            self.escribir(f"| {email} |")
        return emails

    def mostrar_huespedes(self) -> list[str]:
        emails = self.controlador.obtener_huespedes()
        self.escribir("\n", GREEN, "| Lista de huespedes registrados en el sistema: |", NC, "\n")
        for email in emails:
            self.escribir(f"| {email} |")
        return emails

    def mostrar_huesped_completo(self, email: str) -> None:
        huesped = self.controlador.obtener_huesped_completo(email)
        self.escribir("\n", GREEN, f"Mostrando informacion sobre el huesped con el email: {email}", NC)
        self._escribir_sin_salto(huesped)

    def mostrar_empleado_completo(self, email: str) -> None:
        empleado = self.controlador.obtener_empleado_completo(email)
        self.escribir("\n", GREEN, f"Mostrando informacion sobre el empleado con el email: {email}", NC)
        self._escribir_sin_salto(empleado)

    def mostrar_hostal_completo(self, nombre_hostal: str) -> None:
        hostal = self.controlador.obtener_hostal_completo(nombre_hostal)
        self.escribir("\n", GREEN, f"| Detalles sobre el hostal: {nombre_hostal} |", NC, "\n")
        self._escribir_sin_salto(hostal)