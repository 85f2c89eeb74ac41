"""Main menu loop of the hostel management program."""

from __future__ import annotations

from collections.abc import Callable

from hostalcli import altas, consultas
from hostalcli.consola import CYAN, NC, REDB, Consola
from hostalcli.controlador import Controlador
from hostalcli.datos_prueba import CargadorDatosPrueba

__all__ = ["Menu", "main"]

OPCION_SALIR = 18


class Menu:
    """Dispatches the options of the main menu to their use cases."""

    def __init__(self, consola: Consola) -> None:
        self.consola = consola
        self.cargador = CargadorDatosPrueba(consola.controlador)
        self._acciones: dict[int, Callable[[Consola], object]] = {
            1: altas.alta_usuario,
            2: altas.alta_hostal,
            3: altas.alta_habitacion,
            4: altas.asignar_empleado_hostal,
            5: altas.realizar_reserva,
            6: consultas.consultar_top_3,
            7: consultas.registrar_estadia,
            8: consultas.finalizar_estadia,
            9: consultas.calificar_estadia,
            10: consultas.comentar_calificacion,
            11: consultas.consulta_usuario,
            12: consultas.consulta_hostal,
            13: consultas.consulta_reserva,
            14: consultas.consulta_estadia,
            15: consultas.baja_reserva,
            16: consultas.modificar_fecha,
            17: self.cargador.cargar,
        }

    def ejecutar_opcion(self, opcion: int) -> bool:
        """Run one option; return False when the program should end."""
        if opcion == OPCION_SALIR:
            self.consola.escribir(
                "\n\n", CYAN, "Has terminado la ejecución del programa.", NC, "\n"
            )
            return False
        accion = self._acciones.get(opcion)
        if accion is None:
            raise ValueError(f"Opcion invalida: {opcion}")
        try:
            accion(self.consola)
        except ValueError as error:
            self.consola.escribir("\n", REDB, f"ERROR: {error}", NC)
        self.consola.press_enter()
        return True

    def run(self) -> None:
        """Show the menu and run options until the user exits or input ends."""
        try:
            while self.ejecutar_opcion(self.consola.eleccion_menu_principal()):
                self.consola.limpiar()
        except EOFError:
            return


def main(argv: list[str] | None = None) -> int:
    """Start the interactive menu on standard input and output."""
    Menu(Consola(Controlador())).run()
    return 0