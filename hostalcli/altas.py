"""Menu use cases that register users, hostels, rooms, assignments and reservations."""

from __future__ import annotations

import re
from datetime import datetime

from hostalcli.consola import CYAN, GREEN, NC, RED, REDB, Consola
from hostalcli.datatypes import DTEmpleado, DTHabitacion, DTHostal, DTHuesped
from hostalcli.enums import cargo_desde_texto

__all__ = [
    "alta_usuario",
    "alta_hostal",
    "alta_habitacion",
    "asignar_empleado_hostal",
    "realizar_reserva",
]

SALIR = "salir"
PARAR = "parar"
_NOTA_SALIR = "NOTA: Puede ingresar 'salir' en cualquier momento para volver al menu principal."
_CARGOS = ("0", "1", "2", "3")
_PROMPT_CARGO = (
    "Indique el cargo del empleado "
    "(0 = Administracion | 1 = Limpieza | 2 = Recepcion | 3 = Infraestructura): "
)
_SIN_HOSTALES = "No hay hostales registrados en el sistema."
_SIN_HABITACIONES = (
    "Este hostal no tiene habitaciones ingresadas, intente con otro "
    "o ingrese habitaciones a dicho hostal."
)
_EJEMPLO_FECHA = f"{RED}'25/07/2023 - 18'{NC}: "

_ENTERO = re.compile(r"\s*[+-]?\d+")
_REAL = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def _entero(texto: str) -> int:
    """Integer the text starts with; ValueError when there is none."""
    match = _ENTERO.match(texto)
    if match is None:
        raise ValueError(f"'{texto}' no es un numero entero")
    return int(match.group())


def _real(texto: str) -> float:
    """Real number the text starts with; ValueError when there is none."""
    match = _REAL.match(texto)
    if match is None:
        raise ValueError(f"'{texto}' no es un numero")
    return float(match.group())


def _error(consola: Consola, mensaje: str) -> None:
    consola.escribir("\n", REDB, mensaje, NC)


def _nota(consola: Consola) -> None:
    consola.escribir(CYAN, _NOTA_SALIR, NC)


def alta_usuario(consola: Consola) -> None:
    """Register a guest or an employee."""
    controlador = consola.controlador
    _nota(consola)

    nombre = consola.leer_linea("\nIngrese el nombre: ")
    if nombre == SALIR:
        return

    while True:
        email = consola.leer_linea("\nIngrese el email: ")
        if email == SALIR:
            return
        if not controlador.verificar_email(email):
            break
        _error(consola, "Ya existe un usuario registrado con ese email. Intenta de nuevo... ")

    contrasena = consola.leer_linea("\nIngrese la contraseña: ")
    if contrasena == SALIR:
        return

    while True:
        tipo = consola.leer_linea(
            "\nIngrese el tipo de usuario que quiere registrar (0 = Huesped | 1 = Empleado): "
        )
        if tipo == SALIR:
            return
        if tipo in ("0", "1"):
            break
        _error(consola, "Debes ingresar un tipo válido.")

    if tipo == "0":
        while True:
            entrada = consola.leer_linea("\n¿El Huesped es Tecno? (0 = No | 1 = Si): ")
            if entrada == SALIR:
                return
            if entrada in ("0", "1"):
                break
        controlador.alta_huesped(DTHuesped(nombre, email, contrasena, entrada == "1"))
        consola.escribir("\n", GREEN, "Huesped ingresado correctamente!", NC)
    else:
        while True:
            entrada = consola.leer_linea(f"\n{_PROMPT_CARGO}")
            if entrada == SALIR:
                return
            if entrada in _CARGOS:
                break
            _error(consola, "Debes ingresar un cargo válido.")
        cargo = cargo_desde_texto(entrada)
        controlador.alta_empleado(DTEmpleado(nombre, email, contrasena, cargo))
        consola.escribir("\n", GREEN, "Empleado ingresado correctamente!", NC)


def alta_hostal(consola: Consola) -> None:
    """Register a new hostel."""
    controlador = consola.controlador
    _nota(consola)

    nombre = consola.leer_linea("Ingrese el nombre del hostal: \n")
    if nombre == SALIR:
        return

    try:
        controlador.existe_hostal(nombre)

        direccion = consola.leer_linea("Ingrese la direccion del hostal: \n")
        if direccion == SALIR:
            return
        telefono = consola.leer_linea("Ingrese el telefono del hostal: \n")
        if telefono == SALIR:
            return

        controlador.alta_hostal(DTHostal(nombre, direccion, telefono))
        consola.escribir("Hostal ingresado correctamente!")
    except ValueError as error:
        _error(consola, f"ERROR: {error}")


def alta_habitacion(consola: Consola) -> None:
    """Add a room to an existing hostel."""
    controlador = consola.controlador
    if not consola.mostrar_hostales():
        _error(consola, _SIN_HOSTALES)
        return

    _nota(consola)
    nombre_hostal = consola.leer_linea(
        "Ingrese el nombre del hostal al que pertenece la habitacion: \n"
    )
    if nombre_hostal == SALIR:
        return

    try:
        controlador.no_existe_hostal(nombre_hostal)

        texto = consola.leer_linea("Ingrese el numero de la habitacion: \n")
        if texto == SALIR:
            return
        numero = _entero(texto)

        texto = consola.leer_linea("Ingrese el precio de la habitacion: \n")
        if texto == SALIR:
            return
        precio = _real(texto)

        texto = consola.leer_linea("Ingrese la capacidad de la habitacion: \n")
        if texto == SALIR:
            return
        capacidad = _entero(texto)

        controlador.alta_habitacion(DTHabitacion(numero, precio, capacidad), nombre_hostal)
        consola.escribir("\n", GREEN, "HABITACIÓN INGRESADA CON ÉXITO! ", NC)
    except ValueError as error:
        _error(consola, f"ERROR: {error}")


def asignar_empleado_hostal(consola: Consola) -> None:
    """Assign an employee to a hostel with a position."""
    controlador = consola.controlador
    if not consola.mostrar_hostales():
        _error(consola, _SIN_HOSTALES)
        return

    _nota(consola)
    nombre_hostal = consola.leer_linea(
        "Ingrese el nombre del hostal al que sera asignado el empleado: \n"
    )
    if nombre_hostal == SALIR:
        return
    try:
        controlador.no_existe_hostal(nombre_hostal)
    except ValueError as error:
        _error(consola, f"ERROR: {error}")
        return

    candidatos = consola.mostrar_no_empleados_hostal(nombre_hostal)
    if not candidatos:
        _error(consola, "No hay ningún empleado para asignar al hostal.")
        return

    while True:
        email_empleado = consola.leer_linea(
            "\nIngresa el nombre del empleado que deseas asignar al hostal: "
        )
        if email_empleado == SALIR:
            return
        if email_empleado in candidatos:
            break
        _error(consola, "Error: Debes ingresar un mail que forme parte de la lista de empleados.")

    while True:
        entrada = consola.leer_linea(f"\n{RED}{_PROMPT_CARGO}{NC}\n")
        if entrada == SALIR:
            return
        if entrada in _CARGOS:
            break

    controlador.asignar_empleado_hostal(nombre_hostal, email_empleado, cargo_desde_texto(entrada))
    consola.escribir(
        "\n",
        GREEN,
        f"El empleado con el email {email_empleado} fue asignado al hostal {nombre_hostal}",
        NC,
    )


def _leer_checkin(consola: Consola) -> datetime:
    while True:
        texto = consola.leer_linea(
            f"Ingrese la fecha y hora del checkin con el siguiente formato de ejemplo {_EJEMPLO_FECHA}"
        )
        fecha = consola.verificar_fecha_checkin(texto)
        if fecha is not None:
            return fecha


def _leer_checkout(consola: Consola, checkin: datetime) -> datetime:
    while True:
        texto = consola.leer_linea(
            f"Ingrese la fecha y hora del checkout con el siguiente formato de ejemplo {_EJEMPLO_FECHA}"
        )
        fecha = consola.verificar_fecha_checkout(texto, checkin)
        if fecha is not None:
            return fecha


def _elegir_habitacion(consola: Consola, habitaciones: dict[int, DTHabitacion]) -> int:
    for habitacion in habitaciones.values():
        consola.escribir(habitacion)
    while True:
        numero = _entero(consola.leer_linea("Ingrese el numero de la habitacion deseada: "))
        if numero in habitaciones:
            return numero


def _reserva_individual(
    consola: Consola, nombre_hostal: str, checkin: datetime, checkout: datetime
) -> None:
    controlador = consola.controlador
    habitaciones = controlador.obtener_habitaciones_individuales(nombre_hostal, checkin, checkout)
    if not habitaciones:
        consola.escribir(RED, _SIN_HABITACIONES, NC)
        return
    consola.escribir(
        "\n",
        GREEN,
        f"Mostrando informacion sobre las habitaciones individuales del hostal: {nombre_hostal}",
        NC,
    )
    numero = _elegir_habitacion(consola, habitaciones)

    while True:
        consola.mostrar_huespedes()
        email_huesped = consola.leer_linea("Ingrese huesped que realiza la reserva:\n")
        if controlador.validar_email_huesped(email_huesped):
            break
        _error(consola, "No existe un huésped registrado con ese email. Intenta de nuevo... ")

    controlador.alta_reserva_individual(nombre_hostal, numero, email_huesped, checkin, checkout)
    consola.escribir(GREEN, "Reserva Individual realizada correctamente", NC)


def _reserva_grupal(
    consola: Consola, nombre_hostal: str, checkin: datetime, checkout: datetime
) -> None:
    controlador = consola.controlador
    habitaciones = controlador.obtener_habitaciones_grupales(nombre_hostal, checkin, checkout)
    if not habitaciones:
        consola.escribir(RED, _SIN_HABITACIONES, NC)
        return
    consola.escribir(
        "\n",
        GREEN,
        f"Mostrando informacion sobre las habitaciones grupales del hostal: {nombre_hostal}",
        NC,
        "\n",
    )
    numero = _elegir_habitacion(consola, habitaciones)

    disponibles = list(controlador.obtener_huespedes())
    if not disponibles:
        _error(
            consola,
            "No existen huespedes registrados para poder agregar a la reserva, intente de nuevo!",
        )
        return

    capacidad = controlador.obtener_capacidad_habitacion(numero, nombre_hostal)
    seleccionados: list[str] = []
    while len(seleccionados) < capacidad:
        if disponibles:
            consola.escribir(
                "\n", GREEN, "| Lista de huespedes registrados en el sistema: |", NC, "\n"
            )
            for email in disponibles:
                consola.escribir(f"| {email} |")
            email_huesped = consola.leer_linea(
                "Ingrese un huesped o ingrese 'parar' para dejar de ingresar huespedes:\n"
            )
        else:
            consola.escribir(
                "\n",
                GREEN,
                "| Todos los huespedes disponibles fueron registrados en la reserva! |",
                NC,
                "\n",
            )
            email_huesped = PARAR

        if email_huesped == PARAR:
            if seleccionados:
                break
            consola.escribir(RED, "Debe ingresar al menos un huesped, intente denuevo.", NC)
            consola.press_enter()
            continue
        if email_huesped not in disponibles:
            _error(consola, "No existe un huésped registrado con ese email. Intenta de nuevo... ")
            continue

        seleccionados.append(email_huesped)
        disponibles.remove(email_huesped)
        consola.escribir(
            "\n",
            CYAN,
            f"Huesped con el mail: {email_huesped} ingresado a la reserva correctamente",
            NC,
        )

    controlador.alta_reserva_grupal(nombre_hostal, numero, seleccionados, checkin, checkout)
    consola.escribir(GREEN, "Reserva Grupal realizada correctamente", NC)


def realizar_reserva(consola: Consola) -> None:
    """Book a room for one guest or for a group of guests."""
    controlador = consola.controlador
    if not consola.mostrar_hostales_con_promedio():
        _error(consola, _SIN_HOSTALES)
        return

    _nota(consola)
    nombre_hostal = consola.leer_linea(
        "Ingrese el nombre del hostal en el cual desea realizar la reserva: \n"
    )
    if nombre_hostal == SALIR:
        return

    try:
        controlador.no_existe_hostal(nombre_hostal)
        checkin = _leer_checkin(consola)
        checkout = _leer_checkout(consola, checkin)

        while True:
            tipo = consola.leer_linea("Ingrese el tipo de reserva 0 = Individual 1 = Grupal: \n")
            if tipo in ("0", "1"):
                break

        if tipo == "0":
            _reserva_individual(consola, nombre_hostal, checkin, checkout)
        else:
            _reserva_grupal(consola, nombre_hostal, checkin, checkout)
    except ValueError as error:
        _error(consola, f"ERROR: {error}")