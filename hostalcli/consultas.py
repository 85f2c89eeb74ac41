"""Menu use cases for stays, ratings, queries and the system date."""

from __future__ import annotations

import re

from hostalcli.consola import CYAN, GREEN, NC, RED, REDB, Consola
from hostalcli.controlador import TipoUsuario
from hostalcli.enums import estado_reserva_texto
from hostalcli.fechas import format_fecha

__all__ = [
    "consultar_top_3",
    "registrar_estadia",
    "finalizar_estadia",
    "calificar_estadia",
    "comentar_calificacion",
    "consulta_usuario",
    "consulta_hostal",
    "consulta_reserva",
    "consulta_estadia",
    "baja_reserva",
    "modificar_fecha",
]

SALIR = "salir"
_NOTA_SALIR = "NOTA: Puede ingresar 'salir' en cualquier momento para volver al menu principal."
_SIN_HOSTALES = "No hay hostales registrados en el sistema."
_HUESPED_INEXISTENTE = "No existe un huésped registrado con ese email. Intenta de nuevo... "

_ENTERO = re.compile(r"\s*[+-]?\d+")


def _entero(texto: str) -> int:
    """Integer the text starts with; ValueError when there is none."""
    match = _ENTERO.match(texto)
    if match is None:
        raise ValueError(f"'{texto}' no es un numero entero")
    return int(match.group())


def _error(consola: Consola, mensaje: str) -> None:
    consola.escribir("\n", REDB, mensaje, NC)


def _nota(consola: Consola, prefijo: str = "") -> None:
    consola.escribir(prefijo, CYAN, _NOTA_SALIR, NC)


def consultar_top_3(consola: Consola) -> None:
    """Show the three hostels with the best average rating."""
    top = consola.controlador.obtener_top_3_hostales()
    if not top:
        consola.escribir(REDB, "No hay hoteles registrados en el sistema!", NC)
        return
    consola.escribir(GREEN, "Mostrando el top 3 de hostales", NC, "\n")
    for puesto, hostal in enumerate(top, start=1):
        consola.escribir(GREEN, f"|posicion: {puesto} |", NC)
        consola.escribir(f"|nombre: {hostal.nombre} |")
        consola.escribir(f"|promedio: {hostal.promedio:g} |\n")


def registrar_estadia(consola: Consola) -> None:
    """Register the stay of a guest for one of their reservations."""
    controlador = consola.controlador
    if not consola.mostrar_hostales():
        _error(consola, _SIN_HOSTALES)
        return

    _nota(consola)

    while True:
        nombre_hostal = consola.leer_linea(
            "\nIngrese el nombre del hostal al que pertenece la habitacion: \n"
        )
        if nombre_hostal == SALIR:
            return
        if controlador.existe_hostal_bool(nombre_hostal):
            break
        _error(consola, "El nombre de hostal que ingresaste no existe. Intenta de nuevo...")

    while True:
        email_huesped = consola.leer_linea(
            "\nIngrese el email del huesped que hizo la reserva para registrar la estadia: \n"
        )
        if email_huesped == SALIR:
            return
        if controlador.validar_email_huesped(email_huesped):
            break
        _error(consola, _HUESPED_INEXISTENTE)

    if controlador.contar_estadias_activas(email_huesped) != 0:
        consola.escribir(
            RED,
            "Este huesped ya tiene una estadia activa, en caso de querer registrar otra, finalicela.",
            NC,
        )
        return

    reservas = controlador.obtener_reserva_usuario(nombre_hostal, email_huesped)
    if not reservas:
        consola.escribir(REDB, "No hay reservas para el huesped seleccionado", NC)
        return
    consola.mostrar_reservas_usuario(reservas)

    while True:
        texto = consola.leer_linea(
            "\nIngrese el numero de la reserva de la que se quiere registrar la estadia: "
        )
        if texto == SALIR:
            return
        try:
            codigo_reserva = _entero(texto)
        except ValueError:
            _error(consola, "Error: No has ingresado un número entero.")
            continue
        if codigo_reserva in reservas:
            break
        _error(consola, "Error: Debes ingresar un código que forme parte de la lista de reservas.")

    try:
        controlador.alta_estadia(codigo_reserva, email_huesped)
    except ValueError as error:
        _error(consola, f"ERROR: {error}")
        return
    consola.escribir("\n", GREEN, "ESTADIA REGISTRADA CON EXITO! ", NC)


def finalizar_estadia(consola: Consola) -> None:
    """Finish the active stay of a guest at a hostel."""
    controlador = consola.controlador
    if not consola.mostrar_hostales():
        _error(consola, _SIN_HOSTALES)
        return

    _nota(consola)
    nombre_hostal = consola.leer_linea(
        "Ingrese el nombre del hostal al que está asignada la estadía: \n"
    )
    if nombre_hostal == SALIR:
        return

    try:
        controlador.no_existe_hostal(nombre_hostal)
        while True:
            email_huesped = consola.leer_linea(
                "Ingrese el email del huesped para finalizar la estadía activa: \n"
            )
            if email_huesped == SALIR:
                return
            if controlador.validar_email_huesped(email_huesped):
                break
            _error(consola, _HUESPED_INEXISTENTE)

        if controlador.contar_estadias_activas(email_huesped, nombre_hostal) == 0:
            consola.escribir(
                RED, "Este huesped no tiene ninguna estadia activa en este hostal.", NC
            )
            return

        codigo = controlador.existe_estadia(nombre_hostal, email_huesped)
        controlador.finalizar_estadia(codigo, email_huesped)
    except ValueError as error:
        _error(consola, f"ERROR: {error}")
        return
    consola.escribir("\n", GREEN, "ESTADIA FINALIZADA CON EXITO! ", NC)


def calificar_estadia(consola: Consola) -> None:
    """Rate a finished stay of a guest."""
    controlador = consola.controlador
    if not consola.mostrar_hostales():
        _error(consola, _SIN_HOSTALES)
        return

    _nota(consola)
    nombre_hostal = consola.leer_linea(
        "Ingrese el nombre del hostal al que está asignada la estadía: \n"
    )
    if nombre_hostal == SALIR:
        return

    try:
        controlador.no_existe_hostal(nombre_hostal)
        while True:
            email_huesped = consola.leer_linea(
                "Ingrese el nombre del huesped al que está asignada la estadía: \n"
            )
            if email_huesped == SALIR:
                return
            if controlador.validar_email_huesped(email_huesped):
                break

        estadias = consola.mostrar_estadias_finalizadas(nombre_hostal, email_huesped)
        if not estadias:
            consola.escribir(
                REDB,
                "Este huesped no tiene estadias finalizadas/registradas para hacer una "
                "calificacion en este hostal",
                NC,
            )
            return

        while True:
            texto = consola.leer_linea("Seleccione la estadia que desea calificar: \n")
            if texto == SALIR:
                return
            codigo_estadia = _entero(texto)
            if codigo_estadia in estadias:
                break

        comentario = consola.leer_linea("Por favor ingrese su opinion\n")
        if comentario == SALIR:
            return

        while True:
            texto = consola.leer_linea("Por favor ingrese una calificacion del 1 al 5\n")
            if texto == SALIR:
                return
            calificacion = _entero(texto)
            if 1 <= calificacion <= 5:
                break

        controlador.calificar_estadia(
            nombre_hostal, codigo_estadia, comentario, calificacion, email_huesped
        )
        consola.escribir("ESTADIA CALIFICADA CON EXITO!")
    except ValueError as error:
        _error(consola, f"ERROR: {error}")


def comentar_calificacion(consola: Consola) -> None:
    """Let an employee answer an unanswered review of their hostel."""
    controlador = consola.controlador
    if not controlador.obtener_empleados():
        _error(
            consola,
            "Para poder comentar una calificación debes registrar empleados en el sistema.",
        )
        return

    _nota(consola)

    while True:
        email_empleado = consola.leer_linea(
            "\nIngresa el email del empleado que va a responder la review: "
        )
        if email_empleado == SALIR:
            return
        if controlador.verificar_email_empleado(email_empleado):
            break
        _error(consola, "No existe un empleado registrado con ese email. Intenta de nuevo... ")

    reviews = consola.listar_comentarios_sin_responder(email_empleado)
    if not reviews:
        _error(consola, "No hay comentarios sin responder para este empleado.")
        return

    while True:
        texto = consola.leer_linea("\nIngrese el codigo de la review a comentar: ")
        if texto == SALIR:
            return
        try:
            codigo_review = _entero(texto)
        except ValueError:
            continue
        if codigo_review in reviews:
            break

    respuesta = consola.leer_linea("\nIngrese la respuesta: ")
    if respuesta == SALIR:
        return

    try:
        controlador.alta_respuesta(codigo_review, email_empleado, respuesta)
        consola.escribir(GREEN, "RESPUESTA INGRESADA CORRECTAMENTE!", NC)
    except ValueError as error:
        _error(consola, f"ERROR: {error}")


def consulta_usuario(consola: Consola) -> None:
    """Show the details of a registered user."""
    if not consola.mostrar_usuarios():
        _error(consola, "No hay usuarios registrados en el sistema.")
        return

    _nota(consola, "\n")

    while True:
        email = consola.leer_linea("\nIngresa el email del usuario que deseas consultar: ")
        if email == SALIR:
            return
        tipo = consola.controlador.verificar_email_y_tipo(email)
        if tipo is TipoUsuario.Huesped:
            consola.mostrar_huesped_completo(email)
            return
        if tipo is TipoUsuario.Empleado:
            consola.mostrar_empleado_completo(email)
            return
        _error(consola, "No existe un usuario con ese email. Intenta de nuevo...")


def consulta_hostal(consola: Consola) -> None:
    """Show a hostel's details followed by its reservations."""
    controlador = consola.controlador
    if not consola.mostrar_hostales():
        _error(consola, _SIN_HOSTALES)
        return

    _nota(consola)
    nombre_hostal = consola.leer_linea(
        "\nIngresa el nombre del hostal que deseas consultar detalles: "
    )
    if nombre_hostal == SALIR:
        return

    try:
        controlador.no_existe_hostal(nombre_hostal)
    except ValueError as error:
        _error(consola, f"ERROR: {error}")
        return

    consola.mostrar_hostal_completo(nombre_hostal)

    reservas = controlador.obtener_reservas_hostal(nombre_hostal)
    if not reservas:
        _error(consola, "No se han realizado reservas para el hostal indicado anteriormente.")
        return
    consola.mostrar_reservas_hostal(reservas, nombre_hostal)


def consulta_reserva(consola: Consola) -> None:
    """Show every reservation of a hostel with its guests and cost."""
    controlador = consola.controlador
    if not consola.mostrar_hostales_con_promedio():
        _error(consola, _SIN_HOSTALES)
        return

    _nota(consola)
    nombre_hostal = consola.leer_linea(
        "\nIngrese el nombre del hostal en el cual desea consultar la reserva: \n"
    )
    if nombre_hostal == SALIR:
        return

    try:
        controlador.no_existe_hostal(nombre_hostal)
        consola.escribir("\n", GREEN, f"Mostrando las reservas del hostal: {nombre_hostal}", NC)
        for reserva in controlador.obtener_reservas_completas_hostal(nombre_hostal):
            consola.escribir(f"|Codigo: {CYAN}{reserva.codigo}{NC} |")
            consola.escribir(f"|Estado: {CYAN}{estado_reserva_texto(reserva.estado)}{NC} |")
            consola.escribir(f"|Numero habitacion: {CYAN}{reserva.numero_habitacion}{NC} |")
            consola.escribir("|Huesped(es): ")
            consola.escribir(f"|Costo: {CYAN}{int(reserva.costo)}{NC}|\n")
            for nombre in reserva.huespedes:
                consola.escribir(f"->{CYAN}{nombre}{NC} |")
            consola.escribir(f"|Checkin: {CYAN}{format_fecha(reserva.checkin)}{NC} |")
            consola.escribir(f"|Checkout: {CYAN}{format_fecha(reserva.checkout)}{NC} |\n\n")
    except ValueError as error:
        _error(consola, f"ERROR: {error}")


def consulta_estadia(consola: Consola) -> None:
    """Report that querying stays is not available."""
    _error(consola, "La consulta de estadías no está disponible.")


def baja_reserva(consola: Consola) -> None:
    """Report that cancelling reservations is not available."""
    _error(consola, "La baja de reservas no está disponible.")


def modificar_fecha(consola: Consola) -> None:
    """Change the system date and close the reservations that ended before it."""
    controlador = consola.controlador
    consola.escribir(
        "Fecha actual del sistema: ", CYAN, format_fecha(controlador.fecha_sistema), NC, "\n"
    )

    while True:
        texto = consola.leer_linea(
            "Ingrese la fecha y hora con el siguiente formato de ejemplo "
            f"{RED}'25/07/2023 - 18'{NC}: "
        )
        fecha = consola.verificar_fecha(texto)
        if fecha is not None:
            break

    controlador.fecha_sistema = fecha
    controlador.actualizar_estado_reservas()

    consola.escribir(
        "\nNueva fecha del sistema: ", CYAN, format_fecha(controlador.fecha_sistema), NC, "\n"
    )