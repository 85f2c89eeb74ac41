from datetime import datetime

import pytest

from hostalcli.controlador import Controlador, TipoUsuario
from hostalcli.datatypes import DTEmpleado, DTHabitacion, DTHostal, DTHuesped
from hostalcli.enums import Cargo, ComparacionFecha, Estado

HOY = datetime(2022, 1, 1, 12)


def huesped(nombre, email):
    return DTHuesped(nombre, email, contrasena="password", es_tecno=False)


def empleado(nombre, email):
    return DTEmpleado(nombre, email, contrasena="password", cargo=Cargo.Recepcion)


@pytest.fixture
def ctrl():
    c = Controlador(HOY)
    c.alta_huesped(huesped("Sofia", "sofia@example.com"))
    c.alta_huesped(huesped("Frodo", "frodo@example.com"))
    c.alta_empleado(empleado("Emilia", "emilia@example.com"))
    c.alta_hostal(DTHostal("Mochileros", "Rambla 1", "000"))
    c.alta_habitacion(DTHabitacion(1, 40.0, 2), "Mochileros")
    c.alta_habitacion(DTHabitacion(2, 10.0, 1), "Mochileros")
    return c


def test_duplicate_email_rejected(ctrl):
    with pytest.raises(ValueError):
        ctrl.alta_empleado(empleado("Otro", "sofia@example.com"))
    assert ctrl.verificar_email("sofia@example.com")
    assert not ctrl.verificar_email("nadie@example.com")


def test_user_kinds(ctrl):
    assert ctrl.verificar_email_y_tipo("sofia@example.com") is TipoUsuario.Huesped
    assert ctrl.verificar_email_y_tipo("emilia@example.com") is TipoUsuario.Empleado
    assert ctrl.verificar_email_y_tipo("nadie@example.com") is None
    assert ctrl.obtener_usuarios() == sorted(
        ["sofia@example.com", "frodo@example.com", "emilia@example.com"]
    )


def test_hostel_existence_checks(ctrl):
    with pytest.raises(ValueError):
        ctrl.existe_hostal("Mochileros")
    with pytest.raises(ValueError):
        ctrl.no_existe_hostal("Ninguno")
    assert ctrl.existe_hostal_bool("Mochileros")
    assert not ctrl.existe_hostal_bool("Ninguno")


def test_rooms(ctrl):
    with pytest.raises(ValueError):
        ctrl.alta_habitacion(DTHabitacion(1, 5.0, 3), "Mochileros")
    assert ctrl.obtener_capacidad_habitacion(1, "Mochileros") == 2
    with pytest.raises(ValueError):
        ctrl.alta_habitacion(DTHabitacion(1, 5.0, 3), "Ninguno")


def test_assign_employee(ctrl):
    assert "emilia@example.com" in ctrl.obtener_no_empleados_hostal("Mochileros")
    ctrl.asignar_empleado_hostal("Mochileros", "emilia@example.com", Cargo.Limpieza)
    emp = ctrl.obtener_empleado_completo("emilia@example.com")
    assert emp.nombre_hostal == "Mochileros"
    assert emp.cargo is Cargo.Limpieza
    assert ctrl.obtener_no_empleados_hostal("Mochileros") == {}


def test_reservation_codes_and_availability(ctrl):
    entrada, salida = datetime(2022, 5, 1, 14), datetime(2022, 5, 10, 10)
    assert ctrl.alta_reserva_individual("Mochileros", 1, "sofia@example.com", entrada, salida) == 1
    libres = ctrl.obtener_habitaciones_individuales("Mochileros", entrada, salida)
    assert list(libres) == [2]
    with pytest.raises(ValueError):
        ctrl.alta_reserva_individual("Mochileros", 1, "frodo@example.com", entrada, salida)
    otra = datetime(2022, 6, 1, 14), datetime(2022, 6, 2, 10)
    assert ctrl.alta_reserva_individual("Mochileros", 1, "frodo@example.com", *otra) == 2


def test_group_rooms_and_capacity(ctrl):
    entrada, salida = datetime(2022, 5, 1, 14), datetime(2022, 5, 3, 10)
    assert list(ctrl.obtener_habitaciones_grupales("Mochileros", entrada, salida)) == [1]
    with pytest.raises(ValueError):
        ctrl.alta_reserva_grupal(
            "Mochileros", 2, ["sofia@example.com", "frodo@example.com"], entrada, salida
        )
    codigo = ctrl.alta_reserva_grupal(
        "Mochileros", 1, ["sofia@example.com", "frodo@example.com"], entrada, salida
    )
    completas = ctrl.obtener_reservas_completas_hostal("Mochileros")
    assert completas[0].codigo == codigo
    assert completas[0].huespedes == ("Frodo", "Sofia")


def test_unknown_guest_rejected(ctrl):
    with pytest.raises(ValueError):
        ctrl.alta_reserva_individual(
            "Mochileros", 1, "nadie@example.com", datetime(2022, 5, 1), datetime(2022, 5, 2)
        )


def test_longer_stay_costs_more(ctrl):
    ctrl.alta_reserva_individual("Mochileros", 1, "sofia@example.com", datetime(2022, 5, 1), datetime(2022, 5, 2))
    ctrl.alta_reserva_individual("Mochileros", 2, "sofia@example.com", datetime(2022, 5, 1), datetime(2022, 5, 2))
    ctrl.alta_reserva_individual("Mochileros", 1, "frodo@example.com", datetime(2022, 6, 1), datetime(2022, 6, 9))
    costos = [r.costo for r in ctrl.obtener_reservas_completas_hostal("Mochileros")]
    assert costos[2] > costos[0] > costos[1]


def test_stay_flow(ctrl):
    codigo = ctrl.alta_reserva_individual(
        "Mochileros", 1, "sofia@example.com", datetime(2022, 5, 1, 14), datetime(2022, 5, 10, 10)
    )
    assert list(ctrl.obtener_reserva_usuario("Mochileros", "sofia@example.com")) == [codigo]
    estadia = ctrl.alta_estadia(codigo, "sofia@example.com", datetime(2022, 5, 1, 18))
    assert ctrl.contar_estadias_activas("sofia@example.com") == 1
    assert ctrl.existe_estadia("Mochileros", "sofia@example.com") == estadia
    with pytest.raises(ValueError):
        ctrl.alta_estadia(codigo, "frodo@example.com")
    ctrl.finalizar_estadia(estadia, "sofia@example.com", datetime(2022, 5, 10, 9))
    assert ctrl.contar_estadias_activas("sofia@example.com", "Mochileros") == 0
    with pytest.raises(ValueError):
        ctrl.existe_estadia("Mochileros", "sofia@example.com")
    fin = ctrl.obtener_estadias_fin_huesped("Mochileros", "sofia@example.com")
    assert fin[estadia].checkout == datetime(2022, 5, 10, 9)


def _estadia_finalizada(ctrl):
    codigo = ctrl.alta_reserva_individual(
        "Mochileros", 1, "sofia@example.com", datetime(2022, 5, 1), datetime(2022, 5, 3)
    )
    estadia = ctrl.alta_estadia(codigo, "sofia@example.com")
    ctrl.finalizar_estadia(estadia, "sofia@example.com")
    return estadia


def test_reviews_and_answers(ctrl):
    estadia = _estadia_finalizada(ctrl)
    with pytest.raises(ValueError):
        ctrl.calificar_estadia("Mochileros", estadia, "malo", 6, "sofia@example.com")
    review = ctrl.calificar_estadia("Mochileros", estadia, "malo", 2, "sofia@example.com")
    assert ctrl.obtener_estadias_fin_huesped("Mochileros", "sofia@example.com") == {}
    ctrl.asignar_empleado_hostal("Mochileros", "emilia@example.com", Cargo.Recepcion)
    pendientes = ctrl.listar_comentarios_sin_responder("emilia@example.com")
    assert pendientes[review].comentario == "malo"
    ctrl.alta_respuesta(review, "emilia@example.com", "Lo sentimos")
    assert ctrl.listar_comentarios_sin_responder("emilia@example.com") == {}
    with pytest.raises(ValueError):
        ctrl.alta_respuesta(review, "emilia@example.com", "Otra vez")
    completo = ctrl.obtener_hostal_completo("Mochileros")
    assert completo.promedio == 2
    assert list(completo.reviews) == [review]
    assert list(completo.habitaciones) == [1, 2]


def test_active_stay_cannot_be_rated(ctrl):
    codigo = ctrl.alta_reserva_individual(
        "Mochileros", 1, "sofia@example.com", datetime(2022, 5, 1), datetime(2022, 5, 3)
    )
    estadia = ctrl.alta_estadia(codigo, "sofia@example.com")
    with pytest.raises(ValueError):
        ctrl.calificar_estadia("Mochileros", estadia, "bien", 4, "sofia@example.com")


def test_top_3_is_sorted_by_rating(ctrl):
    for nombre in ("A", "B", "C"):
        ctrl.alta_hostal(DTHostal(nombre, "dir", "000"))
        ctrl.alta_habitacion(DTHabitacion(1, 1.0, 1), nombre)
    for nota, nombre in zip((1, 5, 3), ("A", "B", "C")):
        codigo = ctrl.alta_reserva_individual(
            nombre, 1, "frodo@example.com", datetime(2022, 5, 1), datetime(2022, 5, 2)
        )
        estadia = ctrl.alta_estadia(codigo, "frodo@example.com")
        ctrl.finalizar_estadia(estadia, "frodo@example.com")
        ctrl.calificar_estadia(nombre, estadia, "c", nota, "frodo@example.com")
    top = ctrl.obtener_top_3_hostales()
    assert [h.nombre for h in top] == ["B", "C", "A"]


def test_date_comparison(ctrl):
    assert ctrl.comparar_fechas(datetime(2021, 1, 1)) is ComparacionFecha.Menor
    assert ctrl.comparar_fechas(HOY) is ComparacionFecha.Igual
    assert ctrl.comparar_fechas_generico(datetime(2023, 1, 1), HOY) is ComparacionFecha.Mayor


def test_past_reservations_get_closed(ctrl):
    ctrl.alta_reserva_individual(
        "Mochileros", 1, "sofia@example.com", datetime(2022, 5, 1), datetime(2022, 5, 3)
    )
    assert ctrl.obtener_reservas_hostal("Mochileros")[1].estado is Estado.Abierta
    ctrl.fecha_sistema = datetime(2022, 6, 1)
    ctrl.actualizar_estado_reservas()
    assert ctrl.obtener_reservas_hostal("Mochileros")[1].estado is Estado.Cerrada