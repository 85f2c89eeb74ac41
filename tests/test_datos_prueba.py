import io
from datetime import datetime

import pytest

from hostalcli.consola import Consola
from hostalcli.controlador import Controlador
from hostalcli.datos_prueba import CargadorDatosPrueba
from hostalcli.enums import Estado


@pytest.fixture
def cargado():
    controlador = Controlador(fecha_sistema=datetime(2023, 7, 25, 18))
    salida = io.StringIO()
    consola = Consola(controlador, io.StringIO(), salida)
    cargador = CargadorDatosPrueba(controlador)
    resultado = cargador.cargar(consola)
    return controlador, consola, cargador, salida, resultado


def test_first_load_succeeds(cargado):
    _, _, _, salida, resultado = cargado
    assert resultado is True
    assert "Datos de prueba cargados correctamente!" in salida.getvalue()


def test_second_load_is_refused(cargado):
    controlador, consola, cargador, salida, _ = cargado
    assert cargador.cargar(consola) is False
    assert "ya han sido cargados" in salida.getvalue()
    assert len(controlador.obtener_hostales()) == len(
        {h.nombre for h in controlador.obtener_hostales()}
    )


def test_hostels_loaded(cargado):
    controlador = cargado[0]
    nombres = {h.nombre for h in controlador.obtener_hostales()}
    assert nombres == {
        "La posada del finger",
        "Mochileros",
        "El Pony Pisador",
        "Altos del Fing",
        "Caverna Lujosa",
    }


def test_users_loaded(cargado):
    controlador = cargado[0]
    assert len(controlador.obtener_huespedes()) == 6
    assert len(controlador.obtener_empleados()) == 4


def test_top_three_follows_ratings(cargado):
    controlador = cargado[0]
    top = [h.nombre for h in controlador.obtener_top_3_hostales()]
    assert top == ["La posada del finger", "El Pony Pisador", "Caverna Lujosa"]


def test_employee_assignment(cargado):
    controlador = cargado[0]
    assert controlador.obtener_empleado_completo("leonardo@example.com").nombre_hostal == "Mochileros"
    assert controlador.obtener_empleado_completo("barliman@example.com").nombre_hostal == "El Pony Pisador"


def test_group_reservation_guests(cargado):
    controlador = cargado[0]
    reservas = controlador.obtener_reservas_completas_hostal("El Pony Pisador")
    assert len(reservas) == 1
    assert set(reservas[0].huespedes) == {"Frodo", "Sam", "Merry", "Pippin"}


def test_reservations_closed_after_load(cargado):
    controlador = cargado[0]
    for nombre in ("La posada del finger", "El Pony Pisador", "Caverna Lujosa"):
        for reserva in controlador.obtener_reservas_completas_hostal(nombre):
            assert reserva.estado is Estado.Cerrada


def test_no_active_stays(cargado):
    controlador = cargado[0]
    for email in controlador.obtener_huespedes():
        assert controlador.contar_estadias_activas(email) == 0


def test_answered_review_not_listed(cargado):
    controlador = cargado[0]
    assert controlador.listar_comentarios_sin_responder("barliman@example.com") == {}
    pendientes = controlador.listar_comentarios_sin_responder("emilia@example.com")
    assert [r.calificacion for r in pendientes.values()] == [3]


def test_unrated_finished_stays(cargado):
    controlador = cargado[0]
    assert controlador.obtener_estadias_fin_huesped("El Pony Pisador", "frodo@example.com") == {}
    assert len(controlador.obtener_estadias_fin_huesped("El Pony Pisador", "sam@example.com")) == 1