from datetime import datetime

import pytest

from hostalcli.datatypes import DTHabitacion
from hostalcli.enums import Estado
from hostalcli.fechas import format_fecha
from hostalcli.registros import (
    DTEstadia,
    DTHostalCompleto,
    DTReserva,
    DTReservaCompleto,
    DTReview,
)

CHECKIN = datetime(2022, 5, 1, 14)
CHECKOUT = datetime(2022, 5, 10, 10)


def test_reserva_str_lines():
    reserva = DTReserva(1, CHECKIN, CHECKOUT, Estado.Cerrada)
    lineas = str(reserva).split("\n")
    assert lineas[0] == "| Codigo: 1 |"
    assert lineas[1] == f"| Chekin: {format_fecha(CHECKIN)} |"
    assert lineas[2] == f"| Checkout: {format_fecha(CHECKOUT)} |"
    assert lineas[3] == "| Estado: Cerrada |"
    assert str(reserva).endswith("\n\n")


@pytest.mark.parametrize(
    "estado, texto",
    [(Estado.Abierta, "Abierto"), (Estado.Cerrada, "Cerrada"), (Estado.Cancelada, "Cancelada")],
)
def test_reserva_estado_text(estado, texto):
    reserva = DTReserva(3, CHECKIN, CHECKOUT, estado)
    assert f"| Estado: {texto} |" in str(reserva)


def test_reserva_is_immutable():
    reserva = DTReserva(1, CHECKIN, CHECKOUT, Estado.Abierta)
    with pytest.raises(AttributeError):
        reserva.codigo = 2
    assert reserva.codigo == 1


def test_reserva_completo_orders_guests():
    reserva = DTReservaCompleto(
        2, 1, CHECKIN, CHECKOUT, Estado.Abierta,
        ("c@example.com", "a@example.com", "b@example.com", "a@example.com"), 9.0,
    )
    assert reserva.huespedes == ("a@example.com", "b@example.com", "c@example.com")
    assert reserva.numero_habitacion == 1
    assert reserva.costo == 9.0


def test_review_str():
    review = DTReview(2, datetime(2001, 1, 5, 3), 2, "Se pone peligroso de noche")
    assert str(review) == (
        "| Codigo: 2 |\n"
        f"| Fecha: {format_fecha(datetime(2001, 1, 5, 3))} |\n"
        "| Comentario: Se pone peligroso de noche |\n"
        "| Calificacion: 2 |\n\n"
    )


def test_estadia_default_promo_and_str():
    estadia = DTEstadia(1, CHECKIN, CHECKOUT, "sofia@example.com")
    assert estadia.promo == " "
    texto = str(estadia)
    assert "| Huesped: sofia@example.com |\n" in texto
    assert texto.endswith("| Promo:   |\n")
    assert texto.startswith("| Codigo: 1 |\n")


def test_estadia_checkout_can_be_updated():
    estadia = DTEstadia(1, CHECKIN, CHECKIN, "sofia@example.com")
    estadia.checkout = CHECKOUT
    assert f"| Checkout: {format_fecha(CHECKOUT)} |" in str(estadia)


def test_hostal_completo_orders_by_key():
    reviews = [
        DTReview(6, CHECKIN, 1, "pulgas"),
        DTReview(1, CHECKIN, 3, "caro"),
    ]
    habitaciones = [DTHabitacion(4, 5, 12), DTHabitacion(1, 40, 2), DTHabitacion(3, 30, 3)]
    hostal = DTHostalCompleto("Mochileros", "Rambla", "42579512", 2.0, reviews, habitaciones)
    assert list(hostal.reviews) == [1, 6]
    assert list(hostal.habitaciones) == [1, 3, 4]
    assert hostal.habitaciones[4].capacidad == 12


def test_hostal_completo_accepts_mappings():
    review = DTReview(5, CHECKIN, 4, "bien")
    hostal = DTHostalCompleto("H", "D", "T", reviews={99: review})
    assert hostal.reviews == {5: review}


def test_hostal_completo_empty_str():
    hostal = DTHostalCompleto("El Pony Pisador", "Bree", "000")
    texto = str(hostal)
    assert texto.startswith("Nombre: El Pony Pisador\nDireccion: Bree\nTelefono: 000\n")
    assert "\nReviews: Aún no tiene reviews\n" in texto
    assert texto.endswith("\nHabitaciones: Aún no tiene habitaciones\n")


def test_hostal_completo_lists_contents():
    review = DTReview(1, CHECKIN, 3, "caro")
    habitacion = DTHabitacion(1, 40, 2)
    hostal = DTHostalCompleto("H", "D", "T", 3.0, [review], [habitacion])
    texto = str(hostal)
    assert "Lista de reviews: " in texto
    assert str(review) in texto
    assert "Lista de habitaciones: " in texto
    assert str(habitacion) in texto
    assert "Aún no tiene" not in texto
    assert texto.index("Lista de reviews") < texto.index("Lista de habitaciones")