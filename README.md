# hostalcli

An interactive, menu-driven console application for running a small
network of hostels. It keeps, in memory:

- users, either guests (`DTHuesped`) or employees (`DTEmpleado`) with a
  position (`Cargo`: Administracion, Limpieza, Recepcion, Infraestructura);
- hostels (`DTHostal`) and their rooms (`DTHabitacion`);
- individual and group reservations (`DTReserva`, `DTReservaCompleto`),
  whose state (`Estado`: Abierta, Cerrada, Cancelada) follows the system date;
- stays (`DTEstadia`), reviews with a 1–5 rating (`DTReview`) and the
  employees' answers to them;
- a ranking of the three best-rated hostels.

## Running it

Installing the package provides the `hostalcli` command, which starts the
main menu on standard input and output:

```
hostalcli
```

The menu offers eighteen options (register users, hostels and rooms, assign
employees, book, register, finish and rate stays, answer reviews, query
users, hostels and reservations, change the system date, load sample data,
exit). At any prompt, typing `salir` returns to the main menu. The program
ends on option 18 or when input runs out.

Dates are entered as `DD/MM/YYYY - HH`, for example `25/07/2023 - 18`; a
two-digit year (`25/07/23 - 18`) is accepted as well. A checkin may not be
before the system date, and a checkout may not be before its checkin.
Changing the system date (option 16) closes every open reservation whose
checkout is earlier than the new date.

Option 17 loads a fixed set of sample hostels, users, reservations, stays,
reviews and one answer, so the queries have something to show. It can be
loaded once per run; the sample users have addresses at `example.com`.

## Using it from Python

A `Controlador` (`hostalcli.controlador`) holds the data, a `Consola`
(`hostalcli.consola`) reads answers from a text stream and writes the
screens, and a `Menu` (`hostalcli.menu`) dispatches the menu options:

```python
import sys

from hostalcli.consola import Consola
from hostalcli.controlador import Controlador
from hostalcli.menu import Menu

consola = Consola(Controlador(), sys.stdin, sys.stdout)
Menu(consola).run()
```

`Menu.ejecutar_opcion(n)` runs a single option and returns `False` for the
exit option; an unknown option number raises `ValueError`.

The controller can be used on its own to build and query the data:

```python
from hostalcli.controlador import Controlador
from hostalcli.datatypes import DTHabitacion, DTHostal

controlador = Controlador()
controlador.alta_hostal(DTHostal("Mochileros", "Rambla Costanera 333", "000"))
controlador.alta_habitacion(DTHabitacion(1, 40, 2), "Mochileros")
print(controlador.existe_hostal_bool("Mochileros"))
print(controlador.obtener_top_3_hostales())
```

Registering reservations, stays and reviews returns their numeric codes,
which are handed out in sequence. Operations the data does not allow, such
as a hostel name already taken, an unknown guest, a room already booked for
overlapping dates or a rating outside 1–5, raise `ValueError` with a message
explaining why. A reservation's cost is the room price times the number of
nights, counting at least one.

Dates are parsed and shown with `hostalcli.fechas.parse_fecha` and
`format_fecha`.

## What it does not do

- Everything is kept in memory only; nothing is saved between runs.
- Querying stays (option 14) and cancelling reservations (option 15) only
  report that they are not available.
- There is no login: passwords are stored with users but never checked.