"""Interactive console for a technical-support ticket desk."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence

from ticketdesk.extra import clear_screen, wait_for_key
from ticketdesk.linked_list import LinkedList

_MENU = (
    "========================================",
    "     Sistema de Gestión de Soporte Tecnico",
    "========================================",
    "1) Registrar cliente",
    "2) Asignar prioridad a cliente",
    "3) Mostrar lista de espera",
    "4) Atender al siguiente cliente",
    "5) Mostrar clientes por prioridad",
    "6) Salir",
)

EXIT_OPTION = "6"


@dataclass
class Ticket:
    """A client waiting for support."""

    name: str
    age: int
    id: int = 0
    priority: list[int] = field(default_factory=lambda: [0, 0, 0])


def show_main_menu() -> None:
    """Clear the screen and print the main menu."""
    clear_screen()
    for line in _MENU:
        print(line)


def register_client(clients: LinkedList) -> Ticket:
    """Ask for a client's name and age and append a ticket to ``clients``.

    Raises ValueError when the name is empty or the age is not a whole number.
    """
    print("Registrar nuevo cliente")
    name = input("Ingrese el nombre: ").strip()
    if not name:
        raise ValueError("el nombre no puede estar vacío")
    age_text = input("Ingrese la edad: ").strip()
    try:
        age = int(age_text)
    except ValueError:
        raise ValueError(f"edad no válida: {age_text!r}") from None
    ticket = Ticket(name=name, age=age)
    clients.push_back(ticket)
    return ticket


def show_waiting_list(clients: LinkedList) -> None:
    """Print the name of every client in the waiting list, in order."""
    print("clientes en espera: ")
    for ticket in clients:
        print(f"nombre: {ticket.name} ")


def _read_option() -> Optional[str]:
    """Return the first non-blank character typed, or None at end of input."""
    while True:
        try:
            line = input("Ingrese su opción: ")
        except EOFError:
            return None
        text = line.strip()
        if text:
            return text[0]


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the menu loop until the user chooses to leave."""
    clients = LinkedList()
    while True:
        show_main_menu()
        option = _read_option()
        if option is None:
            break
        if option == "1":
            try:
                register_client(clients)
            except (ValueError, EOFError) as exc:
                print(f"No se pudo registrar el cliente: {exc}")
        elif option == "3":
            show_waiting_list(clients)
        elif option in ("2", "4", "5"):
            pass
        elif option == EXIT_OPTION:
            print("Saliendo del sistema de gestión de Soporte Tecnico...")
        else:
            print("Opción no válida. Por favor, intente de nuevo.")
        wait_for_key()
        if option == EXIT_OPTION:
            break
    clients.clean()
    return 0