import io
import subprocess

import pytest

from ticketdesk.app import (
    Ticket,
    main,
    register_client,
    show_main_menu,
    show_waiting_list,
)
from ticketdesk.linked_list import LinkedList


@pytest.fixture(autouse=True)
def _no_clear(monkeypatch):
    monkeypatch.setattr(subprocess, "run", lambda *a, **k: None)


def _feed(monkeypatch, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))


def test_ticket_defaults():
    ticket = Ticket(name="Ana", age=30)
    assert ticket.id == 0
    assert ticket.priority == [0, 0, 0]
    other = Ticket(name="Luis", age=40)
    other.priority[0] = 5
    assert ticket.priority == [0, 0, 0]


def test_register_client_appends_ticket(monkeypatch):
    _feed(monkeypatch, "Ana\n30\n")
    clients = LinkedList()
    ticket = register_client(clients)
    assert ticket.name == "Ana"
    assert ticket.age == 30
    assert len(clients) == 1
    assert list(clients) == [ticket]


def test_register_client_keeps_order(monkeypatch):
    _feed(monkeypatch, "Ana\n30\nLuis\n41\n")
    clients = LinkedList()
    register_client(clients)
    register_client(clients)
    assert [t.name for t in clients] == ["Ana", "Luis"]


def test_register_client_rejects_bad_age(monkeypatch):
    _feed(monkeypatch, "Ana\nthirty\n")
    clients = LinkedList()
    with pytest.raises(ValueError):
        register_client(clients)
    assert len(clients) == 0


def test_register_client_rejects_empty_name(monkeypatch):
    _feed(monkeypatch, "\n30\n")
    with pytest.raises(ValueError):
        register_client(LinkedList())


def test_show_waiting_list_prints_names(capsys):
    clients = LinkedList()
    clients.push_back(Ticket(name="Ana", age=30))
    clients.push_back(Ticket(name="Luis", age=41))
    show_waiting_list(clients)
    out = capsys.readouterr().out
    assert "clientes en espera:" in out
    assert out.index("nombre: Ana") < out.index("nombre: Luis")


def test_show_main_menu_lists_options(capsys):
    show_main_menu()
    out = capsys.readouterr().out
    assert "1) Registrar cliente" in out
    assert "6) Salir" in out


def test_main_register_then_list_then_exit(monkeypatch, capsys):
    _feed(monkeypatch, "1\nAna\n30\n\n3\n\n6\n\n")
    assert main() == 0
    out = capsys.readouterr().out
    assert "nombre: Ana" in out
    assert "Saliendo del sistema de gestión de Soporte Tecnico..." in out


def test_main_invalid_option(monkeypatch, capsys):
    _feed(monkeypatch, "9\n\n6\n\n")
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Opción no válida. Por favor, intente de nuevo." in out


def test_main_reports_bad_registration(monkeypatch, capsys):
    _feed(monkeypatch, "1\nAna\nabc\n\n3\n\n6\n\n")
    assert main() == 0
    out = capsys.readouterr().out
    assert "No se pudo registrar el cliente" in out
    assert "nombre: Ana" not in out


def test_main_stops_at_end_of_input(monkeypatch, capsys):
    _feed(monkeypatch, "")
    assert main() == 0
    assert "Saliendo" not in capsys.readouterr().out