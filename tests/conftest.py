from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from depositos.core.errors import FetchError
from depositos.main import create_app
from depositos.services.notifications import NotificationQueue
from depositos.services.repository import DepositoRepository

BASE_TIME = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


def make_row(id, nombre="Juan Pérez", monto="10.00", dominio=None, mensaje="", origen=None,
             moneda="BOB", canal="notificacion", minutes_ago=0):
    return {
        "id": id,
        "nombre": nombre,
        "monto": Decimal(str(monto)),
        "moneda": moneda,
        "origen": origen,
        "dominio": dominio,
        "mensaje": mensaje,
        "canal": canal,
        "hash": f"hash-{id}",
        "creado_en": BASE_TIME - timedelta(minutes=minutes_ago),
    }


class FakeStore:
    """In-memory table store; flip `fail` to simulate a broken connection."""

    def __init__(self, rows=None):
        self.rows = list(rows or [])
        self.fail = False
        self.calls = 0

    def select_all(self):
        self.calls += 1
        if self.fail:
            raise FetchError("connection refused", cause=ConnectionError("connection refused"))
        return sorted(self.rows, key=lambda r: r["creado_en"], reverse=True)

    def select_one(self, deposito_id):
        if self.fail:
            raise FetchError("connection refused", cause=ConnectionError("connection refused"))
        return next((r for r in self.rows if r["id"] == deposito_id), None)


@pytest.fixture
def rows():
    return [
        make_row(1, "Juan Pérez", "10.50", dominio="yape", mensaje="Pago almuerzo", origen="qr", minutes_ago=30),
        make_row(2, "María López", "20.25", dominio="bcp", mensaje="alquiler", origen="número", minutes_ago=20),
        make_row(3, "Carlos Ruiz", "5.00", dominio=None, mensaje="Gracias JUAN", minutes_ago=10),
        make_row(4, "Ana Torres", "100.00", dominio="yape", mensaje="", minutes_ago=0),
    ]


@pytest.fixture
def store(rows):
    return FakeStore(rows)


@pytest.fixture
def repository(store):
    return DepositoRepository(store)


@pytest.fixture
def client(repository):
    app = create_app(repository=repository, notification_queue=NotificationQueue(capacity=5), seed_samples=False)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def row_factory():
    return make_row
