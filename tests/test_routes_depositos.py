"""
Tests for the /depositos HTTP surface.
"""

from decimal import Decimal


def test_root(client):
    assert client.get("/").json() == {"message": "Depositos API is running"}


def test_list_loads_on_first_request(client, store):
    body = client.get("/depositos").json()

    assert [d["id"] for d in body["items"]] == [4, 3, 2, 1]
    assert Decimal(body["total"]) == Decimal("135.75")
    assert body["total_formatted"] == "135.75 BOB"
    assert body["dominios"] == ["yape", "bcp"]
    assert body["loading"] is False
    assert body["error"] is None

    client.get("/depositos")
    assert store.calls == 1


def test_list_filters_by_dominio_and_query(client):
    body = client.get("/depositos", params={"dominio": "yape", "q": "ana"}).json()
    assert [d["id"] for d in body["items"]] == [4]
    assert Decimal(body["total"]) == Decimal("100.00")
    assert body["selected_dominio"] == "yape"
    # chips always come from the full list
    assert body["dominios"] == ["yape", "bcp"]


def test_refresh_failure_keeps_previous_list(client, store):
    client.get("/depositos")
    store.fail = True

    body = client.post("/depositos/refresh").json()
    assert len(body["items"]) == 4
    assert body["refreshing"] is False
    assert body["error"] is not None

    store.fail = False
    body = client.post("/depositos/refresh").json()
    assert body["error"] is None


def test_detail(client):
    body = client.get("/depositos/2").json()
    assert body["nombre"] == "María López"
    assert body["hash"] == "hash-2"


def test_detail_not_found(client):
    resp = client.get("/depositos/999")
    assert resp.status_code == 404
    assert resp.json() == {"detail": "No se encontró el depósito"}


def test_detail_store_down(client, store):
    store.fail = True
    resp = client.get("/depositos/1")
    assert resp.status_code == 503


def test_presentation_adds_color_and_icon(client):
    body = client.get("/depositos/1/presentation").json()
    assert body["color"] == "#6f42c1"
    assert body["icon"] == "qr-code"

    body = client.get("/depositos/3/presentation").json()
    assert body["icon"] == "help-circle"


def test_empty_dominio_param_clears_the_filter(client):
    body = client.get("/depositos", params={"dominio": ""}).json()
    assert [d["id"] for d in body["items"]] == [4, 3, 2, 1]
    assert body["selected_dominio"] is None

    body = client.post("/depositos/refresh", params={"dominio": "", "q": "juan"}).json()
    assert [d["id"] for d in body["items"]] == [3, 1]
