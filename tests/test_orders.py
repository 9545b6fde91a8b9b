import pytest

from orderdesk.models import Order

ORDER = {
    "item": "Bicicleta aro 20",
    "customer_name": "Maria Souza",
    "customer_phone": "11999990000",
    "customer_email": "maria@example.com",
    "customer_address": "Rua A, 10",
}

ALL_ORDER = [("View", "Order"), ("Add", "Order"), ("Edit", "Order"), ("Delete", "Order")]


@pytest.fixture
def admin(auth_headers, seeded):
    return auth_headers(["Admin"], ALL_ORDER, sub=seeded["users"]["admin"], username="admin")


@pytest.fixture
def orders(db_session, seeded):
    items = ["Boneca", "Carrinho", "Bola de futebol", "Quebra-cabeça", "Livro de histórias"]
    rows = [
        Order(item=item, customer_name=f"Cliente {i}", created_by=seeded["users"]["admin"])
        for i, item in enumerate(items, start=1)
    ]
    db_session.add_all(rows)
    db_session.commit()
    return [r.id for r in rows]


def test_staff_can_create_but_not_delete(client, seeded, login, orders):
    headers = login("staff")

    created = client.post("/orders", json=ORDER, headers=headers)
    assert created.status_code == 201
    assert created.json()["message"] == "Pedido criado"
    assert created.json()["data"]["created_by"] == seeded["users"]["staff"]
    assert created.json()["data"]["creator_username"] == "staff"

    deleted = client.delete(f"/orders/{orders[-1]}", headers=headers)
    assert deleted.status_code == 403


def test_customer_role_is_read_only(client, seeded, login, orders):
    headers = login("customer")
    assert client.get("/orders", headers=headers).status_code == 200
    assert client.post("/orders", json=ORDER, headers=headers).status_code == 403
    assert client.put(f"/orders/{orders[0]}", json=ORDER, headers=headers).status_code == 403


def test_orders_require_token(client):
    assert client.get("/orders").status_code == 401
    assert client.post("/orders", json=ORDER).status_code == 401


def test_customer_permission_does_not_open_orders(client, auth_headers):
    headers = auth_headers(["Staff"], [("View", "Customer"), ("Add", "Customer")])
    assert client.get("/orders", headers=headers).status_code == 403


def test_list_default_pagination(client, admin, orders):
    response = client.get("/orders", headers=admin)

    assert response.status_code == 200
    body = response.json()
    assert body["page"] == 1
    assert body["pageSize"] == 10
    assert body["total"] == 5
    assert body["totalPages"] == 1
    assert body["sort"] == "created_at"
    assert body["dir"] == "desc"
    assert len(body["data"]) == 5


def test_list_page_and_page_size(client, admin, orders):
    body = client.get("/orders?page=2&pageSize=2&sort=id&dir=asc", headers=admin).json()

    assert body["totalPages"] == 3
    assert [o["id"] for o in body["data"]] == orders[2:4]


@pytest.mark.parametrize("query", ["page=0", "page=-3", "pageSize=0", "pageSize=1000"])
def test_out_of_range_pagination_falls_back_to_defaults(client, admin, orders, query):
    body = client.get(f"/orders?{query}", headers=admin).json()
    assert body["page"] == 1
    assert body["pageSize"] == 10


def test_sort_column_outside_allow_list_falls_back(client, admin, orders):
    response = client.get("/orders?sort=password_hash&dir=asc", headers=admin)

    assert response.status_code == 200
    assert response.json()["sort"] == "created_at"
    assert response.json()["dir"] == "asc"


def test_sort_by_item_ascending(client, admin, orders):
    body = client.get("/orders?sort=item&dir=asc", headers=admin).json()
    items = [o["item"] for o in body["data"]]
    assert items == sorted(items)


def test_search_matches_item_and_customer_name(client, admin, orders):
    by_item = client.get("/orders?search=bola", headers=admin).json()
    assert by_item["total"] == 1
    assert by_item["data"][0]["item"] == "Bola de futebol"
    assert by_item["search"] == "bola"

    by_customer = client.get("/orders?search=Cliente%203", headers=admin).json()
    assert [o["customer_name"] for o in by_customer["data"]] == ["Cliente 3"]


def test_search_is_trimmed_and_truncated(client, admin, orders):
    body = client.get("/orders", params={"search": "  " + "x" * 300 + "  "}, headers=admin).json()
    assert body["search"] == "x" * 255
    assert body["total"] == 0


def test_get_order(client, admin, orders):
    response = client.get(f"/orders/{orders[0]}", headers=admin)
    assert response.status_code == 200
    assert response.json()["data"]["item"] == "Boneca"


def test_get_missing_order_is_404(client, admin, orders):
    response = client.get("/orders/9999", headers=admin)
    assert response.status_code == 404
    assert response.json()["detail"] == "Pedido não encontrado"


def test_create_validates_body(client, admin):
    response = client.post("/orders", json={"item": "", "customer_name": "X"}, headers=admin)
    assert response.status_code == 400


def test_create_turns_blank_optionals_into_null(client, admin):
    payload = dict(ORDER, customer_email="   ", customer_phone="")
    data = client.post("/orders", json=payload, headers=admin).json()["data"]
    assert data["customer_email"] is None
    assert data["customer_phone"] is None


def test_update_order(client, admin, orders):
    payload = dict(ORDER, item="Patinete")
    response = client.put(f"/orders/{orders[0]}", json=payload, headers=admin)

    assert response.status_code == 200
    assert response.json()["message"] == "Pedido atualizado"
    assert response.json()["data"]["item"] == "Patinete"
    assert response.json()["data"]["customer_name"] == "Maria Souza"


def test_update_missing_order_is_404(client, admin):
    assert client.put("/orders/9999", json=ORDER, headers=admin).status_code == 404


def test_delete_order(client, admin, orders):
    response = client.delete(f"/orders/{orders[0]}", headers=admin)
    assert response.status_code == 200
    assert response.json() == {"message": "Pedido removido"}
    assert client.get(f"/orders/{orders[0]}", headers=admin).status_code == 404
    assert client.delete(f"/orders/{orders[0]}", headers=admin).status_code == 404


def test_invalid_id_is_400(client, admin):
    assert client.get("/orders/0", headers=admin).status_code == 400
    assert client.get("/orders/abc", headers=admin).status_code == 400


@pytest.mark.parametrize("query", ["page=abc", "pageSize=xyz", "page=abc&pageSize=xyz", "page=1.5", "page="])
def test_non_numeric_pagination_falls_back_to_defaults(client, admin, orders, query):
    response = client.get(f"/orders?{query}", headers=admin)

    assert response.status_code == 200
    assert response.json()["page"] == 1
    assert response.json()["pageSize"] == 10


def test_huge_page_falls_back_to_first_page(client, admin, orders):
    response = client.get("/orders?page=100000000000000000000", headers=admin)

    assert response.status_code == 200
    assert response.json()["page"] == 1
    assert len(response.json()["data"]) == 5


def test_large_page_within_range_is_empty(client, admin, orders):
    response = client.get("/orders?page=1000000", headers=admin)

    assert response.status_code == 200
    assert response.json()["page"] == 1000000
    assert response.json()["data"] == []


@pytest.mark.parametrize("method", ["get", "delete"])
def test_id_beyond_integer_range_is_400(client, admin, method):
    response = getattr(client, method)("/orders/100000000000000000000", headers=admin)
    assert response.status_code == 400


def test_update_id_beyond_integer_range_is_400(client, admin):
    response = client.put("/orders/100000000000000000000", json=ORDER, headers=admin)
    assert response.status_code == 400


def test_largest_valid_id_is_404(client, admin):
    assert client.get(f"/orders/{2**31 - 1}", headers=admin).status_code == 404
