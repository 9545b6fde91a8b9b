import pytest

from orderdesk.models import Customer

CUSTOMER = {
    "name": "João Pereira",
    "phone": "21988887777",
    "email": "joao@example.com",
    "address": "Av. Central, 100",
}


@pytest.fixture
def customers(db_session, seeded):
    rows = [
        Customer(name="Ana Lima", email="ana@example.com"),
        Customer(name="Bruno Costa", phone="1133334444"),
        Customer(name="Carla Dias", address="Rua das Flores, 5"),
    ]
    db_session.add_all(rows)
    db_session.commit()
    return [r.id for r in rows]


@pytest.fixture
def manager(auth_headers, seeded):
    perms = [(a, "Customer") for a in ("View", "Add", "Edit")]
    return auth_headers(["Manager"], perms, sub=seeded["users"]["admin"], username="admin")


def test_manager_can_edit_but_not_delete(client, manager, login, customers):
    created = client.post("/customers", json=CUSTOMER, headers=manager)
    assert created.status_code == 201
    assert created.json()["message"] == "Cliente criado"
    customer_id = created.json()["data"]["id"]

    updated = client.put(f"/customers/{customer_id}", json=dict(CUSTOMER, name="João P."), headers=manager)
    assert updated.status_code == 200
    assert updated.json()["data"]["name"] == "João P."

    assert client.delete(f"/customers/{customer_id}", headers=manager).status_code == 403

    removed = client.delete(f"/customers/{customer_id}", headers=login("admin"))
    assert removed.status_code == 200
    assert removed.json() == {"message": "Cliente removido"}


def test_order_permissions_do_not_open_customers(client, auth_headers, customers):
    headers = auth_headers(["Staff"], [("View", "Order"), ("Add", "Order")])
    assert client.get("/customers", headers=headers).status_code == 403


def test_list_and_search_customers(client, login, customers):
    headers = login("customer")

    body = client.get("/customers?sort=name&dir=asc", headers=headers).json()
    assert [c["name"] for c in body["data"]] == ["Ana Lima", "Bruno Costa", "Carla Dias"]
    assert body["total"] == 3

    by_address = client.get("/customers?search=flores", headers=headers).json()
    assert [c["name"] for c in by_address["data"]] == ["Carla Dias"]

    by_phone = client.get("/customers?search=3333", headers=headers).json()
    assert [c["name"] for c in by_phone["data"]] == ["Bruno Costa"]


def test_customer_sort_allow_list(client, login, customers):
    body = client.get("/customers?sort=address", headers=login("customer")).json()
    assert body["sort"] == "created_at"


def test_get_customer_and_missing(client, login, customers):
    headers = login("customer")
    assert client.get(f"/customers/{customers[0]}", headers=headers).json()["data"]["name"] == "Ana Lima"

    missing = client.get("/customers/9999", headers=headers)
    assert missing.status_code == 404
    assert missing.json()["detail"] == "Cliente não encontrado"


def test_create_customer_requires_name(client, manager):
    response = client.post("/customers", json={"email": "x@example.com"}, headers=manager)
    assert response.status_code == 400


def test_customer_pagination_and_ids_out_of_range(client, login, customers):
    headers = login("customer")

    listing = client.get("/customers?page=abc&pageSize=100000000000000000000", headers=headers)
    assert listing.status_code == 200
    assert (listing.json()["page"], listing.json()["pageSize"]) == (1, 10)

    assert client.get("/customers/100000000000000000000", headers=headers).status_code == 400
