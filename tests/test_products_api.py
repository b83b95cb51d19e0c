"""HTTP behaviour of /api/produk against the in-memory store."""
import pytest


def test_list_returns_seeded_products(client):
    response = client.get("/api/produk")
    assert response.status_code == 200
    assert response.json() == [
        {"id": 1, "nama": "Indomie Goreng", "harga": 3500, "stok": 100},
        {"id": 2, "nama": "Teh Botol", "harga": 3000, "stok": 50},
        {"id": 3, "nama": "Kecap Bango", "harga": 12000, "stok": 20},
    ]


def test_seeded_product_update_scenario(client):
    response = client.get("/api/produk/1")
    assert response.status_code == 200
    assert response.json() == {"id": 1, "nama": "Indomie Goreng", "harga": 3500, "stok": 100}

    response = client.put("/api/produk/1", json={"nama": "Indomie Rasa Baru", "harga": 4000, "stok": 90})
    assert response.status_code == 200
    assert response.json() == {"id": 1, "nama": "Indomie Rasa Baru", "harga": 4000, "stok": 90}

    response = client.get("/api/produk/1")
    assert response.json() == {"id": 1, "nama": "Indomie Rasa Baru", "harga": 4000, "stok": 90}


def test_create_then_get_returns_same_record(client):
    body = {"nama": "Aqua 600ml", "harga": 4000, "stok": 24}
    response = client.post("/api/produk", json=body)
    assert response.status_code == 201
    created = response.json()
    assert created["id"] == 4
    assert {k: v for k, v in created.items() if k != "id"} == body

    fetched = client.get(f"/api/produk/{created['id']}")
    assert fetched.status_code == 200
    assert fetched.json() == created


def test_create_ignores_body_identity(client):
    response = client.post("/api/produk", json={"id": 1, "nama": "Duplikat", "harga": 1, "stok": 1})
    assert response.status_code == 201
    assert response.json()["id"] == 4
    assert client.get("/api/produk/1").json()["nama"] == "Indomie Goreng"


def test_missing_fields_take_zero_values(client):
    response = client.post("/api/produk", json={})
    assert response.status_code == 201
    assert response.json() == {"id": 4, "nama": "", "harga": 0, "stok": 0}


def test_put_path_identity_wins_over_body(client):
    response = client.put("/api/produk/2", json={"id": 3, "nama": "Teh Kotak", "harga": 4500, "stok": 10})
    assert response.status_code == 200
    assert response.json()["id"] == 2

    assert client.get("/api/produk/2").json()["nama"] == "Teh Kotak"
    assert client.get("/api/produk/3").json()["nama"] == "Kecap Bango"


def test_delete_then_get_returns_404(client):
    response = client.delete("/api/produk/2")
    assert response.status_code == 200
    assert response.json() == {"message": "Produk berhasil dihapus"}

    response = client.get("/api/produk/2")
    assert response.status_code == 404
    assert response.json() == {"detail": "Produk tidak ditemukan"}


def test_repeated_delete_returns_404(client):
    assert client.delete("/api/produk/3").status_code == 200
    first = client.delete("/api/produk/3")
    second = client.delete("/api/produk/3")
    assert first.status_code == 404
    assert second.status_code == 404


def test_identity_not_reused_after_delete(client):
    client.delete("/api/produk/3")
    response = client.post("/api/produk", json={"nama": "Sabun", "harga": 5000, "stok": 5})
    assert response.json()["id"] == 4


def test_get_missing_product_on_empty_store(empty_client):
    assert empty_client.get("/api/produk").json() == []
    response = empty_client.get("/api/produk/999")
    assert response.status_code == 404


def test_update_missing_product(client):
    response = client.put("/api/produk/999", json={"nama": "X", "harga": 1, "stok": 1})
    assert response.status_code == 404
    assert response.json() == {"detail": "Produk tidak ditemukan"}


@pytest.mark.parametrize("method", ["get", "put", "delete"])
@pytest.mark.parametrize("segment", ["abc", "1.5", "satu"])
def test_non_integer_identity_is_400(client, method, segment):
    kwargs = {"json": {"nama": "X"}} if method == "put" else {}
    response = getattr(client, method)(f"/api/produk/{segment}", **kwargs)
    assert response.status_code == 400
    assert response.json() == {"detail": "Invalid ID"}


def test_invalid_identity_reported_before_invalid_body(client):
    response = client.put(
        "/api/produk/abc",
        content=b"{broken",
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 400
    assert response.json() == {"detail": "Invalid ID"}


def test_malformed_json_is_400(client):
    response = client.post(
        "/api/produk",
        content=b'{"nama": "Indomie",',
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 400
    assert response.json() == {"detail": "Invalid JSON"}


def test_wrong_field_type_is_400(client):
    response = client.put("/api/produk/1", json={"nama": "Indomie", "harga": "mahal", "stok": 1})
    assert response.status_code == 400
    assert response.json() == {"detail": "Invalid JSON"}
    assert client.get("/api/produk/1").json()["harga"] == 3500


@pytest.mark.parametrize("method", ["get", "put", "delete"])
@pytest.mark.parametrize("path", ["/api/produk/", "/api/produk/1/x", "/api/produk/%201"])
def test_empty_or_multi_segment_identity_is_400(client, method, path):
    kwargs = {"json": {"nama": "X"}} if method == "put" else {}
    response = getattr(client, method)(path, **kwargs)
    assert response.status_code == 400
    assert response.json() == {"detail": "Invalid ID"}


def test_json_null_body_is_400(client):
    response = client.post("/api/produk", content=b"null", headers={"Content-Type": "application/json"})
    assert response.status_code == 400
    assert response.json() == {"detail": "Invalid JSON"}
    assert len(client.get("/api/produk").json()) == 3
