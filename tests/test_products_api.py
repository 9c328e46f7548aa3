# tests/test_products_api.py
import pytest
from fastapi.testclient import TestClient

from shop_api.data.seed import DEMO_PRODUCTS, seed
from tests.conftest import auth_header

NEW_PRODUCT = {
    "name": "Laptop",
    "price": 4999.99,
    "category": "Computers",
    "description": "Gaming laptop",
    "imageUrl": "http://example.com/laptop.jpg",
    "specifications": [
        {"name": "RAM", "value": "32GB"},
        {"name": "Color", "value": "Black"},
    ],
}


@pytest.fixture
def catalog(db_session):
    seed(db_session)


class TestReadCatalog:
    def test_lists_all_products(self, client: TestClient, catalog):
        response = client.get("/products")

        assert response.status_code == 200
        assert {p["name"] for p in response.json()} == {p["name"] for p in DEMO_PRODUCTS}

    def test_search_by_name_fragment(self, client: TestClient, catalog):
        response = client.get("/products", params={"name": "Mou"})

        assert [p["name"] for p in response.json()] == ["Mouse"]

    def test_search_by_price_range(self, client: TestClient, catalog):
        response = client.get("/products", params={"minPrice": 100, "maxPrice": 500})

        assert [p["name"] for p in response.json()] == ["Keyboard"]

    def test_search_by_category(self, client: TestClient, catalog):
        response = client.get("/products", params={"category": "Peripherals"})

        assert {p["name"] for p in response.json()} == {"Keyboard", "Mouse"}

    def test_negative_price_filter_is_bad_request(self, client: TestClient):
        assert client.get("/products", params={"minPrice": -1}).status_code == 400

    def test_get_product_with_specifications(self, client: TestClient, catalog):
        product_id = client.get("/products", params={"name": "Keyboard"}).json()[0]["id"]

        response = client.get(f"/products/{product_id}")

        assert response.status_code == 200
        body = response.json()
        assert body["price"] == 199.99
        assert {s["name"] for s in body["specifications"]} == {"Layout", "Switches"}

    def test_missing_product_is_not_found(self, client: TestClient):
        response = client.get("/products/999")

        assert response.status_code == 404
        assert response.json()["message"] == "Product with id 999 not found"


class TestRoleGating:
    def test_create_without_token_is_unauthorized(self, client: TestClient):
        assert client.post("/products", json=NEW_PRODUCT).status_code == 401

    def test_create_as_client_is_forbidden(self, client: TestClient, client_token):
        response = client.post("/products", json=NEW_PRODUCT, headers=auth_header(client_token))

        assert response.status_code == 403

    def test_register_token_has_no_role_and_is_forbidden(self, client: TestClient):
        token = client.post(
            "/auth/register", json={"username": "carol", "password": "password3"}
        ).json()["access_token"]

        response = client.post("/products", json=NEW_PRODUCT, headers=auth_header(token))

        assert response.status_code == 403

    def test_delete_as_client_is_forbidden(self, client: TestClient, client_token, product):
        response = client.delete(f"/products/{product.id}", headers=auth_header(client_token))

        assert response.status_code == 403


class TestAdminWrites:
    def test_create_product_with_specifications(self, client: TestClient, admin_token):
        response = client.post("/products", json=NEW_PRODUCT, headers=auth_header(admin_token))

        assert response.status_code == 201
        body = response.json()
        assert body["name"] == "Laptop"
        assert body["price"] == 4999.99
        assert body["imageUrl"] == "http://example.com/laptop.jpg"
        assert {(s["name"], s["value"]) for s in body["specifications"]} == {
            ("RAM", "32GB"),
            ("Color", "Black"),
        }

    def test_duplicate_name_is_conflict(self, client: TestClient, admin_token):
        headers = auth_header(admin_token)
        client.post("/products", json=NEW_PRODUCT, headers=headers)

        response = client.post("/products", json=NEW_PRODUCT, headers=headers)

        assert response.status_code == 409
        assert response.json()["message"] == "Product with name 'Laptop' already exists."

    def test_duplicate_specification_name_is_conflict(self, client: TestClient, admin_token):
        body = {
            **NEW_PRODUCT,
            "specifications": [
                {"name": "Color", "value": "Black"},
                {"name": "Color", "value": "White"},
            ],
        }

        response = client.post("/products", json=body, headers=auth_header(admin_token))

        assert response.status_code == 409
        assert response.json()["message"] == "Duplicate specification name 'Color' for product 'Laptop'."

    def test_invalid_body_is_bad_request(self, client: TestClient, admin_token):
        response = client.post(
            "/products", json={"name": "", "price": "abc"}, headers=auth_header(admin_token)
        )

        assert response.status_code == 400

    def test_patch_updates_fields_and_replaces_specifications(self, client: TestClient, admin_token):
        headers = auth_header(admin_token)
        product_id = client.post("/products", json=NEW_PRODUCT, headers=headers).json()["id"]

        response = client.patch(
            f"/products/{product_id}",
            json={
                "price": 3999.0,
                "specifications": [
                    {"name": "Color", "value": "Silver"},
                    {"name": "Weight", "value": "2kg"},
                ],
            },
            headers=headers,
        )

        assert response.status_code == 200
        body = response.json()
        assert body["price"] == 3999.0
        assert body["name"] == "Laptop"
        assert {(s["name"], s["value"]) for s in body["specifications"]} == {
            ("Color", "Silver"),
            ("Weight", "2kg"),
        }

    def test_patch_without_specifications_keeps_them(self, client: TestClient, admin_token):
        headers = auth_header(admin_token)
        product_id = client.post("/products", json=NEW_PRODUCT, headers=headers).json()["id"]

        response = client.patch(f"/products/{product_id}", json={"category": "Laptops"}, headers=headers)

        assert response.json()["category"] == "Laptops"
        assert len(response.json()["specifications"]) == 2

    @pytest.mark.parametrize("field", ["name", "price", "category"])
    def test_patch_null_on_required_field_is_bad_request(self, client: TestClient, admin_token, product, field):
        headers = auth_header(admin_token)

        response = client.patch(f"/products/{product.id}", json={field: None}, headers=headers)

        assert response.status_code == 400
        assert response.json()["message"] == [f"{field}: Value error, must not be null"]
        assert client.get(f"/products/{product.id}").json()["name"] == "Widget"

    def test_patch_null_on_optional_field_clears_it(self, client: TestClient, admin_token, product):
        response = client.patch(
            f"/products/{product.id}", json={"description": None}, headers=auth_header(admin_token)
        )

        assert response.status_code == 200
        assert response.json()["description"] is None

    def test_patch_to_existing_name_is_conflict(self, client: TestClient, admin_token, product):
        headers = auth_header(admin_token)
        product_id = client.post("/products", json=NEW_PRODUCT, headers=headers).json()["id"]

        response = client.patch(f"/products/{product_id}", json={"name": "Widget"}, headers=headers)

        assert response.status_code == 409

    def test_patch_missing_product_is_not_found(self, client: TestClient, admin_token):
        response = client.patch("/products/999", json={"price": 1}, headers=auth_header(admin_token))

        assert response.status_code == 404
        assert response.json()["message"] == "Product with ID #999 not found"

    def test_delete_product(self, client: TestClient, admin_token, product):
        headers = auth_header(admin_token)

        response = client.delete(f"/products/{product.id}", headers=headers)

        assert response.status_code == 200
        assert response.json()["name"] == "Widget"
        assert client.get(f"/products/{product.id}").status_code == 404
        assert client.delete(f"/products/{product.id}", headers=headers).status_code == 404
