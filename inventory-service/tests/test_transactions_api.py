"""Tests for stock movements (in-memory storage)."""

import pytest


def _move(client, product_id, type_, quantity, **extra):
    body = {"productId": product_id, "type": type_, "quantity": quantity, **extra}
    return client.post("/api/transactions", json=body)


class TestApplyMovement:

    def test_in_adds_quantity_and_restocks(self, client, make_product):
        product = make_product(quantity=5)

        response = _move(client, product["id"], "IN", 20)

        assert response.status_code == 201
        data = response.json()
        assert data["product"]["quantity"] == 25
        assert data["product"]["lastRestocked"] == data["transaction"]["createdAt"]
        assert data["transaction"]["productId"] == product["id"]
        assert data["transaction"]["type"] == "IN"
        assert data["transaction"]["quantity"] == 20

    def test_return_adds_quantity_without_restocking(self, client, make_product):
        product = make_product(quantity=5)

        data = _move(client, product["id"], "RETURN", 3).json()

        assert data["product"]["quantity"] == 8
        assert data["product"]["lastRestocked"] == product["lastRestocked"]

    @pytest.mark.parametrize("type_", ["OUT", "DAMAGE"])
    def test_out_and_damage_subtract(self, client, make_product, type_):
        product = make_product(quantity=30)

        data = _move(client, product["id"], type_, 12).json()

        assert data["product"]["quantity"] == 18
        assert data["product"]["lastRestocked"] == product["lastRestocked"]

    def test_quantity_can_go_negative(self, client, make_product):
        product = make_product(quantity=2)

        data = _move(client, product["id"], "OUT", 5).json()

        assert data["product"]["quantity"] == -3
        assert data["product"]["status"] == "Low Stock"

    def test_defaults_for_notes_and_performed_by(self, client, make_product):
        product = make_product()

        txn = _move(client, product["id"], "IN", 1).json()["transaction"]

        assert txn["notes"] == ""
        assert txn["performedBy"] == "System"

    def test_notes_and_performed_by_are_stored(self, client, make_product):
        product = make_product()

        txn = _move(client, product["id"], "OUT", 1, notes="Site 4", performedBy="ravi").json()["transaction"]

        assert txn["notes"] == "Site 4"
        assert txn["performedBy"] == "ravi"

    def test_movement_is_persisted_on_product(self, client, make_product):
        product = make_product(quantity=10)

        _move(client, product["id"], "OUT", 4)

        assert client.get(f"/api/products/{product['id']}").json()["quantity"] == 6

    def test_movement_rederives_damaged_product(self, client, make_product):
        product = make_product(quantity=50, status="Damaged")

        data = _move(client, product["id"], "OUT", 1).json()

        assert data["product"]["status"] == "In Stock"

    def test_unknown_product_is_404(self, client):
        response = _move(client, "404", "IN", 1)

        assert response.status_code == 404
        assert response.json() == {"message": "Product not found"}

    def test_unknown_type_is_400_and_changes_nothing(self, client, make_product):
        product = make_product(quantity=10)

        response = _move(client, product["id"], "LOST", 4)

        assert response.status_code == 400
        assert client.get(f"/api/products/{product['id']}").json()["quantity"] == 10
        assert client.get("/api/transactions").json() == []


class TestStockScenario:

    def test_low_then_in_then_out_of_stock(self, client, make_product):
        product = make_product(quantity=5, reorderPoint=10)
        assert product["status"] == "Low Stock"

        after_in = _move(client, product["id"], "IN", 20).json()["product"]
        assert after_in["quantity"] == 25
        assert after_in["status"] == "In Stock"

        after_out = _move(client, product["id"], "OUT", 25).json()["product"]
        assert after_out["quantity"] == 0
        assert after_out["status"] == "Out of Stock"


class TestListTransactions:

    def test_lists_in_insertion_order_unresolved(self, client, make_product):
        product = make_product()
        _move(client, product["id"], "IN", 1)
        _move(client, product["id"], "OUT", 2)

        data = client.get("/api/transactions").json()

        assert [t["type"] for t in data] == ["IN", "OUT"]
        assert all(t["product"] is None for t in data)

    def test_deleting_product_keeps_history(self, client, make_product):
        product = make_product()
        _move(client, product["id"], "IN", 3)

        client.delete(f"/api/products/{product['id']}")
        data = client.get("/api/transactions").json()

        assert len(data) == 1
        assert data[0]["productId"] == product["id"]


class TestMovementLimits:

    def test_movement_quantity_outside_integer_range_is_400(self, client, make_product):
        product = make_product(quantity=10)

        response = _move(client, product["id"], "IN", 10**12)

        assert response.status_code == 400
        assert client.get(f"/api/products/{product['id']}").json()["quantity"] == 10

    def test_result_below_integer_range_is_400(self, client, make_product):
        product = make_product(quantity=-(2**31) + 1)

        response = _move(client, product["id"], "DAMAGE", 2)

        assert response.status_code == 400
        assert response.json()["message"] == "Error creating transaction"
        assert client.get("/api/transactions").json() == []
