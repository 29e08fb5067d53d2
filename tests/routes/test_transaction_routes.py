import pytest


def _post(client, **fields):
    response = client.post("/transactions", json=fields)
    assert response.status_code == 200
    return response.get_json()


@pytest.fixture
def lunch():
    return {
        "type": "expense",
        "category": "Food",
        "amount": 12.5,
        "date": "2025-01-10",
        "description": "Lunch",
    }


class TestTransactionRoutes:
    """Tests for the /transactions endpoints."""

    def test_create(self, client, lunch):
        """Test that POST returns ok, a message and the new id."""
        body = _post(client, **lunch)

        assert body["ok"] is True
        assert body["message"] == "Transaction added"
        assert isinstance(body["id"], int)

    def test_create_then_get(self, client, lunch):
        """Test that fetching by the returned id yields identical fields."""
        new_id = _post(client, **lunch)["id"]

        response = client.get(f"/transactions/{new_id}")

        assert response.status_code == 200
        assert response.get_json() == {"id": new_id, **lunch}

    @pytest.mark.parametrize("amount", [100, 12.5, "100"])
    def test_amount_reads_back_as_sent(self, client, lunch, amount):
        """Test that the stored amount keeps the JSON type it was sent with."""
        new_id = _post(client, **{**lunch, "amount": amount})["id"]

        row = client.get(f"/transactions/{new_id}").get_json()

        assert row["amount"] == amount
        assert type(row["amount"]) is type(amount)

    def test_create_without_body_stores_nulls(self, client):
        """Test that a request without a JSON body inserts a row of NULLs."""
        response = client.post("/transactions")
        new_id = response.get_json()["id"]

        row = client.get(f"/transactions/{new_id}").get_json()

        assert row == {
            "id": new_id,
            "type": None,
            "category": None,
            "amount": None,
            "date": None,
            "description": None,
        }

    def test_list(self, client, lunch):
        """Test that GET lists every transaction in insertion order."""
        first = _post(client, **lunch)["id"]
        second = _post(client, **{**lunch, "description": "Dinner"})["id"]

        response = client.get("/transactions")

        assert response.status_code == 200
        assert [t["id"] for t in response.get_json()] == [first, second]

    def test_list_empty(self, client):
        """Test that an empty store lists as an empty array."""
        assert client.get("/transactions").get_json() == []

    @pytest.mark.parametrize("method", ["get", "put", "delete"])
    def test_unknown_id_is_not_found(self, client, method):
        """Test the not-found shape for an unknown id."""
        response = getattr(client, method)("/transactions/9999", json={})

        assert response.status_code == 404
        assert response.get_json() == {"message": "Transaction not found"}

    def test_update(self, client, lunch):
        """Test that PUT replaces the fields and re-fetching reflects them."""
        new_id = _post(client, **lunch)["id"]
        changed = {
            "type": "income",
            "category": "Refund",
            "amount": 20,
            "date": "2025-02-01",
            "description": "Returned item",
        }

        response = client.put(f"/transactions/{new_id}", json=changed)

        assert response.status_code == 200
        assert response.get_json() == {
            "ok": True,
            "message": "Transaction updated",
            "id": str(new_id),
        }
        assert client.get(f"/transactions/{new_id}").get_json() == {
            "id": new_id,
            **changed,
        }

    def test_delete(self, client, lunch):
        """Test that DELETE removes the row."""
        new_id = _post(client, **lunch)["id"]

        response = client.delete(f"/transactions/{new_id}")

        assert response.status_code == 200
        assert response.get_json() == {
            "ok": True,
            "message": "Transaction deleted",
            "id": str(new_id),
        }
        assert client.get(f"/transactions/{new_id}").status_code == 404

    def test_repeated_delete_is_not_found(self, client, lunch):
        """Test that deleting the same id again returns not-found each time."""
        new_id = _post(client, **lunch)["id"]
        client.delete(f"/transactions/{new_id}")

        for _ in range(2):
            response = client.delete(f"/transactions/{new_id}")
            assert response.status_code == 404
            assert response.get_json() == {"message": "Transaction not found"}

    def test_store_failure_returns_ok_false_with_200(self, client, test_db):
        """Test that a failing store call yields {ok: false} with status 200."""
        test_db.execute("DROP TABLE transactions")

        for response in (
            client.get("/transactions"),
            client.post("/transactions", json={"type": "expense"}),
            client.get("/transactions/1"),
            client.put("/transactions/1", json={}),
            client.delete("/transactions/1"),
        ):
            assert response.status_code == 200
            body = response.get_json()
            assert body["ok"] is False
            assert "no such table: transactions" in body["message"]

    def test_cors_allows_any_origin(self, client):
        """Test that responses carry a permissive CORS header."""
        response = client.get(
            "/transactions", headers={"Origin": "http://example.com"}
        )

        assert response.headers["Access-Control-Allow-Origin"] == "*"
