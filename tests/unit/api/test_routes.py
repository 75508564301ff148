"""HTTP tests for the lending API."""

from datetime import date, timedelta

import pytest
from fastapi.testclient import TestClient

TODAY = date.today()


def _customer(client: TestClient, email: str = "john.doe@example.com") -> dict:
    response = client.post(
        "/api/v1/customers",
        json={
            "name": "John Doe",
            "email": email,
            "address": "123 Main St",
            "phone_number": "01111234567",
            "password": "password123",
        },
    )
    assert response.status_code == 201
    return response.json()


def _book(
    client: TestClient,
    title: str = "A Game of Thrones",
    author: str | None = "George R.R. Martin",
    isbn: str = "978-0553103540",
) -> dict:
    payload = {"title": title, "isbn": isbn, "genre": "Fantasy"}
    if author:
        payload["author"] = {"name": author}
    response = client.post("/api/v1/books", json=payload)
    assert response.status_code == 201
    return response.json()


def _borrow(client: TestClient, customer_id: int, book_id: int, days: int = 14):
    return client.post(
        "/api/v1/borrowings",
        json={
            "customer_id": customer_id,
            "book_id": book_id,
            "borrow_date": TODAY.isoformat(),
            "return_date": (TODAY + timedelta(days=days)).isoformat(),
        },
    )


class TestHealth:
    def test_health(self, client: TestClient):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_ready(self, client: TestClient):
        response = client.get("/health/ready")
        assert response.status_code == 200
        assert response.json()["checks"]["database"]["status"] == "healthy"

    def test_request_id_is_echoed(self, client: TestClient):
        response = client.get("/health", headers={"X-Request-ID": "abc-123"})
        assert response.headers["X-Request-ID"] == "abc-123"


class TestAuthorRoutes:
    def test_crud(self, client: TestClient):
        created = client.post("/api/v1/authors", json={"name": "Frank Herbert", "birth_date": "1920-10-08"})
        assert created.status_code == 201
        author_id = created.json()["id"]

        assert client.get(f"/api/v1/authors/{author_id}").json()["name"] == "Frank Herbert"

        updated = client.put(f"/api/v1/authors/{author_id}", json={"name": "F. Herbert"})
        assert updated.json()["name"] == "F. Herbert"

        assert client.delete(f"/api/v1/authors/{author_id}").status_code == 204
        assert client.delete(f"/api/v1/authors/{author_id}").status_code == 404
        assert client.get(f"/api/v1/authors/{author_id}").status_code == 404

    def test_validation_error(self, client: TestClient):
        response = client.post("/api/v1/authors", json={"name": ""})
        assert response.status_code == 422

    def test_delete_detaches_books(self, client: TestClient):
        book = _book(client)
        author_id = book["author"]["id"]

        client.delete(f"/api/v1/authors/{author_id}")

        assert client.get(f"/api/v1/books/{book['id']}").json()["author"] is None


class TestBookRoutes:
    def test_search_requires_exactly_one_parameter(self, client: TestClient):
        assert client.get("/api/v1/books/search").status_code == 400
        assert client.get("/api/v1/books/search", params={"title": "a", "isbn": "b"}).status_code == 400

    @pytest.mark.parametrize(
        "params",
        [{"title": "Thrones"}, {"author": "Martin"}, {"isbn": "0553"}],
    )
    def test_search(self, client: TestClient, params):
        _book(client)
        _book(client, title="Unrelated", author=None, isbn="978-0000000000")

        response = client.get("/api/v1/books/search", params=params)

        assert response.status_code == 200
        assert [b["title"] for b in response.json()] == ["A Game of Thrones"]

    def test_delete_borrowed_book_conflicts(self, client: TestClient):
        customer = _customer(client)
        book = _book(client)
        record = _borrow(client, customer["id"], book["id"]).json()

        response = client.delete(f"/api/v1/books/{book['id']}")
        assert response.status_code == 409
        assert response.json()["code"] == "book_currently_borrowed"

        client.post(f"/api/v1/borrowings/{record['id']}/return")
        assert client.delete(f"/api/v1/books/{book['id']}").status_code == 204
        assert client.get(f"/api/v1/borrowings/{record['id']}").status_code == 404

    def test_missing_book(self, client: TestClient):
        assert client.get("/api/v1/books/404").status_code == 404
        assert client.put("/api/v1/books/404", json={"title": "X"}).status_code == 404


class TestCustomerRoutes:
    def test_password_never_returned(self, client: TestClient):
        customer = _customer(client)

        assert "password" not in customer
        assert "password_hash" not in customer
        assert "password_hash" not in client.get(f"/api/v1/customers/{customer['id']}").json()

    def test_duplicate_email_is_bad_request(self, client: TestClient):
        _customer(client)

        response = client.post(
            "/api/v1/customers",
            json={"name": "Other", "email": "john.doe@example.com", "password": "pw"},
        )

        assert response.status_code == 400
        assert response.json()["code"] == "duplicate_email"

    def test_delete_removes_records(self, client: TestClient):
        customer = _customer(client)
        book = _book(client)
        record = _borrow(client, customer["id"], book["id"]).json()

        assert client.delete(f"/api/v1/customers/{customer['id']}").status_code == 204
        assert client.get(f"/api/v1/borrowings/{record['id']}").status_code == 404


class TestBorrowingRoutes:
    def test_borrow_flow(self, client: TestClient):
        customer = _customer(client)
        book = _book(client)

        response = _borrow(client, customer["id"], book["id"])

        assert response.status_code == 201
        body = response.json()
        assert body["book"]["available"] is False
        assert body["customer"]["email"] == "john.doe@example.com"
        assert client.get(f"/api/v1/books/{book['id']}").json()["available"] is False

    def test_borrow_unavailable_book_conflicts(self, client: TestClient):
        first = _customer(client)
        second = _customer(client, email="jane@example.com")
        book = _book(client)
        _borrow(client, first["id"], book["id"])

        response = _borrow(client, second["id"], book["id"])

        assert response.status_code == 409
        assert response.json()["code"] == "book_already_borrowed"

    def test_unknown_customer_and_book(self, client: TestClient):
        book = _book(client)
        assert _borrow(client, 404, book["id"]).status_code == 404
        customer = _customer(client)
        assert _borrow(client, customer["id"], 404).status_code == 404

    def test_delete_open_loan_conflicts(self, client: TestClient):
        customer = _customer(client)
        book = _book(client)
        record = _borrow(client, customer["id"], book["id"]).json()

        response = client.delete(f"/api/v1/borrowings/{record['id']}")

        assert response.status_code == 409
        assert response.json()["code"] == "return_date_in_future"

    def test_return_then_delete(self, client: TestClient):
        customer = _customer(client)
        book = _book(client)
        record = _borrow(client, customer["id"], book["id"]).json()

        returned = client.post(f"/api/v1/borrowings/{record['id']}/return")
        assert returned.status_code == 200
        assert returned.json()["return_date"] == TODAY.isoformat()
        assert returned.json()["returned_on"] == TODAY.isoformat()

        again = client.post(f"/api/v1/borrowings/{record['id']}/return")
        assert again.status_code == 409

        assert client.delete(f"/api/v1/borrowings/{record['id']}").status_code == 204
        assert client.post(f"/api/v1/borrowings/{record['id']}/return").status_code == 404

    def test_search_requires_exactly_one_parameter(self, client: TestClient):
        assert client.get("/api/v1/borrowings/search").status_code == 400
        assert client.get("/api/v1/borrowings/search", params={"userId": 1, "bookId": 1}).status_code == 400

    def test_search_by_user_and_book(self, client: TestClient):
        customer = _customer(client)
        book = _book(client)
        record = _borrow(client, customer["id"], book["id"]).json()

        by_user = client.get("/api/v1/borrowings/search", params={"userId": customer["id"]})
        by_book = client.get("/api/v1/borrowings/search", params={"bookId": book["id"]})

        assert [r["id"] for r in by_user.json()] == [record["id"]]
        assert [r["id"] for r in by_book.json()] == [record["id"]]

    def test_return_date_in_past_is_rejected(self, client: TestClient):
        customer = _customer(client)
        book = _book(client)

        response = _borrow(client, customer["id"], book["id"], days=-1)

        assert response.status_code == 422
