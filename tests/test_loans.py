"""Borrow / return / return-reversal flow and the availability counter."""
from library_api.extensions import db
from library_api.models import Book, Loan

from helpers import iso_in


def _available(client, book_id):
    resp = client.get(f"/api/books/{book_id}")
    assert resp.status_code == 200
    return resp.get_json()["available"]


def test_borrow_decrements_availability_by_one(client, factory):
    user = factory.user()
    book = factory.book(quantity=3)

    resp = client.post("/api/loans", json={"userId": user["id"], "bookId": book["id"], "dueDate": iso_in(14)})
    assert resp.status_code == 201
    loan = resp.get_json()
    assert loan["userId"] == user["id"]
    assert loan["bookId"] == book["id"]
    assert loan["borrowedAt"] is not None
    assert loan["returnedAt"] is None
    assert loan["user"] == {"id": user["id"], "name": user["name"], "email": user["email"]}
    assert loan["book"]["author"]["id"] == book["authorId"]

    assert _available(client, book["id"]) == 2


def test_return_increments_availability_by_one(client, factory):
    user = factory.user()
    book = factory.book(quantity=3)
    loan = factory.loan(user["id"], book["id"])

    resp = client.put(f"/api/loans/{loan['id']}", json={"returnedAt": iso_in()})
    assert resp.status_code == 200
    assert resp.get_json()["returnedAt"] is not None
    assert _available(client, book["id"]) == 3


def test_borrow_rejected_when_no_copies_available(app, client, factory):
    user = factory.user()
    book = factory.book(quantity=2, available=0)

    resp = client.post("/api/loans", json={"userId": user["id"], "bookId": book["id"], "dueDate": iso_in(7)})
    assert resp.status_code == 400
    assert "not available" in resp.get_json()["message"]

    assert _available(client, book["id"]) == 0
    with app.app_context():
        assert db.session.query(Loan).count() == 0


def test_last_copy_can_only_be_borrowed_once(client, factory):
    first, second = factory.user(), factory.user()
    book = factory.book(quantity=1)

    factory.loan(first["id"], book["id"])
    resp = client.post("/api/loans", json={"userId": second["id"], "bookId": book["id"], "dueDate": iso_in(7)})
    assert resp.status_code == 400
    assert _available(client, book["id"]) == 0


def test_borrow_requires_existing_user_and_book(client, factory):
    user = factory.user()
    book = factory.book()

    resp = client.post("/api/loans", json={"userId": 9999, "bookId": book["id"], "dueDate": iso_in(7)})
    assert resp.status_code == 404
    assert resp.get_json()["message"] == "User not found"

    resp = client.post("/api/loans", json={"userId": user["id"], "bookId": 9999, "dueDate": iso_in(7)})
    assert resp.status_code == 404
    assert resp.get_json()["message"] == "Book not found"


def test_borrow_validates_payload(client, factory):
    user = factory.user()
    book = factory.book()

    resp = client.post("/api/loans", json={"userId": user["id"], "bookId": book["id"]})
    assert resp.status_code == 400
    assert "dueDate" in resp.get_json()["message"]

    resp = client.post("/api/loans", json={"userId": user["id"], "bookId": book["id"], "dueDate": "next week"})
    assert resp.status_code == 400

    resp = client.post("/api/loans", json={"userId": "abc", "bookId": book["id"], "dueDate": iso_in(7)})
    assert resp.status_code == 400
    assert _available(client, book["id"]) == 3


def test_return_reversal_takes_a_copy_again(client, factory):
    user = factory.user()
    book = factory.book(quantity=2)
    loan = factory.loan(user["id"], book["id"])
    factory.return_loan(loan["id"])
    assert _available(client, book["id"]) == 2

    resp = client.put(f"/api/loans/{loan['id']}", json={"returnedAt": None})
    assert resp.status_code == 200
    assert resp.get_json()["returnedAt"] is None
    assert _available(client, book["id"]) == 1


def test_return_reversal_rejected_when_copy_was_claimed(client, factory):
    first, second = factory.user(), factory.user()
    book = factory.book(quantity=1)
    loan = factory.loan(first["id"], book["id"])
    factory.return_loan(loan["id"])
    factory.loan(second["id"], book["id"])

    resp = client.put(f"/api/loans/{loan['id']}", json={"returnedAt": None})
    assert resp.status_code == 400
    assert "not available" in resp.get_json()["message"]

    detail = client.get(f"/api/loans/{loan['id']}").get_json()
    assert detail["returnedAt"] is not None
    assert _available(client, book["id"]) == 0


def test_due_date_change_does_not_touch_availability(client, factory):
    user = factory.user()
    book = factory.book(quantity=3)
    loan = factory.loan(user["id"], book["id"])

    resp = client.put(f"/api/loans/{loan['id']}", json={"dueDate": "2030-01-31T00:00:00Z"})
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["dueDate"].startswith("2030-01-31")
    assert body["returnedAt"] is None
    assert _available(client, book["id"]) == 2


def test_second_return_does_not_increment_again(client, factory):
    user = factory.user()
    book = factory.book(quantity=3)
    loan = factory.loan(user["id"], book["id"])
    factory.return_loan(loan["id"])

    resp = client.put(f"/api/loans/{loan['id']}", json={"returnedAt": iso_in(1)})
    assert resp.status_code == 200
    assert _available(client, book["id"]) == 3


def test_return_never_pushes_available_above_quantity(app, client, factory):
    user = factory.user()
    book = factory.book(quantity=3)
    loan = factory.loan(user["id"], book["id"])

    # sayaç bozulmuş gibi: raf dolu ama ödünç hâlâ açık
    with app.app_context():
        row = db.session.get(Book, book["id"])
        row.available = row.quantity
        db.session.commit()

    factory.return_loan(loan["id"])
    detail = client.get(f"/api/books/{book['id']}").get_json()
    assert detail["available"] == detail["quantity"] == 3


def test_loan_owner_and_book_cannot_be_changed(client, factory):
    user, other = factory.user(), factory.user()
    book = factory.book()
    loan = factory.loan(user["id"], book["id"])

    resp = client.put(f"/api/loans/{loan['id']}", json={"userId": other["id"]})
    assert resp.status_code == 400
    resp = client.put(f"/api/loans/{loan['id']}", json={"bookId": 1})
    assert resp.status_code == 400


def test_update_missing_loan_returns_404(client):
    resp = client.put("/api/loans/12345", json={"returnedAt": iso_in()})
    assert resp.status_code == 404


def test_outstanding_loan_cannot_be_deleted(client, factory):
    user = factory.user()
    book = factory.book()
    loan = factory.loan(user["id"], book["id"])

    resp = client.delete(f"/api/loans/{loan['id']}")
    assert resp.status_code == 400
    assert "outstanding" in resp.get_json()["message"]

    factory.return_loan(loan["id"])
    resp = client.delete(f"/api/loans/{loan['id']}")
    assert resp.status_code == 204
    assert resp.data == b""
    assert client.get(f"/api/loans/{loan['id']}").status_code == 404
    # silme stoğa dokunmaz
    assert _available(client, book["id"]) == 3


def test_list_active_only_newest_first(client, factory):
    user = factory.user()
    book = factory.book(quantity=5)
    first = factory.loan(user["id"], book["id"])
    second = factory.loan(user["id"], book["id"])
    third = factory.loan(user["id"], book["id"])
    factory.return_loan(second["id"])

    body = client.get("/api/loans").get_json()
    assert [loan["id"] for loan in body["data"]] == [third["id"], second["id"], first["id"]]
    assert body["meta"] == {"total": 3, "page": 1, "limit": 10, "totalPages": 1}

    active = client.get("/api/loans?active=true").get_json()
    assert [loan["id"] for loan in active["data"]] == [third["id"], first["id"]]
    assert all(loan["returnedAt"] is None for loan in active["data"])
    assert active["meta"]["total"] == 2
    assert "password" not in active["data"][0]["user"]


def test_full_lending_flow(client, factory):
    user = factory.user()
    author = factory.author()
    book = factory.book(author_id=author["id"], quantity=3, categoryIds=[])

    loan = factory.loan(user["id"], book["id"])
    assert _available(client, book["id"]) == 2

    factory.return_loan(loan["id"])
    assert _available(client, book["id"]) == 3

    assert client.delete(f"/api/loans/{loan['id']}").status_code == 204
    assert client.delete(f"/api/books/{book['id']}").status_code == 204
    assert client.delete(f"/api/authors/{author['id']}").status_code == 204
    assert client.delete(f"/api/users/{user['id']}").status_code == 204
    assert client.get(f"/api/users/{user['id']}").status_code == 404
