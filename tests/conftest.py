"""Shared fixtures: a fresh app on in-memory SQLite per test, plus a small
factory that creates records through the HTTP API."""
import itertools

import pytest

from library_api import create_app
from library_api.config import TestConfig
from library_api.extensions import db

from helpers import iso_in


@pytest.fixture
def app():
    app = create_app(TestConfig)
    with app.app_context():
        db.create_all()
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


class Factory:
    def __init__(self, client):
        self.client = client
        self._seq = itertools.count(1)

    def _post(self, path, payload):
        resp = self.client.post(f"/api/{path}", json=payload)
        assert resp.status_code == 201, resp.get_json()
        return resp.get_json()

    def user(self, **overrides):
        n = next(self._seq)
        payload = {"name": f"Reader {n}", "email": f"reader{n}@example.com", "password": "password123"}
        payload.update(overrides)
        return self._post("users", payload)

    def author(self, **overrides):
        n = next(self._seq)
        payload = {"name": f"Author {n}", "bio": f"Bio {n}"}
        payload.update(overrides)
        return self._post("authors", payload)

    def category(self, **overrides):
        n = next(self._seq)
        payload = {"name": f"Category {n}", "description": f"Description {n}"}
        payload.update(overrides)
        return self._post("categories", payload)

    def book(self, author_id=None, **overrides):
        n = next(self._seq)
        if author_id is None:
            author_id = self.author()["id"]
        payload = {
            "title": f"Book {n}",
            "isbn": f"ISBN-{n:06d}",
            "description": f"Description {n}",
            "published": "2020-01-01",
            "quantity": 3,
            "authorId": author_id,
        }
        payload.update(overrides)
        return self._post("books", payload)

    def loan(self, user_id, book_id, **overrides):
        payload = {"userId": user_id, "bookId": book_id, "dueDate": iso_in(14)}
        payload.update(overrides)
        return self._post("loans", payload)

    def return_loan(self, loan_id):
        resp = self.client.put(f"/api/loans/{loan_id}", json={"returnedAt": iso_in()})
        assert resp.status_code == 200, resp.get_json()
        return resp.get_json()


@pytest.fixture
def factory(client):
    return Factory(client)
