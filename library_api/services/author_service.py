from flask import current_app

from library_api.errors import ConflictError, NotFoundError
from library_api.models.author import Author
from library_api.repositories.author_repo import AuthorRepo
from library_api.utils.transaction import transaction
from library_api.utils.validators import ensure_object, optional_str, require_str


class AuthorService:
    def __init__(self, session):
        self.session = session
        self.authors = AuthorRepo(session)

    def list_authors(self, page: int, limit: int):
        return self.authors.list_page(page, limit)

    def get_author(self, author_id: int) -> Author:
        author = self.authors.get(author_id)
        if not author:
            raise NotFoundError("Author not found")
        return author

    def create_author(self, data: dict) -> Author:
        data = ensure_object(data)
        author = Author(name=require_str(data, "name"), bio=optional_str(data, "bio"))
        with transaction(self.session):
            self.authors.add(author)
            author_id = author.id
        return self.get_author(author_id)

    def update_author(self, author_id: int, data: dict) -> Author:
        author = self.get_author(author_id)
        data = ensure_object(data)

        changes = {}
        if "name" in data:
            changes["name"] = require_str(data, "name")
        if "bio" in data:
            changes["bio"] = optional_str(data, "bio")

        with transaction(self.session):
            for key, value in changes.items():
                setattr(author, key, value)
        return self.get_author(author_id)

    def delete_author(self, author_id: int) -> None:
        author = self.get_author(author_id)
        if self.authors.count_books(author_id) > 0:
            raise ConflictError("Cannot delete an author who still has books")

        with transaction(self.session):
            self.authors.delete(author)
        current_app.logger.info(f"[AuthorService] author {author_id} deleted")
