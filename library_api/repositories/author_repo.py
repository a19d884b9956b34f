from library_api.models.author import Author
from library_api.models.book import Book
from library_api.repositories.base import BaseRepo


class AuthorRepo(BaseRepo):
    model = Author

    def count_books(self, author_id: int) -> int:
        return self.session.query(Book).filter(Book.author_id == author_id).count()
