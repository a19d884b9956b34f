from flask import current_app

from library_api.errors import ConflictError, NotFoundError, ValidationError
from library_api.models.book import Book
from library_api.repositories.author_repo import AuthorRepo
from library_api.repositories.book_repo import BookRepo
from library_api.repositories.category_repo import CategoryRepo
from library_api.utils.transaction import transaction
from library_api.utils.validators import (
    ensure_object,
    optional_int,
    optional_int_list,
    optional_str,
    require_datetime,
    require_int,
    require_str,
)

QUANTITY_BELOW_LOANS = "quantity cannot be lower than the number of copies on loan"


class BookService:
    def __init__(self, session):
        self.session = session
        self.books = BookRepo(session)
        self.authors = AuthorRepo(session)
        self.categories = CategoryRepo(session)

    def list_books(self, page: int, limit: int):
        return self.books.list_page(page, limit)

    def get_book(self, book_id: int) -> Book:
        book = self.books.get(book_id)
        if not book:
            raise NotFoundError("Book not found")
        return book

    def _ensure_author(self, author_id: int):
        if not self.authors.get(author_id):
            raise NotFoundError("Author not found")

    def _ensure_categories(self, category_ids: list[int]):
        if not category_ids:
            return
        found = self.categories.find_ids(category_ids)
        if len(found) != len(category_ids):
            missing = [c for c in category_ids if c not in found]
            raise NotFoundError(f"Categories not found: {missing}")

    def create_book(self, data: dict) -> Book:
        data = ensure_object(data)
        title = require_str(data, "title")
        isbn = require_str(data, "isbn")
        quantity = require_int(data, "quantity", minimum=0)
        author_id = require_int(data, "authorId")
        published = require_datetime(data, "published")
        available = optional_int(data, "available", minimum=0)
        if available is None:
            available = quantity
        if available > quantity:
            raise ValidationError("available cannot exceed quantity")
        category_ids = optional_int_list(data, "categoryIds") or []

        if self.books.get_by_isbn(isbn):
            raise ConflictError("ISBN is already in use")
        self._ensure_author(author_id)
        self._ensure_categories(category_ids)

        with transaction(self.session):
            book = Book(
                title=title,
                isbn=isbn,
                description=optional_str(data, "description"),
                published=published,
                quantity=quantity,
                available=available,
                author_id=author_id,
            )
            self.books.add(book)
            if category_ids:
                self.books.replace_categories(book, category_ids)
            book_id = book.id

        current_app.logger.info(f"[BookService] book {book_id} created (isbn={isbn})")
        return self.get_book(book_id)

    def update_book(self, book_id: int, data: dict) -> Book:
        book = self.get_book(book_id)
        data = ensure_object(data)

        if "available" in data:
            raise ValidationError("available follows quantity and loans and cannot be set directly")

        changes = {}
        if "title" in data:
            changes["title"] = require_str(data, "title")
        if "isbn" in data:
            isbn = require_str(data, "isbn")
            if isbn != book.isbn and self.books.get_by_isbn(isbn):
                raise ConflictError("ISBN is already in use")
            changes["isbn"] = isbn
        if "description" in data:
            changes["description"] = optional_str(data, "description")
        if "published" in data:
            changes["published"] = require_datetime(data, "published")
        if "authorId" in data:
            author_id = require_int(data, "authorId")
            if author_id != book.author_id:
                self._ensure_author(author_id)
            changes["author_id"] = author_id

        new_quantity = None
        old_quantity = book.quantity
        if "quantity" in data:
            quantity = require_int(data, "quantity", minimum=0)
            if quantity != old_quantity:
                # ödünçteki kopyalardan az olamaz
                on_loan = self.books.count_outstanding_loans(book.id)
                if quantity < on_loan:
                    raise ConflictError(f"{QUANTITY_BELOW_LOANS} ({on_loan})")
                new_quantity = quantity

        category_ids = optional_int_list(data, "categoryIds")
        if category_ids is not None:
            self._ensure_categories(category_ids)

        with transaction(self.session):
            for key, value in changes.items():
                setattr(book, key, value)
            self.session.flush()
            # quantity ve available aynı UPDATE'te: available farkı kadar kayar
            if new_quantity is not None and not self.books.resize_stock(book_id, new_quantity):
                raise ConflictError(QUANTITY_BELOW_LOANS)
            if category_ids is not None:
                self.books.replace_categories(book, category_ids)

        if new_quantity is not None:
            current_app.logger.info(
                f"[BookService] book {book_id} quantity {old_quantity} -> {new_quantity}"
            )
        return self.get_book(book_id)

    def delete_book(self, book_id: int) -> None:
        book = self.get_book(book_id)
        if self.books.count_outstanding_loans(book_id) > 0:
            raise ConflictError("Cannot delete a book with outstanding loans")

        # join satırları + ödünç geçmişi + kitap tek transaction'da
        with transaction(self.session):
            self.books.delete_with_relations(book)
        current_app.logger.info(f"[BookService] book {book_id} deleted")
