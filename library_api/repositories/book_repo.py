from library_api.models.book import Book
from library_api.models.book_category import BookCategory
from library_api.models.loan import Loan
from library_api.repositories.base import BaseRepo
from library_api.utils.dates import utcnow


class BookRepo(BaseRepo):
    model = Book

    def get_by_isbn(self, isbn: str):
        return self.query().filter_by(isbn=isbn).first()

    def replace_categories(self, book: Book, category_ids: list[int]):
        # mevcut join satırlarını sil, verilen listeyi yeniden oluştur
        (
            self.session.query(BookCategory)
            .filter(BookCategory.book_id == book.id)
            .delete(synchronize_session="fetch")
        )
        self.session.flush()
        for category_id in category_ids:
            self.session.add(BookCategory(book_id=book.id, category_id=category_id))
        self.session.flush()
        self.session.expire(book, ["category_links"])

    def count_outstanding_loans(self, book_id: int) -> int:
        return (
            self.session.query(Loan)
            .filter(Loan.book_id == book_id, Loan.returned_at.is_(None))
            .count()
        )

    def delete_with_relations(self, book: Book):
        self.session.query(BookCategory).filter(
            BookCategory.book_id == book.id
        ).delete(synchronize_session="fetch")
        self.session.query(Loan).filter(
            Loan.book_id == book.id
        ).delete(synchronize_session="fetch")
        self.delete(book)

    # --- availability: loan akışı ve quantity değişikliği dışında yazılmaz ---

    def decrement_available(self, book_id: int) -> bool:
        """available > 0 ise 1 azaltır; satır güncellenmediyse False."""
        updated = (
            self.session.query(Book)
            .filter(Book.id == book_id, Book.available > 0)
            .update({Book.available: Book.available - 1}, synchronize_session=False)
        )
        self.session.flush()
        return updated == 1

    def resize_stock(self, book_id: int, quantity: int) -> bool:
        """
        quantity'yi değiştirir ve available'ı aynı fark kadar kaydırır;
        ödünçteki kopya sayısı korunur. available < 0 olacaksa False.
        """
        shifted = Book.available + (quantity - Book.quantity)
        updated = (
            self.session.query(Book)
            .filter(Book.id == book_id, shifted >= 0)
            .update(
                {Book.quantity: quantity, Book.available: shifted, Book.updated_at: utcnow()},
                synchronize_session=False,
            )
        )
        self.session.flush()
        return updated == 1

    def increment_available(self, book_id: int) -> bool:
        """available < quantity ise 1 artırır; raf doluysa False."""
        updated = (
            self.session.query(Book)
            .filter(Book.id == book_id, Book.available < Book.quantity)
            .update({Book.available: Book.available + 1}, synchronize_session=False)
        )
        self.session.flush()
        return updated == 1
