from library_api.models.author import Author
from library_api.models.book import Book
from library_api.models.book_category import BookCategory
from library_api.models.category import Category
from library_api.models.loan import Loan
from library_api.models.user import User

__all__ = ["Author", "Book", "BookCategory", "Category", "Loan", "User"]
