from flask import current_app

from library_api.errors import ConflictError, NotFoundError, ValidationError
from library_api.models.loan import Loan
from library_api.repositories.book_repo import BookRepo
from library_api.repositories.loan_repo import LoanRepo
from library_api.repositories.user_repo import UserRepo
from library_api.utils.dates import utcnow
from library_api.utils.transaction import transaction
from library_api.utils.validators import (
    ensure_object,
    optional_datetime,
    require_datetime,
    require_int,
)

BOOK_NOT_AVAILABLE = "Book is not available"


class LoanService:
    """
    Ödünç akışı: Loan yazımı ile Book.available sayacı her zaman
    aynı transaction içinde değişir.

    Outstanding (returned_at None) <-> Returned (returned_at dolu).
    Oluşturma sadece Outstanding üretir, silme sadece Returned'dan yapılır.
    """

    def __init__(self, session):
        self.session = session
        self.loans = LoanRepo(session)
        self.books = BookRepo(session)
        self.users = UserRepo(session)

    def list_loans(self, page: int, limit: int, active_only: bool = False):
        return self.loans.list_page(page, limit, active_only=active_only)

    def get_loan(self, loan_id: int) -> Loan:
        loan = self.loans.get_detailed(loan_id)
        if not loan:
            raise NotFoundError("Loan not found")
        return loan

    def create_loan(self, data: dict) -> Loan:
        data = ensure_object(data)
        user_id = require_int(data, "userId")
        book_id = require_int(data, "bookId")
        due_date = require_datetime(data, "dueDate")

        if not self.users.get(user_id):
            raise NotFoundError("User not found")

        book = self.books.get(book_id)
        if not book:
            raise NotFoundError("Book not found")
        if book.available <= 0:
            raise ConflictError(BOOK_NOT_AVAILABLE)

        with transaction(self.session):
            # koşullu azaltma: arada başka bir ödünç son kopyayı aldıysa 0 satır döner
            if not self.books.decrement_available(book_id):
                raise ConflictError(BOOK_NOT_AVAILABLE)

            loan = Loan(
                user_id=user_id,
                book_id=book_id,
                borrowed_at=utcnow(),
                due_date=due_date,
                returned_at=None,
            )
            self.loans.add(loan)
            loan_id = loan.id

        current_app.logger.info(
            f"[LoanService] loan {loan_id} created (user={user_id}, book={book_id})"
        )
        return self.get_loan(loan_id)

    def update_loan(self, loan_id: int, data: dict) -> Loan:
        loan = self.loans.get(loan_id)
        if not loan:
            raise NotFoundError("Loan not found")

        data = ensure_object(data)
        for key in ("userId", "bookId"):
            if key in data:
                raise ValidationError(f"{key} cannot be changed on an existing loan")

        due_date = require_datetime(data, "dueDate") if "dueDate" in data else None
        if "returnedAt" in data:
            new_returned_at = optional_datetime(data, "returnedAt")
        else:
            new_returned_at = loan.returned_at

        was_returned = not loan.is_outstanding
        will_be_returned = new_returned_at is not None
        book_id = loan.book_id

        with transaction(self.session):
            if not was_returned and will_be_returned:
                # iade: stok +1, quantity'yi aşamaz
                if not self.books.increment_available(book_id):
                    current_app.logger.warning(
                        f"[LoanService] book {book_id} already at quantity; "
                        f"availability not incremented for loan {loan_id}"
                    )
            elif was_returned and not will_be_returned:
                # iade geri alma: kopya bu arada başka birine verilmiş olabilir
                if not self.books.decrement_available(book_id):
                    raise ConflictError(BOOK_NOT_AVAILABLE)

            loan.returned_at = new_returned_at
            if due_date is not None:
                loan.due_date = due_date

        if was_returned != will_be_returned:
            action = "returned" if will_be_returned else "return reversed"
            current_app.logger.info(f"[LoanService] loan {loan_id} {action} (book={book_id})")
        return self.get_loan(loan_id)

    def delete_loan(self, loan_id: int) -> None:
        loan = self.loans.get(loan_id)
        if not loan:
            raise NotFoundError("Loan not found")
        if loan.is_outstanding:
            raise ConflictError("Cannot delete an outstanding loan")

        # stok iade sırasında zaten geri verildi, Book'a dokunma
        with transaction(self.session):
            self.loans.delete(loan)
        current_app.logger.info(f"[LoanService] loan {loan_id} deleted")
