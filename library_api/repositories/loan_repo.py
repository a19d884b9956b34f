from sqlalchemy.orm import joinedload

from library_api.models.book import Book
from library_api.models.loan import Loan
from library_api.repositories.base import BaseRepo
from library_api.utils.pagination import Page, paginate


class LoanRepo(BaseRepo):
    model = Loan

    def _with_relations(self):
        return self.query().options(
            joinedload(Loan.user),
            joinedload(Loan.book).joinedload(Book.author),
        )

    def get_detailed(self, loan_id: int):
        return self._with_relations().filter(Loan.id == loan_id).one_or_none()

    def list_page(self, page: int, limit: int, active_only: bool = False) -> Page:
        query = self._with_relations()
        if active_only:
            query = query.filter(Loan.returned_at.is_(None))
        query = query.order_by(Loan.borrowed_at.desc(), Loan.id.desc())
        return paginate(query, page, limit)

    def count_outstanding_for_user(self, user_id: int) -> int:
        return (
            self.query()
            .filter(Loan.user_id == user_id, Loan.returned_at.is_(None))
            .count()
        )
