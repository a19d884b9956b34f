from library_api.models.loan import Loan
from library_api.models.user import User
from library_api.repositories.base import BaseRepo


class UserRepo(BaseRepo):
    model = User

    def get_by_email(self, email: str):
        return self.query().filter_by(email=email).first()

    def delete_loan_history(self, user_id: int) -> int:
        return (
            self.session.query(Loan)
            .filter(Loan.user_id == user_id)
            .delete(synchronize_session="fetch")
        )
