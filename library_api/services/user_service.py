from flask import current_app

from library_api.errors import ConflictError, NotFoundError
from library_api.models.user import User
from library_api.repositories.loan_repo import LoanRepo
from library_api.repositories.user_repo import UserRepo
from library_api.utils.transaction import transaction
from library_api.utils.validators import ensure_object, require_email, require_str


class UserService:
    def __init__(self, session):
        self.session = session
        self.users = UserRepo(session)
        self.loans = LoanRepo(session)

    def list_users(self, page: int, limit: int):
        return self.users.list_page(page, limit)

    def get_user(self, user_id: int) -> User:
        user = self.users.get(user_id)
        if not user:
            raise NotFoundError("User not found")
        return user

    def create_user(self, data: dict) -> User:
        data = ensure_object(data)
        name = require_str(data, "name")
        email = require_email(data)
        password = require_str(data, "password")

        if self.users.get_by_email(email):
            raise ConflictError("Email is already in use")

        with transaction(self.session):
            user = self.users.add(User(name=name, email=email, password=password))
            user_id = user.id
        return self.get_user(user_id)

    def update_user(self, user_id: int, data: dict) -> User:
        user = self.get_user(user_id)
        data = ensure_object(data)

        changes = {}
        if "name" in data:
            changes["name"] = require_str(data, "name")
        if "email" in data:
            email = require_email(data)
            if email != user.email and self.users.get_by_email(email):
                raise ConflictError("Email is already in use")
            changes["email"] = email
        if "password" in data:
            changes["password"] = require_str(data, "password")

        with transaction(self.session):
            for key, value in changes.items():
                setattr(user, key, value)
        return self.get_user(user_id)

    def delete_user(self, user_id: int) -> None:
        user = self.get_user(user_id)
        if self.loans.count_outstanding_for_user(user_id) > 0:
            raise ConflictError("Cannot delete a user with outstanding loans")

        # iade edilmiş ödünç geçmişi kullanıcıyla birlikte silinir
        with transaction(self.session):
            removed = self.users.delete_loan_history(user_id)
            self.users.delete(user)
        current_app.logger.info(
            f"[UserService] user {user_id} deleted ({removed} returned loans removed)"
        )
