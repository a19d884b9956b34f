from flask import current_app

from library_api.errors import ConflictError, NotFoundError
from library_api.models.category import Category
from library_api.repositories.category_repo import CategoryRepo
from library_api.utils.transaction import transaction
from library_api.utils.validators import ensure_object, optional_str, require_str


class CategoryService:
    def __init__(self, session):
        self.session = session
        self.categories = CategoryRepo(session)

    def list_categories(self, page: int, limit: int):
        return self.categories.list_page(page, limit)

    def get_category(self, category_id: int) -> Category:
        category = self.categories.get(category_id)
        if not category:
            raise NotFoundError("Category not found")
        return category

    def create_category(self, data: dict) -> Category:
        data = ensure_object(data)
        name = require_str(data, "name")
        if self.categories.get_by_name(name):
            raise ConflictError("Category name is already in use")

        category = Category(name=name, description=optional_str(data, "description"))
        with transaction(self.session):
            self.categories.add(category)
            category_id = category.id
        return self.get_category(category_id)

    def update_category(self, category_id: int, data: dict) -> Category:
        category = self.get_category(category_id)
        data = ensure_object(data)

        changes = {}
        if "name" in data:
            name = require_str(data, "name")
            if name != category.name and self.categories.get_by_name(name):
                raise ConflictError("Category name is already in use")
            changes["name"] = name
        if "description" in data:
            changes["description"] = optional_str(data, "description")

        with transaction(self.session):
            for key, value in changes.items():
                setattr(category, key, value)
        return self.get_category(category_id)

    def delete_category(self, category_id: int) -> None:
        category = self.get_category(category_id)
        if self.categories.count_books(category_id) > 0:
            raise ConflictError("Cannot delete a category that is assigned to books")

        with transaction(self.session):
            self.categories.delete(category)
        current_app.logger.info(f"[CategoryService] category {category_id} deleted")
