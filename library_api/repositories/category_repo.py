from library_api.models.book_category import BookCategory
from library_api.models.category import Category
from library_api.repositories.base import BaseRepo


class CategoryRepo(BaseRepo):
    model = Category

    def get_by_name(self, name: str):
        return self.query().filter_by(name=name).first()

    def find_ids(self, category_ids: list[int]) -> set[int]:
        if not category_ids:
            return set()
        rows = (
            self.session.query(Category.id)
            .filter(Category.id.in_(category_ids))
            .all()
        )
        return {row[0] for row in rows}

    def count_books(self, category_id: int) -> int:
        return (
            self.session.query(BookCategory)
            .filter(BookCategory.category_id == category_id)
            .count()
        )
