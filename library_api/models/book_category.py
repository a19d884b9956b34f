from library_api.extensions import db


class BookCategory(db.Model):
    """Book <-> Category join row; the pair is its identity."""

    __tablename__ = "book_categories"

    book_id = db.Column(db.Integer, db.ForeignKey("books.id"), primary_key=True)
    category_id = db.Column(db.Integer, db.ForeignKey("categories.id"), primary_key=True, index=True)

    book = db.relationship("Book", back_populates="category_links")
    category = db.relationship("Category", back_populates="book_links")
