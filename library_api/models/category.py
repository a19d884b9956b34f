from library_api.extensions import db
from library_api.utils.dates import utcnow


class Category(db.Model):
    __tablename__ = "categories"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), unique=True, nullable=False, index=True)
    description = db.Column(db.Text, nullable=True)

    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)
    updated_at = db.Column(db.DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    book_links = db.relationship(
        "BookCategory",
        back_populates="category",
        order_by="BookCategory.book_id",
        passive_deletes="all",
    )
