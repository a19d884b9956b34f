from library_api.extensions import db
from library_api.utils.dates import utcnow


class Author(db.Model):
    __tablename__ = "authors"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(200), nullable=False, index=True)
    bio = db.Column(db.Text, nullable=True)

    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)
    updated_at = db.Column(db.DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    books = db.relationship(
        "Book",
        back_populates="author",
        order_by="Book.id",
        passive_deletes="all",
    )
