from library_api.extensions import db
from library_api.utils.dates import utcnow


class Book(db.Model):
    __tablename__ = "books"
    __table_args__ = (
        db.CheckConstraint("available >= 0", name="ck_books_available_non_negative"),
        db.CheckConstraint("available <= quantity", name="ck_books_available_le_quantity"),
    )

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(200), nullable=False, index=True)
    isbn = db.Column(db.String(32), unique=True, nullable=False, index=True)
    description = db.Column(db.Text, nullable=True)
    published = db.Column(db.DateTime, nullable=False)

    # quantity: toplam kopya, available: ödünçte olmayan kopya
    quantity = db.Column(db.Integer, nullable=False, default=1)
    available = db.Column(db.Integer, nullable=False, default=1)

    author_id = db.Column(db.Integer, db.ForeignKey("authors.id"), nullable=False, index=True)

    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)
    updated_at = db.Column(db.DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    author = db.relationship("Author", back_populates="books")
    category_links = db.relationship(
        "BookCategory",
        back_populates="book",
        order_by="BookCategory.category_id",
        passive_deletes="all",
    )
    loans = db.relationship(
        "Loan",
        back_populates="book",
        order_by="Loan.borrowed_at.desc()",
        passive_deletes="all",
    )
