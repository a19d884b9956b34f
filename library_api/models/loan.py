from library_api.extensions import db
from library_api.utils.dates import utcnow


class Loan(db.Model):
    __tablename__ = "loans"

    id = db.Column(db.Integer, primary_key=True)

    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False, index=True)
    book_id = db.Column(db.Integer, db.ForeignKey("books.id"), nullable=False, index=True)

    borrowed_at = db.Column(db.DateTime, nullable=False, default=utcnow, index=True)
    due_date = db.Column(db.DateTime, nullable=False)
    # None => ödünçte (outstanding)
    returned_at = db.Column(db.DateTime, nullable=True, index=True)

    user = db.relationship("User", back_populates="loans")
    book = db.relationship("Book", back_populates="loans")

    @property
    def is_outstanding(self) -> bool:
        return self.returned_at is None
