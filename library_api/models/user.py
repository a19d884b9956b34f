from library_api.extensions import db
from library_api.utils.dates import utcnow


class User(db.Model):
    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(200), nullable=False)
    email = db.Column(db.String(255), unique=True, nullable=False, index=True)

    # hash yok, verildiği gibi saklanır; yanıtlara asla eklenmez
    password = db.Column(db.String(255), nullable=False)

    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)
    updated_at = db.Column(db.DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    loans = db.relationship(
        "Loan",
        back_populates="user",
        order_by="Loan.borrowed_at.desc()",
        passive_deletes="all",
    )
