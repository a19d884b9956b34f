from datetime import timedelta

import click

from library_api.extensions import db
from library_api.services.author_service import AuthorService
from library_api.services.book_service import BookService
from library_api.services.category_service import CategoryService
from library_api.services.loan_service import LoanService
from library_api.services.user_service import UserService
from library_api.utils.dates import isoformat, utcnow

SEED_CATEGORIES = [
    {"name": "Novel", "description": "Stories and novels"},
    {"name": "Technical", "description": "Programming and technology books"},
    {"name": "History", "description": "History books"},
]

SEED_AUTHORS = [
    {"name": "Haruki Murakami", "bio": "Japanese novelist"},
    {"name": "Robert C. Martin", "bio": "American software engineer"},
    {"name": "Ryotaro Shiba", "bio": "Japanese novelist and historical writer"},
]

# (author index, category indexes, payload)
SEED_BOOKS = [
    (0, [0], {"title": "1Q84", "isbn": "9784103534204", "published": "2009-05-29",
              "description": "A fantasy novel set in an alternate 1984", "quantity": 5}),
    (1, [1], {"title": "Clean Code", "isbn": "9780132350884", "published": "2008-08-01",
              "description": "Writing good code in software development", "quantity": 3}),
    (2, [0, 2], {"title": "Clouds Above the Hill", "isbn": "9784167105075",
                 "published": "1969-09-01", "description": "Historical novel of the Meiji era",
                 "quantity": 2}),
]

SEED_USERS = [
    {"name": "Taro Sato", "email": "taro@example.com", "password": "password123"},
    {"name": "Hanako Suzuki", "email": "hanako@example.com", "password": "password123"},
]


def seed_database(session):
    """Demo verisi; ödünçler LoanService üzerinden açılır ki stok tutarlı kalsın."""
    categories = [CategoryService(session).create_category(c) for c in SEED_CATEGORIES]
    authors = [AuthorService(session).create_author(a) for a in SEED_AUTHORS]

    books = []
    for author_idx, category_idxs, payload in SEED_BOOKS:
        data = dict(payload)
        data["authorId"] = authors[author_idx].id
        data["categoryIds"] = [categories[i].id for i in category_idxs]
        books.append(BookService(session).create_book(data))

    users = [UserService(session).create_user(u) for u in SEED_USERS]

    loans = LoanService(session)
    due = isoformat(utcnow() + timedelta(days=14))
    returned = loans.create_loan({"userId": users[0].id, "bookId": books[0].id, "dueDate": due})
    loans.update_loan(returned.id, {"returnedAt": isoformat(utcnow())})
    loans.create_loan({"userId": users[1].id, "bookId": books[1].id, "dueDate": due})

    return {
        "categories": len(categories),
        "authors": len(authors),
        "books": len(books),
        "users": len(users),
        "loans": 2,
    }


def register_cli(app):
    @app.cli.command("init-db")
    @click.option("--drop", is_flag=True, help="Drop all tables first.")
    def init_db(drop):
        """Create all tables."""
        if drop:
            db.drop_all()
            app.logger.warning("[cli] all tables dropped")
        db.create_all()
        click.echo("Database tables created.")

    @app.cli.command("seed")
    def seed():
        """Load demo data."""
        counts = seed_database(db.session)
        click.echo("Seed data created: " + ", ".join(f"{k}={v}" for k, v in counts.items()))
