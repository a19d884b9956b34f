"""Response projection.

Models keep the normalized shape (``Book.category_links`` rows); these
functions build the flat camelCase JSON the API returns. Passwords are never
part of any projection.
"""
from library_api.utils.dates import isoformat


def _timestamps(entity) -> dict:
    return {
        "createdAt": isoformat(entity.created_at),
        "updatedAt": isoformat(entity.updated_at),
    }


def user_summary(user) -> dict:
    return {"id": user.id, "name": user.name, "email": user.email}


def user_to_dict(user, include_loans: bool = False) -> dict:
    data = {**user_summary(user), **_timestamps(user)}
    if include_loans:
        data["loans"] = [
            {**loan_fields(loan), "book": book_to_dict(loan.book, include_author=True)}
            for loan in user.loans
        ]
    return data


def author_to_dict(author, include_books: bool = False) -> dict:
    data = {
        "id": author.id,
        "name": author.name,
        "bio": author.bio,
        **_timestamps(author),
    }
    if include_books:
        data["books"] = [book_to_dict(b, include_categories=True) for b in author.books]
    return data


def category_to_dict(category, include_books: bool = False) -> dict:
    data = {
        "id": category.id,
        "name": category.name,
        "description": category.description,
        **_timestamps(category),
    }
    if include_books:
        # join satırları düzleştirilir: [{book: {...}}] -> [{...}]
        data["books"] = [
            book_to_dict(link.book, include_author=True) for link in category.book_links
        ]
    return data


def book_to_dict(
    book,
    include_author: bool = False,
    include_categories: bool = False,
    include_loans: bool = False,
) -> dict:
    data = {
        "id": book.id,
        "title": book.title,
        "isbn": book.isbn,
        "description": book.description,
        "published": isoformat(book.published),
        "quantity": book.quantity,
        "available": book.available,
        "authorId": book.author_id,
        **_timestamps(book),
    }
    if include_author:
        data["author"] = author_to_dict(book.author) if book.author else None
    if include_categories:
        data["categories"] = [category_to_dict(link.category) for link in book.category_links]
    if include_loans:
        data["loans"] = [
            {**loan_fields(loan), "user": user_summary(loan.user)} for loan in book.loans
        ]
    return data


def book_detail(book) -> dict:
    return book_to_dict(book, include_author=True, include_categories=True, include_loans=True)


def book_list_item(book) -> dict:
    return book_to_dict(book, include_author=True, include_categories=True)


def loan_fields(loan) -> dict:
    return {
        "id": loan.id,
        "userId": loan.user_id,
        "bookId": loan.book_id,
        "borrowedAt": isoformat(loan.borrowed_at),
        "dueDate": isoformat(loan.due_date),
        "returnedAt": isoformat(loan.returned_at),
    }


def loan_to_dict(loan) -> dict:
    return {
        **loan_fields(loan),
        "user": user_summary(loan.user),
        "book": book_to_dict(loan.book, include_author=True),
    }


def page_to_dict(page, serialize) -> dict:
    return {"data": [serialize(item) for item in page.items], "meta": page.meta()}
