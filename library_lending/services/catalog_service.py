from flask import current_app

from library_lending.errors import ConflictError, NotFoundError
from library_lending.models.author import Author
from library_lending.models.book import Book
from library_lending.models.category import Category
from library_lending.repositories.author_repo import AuthorRepo
from library_lending.repositories.book_repo import BookRepo
from library_lending.repositories.category_repo import CategoryRepo
from library_lending.utils.validators import optional_int, required_text


class CatalogService:
    # ---- authors
    @staticmethod
    def list_authors():
        return AuthorRepo.list_all()

    @staticmethod
    def get_author(author_id: int):
        author = AuthorRepo.get(author_id)
        if not author:
            raise NotFoundError(f"Author {author_id} not found")
        return author

    @staticmethod
    def create_author(name: str, author_id: int = None):
        author = Author(author_id=author_id, author_name=required_text(name, "author_name"))
        return AuthorRepo.create(author)

    @staticmethod
    def delete_author(author_id: int):
        # books stay, their author_id is set to NULL
        author = CatalogService.get_author(author_id)
        AuthorRepo.delete(author)
        current_app.logger.info(f"[catalog] author={author_id} deleted")

    # ---- categories
    @staticmethod
    def list_categories():
        return CategoryRepo.list_all()

    @staticmethod
    def get_category(category_id: int):
        category = CategoryRepo.get(category_id)
        if not category:
            raise NotFoundError(f"Category {category_id} not found")
        return category

    @staticmethod
    def create_category(name: str, category_id: int = None):
        name = required_text(name, "category_name")
        if CategoryRepo.get_by_name(name):
            raise ConflictError(f"Category '{name}' already exists")
        return CategoryRepo.create(Category(category_id=category_id, category_name=name))

    @staticmethod
    def delete_category(category_id: int):
        category = CatalogService.get_category(category_id)
        CategoryRepo.delete(category)
        current_app.logger.info(f"[catalog] category={category_id} deleted")

    # ---- books
    @staticmethod
    def list_books():
        return BookRepo.list_all()

    @staticmethod
    def get_book(book_id: int):
        book = BookRepo.get(book_id)
        if not book:
            raise NotFoundError(f"Book {book_id} not found")
        return book

    @staticmethod
    def create_book(title: str, author_id: int = None, category_id: int = None,
                    publish_year: int = None, book_id: int = None):
        title = required_text(title, "book_title")
        author_id = optional_int(author_id, "author_id")
        category_id = optional_int(category_id, "category_id")

        if author_id is not None:
            CatalogService.get_author(author_id)
        if category_id is not None:
            CatalogService.get_category(category_id)

        publish_year = optional_int(publish_year, "publish_year")

        # is_available is never taken from the caller
        book = Book(
            book_id=book_id,
            book_title=title,
            author_id=author_id,
            category_id=category_id,
            publish_year=publish_year,
            is_available=True,
        )
        return BookRepo.create(book)

    @staticmethod
    def update_book(book_id: int, data: dict):
        book = CatalogService.get_book(book_id)

        # everything is checked before the book is touched
        changes = {}
        if "book_title" in data:
            changes["book_title"] = required_text(data["book_title"], "book_title")
        if "author_id" in data:
            author_id = optional_int(data["author_id"], "author_id")
            changes["author_id"] = CatalogService.get_author(author_id).author_id if author_id is not None else None
        if "category_id" in data:
            category_id = optional_int(data["category_id"], "category_id")
            changes["category_id"] = (
                CatalogService.get_category(category_id).category_id if category_id is not None else None
            )
        if "publish_year" in data:
            changes["publish_year"] = optional_int(data["publish_year"], "publish_year")

        for field, value in changes.items():
            setattr(book, field, value)
        BookRepo.update()
        return book

    @staticmethod
    def delete_book(book_id: int):
        # borrow records (and their fines) go with the book
        book = CatalogService.get_book(book_id)
        BookRepo.delete(book)
        current_app.logger.info(f"[catalog] book={book_id} deleted")
