# library_lending/controllers/book_controller.py

from flask import Blueprint, request, jsonify
from library_lending.services.catalog_service import CatalogService

book_bp = Blueprint("books", __name__)


def _book_json(b):
    return {
        "book_id": b.book_id,
        "book_title": b.book_title,
        "author_id": b.author_id,
        "author_name": b.author.author_name if b.author else None,
        "category_id": b.category_id,
        "category_name": b.category.category_name if b.category else None,
        "publish_year": b.publish_year,
        "is_available": bool(b.is_available),
    }


@book_bp.get("/", strict_slashes=False)
def list_books():
    books = CatalogService.list_books()
    return jsonify({"success": True, "data": [_book_json(b) for b in books]})


@book_bp.get("/<int:book_id>")
def get_book(book_id: int):
    b = CatalogService.get_book(book_id)
    return jsonify({"success": True, "data": _book_json(b)})


@book_bp.post("/", strict_slashes=False)
def create_book():
    data = request.get_json(silent=True) or {}
    # is_available in the body is ignored on purpose
    b = CatalogService.create_book(
        data.get("book_title"),
        author_id=data.get("author_id"),
        category_id=data.get("category_id"),
        publish_year=data.get("publish_year"),
    )
    return jsonify({"success": True, "data": _book_json(b)}), 201


@book_bp.put("/<int:book_id>")
def update_book(book_id: int):
    data = request.get_json(silent=True) or {}
    data.pop("is_available", None)
    b = CatalogService.update_book(book_id, data)
    return jsonify({"success": True, "data": _book_json(b)})


@book_bp.delete("/<int:book_id>")
def delete_book(book_id: int):
    CatalogService.delete_book(book_id)
    return jsonify({"success": True})
