# library_lending/controllers/catalog_controller.py

from flask import Blueprint, request, jsonify
from library_lending.services.catalog_service import CatalogService

catalog_bp = Blueprint("catalog", __name__)


def _author_json(a):
    return {"author_id": a.author_id, "author_name": a.author_name}


def _category_json(c):
    return {"category_id": c.category_id, "category_name": c.category_name}


@catalog_bp.get("/authors")
def list_authors():
    return jsonify({"success": True, "data": [_author_json(a) for a in CatalogService.list_authors()]})


@catalog_bp.post("/authors")
def create_author():
    data = request.get_json(silent=True) or {}
    a = CatalogService.create_author(data.get("author_name"))
    return jsonify({"success": True, "data": _author_json(a)}), 201


@catalog_bp.delete("/authors/<int:author_id>")
def delete_author(author_id: int):
    CatalogService.delete_author(author_id)
    return jsonify({"success": True})


@catalog_bp.get("/categories")
def list_categories():
    return jsonify({"success": True, "data": [_category_json(c) for c in CatalogService.list_categories()]})


@catalog_bp.post("/categories")
def create_category():
    data = request.get_json(silent=True) or {}
    c = CatalogService.create_category(data.get("category_name"))
    return jsonify({"success": True, "data": _category_json(c)}), 201


@catalog_bp.delete("/categories/<int:category_id>")
def delete_category(category_id: int):
    CatalogService.delete_category(category_id)
    return jsonify({"success": True})
