"""Category endpoints."""

from flask import Blueprint, jsonify
from api.helpers import get_services, not_found, read_body, store_failure

bp = Blueprint("categories", __name__, url_prefix="/categories")


@bp.route("", methods=["POST"])
def add_category():
    data = read_body()
    try:
        category = get_services().categories.create(data.get("name"), data.get("type"))
        return jsonify({"ok": True, "message": "Category added", "id": category.id})
    except Exception as e:
        return store_failure(e)


@bp.route("", methods=["GET"])
def list_categories():
    try:
        categories = get_services().categories.find_all()
        return jsonify([c.to_dict() for c in categories])
    except Exception as e:
        return store_failure(e)


@bp.route("/<name>", methods=["DELETE"])
def delete_category(name):
    # Transactions filed under the name are removed even when the category is not found
    try:
        if get_services().categories.delete(name):
            return jsonify({"ok": True, "message": "Category deleted", "name": name})
        return not_found("Category not found")
    except Exception as e:
        return store_failure(e)
