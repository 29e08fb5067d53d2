"""Transaction endpoints."""

from flask import Blueprint, jsonify
from api.helpers import get_services, not_found, read_body, store_failure

bp = Blueprint("transactions", __name__, url_prefix="/transactions")


def _fields(data: dict) -> dict:
    return {
        "type": data.get("type"),
        "category": data.get("category"),
        "amount": data.get("amount"),
        "date": data.get("date"),
        "description": data.get("description"),
    }


@bp.route("", methods=["POST"])
def add_transaction():
    fields = _fields(read_body())
    try:
        transaction = get_services().transactions.create(**fields)
        return jsonify(
            {"ok": True, "message": "Transaction added", "id": transaction.id}
        )
    except Exception as e:
        return store_failure(e)


@bp.route("", methods=["GET"])
def list_transactions():
    try:
        transactions = get_services().transactions.find_all()
        return jsonify([t.to_dict() for t in transactions])
    except Exception as e:
        return store_failure(e)


@bp.route("/<transaction_id>", methods=["GET"])
def get_transaction(transaction_id):
    try:
        transaction = get_services().transactions.find(transaction_id)
        if transaction:
            return jsonify(transaction.to_dict())
        return not_found("Transaction not found")
    except Exception as e:
        return store_failure(e)


@bp.route("/<transaction_id>", methods=["PUT"])
def update_transaction(transaction_id):
    fields = _fields(read_body())
    try:
        if get_services().transactions.update(transaction_id, **fields):
            return jsonify(
                {"ok": True, "message": "Transaction updated", "id": transaction_id}
            )
        return not_found("Transaction not found")
    except Exception as e:
        return store_failure(e)


@bp.route("/<transaction_id>", methods=["DELETE"])
def delete_transaction(transaction_id):
    try:
        if get_services().transactions.delete(transaction_id):
            return jsonify(
                {"ok": True, "message": "Transaction deleted", "id": transaction_id}
            )
        return not_found("Transaction not found")
    except Exception as e:
        return store_failure(e)
