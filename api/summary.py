"""Summary endpoint."""

from flask import Blueprint, jsonify
from api.helpers import get_services, store_failure

bp = Blueprint("summary", __name__)


@bp.route("/summary", methods=["GET"])
def get_summary():
    try:
        return jsonify(get_services().transactions.summarize().to_dict())
    except Exception as e:
        return store_failure(e)
