"""Flask application factory for the Tally HTTP API."""

from flask import Flask
from flask_cors import CORS

from api import categories, summary, transactions


def create_app(services, config=None) -> Flask:
    """Build the Flask app around a services container.

    Args:
        services: Services container used by every handler.
        config: Optional Config; defaults to services.config.

    Returns:
        Configured Flask application.
    """
    config = config or services.config

    app = Flask(__name__)
    app.config["SERVICES"] = services
    app.json.sort_keys = False

    CORS(app, origins=config.cors_origins)

    app.register_blueprint(transactions.bp)
    app.register_blueprint(categories.bp)
    app.register_blueprint(summary.bp)

    return app
