#!/usr/bin/env python3

import sys
from api.app import create_app
from logger import get_logger

logger = get_logger()


def open_store(services):
    """Open the store and apply the schema, exiting the process on failure."""
    try:
        services.db_manager.open()
        services.db_manager.init_schema()
    except Exception as e:
        logger.error(f"Error: {e}")
        sys.exit(1)


def cmd_serve(args, services):
    """Open the store and start the HTTP server."""
    config = services.config
    host = args.host or config.server_host
    port = args.port or config.server_port

    open_store(services)
    logger.info(f"Using database {services.db_manager.get_db_path()}")

    app = create_app(services)
    logger.info(f"Server started at port {port}")
    try:
        app.run(host=host, port=port)
    finally:
        services.db_manager.close()


def setup_parser(subparsers):
    """Setup serve subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "serve",
        help="Run the HTTP API",
        description="Open the database and serve the bookkeeping API",
    )
    parser.add_argument("--host", help="Interface to bind (default from config)")
    parser.add_argument(
        "--port", type=int, help="Port to listen on (default from config)"
    )
    parser.set_defaults(func=cmd_serve)
