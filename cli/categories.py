#!/usr/bin/env python3

from cli.serve import open_store
from logger import get_logger

logger = get_logger()


def cmd_list(args, services):
    """List all categories in the database."""
    open_store(services)
    categories = services.categories.find_all()

    if not categories:
        logger.info("No categories found.")
        return

    logger.info("\nCategories:")
    logger.info("=" * 80)
    for category in categories:
        logger.info(f"ID: {category.id}")
        logger.info(f"Name: {category.name}")
        if category.type:
            logger.info(f"Type: {category.type}")
        logger.info("-" * 80)

    logger.info(f"\nTotal categories: {len(categories)}")


def setup_parser(subparsers):
    """Setup categories subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "categories",
        help="Inspect categories",
        description="List transaction categories",
    )

    categories_subparsers = parser.add_subparsers(
        title="subcommands",
        description="Available category commands",
        dest="subcommand",
        required=True,
    )

    list_parser = categories_subparsers.add_parser("list", help="List all categories")
    list_parser.set_defaults(func=cmd_list)
