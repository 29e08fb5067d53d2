#!/usr/bin/env python3

from cli.serve import open_store
from logger import get_logger

logger = get_logger()


def cmd_list(args, services):
    """List all transactions in the database."""
    open_store(services)
    transactions = services.transactions.find_all()

    if not transactions:
        logger.info("No transactions found.")
        return

    logger.info("\nTransactions:")
    logger.info("=" * 80)
    for t in transactions:
        logger.info(
            f"{t.id:>6}  {t.date or '':<12} {t.type or '':<8} "
            f"{t.category or '':<20} {t.amount!s:>12}  {t.description or ''}"
        )

    logger.info(f"\nTotal transactions: {len(transactions)}")


def setup_parser(subparsers):
    """Setup transactions subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "transactions",
        help="Inspect transactions",
        description="List recorded transactions",
    )

    transactions_subparsers = parser.add_subparsers(
        title="subcommands",
        description="Available transaction commands",
        dest="subcommand",
        required=True,
    )

    list_parser = transactions_subparsers.add_parser(
        "list", help="List all transactions"
    )
    list_parser.set_defaults(func=cmd_list)
