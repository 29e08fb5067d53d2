#!/usr/bin/env python3

from cli.serve import open_store
from logger import get_logger

logger = get_logger()


def cmd_summary(args, services):
    """Show income, expense and balance totals."""
    open_store(services)
    summary = services.transactions.summarize()

    logger.info(f"Total income:   {summary.total_income}")
    logger.info(f"Total expenses: {summary.total_expenses}")
    logger.info(f"Balance:        {summary.balance}")


def setup_parser(subparsers):
    parser = subparsers.add_parser(
        "summary",
        help="Show income/expense totals",
        description="Compute totals over all transactions",
    )
    parser.set_defaults(func=cmd_summary)
