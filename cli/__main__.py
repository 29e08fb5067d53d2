#!/usr/bin/env python3
"""
Tally CLI - run the bookkeeping API and inspect its data.

Usage:
    python -m cli <command> [subcommand] [options]

Commands:
    serve        Run the HTTP API
    transactions Inspect transactions
    categories   Inspect categories
    summary      Show income/expense totals

Examples:
    python -m cli serve
    python -m cli serve --port 8080
    python -m cli transactions list
    python -m cli summary
"""

import sys
import argparse
from cli import categories, serve, summary, transactions
from config import load_config
from services.base import Services
from logger import setup_logging


def main(argv=None):
    """Main CLI entry point with subcommands."""
    parser = argparse.ArgumentParser(
        prog="cli",
        description="Tally - Personal finance bookkeeping service",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
        required=True,
    )

    serve.setup_parser(subparsers)
    transactions.setup_parser(subparsers)
    categories.setup_parser(subparsers)
    summary.setup_parser(subparsers)

    args = parser.parse_args(argv)

    if hasattr(args, "func"):
        try:
            config = load_config()
            setup_logging(config)

            # Create services container for dependency injection
            services = Services(config)
            args.func(args, services)
        except Exception as e:
            print(f"Error: {e}")
            sys.exit(1)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
