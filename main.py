"""
=========================================================
Command-line entry point for the SQLite query client.
=========================================================

Runs a single CRUD operation against a SQLite database using JSON
arguments for conditions and data, and prints the returned rows as JSON
on stdout. Logging goes to stderr.

Usage:
    # All rows
    python main.py select users

    # Filtered rows
    python main.py select users --where '{"id": 5}'

    # Insert and print the new row
    python main.py insert users --data '{"name": "Alice", "age": 30}'

    # Update (null fields are left unchanged)
    python main.py update users --where '{"id": 5}' --data '{"age": 31, "email": null}'

    # Delete
    python main.py delete users --where '{"id": 5}' --db app.db

Exit Codes:
    0: Success
    1: Error
    130: User interrupt (Ctrl+C)
"""

import argparse
import json
import logging
import sys
from typing import Any, List, Optional

from sqlalchemy.exc import SQLAlchemyError

from client import Client, ClientError, RowSet
from core.config import config
from core.logger import get_logger
from sql import Operation, OperationRequest, QueryBuildError
from utils.database_utils import DatabaseConnectionError

logger = get_logger(__name__)


class CommandError(Exception):
    """Exception raised for invalid command-line input."""
    pass


def parse_json_argument(raw: Optional[str], name: str) -> Any:
    """
    Parse a JSON command-line argument.

    Args:
        raw: JSON text, or None when the option was not given
        name: Option name for error messages

    Returns:
        Parsed value, or None when raw is None

    Raises:
        CommandError: If raw is not valid JSON
    """
    if raw is None:
        return None
    try:
        return json.loads(raw)
    except json.JSONDecodeError as e:
        raise CommandError(f"--{name} is not valid JSON: {e}")


def run_operation(
    operation: Operation,
    table: str,
    conditions: Any = None,
    data: Any = None,
    db_path: Optional[str] = None
) -> RowSet:
    """
    Execute one CRUD operation and return its rows.

    Args:
        operation: Operation kind
        table: Target table
        conditions: Parsed --where payload
        data: Parsed --data payload
        db_path: Database path (defaults to config.db_path)

    Returns:
        Rows returned by the statement
    """
    request = OperationRequest(
        table_name=table,
        operation=operation,
        conditions=conditions,
        data=data
    )
    with Client(db_path) as client:
        return client.query(request)


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line argument parser."""
    parser = argparse.ArgumentParser(
        description="Run a JSON-described CRUD operation against SQLite",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py select users --where '{"id": 5}'
  python main.py insert users --data '{"name": "Alice", "age": 30}'
  python main.py update users --where '{"id": 5}' --data '{"age": 31}'
  python main.py delete users --where '{"id": 5}'

Update and delete require --where.
        """
    )

    parser.add_argument(
        'operation',
        choices=[operation.value for operation in Operation],
        help='Operation to run'
    )
    parser.add_argument(
        'table',
        help='Target table name'
    )
    parser.add_argument(
        '--where',
        type=str,
        default=None,
        help='JSON object of column equality conditions'
    )
    parser.add_argument(
        '--data',
        type=str,
        default=None,
        help='JSON object of column values (insert/update)'
    )
    parser.add_argument(
        '--db',
        type=str,
        default=None,
        help=f'SQLite database path (default: {config.db_path})'
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable verbose logging (DEBUG level)'
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Command-line interface.

    Args:
        argv: Arguments to parse (defaults to sys.argv[1:])

    Returns:
        Process exit code
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)
        for handler in logging.getLogger().handlers:
            handler.setLevel(logging.DEBUG)

    try:
        rows = run_operation(
            operation=Operation(args.operation),
            table=args.table,
            conditions=parse_json_argument(args.where, 'where'),
            data=parse_json_argument(args.data, 'data'),
            db_path=args.db
        )
        print(json.dumps(rows, indent=2, default=str))
        logger.info(f"✅ {args.operation} on '{args.table}' returned {len(rows)} row(s)")
        return 0

    except (CommandError, QueryBuildError) as e:
        logger.error(f"❌ Invalid request: {e}")
        return 1
    except (DatabaseConnectionError, ClientError) as e:
        logger.error(f"❌ Client error: {e}")
        return 1
    except SQLAlchemyError as e:
        logger.error(f"❌ Database error: {e}")
        return 1
    except KeyboardInterrupt:
        logger.warning("⚠️  Operation interrupted by user")
        return 130


if __name__ == '__main__':
    sys.exit(main())
