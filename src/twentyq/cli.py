# Area: Shared
"""
twentyq.cli — Command-line interface
====================================

Provides the CLI entry point for running the game server.

Usage:
    twentyq                                  # Serve with .env / environment config
    twentyq --config config.json --port 8080
    twentyq --init-db                        # Create ledger tables and exit
    python -m twentyq --answers answers.json
"""

import argparse
import sys
from typing import Any, Dict, List, Optional

import uvicorn

from .config import load_config
from ._shared.logging_config import setup_logging


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Daily 20 Questions game server",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  twentyq
  twentyq --config config.json
  twentyq --answers data/answers.json --port 8080
  LEDGER_DATABASE_URL=sqlite:///scores.db twentyq --init-db
        """,
    )

    parser.add_argument("--config", type=str, help="Path to JSON config file")
    parser.add_argument("--host", type=str, help="Interface to bind (default: 0.0.0.0)")
    parser.add_argument("--port", type=int, help="Port to listen on (default: 3000)")
    parser.add_argument("--answers", type=str, help="Path to the answers JSON file")
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)",
    )
    parser.add_argument(
        "--init-db",
        action="store_true",
        help="Create the score ledger tables and exit",
    )

    return parser.parse_args(argv)


def apply_overrides(config: Dict[str, Any], args: argparse.Namespace) -> Dict[str, Any]:
    """CLI flags win over file and environment values."""
    overrides = {
        "host": args.host,
        "port": args.port,
        "answers_file": args.answers,
        "log_level": args.log_level,
    }
    config.update({k: v for k, v in overrides.items() if v is not None})
    return config


def init_db(config: Dict[str, Any]) -> int:
    from ._services.database import get_engine, init_database

    if not config.get("ledger_url"):
        print("Error: LEDGER_DATABASE_URL is not set.", file=sys.stderr)
        return 1
    init_database(get_engine(config["ledger_url"]))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = parse_args(argv)
    try:
        config = apply_overrides(load_config(args.config), args)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    setup_logging(config["log_file"], config["log_level"])

    if args.init_db:
        return init_db(config)

    # Imported here so --help and --init-db do not build the app
    from .api import create_app

    app = create_app(config)
    uvicorn.run(app, host=config["host"], port=config["port"], log_level="info")
    return 0
