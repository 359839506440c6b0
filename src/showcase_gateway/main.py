#!/usr/bin/env python3
"""Command-line entry point for read-only gateway calls."""

import argparse
import asyncio
import json
import logging
import os
import sys
from typing import Any, List, Optional

import httpx
from dotenv import load_dotenv

from .config import ConfigurationError, GatewayConfig
from .exceptions import GatewayError
from .services import RemoteDataGateway

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    log_level = os.environ.get("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="showcase-gateway",
        description="Query the project showcase API through the remote data gateway",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    projects = commands.add_parser("projects", help="List one page of projects")
    projects.add_argument("--category", default=None, help="Only projects in this category")
    projects.add_argument("--cursor", default=None, help="Pagination cursor from a previous page")

    project = commands.add_parser("project", help="Show one project")
    project.add_argument("id")

    user = commands.add_parser("user", help="Look up a user by email")
    user.add_argument("email")

    user_projects = commands.add_parser("user-projects", help="Show a user's recent projects")
    user_projects.add_argument("id")
    user_projects.add_argument("--last", type=int, default=None, help="Number of projects (server default: 4)")

    commands.add_parser("token", help="Fetch the session token from the app server")
    commands.add_parser("config", help="Print the resolved configuration")

    return parser


async def run_command(args: argparse.Namespace, config: GatewayConfig) -> Any:
    """Execute the selected command and return its JSON-serializable result."""
    if args.command == "config":
        result = config.validate()
        return {"config": config.to_dict(), "valid": result.success, "errors": result.errors}

    async with RemoteDataGateway(config) as gateway:
        if args.command == "projects":
            return await gateway.fetch_all_projects(args.category, args.cursor)
        if args.command == "project":
            return await gateway.get_project_details(args.id)
        if args.command == "user":
            return await gateway.get_user(args.email)
        if args.command == "user-projects":
            return await gateway.get_user_projects(args.id, args.last)
        if args.command == "token":
            return await gateway.fetch_token()

    raise ValueError(f"Unknown command: {args.command}")


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the gateway CLI."""
    args = build_parser().parse_args(argv)

    # Load .env for development; production uses the shell environment
    load_dotenv()
    configure_logging()

    config = GatewayConfig.from_environment()
    logger.debug("Running %s against %r", args.command, config)
    try:
        if args.command != "config":
            config.validate_or_raise()
        result = asyncio.run(run_command(args, config))
    except GatewayError as e:
        print(f"Error [{e.error_code}]: {e}", file=sys.stderr)
        sys.exit(1)
    except (ConfigurationError, httpx.HTTPError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
