"""
todoapp - command line access to the todo-app backend

Runs a single operation against the backend and prints the resulting
Ok/Err envelope as JSON.
"""

import asyncio
import json
import logging
import sys
import argparse
from typing import List, Optional

from pydantic import ValidationError

from . import __version__
from .api import TodoAppClient, operation_registry
from .config import ConfigManager, get_config


def setup_logging(config: Optional[ConfigManager] = None):
    """Configure logging for the command line."""
    config = config or get_config()
    level = getattr(logging, str(config.get("logging.level", "INFO")).upper(), logging.INFO)
    format_str = config.get("logging.format", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    logging.basicConfig(
        level=level,
        format=format_str,
        handlers=[logging.StreamHandler(sys.stderr)]
    )


def parse_arguments(argv: Optional[List[str]] = None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="todoapp",
        description="todoapp - call a todo-app backend operation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  todoapp --list                                               # Show every operation and its path
  todoapp goal_intent_new --api-key KEY --props '{"name": "Learn piano"}'
  todoapp goal_data_view --api-key KEY --props '{"onlyRecent": true}'
  todoapp info --server https://todo.example.com/public/      # Query a specific deployment
        """
    )

    parser.add_argument(
        "operation",
        nargs="?",
        help="Operation to run (see --list)"
    )

    parser.add_argument(
        "--api-key",
        type=str,
        help="API key sent with the request"
    )

    parser.add_argument(
        "--props",
        type=str,
        default="{}",
        help="Request parameters as a JSON object using the backend's field names"
    )

    parser.add_argument(
        "--server",
        type=str,
        help="Base URL override (defaults to the configured server)"
    )

    parser.add_argument(
        "--config",
        type=str,
        help="Path to a configuration file (default: config.yaml)"
    )

    parser.add_argument(
        "--list",
        action="store_true",
        help="List all operations and exit"
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"todoapp {__version__}"
    )

    return parser.parse_args(argv)


def list_operations() -> None:
    """Print every registered operation with its path."""
    for name in operation_registry.list_operations():
        spec = operation_registry.get_operation(name)
        print(f"{name:32} {spec.path:32} {spec.description}")


async def run_operation(name: str, props: dict, server: Optional[str], config: ConfigManager) -> dict:
    """Run one operation and return its result envelope."""
    client = TodoAppClient(config=config)
    result = await client.run(name, props, server=server)
    return result.to_envelope()


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_arguments(argv)
    config = ConfigManager(args.config) if args.config else get_config()
    setup_logging(config)

    if args.list:
        list_operations()
        return 0

    if not args.operation:
        print("No operation given. Use --list to see the available operations.", file=sys.stderr)
        return 2

    spec = operation_registry.get_operation(args.operation)
    if spec is None:
        print(f"Unknown operation: {args.operation}", file=sys.stderr)
        return 2

    try:
        props = json.loads(args.props)
    except json.JSONDecodeError as e:
        print(f"--props is not valid JSON: {e}", file=sys.stderr)
        return 2

    if not isinstance(props, dict):
        print("--props must be a JSON object", file=sys.stderr)
        return 2

    if args.api_key is not None and spec.name != "info":
        props["apiKey"] = args.api_key

    logging.debug(f"Running {spec.name} against {args.server or 'the configured server'}")

    try:
        envelope = asyncio.run(run_operation(spec.name, props, args.server, config))
    except ValidationError as e:
        print(f"Invalid parameters for {spec.name}: {e}", file=sys.stderr)
        return 2
    except ValueError as e:
        # unknown url_convention or decode_strategy
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    print(json.dumps(envelope, indent=2))
    return 0 if "Ok" in envelope else 1


if __name__ == "__main__":
    sys.exit(main())
