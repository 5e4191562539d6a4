"""
Command-line interface for inspecting orders and shipments.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Callable, Dict, Iterable, Sequence, TextIO, Tuple

from .api import create_api_client
from .core.client import ApiClient
from .core.config import load_client_config
from .core.errors import ApiError, ConfigError
from .core.resources import BaseCollection, BaseResource

_RESOURCES = ("orders",)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(message)s",
    )


def _env_override(value: str) -> Tuple[str, str]:
    if "=" not in value:
        raise argparse.ArgumentTypeError("Overrides must look like KEY=VALUE")
    key, val = value.split("=", 1)
    key = key.strip()
    if not key:
        raise argparse.ArgumentTypeError("Override key must not be empty")
    return key, val


def _collect_overrides(pairs: Iterable[Tuple[str, str]]) -> dict[str, str]:
    return {key: value for key, value in pairs}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="payrest",
        description="Inspect orders and shipments through the payments API",
    )
    parser.add_argument(
        "--env-file",
        default=".env",
        help="Path to the .env file containing PAYREST_* settings (default: .env)",
    )
    parser.add_argument(
        "--set",
        action="append",
        type=_env_override,
        metavar="KEY=VALUE",
        default=None,
        help="Override an environment variable without editing the .env file",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Python logging level (default: INFO)",
    )

    commands = parser.add_subparsers(dest="command", required=True)

    get_parser = commands.add_parser("get", help="Retrieve a single resource")
    get_parser.add_argument("resource", choices=_RESOURCES)
    get_parser.add_argument("id")

    list_parser = commands.add_parser("list", help="Retrieve one page of resources")
    list_parser.add_argument("resource", choices=_RESOURCES)
    list_parser.add_argument(
        "--from",
        dest="from_",
        default=None,
        help="Id of the first resource to include",
    )
    list_parser.add_argument("--limit", type=int, default=None)

    shipments_parser = commands.add_parser(
        "shipments", help="List the shipments of an order"
    )
    shipments_parser.add_argument("order_id")

    return parser


def _render_resource(resource: BaseResource) -> Dict[str, Any]:
    return resource.to_dict()


def _render_collection(collection: BaseCollection) -> Dict[str, Any]:
    return {
        "count": collection.count,
        "items": [item.to_dict() for item in collection],
        "next": collection.next_page_parameters(),
        "previous": collection.previous_page_parameters(),
    }


def _run_get(client: ApiClient, args: argparse.Namespace) -> Dict[str, Any]:
    endpoint = getattr(client, args.resource)
    return _render_resource(endpoint.read(args.id))


def _run_list(client: ApiClient, args: argparse.Namespace) -> Dict[str, Any]:
    endpoint = getattr(client, args.resource)
    return _render_collection(endpoint.list(args.from_, args.limit))


def _run_shipments(client: ApiClient, args: argparse.Namespace) -> Dict[str, Any]:
    return _render_collection(client.shipments.list_for(args.order_id))


_COMMANDS: Dict[str, Callable[[ApiClient, argparse.Namespace], Dict[str, Any]]] = {
    "get": _run_get,
    "list": _run_list,
    "shipments": _run_shipments,
}


def run_cli(
    argv: Sequence[str] | None = None,
    *,
    client: ApiClient | None = None,
    stdout: TextIO | None = None,
) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    out = stdout or sys.stdout

    _configure_logging(args.log_level)

    if client is None:
        overrides = _collect_overrides(args.set or ())
        try:
            config = load_client_config(env_file=args.env_file, overrides=overrides)
        except (ConfigError, ValueError) as exc:
            logging.error("Invalid configuration: %s", exc)
            return 1
        client = create_api_client(config=config)

    try:
        result = _COMMANDS[args.command](client, args)
    except ApiError as exc:
        logging.error("API call failed: %s", exc)
        return 1

    json.dump(result, out, indent=2, sort_keys=True)
    out.write("\n")
    return 0


def main() -> None:
    sys.exit(run_cli())
