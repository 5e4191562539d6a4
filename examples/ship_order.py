"""
Minimal script that uses the public API to ship every open line of an order.
"""

from __future__ import annotations

import argparse
import logging
import sys

from payrest import ApiError, ConfigError, create_api_client, load_client_config


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Ship all lines of an order")
    parser.add_argument("order_id", help="Id of the order to ship, e.g. ord_8wmqcHMN4U")
    parser.add_argument(
        "--env-file",
        default=".env",
        help="Path to the .env file containing PAYREST_* settings",
    )
    parser.add_argument(
        "--api-key",
        help="Provide the API key without relying on environment data",
    )
    parser.add_argument(
        "--carrier",
        help="Carrier name to attach as tracking information",
    )
    parser.add_argument(
        "--tracking-code",
        help="Tracking code to attach as tracking information",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Python logging level (default: INFO)",
    )
    return parser.parse_args()


def main() -> int:
    args = parse_args()
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(message)s",
    )

    try:
        config = load_client_config(env_file=args.env_file, api_key=args.api_key)
    except (ConfigError, ValueError) as exc:
        logging.error("Invalid configuration: %s", exc)
        return 1

    client = create_api_client(config=config)

    try:
        order = client.orders.get(args.order_id)
    except ApiError as exc:
        logging.error("Could not retrieve order %s: %s", args.order_id, exc)
        return 1

    if not (order.is_paid() or order.is_authorized() or order.is_shipping()):
        logging.error("Order %s cannot be shipped in status %s", order.id, order.status)
        return 1

    options = {}
    if args.carrier and args.tracking_code:
        options["tracking"] = {"carrier": args.carrier, "code": args.tracking_code}

    try:
        shipment = order.ship_all(options)
    except ApiError as exc:
        logging.error("Shipment failed: %s", exc)
        return 1

    logging.info(
        "Created shipment %s with %d lines for order %s",
        shipment.id,
        len(shipment.get_lines()),
        order.id,
    )
    if shipment.has_tracking_url():
        logging.info("Track it at %s", shipment.get_tracking_url())
    return 0


if __name__ == "__main__":
    sys.exit(main())
