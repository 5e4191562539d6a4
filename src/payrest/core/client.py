"""
The client context shared by every endpoint and resource.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import requests

from .config import ClientConfig
from .endpoint import HTTP_DELETE, HTTP_GET, HTTP_PATCH, HTTP_POST
from .endpoints import OrderEndpoint, OrderLineEndpoint, ShipmentEndpoint
from .transport import HttpTransport, Transport

__all__ = [
    "ApiClient",
]


class ApiClient:
    """
    Entry point to the API.

    Holds the configuration, the transport and one endpoint per resource
    type. Resources keep a reference to the client so they can reach sibling
    endpoints, e.g. ``order.shipments()`` goes through :attr:`shipments`.
    Nothing on the client changes after construction.
    """

    HTTP_GET = HTTP_GET
    HTTP_POST = HTTP_POST
    HTTP_PATCH = HTTP_PATCH
    HTTP_DELETE = HTTP_DELETE

    def __init__(
        self,
        config: ClientConfig,
        *,
        session: Optional[requests.Session] = None,
        transport: Optional[Transport] = None,
    ) -> None:
        if transport is not None and session is not None:
            raise ValueError("Provide either a session or a transport, not both.")
        self.config = config
        self.transport: Transport = transport or HttpTransport(config, session=session)

        self.orders = OrderEndpoint(self)
        self.shipments = ShipmentEndpoint(self)
        self.order_lines = OrderLineEndpoint(self)

    def perform_http_call(
        self, method: str, path: str, body: Optional[str] = None
    ) -> Optional[Dict[str, Any]]:
        return self.transport.perform_http_call(method, path, body)
