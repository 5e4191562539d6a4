"""
Core primitives: client context, generic endpoint, resources and transport.
"""

from .client import ApiClient
from .config import (
    ClientConfig,
    ClientParameters,
    load_client_config,
)
from .endpoint import Endpoint
from .endpoints import OrderEndpoint, OrderLineEndpoint, ShipmentEndpoint
from .environment import ClientEnvironment, build_environment, load_env_file
from .errors import (
    ApiError,
    ConfigError,
    InvalidArgumentError,
    SerializationError,
    StructuralError,
    TransportError,
)
from .payloads import build_query_string, encode_body
from .resources import (
    BaseCollection,
    BaseResource,
    Order,
    OrderCollection,
    OrderLine,
    OrderLineCollection,
    ResourceFactory,
    Shipment,
    ShipmentCollection,
)
from .transport import HttpTransport, Transport
from .types import OrderLineStatus, OrderLineType, OrderStatus

__all__ = [
    "ApiClient",
    "ApiError",
    "BaseCollection",
    "BaseResource",
    "ClientConfig",
    "ClientEnvironment",
    "ClientParameters",
    "ConfigError",
    "Endpoint",
    "HttpTransport",
    "InvalidArgumentError",
    "Order",
    "OrderCollection",
    "OrderEndpoint",
    "OrderLine",
    "OrderLineCollection",
    "OrderLineEndpoint",
    "OrderLineStatus",
    "OrderLineType",
    "OrderStatus",
    "ResourceFactory",
    "SerializationError",
    "Shipment",
    "ShipmentCollection",
    "ShipmentEndpoint",
    "StructuralError",
    "Transport",
    "TransportError",
    "build_environment",
    "build_query_string",
    "encode_body",
    "load_client_config",
    "load_env_file",
]
