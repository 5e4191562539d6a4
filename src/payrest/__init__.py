"""
Public facade for the payrest client package.

The most useful pieces are re-exported here so integrators can
``from payrest import ...`` without navigating the package.
"""

from .api import create_api_client
from .core import (
    ApiClient,
    ApiError,
    BaseCollection,
    BaseResource,
    ClientConfig,
    ClientEnvironment,
    ClientParameters,
    ConfigError,
    Endpoint,
    HttpTransport,
    InvalidArgumentError,
    Order,
    OrderCollection,
    OrderEndpoint,
    OrderLine,
    OrderLineCollection,
    OrderLineEndpoint,
    OrderLineStatus,
    OrderLineType,
    OrderStatus,
    ResourceFactory,
    SerializationError,
    Shipment,
    ShipmentCollection,
    ShipmentEndpoint,
    StructuralError,
    Transport,
    TransportError,
    build_environment,
    build_query_string,
    encode_body,
    load_client_config,
    load_env_file,
)

__all__ = (
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
    "create_api_client",
    "encode_body",
    "load_client_config",
    "load_env_file",
)
