"""
Concrete endpoints for orders and the resources nested below them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Optional, Union

from .endpoint import Endpoint
from .resources import (
    BaseResource,
    Order,
    OrderCollection,
    OrderLine,
    OrderLineCollection,
    Shipment,
    ShipmentCollection,
)

if TYPE_CHECKING:
    from .client import ApiClient

__all__ = [
    "OrderEndpoint",
    "OrderLineEndpoint",
    "ShipmentEndpoint",
]

ParentRef = Union[BaseResource, str]


def _parent_id(parent: ParentRef) -> Optional[str]:
    if isinstance(parent, BaseResource):
        return parent.id
    return parent


class OrderEndpoint(Endpoint[Order, OrderCollection]):
    def __init__(self, client: "ApiClient") -> None:
        super().__init__(
            client,
            "orders",
            resource_factory=Order,
            collection_factory=OrderCollection,
        )

    def get(
        self, order_id: str, parameters: Optional[Dict[str, Any]] = None
    ) -> Order:
        return self.read(order_id, parameters)

    def cancel(
        self, order_id: str, parameters: Optional[Dict[str, Any]] = None
    ) -> Optional[Order]:
        """
        Cancel an order. The API answers with the canceled order.
        """
        return self.delete(order_id, parameters or None)

    def page(
        self,
        from_: Optional[str] = None,
        limit: Optional[int] = None,
        parameters: Optional[Dict[str, Any]] = None,
    ) -> OrderCollection:
        return self.list(from_, limit, parameters)


class ShipmentEndpoint(Endpoint[Shipment, ShipmentCollection]):
    def __init__(self, client: "ApiClient") -> None:
        super().__init__(
            client,
            "orders_shipments",
            resource_factory=Shipment,
            collection_factory=ShipmentCollection,
        )

    def create_for(
        self,
        order: ParentRef,
        options: Optional[Dict[str, Any]] = None,
        filters: Optional[Dict[str, Any]] = None,
    ) -> Shipment:
        return self.bind(_parent_id(order)).create(options or {}, filters)

    def get_for(
        self,
        order: ParentRef,
        shipment_id: str,
        parameters: Optional[Dict[str, Any]] = None,
    ) -> Shipment:
        return self.bind(_parent_id(order)).read(shipment_id, parameters)

    def update_for(
        self, order: ParentRef, shipment_id: str, data: Dict[str, Any]
    ) -> Shipment:
        return self.bind(_parent_id(order)).update(shipment_id, data)

    def list_for(
        self, order: ParentRef, parameters: Optional[Dict[str, Any]] = None
    ) -> ShipmentCollection:
        return self.bind(_parent_id(order)).list(None, None, parameters)


class OrderLineEndpoint(Endpoint[OrderLine, OrderLineCollection]):
    def __init__(self, client: "ApiClient") -> None:
        super().__init__(
            client,
            "orders_lines",
            resource_factory=OrderLine,
            collection_factory=OrderLineCollection,
        )

    def cancel_for(self, order: ParentRef, line_id: str) -> Optional[OrderLine]:
        """
        Cancel a single order line. Returns ``None`` on ``204 No Content``.
        """
        return self.bind(_parent_id(order)).delete(line_id)
