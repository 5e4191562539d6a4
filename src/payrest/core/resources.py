"""
Typed records hydrated from API responses, their collections and the factory
that fills them.

Resources carry the fields exactly as the API names them (``profileId``,
``_links``...). Fields the API adds later are attached as well, so an older
client keeps working against a newer API.
"""

from __future__ import annotations

import inspect
from typing import (
    TYPE_CHECKING,
    Any,
    Dict,
    Iterator,
    List,
    Mapping,
    Optional,
    TypeVar,
    Union,
)
from urllib.parse import parse_qsl, urlsplit

from .errors import StructuralError
from .types import OrderLineStatus, OrderLineType, OrderStatus

if TYPE_CHECKING:
    from .client import ApiClient

__all__ = [
    "BaseCollection",
    "BaseResource",
    "Order",
    "OrderCollection",
    "OrderLine",
    "OrderLineCollection",
    "ResourceFactory",
    "Shipment",
    "ShipmentCollection",
]

ResourceT = TypeVar("ResourceT", bound="BaseResource")


def _shadows_class_attribute(cls: type, key: str) -> bool:
    if key.startswith("__") or key.startswith("_BaseResource__"):
        return True
    attribute = inspect.getattr_static(cls, key, None)
    return callable(attribute) or hasattr(attribute, "__get__")


class BaseResource:
    """
    A single API object.

    ``client`` points back at the :class:`ApiClient` that produced the
    resource and is only used to reach sibling endpoints. It is not part of
    the resource's data.

    Every field received from the API is recorded and can be looked up with
    ``resource[name]``. Fields are also exposed as attributes, except those
    whose name is taken by a method or property of the class.
    """

    resource: Optional[str] = None
    id: Optional[str] = None
    _links: Optional[Dict[str, Any]] = None

    def __init__(self, client: "ApiClient") -> None:
        self.__client = client
        self.__fields: Dict[str, Any] = {}

    @property
    def client(self) -> "ApiClient":
        return self.__client

    def set_api_field(self, key: str, value: Any) -> None:
        self.__fields[key] = value
        if not _shadows_class_attribute(type(self), key):
            setattr(self, key, value)

    def to_dict(self) -> Dict[str, Any]:
        """
        Return the fields received from the API, declared or not.
        """
        return dict(self.__fields)

    def __getitem__(self, key: str) -> Any:
        return self.__fields[key]

    def __contains__(self, key: object) -> bool:
        return key in self.__fields

    def _get_link_href(self, relation: str) -> Optional[str]:
        links = self._links or {}
        link = links.get(relation)
        if isinstance(link, Mapping):
            return link.get("href")
        return None

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id!r}, resource={self.resource!r})"


class BaseCollection:
    """
    An ordered page of resources together with its pagination links.

    The collection starts empty with the ``count`` announced by the API and is
    filled in response order. Fetching further pages is up to the caller; the
    ``*_page_parameters`` helpers return the query parameters to pass to the
    next list call.
    """

    collection_name: str = ""

    def __init__(
        self,
        client: "ApiClient",
        count: int,
        links: Optional[Mapping[str, Any]] = None,
    ) -> None:
        self.client = client
        self.count = count
        self.links: Dict[str, Any] = dict(links or {})
        self._items: List[BaseResource] = []

    def append(self, item: BaseResource) -> None:
        self._items.append(item)

    def __iter__(self) -> Iterator[BaseResource]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: Union[int, slice]) -> Any:
        return self._items[index]

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(count={self.count!r}, items={self._items!r})"
        )

    def _href(self, relation: str) -> Optional[str]:
        link = self.links.get(relation)
        if isinstance(link, Mapping):
            return link.get("href")
        return None

    @property
    def next_href(self) -> Optional[str]:
        return self._href("next")

    @property
    def previous_href(self) -> Optional[str]:
        return self._href("previous")

    def has_next(self) -> bool:
        return self.next_href is not None

    def has_previous(self) -> bool:
        return self.previous_href is not None

    def next_page_parameters(self) -> Optional[Dict[str, str]]:
        return _query_parameters(self.next_href)

    def previous_page_parameters(self) -> Optional[Dict[str, str]]:
        return _query_parameters(self.previous_href)


def _query_parameters(href: Optional[str]) -> Optional[Dict[str, str]]:
    if href is None:
        return None
    return dict(parse_qsl(urlsplit(href).query, keep_blank_values=True))


class ResourceFactory:
    @staticmethod
    def create_from_api_result(raw: Any, target: ResourceT) -> ResourceT:
        """
        Copy every field of ``raw`` onto ``target`` and return ``target``.

        Fields missing from ``raw`` keep the target's defaults; fields the
        target does not declare are attached as they are. A field named like
        one of the target's methods is only reachable through ``target[name]``
        and :meth:`BaseResource.to_dict`.
        """
        if not isinstance(raw, Mapping):
            raise StructuralError(
                f"Cannot hydrate {type(target).__name__} from {type(raw).__name__}"
            )
        for key, value in raw.items():
            target.set_api_field(key, value)
        return target


class OrderLine(BaseResource):
    orderId: Optional[str] = None
    type: Optional[str] = None
    name: Optional[str] = None
    status: Optional[str] = None
    isCancelable: Optional[bool] = None
    quantity: Optional[int] = None
    quantityShipped: Optional[int] = None
    quantityRefunded: Optional[int] = None
    quantityCanceled: Optional[int] = None
    unitPrice: Optional[Dict[str, Any]] = None
    discountAmount: Optional[Dict[str, Any]] = None
    totalAmount: Optional[Dict[str, Any]] = None
    vatRate: Optional[str] = None
    vatAmount: Optional[Dict[str, Any]] = None
    sku: Optional[str] = None
    createdAt: Optional[str] = None

    def is_created(self) -> bool:
        return self.status == OrderLineStatus.CREATED

    def is_paid(self) -> bool:
        return self.status == OrderLineStatus.PAID

    def is_authorized(self) -> bool:
        return self.status == OrderLineStatus.AUTHORIZED

    def is_canceled(self) -> bool:
        return self.status == OrderLineStatus.CANCELED

    def is_refunded(self) -> bool:
        return self.status == OrderLineStatus.REFUNDED

    def is_shipping(self) -> bool:
        return self.status == OrderLineStatus.SHIPPING

    def is_completed(self) -> bool:
        return self.status == OrderLineStatus.COMPLETED

    def is_physical(self) -> bool:
        return self.type == OrderLineType.PHYSICAL

    def is_discount(self) -> bool:
        return self.type == OrderLineType.DISCOUNT

    def is_digital(self) -> bool:
        return self.type == OrderLineType.DIGITAL

    def is_shipping_fee(self) -> bool:
        return self.type == OrderLineType.SHIPPING_FEE

    def is_store_credit(self) -> bool:
        return self.type == OrderLineType.STORE_CREDIT

    def is_gift_card(self) -> bool:
        return self.type == OrderLineType.GIFT_CARD

    def is_surcharge(self) -> bool:
        return self.type == OrderLineType.SURCHARGE

    def get_product_url(self) -> Optional[str]:
        return self._get_link_href("productUrl")

    def get_image_url(self) -> Optional[str]:
        return self._get_link_href("imageUrl")


class OrderLineCollection(BaseCollection):
    collection_name = "lines"


def _hydrate_lines(
    client: "ApiClient", raw_lines: Optional[List[Any]]
) -> OrderLineCollection:
    raw_lines = raw_lines or []
    lines = OrderLineCollection(client, len(raw_lines), None)
    for raw_line in raw_lines:
        lines.append(
            ResourceFactory.create_from_api_result(raw_line, OrderLine(client))
        )
    return lines


class Order(BaseResource):
    """
    An order and the lines the customer bought.

    Shipment and line operations are delegated to the sibling endpoints on
    :attr:`client`.
    """

    profileId: Optional[str] = None
    mode: Optional[str] = None
    amount: Optional[Dict[str, Any]] = None
    amountCaptured: Optional[Dict[str, Any]] = None
    amountRefunded: Optional[Dict[str, Any]] = None
    status: Optional[str] = None
    billingAddress: Optional[Dict[str, Any]] = None
    consumerDateOfBirth: Optional[str] = None
    orderNumber: Optional[str] = None
    shippingAddress: Optional[Dict[str, Any]] = None
    method: Optional[str] = None
    locale: Optional[str] = None
    metadata: Any = None
    createdAt: Optional[str] = None
    lines: Optional[List[Dict[str, Any]]] = None

    def is_created(self) -> bool:
        return self.status == OrderStatus.CREATED

    def is_paid(self) -> bool:
        return self.status == OrderStatus.PAID

    def is_authorized(self) -> bool:
        return self.status == OrderStatus.AUTHORIZED

    def is_canceled(self) -> bool:
        return self.status == OrderStatus.CANCELED

    def is_refunded(self) -> bool:
        return self.status == OrderStatus.REFUNDED

    def is_shipping(self) -> bool:
        return self.status == OrderStatus.SHIPPING

    def is_completed(self) -> bool:
        return self.status == OrderStatus.COMPLETED

    def is_void(self) -> bool:
        return self.status == OrderStatus.VOID

    def get_lines(self) -> OrderLineCollection:
        """
        Return the embedded order lines as :class:`OrderLine` objects.
        """
        return _hydrate_lines(self.client, self.lines)

    def cancel_line(self, line_id: str) -> Optional[OrderLine]:
        """
        Cancel one line of this order.

        The API answers with ``204 No Content``, in which case ``None`` is
        returned.
        """
        return self.client.order_lines.cancel_for(self, line_id)

    def create_shipment(self, options: Optional[Dict[str, Any]] = None) -> "Shipment":
        """
        Create a shipment for some order lines. Pass an empty ``lines`` list to
        ship every line that has not been shipped yet.
        """
        return self.client.shipments.create_for(self, options or {})

    def ship_all(self, options: Optional[Dict[str, Any]] = None) -> "Shipment":
        options = dict(options or {})
        options["lines"] = []
        return self.create_shipment(options)

    def get_shipment(
        self, shipment_id: str, parameters: Optional[Dict[str, Any]] = None
    ) -> "Shipment":
        return self.client.shipments.get_for(self, shipment_id, parameters)

    def shipments(
        self, parameters: Optional[Dict[str, Any]] = None
    ) -> "ShipmentCollection":
        return self.client.shipments.list_for(self, parameters)

    def get_checkout_url(self) -> Optional[str]:
        return self._get_link_href("checkout")


class OrderCollection(BaseCollection):
    collection_name = "orders"


class Shipment(BaseResource):
    orderId: Optional[str] = None
    createdAt: Optional[str] = None
    tracking: Optional[Dict[str, Any]] = None
    lines: Optional[List[Dict[str, Any]]] = None

    def get_lines(self) -> OrderLineCollection:
        return _hydrate_lines(self.client, self.lines)

    def has_tracking(self) -> bool:
        return self.tracking is not None

    def has_tracking_url(self) -> bool:
        return self.get_tracking_url() is not None

    def get_tracking_url(self) -> Optional[str]:
        if not self.tracking:
            return None
        return self.tracking.get("url") or None

    def get_order(self, parameters: Optional[Dict[str, Any]] = None) -> Order:
        return self.client.orders.get(self.orderId, parameters)


class ShipmentCollection(BaseCollection):
    collection_name = "shipments"
