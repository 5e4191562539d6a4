"""
Tests for the order, shipment and order line endpoints and for the resource
methods that delegate to them.
"""
import json

import pytest

from documents import make_list, make_order, make_shipment
from payrest import (
    ConfigError,
    InvalidArgumentError,
    Order,
    OrderCollection,
    ResourceFactory,
    Shipment,
    ShipmentCollection,
)


def hydrate_order(client, **kwargs):
    return ResourceFactory.create_from_api_result(make_order(**kwargs), Order(client))


class TestOrderEndpoint:
    def test_get(self, client, transport):
        transport.queue(make_order("ord_8wmqcHMN4U", status="paid"))

        order = client.orders.get("ord_8wmqcHMN4U", {"embed": "payments"})

        assert transport.calls == [("GET", "orders/ord_8wmqcHMN4U?embed=payments", None)]
        assert order.is_paid()

    def test_create(self, client, transport):
        transport.queue(make_order())
        data = {"amount": {"value": "20.00", "currency": "EUR"}, "orderNumber": "1337"}

        order = client.orders.create(data)

        assert transport.calls == [("POST", "orders", json.dumps(data))]
        assert order.is_created()

    def test_cancel(self, client, transport):
        transport.queue(make_order(status="canceled"))

        order = client.orders.cancel("ord_1")

        assert transport.calls == [("DELETE", "orders/ord_1", None)]
        assert order.is_canceled()

    def test_cancel_with_parameters(self, client, transport):
        transport.queue(make_order(status="canceled"))

        client.orders.cancel("ord_1", {"testmode": True})

        assert transport.calls[0][2] == '{"testmode": true}'

    def test_page(self, client, transport):
        transport.queue(make_list("orders", [make_order("ord_a"), make_order("ord_b")]))

        orders = client.orders.page(limit=2)

        assert transport.calls == [("GET", "orders?limit=2", None)]
        assert isinstance(orders, OrderCollection)
        assert [order.id for order in orders] == ["ord_a", "ord_b"]

    def test_get_without_id(self, client, transport):
        with pytest.raises(InvalidArgumentError):
            client.orders.get("")

        assert transport.calls == []


class TestShipmentEndpoint:
    def test_list_for_order(self, client, transport):
        """Should list the shipments nested under the bound order"""
        transport.queue(make_list("shipments", [make_shipment("shp_1"), make_shipment("shp_2")]))
        order = hydrate_order(client, order_id="ord_1")

        shipments = client.shipments.list_for(order)

        assert transport.calls == [("GET", "orders/ord_1/shipments", None)]
        assert isinstance(shipments, ShipmentCollection)
        assert len(shipments) == shipments.count == 2

    def test_list_for_order_id(self, client, transport):
        transport.queue(make_list("shipments", []))

        client.shipments.list_for("ord_1", {"limit": 10})

        assert transport.calls[0][1] == "orders/ord_1/shipments?limit=10"

    def test_create_for(self, client, transport):
        transport.queue(make_shipment())
        order = hydrate_order(client)

        shipment = client.shipments.create_for(order, {"lines": []})

        assert transport.calls == [("POST", "orders/ord_1/shipments", '{"lines": []}')]
        assert isinstance(shipment, Shipment)
        assert shipment.orderId == "ord_1"

    def test_get_for(self, client, transport):
        transport.queue(make_shipment("shp_9"))

        shipment = client.shipments.get_for("ord_1", "shp_9")

        assert transport.calls == [("GET", "orders/ord_1/shipments/shp_9", None)]
        assert shipment.id == "shp_9"

    def test_update_for(self, client, transport):
        transport.queue(make_shipment())
        tracking = {"tracking": {"carrier": "PostNL", "code": "3SKABA000000000"}}

        client.shipments.update_for("ord_1", "shp_1", tracking)

        assert transport.calls == [("PATCH", "orders/ord_1/shipments/shp_1", json.dumps(tracking))]

    def test_shared_endpoint_stays_unbound(self, client, transport):
        """Should not leak the parent id into later calls"""
        transport.queue(make_list("shipments", []))
        client.shipments.list_for("ord_1")

        with pytest.raises(ConfigError, match="without parent 'orders' ID"):
            client.shipments.list()

        assert client.shipments.parent_id is None

    def test_parent_without_id(self, client, transport):
        with pytest.raises(ConfigError):
            client.shipments.list_for(Order(client))

        assert transport.calls == []


class TestOrderLineEndpoint:
    def test_cancel_for_no_content(self, client, transport):
        order = hydrate_order(client)

        assert client.order_lines.cancel_for(order, "odl_1") is None
        assert transport.calls == [("DELETE", "orders/ord_1/lines/odl_1", None)]

    def test_cancel_for_without_line_id(self, client, transport):
        with pytest.raises(InvalidArgumentError):
            client.order_lines.cancel_for("ord_1", "")

        assert transport.calls == []


class TestOrderDelegation:
    def test_shipments(self, client, transport):
        transport.queue(make_list("shipments", [make_shipment()]))
        order = hydrate_order(client)

        shipments = order.shipments()

        assert transport.calls == [("GET", "orders/ord_1/shipments", None)]
        assert shipments[0].get_tracking_url() == "https://track.example/3SKABA000000000"

    def test_create_shipment(self, client, transport):
        transport.queue(make_shipment())
        order = hydrate_order(client)

        order.create_shipment({"lines": [{"id": "odl_1", "quantity": 1}]})

        method, path, body = transport.calls[0]
        assert (method, path) == ("POST", "orders/ord_1/shipments")
        assert json.loads(body) == {"lines": [{"id": "odl_1", "quantity": 1}]}

    def test_ship_all(self, client, transport):
        """Should send an empty lines list to ship every open line"""
        transport.queue(make_shipment())
        order = hydrate_order(client)
        options = {"lines": [{"id": "odl_1"}], "tracking": {"carrier": "PostNL", "code": "X"}}

        order.ship_all(options)

        assert json.loads(transport.calls[0][2]) == {
            "lines": [],
            "tracking": {"carrier": "PostNL", "code": "X"},
        }
        assert options["lines"] == [{"id": "odl_1"}]

    def test_get_shipment(self, client, transport):
        transport.queue(make_shipment("shp_2"))

        shipment = hydrate_order(client).get_shipment("shp_2", {"testmode": True})

        assert transport.calls == [("GET", "orders/ord_1/shipments/shp_2?testmode=true", None)]
        assert shipment.id == "shp_2"

    def test_cancel_line(self, client, transport):
        assert hydrate_order(client).cancel_line("odl_2") is None
        assert transport.calls == [("DELETE", "orders/ord_1/lines/odl_2", None)]

    def test_shipment_get_order(self, client, transport):
        transport.queue(make_order("ord_1", status="shipping"))
        shipment = ResourceFactory.create_from_api_result(make_shipment(), Shipment(client))

        order = shipment.get_order()

        assert transport.calls == [("GET", "orders/ord_1", None)]
        assert order.is_shipping()
