"""
Generic REST dispatcher shared by every concrete endpoint.

An :class:`Endpoint` knows a resource path and how to manufacture empty
resource and collection objects. It turns create/read/update/delete/list calls
into exactly one transport call each and hydrates whatever comes back.
"""

from __future__ import annotations

import copy
import logging
from typing import (
    TYPE_CHECKING,
    Any,
    Callable,
    Dict,
    Generic,
    Mapping,
    Optional,
    TypeVar,
)
from urllib.parse import quote

from .errors import ConfigError, InvalidArgumentError, StructuralError
from .payloads import build_query_string, encode_body
from .resources import BaseCollection, BaseResource, ResourceFactory

if TYPE_CHECKING:
    from .client import ApiClient

__all__ = [
    "Endpoint",
    "HTTP_DELETE",
    "HTTP_GET",
    "HTTP_PATCH",
    "HTTP_POST",
]

HTTP_GET = "GET"
HTTP_POST = "POST"
HTTP_PATCH = "PATCH"
HTTP_DELETE = "DELETE"

ResourceT = TypeVar("ResourceT", bound=BaseResource)
CollectionT = TypeVar("CollectionT", bound=BaseCollection)
EndpointT = TypeVar("EndpointT", bound="Endpoint[Any, Any]")

# A path containing this marker addresses a child of another resource, for
# instance ``orders_shipments`` -> ``orders/{parent_id}/shipments``.
SUBRESOURCE_MARKER = "_"


class Endpoint(Generic[ResourceT, CollectionT]):
    """
    CRUD and list operations against one REST resource path.

    ``resource_factory`` builds an empty resource for the given client and
    ``collection_factory`` builds an empty collection from the client, the
    declared item count and the pagination links.
    """

    REST_CREATE = HTTP_POST
    REST_UPDATE = HTTP_PATCH
    REST_READ = HTTP_GET
    REST_LIST = HTTP_GET
    REST_DELETE = HTTP_DELETE

    def __init__(
        self,
        client: "ApiClient",
        resource_path: str,
        *,
        resource_factory: Callable[["ApiClient"], ResourceT],
        collection_factory: Callable[
            ["ApiClient", int, Optional[Mapping[str, Any]]], CollectionT
        ],
        parent_id: Optional[str] = None,
    ) -> None:
        self.client = client
        self.resource_factory = resource_factory
        self.collection_factory = collection_factory
        self.parent_id = parent_id
        self.resource_path = resource_path

    @property
    def resource_path(self) -> str:
        return self._resource_path

    @resource_path.setter
    def resource_path(self, value: str) -> None:
        # The API matches paths case-sensitively and only knows lower-case ones.
        self._resource_path = value.lower()

    def bind(self: EndpointT, parent_id: Optional[str]) -> EndpointT:
        """
        Return a copy of this endpoint bound to ``parent_id``.

        The endpoint itself is left untouched so it can keep being shared
        through the client.
        """
        bound = copy.copy(self)
        bound.parent_id = parent_id
        return bound

    def get_resource_path(self) -> str:
        if SUBRESOURCE_MARKER in self.resource_path:
            parent, child = self.resource_path.split(SUBRESOURCE_MARKER, 1)
            if not self.parent_id:
                raise ConfigError(
                    f"Subresource '{self.resource_path}' used without parent '{parent}' ID."
                )
            return f"{parent}/{self.parent_id}/{child}"

        return self.resource_path

    def _resource_url(self, resource_id: Any) -> str:
        if resource_id is None or resource_id == "":
            raise InvalidArgumentError("Invalid resource id.")
        return f"{self.get_resource_path()}/{quote(str(resource_id), safe='')}"

    def _hydrate(self, raw: Any) -> ResourceT:
        return ResourceFactory.create_from_api_result(
            raw, self.resource_factory(self.client)
        )

    def create(
        self, body: Any, filters: Optional[Mapping[str, Any]] = None
    ) -> ResourceT:
        encoded = encode_body(body)
        result = self.client.perform_http_call(
            self.REST_CREATE,
            self.get_resource_path() + build_query_string(filters),
            encoded,
        )
        return self._hydrate(result)

    def read(
        self, resource_id: Any, filters: Optional[Mapping[str, Any]] = None
    ) -> ResourceT:
        """
        Retrieve a single object by id.
        """
        path = self._resource_url(resource_id)
        result = self.client.perform_http_call(
            self.REST_READ, path + build_query_string(filters)
        )
        return self._hydrate(result)

    def update(self, resource_id: Any, body: Any) -> ResourceT:
        path = self._resource_url(resource_id)
        encoded = encode_body(body)
        result = self.client.perform_http_call(self.REST_UPDATE, path, encoded)
        return self._hydrate(result)

    def delete(self, resource_id: Any, body: Any = None) -> Optional[ResourceT]:
        """
        Delete a single object.

        Returns ``None`` when the API answers without content. Some resources
        answer a DELETE with their final state instead, which is hydrated like
        any other response.
        """
        path = self._resource_url(resource_id)
        encoded = encode_body(body)
        result = self.client.perform_http_call(self.REST_DELETE, path, encoded)
        if result is None:
            return None
        return self._hydrate(result)

    def list(
        self,
        from_: Optional[str] = None,
        limit: Optional[int] = None,
        filters: Optional[Mapping[str, Any]] = None,
    ) -> CollectionT:
        """
        Retrieve one page of objects.

        ``from_`` is the id of the first object to include and ``limit`` the
        page size; both are left out of the query when ``None``. The returned
        collection is either fully populated or not returned at all.
        """
        merged: Dict[str, Any] = {"from": from_, "limit": limit}
        merged.update(filters or {})

        path = self.get_resource_path() + build_query_string(merged)
        result = self.client.perform_http_call(self.REST_LIST, path)

        if not isinstance(result, Mapping):
            raise StructuralError(f"List response for '{path}' is not an object")
        count = result.get("count")
        if not isinstance(count, int):
            raise StructuralError(f"List response for '{path}' has no item count")

        collection = self.collection_factory(
            self.client, count, result.get("_links") or {}
        )
        name = collection.collection_name
        embedded = result.get("_embedded")
        if (
            not isinstance(embedded, Mapping)
            or name not in embedded
            or not isinstance(embedded[name], list)
        ):
            raise StructuralError(
                f"List response for '{path}' has no embedded '{name}' collection"
            )

        for raw_item in embedded[name]:
            collection.append(self._hydrate(raw_item))

        if len(collection) != count:
            raise StructuralError(
                f"List response for '{path}' declared {count} items "
                f"but embedded {len(collection)}"
            )

        logging.debug("Hydrated %d %s from %s", len(collection), name, path)
        return collection
