"""
Shared fixtures: a recording transport double and sample API documents.
"""
from typing import Any, Dict, List, Optional, Tuple

import pytest

from documents import make_order, make_shipment
from payrest import ApiClient, ClientConfig

TEST_API_KEY = "test_" + "a" * 30


class RecordingTransport:
    """Transport double that records calls and replays queued responses."""

    def __init__(self, responses: Optional[List[Any]] = None) -> None:
        self.calls: List[Tuple[str, str, Optional[str]]] = []
        self.responses: List[Any] = list(responses or [])

    def queue(self, response: Any) -> None:
        self.responses.append(response)

    def perform_http_call(self, method: str, path: str, body: Optional[str] = None) -> Any:
        self.calls.append((method, path, body))
        if self.responses:
            return self.responses.pop(0)
        return None


@pytest.fixture
def config() -> ClientConfig:
    return ClientConfig(api_key=TEST_API_KEY)


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def client(config, transport) -> ApiClient:
    return ApiClient(config, transport=transport)


@pytest.fixture
def order_document() -> Dict[str, Any]:
    return make_order()


@pytest.fixture
def shipment_document() -> Dict[str, Any]:
    return make_shipment()
