##############################################################################
# Copyright (c) Hammertime Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Hammertime.
##############################################################################

"""
Fixtures for talking to a fake flintlock HTTP gateway.

The fake gateway is an `httpx.MockTransport` handler that serves the
flintlock MicroVM endpoints out of a `ReferenceStore`, so `FlintlockStore`
can be exercised end to end without a server.
"""

import json
from typing import List

import httpx
import pytest

from hammertime.exceptions import MicroVMNotFoundError
from hammertime.microvm.data_models import MicroVM
from hammertime.stores.flintlock_store import FlintlockStore
from hammertime.stores.reference_store import ReferenceStore


# pylint: disable=redefined-outer-name


class FakeFlintlockGateway:
    """
    A stand-in for flintlock's HTTP gateway.

    Attributes:
        store: Where the MicroVMs the gateway serves live.
        requests: Every request the gateway has received, in order.
    """

    def __init__(self):
        self.store = ReferenceStore()
        self.requests: List[httpx.Request] = []

    @staticmethod
    def _not_found(message: str) -> httpx.Response:
        return httpx.Response(404, json={"code": 5, "message": message})

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path

        if request.method == "POST" and path == "/v1alpha1/microvm":
            spec = json.loads(request.content)["microvm"]
            created = self.store.create(MicroVM.from_spec(spec))
            return httpx.Response(200, json={"microvm": created.to_dict()})

        if request.method == "GET" and path == "/v1alpha1/microvms":
            microvms = self.store.list(
                name=request.url.params.get("name", ""),
                namespace=request.url.params.get("namespace", ""),
            )
            return httpx.Response(200, json={"microvm": [microvm.to_dict() for microvm in microvms]})

        if path.startswith("/v1alpha1/microvm/"):
            uid = path.rsplit("/", 1)[-1]
            try:
                if request.method == "GET":
                    return httpx.Response(200, json={"microvm": self.store.get(uid).to_dict()})
                if request.method == "DELETE":
                    self.store.delete(uid)
                    return httpx.Response(200, json={})
            except MicroVMNotFoundError:
                return self._not_found(f"microvm {uid} not found")

        return httpx.Response(501, json={"code": 12, "message": f"{request.method} {path} not implemented"})


@pytest.fixture
def fake_gateway() -> FakeFlintlockGateway:
    """
    A fresh fake flintlock gateway. Resets on each test.

    Returns:
        A `FakeFlintlockGateway` with nothing in it.
    """
    return FakeFlintlockGateway()


@pytest.fixture
def flintlock_store(fake_gateway: FakeFlintlockGateway) -> FlintlockStore:
    """
    A `FlintlockStore` wired to the fake gateway.

    Args:
        fake_gateway: The fake gateway to send requests to.

    Yields:
        The store. Its HTTP client is closed afterwards.
    """
    store = FlintlockStore(address="flintlock.test:8090", transport=httpx.MockTransport(fake_gateway))
    yield store
    store.close()
