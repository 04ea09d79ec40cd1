##############################################################################
# Copyright (c) Hammertime Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Hammertime.
##############################################################################

"""
Tests for the `flintlock_store.py` module of the `stores/` directory.
"""

import base64
import json

import httpx
import pytest

from hammertime.common.enums import MicroVMState
from hammertime.config.configfile import get_default_config
from hammertime.exceptions import MicroVMNotFoundError, TransportError
from hammertime.stores.flintlock_store import DEFAULT_ADDRESS, FlintlockStore, basic_auth_header, build_base_url
from tests.fixture_types import FixtureCallable, FixtureMicroVM
from tests.fixtures.flintlock import FakeFlintlockGateway


def test_basic_auth_header():
    """
    Test that the token is base64 encoded into a basic auth header.
    """
    assert basic_auth_header("secret") == {"Authorization": "Basic " + base64.b64encode(b"secret").decode()}


@pytest.mark.parametrize(
    "address, expected",
    [
        ("127.0.0.1:8090", "http://127.0.0.1:8090"),
        ("https://flintlock.example.com/", "https://flintlock.example.com"),
    ],
)
def test_build_base_url(address: str, expected: str):
    """
    Test that a scheme is only added when the address has none.

    Args:
        address: The address given by the user.
        expected: The base URL we expect.
    """
    assert build_base_url(address) == expected


def test_default_address():
    """
    Test that the default address is flintlock's HTTP gateway port, not its gRPC port.
    """
    assert DEFAULT_ADDRESS == "127.0.0.1:8090"
    assert get_default_config()["store"]["address"] == DEFAULT_ADDRESS

    store = FlintlockStore()
    try:
        assert store.address == DEFAULT_ADDRESS
        assert (store.client.base_url.host, store.client.base_url.port) == ("127.0.0.1", 8090)
    finally:
        store.close()


def store_with_handler(handler) -> FlintlockStore:
    """Build a store that sends every request to `handler`."""
    return FlintlockStore(address="flintlock.test:8090", transport=httpx.MockTransport(handler))


class TestFlintlockStore:
    """
    Tests for `FlintlockStore` against a fake flintlock gateway.
    """

    def test_create(
        self, flintlock_store: FlintlockStore, fake_gateway: FakeFlintlockGateway, sample_microvm: FixtureMicroVM
    ):
        """
        Test that creating posts the spec and reads back the created MicroVM.

        Args:
            flintlock_store: A store wired to the fake gateway.
            fake_gateway: The fake gateway.
            sample_microvm: An uncreated MicroVM named `mvm0` in `ns0`.
        """
        created = flintlock_store.create(sample_microvm)

        assert created.uid
        assert created.name == "mvm0"
        assert created.state == MicroVMState.CREATED

        request = fake_gateway.requests[0]
        assert request.method == "POST"
        assert request.url.path == "/v1alpha1/microvm"
        assert json.loads(request.content) == {"microvm": sample_microvm.to_spec()}

    def test_create_drops_existing_uid(
        self, flintlock_store: FlintlockStore, fake_gateway: FakeFlintlockGateway, sample_microvm: FixtureMicroVM
    ):
        """
        Test that a uid on the MicroVM isn't sent to the server.

        Args:
            flintlock_store: A store wired to the fake gateway.
            fake_gateway: The fake gateway.
            sample_microvm: An uncreated MicroVM named `mvm0` in `ns0`.
        """
        sample_microvm.uid = "stale"
        flintlock_store.create(sample_microvm)
        assert "uid" not in json.loads(fake_gateway.requests[0].content)["microvm"]

    def test_get_after_create(self, flintlock_store: FlintlockStore, sample_microvm: FixtureMicroVM):
        """
        Test that getting a created MicroVM returns the same identity.

        Args:
            flintlock_store: A store wired to the fake gateway.
            sample_microvm: An uncreated MicroVM named `mvm0` in `ns0`.
        """
        created = flintlock_store.create(sample_microvm)
        fetched = flintlock_store.get(created.uid)
        assert (fetched.name, fetched.namespace, fetched.uid) == ("mvm0", "ns0", created.uid)

    def test_get_unknown_uid(self, flintlock_store: FlintlockStore):
        """
        Test that a 404 becomes a not found error naming the uid.

        Args:
            flintlock_store: A store wired to the fake gateway.
        """
        with pytest.raises(MicroVMNotFoundError, match="MicroVM with uid 'nope'"):
            flintlock_store.get("nope")

    def test_get_empty_body(self):
        """
        Test that a successful response with no MicroVM in it counts as not found.
        """
        store = store_with_handler(lambda request: httpx.Response(200, json={}))
        with pytest.raises(MicroVMNotFoundError, match="abc"):
            store.get("abc")

    def test_list_sends_filters(
        self, flintlock_store: FlintlockStore, fake_gateway: FakeFlintlockGateway, make_microvm: FixtureCallable
    ):
        """
        Test that the name and namespace are sent as query parameters and the matches returned in order.

        Args:
            flintlock_store: A store wired to the fake gateway.
            fake_gateway: The fake gateway.
            make_microvm: A fixture to build MicroVMs.
        """
        first = flintlock_store.create(make_microvm("foo", "ns1"))
        flintlock_store.create(make_microvm("bar", "ns1"))
        second = flintlock_store.create(make_microvm("foo", "ns1"))

        matches = flintlock_store.list(name="foo", namespace="ns1")

        assert [m.uid for m in matches] == [first.uid, second.uid]
        params = fake_gateway.requests[-1].url.params
        assert params["namespace"] == "ns1"
        assert params["name"] == "foo"

    def test_list_omits_unset_filters(self, flintlock_store: FlintlockStore, fake_gateway: FakeFlintlockGateway):
        """
        Test that empty filters aren't sent at all.

        Args:
            flintlock_store: A store wired to the fake gateway.
            fake_gateway: The fake gateway.
        """
        assert flintlock_store.list() == []
        assert not fake_gateway.requests[-1].url.params

    def test_delete(self, flintlock_store: FlintlockStore, sample_microvm: FixtureMicroVM):
        """
        Test that a deleted MicroVM can't be fetched anymore.

        Args:
            flintlock_store: A store wired to the fake gateway.
            sample_microvm: An uncreated MicroVM named `mvm0` in `ns0`.
        """
        created = flintlock_store.create(sample_microvm)
        flintlock_store.delete(created.uid)
        with pytest.raises(MicroVMNotFoundError):
            flintlock_store.get(created.uid)

    def test_delete_unknown_uid(self, flintlock_store: FlintlockStore):
        """
        Test that deleting an unknown uid raises a not found error naming the uid.

        Args:
            flintlock_store: A store wired to the fake gateway.
        """
        with pytest.raises(MicroVMNotFoundError, match="nope"):
            flintlock_store.delete("nope")

    def test_server_error(self):
        """
        Test that a server error becomes a TransportError carrying the status code.
        """
        store = store_with_handler(lambda request: httpx.Response(503, json={"message": "unavailable"}))
        with pytest.raises(TransportError, match="unavailable") as excinfo:
            store.list(namespace="ns1")
        assert excinfo.value.status_code == 503

    def test_error_without_json_body(self):
        """
        Test that an error response with a plain text body still gives a useful message.
        """
        store = store_with_handler(lambda request: httpx.Response(500, text="boom"))
        with pytest.raises(TransportError, match="boom"):
            store.list()

    def test_invalid_json(self):
        """
        Test that a successful response that isn't JSON raises a TransportError.
        """
        store = store_with_handler(lambda request: httpx.Response(200, text="<html>"))
        with pytest.raises(TransportError, match="not valid JSON"):
            store.list()

    def test_connection_error(self):
        """
        Test that a connection failure becomes a TransportError naming the address.
        """

        def refuse(request: httpx.Request):
            raise httpx.ConnectError("connection refused", request=request)

        store = store_with_handler(refuse)
        with pytest.raises(TransportError, match="flintlock.test:8090"):
            store.get("abc")

    def test_headers(self):
        """
        Test that the auth token is sent with every request.
        """
        seen = []

        def record(request: httpx.Request):
            seen.append(request.headers)
            return httpx.Response(200, json={"microvm": []})

        store = FlintlockStore(address="flintlock.test:8090", token="secret", transport=httpx.MockTransport(record))
        store.list()
        store.close()

        assert seen[0]["Authorization"] == basic_auth_header("secret")["Authorization"]
        assert seen[0]["Accept"] == "application/json"

    def test_no_auth_header_without_token(self, flintlock_store: FlintlockStore, fake_gateway: FakeFlintlockGateway):
        """
        Test that no auth header is sent when there's no token.

        Args:
            flintlock_store: A store wired to the fake gateway.
            fake_gateway: The fake gateway.
        """
        flintlock_store.list()
        assert "Authorization" not in fake_gateway.requests[0].headers
