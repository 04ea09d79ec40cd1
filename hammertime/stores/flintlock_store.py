##############################################################################
# Copyright (c) Hammertime Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Hammertime.
##############################################################################

"""
A `StoreBase` implementation that talks to a flintlock server.

Requests go through flintlock's HTTP API gateway, which exposes the MicroVM
gRPC service as JSON over HTTP:

- `POST /v1alpha1/microvm`: create a MicroVM.
- `GET /v1alpha1/microvm/{uid}`: get a MicroVM.
- `GET /v1alpha1/microvms?namespace=...&name=...`: list MicroVMs.
- `DELETE /v1alpha1/microvm/{uid}`: delete a MicroVM.

Nothing is retried here. Connection problems and server rejections surface as
`TransportError`, and a 404 surfaces as `MicroVMNotFoundError`.
"""

import base64
import logging
from typing import Dict, List, Optional

import httpx

from hammertime.exceptions import MicroVMNotFoundError, TransportError
from hammertime.microvm.data_models import MicroVM
from hammertime.microvm.selection import is_set
from hammertime.stores.store_base import StoreBase


LOG = logging.getLogger(__name__)

API_PREFIX = "/v1alpha1"
# flintlockd serves its HTTP gateway on 8090; 9090 is the gRPC port
DEFAULT_ADDRESS = "127.0.0.1:8090"
DEFAULT_TIMEOUT = 30.0


def basic_auth_header(token: str) -> Dict[str, str]:
    """
    Build the authorization header flintlock expects for basic auth.

    Args:
        token: The shared token configured on the flintlock server.

    Returns:
        A header dictionary with the base64 encoded token.
    """
    encoded = base64.b64encode(token.encode("utf-8")).decode("utf-8")
    return {"Authorization": f"Basic {encoded}"}


def build_base_url(address: str) -> str:
    """
    Turn a `host:port` address into a base URL.

    Args:
        address: The server address, with or without a scheme.

    Returns:
        The address with an `http://` scheme if it had none.
    """
    if "://" in address:
        return address.rstrip("/")
    return f"http://{address}".rstrip("/")


class FlintlockStore(StoreBase):
    """
    MicroVM store backed by a flintlock server.

    Attributes:
        address: The address of the flintlock HTTP gateway.
        client: The `httpx.Client` used for every request.

    Methods:
        create: Create a MicroVM on the server.
        get: Retrieve a MicroVM by uid.
        list: Retrieve the MicroVMs matching a name/namespace filter.
        delete: Delete a MicroVM by uid.
        close: Close the underlying HTTP client.
    """

    def __init__(
        self,
        address: str = DEFAULT_ADDRESS,
        token: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """
        Initialize the store and its HTTP client.

        Args:
            address: The address of the flintlock HTTP gateway.
            token: Optional basic auth token.
            timeout: Transport timeout in seconds for each request.
            transport: Optional httpx transport, mainly useful for tests.
        """
        self.address: str = address or DEFAULT_ADDRESS
        headers = {"Accept": "application/json"}
        if is_set(token):
            headers.update(basic_auth_header(token))

        self.client: httpx.Client = httpx.Client(
            base_url=build_base_url(self.address),
            headers=headers,
            timeout=httpx.Timeout(timeout),
            transport=transport,
        )

    def _request(self, method: str, path: str, **kwargs) -> Dict:
        """
        Send a request to the gateway and decode the JSON response.

        Args:
            method: The HTTP method.
            path: The path below the API prefix.
            **kwargs: Extra keyword arguments for `httpx.Client.request`.

        Returns:
            The decoded JSON body, or an empty dictionary if there was none.

        Raises:
            MicroVMNotFoundError: If the server answered with a 404.
            TransportError: If the request failed or the server rejected it.
        """
        url = f"{API_PREFIX}{path}"
        LOG.debug(f"{method} {self.address}{url}")
        try:
            response = self.client.request(method, url, **kwargs)
        except httpx.HTTPError as exc:
            raise TransportError(f"Failed to reach flintlock at {self.address}: {exc}") from exc

        if response.status_code == httpx.codes.NOT_FOUND:
            raise MicroVMNotFoundError(f"not found: {self._error_message(response)}")
        if response.is_error:
            raise TransportError(
                f"flintlock returned {response.status_code}: {self._error_message(response)}",
                status_code=response.status_code,
            )

        if not response.content:
            return {}
        try:
            return response.json()
        except ValueError as exc:
            raise TransportError(f"flintlock returned a response that is not valid JSON: {exc}") from exc

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        """
        Pull the error message out of a gateway error response.

        Args:
            response: The failed response.

        Returns:
            The `message` field of the error body, or the raw body text.
        """
        try:
            return response.json().get("message") or response.text
        except ValueError:
            return response.text

    def create(self, microvm: MicroVM) -> MicroVM:
        """
        Create a MicroVM on the server.

        Args:
            microvm: The MicroVM to create.

        Returns:
            The MicroVM as created by the server, including its uid.
        """
        spec = microvm.to_spec()
        spec.pop("uid", None)
        data = self._request("POST", "/microvm", json={"microvm": spec})
        return MicroVM.from_dict(data.get("microvm") or {})

    def get(self, uid: str) -> MicroVM:
        """
        Retrieve a MicroVM by uid.

        Args:
            uid: The uid of the MicroVM.

        Returns:
            The MicroVM with this uid.

        Raises:
            MicroVMNotFoundError: If the server has no MicroVM with this uid.
        """
        try:
            data = self._request("GET", f"/microvm/{uid}")
        except MicroVMNotFoundError as exc:
            raise MicroVMNotFoundError(f"MicroVM with uid '{uid}' {exc}") from exc

        if not data.get("microvm"):
            raise MicroVMNotFoundError(f"MicroVM with uid '{uid}' not found.")
        return MicroVM.from_dict(data["microvm"])

    def list(self, name: str = "", namespace: str = "") -> List[MicroVM]:
        """
        Retrieve the MicroVMs matching the filter.

        Args:
            name: The name filter. Only applied by the server when `namespace` is set.
            namespace: The namespace filter.

        Returns:
            A list of matching MicroVMs, in the order the server returned them.
        """
        params = {key: val for key, val in (("namespace", namespace), ("name", name)) if is_set(val)}
        data = self._request("GET", "/microvms", params=params)
        return [MicroVM.from_dict(item) for item in data.get("microvm") or []]

    def delete(self, uid: str):
        """
        Delete a MicroVM by uid.

        Args:
            uid: The uid of the MicroVM to delete.

        Raises:
            MicroVMNotFoundError: If the server has no MicroVM with this uid.
        """
        try:
            self._request("DELETE", f"/microvm/{uid}")
        except MicroVMNotFoundError as exc:
            raise MicroVMNotFoundError(f"MicroVM with uid '{uid}' {exc}") from exc

    def close(self):
        """
        Close the underlying HTTP client.
        """
        self.client.close()
