"""Client creation utilities for the OpenShift API."""

import logging
from typing import Any, Optional

import urllib3
from kubernetes import client
from kubernetes.client import Configuration
from kubernetes.client.rest import ApiException

from openshift_selfservice.config import PortalConfig

logger = logging.getLogger(__name__)

JSON_HEADERS = {"Accept": "application/json", "Content-Type": "application/json"}


class ClientManager:

    @classmethod
    def create_api_client(cls, config: PortalConfig) -> client.ApiClient:
        """Create a Kubernetes ApiClient pointed at the OpenShift API.

        Args:
            config: Portal configuration holding the API URL and token

        Returns:
            ApiClient authenticating every request with the configured bearer token
        """
        configuration = Configuration()
        configuration.host = config.api_url
        configuration.api_key = {"authorization": config.token}
        configuration.api_key_prefix = {"authorization": "Bearer"}
        configuration.verify_ssl = config.verify_ssl

        if not config.verify_ssl:
            # WARNING: only acceptable against clusters with self-signed certificates
            logger.warning("TLS verification for the OpenShift API is disabled")
            urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)

        logger.debug(f"Created OpenShift API client for host {config.api_url}")
        return client.ApiClient(configuration)


class RemoteAPIClient:
    """JSON access to namespace, policy and quota endpoints of the OpenShift API.

    Documents are exchanged as plain dicts so fields the portal does not know
    about survive a read-modify-write cycle untouched.
    """

    def __init__(self, api_client: client.ApiClient):
        """Initialize the RemoteAPIClient.

        Args:
            api_client: Kubernetes ApiClient configured for the OpenShift API
        """
        self.api_client = api_client

    @classmethod
    def from_config(cls, config: PortalConfig) -> "RemoteAPIClient":
        return cls(ClientManager.create_api_client(config))

    def get(self, path: str) -> tuple[Any, int]:
        return self._request("GET", path)

    def put(self, path: str, body: dict) -> tuple[Any, int]:
        return self._request("PUT", path, body)

    def post(self, path: str, body: dict) -> tuple[Any, int]:
        return self._request("POST", path, body)

    def _request(self, method: str, path: str, body: Optional[dict] = None) -> tuple[Any, int]:
        """Send a single request and return the decoded document and HTTP status.

        Args:
            method: HTTP method
            path: Path relative to the API base URL
            body: JSON document to send

        Returns:
            Tuple of (decoded JSON document, HTTP status code)

        Raises:
            ApiException: On any non-2xx response, or with status 0 when the
                server could not be reached
        """
        logger.debug(f"{method} {path}")
        try:
            data, status, _ = self.api_client.call_api(
                path,
                method,
                header_params=dict(JSON_HEADERS),
                body=body,
                response_type="object",
                auth_settings=["BearerToken"],
                _return_http_data_only=False,
            )
        except urllib3.exceptions.HTTPError as e:
            logger.error(f"Error from server during {method} {path}: {e}")
            raise ApiException(status=0, reason=str(e)) from e

        logger.debug(f"{method} {path} answered with status {status}")
        return data, status
