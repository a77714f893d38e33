"""HTTP client for the CoderForge.org terraform resource API."""

import json
import threading
from typing import Any, Callable, Optional

import requests
from pydantic import ValidationError as PydanticValidationError

from coderforge.config.schemas.client_schema import DEFAULT_API_PATH, DEFAULT_HOST_URL, ClientConfig
from coderforge.domain.base.exceptions import (
    ApiStatusError,
    ConfigurationError,
    ResponseDecodeError,
    TransportError,
    ValidationError,
)
from coderforge.domain.base.ports.logging_port import LoggingPort
from coderforge.domain.base.ports.resource_api_port import ResourceApiPort
from coderforge.domain.resource.lookup import Found, NotFound, ResourceLookup
from coderforge.domain.resource.models import CloudContext, CloudData, ResourceItem
from coderforge.infrastructure.adapters.logging_adapter import LoggingAdapter

CONTEXT_HEADER = "X-CoderForge.org-Context"


class CoderForgeClient(ResourceApiPort):
    """
    Client for the CoderForge.org resource API.

    Every call is a single synchronous request with a fixed timeout; there are
    no retries. The client is immutable after construction and keeps one
    ``requests.Session`` per thread, so it can be shared by concurrent callers.
    """

    def __init__(
        self,
        context: CloudContext,
        token: str,
        host_url: str = DEFAULT_HOST_URL,
        api_path: str = DEFAULT_API_PATH,
        timeout: float = 10.0,
        identity: Optional[dict[str, Any]] = None,
        logger: Optional[LoggingPort] = None,
        session_factory: Callable[[], requests.Session] = requests.Session,
    ) -> None:
        """
        Initialize the client.

        Args:
            context: Tenant context sent with every request
            token: Bearer token attached to every request
            host_url: Base URL of the API
            api_path: Path of the terraform resource endpoint
            timeout: Per-request timeout in seconds
            identity: Payload of the context identity header
            logger: Logging port, defaults to the provider logger
            session_factory: Builds the per-thread HTTP session

        Raises:
            ConfigurationError: If the token or cloud space is empty
        """
        if not token:
            raise ConfigurationError("An API token is required to create the client")
        if not context.cloud_space:
            raise ConfigurationError("A cloud space is required to create the client")

        self._context = context
        self._token = token
        self._host_url = host_url.rstrip("/")
        self._api_path = api_path
        self._timeout = timeout
        self._identity_header = json.dumps(
            identity if identity is not None else {"userId": "u00001"}
        )
        self._logger = logger or LoggingAdapter("http")
        self._session_factory = session_factory
        self._local = threading.local()

    @classmethod
    def from_config(
        cls,
        context: CloudContext,
        token: str,
        config: ClientConfig,
        logger: Optional[LoggingPort] = None,
    ) -> "CoderForgeClient":
        """Build a client from the process configuration."""
        return cls(
            context=context,
            token=token,
            host_url=config.host_url,
            api_path=config.api_path,
            timeout=config.timeout_seconds,
            identity=config.context,
            logger=logger,
        )

    @property
    def context(self) -> CloudContext:
        return self._context

    @property
    def host_url(self) -> str:
        return self._host_url

    @property
    def timeout(self) -> float:
        return self._timeout

    def _session(self) -> requests.Session:
        session = getattr(self._local, "session", None)
        if session is None:
            session = self._session_factory()
            self._local.session = session
        return session

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._token}",
            CONTEXT_HEADER: self._identity_header,
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

    def request(
        self,
        method: str,
        path: str,
        params: Optional[dict[str, str]] = None,
        body: Optional[dict[str, Any]] = None,
    ) -> bytes:
        """
        Send one request and return the raw response body.

        Args:
            method: HTTP verb
            path: Path appended to the host URL
            params: Query parameters
            body: JSON body

        Returns:
            The response body bytes

        Raises:
            TransportError: If no response was received
            ApiStatusError: If the response status is not 2xx
        """
        url = f"{self._host_url}{path}"
        data = json.dumps(body) if body is not None else None
        self._logger.debug("Sending %s %s params=%s", method, url, params)

        try:
            response = self._session().request(
                method,
                url,
                params=params,
                data=data,
                headers=self._headers(),
                timeout=self._timeout,
            )
        except requests.RequestException as e:
            raise TransportError(f"{method} {url} failed: {e}", method, url) from e

        try:
            content = response.content
            status_code = response.status_code
        except requests.RequestException as e:
            raise TransportError(f"Reading response of {method} {url} failed: {e}", method, url) from e
        finally:
            self._close(response)

        self._logger.debug("%s %s returned status %d", method, url, status_code)
        if not 200 <= status_code < 300:
            raise ApiStatusError(status_code, content.decode("utf-8", errors="replace"))
        return content

    def _close(self, response: requests.Response) -> None:
        try:
            response.close()
        except Exception as e:
            self._logger.warning("Failed to close HTTP response: %s", e)

    @staticmethod
    def _decode(content: bytes) -> CloudData:
        try:
            return CloudData.model_validate_json(content)
        except PydanticValidationError as e:
            raise ResponseDecodeError(
                f"Could not decode API response: {e}",
                details={"body": content.decode("utf-8", errors="replace")},
            ) from e

    def _expect_item(self, envelope: CloudData, operation: str) -> ResourceItem:
        item = envelope.first_item()
        if item is None:
            raise ResponseDecodeError(f"{operation} response contained no resource items")
        if not item.id:
            raise ResponseDecodeError(f"{operation} response item has no id")
        return item

    def create_resource(self, item: ResourceItem) -> ResourceItem:
        """
        Create a resource.

        Args:
            item: Resource to create; its id must be empty

        Returns:
            The item echoed by the API, carrying the server-assigned id
        """
        if item.id:
            raise ValidationError("A resource id cannot be set on create", details={"id": item.id})

        envelope = CloudData.for_context(self._context, [item])
        content = self.request("POST", self._api_path, body=envelope.to_wire())
        created = self._expect_item(self._decode(content), "create")
        self._logger.info("Created %s resource %s", created.kind_name, created.id)
        return created

    def get_resource(self, resource_id: str) -> ResourceLookup:
        """
        Look up a resource by id.

        Returns:
            Found with the first item of the response, or NotFound when the
            response holds no items or the API answers 404
        """
        if not resource_id:
            raise ValidationError("A resource id is required to read a resource")

        params = {"resourceId": resource_id, "cloudSpace": self._context.cloud_space}
        try:
            content = self.request("GET", self._api_path, params=params)
        except ApiStatusError as e:
            if e.status_code == 404:
                return NotFound(resource_id)
            raise

        item = self._decode(content).first_item()
        if item is None:
            self._logger.info("Resource %s not found in cloud space %s", resource_id, self._context.cloud_space)
            return NotFound(resource_id)
        return Found(item)

    def update_resource(self, item: ResourceItem) -> ResourceItem:
        """Replace a resource; the item must carry its id."""
        if not item.id:
            raise ValidationError("A resource id is required to update a resource")

        envelope = CloudData.for_context(self._context, [item])
        content = self.request("PUT", self._api_path, body=envelope.to_wire())
        updated = self._decode(content).first_item()
        if updated is None:
            raise ResponseDecodeError("update response contained no resource items")
        self._logger.info("Updated %s resource %s", item.kind_name, item.id)
        return updated

    def delete_resource(self, resource_id: str) -> None:
        """Delete a resource. An empty response body counts as success."""
        if not resource_id:
            raise ValidationError("A resource id is required to delete a resource")

        envelope = CloudData.for_context(self._context)
        content = self.request(
            "DELETE",
            self._api_path,
            params={"resourceId": resource_id},
            body=envelope.to_wire(),
        )
        if content.strip():
            self._decode(content)
        self._logger.info("Deleted resource %s", resource_id)

    def __repr__(self) -> str:
        return (
            f"CoderForgeClient(host_url={self._host_url!r}, "
            f"cloud_space={self._context.cloud_space!r})"
        )
