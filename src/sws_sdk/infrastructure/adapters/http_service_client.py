from typing import Any

import httpx

from sws_sdk import __version__
from sws_sdk.application.ports.service_client import ServiceClient
from sws_sdk.domain.entities.configuration import ClientConfiguration
from sws_sdk.domain.errors import NetworkError, ServiceRequestError
from sws_sdk.domain.value_objects.service import ServiceName
from sws_sdk.logging import get_correlation_id, get_logger, get_trace_id

logger = get_logger(__name__)


class HttpServiceClient(ServiceClient):
    """HTTP client for a single SWS service.

    Subclasses bind the service via the `service` class attribute. The
    underlying `httpx.Client` is created on first use; when the configuration
    carries a `handler`, requests are routed through it instead of the network.
    """

    service: ServiceName

    def __init__(self, config: ClientConfiguration, app_id: str = "", app_password: str = ""):
        self.config = config
        self.app_id = app_id
        self.app_password = app_password
        self.default_headers = {
            "Accept": "application/json",
            "User-Agent": f"sws-sdk-python/{__version__}",
        }
        self._client: httpx.Client | None = None

    @property
    def service_name(self) -> ServiceName:
        return self.service

    @property
    def base_uri(self) -> str:
        return self.config.base_uri.for_service(self.service)

    def _http_client(self) -> httpx.Client:
        """Get or create the HTTP client for this service"""
        if self._client is None:
            transport = None
            if self.config.handler is not None:
                transport = httpx.MockTransport(self.config.handler)

            self._client = httpx.Client(
                base_url=self.base_uri,
                timeout=self.config.timeout,
                headers=self.default_headers,
                transport=transport,
            )
        return self._client

    def request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        """Make HTTP request to the service and raise on error statuses"""
        headers = {}

        # Add correlation and trace headers if available
        correlation_id = get_correlation_id()
        if correlation_id:
            headers["X-Correlation-ID"] = correlation_id

        trace_id = get_trace_id()
        if trace_id:
            headers["X-Trace-ID"] = trace_id

        headers.update(kwargs.pop("headers", None) or {})

        logger.debug("Making SWS request", service=self.service.value, method=method, path=path)

        try:
            response = self._http_client().request(method, path, headers=headers, **kwargs)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.warning(
                "SWS request failed",
                service=self.service.value,
                method=method,
                path=path,
                status_code=e.response.status_code,
            )
            raise ServiceRequestError(
                e.response.status_code,
                f"{self.service.value} service request failed",
                {"method": method, "path": path, "body": e.response.text},
            ) from e
        except httpx.RequestError as e:
            logger.error("SWS request could not be sent", service=self.service.value, method=method, path=path, error=str(e))
            raise NetworkError(
                f"Failed to reach {self.service.value} service: {e}",
                {"method": method, "path": path},
            ) from e

        logger.debug(
            "SWS response received",
            service=self.service.value,
            method=method,
            path=path,
            status_code=response.status_code,
        )
        return response

    def get(self, path: str, params: dict[str, Any] | None = None, **kwargs: Any) -> httpx.Response:
        """Make GET request"""
        return self.request("GET", path, params=params, **kwargs)

    def post(self, path: str, json: dict[str, Any] | None = None, **kwargs: Any) -> httpx.Response:
        """Make POST request"""
        return self.request("POST", path, json=json, **kwargs)

    def put(self, path: str, json: dict[str, Any] | None = None, **kwargs: Any) -> httpx.Response:
        """Make PUT request"""
        return self.request("PUT", path, json=json, **kwargs)

    def delete(self, path: str, **kwargs: Any) -> httpx.Response:
        """Make DELETE request"""
        return self.request("DELETE", path, **kwargs)

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None

    def __enter__(self):
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(base_uri={self.base_uri!r}, app_id={self.app_id!r})"
