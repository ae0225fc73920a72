# Assumptions:
# - Using pytest for testing framework
# - Requests are routed through the configured handler, never the network
# - Handler receives httpx.Request objects and returns httpx.Response objects

import json

import httpx
import pytest

from sws_sdk import NetworkError, Sdk, ServiceClient, ServiceRequestError, Transport
from sws_sdk.logging import set_correlation_id, set_trace_id


class RecordingTransport(Transport):
    """Transport that records requests and replies from a queue of responses"""

    def __init__(self, *responses: httpx.Response):
        self.requests: list[httpx.Request] = []
        self.responses = list(responses)

    def send(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.responses:
            return self.responses.pop(0)
        return httpx.Response(200, json={})


@pytest.fixture(autouse=True)
def clear_log_context():
    """Reset correlation context between tests"""
    yield
    set_correlation_id(None)
    set_trace_id(None)


class TestHttpServiceClient:
    """Test cases for HTTP service clients"""

    @pytest.fixture
    def transport(self):
        return RecordingTransport()

    @pytest.fixture
    def sdk(self, transport):
        """Create Sdk instance routing requests through the recording transport"""
        return Sdk({"env": "production", "timeout": 3.5, "handler": transport}, "app1", "secret1")

    def test_request_goes_to_service_base_uri(self, sdk, transport):
        """Test requests are sent relative to the service base URI"""
        # Arrange
        transport.responses.append(httpx.Response(200, json={"user_id": 42}))

        # Act
        with sdk.create_identity_client() as client:
            response = client.get("/api/v1/users/42", params={"expand": "licenses"})

        # Assert
        assert response.json() == {"user_id": 42}
        request = transport.requests[0]
        assert request.method == "GET"
        assert request.url.host == "id.serato.com"
        assert request.url.path == "/api/v1/users/42"
        assert request.url.params["expand"] == "licenses"

    @pytest.mark.parametrize(
        "factory_method,host",
        [
            ("create_identity_client", "id.serato.com"),
            ("create_license_client", "license.serato.com"),
            ("create_profile_client", "profile.serato.com"),
            ("create_ecom_client", "ecom.serato.com"),
        ],
    )
    def test_each_client_targets_its_service(self, sdk, transport, factory_method, host):
        """Test each client resolves its own base URI"""
        client = getattr(sdk, factory_method)()

        client.get("/ping")

        assert transport.requests[0].url.host == host

    def test_post_sends_json_and_default_headers(self, sdk, transport):
        """Test POST body and SDK headers"""
        client = sdk.create_ecom_client()

        client.post("/api/v1/orders", json={"product_id": 7})

        request = transport.requests[0]
        assert request.method == "POST"
        assert json.loads(request.content) == {"product_id": 7}
        assert request.headers["Accept"] == "application/json"
        assert request.headers["User-Agent"].startswith("sws-sdk-python/")

    def test_put_and_delete(self, sdk, transport):
        """Test PUT and DELETE helpers"""
        client = sdk.create_profile_client()

        client.put("/api/v1/users/1/settings", json={"theme": "dark"})
        client.delete("/api/v1/users/1/settings")

        assert [r.method for r in transport.requests] == ["PUT", "DELETE"]

    def test_timeout_passed_to_http_client(self, sdk):
        """Test the configured timeout applies to requests"""
        client = sdk.create_license_client()

        assert client._http_client().timeout == httpx.Timeout(3.5)

    def test_correlation_headers_forwarded(self, sdk, transport):
        """Test correlation and trace IDs from the logging context are sent"""
        set_correlation_id("corr-123")
        set_trace_id("trace-456")

        sdk.create_identity_client().get("/ping")

        headers = transport.requests[0].headers
        assert headers["X-Correlation-ID"] == "corr-123"
        assert headers["X-Trace-ID"] == "trace-456"

    def test_error_status_raises_service_request_error(self, sdk, transport):
        """Test HTTP error statuses are surfaced as ServiceRequestError"""
        transport.responses.append(httpx.Response(404, text="not found"))

        with pytest.raises(ServiceRequestError) as exc_info:
            sdk.create_license_client().get("/api/v1/licenses/missing")

        assert exc_info.value.status_code == 404
        assert exc_info.value.details["body"] == "not found"
        assert exc_info.value.details["path"] == "/api/v1/licenses/missing"

    def test_server_error_raises_service_request_error(self, sdk, transport):
        """Test 5xx statuses are surfaced as ServiceRequestError"""
        transport.responses.append(httpx.Response(503))

        with pytest.raises(ServiceRequestError) as exc_info:
            sdk.create_ecom_client().post("/api/v1/orders", json={})

        assert exc_info.value.status_code == 503

    def test_transport_failure_raises_network_error(self):
        """Test transport errors are surfaced as NetworkError"""

        def failing_handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        sdk = Sdk({"env": "staging", "handler": failing_handler})

        with pytest.raises(NetworkError, match="connection refused"):
            sdk.create_profile_client().get("/ping")

    def test_plain_function_handler(self):
        """Test a plain callable works as handler"""
        seen = []

        def handler(request):
            seen.append(str(request.url))
            return httpx.Response(204)

        sdk = Sdk({"base_uri": {
            "id": "http://localhost:8001",
            "license": "http://localhost:8002",
            "profile": "http://localhost:8003",
            "ecom": "http://localhost:8004",
        }, "handler": handler})

        response = sdk.create_ecom_client().delete("/api/v1/carts/9")

        assert response.status_code == 204
        assert seen == ["http://localhost:8004/api/v1/carts/9"]

    def test_close_releases_http_client(self, sdk):
        """Test close discards the underlying client"""
        client = sdk.create_identity_client()
        client.get("/ping")

        client.close()

        assert client._client is None

    def test_close_without_requests(self, sdk):
        """Test close is safe before any request"""
        client = sdk.create_identity_client()

        client.close()

        assert client._client is None

    def test_headers_none_is_accepted(self, sdk, transport):
        """Test headers=None behaves like no extra headers"""
        set_correlation_id("corr-789")

        response = sdk.create_identity_client().get("/ping", headers=None)

        assert response.status_code == 200
        assert transport.requests[0].headers["X-Correlation-ID"] == "corr-789"

    def test_caller_headers_override_defaults(self, sdk, transport):
        """Test headers passed per request are sent and win over context headers"""
        set_correlation_id("corr-789")

        sdk.create_identity_client().get("/ping", headers={"X-Correlation-ID": "caller", "X-Extra": "1"})

        headers = transport.requests[0].headers
        assert headers["X-Correlation-ID"] == "caller"
        assert headers["X-Extra"] == "1"

    def test_clients_satisfy_service_client_port(self, sdk):
        """Test created clients expose the attributes declared by the port"""
        client = sdk.create_profile_client()

        assert isinstance(client, ServiceClient)
        assert set(ServiceClient.__annotations__) == {"config", "app_id", "app_password"}
        assert (client.config, client.app_id, client.app_password) == (sdk.config, "app1", "secret1")
