from sws_sdk.domain.value_objects.service import ServiceName
from sws_sdk.infrastructure.adapters.http_service_client import HttpServiceClient


class IdentityClient(HttpServiceClient):
    """HTTP client for the SWS Identity service"""

    service = ServiceName.ID
