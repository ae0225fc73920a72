from sws_sdk.domain.value_objects.service import ServiceName
from sws_sdk.infrastructure.adapters.http_service_client import HttpServiceClient


class LicenseClient(HttpServiceClient):
    """HTTP client for the SWS License service"""

    service = ServiceName.LICENSE
