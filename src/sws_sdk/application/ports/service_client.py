from abc import ABC, abstractmethod
from typing import Any

import httpx

from sws_sdk.domain.entities.configuration import ClientConfiguration
from sws_sdk.domain.value_objects.service import ServiceName


class ServiceClient(ABC):
    """Port for a client bound to a single SWS service"""

    config: ClientConfiguration
    app_id: str
    app_password: str

    @abstractmethod
    def __init__(self, config: ClientConfiguration, app_id: str = "", app_password: str = ""):
        pass

    @property
    @abstractmethod
    def service_name(self) -> ServiceName:
        """Service this client talks to"""
        pass

    @property
    @abstractmethod
    def base_uri(self) -> str:
        """Base URI of the service"""
        pass

    @abstractmethod
    def request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        """Send a request to a path relative to the service base URI"""
        pass

    @abstractmethod
    def close(self) -> None:
        """Release any open connections"""
        pass
