"""
Python SDK for Serato Web Services (SWS).

Builds preconfigured clients for the identity, license, profile and ecom
services from a validated configuration.
"""

__version__ = "1.0.0"

from .domain.entities.configuration import ClientConfiguration, Credentials
from .domain.errors import ErrorCode, InvalidConfigurationError, NetworkError, SdkError, ServiceRequestError
from .domain.value_objects.base_uris import ENVIRONMENT_PRESETS, BaseUris
from .domain.value_objects.service import Environment, ServiceName
from .application.ports.service_client import ServiceClient
from .application.ports.transport import Transport
from .infrastructure.adapters.http_ecom_client import EcomClient
from .infrastructure.adapters.http_identity_client import IdentityClient
from .infrastructure.adapters.http_license_client import LicenseClient
from .infrastructure.adapters.http_profile_client import ProfileClient
from .infrastructure.config.settings import SdkSettings, get_settings
from .infrastructure.factories.client_factory import Sdk

__all__ = [
    "Sdk",
    "SdkSettings",
    "get_settings",
    "ClientConfiguration",
    "Credentials",
    "BaseUris",
    "ENVIRONMENT_PRESETS",
    "Environment",
    "ServiceName",
    "ServiceClient",
    "Transport",
    "IdentityClient",
    "LicenseClient",
    "ProfileClient",
    "EcomClient",
    "ErrorCode",
    "SdkError",
    "InvalidConfigurationError",
    "ServiceRequestError",
    "NetworkError",
]
