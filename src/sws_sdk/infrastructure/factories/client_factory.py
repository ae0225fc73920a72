"""Factory for creating SWS service clients from validated configuration"""

from collections.abc import Mapping
from dataclasses import replace
from typing import Any

from sws_sdk.domain.entities.configuration import DEFAULT_TIMEOUT, ClientConfiguration, Credentials
from sws_sdk.domain.errors import ErrorCode, InvalidConfigurationError
from sws_sdk.domain.services.validation_service import ConfigValidationService
from sws_sdk.domain.value_objects.base_uris import preset_for
from sws_sdk.infrastructure.adapters.http_ecom_client import EcomClient
from sws_sdk.infrastructure.adapters.http_identity_client import IdentityClient
from sws_sdk.infrastructure.adapters.http_license_client import LicenseClient
from sws_sdk.infrastructure.adapters.http_profile_client import ProfileClient
from sws_sdk.infrastructure.config.settings import SdkSettings
from sws_sdk.logging import get_logger

logger = get_logger(__name__)


class Sdk:
    """Builds SWS clients based on configuration settings"""

    def __init__(self, args: Mapping[str, Any], app_id: str = "", app_password: str = ""):
        """
        Validate the configuration bag and store the normalized configuration

        Args:
            args: Configuration options. Accepted keys:
                - `env`: `production` or `staging`; selects preset base URIs.
                - `base_uri`: mapping with `id`, `license`, `profile` and `ecom`
                  keys, each a complete base URI including `http://` or
                  `https://`. Overrides `env`.
                - `timeout`: (float) default request timeout, in seconds.
                - `handler`: callable taking an `httpx.Request` and returning an
                  `httpx.Response`; replaces the network transport of created
                  clients (eg. to use a mock handler).
                One of `env` or `base_uri` must be specified. Options set to
                None are treated as absent and unknown keys are ignored.
            app_id: Client application ID
            app_password: Client application password

        Raises:
            InvalidConfigurationError: If a required option is missing or an
                invalid value is provided
        """
        self._credentials = Credentials(app_id=app_id, app_password=app_password)

        timeout = DEFAULT_TIMEOUT
        if args.get("timeout") is not None:
            timeout = ConfigValidationService.validate_timeout(args["timeout"])

        handler = None
        if args.get("handler") is not None:
            handler = ConfigValidationService.validate_handler(args["handler"])

        base_uri = None
        if args.get("env") is not None:
            base_uri = preset_for(ConfigValidationService.validate_env(args["env"]))

        if args.get("base_uri") is not None:
            base_uri = ConfigValidationService.validate_base_uri(args["base_uri"])

        if base_uri is None:
            raise InvalidConfigurationError(
                "You must specify one of either the `env` or `base_uri` config option values.",
                ErrorCode.MISSING_BASE_URI,
            )

        self._config = ClientConfiguration(base_uri=base_uri, timeout=timeout, handler=handler)

        logger.debug(
            "SDK configured",
            base_uri=base_uri.to_dict(),
            timeout=timeout,
            custom_handler=handler is not None,
        )

    @classmethod
    def from_settings(cls, settings: SdkSettings | None = None) -> "Sdk":
        """Create an SDK from SWS_* environment settings"""
        settings = settings or SdkSettings()
        return cls(settings.to_args(), settings.app_id, settings.app_password)

    def create_identity_client(self) -> IdentityClient:
        """Create an IdentityClient"""
        return IdentityClient(self._config, self.app_id, self.app_password)

    def create_license_client(self) -> LicenseClient:
        """Create a LicenseClient"""
        return LicenseClient(self._config, self.app_id, self.app_password)

    def create_profile_client(self) -> ProfileClient:
        """Create a ProfileClient"""
        return ProfileClient(self._config, self.app_id, self.app_password)

    def create_ecom_client(self) -> EcomClient:
        """Create an EcomClient"""
        return EcomClient(self._config, self.app_id, self.app_password)

    @property
    def config(self) -> ClientConfiguration:
        return self._config

    def get_config(self) -> dict[str, Any]:
        """Return the current configuration options"""
        return self._config.to_dict()

    @property
    def app_id(self) -> str:
        return self._credentials.app_id

    @app_id.setter
    def app_id(self, app_id: str) -> None:
        self._credentials = replace(self._credentials, app_id=app_id)

    @property
    def app_password(self) -> str:
        return self._credentials.app_password

    @app_password.setter
    def app_password(self, app_password: str) -> None:
        self._credentials = replace(self._credentials, app_password=app_password)

    def set_app_id(self, app_id: str) -> "Sdk":
        """Set the client application ID"""
        self.app_id = app_id
        return self

    def set_app_password(self, app_password: str) -> "Sdk":
        """Set the client application password"""
        self.app_password = app_password
        return self
