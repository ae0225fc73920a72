"""Validation of the SDK configuration bag"""

from collections.abc import Callable, Mapping
from typing import Any

from sws_sdk.domain.errors import ErrorCode, InvalidConfigurationError
from sws_sdk.domain.value_objects.base_uris import BaseUris
from sws_sdk.domain.value_objects.service import Environment, ServiceName


class ConfigValidationService:
    """Validates and normalizes individual configuration options"""

    ALLOWED_PROTOCOLS = ("http://", "https://")

    # Checked in declaration order
    PROTOCOL_ERROR_CODES = {
        ServiceName.ID: ErrorCode.ID_MISSING_PROTOCOL,
        ServiceName.LICENSE: ErrorCode.LICENSE_MISSING_PROTOCOL,
        ServiceName.PROFILE: ErrorCode.PROFILE_MISSING_PROTOCOL,
        ServiceName.ECOM: ErrorCode.ECOM_MISSING_PROTOCOL,
    }

    @classmethod
    def validate_timeout(cls, timeout: Any) -> float:
        """Validate the default request timeout, in seconds"""
        if not isinstance(timeout, float):
            raise InvalidConfigurationError(
                "The `timeout` config option value must be a float",
                ErrorCode.BAD_TIMEOUT_TYPE,
                {"value": repr(timeout)},
            )
        return timeout

    @classmethod
    def validate_handler(cls, handler: Any) -> Callable[..., Any]:
        """Validate the transport override"""
        if not callable(handler):
            raise InvalidConfigurationError(
                "The `handler` config option value must be a callable",
                ErrorCode.BAD_HANDLER_TYPE,
                {"value": repr(handler)},
            )
        return handler

    @classmethod
    def validate_env(cls, env: Any) -> Environment:
        """Validate the environment name"""
        try:
            return Environment(env)
        except (ValueError, TypeError):
            allowed = "` or `".join(e.value for e in (Environment.STAGING, Environment.PRODUCTION))
            raise InvalidConfigurationError(
                f"The `env` config option value must be one of `{allowed}`.",
                ErrorCode.BAD_ENV_VALUE,
                {"value": repr(env)},
            ) from None

    @classmethod
    def validate_base_uri(cls, base_uri: Any) -> BaseUris:
        """Validate an explicit map of per-service base URIs"""
        if not isinstance(base_uri, Mapping) or any(base_uri.get(service.value) is None for service in ServiceName):
            raise InvalidConfigurationError(
                "The `base_uri` config option value must be a mapping containing "
                "`id`, `license`, `profile` and `ecom` keys.",
                ErrorCode.INCOMPLETE_BASE_URI,
            )

        for service, error_code in cls.PROTOCOL_ERROR_CODES.items():
            uri = base_uri[service.value]
            if not isinstance(uri, str) or not uri.startswith(cls.ALLOWED_PROTOCOLS):
                raise InvalidConfigurationError(
                    f"The `base_uri` `{service.value}` config option value must include a "
                    "valid network protocol (ie. http or https)",
                    error_code,
                    {"service": service.value, "value": repr(uri)},
                )

        return BaseUris(**{service.value: base_uri[service.value] for service in ServiceName})
