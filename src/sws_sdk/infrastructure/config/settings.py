# Environment variables use the SWS_ prefix, eg. SWS_ENV=staging or
# SWS_BASE_URI_ID=https://id.example.com


from typing import Any

from pydantic_settings import BaseSettings, SettingsConfigDict


class SdkSettings(BaseSettings):
    """SDK settings read from the environment"""

    model_config = SettingsConfigDict(
        env_prefix="SWS_",
        case_sensitive=False,
        extra="ignore",
    )

    # Environment
    env: str | None = None
    timeout: float | None = None

    # Explicit base URIs
    base_uri_id: str | None = None
    base_uri_license: str | None = None
    base_uri_profile: str | None = None
    base_uri_ecom: str | None = None

    # Client application credentials
    app_id: str = ""
    app_password: str = ""

    def to_args(self) -> dict[str, Any]:
        """Build the SDK configuration bag"""
        args: dict[str, Any] = {}

        if self.env is not None:
            args["env"] = self.env
        if self.timeout is not None:
            args["timeout"] = self.timeout

        base_uri = {
            "id": self.base_uri_id,
            "license": self.base_uri_license,
            "profile": self.base_uri_profile,
            "ecom": self.base_uri_ecom,
        }
        if any(uri is not None for uri in base_uri.values()):
            args["base_uri"] = base_uri

        return args


def get_settings() -> SdkSettings:
    """Get SDK settings from the current environment"""
    return SdkSettings()
