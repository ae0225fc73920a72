from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from sws_sdk.domain.value_objects.base_uris import BaseUris

DEFAULT_TIMEOUT = 2.0


@dataclass(frozen=True)
class Credentials:
    """Client application credentials"""

    app_id: str = ""
    app_password: str = ""

    def __repr__(self) -> str:
        return f"Credentials(app_id={self.app_id!r}, app_password='***')"


@dataclass(frozen=True)
class ClientConfiguration:
    """Normalized configuration handed to every created service client"""

    base_uri: BaseUris
    timeout: float = DEFAULT_TIMEOUT
    handler: Callable[..., Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        """Plain mapping view of the configuration"""
        return {
            "timeout": self.timeout,
            "handler": self.handler,
            "base_uri": self.base_uri.to_dict(),
        }
