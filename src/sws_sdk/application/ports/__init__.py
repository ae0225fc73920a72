from .service_client import ServiceClient
from .transport import Transport

__all__ = ["ServiceClient", "Transport"]
