from .client_factory import Sdk

__all__ = ["Sdk"]
