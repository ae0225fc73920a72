from .configuration import DEFAULT_TIMEOUT, ClientConfiguration, Credentials

__all__ = ["ClientConfiguration", "Credentials", "DEFAULT_TIMEOUT"]
