from abc import ABC, abstractmethod

import httpx


class Transport(ABC):
    """Port for delivering requests in place of the default network transport.

    Instances are callable, so a Transport can be passed as the `handler`
    configuration option.
    """

    @abstractmethod
    def send(self, request: httpx.Request) -> httpx.Response:
        """Deliver a request and return its response"""
        pass

    def __call__(self, request: httpx.Request) -> httpx.Response:
        return self.send(request)
