"""Channel ports — abstract interfaces for each delivery medium.

Every adapter returns a dict with keys ``message_id``, ``status``
("sent" or "failed") and, on failure, ``error``. Adapters may instead
raise ``TransportError`` when the provider cannot be reached.
"""

from abc import ABC, abstractmethod


class EmailPort(ABC):
    @abstractmethod
    def send(self, to: str, subject: str, body: str, html_body: str | None = None) -> dict: ...


class SMSPort(ABC):
    @abstractmethod
    def send(self, to: str, body: str) -> dict: ...


class PushPort(ABC):
    @abstractmethod
    def send(self, device_tokens: list[str], title: str, body: str, data: dict | None = None) -> dict:
        """Send one push message to every device token of a user."""
        ...


class InAppPort(ABC):
    @abstractmethod
    def send(self, user_id: str, title: str, body: str, data: dict | None = None) -> dict: ...


class WhatsAppPort(ABC):
    @abstractmethod
    def send(self, to: str, body: str) -> dict: ...
