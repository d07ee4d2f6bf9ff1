"""Fake channel adapters — record messages in memory for test assertions.

They stand in for SMTP, SMS gateways, FCM/APNs, the in-app inbox and the
WhatsApp Business API. Workers call them concurrently, so recording is
guarded by a lock.
"""

import threading
from uuid import uuid4

from notifier.channel.ports import EmailPort, InAppPort, PushPort, SMSPort, WhatsAppPort
from notifier.exceptions import TransportError


class RecordingAdapter:
    prefix = "msg"
    channel = "Unknown"
    default_failure = "Delivery failed"

    def __init__(self):
        self.sent: list[dict] = []
        self._lock = threading.Lock()
        self.should_succeed = True
        self.failure_reason = self.default_failure
        self.raise_error = False

    def configure(self, should_succeed: bool = True, failure_reason: str | None = None, raise_error: bool = False):
        """Make the adapter fail, either with a failed status or by raising TransportError."""
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason or self.default_failure
        self.raise_error = raise_error

    def _deliver(self, **record) -> dict:
        if self.raise_error:
            raise TransportError(self.channel, self.failure_reason)
        if not self.should_succeed:
            return {"message_id": None, "status": "failed", "error": self.failure_reason}

        message_id = f"{self.prefix}-{uuid4().hex[:12]}"
        with self._lock:
            self.sent.append({"message_id": message_id, **record})
        return {"message_id": message_id, "status": "sent"}

    def reset(self):
        with self._lock:
            self.sent.clear()
        self.should_succeed = True
        self.failure_reason = self.default_failure
        self.raise_error = False


class FakeEmailAdapter(RecordingAdapter, EmailPort):
    prefix = "email"
    channel = "Email"
    default_failure = "Email delivery failed"

    def send(self, to, subject, body, html_body=None) -> dict:
        return self._deliver(to=to, subject=subject, body=body, html_body=html_body)


class FakeSMSAdapter(RecordingAdapter, SMSPort):
    prefix = "sms"
    channel = "SMS"
    default_failure = "SMS delivery failed"

    def send(self, to, body) -> dict:
        return self._deliver(to=to, body=body)


class FakePushAdapter(RecordingAdapter, PushPort):
    prefix = "push"
    channel = "Push"
    default_failure = "Push delivery failed"

    def send(self, device_tokens, title, body, data=None) -> dict:
        return self._deliver(device_tokens=list(device_tokens), title=title, body=body, data=data)


class FakeInAppAdapter(RecordingAdapter, InAppPort):
    prefix = "inapp"
    channel = "InApp"
    default_failure = "In-app delivery failed"

    def send(self, user_id, title, body, data=None) -> dict:
        return self._deliver(user_id=user_id, title=title, body=body, data=data)


class FakeWhatsAppAdapter(RecordingAdapter, WhatsAppPort):
    prefix = "wa"
    channel = "WhatsApp"
    default_failure = "WhatsApp delivery failed"

    def send(self, to, body) -> dict:
        return self._deliver(to=to, body=body)
